"""Concrete problems: grid path search and the Romania road map."""
