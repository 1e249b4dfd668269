"""Problem contract, Node, frontiers and result types."""
