# uninformed_search/settings.py
# Tunables, overridable via environment variables.
from __future__ import annotations

import os

# Iterative deepening stops with FAILURE once this bound has been tried.
IDS_MAX_DEPTH = int(os.getenv("IDS_MAX_DEPTH", "1024"))

# Depth bound the benchmark runner hands to depth-limited search.
DLS_LIMIT = int(os.getenv("DLS_LIMIT", "12"))

# Default --log-level for the command line entry points.
LOG_LEVEL = os.getenv("SEARCH_LOG_LEVEL", "WARNING").upper()
