"""One module per uninformed strategy; each returns a SearchResult."""
from .bfs import breadth_first_search
from .dfs import depth_first_search
from .ucs import uniform_cost_search
from .depth_limited import depth_limited_search
from .ids import iterative_deepening_search

__all__ = [
    "breadth_first_search",
    "depth_first_search",
    "uniform_cost_search",
    "depth_limited_search",
    "iterative_deepening_search",
]
