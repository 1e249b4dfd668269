# uninformed_search/plots/plotting.py
# Bar plots comparing SearchResults: nodes expanded, path cost, time taken and peak memory, in a 2x2 grid.
# Runs that did not reach a goal have an infinite cost; they are drawn at 0 and labelled with their outcome.
from __future__ import annotations
import math
import matplotlib.pyplot as plt

def bar_compare(results, title="Search Comparison"):
    names = [r.algo if r.success else f"{r.algo}\n({r.outcome.value})" for r in results]
    nodes = [r.nodes_expanded for r in results]
    costs = [r.cost if math.isfinite(r.cost) else 0 for r in results]
    times = [r.time_s for r in results]
    mems  = [r.peak_kb or 0 for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
