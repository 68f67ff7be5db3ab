"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .ucs import UniformCostStrategy
from .dijkstra import DijkstraStrategy
from .greedy import GreedyBestFirstStrategy
from .astar import AStarStrategy
from .beam_search import BeamSearchStrategy
from .ida_star import IDAStarStrategy

__all__ = [
    "UniformCostStrategy",
    "DijkstraStrategy",
    "GreedyBestFirstStrategy",
    "AStarStrategy",
    "BeamSearchStrategy",
    "IDAStarStrategy",
]
