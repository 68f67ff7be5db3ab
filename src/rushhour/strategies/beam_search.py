"""
Beam Search Strategy - Layered best-first search with a bounded frontier.

Expands the board graph one depth layer at a time, keeping only the
beam_width most promising successors of each layer. Memory stays bounded
by the beam width, at the price of completeness: a solvable board can
come back unsolved when every path to the exit falls out of the beam.
"""

import itertools
import logging
import time
from typing import Dict, List, Set, Tuple

from ..base import SolverStrategy
from ..context import SolutionContext
from ..heuristics import Estimate
from ..node import SearchNode
from ..solution import SearchResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)


DEFAULT_BEAM_WIDTH = 50


@register_strategy
class BeamSearchStrategy(SolverStrategy):
    """
    Bounded beam search ordered by heuristic estimate.

    Algorithm:
        1. Start with the initial board as the only layer
        2. For each depth level:
           - Goal-test every board in the layer
           - Expand all boards, skipping states seen in earlier layers
           - Keep only the beam_width successors with lowest h
        3. Stop when a solved board is found or the layer is empty

    Parameters:
        beam_width: Successors kept per layer (default 50)
    """
    name = "beam"
    description = "Beam Search (bounded) - Keeps best successors per layer"
    uses_heuristic = True

    def __init__(self, heuristic=None, compound_moves: bool = False,
                 beam_width: int = DEFAULT_BEAM_WIDTH):
        """
        Initialize beam search strategy.

        Args:
            heuristic: Heuristic used to rank successors (default Manhattan)
            compound_moves: Generate maximal multi-cell slides
            beam_width: Successors kept per layer, must be at least 1
        """
        super().__init__(heuristic=heuristic, compound_moves=compound_moves)
        if beam_width < 1:
            raise ValueError(f"beam_width must be at least 1, got {beam_width}")
        self.beam_width = beam_width

    def solve(self, context: SolutionContext) -> SearchResult:
        start_time = time.perf_counter()
        counter = itertools.count()

        layer: List[SearchNode] = [SearchNode(board=context.board, h=self.evaluate(context.board))]
        visited: Set[str] = set()
        states_examined = 0
        nodes_generated = 0
        depth = 0

        while layer:
            depth += 1
            candidates: Dict[str, Tuple[Estimate, int, SearchNode]] = {}
            layer_keys = {node.key for node in layer}

            for node in layer:
                if self._check_cancelled(context, states_examined):
                    return self._build_result(
                        None, states_examined, nodes_generated, start_time,
                        was_cancelled=True, iterations=depth
                    )

                if node.key in visited:
                    continue
                visited.add(node.key)
                states_examined += 1
                self._report_progress(context, states_examined)

                if node.board.is_solved():
                    return self._build_result(
                        node, states_examined, nodes_generated, start_time, iterations=depth
                    )

                for move, board in self.expand(node.board):
                    key = board.state_key()
                    if key in visited or key in layer_keys or key in candidates:
                        continue
                    child = node.child(move, board, self.evaluate(board))
                    nodes_generated += 1
                    candidates[key] = (child.h, next(counter), child)

            ranked = sorted(candidates.values(), key=lambda entry: (entry[0], entry[1]))
            layer = [entry[2] for entry in ranked[:self.beam_width]]
            logger.debug(
                f"[beam] Depth {depth}: {len(candidates)} candidates, "
                f"kept {len(layer)}"
            )

        return self._build_result(
            None, states_examined, nodes_generated, start_time, iterations=depth
        )
