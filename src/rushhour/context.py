"""
Solution Context Module - Per-call settings and cancellation for a search.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the initial board,
    cancellation, limits and progress reporting.

    The search itself never times out on its own; timeout_sec and
    max_states are opt-in caps checked between expansions.

    Attributes:
        board: Initial board to solve
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unbounded)
        max_states: Maximum states to examine (None = unbounded)
        start_time: When computation started
        progress_callback: Optional callback(states_examined, message)
    """
    board: Board
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_states: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[int, str], None]] = None

    def is_cancelled(self, states_examined: int = 0) -> bool:
        """
        Check if cancellation requested or a limit was exceeded.

        Args:
            states_examined: States examined so far by the caller

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            return True
        if self.max_states is not None and states_examined >= self.max_states:
            return True
        return False

    def cancel(self) -> None:
        """Request the running search to stop."""
        self.cancel_flag.set()

    def report_progress(self, states_examined: int, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            states_examined: States examined so far
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(states_examined, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time
