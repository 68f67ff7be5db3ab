"""
Solver Worker Module for Rush Hour Solver

Provides a background QThread worker that runs one search off the caller's thread.
Communicates with the UI via Qt signals for thread-safe status updates.
"""

import logging
from typing import Any, Dict, Optional

from PyQt5.QtCore import QThread, pyqtSignal

from src.rushhour import Board, SolutionContext, create_strategy
from src.settings import DEFAULT_SETTINGS, strategy_options


# Configure module logger
logger = logging.getLogger(__name__)


class SolverWorker(QThread):
    """
    Background worker thread for a single solve.

    Builds the strategy named in the settings, runs it against the board
    and emits the SearchResult. The search checks the worker's cancel
    flag between expansions, so request_stop() ends it promptly.

    Signals:
        status_changed(str): Emitted when worker status changes
        progress(int, str): Emitted every few thousand examined states
        solution_ready(object): Emitted with the SearchResult
        error_occurred(str): Emitted when the solve raises

    Example:
        worker = SolverWorker(board, settings)
        worker.solution_ready.connect(ui.show_result)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    # Signals for UI updates (thread-safe)
    status_changed = pyqtSignal(str)
    progress = pyqtSignal(int, str)
    solution_ready = pyqtSignal(object)  # Emits SearchResult
    error_occurred = pyqtSignal(str)

    def __init__(self, board: Board, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the solver worker.

        Args:
            board: Board to solve
            settings: Solver settings (default: DEFAULT_SETTINGS)
        """
        super().__init__()
        self.board = board
        self.settings = dict(settings) if settings is not None else DEFAULT_SETTINGS.copy()
        self._context: Optional[SolutionContext] = None
        self._running = False

    def run(self):
        """
        Run the search. Called when thread starts.

        Emits status_changed before and after, then either
        solution_ready or error_occurred.
        """
        self._running = True
        # New cancel flag and start time for every run
        self._context = SolutionContext(
            board=self.board,
            timeout_sec=self.settings.get("timeout_sec"),
            max_states=self.settings.get("max_states"),
            progress_callback=self._on_progress,
        )
        name = self.settings.get("strategy_name", DEFAULT_SETTINGS["strategy_name"])

        logger.info(f"Solver worker started ({name})")
        self.status_changed.emit(f"Solving with {name}")

        try:
            strategy = create_strategy(name, **strategy_options(self.settings))
            result = strategy.solve(self._context)
        except Exception as e:
            logger.exception("Error during solve")
            self.error_occurred.emit(str(e))
            self.status_changed.emit("Error")
        else:
            if result.found:
                status = f"Solved in {result.solution.move_count} moves"
            elif result.was_cancelled:
                status = "Stopped"
            else:
                status = "No solution"
            self.status_changed.emit(status)
            self.solution_ready.emit(result)
        finally:
            self._running = False
            logger.info("Solver worker stopped")

    def _on_progress(self, states_examined: int, message: str) -> None:
        self.progress.emit(states_examined, message)

    def request_stop(self):
        """
        Request the worker to stop gracefully.

        The running search returns a cancelled result at its next check.
        A later run() starts with a fresh cancel flag.
        Use wait() after calling this to block until stopped.
        """
        logger.info("Stop requested")
        if self._context is not None:
            self._context.cancel()

    def is_running(self) -> bool:
        """
        Check if the worker is currently running.

        Returns:
            True if a search is in progress, False otherwise
        """
        return self._running
