"""Generation engine: neighbor counting, rule evaluation and parallel advance."""

import logging
import threading
import time
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from enum import Enum
from typing import List, Optional

import numpy as np

from .errors import ConcurrencyFailure, EngineStateError, ValidationError
from .grid import Grid, RandomSource, as_cell_array, check_dimensions, count_neighbors
from .render import render_grid
from .rules import next_generation, transition

logger = logging.getLogger(__name__)

STRATEGIES = ("rows", "cells", "sequential", "vectorized")


class EngineState(Enum):
    """Lifecycle states of a GridEngine."""

    IDLE = "idle"
    ADVANCING = "advancing"
    FAILED = "failed"


class GridEngine:
    """Conway's Game of Life simulation engine.

    Holds exactly two cell arrays: the current generation, which is only read
    while an advance is in progress, and the next generation, which workers
    write at disjoint positions. Once every worker has finished the two are
    swapped and the new next array is cleared.

    Evaluation strategies:
    - rows: one job per row on a bounded thread pool (default)
    - cells: one job per cell on the same pool
    - sequential: nested loops on the calling thread
    - vectorized: a single convolution pass over the whole grid

    All strategies produce identical generations. The engine is not safe for
    concurrent use by several callers; advance() and the read operations
    must be serialized by the caller.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        seed=None,
        *,
        rng: RandomSource = None,
        strategy: str = "rows",
        workers: Optional[int] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            rows: Number of rows
            cols: Number of columns
            seed: Initial cells (Grid, numpy array or nested list of 0/1);
                randomized with probability 0.5 per cell when omitted
            rng: numpy Generator or integer seed used for randomization
            strategy: One of STRATEGIES
            workers: Maximum worker threads for the parallel strategies

        Raises:
            ValidationError: On bad dimensions, seed, strategy or worker count
        """
        check_dimensions(rows, cols)
        if strategy not in STRATEGIES:
            raise ValidationError(f"Unknown strategy {strategy!r}, expected one of {', '.join(STRATEGIES)}")
        if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers < 1):
            raise ValidationError(f"workers must be a positive integer, got {workers!r}")

        self.rows = int(rows)
        self.cols = int(cols)
        self.strategy = strategy
        self.workers = workers

        if seed is None:
            self._current = Grid.random(self.rows, self.cols, rng).cells
        else:
            self._current = as_cell_array(seed, self.rows, self.cols)
        self._next = np.zeros_like(self._current)

        self._state = EngineState.IDLE
        self._generation = 0
        self._executor: Optional[ThreadPoolExecutor] = None
        self._closed = False
        self._advance_lock = threading.Lock()

        logger.info(
            "Created %dx%d engine (strategy=%s, seeded=%s, population=%d)",
            self.rows,
            self.cols,
            self.strategy,
            seed is not None,
            int(np.count_nonzero(self._current)),
        )

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def generation(self) -> int:
        """Number of completed advances."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        self._check_readable()
        return int(np.count_nonzero(self._current))

    @property
    def grid(self) -> Grid:
        """A Grid copy of the current generation."""
        self._check_readable()
        return Grid.from_rows(self._current)

    def snapshot(self) -> np.ndarray:
        """Return a read-only copy of the current generation."""
        self._check_readable()
        view = self._current.copy()
        view.setflags(write=False)
        return view

    def render(self) -> str:
        """Render the current generation, one bracketed row per line."""
        self._check_readable()
        return render_grid(self._current)

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of (row, col) in the current generation.

        Returns:
            Number of living in-bounds Moore neighbors (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return count_neighbors(self._current, row, col)

    def evaluate_cell(self, row: int, col: int, neighbors: int) -> None:
        """Apply the transition rule to (row, col) and write it to the next generation.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        self._next[row, col] = transition(int(self._current[row, col]), neighbors)

    def advance(self, timeout: Optional[float] = None) -> None:
        """Compute the next generation and make it current.

        Blocks until every cell has been evaluated. A worker failure or an
        expired timeout aborts the advance before the swap and leaves the
        engine FAILED.

        Args:
            timeout: Seconds to wait for the workers (parallel strategies only)

        Raises:
            ConcurrencyFailure: If a worker failed or the timeout expired
            EngineStateError: If an advance is already running or the engine is closed
        """
        if not self._advance_lock.acquire(blocking=False):
            raise EngineStateError("An advance is already in progress")
        try:
            self._check_readable()
            if self._closed:
                raise EngineStateError("Engine is closed")

            self._state = EngineState.ADVANCING
            start_time = time.perf_counter()
            try:
                self._compute_next(timeout)
            except ConcurrencyFailure:
                self._fail()
                raise
            except Exception as e:
                self._fail()
                raise ConcurrencyFailure(f"Advance to generation {self._generation + 1} failed: {e}") from e
            except BaseException:
                self._fail()
                raise

            self._current, self._next = self._next, self._current
            self._next.fill(0)
            self._generation += 1
            self._state = EngineState.IDLE

            logger.debug(
                "Generation %d computed in %.2f ms",
                self._generation,
                (time.perf_counter() - start_time) * 1000,
            )
        finally:
            self._advance_lock.release()

    def close(self) -> None:
        """Release the worker pool. The engine can still be read afterwards."""
        self._closed = True
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "GridEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"GridEngine(rows={self.rows}, cols={self.cols}, strategy={self.strategy!r}, "
            f"generation={self._generation}, state={self._state.value})"
        )

    def _check_readable(self) -> None:
        if self._state is EngineState.FAILED:
            raise ConcurrencyFailure("Engine failed during an earlier advance and cannot be reused")
        if self._state is EngineState.ADVANCING:
            raise EngineStateError("Engine is advancing; wait for advance() to return")

    def _fail(self) -> None:
        self._state = EngineState.FAILED
        logger.error("Advance to generation %d aborted; engine is no longer usable", self._generation + 1)
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def _compute_next(self, timeout: Optional[float]) -> None:
        if self.strategy == "vectorized":
            self._next[:] = next_generation(self._current)
        elif self.strategy == "sequential":
            for row in range(self.rows):
                self._evaluate_row(row)
        else:
            self._run_parallel(timeout)

    def _evaluate_row(self, row: int) -> None:
        for col in range(self.cols):
            self.evaluate_cell(row, col, self.count_neighbors(row, col))

    def _evaluate_one(self, row: int, col: int) -> None:
        self.evaluate_cell(row, col, self.count_neighbors(row, col))

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="lifegrid-worker")
        return self._executor

    def _submit_jobs(self, executor: ThreadPoolExecutor) -> List[Future]:
        if self.strategy == "rows":
            return [executor.submit(self._evaluate_row, row) for row in range(self.rows)]
        return [
            executor.submit(self._evaluate_one, row, col)
            for row in range(self.rows)
            for col in range(self.cols)
        ]

    def _run_parallel(self, timeout: Optional[float]) -> None:
        futures = self._submit_jobs(self._get_executor())

        # Join barrier: every write to the next generation happens before this returns
        done, pending = wait(futures, timeout=timeout, return_when=FIRST_EXCEPTION)

        for future in pending:
            future.cancel()

        for future in done:
            error = future.exception()
            if error is not None:
                raise ConcurrencyFailure(
                    f"Worker failed during advance to generation {self._generation + 1}: {error}"
                ) from error

        if pending:
            raise ConcurrencyFailure(
                f"Advance timed out after {timeout}s with {len(pending)} of {len(futures)} jobs unfinished"
            )
