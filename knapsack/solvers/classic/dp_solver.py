# knapsack/solvers/classic/dp_solver.py
import time
import logging
from abc import abstractmethod
from typing import Dict, Any, List

from knapsack.solvers.interface import SolverInterface
from knapsack.solvers.classic import algorithms as alg
from knapsack.solvers.classic.items import BoundedItem
from knapsack.utils.generator import load_instance_from_file

logger = logging.getLogger(__name__)


class _DPSolverBase(SolverInterface):
    """
    Loads an instance file, times one call to a DP solver and reports its value.
    Subclasses set `model` and implement `_run`.
    """
    model = None

    @abstractmethod
    def _run(self, items: List[BoundedItem], capacity: int):
        """Returns the optimal value of the loaded instance."""
        raise NotImplementedError

    def solve(self, instance_path: str) -> Dict[str, Any]:
        items, capacity = load_instance_from_file(instance_path)
        start_time = time.perf_counter()

        value = self._run(items, capacity)

        end_time = time.perf_counter()
        logger.debug(f"{self.name}: value {value} in {end_time - start_time:.6f}s")

        return {
            "value": value,
            "time": end_time - start_time,
        }


class DPSolver2D(_DPSolverBase):
    """
    A solver for the 0-1 Knapsack Problem using a 2D Dynamic Programming table.
    The count column of the instance is ignored.
    """
    model = "0-1"

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "0-1 DP (2D)"

    def _run(self, items, capacity):
        return alg.solve_01(items, capacity, strategy="table")


class DPSolver1D(_DPSolverBase):
    """
    A solver for the 0-1 Knapsack Problem using a space-optimized 1D DP array.
    """
    model = "0-1"

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "0-1 DP (1D)"

    def _run(self, items, capacity):
        return alg.solve_01(items, capacity, strategy="rolling")


class UnboundedSolver2D(_DPSolverBase):
    """
    A solver for the Unbounded Knapsack Problem using a 2D DP table.
    Every item may be taken any number of times; the count column is ignored.
    """
    model = "unbounded"

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Unbounded DP (2D)"

    def _run(self, items, capacity):
        return alg.solve_unbounded(items, capacity, strategy="table")


class UnboundedSolver1D(_DPSolverBase):
    model = "unbounded"

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Unbounded DP (1D)"

    def _run(self, items, capacity):
        return alg.solve_unbounded(items, capacity, strategy="rolling")


class MultipleNaiveSolver(_DPSolverBase):
    """
    A solver for the Multiple (bounded) Knapsack Problem that enumerates
    every repetition count. Slow for large counts; used as the reference.
    """
    model = "multiple"

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Multiple DP (Naive)"

    def _run(self, items, capacity):
        return alg.solve_multiple_naive(items, capacity)


class MultipleBinarySolver(_DPSolverBase):
    """
    A solver for the Multiple Knapsack Problem using binary splitting.
    config['strategy'] selects the 0-1 strategy it delegates to ("rolling" by default).
    """
    model = "multiple"

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Multiple DP (Binary Split)"
        self.strategy = self.config.get("strategy", "rolling")

    def _run(self, items, capacity):
        return alg.solve_multiple_optimized(items, capacity, strategy=self.strategy)
