# knapsack/solvers/interface.py
from abc import ABC, abstractmethod
from typing import Dict, Any


class SolverInterface(ABC):
    """
    Common interface for every solver that can be run against an instance file.
    """
    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self.name = "Abstract Solver"

    @abstractmethod
    def solve(self, instance_path: str) -> Dict[str, Any]:
        """
        Solves the instance stored at `instance_path`.

        Returns:
            Dict[str, Any]: At least {"value": best value, "time": seconds spent solving}.
        """
        raise NotImplementedError
