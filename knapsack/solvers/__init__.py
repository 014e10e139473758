from knapsack.solvers.interface import SolverInterface
