# knapsack/exceptions.py

class InvalidArgumentError(ValueError):
    """Raised when solver input (items, capacity or strategy) is malformed."""


class InstanceFormatError(ValueError):
    """Raised when an instance file cannot be parsed."""
