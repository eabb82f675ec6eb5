"""Sort integers with two stacks and a restricted set of operations."""

__version__ = "0.1.0"
__all__ = ["parsing", "stacks", "sort", "cli"]