"""Sort integers with two stacks and a restricted set of moves."""

__version__ = "0.1.0"
__all__ = ["stacks", "parsing", "sorting", "cli"]