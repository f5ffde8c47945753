"""Sort integers on two stacks with a limited set of moves and report the moves."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]