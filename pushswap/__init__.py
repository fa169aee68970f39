"""Two-stack sorting that emits the sequence of push, swap and rotate operations."""

__version__ = "1.0.0"
__all__ = ["cli", "helpers", "parsing", "sorter", "stacks"]