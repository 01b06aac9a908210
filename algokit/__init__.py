"""Classic array, string, heap, matrix and linked-list algorithms."""

__version__ = "0.1.0"

__all__ = ["arrays", "heaps", "linked", "linked_medium", "matrix", "schedule", "strings"]