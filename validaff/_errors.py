from __future__ import annotations

class NotCompletedError(Exception):
    """Aff was run synchronously but its callback has not fired yet."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: callback did not fire before the invocation returned")

__all__ = ("NotCompletedError",)
