from __future__ import annotations

class EmptyReductionError(TypeError):
    """reduce without an initial value on an exhausted Seq."""

    def __init__(self) -> None:
        super().__init__("Reduce of empty Seq with no initial value")

class NotFoundError(LookupError):
    """try_find drained the Seq without a matching element."""

    examined: int

    def __init__(self, examined: int) -> None:
        self.examined = examined
        super().__init__(f"No matching element among {examined} examined")

__all__ = ("EmptyReductionError", "NotFoundError")
