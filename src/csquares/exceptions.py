"""Exceptions raised by the csquares codec."""


class CSquaresError(ValueError):
    """Base error for invalid C-squares input."""


class ResolutionExhausted(CSquaresError):
    """Raised when a cell would be finer than the finest step of the ladder,
    or coarser than the 10 degree root."""


class InvalidIdentifier(CSquaresError):
    """Raised when a C-squares identifier cannot be parsed."""

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Invalid C-squares identifier {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason
