"""Human-readable sequential identifiers."""

from __future__ import annotations


class IdentifierGenerator:
    """Issues ``<prefix><zero-padded counter>`` IDs for one entity kind.

    Counters past ``width`` digits are formatted wider rather than wrapped.
    """

    def __init__(self, prefix: str, width: int = 6, start: int = 0) -> None:
        self.prefix = prefix
        self.width = width
        self._counter = start

    @property
    def current(self) -> int:
        """Last issued counter value (0 before the first ID)."""
        return self._counter

    def next(self) -> str:
        self._counter += 1
        return f"{self.prefix}{self._counter:0{self.width}d}"

    def __repr__(self) -> str:
        return (
            f"IdentifierGenerator(prefix={self.prefix!r}, "
            f"width={self.width}, current={self._counter})"
        )
