"""Step trace of a single table operation."""

import logging
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger("hashviz.table")


class OperationLog:
    """
    Ordered, human-readable trace of the latest insert/search/delete.

    Lines are also forwarded to the ``hashviz.table`` logger (steps at
    DEBUG, warnings at WARNING). The log has no effect on table state.
    """

    def __init__(self, operation: str = "", key: Optional[int] = None):
        self.operation = operation
        self.key = key
        self._lines: List[str] = []
        self._warnings: List[str] = []
        self._outcome: Optional[str] = None

    def step(self, message: str) -> None:
        """Record a probe or decision."""
        self._lines.append(message)
        logger.debug(message)

    def warn(self, message: str) -> None:
        """Record a warning, e.g. a custom hash fallback."""
        line = f"Warning: {message}"
        self._lines.append(line)
        self._warnings.append(message)
        logger.warning(message)

    def outcome(self, message: str) -> None:
        """Record the final outcome line. Only one outcome per operation."""
        if self._outcome is not None:
            raise RuntimeError("operation log already has an outcome")
        self._outcome = message
        self._lines.append(message)
        logger.debug(message)

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    @property
    def warnings(self) -> Tuple[str, ...]:
        return tuple(self._warnings)

    @property
    def outcome_line(self) -> Optional[str]:
        return self._outcome

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"OperationLog({self.operation!r}, key={self.key}, lines={len(self._lines)})"
