"""Skip collection across independent recipes."""

from __future__ import annotations

import logging

from brewforge.errors import SkipError

logger = logging.getLogger(__name__)


class SkipMemento:
    """Remembers skip reasons so they can be reported once, at the end.

    Usage
    -----
    >>> skips = SkipMemento()
    >>> skips.remember(SkipError("brew.skip_upload is set"))
    >>> skips.evaluate()
    Traceback (most recent call last):
    ...
    brewforge.errors.SkipError: brew.skip_upload is set
    """

    def __init__(self) -> None:
        self._reasons: list[str] = []

    def remember(self, skip: SkipError) -> None:
        logger.warning("skipped: %s", skip.reason)
        if skip.reason not in self._reasons:
            self._reasons.append(skip.reason)

    @property
    def reasons(self) -> list[str]:
        return list(self._reasons)

    def evaluate(self) -> None:
        """Raise one combined ``SkipError`` if anything was skipped."""
        if self._reasons:
            raise SkipError(", ".join(self._reasons))
