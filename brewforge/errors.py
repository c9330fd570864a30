"""Error taxonomy for formula synthesis and publication.

Every fatal condition raised by brewforge derives from ``BrewforgeError``.
``SkipError`` is the exception: it signals a non-fatal "nothing to do"
outcome and is collected by ``brewforge.core.skips.SkipMemento``.
"""

from __future__ import annotations


class BrewforgeError(RuntimeError):
    """Base class for all fatal brewforge errors."""


class ConfigError(BrewforgeError):
    """Raised when a project file or artifact manifest cannot be loaded."""


class TemplateError(BrewforgeError):
    """Raised when a placeholder expression cannot be resolved."""


class ArtifactExtraError(BrewforgeError):
    """Raised when an artifact extra is missing or has an unexpected type."""


class ChecksumError(BrewforgeError):
    """Raised when an artifact's digest cannot be computed."""


class NoArchivesFoundError(BrewforgeError):
    """Raised when no artifact survives the recipe's selection filters.

    Carries the variant selectors and ID allowlist that were in effect so
    the caller can diagnose the misconfiguration.
    """

    def __init__(self, goamd64: str, goarm: str, ids: list[str]) -> None:
        self.goamd64 = goamd64
        self.goarm = goarm
        self.ids = list(ids)
        super().__init__(
            "no linux/macos archives found matching "
            "goos=[darwin linux] goarch=[amd64 arm64 arm] "
            f"goamd64={goamd64} goarm={goarm} ids={self.ids}"
        )


class AmbiguousPlatformError(BrewforgeError):
    """Raised when more than one artifact targets the same OS/arch pair."""

    def __init__(self, platforms: list[str]) -> None:
        self.platforms = sorted(platforms)
        super().__init__(
            "one tap can handle only one archive of an OS/Arch combination. "
            f"Consider using ids in the brew section (duplicates: {', '.join(self.platforms)})"
        )


class PullRequestUnsupportedError(BrewforgeError):
    """Raised when a pull request is requested from a client that cannot open one."""

    def __init__(self) -> None:
        super().__init__("client does not support pull requests")


class ClientError(BrewforgeError):
    """Raised when a hosting or git transport operation fails."""


class RunCancelledError(BrewforgeError):
    """Raised at a cancellation checkpoint once cancellation was requested."""


class RecipeFailedError(BrewforgeError):
    """Wraps a fatal error with the name of the recipe that produced it."""

    def __init__(self, recipe: str, cause: Exception) -> None:
        self.recipe = recipe
        super().__init__(f"brew {recipe!r}: {cause}")


class SkipError(Exception):
    """Non-fatal signal that a recipe was deliberately not processed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
