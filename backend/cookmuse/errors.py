"""Error taxonomy shared by search clients and the discovery engine."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for failures reported by a search client.

    ``transient`` errors only advance the fallback cascade; non-transient
    ones are reported to the user when nothing else was found.
    """

    transient: bool = False

    def __init__(self, message: str = "", *, status_code: int | None = None):
        super().__init__(message or self.__class__.__doc__ or "")
        self.status_code = status_code


class InvalidConfigurationError(SearchError):
    """Missing or rejected provider credential."""


class InvalidQueryError(SearchError):
    """The provider rejected the request as malformed."""


class NetworkError(SearchError):
    """Network failure while talking to the provider."""

    transient = True


class RateLimitedError(SearchError):
    """Provider quota or rate limit exhausted."""

    transient = True


class NotFoundError(SearchError):
    """Requested videos were not found."""

    transient = True


class DiscoveryError(Exception):
    """Raised when no task found anything and at least one failed hard."""

    def __init__(self, message: str, failures: list | None = None):
        super().__init__(message)
        self.failures = failures or []
