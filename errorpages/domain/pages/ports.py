"""
Port interfaces (ABCs) for the error pages bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from errorpages.domain.pages.entities import MetricSample


class EnvironmentLookup(ABC):
    """Port for reading live configuration values by name."""

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """Return the current value of ``name``, or None if unset."""
        raise NotImplementedError


class ErrorPage(ABC):
    """An opened error page whose bytes can be streamed exactly once."""

    @abstractmethod
    def chunks(self) -> Iterator[bytes]:
        """Yield the page contents and release the underlying handle."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Release the underlying handle. Safe to call more than once."""
        raise NotImplementedError


class ErrorPageStore(ABC):
    """Port for opening error page files by name."""

    @abstractmethod
    def open(self, filename: str) -> ErrorPage:
        """Open ``filename`` relative to the store root.

        Raises:
            ErrorPageUnavailableError: If the file cannot be opened.
        """
        raise NotImplementedError

    @abstractmethod
    def describe(self, filename: str) -> str:
        """Return a human readable location for ``filename`` (for logs)."""
        raise NotImplementedError


class RequestMetricsPort(ABC):
    """Port for recording served-request instrumentation."""

    @abstractmethod
    def record(self, sample: MetricSample) -> None:
        """Increment the request count and observe the duration."""
        raise NotImplementedError
