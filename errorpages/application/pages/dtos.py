"""
Data Transfer Objects for the error pages application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior beyond small helpers.
"""

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional

from errorpages.domain.pages.ports import ErrorPage


@dataclass(frozen=True)
class ServeErrorPageQuery:
    """Input DTO for selecting an error page.

    Attributes:
        headers: The request headers set by the ingress proxy.
        origin: The request's Origin header, mirrored on override routes.
    """

    headers: Mapping[str, str]
    origin: str = ""


@dataclass(frozen=True)
class ErrorPageResult:
    """Output DTO describing the response to stream.

    Attributes:
        status_code: HTTP status to send.
        headers: Response headers, Content-Type included.
        body: Iterator over the body bytes.
        source: File name or environment variable the body comes from.
        page: The opened page, if the body is read from a file.
    """

    status_code: int
    headers: dict[str, str]
    body: Iterator[bytes]
    source: str
    page: Optional[ErrorPage] = field(default=None, repr=False)

    def release(self) -> None:
        """Close the underlying page, if any."""
        if self.page is not None:
            self.page.close()


@dataclass(frozen=True)
class RecordServedRequestCommand:
    """Input DTO for recording a request whose body has been emitted.

    Attributes:
        http_version: The client's HTTP version as reported by the server
            (``"1.1"``, ``"2"``).
        started_at: ``time.perf_counter()`` value at request start.
        finished_at: ``time.perf_counter()`` value once the body was sent.
    """

    http_version: str
    started_at: float
    finished_at: float
