"""
Domain entities for the error pages bounded context.

All entities are request-scoped value objects: built at the start of
request handling and discarded at the end. No framework imports, no IO.
"""

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_FORMAT = "text/html"
DEFAULT_EXTENSION = ".html"
DEFAULT_STATUS_CODE = 404
OVERRIDE_STATUS_CODE = 200


@dataclass(frozen=True)
class IncomingSignal:
    """Routing metadata the proxy attached to a failed request.

    Attributes:
        format: Requested MIME type, used verbatim as the response Content-Type.
        extension: File extension derived from the format, always dot-prefixed.
        status_code: Upstream status code the error page is chosen for.
        original_uri: URI of the request that failed upstream.
        service_name: Service matched by the ingress rule.
    """

    format: str = DEFAULT_FORMAT
    extension: str = DEFAULT_EXTENSION
    status_code: int = DEFAULT_STATUS_CODE
    original_uri: str = ""
    service_name: str = ""
    namespace: str = ""
    ingress_name: str = ""
    service_port: str = ""
    request_id: str = ""

    def default_filename(self) -> str:
        """Return the exact-status file name, e.g. ``404.html``."""
        return f"{self.status_code}{self.extension}"


@dataclass(frozen=True)
class OverrideRoute:
    """A maintenance route for the refresh service.

    Attributes:
        match_key: Substring of the original URI that selects this route.
        filename: Fixed override file served when the URI matches.
        env_var: Environment variable whose non-empty value is served
            literally instead of any file.
    """

    match_key: str
    filename: str
    env_var: str


@dataclass(frozen=True)
class ResolvedResponse:
    """The final decision on what to send back.

    Exactly one of ``filename`` and ``content`` is set. When the file at
    ``filename`` cannot be opened, the class-level file is tried and the
    response carries ``fallback_status_code`` instead of ``status_code``.
    """

    status_code: int
    fallback_status_code: int
    extension: str
    filename: Optional[str] = None
    content: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_literal(self) -> bool:
        return self.content is not None

    def fallback_filename(self) -> str:
        return f"{str(self.fallback_status_code)[0]}xx{self.extension}"


def format_protocol_version(http_version: str) -> str:
    """Format an HTTP version as ``major.minor`` (``"2"`` becomes ``"2.0"``)."""
    major, _, minor = http_version.partition(".")
    return f"{major or '1'}.{minor or '0'}"


@dataclass(frozen=True)
class MetricSample:
    """One observation recorded after a body has been emitted."""

    protocol: str
    duration_seconds: float

    @classmethod
    def from_timings(
        cls, http_version: str, started_at: float, finished_at: float
    ) -> "MetricSample":
        return cls(
            protocol=format_protocol_version(http_version),
            duration_seconds=max(finished_at - started_at, 0.0),
        )
