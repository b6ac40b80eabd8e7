"""
Request Classifier.

Turns the metadata headers attached by the ingress proxy into an
IncomingSignal. Every malformed or missing value is replaced by a
documented default and logged; classification never fails.
"""

import logging
import mimetypes
import re
from typing import Mapping

from errorpages.domain.pages.entities import (
    DEFAULT_EXTENSION,
    DEFAULT_FORMAT,
    DEFAULT_STATUS_CODE,
    IncomingSignal,
)
from errorpages.domain.pages.errors import InvalidMediaTypeError

logger = logging.getLogger(__name__)

FORMAT_HEADER = "X-Format"
CODE_HEADER = "X-Code"
CONTENT_TYPE_HEADER = "Content-Type"
ORIGINAL_URI_HEADER = "X-Original-URI"
NAMESPACE_HEADER = "X-Namespace"
INGRESS_NAME_HEADER = "X-Ingress-Name"
SERVICE_NAME_HEADER = "X-Service-Name"
SERVICE_PORT_HEADER = "X-Service-Port"
REQUEST_ID_HEADER = "X-Request-ID"

# Echoed back verbatim in debug mode, in this order.
DEBUG_HEADERS = (
    FORMAT_HEADER,
    CODE_HEADER,
    CONTENT_TYPE_HEADER,
    ORIGINAL_URI_HEADER,
    NAMESPACE_HEADER,
    INGRESS_NAME_HEADER,
    SERVICE_NAME_HEADER,
    SERVICE_PORT_HEADER,
    REQUEST_ID_HEADER,
)

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 999

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MEDIA_TYPE_PATTERN = re.compile(rf"^({_TOKEN})/({_TOKEN})$")
_STATUS_CODE_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# Built-in table only, so the result does not depend on the host's mime.types.
_MIME_TYPES = mimetypes.MimeTypes()


def first_values(headers: Mapping[str, str]) -> dict[str, str]:
    """Return headers keyed by lowercased name, keeping the first of duplicates."""
    normalized: dict[str, str] = {}
    for name, value in headers.items():
        normalized.setdefault(name.lower(), value)
    return normalized


def normalize_extension(extension: str) -> str:
    """Prefix ``extension`` with a dot unless it already has one."""
    if extension.startswith("."):
        return extension
    return "." + extension


def parse_media_type(value: str) -> str:
    """Return the lowercased ``type/subtype`` of a Content-Type style value.

    Parameters such as ``; charset=utf-8`` are ignored.

    Raises:
        InvalidMediaTypeError: If ``value`` is not ``type/subtype``.
    """
    media_type = value.split(";", 1)[0].strip().lower()
    if not _MEDIA_TYPE_PATTERN.match(media_type):
        raise InvalidMediaTypeError(value)
    return media_type


def extensions_for_format(value: str) -> list[str]:
    """Return the file extensions registered for a media type, best first.

    Raises:
        InvalidMediaTypeError: If ``value`` is not a parseable media type.
    """
    return _MIME_TYPES.guess_all_extensions(parse_media_type(value))


def parse_status_code(value: str) -> int:
    """Parse an ``X-Code`` value as a decimal HTTP status code.

    Raises:
        ValueError: If ``value`` is not an integer in the 100-999 range.
    """
    if not _STATUS_CODE_PATTERN.match(value):
        raise ValueError(f"invalid status code {value!r}")
    code = int(value)
    if not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE:
        raise ValueError(f"status code {code} out of range")
    return code


def _resolve_format(headers: Mapping[str, str]) -> tuple[str, str]:
    extension = DEFAULT_EXTENSION
    fmt = headers.get(FORMAT_HEADER.lower(), "")
    if not fmt:
        fmt = DEFAULT_FORMAT
        logger.info("format not specified. Using %s", fmt)

    try:
        extensions = extensions_for_format(fmt)
    except InvalidMediaTypeError as exc:
        logger.warning(
            "unexpected error reading media type extension: %s. Using %s",
            exc.message,
            extension,
        )
        return DEFAULT_FORMAT, extension

    if not extensions:
        logger.info("couldn't get media type extension. Using %s", extension)
    else:
        extension = extensions[0]
    return fmt, normalize_extension(extension)


def _resolve_status_code(headers: Mapping[str, str]) -> int:
    raw = headers.get(CODE_HEADER.lower(), "")
    try:
        return parse_status_code(raw)
    except ValueError as exc:
        logger.info(
            "unexpected error reading return code: %s. Using %d",
            exc,
            DEFAULT_STATUS_CODE,
        )
        return DEFAULT_STATUS_CODE


def classify(headers: Mapping[str, str]) -> IncomingSignal:
    """Build the IncomingSignal for a request from its headers.

    Args:
        headers: Request headers. Lookups are case-insensitive.

    Returns:
        The classified signal with defaults substituted for bad values.
    """
    normalized = first_values(headers)
    fmt, extension = _resolve_format(normalized)

    return IncomingSignal(
        format=fmt,
        extension=extension,
        status_code=_resolve_status_code(normalized),
        original_uri=normalized.get(ORIGINAL_URI_HEADER.lower(), ""),
        service_name=normalized.get(SERVICE_NAME_HEADER.lower(), ""),
        namespace=normalized.get(NAMESPACE_HEADER.lower(), ""),
        ingress_name=normalized.get(INGRESS_NAME_HEADER.lower(), ""),
        service_port=normalized.get(SERVICE_PORT_HEADER.lower(), ""),
        request_id=normalized.get(REQUEST_ID_HEADER.lower(), ""),
    )


def debug_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return the proxy metadata headers to echo back in debug mode."""
    normalized = first_values(headers)
    return {name: normalized.get(name.lower(), "") for name in DEBUG_HEADERS}
