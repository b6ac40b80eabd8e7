"""
Use case: Select and open the error page for a failed upstream request.

Input: ServeErrorPageQuery (proxy headers, request origin)
Output: ErrorPageResult
Side effects: Opens files from the error page store.
Failure cases: ErrorPageNotFoundError when neither the exact nor the
class-level page can be opened.
"""

import logging
from typing import Iterator

from errorpages.application.pages.dtos import ErrorPageResult, ServeErrorPageQuery
from errorpages.domain.pages.classifier import (
    CONTENT_TYPE_HEADER,
    classify,
    debug_headers,
)
from errorpages.domain.pages.entities import ResolvedResponse
from errorpages.domain.pages.errors import (
    ErrorPageNotFoundError,
    ErrorPageUnavailableError,
)
from errorpages.domain.pages.override import OverrideResolver
from errorpages.domain.pages.ports import ErrorPageStore

logger = logging.getLogger(__name__)


def _literal_body(content: str) -> Iterator[bytes]:
    yield content.encode("utf-8")


class ServeErrorPageUseCase:
    """Orchestrates classification, maintenance overrides and file lookup.

    The page store and the override resolver are injected so the
    use case never touches the filesystem or the process environment
    directly.
    """

    def __init__(
        self,
        page_store: ErrorPageStore,
        override_resolver: OverrideResolver,
        debug: bool = False,
    ) -> None:
        self._page_store = page_store
        self._override_resolver = override_resolver
        self._debug = debug

    def resolve(self, query: ServeErrorPageQuery) -> ResolvedResponse:
        """Decide what to send without opening any file."""
        signal = classify(query.headers)

        headers: dict[str, str] = {}
        if self._debug:
            headers.update(debug_headers(query.headers))
        headers[CONTENT_TYPE_HEADER] = signal.format

        default = ResolvedResponse(
            status_code=signal.status_code,
            fallback_status_code=signal.status_code,
            extension=signal.extension,
            filename=signal.default_filename(),
            headers=headers,
        )
        return self._override_resolver.resolve(signal, default, origin=query.origin)

    def execute(self, query: ServeErrorPageQuery) -> ErrorPageResult:
        """Run the error page selection use case.

        Args:
            query: The proxy headers and request origin.

        Returns:
            The status, headers and body to stream.

        Raises:
            ErrorPageNotFoundError: If no page file could be opened.
        """
        resolved = self.resolve(query)

        if resolved.is_literal:
            return ErrorPageResult(
                status_code=resolved.status_code,
                headers=resolved.headers,
                body=_literal_body(resolved.content or ""),
                source="environment",
            )

        filename = resolved.filename or ""
        status_code = resolved.status_code
        try:
            page = self._page_store.open(filename)
        except ErrorPageUnavailableError as exc:
            logger.warning("unexpected error opening file: %s", exc.reason)
            filename = resolved.fallback_filename()
            status_code = resolved.fallback_status_code
            try:
                page = self._page_store.open(filename)
            except ErrorPageUnavailableError as fallback_exc:
                logger.warning("unexpected error opening file: %s", fallback_exc.reason)
                raise ErrorPageNotFoundError(
                    resolved.filename or "", filename
                ) from fallback_exc

        logger.info(
            "serving custom error response for code %d and format %s from file %s",
            resolved.fallback_status_code,
            resolved.headers.get(CONTENT_TYPE_HEADER, ""),
            self._page_store.describe(filename),
        )
        return ErrorPageResult(
            status_code=status_code,
            headers=resolved.headers,
            body=page.chunks(),
            source=filename,
            page=page,
        )
