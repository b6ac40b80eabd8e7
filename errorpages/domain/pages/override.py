"""
Override Resolver for maintenance routes.

Requests routed to the refresh service can be answered with alternate
content: a fixed per-route file when the original URI matches the
route, or literal content supplied through the route's environment
variable. Environment values are read on every call, never cached.
"""

import dataclasses
import logging
from types import MappingProxyType
from typing import Mapping, Sequence

from errorpages.domain.pages.entities import (
    OVERRIDE_STATUS_CODE,
    IncomingSignal,
    OverrideRoute,
    ResolvedResponse,
)
from errorpages.domain.pages.ports import EnvironmentLookup

logger = logging.getLogger(__name__)

ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"

OVERRIDE_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Content-Type": "application/vnd.api+json; charset=utf-8",
        ALLOW_ORIGIN_HEADER: "",
        "Access-Control-Allow-Credentials": "true",
    }
)


class OverrideResolver:
    """Decides whether a maintenance route replaces the default page.

    Routes are evaluated in declaration order. The environment check runs
    for every route, not only the one matching the URI, so the last route
    with a non-empty variable supplies the content. A route whose variable
    is set is not considered for its URI match.
    """

    def __init__(
        self,
        routes: Sequence[OverrideRoute],
        environment: EnvironmentLookup,
        service_name: str,
    ) -> None:
        self._routes = tuple(routes)
        self._environment = environment
        self._service_name = service_name

    def applies_to(self, signal: IncomingSignal) -> bool:
        """Return True when the signal targets the maintenance service."""
        return signal.service_name == self._service_name

    def override_headers(self, origin: str) -> dict[str, str]:
        """Return the fixed override headers with the origin mirrored."""
        headers = dict(OVERRIDE_HEADERS)
        headers[ALLOW_ORIGIN_HEADER] = origin
        return headers

    def resolve(
        self,
        signal: IncomingSignal,
        default: ResolvedResponse,
        origin: str = "",
    ) -> ResolvedResponse:
        """Apply the maintenance routes to the default decision.

        Args:
            signal: The classified request.
            default: The classifier's decision, returned unchanged when the
                signal does not target the maintenance service.
            origin: The request's Origin header, mirrored for CORS.

        Returns:
            The decision to emit.
        """
        if not self.applies_to(signal):
            return default

        logger.info("Detected request to %s. Mocking response", signal.service_name)

        content = None
        filename = default.filename
        status_code = default.status_code
        for route in self._routes:
            value = self._environment.lookup(route.env_var)
            if value:
                logger.info("Maintenance content enabled by %s", route.env_var)
                content = value
                status_code = OVERRIDE_STATUS_CODE
            elif route.match_key in signal.original_uri:
                filename = route.filename
                status_code = OVERRIDE_STATUS_CODE

        headers = {**default.headers, **self.override_headers(origin)}
        if content is not None:
            return dataclasses.replace(
                default,
                status_code=status_code,
                filename=None,
                content=content,
                headers=headers,
            )
        return dataclasses.replace(
            default, status_code=status_code, filename=filename, headers=headers
        )
