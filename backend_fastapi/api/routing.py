"""
Declarative routing: path patterns with `:name` placeholders and a
first-match-wins route table.
"""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from fastapi import Request, Response

from backend_fastapi.api.request_log import log_error

PARAM_MARKER = ":"

Handler = Callable[[Request, dict[str, str]], Awaitable[Response]]


def _segments(value: str) -> list[str]:
    return [segment for segment in value.split("/") if segment]


def match_route(path: str, pattern: str) -> bool:
    """
    Returns True when `path` has as many segments as `pattern` and every
    literal segment of the pattern equals the segment at the same position.
    Placeholder segments match any value.
    """
    path_parts = _segments(path)
    pattern_parts = _segments(pattern)

    if len(path_parts) != len(pattern_parts):
        return False

    for path_part, pattern_part in zip(path_parts, pattern_parts):
        if not pattern_part.startswith(PARAM_MARKER) and pattern_part != path_part:
            return False

    return True


def extract_path_params(path: str, pattern: str) -> dict[str, str] | None:
    """
    Maps each placeholder name in `pattern` to the matching segment of `path`.

    Returns None when the path does not match the pattern, and an empty dict
    for a matching pattern without placeholders. A placeholder name used
    twice keeps the last value.
    """
    path_parts = _segments(path)
    pattern_parts = _segments(pattern)

    if len(path_parts) != len(pattern_parts):
        return None

    params: dict[str, str] = {}
    for path_part, pattern_part in zip(path_parts, pattern_parts):
        if pattern_part.startswith(PARAM_MARKER):
            params[pattern_part[len(PARAM_MARKER):]] = path_part
        elif pattern_part != path_part:
            return None

    return params


@dataclass(frozen=True, slots=True)
class RouteEntry:
    method: str
    pattern: str
    handler: Handler

    def matches(self, method: str, path: str) -> bool:
        return self.method == method and match_route(path, self.pattern)


class Router:
    """Ordered route table. The first entry matching method and path wins."""

    def __init__(self, routes: Iterable[RouteEntry]) -> None:
        self._routes = tuple(routes)

    @property
    def routes(self) -> tuple[RouteEntry, ...]:
        return self._routes

    async def dispatch(self, request: Request) -> Response | None:
        """
        Runs the handler of the first matching route.

        Returns:
            The handler's response, or None when no route matches.

        Raises:
            Whatever the handler raises, after logging it with the route
            context.
        """
        method = request.method
        path = request.url.path

        for route in self._routes:
            if not route.matches(method, path):
                continue

            params = extract_path_params(path, route.pattern) or {}
            try:
                return await route.handler(request, params)
            except Exception as e:
                log_error(
                    e,
                    request,
                    location="Router.dispatch",
                    route=f"{route.method} {route.pattern}",
                    method=method,
                    path=path,
                    task_id=params.get("id"),
                )
                raise

        return None
