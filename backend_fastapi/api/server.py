import time

from fastapi import Request, Response

from backend_fastapi.api.request_log import log_error, log_request
from backend_fastapi.api.responses import fail, not_found
from backend_fastapi.api.routing import Router

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

API_PREFIX = "/api/"


def apply_cors_headers(response: Response) -> Response:
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


class RequestHandler:
    """
    Entry point for every HTTP request.

    Answers CORS preflight, delegates to the router, turns a missing route
    into a 404 and any escaping exception into a generic 500. Every response
    gets the CORS headers and one access-log line with its latency.
    """

    def __init__(self, router: Router) -> None:
        self._router = router

    async def __call__(self, request: Request) -> Response:
        started_at = time.perf_counter()
        try:
            response = await self._handle(request)
        except Exception as e:
            log_error(e, request, location="RequestHandler", status_code=500)
            response = fail()

        apply_cors_headers(response)
        log_request(request, response.status_code, started_at)
        return response

    async def _handle(self, request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204)

        response = await self._router.dispatch(request)
        if response is not None:
            return response

        if request.url.path.startswith(API_PREFIX):
            return not_found("Endpoint not found")
        return not_found("Not found")
