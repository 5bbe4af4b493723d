import asyncio
import json
import logging

from fastapi.responses import PlainTextResponse

from backend_fastapi.api.routing import RouteEntry, Router
from backend_fastapi.api.server import CORS_HEADERS, RequestHandler


async def hello(request, params):
    return PlainTextResponse("hello")


async def broken(request, params):
    raise RuntimeError("database password is hunter2")


def handle(handler, request):
    return asyncio.run(handler(request))


def assert_cors(response):
    for key, value in CORS_HEADERS.items():
        assert response.headers[key] == value


def test_options_short_circuits_before_routing(make_request):
    router = Router([RouteEntry("OPTIONS", "/api/tasks", broken)])

    response = handle(RequestHandler(router), make_request("OPTIONS", "/api/tasks"))

    assert response.status_code == 204
    assert_cors(response)


def test_routed_response_gets_cors_headers(make_request):
    router = Router([RouteEntry("GET", "/api/hello", hello)])

    response = handle(RequestHandler(router), make_request("GET", "/api/hello"))

    assert response.status_code == 200
    assert response.body == b"hello"
    assert_cors(response)


def test_unknown_api_route_is_404(make_request):
    response = handle(RequestHandler(Router([])), make_request("GET", "/api/nothing"))

    assert response.status_code == 404
    body = json.loads(response.body)
    assert body["success"] is False
    assert body["error"] == "Endpoint not found"
    assert_cors(response)


def test_unknown_route_outside_api_is_404(make_request):
    response = handle(RequestHandler(Router([])), make_request("GET", "/favicon.ico"))

    assert response.status_code == 404
    assert json.loads(response.body)["error"] == "Not found"


def test_escaping_exception_becomes_generic_500(make_request, caplog):
    router = Router([RouteEntry("GET", "/api/broken", broken)])

    with caplog.at_level(logging.INFO):
        response = handle(RequestHandler(router), make_request("GET", "/api/broken"))

    assert response.status_code == 500
    body = json.loads(response.body)
    assert body["error"] == "Internal server error"
    assert "hunter2" not in response.body.decode()
    assert_cors(response)
    assert any("Status: 500" in r.getMessage() for r in caplog.records)


def test_access_log_line_for_every_request(make_request, caplog):
    router = Router([RouteEntry("GET", "/api/hello", hello)])

    with caplog.at_level(logging.INFO):
        handle(RequestHandler(router), make_request("GET", "/api/hello"))

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("GET /api/hello Status: 200") for m in messages)
