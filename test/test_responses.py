import json

from backend_fastapi.api.responses import (
    bad_request,
    created,
    fail,
    not_found,
    ok,
)
from core.domain.models.task import NewTask, Task


def body_of(response):
    return json.loads(response.body)


def test_ok_defaults():
    response = ok()

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert body_of(response) == {
        "success": True,
        "data": None,
        "message": "Request successful",
        "error": None,
    }


def test_ok_custom_status_and_data():
    response = ok({"id": "1"}, "Done", status=202)

    assert response.status_code == 202
    assert body_of(response)["data"] == {"id": "1"}
    assert body_of(response)["message"] == "Done"


def test_created_encodes_dataclasses():
    task = Task.create(NewTask(title="Write tests"))

    response = created(task)

    assert response.status_code == 201
    data = body_of(response)["data"]
    assert data["id"] == task.id
    assert data["title"] == "Write tests"
    assert data["is_completed"] is False
    assert body_of(response)["message"] == "Resource created"


def test_not_found_sets_error():
    response = not_found("Task not found")

    assert response.status_code == 404
    assert body_of(response) == {
        "success": False,
        "data": None,
        "message": "Task not found",
        "error": "Task not found",
    }


def test_bad_request_default_message():
    response = bad_request()

    assert response.status_code == 400
    assert body_of(response)["success"] is False
    assert body_of(response)["error"] == "Bad request"


def test_fail_defaults_and_custom_status():
    assert fail().status_code == 500
    assert body_of(fail())["error"] == "Internal server error"
    assert fail("Unavailable", status=503).status_code == 503


def test_headers_can_be_mutated_after_construction():
    response = ok()
    response.headers["X-Extra"] = "1"

    assert response.headers["x-extra"] == "1"
