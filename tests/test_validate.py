import pytest
from fastapi.responses import JSONResponse

from backend.app.core.pipeline import RequestContext
from backend.app.core.routing import RouteTableBuilder
from backend.app.middlewares.validate import validate
from backend.app.schemas.login import LoginRequest


def make_ctx(body: bytes) -> RequestContext:
    return RequestContext(method="POST", path="/login", body=body)


class SpyController:
    def __init__(self):
        self.calls = 0

    def __call__(self, ctx):
        self.calls += 1
        return JSONResponse({"identifier": ctx.payload.identifier})


def test_empty_object_names_required_fields():
    response = validate(LoginRequest)(make_ctx(b"{}"))
    assert response.status_code == 400
    body = response.body.decode()
    assert '"identifier"' in body and '"secret"' in body


def test_empty_body_is_treated_as_empty_object():
    first = validate(LoginRequest)(make_ctx(b""))
    second = validate(LoginRequest)(make_ctx(b"{}"))
    assert first.status_code == 400
    assert first.body == second.body


def test_valid_body_sets_payload_and_continues():
    ctx = make_ctx(b'{"identifier": "  alice  ", "secret": "pw", "extra": 1}')
    assert validate(LoginRequest)(ctx) is None
    assert isinstance(ctx.payload, LoginRequest)
    assert ctx.payload.identifier == "alice"
    assert ctx.payload.secret == "pw"


@pytest.mark.parametrize("body", [b"{not json", b"[]", b'"text"'])
def test_malformed_body_reports_body_field(body):
    response = validate(LoginRequest)(make_ctx(body))
    assert response.status_code == 400
    assert '"field":"body"' in response.body.decode()


def test_submitted_values_are_not_echoed():
    response = validate(LoginRequest)(make_ctx(b'{"identifier": "", "secret": "' + b"s" * 200 + b'"}'))
    assert response.status_code == 400
    assert b"sssss" not in response.body


def test_validate_rejects_non_model_schema():
    with pytest.raises(TypeError):
        validate(dict)


def test_controller_not_invoked_on_validation_failure():
    spy = SpyController()
    table = RouteTableBuilder().post("/login", validate(LoginRequest), spy).build()
    response = table.dispatch(make_ctx(b'{"identifier": "alice"}'))
    assert response.status_code == 400
    assert spy.calls == 0


def test_controller_invoked_once_on_valid_body():
    spy = SpyController()
    table = RouteTableBuilder().post("/login", validate(LoginRequest), spy).build()
    response = table.dispatch(make_ctx(b'{"identifier": "alice", "secret": "pw"}'))
    assert response.status_code == 200
    assert spy.calls == 1
