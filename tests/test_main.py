from fastapi.testclient import TestClient
from backend.app.main import app

client = TestClient(app)


def test_read_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"app": "Login Route Service", "status": "ok"}


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_route_table_is_attached_to_app():
    table = app.state.route_table
    assert ("POST", "/login") in table
    assert ("POST", "/register") in table
    assert len(table) == 2


def test_login_only_accepts_post():
    response = client.get("/login")
    assert response.status_code == 405
