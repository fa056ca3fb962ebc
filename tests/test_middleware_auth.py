import jwt
import pytest
from flask import Flask, g, jsonify

from report_store.middleware_auth import BearerTokenMiddleware

SECRET = "not-the-key-anyone-checks-0123456789"


@pytest.fixture
def probe_client():
    app = Flask(__name__)
    middleware = BearerTokenMiddleware()

    @app.route('/probe')
    @middleware.carry_token
    def probe():
        return jsonify({"token": g.token, "subject": g.token_subject})

    return app.test_client()


def test_request_without_token_is_allowed(probe_client):
    response = probe_client.get('/probe')
    assert response.status_code == 200
    assert response.get_json() == {"token": None, "subject": None}


def test_token_subject_read_without_verification(probe_client):
    token = jwt.encode({"sub": "42", "preferred_username": "m.tech"}, SECRET, algorithm="HS256")
    response = probe_client.get('/probe', headers={"Authorization": f"Bearer {token}"})
    assert response.get_json() == {"token": token, "subject": "m.tech"}


def test_opaque_token_is_carried(probe_client):
    response = probe_client.get('/probe', headers={"Authorization": "bearer opaque-token"})
    assert response.status_code == 200
    assert response.get_json() == {"token": "opaque-token", "subject": None}


def test_non_bearer_header_is_ignored(probe_client):
    response = probe_client.get('/probe', headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.get_json() == {"token": None, "subject": None}


def test_unverified_subject_falls_back_to_sub():
    token = jwt.encode({"sub": "42"}, SECRET, algorithm="HS256")
    assert BearerTokenMiddleware.unverified_subject(token) == "42"
