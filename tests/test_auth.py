import pytest
from fastapi.testclient import TestClient

import dependencies
import security
from dependencies import get_current_user, get_directory, get_progress_store, get_project_id
from main import app
from models import CurrentUser
from security import bearer_token, resolve_project_id, verify_token
from tests.fakes import FakeDirectory, FakeProgressStore

PROJECT = "algoverse-test"

TOKENS = {
    "user-token": CurrentUser(uid="user-1"),
    "admin-token": CurrentUser(uid="admin-1", admin=True),
}


def fake_verify(token, project_id):
    if project_id != PROJECT or token not in TOKENS:
        raise ValueError("Token expired")
    return TOKENS[token]


def claims(**overrides):
    body = {
        "aud": PROJECT,
        "iss": f"https://securetoken.google.com/{PROJECT}",
        "sub": "user-9",
        "email": "nine@example.com",
    }
    body.update(overrides)
    return body


@pytest.fixture
def signed_claims(monkeypatch):
    """Replaces signature checking; tests set the claims the token decodes to."""
    decoded = {}

    def verify_firebase_token(token, request, audience=None):
        decoded["audience"] = audience
        return decoded["claims"]

    monkeypatch.setattr(security.id_token, "verify_firebase_token", verify_firebase_token)
    return decoded


@pytest.fixture
def raw_client(monkeypatch):
    monkeypatch.setattr(dependencies, "verify_token", fake_verify)
    app.dependency_overrides.pop(get_current_user, None)
    app.dependency_overrides[get_project_id] = lambda: PROJECT
    app.dependency_overrides[get_directory] = lambda: FakeDirectory()
    app.dependency_overrides[get_progress_store] = lambda: FakeProgressStore()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, None),
        ("", None),
        ("Basic abc", None),
        ("Bearer ", None),
        ("Bearer abc.def", "abc.def"),
    ],
)
def test_bearer_token(header, expected):
    assert bearer_token(header) == expected


def test_verify_token_pins_audience_to_project(signed_claims):
    signed_claims["claims"] = claims(admin=True)

    user = verify_token("token", PROJECT)

    assert signed_claims["audience"] == PROJECT
    assert user == CurrentUser(uid="user-9", email="nine@example.com", admin=True)


def test_verify_token_rejects_other_project(signed_claims):
    signed_claims["claims"] = claims(
        aud="attacker-project",
        iss="https://securetoken.google.com/attacker-project",
        admin=True,
    )

    with pytest.raises(ValueError, match="audience"):
        verify_token("token", PROJECT)


def test_verify_token_rejects_foreign_issuer(signed_claims):
    signed_claims["claims"] = claims(iss="https://securetoken.google.com/attacker-project")

    with pytest.raises(ValueError, match="issuer"):
        verify_token("token", PROJECT)


def test_verify_token_requires_project(signed_claims):
    signed_claims["claims"] = claims()

    with pytest.raises(ValueError):
        verify_token("token", None)


def test_resolve_project_id(monkeypatch):
    class FirebaseApp:
        project_id = "from-credentials"

    monkeypatch.setattr(security, "FIREBASE_PROJECT_ID", None)
    assert resolve_project_id(FirebaseApp()) == "from-credentials"

    with pytest.raises(RuntimeError, match="FIREBASE_PROJECT_ID"):
        resolve_project_id(None)

    monkeypatch.setattr(security, "FIREBASE_PROJECT_ID", "from-env")
    assert resolve_project_id(FirebaseApp()) == "from-env"


def test_other_project_token_is_forbidden(raw_client, monkeypatch, signed_claims):
    monkeypatch.setattr(dependencies, "verify_token", verify_token)
    signed_claims["claims"] = claims(aud="attacker-project", admin=True)

    response = raw_client.get("/api/users", headers={"Authorization": "Bearer forged"})

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}


def test_missing_token(raw_client):
    response = raw_client.get("/api/leaderboard")

    assert response.status_code == 401
    assert response.json() == {"error": "No token provided"}


def test_invalid_token(raw_client):
    response = raw_client.get("/api/leaderboard", headers={"Authorization": "Bearer stale"})

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}


def test_valid_token(raw_client):
    response = raw_client.get("/api/leaderboard", headers={"Authorization": "Bearer user-token"})

    assert response.status_code == 200
    assert response.json() == {"leaderboard": [], "currentUserRank": 1}


def test_admin_claim_required(raw_client):
    user = raw_client.get("/api/users", headers={"Authorization": "Bearer user-token"})
    admin = raw_client.get("/api/users", headers={"Authorization": "Bearer admin-token"})

    assert user.status_code == 403
    assert user.json() == {"error": "Unauthorized: Admin access required"}
    assert admin.status_code == 200
    assert admin.json() == []
