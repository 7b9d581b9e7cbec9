"""Router tests for the HTTP API using FastAPI's TestClient."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from streamora.core.config import settings
from streamora.core.store import USER_STATS_KEY, RecordStore, get_store
from streamora.main import app
from streamora.modules.identity.dependencies import get_identity_directory
from streamora.modules.identity.jwt import TokenBlacklist, create_access_token
from streamora.modules.identity.models import Session
from streamora.modules.identity.service import IdentityDirectory

API = "/api/v1"
ADMIN_HANDLE = "SHUBOWNER2026"
ADMIN_PASSWORD = "owner-secret"


@pytest.fixture
def store() -> RecordStore:
    return RecordStore.in_memory()


@pytest.fixture
def client(store: RecordStore):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_identity_directory] = lambda: IdentityDirectory(
        store,
        admin_handle=ADMIN_HANDLE,
        admin_password=ADMIN_PASSWORD,
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    TokenBlacklist.clear()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def login_admin(client: TestClient) -> dict:
    response = client.post(
        f"{API}/identity/login",
        json={"secret_handle": ADMIN_HANDLE, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return bearer(response.json()["access_token"])


def register(client: TestClient, handle: str, name: str, password: str = "password1") -> dict:
    response = client.post(
        f"{API}/identity/register",
        json={"public_name": name, "secret_handle": handle, "password": password},
    )
    assert response.status_code == 201
    return bearer(response.json()["access_token"])


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert "X-Correlation-ID" in response.headers


def test_register_and_session(client: TestClient) -> None:
    response = client.post(
        f"{API}/identity/register",
        json={"public_name": "Alice", "secret_handle": "alice", "password": "wonderland"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["secret_handle"] == "alice"
    assert body["token_type"] == "bearer"
    assert "password" not in body

    session = client.get(f"{API}/identity/session", headers=bearer(body["access_token"]))
    assert session.json()["secret_handle"] == "alice"
    assert session.json()["is_privileged"] is False

    reserved = client.post(
        f"{API}/identity/register",
        json={"public_name": "X", "secret_handle": ADMIN_HANDLE.lower(), "password": "password1"},
    )
    assert reserved.status_code == 409


def test_protected_routes_need_session(client: TestClient) -> None:
    assert client.get(f"{API}/creators/me/stats").status_code == 401
    assert client.get(f"{API}/notifications/inbox").status_code == 401

    rejected = client.get(f"{API}/identity/session", headers=bearer("not-a-token"))
    assert rejected.status_code == 401
    assert rejected.headers["WWW-Authenticate"] == "Bearer"


def test_admin_routes_need_privilege(client: TestClient) -> None:
    headers = register(client, "bob", "Bob", "builder1")

    assert client.get(f"{API}/monetization/requests", headers=headers).status_code == 403
    assert client.post(
        f"{API}/moderation/creators/bob/strikes", json={"new_count": 1}, headers=headers
    ).status_code == 403


def test_admin_sign_in_does_not_authorize_other_clients(client: TestClient) -> None:
    register(client, "bob", "Bob", "builder1")
    admin = login_admin(client)
    anonymous = TestClient(app)

    assert anonymous.post(
        f"{API}/moderation/creators/bob/strikes", json={"new_count": 3}
    ).status_code == 401
    assert anonymous.get(f"{API}/identity/users").status_code == 401

    assert client.get(f"{API}/moderation/creators/bob", headers=admin).json()["strikes"] == 0


def test_token_signed_with_another_key_is_rejected(client: TestClient) -> None:
    register(client, "bob", "Bob", "builder1")
    now = datetime.now(timezone.utc)
    forged = jwt.encode(
        {
            "sub": "bob",
            "name": "Bob",
            "privileged": True,
            "exp": now + timedelta(hours=1),
            "iat": now,
            "jti": "forged",
        },
        "not-the-server-key",
        algorithm=settings.JWT_ALGORITHM,
    )

    assert client.get(f"{API}/identity/users", headers=bearer(forged)).status_code == 401


def test_expired_token_is_rejected(client: TestClient) -> None:
    token = create_access_token(
        Session(secret_handle=ADMIN_HANDLE, public_name="Owner", is_privileged=True),
        expires_delta=timedelta(minutes=-1),
    )

    assert client.get(f"{API}/identity/users", headers=bearer(token)).status_code == 401


def test_logout_revokes_token(client: TestClient) -> None:
    headers = register(client, "alice", "Alice", "wonderland")
    assert client.get(f"{API}/identity/session", headers=headers).status_code == 200

    assert client.post(f"{API}/identity/logout", headers=headers).status_code == 204

    assert client.get(f"{API}/identity/session", headers=headers).status_code == 401
    assert client.post(f"{API}/identity/logout", headers=headers).status_code == 401
    assert client.post(f"{API}/identity/logout").status_code == 401


def test_payout_below_minimum_is_conflict(client: TestClient) -> None:
    headers = register(client, "bob", "Bob", "builder1")

    response = client.post(
        f"{API}/monetization/payouts", json={"paypal_email": "bob@pay.com"}, headers=headers
    )

    assert response.status_code == 409


def test_activation_validation_is_unprocessable(client: TestClient) -> None:
    headers = register(client, "bob", "Bob", "builder1")

    response = client.post(
        f"{API}/monetization/activate",
        json={"paypal_email": "not-an-email", "ad_pin": "1234"},
        headers=headers,
    )

    assert response.status_code == 422
    assert client.get(f"{API}/creators/me/stats", headers=headers).json()["is_monetized"] is False


def test_admin_moderation_and_broadcast(client: TestClient) -> None:
    register(client, "carol", "Carol")
    admin = login_admin(client)

    strike = client.post(
        f"{API}/moderation/creators/carol/strikes", json={"new_count": 3}, headers=admin
    )
    assert strike.status_code == 200
    assert strike.json()["new_count"] == 3

    repeat = client.post(
        f"{API}/moderation/creators/carol/strikes", json={"new_count": 3}, headers=admin
    )
    assert repeat.status_code == 409

    out_of_range = client.post(
        f"{API}/moderation/creators/carol/strikes", json={"new_count": 4}, headers=admin
    )
    assert out_of_range.status_code == 422

    broadcast = client.post(
        f"{API}/notifications",
        json={"target_handle": "ALL", "category": "general", "message": "Welcome!"},
        headers=admin,
    )
    assert broadcast.status_code == 201

    summary = client.get(f"{API}/moderation/creators/carol", headers=admin).json()
    assert summary["strikes"] == 3
    assert summary["is_suspended"] is True


def test_strike_with_other_letter_case_reaches_stored_handle(
    client: TestClient, store: RecordStore
) -> None:
    carol = register(client, "carol", "Carol")
    published = client.post(f"{API}/videos", json={"title": "Clip"}, headers=carol)
    assert published.status_code == 201
    admin = login_admin(client)

    strike = client.post(
        f"{API}/moderation/creators/Carol/strikes", json={"new_count": 3}, headers=admin
    )

    assert strike.status_code == 200
    assert client.get(f"{API}/videos/uploader/carol").json()["videos"] == []
    assert store.get_entry(USER_STATS_KEY, "carol")["strikes"] == 3
    assert store.get_entry(USER_STATS_KEY, "Carol") is None

    stats = client.get(f"{API}/creators/CAROL/stats", headers=admin).json()
    assert stats["handle"] == "carol"
    assert stats["is_monetized"] is False

    cleared = client.delete(f"{API}/moderation/creators/cArOl/strikes", headers=admin)
    assert cleared.json() == {"handle": "carol", "previous_count": 3, "strikes": 0}


def test_unknown_creator_handle_is_not_found(client: TestClient, store: RecordStore) -> None:
    admin = login_admin(client)

    assert client.post(
        f"{API}/moderation/creators/ghost/strikes", json={"new_count": 1}, headers=admin
    ).status_code == 404
    assert client.get(f"{API}/creators/ghost/stats", headers=admin).status_code == 404
    assert client.patch(
        f"{API}/monetization/creators/ghost/flags", json={"is_trusted": True}, headers=admin
    ).status_code == 404
    assert store.entries(USER_STATS_KEY) == {}


def test_unknown_request_is_not_found(client: TestClient) -> None:
    admin = login_admin(client)

    response = client.post(
        f"{API}/monetization/requests/missing/resolve",
        json={"decision": "approved"},
        headers=admin,
    )
    assert response.status_code == 404


def test_site_event(client: TestClient) -> None:
    assert client.get(f"{API}/site/event").json() is None

    admin = login_admin(client)
    started = client.post(f"{API}/site/event", json={"theme": "golden"}, headers=admin)
    assert started.status_code == 201
    assert client.get(f"{API}/site/event").json()["name"] == "Golden Event"

    assert client.delete(f"{API}/site/event", headers=admin).status_code == 204
    assert client.delete(f"{API}/site/event", headers=admin).status_code == 404


def test_rates_are_public(client: TestClient) -> None:
    body = client.get(f"{API}/monetization/rates").json()
    assert body["cpm_rates"] == {"bronze": 3.0, "silver": 5.0, "gold": 8.0, "premium": 10.0}
    assert body["revenue_shares"] == {"standard": 0.55, "premium": 0.7}
