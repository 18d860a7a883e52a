"""Unit tests for the bearer token dependencies."""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from warden_accounts.application import AccountStores
from warden_accounts.application.processes import ResetPasswordProcess
from warden_accounts.domain import AccountAction
from warden_accounts.presentation.dependencies import (
    CurrentIdentity,
    get_current_identity_optional,
    get_jwt_service,
    get_process_factory,
    get_password_service,
)
from warden_auth import JWTService, TokenIdentity, TokenKind
from warden_config import Settings, get_settings
from tests.shared.fixtures.factories import make_identity


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jwt_secret_key="dependency-test-secret",
        jwt_cookie_name="jwtToken",
        bcrypt_rounds=4,
    )


@pytest.fixture
def jwt_service(settings):
    return get_jwt_service(settings)


@pytest.fixture
def client(settings):
    app = FastAPI()

    @app.get("/me")
    def me(identity: CurrentIdentity) -> dict:
        return {"user_id": identity.user_id, "roles": sorted(identity.role_names)}

    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


class TestCurrentIdentity:
    """Tests for get_current_identity through a route."""

    def test_header_token(self, client, jwt_service):
        token = jwt_service.issue(make_identity(user_id=3), TokenKind.ACCESS)

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == {"user_id": 3, "roles": ["ROLE_USER"]}

    def test_cookie_token(self, client, jwt_service):
        token = jwt_service.issue(make_identity(user_id=4), TokenKind.ACCESS)
        client.cookies.set("jwtToken", token)

        response = client.get("/me")

        assert response.status_code == 200
        assert response.json()["user_id"] == 4

    def test_header_wins_over_cookie(self, client, jwt_service):
        header_token = jwt_service.issue(make_identity(user_id=5), TokenKind.ACCESS)
        cookie_token = jwt_service.issue(make_identity(user_id=6), TokenKind.ACCESS)
        client.cookies.set("jwtToken", cookie_token)

        response = client.get("/me", headers={"Authorization": f"Bearer {header_token}"})

        assert response.json()["user_id"] == 5

    def test_missing_token(self, client):
        response = client.get("/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_refresh_token_rejected(self, client, jwt_service):
        token = jwt_service.issue(make_identity(), TokenKind.REFRESH)

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_foreign_signature_rejected(self, client):
        token = JWTService(secret_key="someone-else").issue(make_identity(), TokenKind.ACCESS)

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401


class TestCurrentIdentityOptional:
    """Direct calls to the optional dependency."""

    def test_no_token(self, jwt_service):
        assert get_current_identity_optional(token=None, jwt_service=jwt_service) is None

    def test_expired_token(self, jwt_service):
        token = jwt_service.issue(
            make_identity(),
            TokenKind.ACCESS,
            expires_delta=timedelta(seconds=-1),
        )

        assert get_current_identity_optional(token=token, jwt_service=jwt_service) is None

    def test_valid_token(self, jwt_service):
        token = jwt_service.issue(make_identity(user_id=9), TokenKind.ACCESS)

        identity = get_current_identity_optional(token=token, jwt_service=jwt_service)

        assert isinstance(identity, TokenIdentity)
        assert identity.user_id == 9


def test_process_factory_builds_processes(settings):
    factory = get_process_factory(settings, get_password_service(settings))

    process = factory.create(
        AccountAction.RESET_PASSWORD,
        AccountStores(users=AsyncMock()),
        Mock(),
    )

    assert isinstance(process, ResetPasswordProcess)
