"""
Tests for the route access policy table and the identity gate.
"""

import pytest
from datetime import timedelta
from fastapi import status
from httpx import AsyncClient

from homehunt.main import app
from homehunt.models.user import UserRole
from homehunt.repositories.user import UserRepository
from homehunt.utils.access_policy import (
    AccessLevel,
    ROUTE_POLICIES,
    DEFAULT_ACCESS_LEVEL,
    get_access_level,
    role_allowed
)
from homehunt.utils.auth import create_access_token
from tests.conftest import auth_headers, AGENT_EMAIL, ADMIN_EMAIL


def served_routes() -> set:
    """(METHOD, path template) for every documented operation."""
    return {
        (method.upper(), path)
        for path, operations in app.openapi()["paths"].items()
        for method in operations
    }


class TestPolicyTable:
    """The policy table must describe every route the app serves."""

    def test_schema_lists_the_api(self):
        served = served_routes()

        assert ("GET", "/reviews/all") in served
        assert ("PATCH", "/offers/{offer_id}/accept") in served
        assert len(served) == len(ROUTE_POLICIES)

    def test_every_route_has_a_policy(self):
        assert served_routes() - set(ROUTE_POLICIES) == set()

    def test_every_policy_matches_a_route(self):
        assert set(ROUTE_POLICIES) - served_routes() == set()

    def test_unknown_route_defaults_to_authenticated(self):
        assert DEFAULT_ACCESS_LEVEL == AccessLevel.AUTHENTICATED
        assert get_access_level("GET", "/not-a-route") == AccessLevel.AUTHENTICATED

    def test_lookup_is_case_insensitive_on_method(self):
        assert get_access_level("get", "/properties/verified") == AccessLevel.PUBLIC

    @pytest.mark.parametrize("role,level,expected", [
        (UserRole.USER, AccessLevel.AUTHENTICATED, True),
        (UserRole.FRAUD, AccessLevel.AUTHENTICATED, True),
        (UserRole.USER, AccessLevel.AGENT, False),
        (UserRole.FRAUD, AccessLevel.AGENT, False),
        (UserRole.AGENT, AccessLevel.AGENT, True),
        (UserRole.ADMIN, AccessLevel.AGENT, True),
        (UserRole.AGENT, AccessLevel.ADMIN, False),
        (UserRole.ADMIN, AccessLevel.ADMIN, True),
    ])
    def test_role_allowed(self, role, level, expected):
        assert role_allowed(level, role) is expected


class TestIdentityGate:
    """Gate behaviour observed through real routes."""

    @pytest.mark.asyncio
    async def test_public_route_needs_no_token(self, async_client: AsyncClient):
        response = await async_client.get("/properties/verified")
        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_missing_token_is_unauthorized(self, async_client: AsyncClient):
        response = await async_client.get("/wishlist", params={"email": "buyer@test.com"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"]["code"] == "UNAUTHORIZED"
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_garbage_token_is_forbidden(self, async_client: AsyncClient):
        response = await async_client.get(
            "/wishlist",
            params={"email": "buyer@test.com"},
            headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_malformed_header_is_forbidden(self, async_client: AsyncClient):
        token = create_access_token(email="buyer@test.com", role=UserRole.USER)
        response = await async_client.get(
            "/wishlist",
            params={"email": "buyer@test.com"},
            headers={"Authorization": f"Token {token}"}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_expired_token_is_forbidden(self, async_client: AsyncClient):
        token = create_access_token(
            email="buyer@test.com",
            role=UserRole.USER,
            expires_delta=timedelta(seconds=-5)
        )
        response = await async_client.get(
            "/wishlist",
            params={"email": "buyer@test.com"},
            headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_role_mismatch_is_forbidden(self, async_client: AsyncClient, agent_headers):
        response = await async_client.get("/users", headers=agent_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["error"]["code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_fraud_agent_loses_agent_routes(self, async_client: AsyncClient):
        response = await async_client.get(
            "/offers/agent",
            params={"email": "agent@test.com"},
            headers=auth_headers("agent@test.com", UserRole.FRAUD)
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_admin_passes_agent_routes(self, async_client: AsyncClient, admin_headers):
        response = await async_client.get(
            "/offers/agent",
            params={"email": "agent@test.com"},
            headers=admin_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_agent_marked_fraud_loses_access_before_token_expiry(
        self,
        async_client: AsyncClient,
        agent_headers,
        admin_headers
    ):
        params = {"email": AGENT_EMAIL}
        before = await async_client.get("/offers/agent", params=params, headers=agent_headers)
        assert before.status_code == status.HTTP_200_OK

        marked = await async_client.patch(f"/users/mark-fraud/{AGENT_EMAIL}", headers=admin_headers)
        assert marked.status_code == status.HTTP_200_OK

        after = await async_client.get("/offers/agent", params=params, headers=agent_headers)
        assert after.status_code == status.HTTP_403_FORBIDDEN
        assert after.json()["error"]["code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_demoted_admin_loses_admin_routes(
        self,
        async_client: AsyncClient,
        user_repository: UserRepository,
        admin_headers
    ):
        assert (await async_client.get("/users", headers=admin_headers)).status_code == status.HTTP_200_OK

        await user_repository.set_role(ADMIN_EMAIL, UserRole.USER)

        response = await async_client.get("/users", headers=admin_headers)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_privileged_token_without_account_is_treated_as_user(self, async_client: AsyncClient):
        response = await async_client.get(
            "/offers/agent",
            params={"email": "ghost@test.com"},
            headers=auth_headers("ghost@test.com", UserRole.AGENT)
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
