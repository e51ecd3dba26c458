"""
Integration tests for wishlist and review endpoints.
"""

import pytest
import uuid
from fastapi import status
from httpx import AsyncClient

from homehunt.models.property import Property
from tests.conftest import auth_headers, BUYER_EMAIL


class TestWishlistEndpoints:

    @pytest.mark.asyncio
    async def test_saved_entry_snapshots_property(
        self,
        async_client: AsyncClient,
        verified_property: Property,
        buyer_headers
    ):
        response = await async_client.post(
            "/wishlist",
            json={"propertyId": str(verified_property.id)},
            headers=buyer_headers
        )
        assert response.status_code == status.HTTP_201_CREATED

        listing = await async_client.get("/wishlist", params={"email": BUYER_EMAIL}, headers=buyer_headers)

        assert listing.status_code == status.HTTP_200_OK
        entries = listing.json()
        assert len(entries) == 1
        assert entries[0]["propertyId"] == str(verified_property.id)
        assert entries[0]["title"] == "Verified Loft"
        assert entries[0]["agentEmail"] == verified_property.agent_email
        assert entries[0]["verificationStatus"] == "verified"

    @pytest.mark.asyncio
    async def test_save_missing_property(self, async_client: AsyncClient, buyer_headers):
        response = await async_client.post("/wishlist", json={"propertyId": str(uuid.uuid4())}, headers=buyer_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_other_users_wishlist_is_forbidden(self, async_client: AsyncClient, buyer_headers, admin_headers):
        response = await async_client.get("/wishlist", params={"email": "other@test.com"}, headers=buyer_headers)
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Access denied"

        as_admin = await async_client.get("/wishlist", params={"email": BUYER_EMAIL}, headers=admin_headers)
        assert as_admin.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_wishlist_requires_token(self, async_client: AsyncClient):
        response = await async_client.get("/wishlist", params={"email": BUYER_EMAIL})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_remove_entry(self, async_client: AsyncClient, verified_property: Property, buyer_headers):
        created = await async_client.post(
            "/wishlist",
            json={"propertyId": str(verified_property.id)},
            headers=buyer_headers
        )
        entry_id = created.json()["insertedId"]

        stranger = await async_client.delete(f"/wishlist/{entry_id}", headers=auth_headers("other@test.com"))
        assert stranger.status_code == status.HTTP_403_FORBIDDEN

        response = await async_client.delete(f"/wishlist/{entry_id}", headers=buyer_headers)
        assert response.status_code == status.HTTP_200_OK

        listing = await async_client.get("/wishlist", params={"email": BUYER_EMAIL}, headers=buyer_headers)
        assert listing.json() == []


class TestReviewEndpoints:

    async def _post_review(self, client: AsyncClient, property_obj: Property, headers, comment="Lovely home"):
        return await client.post(
            "/reviews",
            json={
                "propertyId": str(property_obj.id),
                "rating": 5,
                "comment": comment,
                "reviewerName": "Test Buyer"
            },
            headers=headers
        )

    @pytest.mark.asyncio
    async def test_post_and_read_publicly(
        self,
        async_client: AsyncClient,
        verified_property: Property,
        buyer_headers
    ):
        response = await self._post_review(async_client, verified_property, buyer_headers)
        assert response.status_code == status.HTTP_201_CREATED

        for_property = await async_client.get(f"/reviews/{verified_property.id}")
        assert for_property.status_code == status.HTTP_200_OK
        reviews = for_property.json()
        assert len(reviews) == 1
        assert reviews[0]["reviewerEmail"] == BUYER_EMAIL
        assert reviews[0]["propertyTitle"] == "Verified Loft"
        assert reviews[0]["agentName"] == "Test Agent"

        everything = await async_client.get("/reviews/all")
        assert len(everything.json()) == 1

    @pytest.mark.asyncio
    async def test_only_users_post_reviews(self, async_client: AsyncClient, verified_property: Property, agent_headers):
        response = await self._post_review(async_client, verified_property, agent_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Only users can post reviews"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 6])
    async def test_rating_out_of_range(self, async_client: AsyncClient, verified_property: Property, buyer_headers, rating):
        response = await async_client.post(
            "/reviews",
            json={"propertyId": str(verified_property.id), "rating": rating, "comment": "Hmm"},
            headers=buyer_headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_own_review_list(self, async_client: AsyncClient, verified_property: Property, buyer_headers):
        await self._post_review(async_client, verified_property, buyer_headers)

        mine = await async_client.get("/reviews", params={"email": BUYER_EMAIL}, headers=buyer_headers)
        assert len(mine.json()) == 1

        theirs = await async_client.get("/reviews", params={"email": "other@test.com"}, headers=buyer_headers)
        assert theirs.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_reviewer_deletes_own_review(
        self,
        async_client: AsyncClient,
        verified_property: Property,
        buyer_headers
    ):
        review_id = (await self._post_review(async_client, verified_property, buyer_headers)).json()["insertedId"]

        response = await async_client.delete(
            f"/reviews/{review_id}",
            params={"email": BUYER_EMAIL},
            headers=buyer_headers
        )
        assert response.status_code == status.HTTP_200_OK
        assert (await async_client.get("/reviews/all")).json() == []

    @pytest.mark.asyncio
    async def test_someone_elses_review_looks_missing(
        self,
        async_client: AsyncClient,
        verified_property: Property,
        buyer_headers
    ):
        review_id = (await self._post_review(async_client, verified_property, buyer_headers)).json()["insertedId"]

        response = await async_client.delete(f"/reviews/{review_id}", headers=auth_headers("other@test.com"))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert len((await async_client.get("/reviews/all")).json()) == 1

    @pytest.mark.asyncio
    async def test_admin_deletes_any_review(
        self,
        async_client: AsyncClient,
        verified_property: Property,
        buyer_headers,
        admin_headers
    ):
        review_id = (await self._post_review(async_client, verified_property, buyer_headers)).json()["insertedId"]

        response = await async_client.delete(
            f"/reviews/{review_id}",
            headers=admin_headers
        )
        assert response.status_code == status.HTTP_200_OK

        again = await async_client.delete(f"/reviews/{review_id}", headers=admin_headers)
        assert again.status_code == status.HTTP_404_NOT_FOUND
