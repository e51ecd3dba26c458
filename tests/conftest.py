"""
Test configuration and fixtures for the HomeHunt API.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import os
import uuid
from datetime import date, timedelta
from decimal import Decimal
from typing import AsyncGenerator, Dict, List, Optional

import httpx
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from homehunt.main import app
from homehunt.database import Base, DatabaseManager
from homehunt.models.user import User, UserRole
from homehunt.models.property import Property, VerificationStatus
from homehunt.models.offer import Offer, OfferStatus
from homehunt.repositories.user import UserRepository
from homehunt.repositories.property import PropertyRepository
from homehunt.repositories.offer import OfferRepository
from homehunt.repositories.payment import PaymentRepository
from homehunt.repositories.review import ReviewRepository
from homehunt.repositories.wishlist import WishlistRepository
from homehunt.services.payment_gateway import PaymentGateway
from homehunt.utils.auth import Identity, create_access_token


# Test database configuration
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

GATEWAY_URL = "https://gateway.test"


@pytest.fixture
async def db_manager() -> AsyncGenerator[DatabaseManager, None]:
    """Fresh schema for every test."""
    manager = DatabaseManager()
    manager.init(TEST_DATABASE_URL)
    await manager.create_tables()
    yield manager
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await manager.close()


@pytest.fixture
async def db_session(db_manager: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with db_manager.session() as session:
        yield session


class GatewayRecorder:
    """Requests seen by the mocked payment gateway, and the reply to send."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Dict = {"id": "pi_test_123", "client_secret": "pi_test_123_secret_abc"}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def gateway_recorder() -> GatewayRecorder:
    return GatewayRecorder()


@pytest.fixture
async def payment_gateway(gateway_recorder: GatewayRecorder) -> AsyncGenerator[PaymentGateway, None]:
    """Payment gateway client talking to an in-process mock transport."""
    gateway = PaymentGateway(
        base_url=GATEWAY_URL,
        secret_key="sk_test_123",
        currency="usd",
        client=httpx.AsyncClient(transport=httpx.MockTransport(gateway_recorder.handler))
    )
    yield gateway
    await gateway.aclose()


@pytest.fixture
async def async_client(
    db_manager: DatabaseManager,
    payment_gateway: PaymentGateway
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client bound to the test database and mocked gateway."""
    app.state.db = db_manager
    app.state.payment_gateway = payment_gateway

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    return PropertyRepository(db_session)


@pytest.fixture
def offer_repository(db_session: AsyncSession) -> OfferRepository:
    return OfferRepository(db_session)


@pytest.fixture
def payment_repository(db_session: AsyncSession) -> PaymentRepository:
    return PaymentRepository(db_session)


@pytest.fixture
def review_repository(db_session: AsyncSession) -> ReviewRepository:
    return ReviewRepository(db_session)


@pytest.fixture
def wishlist_repository(db_session: AsyncSession) -> WishlistRepository:
    return WishlistRepository(db_session)


# Identity helpers
def make_identity(email: str, role: UserRole = UserRole.USER) -> Identity:
    return Identity(email=email, role=role)


def auth_headers(email: str, role: UserRole = UserRole.USER) -> Dict[str, str]:
    """Authorization header carrying a freshly signed token."""
    token = create_access_token(email=email, role=role)
    return {"Authorization": f"Bearer {token}"}


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        email: Optional[str] = None,
        name: str = "Test User",
        role: UserRole = UserRole.USER
    ) -> dict:
        return {
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "uid": uuid.uuid4().hex,
            "name": name,
            "photo_url": "https://img.example.com/avatar.png",
            "role": role
        }

    @staticmethod
    async def create_user(
        user_repo: UserRepository,
        email: Optional[str] = None,
        name: str = "Test User",
        role: UserRole = UserRole.USER
    ) -> User:
        """Create a test user in the database."""
        return await user_repo.create_user(
            UserFactory.create_user_data(email=email, name=name, role=role)
        )


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        title: str = "Sunny Family Home",
        location: str = "Austin, TX",
        price_min: Decimal = Decimal("200000.00"),
        price_max: Decimal = Decimal("250000.00"),
        agent_email: str = "agent@test.com",
        agent_name: str = "Test Agent"
    ) -> dict:
        return {
            "title": title,
            "location": location,
            "image": "https://img.example.com/house.jpg",
            "description": "Three bedrooms close to the park",
            "price_min": price_min,
            "price_max": price_max,
            "agent_name": agent_name,
            "agent_email": agent_email,
            "details": {"bedrooms": 3, "garage": True}
        }

    @staticmethod
    async def create_property(
        property_repo: PropertyRepository,
        agent_email: str = "agent@test.com",
        status: VerificationStatus = VerificationStatus.PENDING,
        title: str = "Sunny Family Home",
        price_min: Decimal = Decimal("200000.00"),
        price_max: Decimal = Decimal("250000.00")
    ) -> Property:
        """Create a test property, then move it to ``status`` if needed."""
        property_obj = await property_repo.create_property(
            PropertyFactory.create_property_data(
                title=title,
                price_min=price_min,
                price_max=price_max,
                agent_email=agent_email
            )
        )
        if status != VerificationStatus.PENDING:
            await property_repo.set_verification_status(property_obj.id, status)
            property_obj = await property_repo.get_by_id(property_obj.id)
        return property_obj


class OfferFactory:
    """Factory for creating test offers."""

    @staticmethod
    async def create_offer(
        offer_repo: OfferRepository,
        property_obj: Property,
        buyer_email: str = "buyer@test.com",
        amount: Optional[Decimal] = None,
        status: OfferStatus = OfferStatus.PENDING
    ) -> Offer:
        return await offer_repo.create({
            "property_id": property_obj.id,
            "buyer_email": buyer_email,
            "buyer_name": "Test Buyer",
            "agent_email": property_obj.agent_email,
            "offer_amount": amount or property_obj.price_min,
            "buying_date": date.today() + timedelta(days=30),
            "status": status
        })


# Common test fixtures
AGENT_EMAIL = "agent@test.com"
ADMIN_EMAIL = "admin@test.com"
BUYER_EMAIL = "buyer@test.com"
RIVAL_EMAIL = "rival@test.com"


@pytest.fixture
async def test_agent(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(
        user_repository, email=AGENT_EMAIL, name="Test Agent", role=UserRole.AGENT
    )


@pytest.fixture
async def test_admin(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(
        user_repository, email=ADMIN_EMAIL, name="Test Admin", role=UserRole.ADMIN
    )


@pytest.fixture
async def test_buyer(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(
        user_repository, email=BUYER_EMAIL, name="Test Buyer", role=UserRole.USER
    )


@pytest.fixture
async def pending_property(property_repository: PropertyRepository) -> Property:
    return await PropertyFactory.create_property(property_repository, agent_email=AGENT_EMAIL)


@pytest.fixture
async def verified_property(property_repository: PropertyRepository) -> Property:
    return await PropertyFactory.create_property(
        property_repository,
        agent_email=AGENT_EMAIL,
        status=VerificationStatus.VERIFIED,
        title="Verified Loft"
    )


@pytest.fixture
async def rejected_property(property_repository: PropertyRepository) -> Property:
    return await PropertyFactory.create_property(
        property_repository,
        agent_email=AGENT_EMAIL,
        status=VerificationStatus.REJECTED,
        title="Rejected Shack"
    )


@pytest.fixture
def agent_headers(test_agent: User) -> Dict[str, str]:
    return auth_headers(test_agent.email, UserRole.AGENT)


@pytest.fixture
def admin_headers(test_admin: User) -> Dict[str, str]:
    return auth_headers(test_admin.email, UserRole.ADMIN)


@pytest.fixture
async def rival_headers(user_repository: UserRepository) -> Dict[str, str]:
    """Headers of a second stored agent who owns nothing."""
    rival = await UserFactory.create_user(
        user_repository, email=RIVAL_EMAIL, name="Rival Agent", role=UserRole.AGENT
    )
    return auth_headers(rival.email, UserRole.AGENT)


@pytest.fixture
def buyer_headers() -> Dict[str, str]:
    return auth_headers(BUYER_EMAIL, UserRole.USER)
