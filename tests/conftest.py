"""Pytest configuration and fixtures."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pytest

from adeylink.core.auth import AuthSession
from adeylink.core.models import CurrentUser
from adeylink.core.navigation import NavigationController
from adeylink.services.follow_workflow import FollowWorkflow
from adeylink.services.profile_aggregator import ProfileDataAggregator
from adeylink.services.remote_client import RemoteClient, RemoteError
from adeylink.services.review_workflow import ReviewWorkflow
from adeylink.services.seller_profile import SellerProfileScreen


class FakeRemoteClient(RemoteClient):
    """RemoteClient that answers from a route table instead of the network.

    A route value is returned as the JSON body; an Exception instance is
    raised; a list is consumed one response per call.
    """

    def __init__(self, routes: Optional[Dict[Tuple[str, str], Any]] = None):
        super().__init__(base_url="https://backend.test", public_key="anon", max_retries=1, retry_delay=0)
        self.routes: Dict[Tuple[str, str], Any] = dict(routes or {})
        self.gates: Dict[Tuple[str, str], asyncio.Event] = {}
        self.calls: List[Tuple[str, str, Optional[str], Optional[dict]]] = []

    def gate(self, method: str, path: str) -> asyncio.Event:
        """Hold a route until the returned event is set."""
        event = asyncio.Event()
        self.gates[(method, path)] = event
        return event

    async def request(self, method, path, token=None, payload=None):
        self.calls.append((method, path, token, payload))
        key = (method, path)
        if key in self.gates:
            await self.gates[key].wait()
        if key not in self.routes:
            raise RemoteError(f"{method} {path} returned 404", 404)
        response = self.routes[key]
        if isinstance(response, list) and response and isinstance(response[0], _Sequence):
            response = response.pop(0).value
        if isinstance(response, Exception):
            raise response
        return response

    def paths(self, method: Optional[str] = None) -> List[str]:
        return [p for m, p, _, _ in self.calls if method is None or m == method]


class _Sequence:
    def __init__(self, value):
        self.value = value


def responses(*values) -> List[_Sequence]:
    """Successive responses for one route."""
    return [_Sequence(v) for v in values]


def make_seller(seller_id: str = "S1", **overrides) -> Dict[str, Any]:
    data = {
        "id": seller_id,
        "name": "Hana Bekele",
        "email": "hana@example.com",
        "bio": "Handmade baskets from Addis",
        "location": {"city": "Addis Ababa", "lat": 9.03, "lng": 38.74},
        "interests": ["weaving", "pottery"],
        "followers": 10,
        "following": 3,
        "avatar": "",
    }
    data.update(overrides)
    return data


def make_review(review_id: str, rating: int, buyer_name: str = "Abel") -> Dict[str, Any]:
    return {
        "id": review_id,
        "rating": rating,
        "comment": f"Review {review_id}",
        "date": "2024-03-01T10:00:00Z",
        "buyer": {"id": f"buyer-{review_id}", "name": buyer_name, "avatar": ""},
    }


def make_product(product_id: str = "P1", price: Any = 25.5) -> Dict[str, Any]:
    return {
        "id": product_id,
        "title": "Woven basket",
        "description": "Sisal and grass",
        "price": price,
        "category": "home",
        "images": ["https://img.test/p1.jpg"],
        "available": True,
    }


def make_video(video_id: str = "V1") -> Dict[str, Any]:
    return {
        "id": video_id,
        "title": "How we weave",
        "description": "Behind the scenes",
        "videoUrl": "https://video.test/v1.mp4",
        "likes": 12,
        "commentCount": 4,
    }


def seller_routes(seller_id: str = "S1", reviews=None) -> Dict[Tuple[str, str], Any]:
    """Routes for a fully available seller profile."""
    if reviews is None:
        reviews = [make_review("R1", 4), make_review("R2", 5)]
    return {
        ("GET", f"/user/{seller_id}"): make_seller(seller_id),
        ("GET", f"/seller/{seller_id}/products"): [make_product()],
        ("GET", f"/seller/{seller_id}/reviews"): reviews,
        ("GET", f"/seller/{seller_id}/videos"): [make_video()],
        ("GET", f"/follow/{seller_id}/status"): {"following": False},
    }


@pytest.fixture
def client() -> FakeRemoteClient:
    return FakeRemoteClient(seller_routes())


@pytest.fixture
def auth() -> AuthSession:
    session = AuthSession()
    session.sign_in(CurrentUser(id="U1", name="Liya"), "user-token")
    return session


@pytest.fixture
def anonymous() -> AuthSession:
    return AuthSession()


@pytest.fixture
def aggregator(client) -> ProfileDataAggregator:
    return ProfileDataAggregator(client)


@pytest.fixture
def navigation() -> NavigationController:
    return NavigationController()


def make_screen(seller_id, client, auth, navigation=None) -> SellerProfileScreen:
    aggregator = ProfileDataAggregator(client)
    return SellerProfileScreen(
        seller_id=seller_id,
        auth=auth,
        navigation=navigation or NavigationController(),
        aggregator=aggregator,
        follow=FollowWorkflow(client, auth),
        reviews=ReviewWorkflow(client, aggregator, auth),
    )
