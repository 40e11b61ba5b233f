"""Seller profile data aggregation."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

from ..core.models import (
    CurrentUser,
    Product,
    ProfileViewModel,
    Review,
    Seller,
    Video,
    parse_list,
)
from .remote_client import RemoteClient, RemoteError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProfileDataAggregator:
    """Fetches the five profile slots concurrently and merges them.

    ``load`` never raises: a failed slot falls back to its default (``None``
    seller, empty lists, not following) and the others still complete.
    """

    def __init__(self, client: RemoteClient):
        self.client = client
        self.latest: Optional[ProfileViewModel] = None
        self._in_flight = 0
        self._generation = 0

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    async def load(
        self,
        seller_id: str,
        current_user: Optional[CurrentUser] = None,
        access_token: Optional[str] = None,
    ) -> ProfileViewModel:
        """Fetch every slot for ``seller_id`` and assemble a view model."""
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        logger.info(f"Loading profile {seller_id} (generation {generation})")

        try:
            fetches = [
                self._slot("seller", seller_id, self._fetch_seller(seller_id), None),
                self._slot("products", seller_id, self.fetch_products(seller_id), []),
                self._slot("reviews", seller_id, self.fetch_reviews(seller_id), []),
                self._slot("videos", seller_id, self.fetch_videos(seller_id), []),
            ]
            if current_user and access_token:
                fetches.append(
                    self._slot("follow status", seller_id,
                               self.client.get_follow_status(seller_id, access_token), False)
                )
            results = await asyncio.gather(*fetches)
        finally:
            self._in_flight -= 1

        view_model = ProfileViewModel(
            seller=results[0],
            products=results[1],
            reviews=results[2],
            videos=results[3],
            is_following=results[4] if len(results) > 4 else False,
        )

        if generation == self._generation:
            self.latest = view_model
        else:
            logger.debug(f"Discarding stale profile load for {seller_id} (generation {generation})")

        if view_model.seller is None:
            logger.warning(f"Seller {seller_id} not found")
        else:
            logger.info(
                f"Loaded profile {seller_id}: {len(view_model.products)} products, "
                f"{view_model.review_count} reviews, {len(view_model.videos)} videos"
            )
        return view_model

    async def _slot(self, name: str, seller_id: str, fetch: Awaitable[T], default: T) -> T:
        try:
            return await fetch
        except RemoteError as e:
            logger.error(f"Failed to fetch {name} for {seller_id}: {e}")
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed {name} for {seller_id}: {e}")
        return default

    async def _fetch_seller(self, seller_id: str) -> Seller:
        return Seller.from_dict(await self.client.get_user(seller_id))

    async def fetch_products(self, seller_id: str) -> List[Product]:
        return await self._fetch_list(self.client.get_seller_products, seller_id, Product.from_dict, "product")

    async def fetch_reviews(self, seller_id: str) -> List[Review]:
        """Read the seller's full review set. Raises ``RemoteError`` on failure."""
        return await self._fetch_list(self.client.get_seller_reviews, seller_id, Review.from_dict, "review")

    async def fetch_videos(self, seller_id: str) -> List[Video]:
        return await self._fetch_list(self.client.get_seller_videos, seller_id, Video.from_dict, "video")

    async def _fetch_list(
        self,
        fetch: Callable[[str], Awaitable[Any]],
        seller_id: str,
        parser: Callable[[dict], T],
        kind: str,
    ) -> List[T]:
        data = await fetch(seller_id)
        return parse_list(data, parser, kind)
