"""Seller profile screen controller.

Owns one ``ProfileViewModel`` for as long as the profile screen is shown,
wires the screen's actions to the workflows and the navigation controller,
and exposes the state a renderer needs.
"""

import logging
from enum import Enum
from typing import Optional

from ..core.auth import AuthSession
from ..core.models import ProfileViewModel, ReviewDraft
from ..core.navigation import MessagingView, NavigationController
from .follow_workflow import FollowWorkflow
from .profile_aggregator import ProfileDataAggregator
from .review_workflow import ReviewWorkflow

logger = logging.getLogger(__name__)


class ScreenState(Enum):
    LOADING = "loading"
    NOT_FOUND = "not_found"
    READY = "ready"


class SellerProfileScreen:
    """Seller profile screen for a single seller ID."""

    def __init__(
        self,
        seller_id: str,
        auth: AuthSession,
        navigation: NavigationController,
        aggregator: ProfileDataAggregator,
        follow: FollowWorkflow,
        reviews: ReviewWorkflow,
    ):
        self.seller_id = seller_id
        self.auth = auth
        self.navigation = navigation
        self.aggregator = aggregator
        self.follow = follow
        self.reviews = reviews
        self.profile: Optional[ProfileViewModel] = None
        self.draft = ReviewDraft()
        self.mounted = False
        self._in_flight = 0
        self._generation = 0

    # Lifecycle

    async def mount(self) -> None:
        self.mounted = True
        await self.refresh()

    def unmount(self) -> None:
        """Drop the view model; loads settling afterwards are ignored."""
        self.mounted = False
        self.profile = None

    async def refresh(self) -> None:
        """Full reload of every slot (e.g. after a product was added)."""
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        try:
            profile = await self.aggregator.load(
                self.seller_id, self.auth.current_user, self.auth.access_token
            )
        finally:
            self._in_flight -= 1
        if not self.mounted:
            logger.debug(f"Profile {self.seller_id} loaded after unmount; discarded")
        elif generation != self._generation:
            logger.debug(f"Profile {self.seller_id} refresh superseded; discarded")
        else:
            self.profile = profile

    @property
    def state(self) -> ScreenState:
        if self._in_flight or self.profile is None:
            return ScreenState.LOADING
        if not self.profile.found:
            return ScreenState.NOT_FOUND
        return ScreenState.READY

    # Capabilities

    @property
    def is_own_profile(self) -> bool:
        return self.auth.user_id is not None and self.auth.user_id == self.seller_id

    @property
    def can_follow(self) -> bool:
        return self.auth.current_user is not None and not self.is_own_profile

    can_review = can_follow

    @property
    def can_add_product(self) -> bool:
        return self.is_own_profile

    # Actions

    async def toggle_follow(self) -> Optional[bool]:
        if self.profile is None or not self.can_follow:
            return None
        return await self.follow.toggle_follow(self.profile, self.seller_id, self.auth.access_token)

    def set_rating(self, rating: int) -> None:
        self.draft.rating = rating

    def set_comment(self, comment: str) -> None:
        self.draft.comment = comment

    async def submit_review(self) -> bool:
        if self.profile is None or not self.can_review:
            return False
        return await self.reviews.submit_review(
            self.profile, self.seller_id, self.draft, self.auth.access_token
        )

    def open_product(self, product_id: str) -> None:
        self.navigation.open_product_modal(product_id, self.seller_id)

    def message_seller(self) -> None:
        self.navigation.navigate(MessagingView(user_id=self.seller_id))

    def back(self) -> None:
        self.navigation.back()
