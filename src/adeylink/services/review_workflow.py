"""Submit a review for a seller."""

import logging
from typing import Optional

from ..core.auth import AuthSession
from ..core.constants import ErrorConstants
from ..core.models import ProfileViewModel, ReviewDraft
from ..core.scoring import is_valid_rating
from .profile_aggregator import ProfileDataAggregator
from .remote_client import RemoteClient, RemoteError

logger = logging.getLogger(__name__)


class ReviewWorkflow:
    """Create a review, then replace the profile's reviews with the server's set."""

    def __init__(self, client: RemoteClient, aggregator: ProfileDataAggregator, auth: AuthSession):
        self.client = client
        self.aggregator = aggregator
        self.auth = auth

    def validate(self, draft: ReviewDraft, access_token: Optional[str]) -> Optional[str]:
        """Return the reason the draft cannot be sent, or None if it can."""
        if self.auth.current_user is None or not access_token:
            return ErrorConstants.NOT_SIGNED_IN
        if not draft.comment.strip():
            return ErrorConstants.EMPTY_COMMENT
        if not is_valid_rating(draft.rating):
            return ErrorConstants.INVALID_RATING
        return None

    async def submit_review(
        self,
        profile: ProfileViewModel,
        seller_id: str,
        draft: ReviewDraft,
        access_token: Optional[str] = None,
    ) -> bool:
        """Send the draft. On success the draft is reset and reviews are refetched.

        Returns True only if the server accepted the review. A rejected or
        failed submit leaves the draft untouched for a retry.
        """
        token = access_token or self.auth.access_token
        problem = self.validate(draft, token)
        if problem:
            logger.warning(f"Review for {seller_id} not sent: {problem}")
            return False

        try:
            await self.client.create_review(seller_id, draft.rating, draft.comment, token)
        except RemoteError as e:
            logger.error(f"Add review error for {seller_id}: {e}")
            return False

        draft.reset()
        logger.info(f"Review submitted for {seller_id}")

        try:
            profile.reviews = await self.aggregator.fetch_reviews(seller_id)
        except (RemoteError, ValueError) as e:
            # Keep the previous reviews; the next full load will catch up.
            logger.error(f"Failed to refresh reviews for {seller_id}: {e}")
        return True
