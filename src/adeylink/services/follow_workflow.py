"""Follow / unfollow a seller."""

import logging
from typing import Optional

from ..core.auth import AuthSession
from ..core.constants import ErrorConstants
from ..core.models import ProfileViewModel
from .remote_client import RemoteClient, RemoteError

logger = logging.getLogger(__name__)


class FollowWorkflow:
    """Toggle the follow relationship and reconcile the follower count.

    The server decides whether the toggle followed or unfollowed; only the
    returned ``following`` flag is trusted. The follower count is the one
    field adjusted locally instead of being refetched.
    """

    def __init__(self, client: RemoteClient, auth: AuthSession):
        self.client = client
        self.auth = auth

    async def toggle_follow(
        self,
        profile: ProfileViewModel,
        seller_id: str,
        access_token: Optional[str] = None,
    ) -> Optional[bool]:
        """Returns the new ``following`` state, or None if nothing changed."""
        token = access_token or self.auth.access_token
        if self.auth.current_user is None or not token:
            logger.warning(f"Follow {seller_id} skipped: {ErrorConstants.NOT_SIGNED_IN}")
            return None

        try:
            following = await self.client.toggle_follow(seller_id, token)
        except RemoteError as e:
            logger.error(f"Follow error for {seller_id}: {e}")
            return None

        profile.is_following = following
        if profile.seller is not None:
            profile.seller.followers += 1 if following else -1
        logger.info(f"{'Followed' if following else 'Unfollowed'} {seller_id}")
        return following
