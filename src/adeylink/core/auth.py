"""Auth context consumed by the profile workflows.

The auth subsystem itself lives elsewhere; this module only holds what it
hands over after sign-in (the current user and access token) and clears it
again on sign-out.
"""

import logging
from typing import Callable, List, Optional

from .models import CurrentUser

logger = logging.getLogger(__name__)


class AuthSession:
    """Process-wide sign-in state with explicit start and teardown."""

    def __init__(self):
        self.current_user: Optional[CurrentUser] = None
        self.access_token: Optional[str] = None
        self._sign_out_hooks: List[Callable[[], None]] = []

    def sign_in(self, user: CurrentUser, access_token: str) -> None:
        self.current_user = user
        self.access_token = access_token
        logger.info(f"Signed in as {user.id}")

    def sign_out(self) -> None:
        """Clear the session and notify listeners (e.g. to reset navigation)."""
        user_id = self.current_user.id if self.current_user else None
        self.current_user = None
        self.access_token = None
        for hook in list(self._sign_out_hooks):
            hook()
        logger.info(f"Signed out {user_id}")

    def on_sign_out(self, hook: Callable[[], None]) -> None:
        self._sign_out_hooks.append(hook)

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None and bool(self.access_token)

    @property
    def user_id(self) -> Optional[str]:
        return self.current_user.id if self.current_user else None
