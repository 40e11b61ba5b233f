"""Services for AdeyLink."""

from .remote_client import RemoteClient, RemoteError
from .profile_aggregator import ProfileDataAggregator
from .follow_workflow import FollowWorkflow
from .review_workflow import ReviewWorkflow
from .seller_profile import ScreenState, SellerProfileScreen

__all__ = [
    "RemoteClient",
    "RemoteError",
    "ProfileDataAggregator",
    "FollowWorkflow",
    "ReviewWorkflow",
    "ScreenState",
    "SellerProfileScreen",
]
