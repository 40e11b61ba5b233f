"""AdeyLink - marketplace client orchestration core."""

__version__ = "1.0.0"
__author__ = "AdeyLink Team"

from .core.models import *
from .core.config import settings
from .core.navigation import NavigationController
from .services.remote_client import RemoteClient, RemoteError
from .services.profile_aggregator import ProfileDataAggregator

__all__ = [
    "settings",
    "NavigationController",
    "RemoteClient",
    "RemoteError",
    "ProfileDataAggregator",
]
