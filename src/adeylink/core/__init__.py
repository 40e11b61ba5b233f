"""Core modules for AdeyLink."""

from .models import *
from .config import settings
from .auth import AuthSession
from .navigation import *
from .scoring import average_rating

__all__ = [
    "settings",
    "AuthSession",
    "average_rating",
    "Location",
    "Seller",
    "Product",
    "BuyerSummary",
    "Review",
    "Video",
    "CurrentUser",
    "ReviewDraft",
    "ProfileViewModel",
    "View",
    "HomeView",
    "CategoryView",
    "VideosView",
    "SellerView",
    "CartView",
    "MessagingView",
    "ProductModal",
    "NavigationController",
]
