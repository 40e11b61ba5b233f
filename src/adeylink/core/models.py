"""Data models for AdeyLink."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .constants import DisplayConstants, RatingConstants
from .scoring import average_rating

logger = logging.getLogger(__name__)

__all__ = [
    "Location",
    "Seller",
    "Product",
    "BuyerSummary",
    "Review",
    "Video",
    "CurrentUser",
    "ReviewDraft",
    "ProfileViewModel",
    "parse_list",
]

T = TypeVar("T")


def _record(data: Any, kind: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a {kind} object, got {type(data).__name__}")
    return data


@dataclass
class Location:
    """Seller location: city plus coordinates."""
    city: str = ""
    lat: float = 0.0
    lng: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Location":
        data = _record(data or {}, "location")
        return cls(
            city=data.get("city", "") or "",
            lat=float(data.get("lat", 0.0) or 0.0),
            lng=float(data.get("lng", 0.0) or 0.0),
        )


@dataclass
class Seller:
    """A marketplace user viewed as a seller."""
    id: str
    name: str
    bio: str = ""
    email: Optional[str] = None
    location: Location = field(default_factory=Location)
    interests: List[str] = field(default_factory=list)
    followers: int = 0
    following: int = 0
    avatar: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Seller":
        data = _record(data, "seller")
        raw_interests = data.get("interests") or []
        if not isinstance(raw_interests, list):
            raise ValueError(f"Expected a list of interests, got {type(raw_interests).__name__}")
        interests: List[str] = []
        for tag in raw_interests:
            if tag not in interests:
                interests.append(tag)
        return cls(
            id=str(data["id"]),
            name=data.get("name", "") or "",
            bio=data.get("bio", "") or "",
            email=data.get("email"),
            location=Location.from_dict(data.get("location")),
            interests=interests,
            followers=int(data.get("followers", 0) or 0),
            following=int(data.get("following", 0) or 0),
            avatar=data.get("avatar", "") or "",
        )

    @property
    def initial(self) -> str:
        """Avatar placeholder letter."""
        return self.name[:1].upper()


@dataclass
class Product:
    """A product listed by a seller."""
    id: str
    title: str
    price: Decimal
    description: str = ""
    category: str = ""
    images: List[str] = field(default_factory=list)
    available: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        data = _record(data, "product")
        try:
            price = Decimal(str(data.get("price", 0)))
        except InvalidOperation:
            raise ValueError(f"Invalid price for product {data.get('id')}: {data.get('price')!r}")
        if not price.is_finite():
            raise ValueError(f"Non-finite price for product {data.get('id')}: {price}")
        if price < 0:
            raise ValueError(f"Negative price for product {data.get('id')}: {price}")
        return cls(
            id=str(data["id"]),
            title=data.get("title", "") or "",
            price=price,
            description=data.get("description", "") or "",
            category=data.get("category", "") or "",
            images=[img for img in (data.get("images") or []) if img],
            available=bool(data.get("available", True)),
        )

    @property
    def cover_image(self) -> Optional[str]:
        return self.images[0] if self.images else None


@dataclass
class BuyerSummary:
    """Buyer info embedded in a review."""
    id: str
    name: str = ""
    avatar: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuyerSummary":
        data = _record(data, "buyer")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", "") or "",
            avatar=data.get("avatar", "") or "",
        )


@dataclass
class Review:
    """A buyer's review of a seller."""
    id: str
    rating: int
    comment: str
    date: str
    buyer: Optional[BuyerSummary] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Review":
        data = _record(data, "review")
        rating = data["rating"]
        if isinstance(rating, bool) or int(rating) != rating:
            raise ValueError(f"Non-integer rating on review {data.get('id')}: {rating!r}")
        rating = int(rating)
        if not RatingConstants.MIN_RATING <= rating <= RatingConstants.MAX_RATING:
            raise ValueError(f"Rating out of range on review {data.get('id')}: {rating}")
        buyer = data.get("buyer")
        return cls(
            id=str(data["id"]),
            rating=rating,
            comment=data.get("comment", "") or "",
            date=data.get("date", "") or "",
            buyer=BuyerSummary.from_dict(buyer) if buyer else None,
        )

    @property
    def buyer_name(self) -> str:
        if self.buyer and self.buyer.name:
            return self.buyer.name
        return DisplayConstants.ANONYMOUS_BUYER

    @property
    def created_at(self) -> Optional[datetime]:
        """Parsed review timestamp, or None when the date is missing or malformed."""
        if not self.date:
            return None
        try:
            return datetime.fromisoformat(self.date.replace("Z", "+00:00"))
        except ValueError:
            return None


@dataclass
class Video:
    """A short video posted by a seller."""
    id: str
    title: str
    video_url: str = ""
    description: str = ""
    likes: int = 0
    comment_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Video":
        data = _record(data, "video")
        return cls(
            id=str(data["id"]),
            title=data.get("title", "") or "",
            video_url=data.get("videoUrl", "") or "",
            description=data.get("description", "") or "",
            likes=int(data.get("likes", 0) or 0),
            comment_count=int(data.get("commentCount", 0) or 0),
        )


@dataclass
class CurrentUser:
    """The signed-in user as exposed by the auth subsystem."""
    id: str
    name: str = ""
    email: str = ""


@dataclass
class ReviewDraft:
    """Unsubmitted review form state."""
    rating: int = RatingConstants.DEFAULT_RATING
    comment: str = ""

    def reset(self) -> None:
        self.rating = RatingConstants.DEFAULT_RATING
        self.comment = ""


@dataclass
class ProfileViewModel:
    """Everything a seller profile screen renders."""
    seller: Optional[Seller] = None
    products: List[Product] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)
    videos: List[Video] = field(default_factory=list)
    is_following: bool = False

    @property
    def average_rating(self) -> float:
        # Always derived from the current reviews, never cached.
        return average_rating(self.reviews)

    @property
    def review_count(self) -> int:
        return len(self.reviews)

    @property
    def found(self) -> bool:
        return self.seller is not None


def parse_list(items: Any, parser: Callable[[Dict[str, Any]], T], kind: str) -> List[T]:
    """Parse a JSON array, skipping malformed entries."""
    if not isinstance(items, list):
        raise ValueError(f"Expected a list of {kind}, got {type(items).__name__}")
    parsed = []
    for item in items:
        try:
            parsed.append(parser(item))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed {kind}: {e}")
            continue
    return parsed
