"""Data preparation for export."""

import json
from typing import Any, Dict

from ..core.models import ProfileViewModel


def prepare_export(profile: ProfileViewModel) -> Dict[str, Any]:
    """Prepare a profile view model for JSON export."""
    seller = profile.seller
    seller_data = None
    if seller is not None:
        seller_data = {
            "id": seller.id,
            "name": seller.name,
            "bio": seller.bio,
            "location": {
                "city": seller.location.city,
                "lat": seller.location.lat,
                "lng": seller.location.lng,
            },
            "interests": list(seller.interests),
            "followers": seller.followers,
            "following": seller.following,
            "avatar": seller.avatar,
        }

    return {
        "seller": seller_data,
        "summary": {
            "average_rating": profile.average_rating,
            "review_count": profile.review_count,
            "product_count": len(profile.products),
            "video_count": len(profile.videos),
            "is_following": profile.is_following,
        },
        "products": [
            {
                "id": p.id,
                "title": p.title,
                "description": p.description,
                "price": str(p.price),
                "category": p.category,
                "images": list(p.images),
                "available": p.available,
            }
            for p in profile.products
        ],
        "reviews": [
            {
                "id": r.id,
                "rating": r.rating,
                "comment": r.comment,
                "date": r.date,
                "buyer": r.buyer_name,
            }
            for r in profile.reviews
        ],
        "videos": [
            {
                "id": v.id,
                "title": v.title,
                "description": v.description,
                "video_url": v.video_url,
                "likes": v.likes,
                "comment_count": v.comment_count,
            }
            for v in profile.videos
        ],
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": "1.0.0",
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
