"""Constants and configuration values for AdeyLink."""


class ApiPaths:
    """Logical resource paths on the marketplace backend."""

    USER = "/user/{id}"
    SELLER_PRODUCTS = "/seller/{id}/products"
    SELLER_REVIEWS = "/seller/{id}/reviews"
    SELLER_VIDEOS = "/seller/{id}/videos"
    FOLLOW_STATUS = "/follow/{id}/status"
    FOLLOW = "/follow/{id}"
    REVIEWS = "/reviews"


class RatingConstants:
    """Review rating bounds."""

    MIN_RATING = 1
    MAX_RATING = 5
    DEFAULT_RATING = 5  # star picker starts full
    EMPTY_AVERAGE = 0.0


class DisplayConstants:
    """Fallback text used when presenting profile data."""

    ANONYMOUS_BUYER = "Anonymous"
    NO_BIO = "No bio available"
    NO_PRODUCTS = "No products yet"
    NO_VIDEOS = "No videos yet"
    NO_REVIEWS = "No reviews yet"
    SELLER_NOT_FOUND = "Seller not found"
    OUT_OF_STOCK = "Out of stock"


class ErrorConstants:
    """Messages for rejected or failed operations."""

    NOT_SIGNED_IN = "A signed-in user and access token are required"
    EMPTY_COMMENT = "Review comment must not be empty"
    INVALID_RATING = "Rating must be an integer between 1 and 5"
