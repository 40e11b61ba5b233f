"""
Navigation state for the AdeyLink client.

The active screen is a single ``View`` value drawn from a closed set of
variants. The product detail overlay is a separate optional value. Both are
plain assignments: nothing is rejected and the last write wins, so callers
pick valid combinations themselves.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

logger = logging.getLogger(__name__)

__all__ = [
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


@dataclass(frozen=True)
class HomeView:
    type = "home"

    def back_target(self) -> "View":
        return self


@dataclass(frozen=True)
class CategoryView:
    category: str
    type = "category"

    def back_target(self) -> "View":
        return HomeView()


@dataclass(frozen=True)
class VideosView:
    category: str
    type = "videos"

    def back_target(self) -> "View":
        return CategoryView(self.category)


@dataclass(frozen=True)
class SellerView:
    seller_id: str
    type = "seller"

    def back_target(self) -> "View":
        return HomeView()


@dataclass(frozen=True)
class CartView:
    type = "cart"

    def back_target(self) -> "View":
        return HomeView()


@dataclass(frozen=True)
class MessagingView:
    user_id: Optional[str] = None
    type = "messaging"

    def back_target(self) -> "View":
        return HomeView()


View = Union[HomeView, CategoryView, VideosView, SellerView, CartView, MessagingView]

# Full-screen views that draw their own header
_NAVLESS_VIEWS = (VideosView, MessagingView)


@dataclass(frozen=True)
class ProductModal:
    """Product detail overlay."""
    product_id: str
    seller_id: str


class NavigationController:
    """Owns the active view and the optional product overlay."""

    def __init__(self, initial: Optional[View] = None):
        self.view: View = initial if initial is not None else HomeView()
        self.product_modal: Optional[ProductModal] = None

    def navigate(self, view: View) -> None:
        """Replace the active view. The overlay is left as is."""
        logger.debug(f"navigate {self.view} -> {view}")
        self.view = view

    def open_product_modal(self, product_id: str, seller_id: str) -> None:
        self.product_modal = ProductModal(product_id=product_id, seller_id=seller_id)

    def close_product_modal(self) -> None:
        self.product_modal = None

    def open_seller_from_modal(self, seller_id: str) -> None:
        """Follow a seller link inside the overlay.

        The overlay is cleared first so the new view never renders with a
        modal for a product it does not own.
        """
        self.close_product_modal()
        self.navigate(SellerView(seller_id))

    def back(self) -> None:
        """Go to the active view's declared back target."""
        self.navigate(self.view.back_target())

    # Top bar and screen shortcuts

    def go_home(self) -> None:
        self.navigate(HomeView())

    def go_cart(self) -> None:
        self.navigate(CartView())

    def go_messaging(self, user_id: Optional[str] = None) -> None:
        self.navigate(MessagingView(user_id))

    def go_my_profile(self, user_id: str) -> None:
        self.navigate(SellerView(user_id))

    def open_category(self, category: str) -> None:
        self.navigate(CategoryView(category))

    def open_videos(self, category: str) -> None:
        self.navigate(VideosView(category))

    def open_seller(self, seller_id: str) -> None:
        self.navigate(SellerView(seller_id))

    @property
    def show_nav(self) -> bool:
        return not isinstance(self.view, _NAVLESS_VIEWS)

    def overlay_matches_view(self) -> bool:
        """True when there is no overlay or it belongs to the active seller view.

        Informational only; transitions are never blocked on it.
        """
        if self.product_modal is None:
            return True
        return isinstance(self.view, SellerView) and self.view.seller_id == self.product_modal.seller_id
