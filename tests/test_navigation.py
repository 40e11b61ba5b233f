"""Tests for the navigation state machine."""

import pytest

from adeylink.core.navigation import (
    CartView,
    CategoryView,
    HomeView,
    MessagingView,
    NavigationController,
    ProductModal,
    SellerView,
    VideosView,
)


def test_starts_home_without_overlay(navigation):
    assert navigation.view == HomeView()
    assert navigation.product_modal is None


def test_navigate_replaces_unconditionally(navigation):
    navigation.navigate(CartView())
    navigation.navigate(SellerView("S1"))
    navigation.navigate(SellerView("S1"))
    assert navigation.view == SellerView("S1")


def test_navigate_leaves_overlay_alone(navigation):
    navigation.navigate(SellerView("S1"))
    navigation.open_product_modal("P1", "S1")
    navigation.navigate(CartView())
    assert navigation.product_modal == ProductModal("P1", "S1")
    assert not navigation.overlay_matches_view()


def test_modal_open_and_close(navigation):
    navigation.open_product_modal("P1", "S1")
    assert navigation.product_modal == ProductModal(product_id="P1", seller_id="S1")
    navigation.close_product_modal()
    assert navigation.product_modal is None


def test_seller_link_in_modal_clears_overlay_and_navigates(navigation):
    navigation.navigate(SellerView("S1"))
    navigation.open_product_modal("P1", "S1")
    assert navigation.overlay_matches_view()

    navigation.open_seller_from_modal("S2")

    assert navigation.product_modal is None
    assert navigation.view == SellerView(seller_id="S2")


@pytest.mark.parametrize("view,target", [
    (HomeView(), HomeView()),
    (CategoryView("art"), HomeView()),
    (VideosView("art"), CategoryView("art")),
    (SellerView("S1"), HomeView()),
    (CartView(), HomeView()),
    (MessagingView("S1"), HomeView()),
])
def test_back_targets(view, target):
    navigation = NavigationController(view)
    navigation.back()
    assert navigation.view == target


def test_back_is_not_a_history_pop():
    navigation = NavigationController()
    navigation.open_category("art")
    navigation.open_seller("S1")
    navigation.back()
    assert navigation.view == HomeView()


def test_shortcuts(navigation):
    navigation.go_cart()
    assert navigation.view == CartView()
    navigation.go_messaging()
    assert navigation.view == MessagingView(user_id=None)
    navigation.go_my_profile("U1")
    assert navigation.view == SellerView("U1")
    navigation.open_videos("food")
    assert navigation.view == VideosView("food")
    navigation.go_home()
    assert navigation.view == HomeView()


@pytest.mark.parametrize("view,shown", [
    (HomeView(), True),
    (CategoryView("art"), True),
    (SellerView("S1"), True),
    (CartView(), True),
    (VideosView("art"), False),
    (MessagingView(), False),
])
def test_show_nav(view, shown):
    assert NavigationController(view).show_nav is shown


def test_view_type_tags():
    assert HomeView().type == "home"
    assert SellerView("S1").type == "seller"
    assert MessagingView().type == "messaging"
