"""Basic usage examples for AdeyLink."""

import asyncio
import os

from adeylink.core.auth import AuthSession
from adeylink.core.models import CurrentUser
from adeylink.core.navigation import NavigationController, SellerView
from adeylink.services import (
    FollowWorkflow,
    ProfileDataAggregator,
    RemoteClient,
    ReviewWorkflow,
    ScreenState,
    SellerProfileScreen,
)


async def example_seller_profile(seller_id: str):
    """Example: open a seller profile, follow them and leave a review."""
    auth = AuthSession()
    if os.getenv("ADEYLINK_USER_ID") and os.getenv("ADEYLINK_ACCESS_TOKEN"):
        auth.sign_in(CurrentUser(id=os.environ["ADEYLINK_USER_ID"]), os.environ["ADEYLINK_ACCESS_TOKEN"])

    client = RemoteClient()
    aggregator = ProfileDataAggregator(client)
    navigation = NavigationController()
    navigation.navigate(SellerView(seller_id))

    screen = SellerProfileScreen(
        seller_id=seller_id,
        auth=auth,
        navigation=navigation,
        aggregator=aggregator,
        follow=FollowWorkflow(client, auth),
        reviews=ReviewWorkflow(client, aggregator, auth),
    )
    await screen.mount()

    if screen.state is ScreenState.NOT_FOUND:
        print(f"Seller {seller_id} not found")
        return

    profile = screen.profile
    print(f"{profile.seller.name}: {profile.average_rating:.1f} ({profile.review_count} reviews)")

    if screen.can_follow:
        following = await screen.toggle_follow()
        print(f"Following: {following} ({profile.seller.followers} followers)")

    if screen.can_review:
        screen.set_rating(4)
        screen.set_comment("Lovely work, quick delivery")
        if await screen.submit_review():
            print(f"New average: {profile.average_rating:.1f}")

    # Product overlay, then a seller link inside it
    if profile.products:
        screen.open_product(profile.products[0].id)
        navigation.open_seller_from_modal(seller_id)
        print(f"View: {navigation.view}, overlay: {navigation.product_modal}")

    screen.unmount()


if __name__ == "__main__":
    asyncio.run(example_seller_profile(os.getenv("ADEYLINK_SELLER_ID", "demo-seller")))
