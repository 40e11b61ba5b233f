"""Command-line interface for AdeyLink."""

import argparse
import asyncio
import logging
import sys

from .core.auth import AuthSession
from .core.config import settings
from .core.constants import DisplayConstants
from .core.models import CurrentUser, ProfileViewModel
from .core.navigation import NavigationController, SellerView
from .core.scoring import format_rating
from .services.follow_workflow import FollowWorkflow
from .services.profile_aggregator import ProfileDataAggregator
from .services.remote_client import RemoteClient
from .services.review_workflow import ReviewWorkflow
from .services.seller_profile import ScreenState, SellerProfileScreen
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_screen(args, client: RemoteClient = None) -> SellerProfileScreen:
    """Wire a seller profile screen from CLI arguments."""
    auth = AuthSession()
    user_id = args.user_id or settings.user_id
    token = args.token or settings.access_token
    if user_id and token:
        auth.sign_in(CurrentUser(id=user_id), token)

    client = client or RemoteClient()
    aggregator = ProfileDataAggregator(client)
    navigation = NavigationController(SellerView(args.seller_id))
    return SellerProfileScreen(
        seller_id=args.seller_id,
        auth=auth,
        navigation=navigation,
        aggregator=aggregator,
        follow=FollowWorkflow(client, auth),
        reviews=ReviewWorkflow(client, aggregator, auth),
    )


def format_profile(profile: ProfileViewModel) -> str:
    """Render a loaded profile as plain text."""
    seller = profile.seller
    if seller is None:
        return DisplayConstants.SELLER_NOT_FOUND

    lines = [
        seller.name,
        f"  Rating: {format_rating(profile.average_rating)} ({profile.review_count} reviews)",
        f"  Followers: {seller.followers}",
    ]
    if seller.location.city:
        lines.append(f"  Location: {seller.location.city}")
    lines.append(f"  {seller.bio or DisplayConstants.NO_BIO}")
    if seller.interests:
        lines.append(f"  Interests: {', '.join(seller.interests)}")

    lines.append(f"\nProducts ({len(profile.products)}):")
    if not profile.products:
        lines.append(f"  {DisplayConstants.NO_PRODUCTS}")
    for product in profile.products:
        stock = "" if product.available else f" [{DisplayConstants.OUT_OF_STOCK}]"
        lines.append(f"  - {product.title}: ${product.price:.2f}{stock}")

    lines.append(f"\nVideos ({len(profile.videos)}):")
    if not profile.videos:
        lines.append(f"  {DisplayConstants.NO_VIDEOS}")
    for video in profile.videos:
        lines.append(f"  - {video.title} ({video.likes} likes, {video.comment_count} comments)")

    lines.append(f"\nReviews ({profile.review_count}):")
    if not profile.reviews:
        lines.append(f"  {DisplayConstants.NO_REVIEWS}")
    for review in profile.reviews:
        when = review.created_at.date().isoformat() if review.created_at else ""
        lines.append(f"  - {review.rating}/5 {review.buyer_name} {when}".rstrip())
        lines.append(f"    {review.comment}")
    return "\n".join(lines)


async def cmd_profile(args, client: RemoteClient = None) -> int:
    """Profile command."""
    screen = build_screen(args, client)
    await screen.mount()

    print(format_profile(screen.profile))
    if screen.state is ScreenState.NOT_FOUND:
        return 1
    if screen.can_follow:
        print(f"\nFollowing: {'yes' if screen.profile.is_following else 'no'}")

    if args.out:
        export_to_json(prepare_export(screen.profile), args.out)
        print(f"Profile exported to {args.out}")
    return 0


async def cmd_follow(args, client: RemoteClient = None) -> int:
    """Follow command."""
    screen = build_screen(args, client)
    if not screen.auth.is_authenticated:
        print("Sign-in required: pass --user-id and --token")
        return 1

    await screen.mount()
    if screen.state is ScreenState.NOT_FOUND:
        print(DisplayConstants.SELLER_NOT_FOUND)
        return 1
    if not screen.can_follow:
        print("You cannot follow yourself")
        return 1

    following = await screen.toggle_follow()
    if following is None:
        print("Follow request failed")
        return 1
    print(f"{'Following' if following else 'Not following'} {screen.profile.seller.name} "
          f"({screen.profile.seller.followers} followers)")
    return 0


async def cmd_review(args, client: RemoteClient = None) -> int:
    """Review command."""
    screen = build_screen(args, client)
    if not screen.auth.is_authenticated:
        print("Sign-in required: pass --user-id and --token")
        return 1

    await screen.mount()
    if screen.state is ScreenState.NOT_FOUND:
        print(DisplayConstants.SELLER_NOT_FOUND)
        return 1
    if not screen.can_review:
        print("You cannot review yourself")
        return 1

    screen.set_rating(args.rating)
    screen.set_comment(args.comment)
    if not await screen.submit_review():
        print("Review was not submitted")
        return 1
    profile = screen.profile
    print(f"Review submitted. Rating: {format_rating(profile.average_rating)} "
          f"({profile.review_count} reviews)")
    return 0


COMMANDS = {
    'profile': cmd_profile,
    'follow': cmd_follow,
    'review': cmd_review,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AdeyLink - marketplace seller profiles")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    auth_args = argparse.ArgumentParser(add_help=False)
    auth_args.add_argument('--user-id', help='Signed-in user ID (default: ADEYLINK_USER_ID)')
    auth_args.add_argument('--token', help='Access token (default: ADEYLINK_ACCESS_TOKEN)')

    # Profile command
    profile_parser = subparsers.add_parser('profile', parents=[auth_args], help='Show a seller profile')
    profile_parser.add_argument('seller_id', help='Seller ID')
    profile_parser.add_argument('--out', help='Output JSON file')

    # Follow command
    follow_parser = subparsers.add_parser('follow', parents=[auth_args], help='Follow or unfollow a seller')
    follow_parser.add_argument('seller_id', help='Seller ID')

    # Review command
    review_parser = subparsers.add_parser('review', parents=[auth_args], help='Review a seller')
    review_parser.add_argument('seller_id', help='Seller ID')
    review_parser.add_argument('--rating', type=int, default=5, help='Star rating 1-5')
    review_parser.add_argument('--comment', required=True, help='Review text')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        code = asyncio.run(COMMANDS[args.command](args))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        code = 130
    sys.exit(code)
