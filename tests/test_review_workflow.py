"""Tests for ReviewWorkflow."""

import pytest

from adeylink.core.models import ReviewDraft
from adeylink.services.remote_client import RemoteError
from adeylink.services.review_workflow import ReviewWorkflow

from conftest import make_review, responses


@pytest.fixture
def workflow(client, aggregator, auth):
    return ReviewWorkflow(client, aggregator, auth)


@pytest.mark.asyncio
async def test_submit_refetches_reviews_and_recomputes_average(client, aggregator, workflow):
    """Two reviews (4, 5) average 4.5; after adding a 3 the server returns three, averaging 4.0."""
    profile = await aggregator.load("S1")
    assert profile.average_rating == 4.5

    client.routes[("POST", "/reviews")] = {"id": "R3"}
    client.routes[("GET", "/seller/S1/reviews")] = [
        make_review("R1", 4), make_review("R2", 5), make_review("R3", 3),
    ]
    draft = ReviewDraft(rating=3, comment="Arrived late but well made")

    assert await workflow.submit_review(profile, "S1", draft, "user-token") is True

    assert profile.review_count == 3
    assert profile.average_rating == 4.0
    assert client.calls[-2] == (
        "POST", "/reviews", "user-token",
        {"sellerId": "S1", "rating": 3, "comment": "Arrived late but well made"},
    )
    assert draft == ReviewDraft()
    assert draft.rating == 5


@pytest.mark.asyncio
async def test_reviews_replaced_not_appended(client, aggregator, workflow):
    """The refreshed list is whatever the server returns, in its order."""
    profile = await aggregator.load("S1")
    client.routes[("POST", "/reviews")] = {}
    client.routes[("GET", "/seller/S1/reviews")] = [make_review("R9", 1)]

    await workflow.submit_review(profile, "S1", ReviewDraft(rating=2, comment="meh"), "user-token")

    assert [r.id for r in profile.reviews] == ["R9"]
    assert profile.average_rating == 1.0


@pytest.mark.asyncio
@pytest.mark.parametrize("comment", ["", "   ", "\n\t"])
async def test_blank_comment_sends_nothing(client, aggregator, workflow, comment):
    profile = await aggregator.load("S1")
    before = list(profile.reviews)
    calls = len(client.calls)
    draft = ReviewDraft(rating=4, comment=comment)

    assert await workflow.submit_review(profile, "S1", draft, "user-token") is False

    assert len(client.calls) == calls
    assert profile.reviews == before
    assert draft.rating == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, 6, 2.5])
async def test_invalid_rating_sends_nothing(client, aggregator, workflow, rating):
    profile = await aggregator.load("S1")
    calls = len(client.calls)

    assert await workflow.submit_review(profile, "S1", ReviewDraft(rating=rating, comment="ok"), "user-token") is False
    assert len(client.calls) == calls


@pytest.mark.asyncio
async def test_requires_signed_in_user(client, aggregator, anonymous):
    profile = await aggregator.load("S1")
    calls = len(client.calls)
    workflow = ReviewWorkflow(client, aggregator, anonymous)

    assert await workflow.submit_review(profile, "S1", ReviewDraft(comment="hi"), "user-token") is False
    assert len(client.calls) == calls


@pytest.mark.asyncio
async def test_failed_submit_keeps_draft(client, aggregator, workflow):
    profile = await aggregator.load("S1")
    client.routes[("POST", "/reviews")] = RemoteError("server error", 500)
    draft = ReviewDraft(rating=2, comment="Never arrived")

    assert await workflow.submit_review(profile, "S1", draft, "user-token") is False

    assert draft == ReviewDraft(rating=2, comment="Never arrived")
    assert [r.id for r in profile.reviews] == ["R1", "R2"]
    assert client.paths("GET").count("/seller/S1/reviews") == 1


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_reviews(client, aggregator, workflow):
    client.routes[("GET", "/seller/S1/reviews")] = responses(
        [make_review("R1", 4), make_review("R2", 5)],
        RemoteError("flaky", 502),
    )
    profile = await aggregator.load("S1")
    client.routes[("POST", "/reviews")] = {}
    draft = ReviewDraft(rating=5, comment="Great")

    assert await workflow.submit_review(profile, "S1", draft, "user-token") is True

    assert draft.comment == ""
    assert [r.id for r in profile.reviews] == ["R1", "R2"]
