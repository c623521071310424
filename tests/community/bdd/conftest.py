"""Shared BDD fixtures and step definitions for the Community domain."""

import pytest
from community.post.events import PostRated, PostRatingRemoved
from community.post.post import Post
from community.vote.vote import Vote
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_EVENT_CLASSES = {
    "PostRated": PostRated,
    "PostRatingRemoved": PostRatingRemoved,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a rate-my-work post by "{owner}"'), target_fixture="post")
def rate_my_work_post(owner):
    post = Post.create(user_id=owner, content="Title: Sketch\nDescription: Charcoal", is_rate_enabled=True)
    post._events.clear()
    return post


@given(parsers.cfparse('a simple post by "{owner}"'), target_fixture="post")
def simple_post(owner):
    post = Post.create(user_id=owner, content="Just sharing")
    post._events.clear()
    return post


@given(parsers.cfparse('"{user_id}" has not voted on post "{post_id}"'), target_fixture="vote")
def fresh_vote(user_id, post_id):
    return Vote.open(user_id=user_id, entity_type="post", entity_id=post_id, vote_type="up")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("a {event_type} event is raised"))
def event_is_raised(post, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(isinstance(e, event_cls) for e in post._events)
