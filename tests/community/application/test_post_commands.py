"""Application tests for posts and post ratings."""

import pytest
from community.post.authoring import CreatePost, DeletePost, EditPost, active_posts, load_post, top_rated_posts
from community.post.rating import RatePost, RemovePostRating, rating_summary
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _post(user_id="owner", content="Title: Sketch\nDescription: Pencil", rate=True):
    return current_domain.process(
        CreatePost(user_id=user_id, content=content, is_rate_enabled=rate),
        asynchronous=False,
    )


def _rate(post_id, user_id, rating):
    return current_domain.process(RatePost(post_id=post_id, user_id=user_id, rating=rating), asynchronous=False)


class TestPosts:
    def test_create_and_feed(self):
        first = _post(rate=False, content="First")
        second = _post(rate=False, content="Second")

        assert [str(p.id) for p in active_posts()] == [second, first]

    def test_owner_edits(self):
        post_id = _post()
        current_domain.process(
            EditPost(post_id=post_id, user_id="owner", content="Title: Renamed"),
            asynchronous=False,
        )
        assert load_post(post_id).title == "Renamed"

    def test_stranger_cannot_edit(self):
        post_id = _post()
        with pytest.raises(ValidationError):
            current_domain.process(EditPost(post_id=post_id, user_id="other", content="Hi"), asynchronous=False)

    def test_delete_hides_post(self):
        post_id = _post()
        current_domain.process(DeletePost(post_id=post_id, user_id="owner"), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            load_post(post_id)
        assert active_posts() == []


class TestRatings:
    def test_rate_returns_new_average(self):
        post_id = _post()
        assert _rate(post_id, "rater-1", 4) == 4.0
        assert _rate(post_id, "rater-2", 3) == 3.5

    def test_summary(self):
        post_id = _post()
        for i in range(7):
            _rate(post_id, f"rater-{i}", 5)

        summary = rating_summary(load_post(post_id), "rater-3")
        assert summary["total_ratings"] == 7
        assert len(summary["recent_ratings"]) == 5
        assert summary["user_rating"] == 5

    def test_remove_rating(self):
        post_id = _post()
        _rate(post_id, "rater-1", 4)
        current_domain.process(RemovePostRating(post_id=post_id, user_id="rater-1"), asynchronous=False)

        assert load_post(post_id).total_ratings == 0

    def test_rating_persists_per_user(self):
        post_id = _post()
        _rate(post_id, "rater-1", 1)
        _rate(post_id, "rater-1", 5)

        post = load_post(post_id)
        assert post.total_ratings == 1
        assert post.rating_by("rater-1").rating == 5


class TestTopRated:
    def test_ordering(self):
        low = _post()
        high = _post()
        tied = _post()
        _post()  # unrated posts are left out
        _rate(low, "r1", 2)
        _rate(high, "r1", 5)
        _rate(high, "r2", 5)
        _rate(tied, "r1", 5)

        assert [str(p.id) for p in top_rated_posts()] == [high, tied, low]

    def test_limit(self):
        for _ in range(3):
            _rate(_post(), "r1", 4)
        assert len(top_rated_posts(limit=2)) == 2
