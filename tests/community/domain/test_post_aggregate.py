import pytest
from community.post.events import PostCreated, PostRated, PostRatingRemoved
from community.post.post import Post, PostType, parse_work_details
from protean.exceptions import ValidationError

WORK = "Title: My Sketch\nDescription: Pencil on paper.\nTook two hours."


class TestParseWorkDetails:
    def test_title_and_multiline_description(self):
        assert parse_work_details(WORK) == ("My Sketch", "Pencil on paper.\nTook two hours.")

    def test_missing_parts(self):
        assert parse_work_details("Just some text") == (None, None)
        assert parse_work_details("Title: Only a title") == ("Only a title", None)

    def test_empty_content(self):
        assert parse_work_details(None) == (None, None)


class TestCreate:
    def test_simple_post(self):
        post = Post.create(user_id="user-1", content="Hello world")
        assert post.post_type == PostType.SIMPLE.value
        assert post.title is None
        assert isinstance(post._events[0], PostCreated)

    def test_rate_my_work_post(self):
        post = Post.create(user_id="user-1", content=WORK, is_rate_enabled=True)
        assert post.post_type == PostType.RATE_MY_WORK.value
        assert post.title == "My Sketch"
        assert post.preview_text == "My Sketch"

    def test_content_limits(self):
        with pytest.raises(ValidationError):
            Post.create(user_id="user-1", content="   ")
        with pytest.raises(ValidationError):
            Post.create(user_id="user-1", content="x" * 5001)

    def test_edit_reparses_work_details(self):
        post = Post.create(user_id="user-1", content=WORK, is_rate_enabled=True)
        post.edit("Title: New Title\nDescription: New")
        assert post.title == "New Title"
        assert post.description == "New"


class TestRatings:
    @pytest.fixture()
    def post(self):
        post = Post.create(user_id="owner", content=WORK, is_rate_enabled=True)
        post._events.clear()
        return post

    def test_rate_adds_rating(self, post):
        post.rate("rater-1", 4)
        post.rate("rater-2", 5)

        assert post.total_ratings == 2
        assert post.average_rating == 4.5
        event = post._events[-1]
        assert isinstance(event, PostRated)
        assert event.post_owner_id == "owner"

    def test_rating_again_replaces(self, post):
        post.rate("rater-1", 1)
        post.rate("rater-1", 3)

        assert post.total_ratings == 1
        assert post.average_rating == 3.0

    def test_average_is_rounded(self, post):
        for rater, score in [("a", 5), ("b", 4), ("c", 4)]:
            post.rate(rater, score)
        assert post.average_rating == 4.33

    def test_cannot_rate_own_post(self, post):
        with pytest.raises(ValidationError) as exc:
            post.rate("owner", 5)
        assert exc.value.messages["rating"] == ["You cannot rate your own post"]

    def test_simple_posts_refuse_ratings(self):
        post = Post.create(user_id="owner", content="Hello")
        with pytest.raises(ValidationError) as exc:
            post.rate("rater-1", 5)
        assert exc.value.messages["rating"] == ["This post does not allow ratings"]

    def test_remove_rating(self, post):
        post.rate("rater-1", 4)
        post.remove_rating("rater-1")

        assert post.total_ratings == 0
        assert post.average_rating == 0.0
        assert isinstance(post._events[-1], PostRatingRemoved)

    def test_remove_missing_rating(self, post):
        with pytest.raises(ValidationError) as exc:
            post.remove_rating("rater-1")
        assert exc.value.messages["rating"] == ["You have not rated this post"]
