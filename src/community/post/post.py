"""Post aggregate: simple posts and rate-my-work posts.

A rate-my-work post carries its title and description inside the content
as ``Title:`` and ``Description:`` lines and accepts 1-5 star ratings from
other users. Each rater holds one PostRating; the average and count are
kept on the post.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from community.domain import community
from community.post.events import PostCreated, PostDeleted, PostEdited, PostRated, PostRatingRemoved
from community.shared.content import ContentStatus, assert_active, preview


class PostType(Enum):
    SIMPLE = "simple"
    RATE_MY_WORK = "rate-my-work"


def parse_work_details(content):
    """Extract ``(title, description)`` from ``Title:`` / ``Description:`` lines.

    The description runs from the ``Description:`` line to the end of the
    content. Missing parts come back as None.
    """
    title = description = None
    lines = (content or "").split("\n")

    for index, line in enumerate(lines):
        if title is None and line.startswith("Title:"):
            title = line[len("Title:") :].strip() or None
        elif line.startswith("Description:"):
            rest = [line[len("Description:") :]] + lines[index + 1 :]
            description = "\n".join(rest).strip() or None
            break

    return title, description


@community.entity(part_of="Post")
class PostRating:
    """One user's star rating of a rate-my-work post."""

    user_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    rated_at = DateTime(required=True)


@community.aggregate
class Post:
    user_id = Identifier(required=True)
    content = Text(required=True)
    post_type = String(choices=PostType, default=PostType.SIMPLE.value)
    title = String(max_length=200)
    description = Text()
    status = String(choices=ContentStatus, default=ContentStatus.ACTIVE.value)

    ratings = HasMany(PostRating)
    average_rating = Float(default=0.0)
    total_ratings = Integer(default=0)

    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def content_length_is_bounded(self):
        if self.content is None:
            return
        if not self.content.strip():
            raise ValidationError({"content": ["Post content cannot be empty"]})
        if len(self.content) > 5000:
            raise ValidationError({"content": ["Post content cannot exceed 5000 characters"]})

    @classmethod
    def create(cls, user_id, content, is_rate_enabled=False):
        now = datetime.now(UTC)
        post_type = PostType.RATE_MY_WORK if is_rate_enabled else PostType.SIMPLE
        title, description = parse_work_details(content) if is_rate_enabled else (None, None)

        post = cls(
            user_id=user_id,
            content=content,
            post_type=post_type.value,
            title=title,
            description=description,
            status=ContentStatus.ACTIVE.value,
            average_rating=0.0,
            total_ratings=0,
            created_at=now,
            updated_at=now,
        )
        post.raise_(
            PostCreated(
                post_id=str(post.id),
                user_id=str(user_id),
                post_type=post_type.value,
                content=content,
                created_at=now,
            )
        )
        return post

    @property
    def is_active(self):
        return self.status == ContentStatus.ACTIVE.value

    @property
    def is_rate_enabled(self):
        return self.post_type == PostType.RATE_MY_WORK.value

    @property
    def preview_text(self):
        return preview(self.title or self.content)

    def edit(self, content):
        assert_active(self.status, "post")

        now = datetime.now(UTC)
        with atomic_change(self):
            self.content = content
            if self.is_rate_enabled:
                self.title, self.description = parse_work_details(content)
            self.updated_at = now

        self.raise_(PostEdited(post_id=str(self.id), content=self.content, edited_at=now))

    def delete(self):
        assert_active(self.status, "post")

        now = datetime.now(UTC)
        self.status = ContentStatus.DELETED.value
        self.updated_at = now

        self.raise_(PostDeleted(post_id=str(self.id), user_id=str(self.user_id), deleted_at=now))

    # -------------------------------------------------------------------
    # Ratings
    # -------------------------------------------------------------------
    def rating_by(self, user_id):
        return next((r for r in self.ratings if str(r.user_id) == str(user_id)), None)

    def _recompute_ratings(self):
        scores = [r.rating for r in self.ratings]
        self.total_ratings = len(scores)
        self.average_rating = round(sum(scores) / len(scores), 2) if scores else 0.0

    def rate(self, user_id, rating):
        """Add or replace ``user_id``'s rating."""
        assert_active(self.status, "post")
        if not self.is_rate_enabled:
            raise ValidationError({"rating": ["This post does not allow ratings"]})
        if str(user_id) == str(self.user_id):
            raise ValidationError({"rating": ["You cannot rate your own post"]})

        now = datetime.now(UTC)
        existing = self.rating_by(user_id)
        if existing is None:
            self.add_ratings(PostRating(user_id=user_id, rating=rating, rated_at=now))
        else:
            existing.rating = rating
            existing.rated_at = now

        self._recompute_ratings()
        self.updated_at = now

        self.raise_(
            PostRated(
                post_id=str(self.id),
                user_id=str(user_id),
                rating=rating,
                post_owner_id=str(self.user_id),
                preview=self.preview_text,
                rated_at=now,
            )
        )

    def remove_rating(self, user_id):
        existing = self.rating_by(user_id)
        if existing is None:
            raise ValidationError({"rating": ["You have not rated this post"]})

        now = datetime.now(UTC)
        self.remove_ratings(existing)
        self._recompute_ratings()
        self.updated_at = now

        self.raise_(PostRatingRemoved(post_id=str(self.id), user_id=str(user_id), removed_at=now))
