"""Pydantic request/response schemas for the Community API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class SubmitReviewRequest(BaseModel):
    entity_id: str
    user_id: str
    rating: int = Field(ge=1, le=5)
    title: str | None = Field(default=None, max_length=200)
    review_text: str = Field(min_length=1)


class EditReviewRequest(BaseModel):
    user_id: str
    rating: int | None = Field(default=None, ge=1, le=5)
    title: str | None = Field(default=None, max_length=200)
    review_text: str | None = Field(default=None, min_length=1)


class CreatePostRequest(BaseModel):
    user_id: str
    content: str = Field(min_length=1, max_length=5000)
    is_rate_enabled: bool = False


class EditPostRequest(BaseModel):
    user_id: str
    content: str = Field(min_length=1, max_length=5000)


class RatePostRequest(BaseModel):
    user_id: str
    rating: int = Field(ge=1, le=5)


class AddCommentRequest(BaseModel):
    user_id: str
    comment_text: str = Field(min_length=1, max_length=1000)
    entity_type: str = Field(pattern="^(post|review|comment)$")
    entity_id: str
    parent_comment_id: str | None = None


class EditCommentRequest(BaseModel):
    user_id: str
    comment_text: str = Field(min_length=1, max_length=1000)


class CastVoteRequest(BaseModel):
    user_id: str
    entity_type: str = Field(pattern="^(post|review)$")
    entity_id: str
    vote_type: str = Field(pattern="^(up|down)$")


class BulkVotesRequest(BaseModel):
    entity_type: str = Field(pattern="^(post|review)$")
    entity_ids: list[str] = Field(max_length=100)
    user_id: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class ReviewIdResponse(BaseModel):
    review_id: str


class PostIdResponse(BaseModel):
    post_id: str


class CommentIdResponse(BaseModel):
    comment_id: str


class ReviewResponse(BaseModel):
    review_id: str
    entity_id: str
    user_id: str
    rating: int
    title: str
    review_text: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]
    count: int


class PostResponse(BaseModel):
    post_id: str
    user_id: str
    post_type: str
    content: str
    title: str | None = None
    description: str | None = None
    average_rating: float = 0.0
    total_ratings: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PostListResponse(BaseModel):
    posts: list[PostResponse]
    count: int


class RatingEntry(BaseModel):
    user_id: str
    rating: int
    rated_at: datetime


class RatingInfoResponse(BaseModel):
    post_id: str
    average_rating: float
    total_ratings: int
    recent_ratings: list[RatingEntry]
    user_rating: int | None = None


class RatePostResponse(BaseModel):
    average_rating: float


class CommentResponse(BaseModel):
    comment_id: str
    user_id: str
    comment_text: str
    entity_type: str
    entity_id: str
    parent_comment_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CommentListResponse(BaseModel):
    comments: list[CommentResponse]
    count: int


class CommentTreeNode(CommentResponse):
    depth: int
    replies: list[CommentTreeNode] = []


CommentTreeNode.model_rebuild()


class CommentTreeResponse(BaseModel):
    comments: list[CommentTreeNode]
    count: int


class CommentStatsResponse(BaseModel):
    entity_type: str
    entity_id: str
    count: int


class VoteResponse(BaseModel):
    action: str


class VoteCountsResponse(BaseModel):
    upvotes: int
    downvotes: int
    score: int


class UserVoteResponse(BaseModel):
    vote_type: str | None = None


class BulkVoteEntry(VoteCountsResponse):
    user_vote: str | None = None


class BulkVotesResponse(BaseModel):
    votes: dict[str, BulkVoteEntry]
