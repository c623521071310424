"""FastAPI routes for the Community bounded context.

Reviews, posts, comments and votes. Mutations go through commands; reads
query the aggregates directly, skipping deleted content.
"""

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from community.api.schemas import (
    AddCommentRequest,
    BulkVotesRequest,
    BulkVotesResponse,
    CastVoteRequest,
    CommentIdResponse,
    CommentListResponse,
    CommentResponse,
    CommentStatsResponse,
    CommentTreeNode,
    CommentTreeResponse,
    CreatePostRequest,
    EditCommentRequest,
    EditPostRequest,
    EditReviewRequest,
    PostIdResponse,
    PostListResponse,
    PostResponse,
    RatePostRequest,
    RatePostResponse,
    RatingEntry,
    RatingInfoResponse,
    ReviewIdResponse,
    ReviewListResponse,
    ReviewResponse,
    StatusResponse,
    SubmitReviewRequest,
    UserVoteResponse,
    VoteCountsResponse,
    VoteResponse,
)
from community.comment.commenting import (
    AddComment,
    DeleteComment,
    EditComment,
    comments_for,
    load_comment,
    replies_to,
)
from community.comment.threads import build_comment_tree
from community.post.authoring import CreatePost, DeletePost, EditPost, active_posts, load_post, top_rated_posts
from community.post.rating import RatePost, RemovePostRating, rating_summary
from community.review.authoring import DeleteReview, EditReview, SubmitReview, active_reviews, load_review
from community.vote.voting import CastVote, bulk_votes, user_vote, vote_counts

review_router = APIRouter(prefix="/reviews", tags=["reviews"])
post_router = APIRouter(prefix="/posts", tags=["posts"])
comment_router = APIRouter(prefix="/comments", tags=["comments"])
vote_router = APIRouter(prefix="/votes", tags=["votes"])


def _review(review) -> ReviewResponse:
    return ReviewResponse(
        review_id=str(review.id),
        entity_id=str(review.entity_id),
        user_id=str(review.user_id),
        rating=review.rating,
        title=review.title,
        review_text=review.review_text,
        created_at=review.created_at,
        updated_at=review.updated_at,
    )


def _reviews(reviews) -> ReviewListResponse:
    return ReviewListResponse(reviews=[_review(r) for r in reviews], count=len(reviews))


def _post(post) -> PostResponse:
    return PostResponse(
        post_id=str(post.id),
        user_id=str(post.user_id),
        post_type=post.post_type,
        content=post.content,
        title=post.title,
        description=post.description,
        average_rating=post.average_rating or 0.0,
        total_ratings=post.total_ratings or 0,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def _posts(posts) -> PostListResponse:
    return PostListResponse(posts=[_post(p) for p in posts], count=len(posts))


def _comment_fields(comment) -> dict:
    return {
        "comment_id": str(comment.id),
        "user_id": str(comment.user_id),
        "comment_text": comment.comment_text,
        "entity_type": comment.entity_type,
        "entity_id": str(comment.entity_id),
        "parent_comment_id": str(comment.parent_comment_id) if comment.parent_comment_id else None,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def _comments(comments) -> CommentListResponse:
    return CommentListResponse(
        comments=[CommentResponse(**_comment_fields(c)) for c in comments],
        count=len(comments),
    )


def _tree_node(node) -> CommentTreeNode:
    return CommentTreeNode(
        **_comment_fields(node["comment"]),
        depth=node["depth"],
        replies=[_tree_node(child) for child in node["replies"]],
    )


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
@review_router.post("", status_code=201, response_model=ReviewIdResponse)
async def submit_review(body: SubmitReviewRequest) -> ReviewIdResponse:
    command = SubmitReview(
        entity_id=body.entity_id,
        user_id=body.user_id,
        rating=body.rating,
        title=body.title,
        review_text=body.review_text,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=review_id)


@review_router.get("", response_model=ReviewListResponse)
async def list_reviews() -> ReviewListResponse:
    return _reviews(active_reviews())


@review_router.get("/user/{user_id}", response_model=ReviewListResponse)
async def list_user_reviews(user_id: str) -> ReviewListResponse:
    return _reviews(active_reviews(user_id=user_id))


@review_router.get("/entity/{entity_id}", response_model=ReviewListResponse)
async def list_entity_reviews(entity_id: str) -> ReviewListResponse:
    return _reviews(active_reviews(entity_id=entity_id))


@review_router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str) -> ReviewResponse:
    return _review(load_review(review_id))


@review_router.put("/{review_id}", response_model=StatusResponse)
async def edit_review(review_id: str, body: EditReviewRequest) -> StatusResponse:
    command = EditReview(
        review_id=review_id,
        user_id=body.user_id,
        rating=body.rating,
        title=body.title,
        review_text=body.review_text,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@review_router.delete("/{review_id}", response_model=StatusResponse)
async def delete_review(review_id: str, user_id: str = Query()) -> StatusResponse:
    current_domain.process(DeleteReview(review_id=review_id, user_id=user_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------
@post_router.post("", status_code=201, response_model=PostIdResponse)
async def create_post(body: CreatePostRequest) -> PostIdResponse:
    command = CreatePost(
        user_id=body.user_id,
        content=body.content,
        is_rate_enabled=body.is_rate_enabled,
    )
    post_id = current_domain.process(command, asynchronous=False)
    return PostIdResponse(post_id=post_id)


@post_router.get("", response_model=PostListResponse)
async def feed() -> PostListResponse:
    """All live posts, newest first."""
    return _posts(active_posts())


@post_router.get("/top-rated", response_model=PostListResponse)
async def top_rated() -> PostListResponse:
    return _posts(top_rated_posts())


@post_router.get("/user/{user_id}", response_model=PostListResponse)
async def list_user_posts(user_id: str) -> PostListResponse:
    return _posts(active_posts(user_id=user_id))


@post_router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str) -> PostResponse:
    return _post(load_post(post_id))


@post_router.put("/{post_id}", response_model=StatusResponse)
async def edit_post(post_id: str, body: EditPostRequest) -> StatusResponse:
    command = EditPost(post_id=post_id, user_id=body.user_id, content=body.content)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@post_router.delete("/{post_id}", response_model=StatusResponse)
async def delete_post(post_id: str, user_id: str = Query()) -> StatusResponse:
    current_domain.process(DeletePost(post_id=post_id, user_id=user_id), asynchronous=False)
    return StatusResponse()


@post_router.post("/{post_id}/ratings", response_model=RatePostResponse)
async def rate_post(post_id: str, body: RatePostRequest) -> RatePostResponse:
    command = RatePost(post_id=post_id, user_id=body.user_id, rating=body.rating)
    average = current_domain.process(command, asynchronous=False)
    return RatePostResponse(average_rating=average)


@post_router.delete("/{post_id}/ratings", response_model=StatusResponse)
async def remove_post_rating(post_id: str, user_id: str = Query()) -> StatusResponse:
    current_domain.process(RemovePostRating(post_id=post_id, user_id=user_id), asynchronous=False)
    return StatusResponse()


@post_router.get("/{post_id}/ratings", response_model=RatingInfoResponse)
async def get_post_ratings(post_id: str, user_id: str | None = None) -> RatingInfoResponse:
    summary = rating_summary(load_post(post_id), user_id)
    return RatingInfoResponse(
        post_id=post_id,
        average_rating=summary["average_rating"],
        total_ratings=summary["total_ratings"],
        recent_ratings=[
            RatingEntry(user_id=str(r.user_id), rating=r.rating, rated_at=r.rated_at)
            for r in summary["recent_ratings"]
        ],
        user_rating=summary["user_rating"],
    )


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------
@comment_router.post("", status_code=201, response_model=CommentIdResponse)
async def add_comment(body: AddCommentRequest) -> CommentIdResponse:
    command = AddComment(
        user_id=body.user_id,
        comment_text=body.comment_text,
        entity_type=body.entity_type,
        entity_id=body.entity_id,
        parent_comment_id=body.parent_comment_id,
    )
    comment_id = current_domain.process(command, asynchronous=False)
    return CommentIdResponse(comment_id=comment_id)


@comment_router.get("/entity/{entity_type}/{entity_id}", response_model=CommentListResponse)
async def list_comments(entity_type: str, entity_id: str) -> CommentListResponse:
    return _comments(comments_for(entity_type, entity_id))


@comment_router.get("/entity/{entity_type}/{entity_id}/tree", response_model=CommentTreeResponse)
async def comment_tree(entity_type: str, entity_id: str) -> CommentTreeResponse:
    comments = comments_for(entity_type, entity_id)
    return CommentTreeResponse(
        comments=[_tree_node(node) for node in build_comment_tree(comments)],
        count=len(comments),
    )


@comment_router.get("/entity/{entity_type}/{entity_id}/stats", response_model=CommentStatsResponse)
async def comment_stats(entity_type: str, entity_id: str) -> CommentStatsResponse:
    comments = comments_for(entity_type, entity_id)
    return CommentStatsResponse(entity_type=entity_type, entity_id=entity_id, count=len(comments))


@comment_router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: str) -> CommentResponse:
    return CommentResponse(**_comment_fields(load_comment(comment_id)))


@comment_router.get("/{comment_id}/replies", response_model=CommentListResponse)
async def list_replies(comment_id: str) -> CommentListResponse:
    load_comment(comment_id)
    return _comments(replies_to(comment_id))


@comment_router.put("/{comment_id}", response_model=StatusResponse)
async def edit_comment(comment_id: str, body: EditCommentRequest) -> StatusResponse:
    command = EditComment(comment_id=comment_id, user_id=body.user_id, comment_text=body.comment_text)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@comment_router.delete("/{comment_id}", response_model=StatusResponse)
async def delete_comment(comment_id: str, user_id: str = Query()) -> StatusResponse:
    current_domain.process(DeleteComment(comment_id=comment_id, user_id=user_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Votes
# ---------------------------------------------------------------------------
@vote_router.post("", response_model=VoteResponse)
async def cast_vote(body: CastVoteRequest) -> VoteResponse:
    command = CastVote(
        user_id=body.user_id,
        entity_type=body.entity_type,
        entity_id=body.entity_id,
        vote_type=body.vote_type,
    )
    action = current_domain.process(command, asynchronous=False)
    return VoteResponse(action=action)


@vote_router.post("/bulk", response_model=BulkVotesResponse)
async def get_bulk_votes(body: BulkVotesRequest) -> BulkVotesResponse:
    """Counts and the caller's vote for several targets at once."""
    return BulkVotesResponse(votes=bulk_votes(body.entity_type, body.entity_ids, body.user_id))


@vote_router.get("/{entity_type}/{entity_id}", response_model=VoteCountsResponse)
async def get_vote_counts(entity_type: str, entity_id: str) -> VoteCountsResponse:
    return VoteCountsResponse(**vote_counts(entity_type, entity_id))


@vote_router.get("/{entity_type}/{entity_id}/user/{user_id}", response_model=UserVoteResponse)
async def get_user_vote(entity_type: str, entity_id: str, user_id: str) -> UserVoteResponse:
    return UserVoteResponse(vote_type=user_vote(user_id, entity_type, entity_id))
