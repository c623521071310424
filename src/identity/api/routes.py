"""FastAPI routes for the Identity bounded context.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts). Reads come from the UserCard
projection and the Follow aggregate.
"""

from fastapi import APIRouter, HTTPException, Query
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.api.schemas import (
    FollowEntry,
    FollowListResponse,
    FollowRequest,
    FollowStatusResponse,
    LoginRequest,
    LoginResponse,
    RegisterUserRequest,
    StatusResponse,
    UpdateProfileRequest,
    UserIdResponse,
    UserListResponse,
    UserProfileResponse,
)
from identity.follow.follow import Follow
from identity.follow.following import FollowUser, UnfollowUser, find_edge
from identity.projections.user_card import UserCard, search_users
from identity.user.login import RecordLogin, authenticate
from identity.user.profile import UpdateProfile
from identity.user.registration import RegisterUser

user_router = APIRouter(prefix="/users", tags=["users"])


def _profile(card) -> UserProfileResponse:
    return UserProfileResponse(
        user_id=str(card.user_id),
        username=card.username,
        email=card.email,
        is_admin=card.is_admin,
        bio=card.bio,
        location=card.location,
        profile_picture=card.profile_picture,
        follower_count=card.follower_count,
        following_count=card.following_count,
        registered_at=card.registered_at,
    )


def _follow_entries(edges, attr) -> list[FollowEntry]:
    cards = current_domain.repository_for(UserCard)
    entries = []
    for edge in edges:
        user_id = str(getattr(edge, attr))
        try:
            card = cards.get(user_id)
            username, picture = card.username, card.profile_picture
        except ObjectNotFoundError:
            username, picture = None, None
        entries.append(
            FollowEntry(
                user_id=user_id,
                username=username,
                profile_picture=picture,
                followed_at=edge.followed_at,
            )
        )
    return entries


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
@user_router.post("/register", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    """Create a new user account."""
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password=body.password,
        is_admin=body.is_admin,
        bio=body.bio,
        location=body.location,
        profile_picture=body.profile_picture,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=user_id)


@user_router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest) -> LoginResponse:
    """Check credentials and return the user's profile."""
    user = authenticate(body.email, body.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    current_domain.process(RecordLogin(user_id=str(user.id)), asynchronous=False)
    card = current_domain.repository_for(UserCard).get(str(user.id))
    return LoginResponse(user=_profile(card))


@user_router.get("", response_model=UserListResponse)
async def list_users() -> UserListResponse:
    """List all users, newest first."""
    cards = current_domain.repository_for(UserCard)._dao.query.order_by("-registered_at").all().items
    return UserListResponse(users=[_profile(c) for c in cards], count=len(cards))


@user_router.get("/search", response_model=UserListResponse)
async def search(q: str = Query(min_length=1)) -> UserListResponse:
    """Find users by a case-insensitive username fragment."""
    cards = search_users(q.strip())
    return UserListResponse(users=[_profile(c) for c in cards], count=len(cards))


@user_router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user(user_id: str) -> UserProfileResponse:
    """A user's public profile with follow counts."""
    card = current_domain.repository_for(UserCard).get(user_id)
    return _profile(card)


@user_router.put("/{user_id}/profile", response_model=StatusResponse)
async def update_profile(user_id: str, body: UpdateProfileRequest) -> StatusResponse:
    """Update bio, location or profile picture."""
    command = UpdateProfile(
        user_id=user_id,
        bio=body.bio,
        location=body.location,
        profile_picture=body.profile_picture,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Follow graph
# ---------------------------------------------------------------------------
@user_router.post("/{user_id}/follow", status_code=201, response_model=StatusResponse)
async def follow_user(user_id: str, body: FollowRequest) -> StatusResponse:
    """Start following ``user_id``."""
    command = FollowUser(follower_id=body.follower_id, followed_id=user_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@user_router.delete("/{user_id}/follow/{follower_id}", response_model=StatusResponse)
async def unfollow_user(user_id: str, follower_id: str) -> StatusResponse:
    """Stop following ``user_id``."""
    command = UnfollowUser(follower_id=follower_id, followed_id=user_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@user_router.get("/{user_id}/follow-status/{follower_id}", response_model=FollowStatusResponse)
async def follow_status(user_id: str, follower_id: str) -> FollowStatusResponse:
    """Whether ``follower_id`` currently follows ``user_id``."""
    edge = find_edge(follower_id, user_id)
    return FollowStatusResponse(is_following=bool(edge and edge.is_active))


@user_router.get("/{user_id}/followers", response_model=FollowListResponse)
async def list_followers(user_id: str) -> FollowListResponse:
    """Users following ``user_id``."""
    edges = (
        current_domain.repository_for(Follow)
        ._dao.query.filter(followed_id=user_id, is_active=True)
        .order_by("-followed_at")
        .all()
        .items
    )
    entries = _follow_entries(edges, "follower_id")
    return FollowListResponse(users=entries, count=len(entries))


@user_router.get("/{user_id}/following", response_model=FollowListResponse)
async def list_following(user_id: str) -> FollowListResponse:
    """Users that ``user_id`` follows."""
    edges = (
        current_domain.repository_for(Follow)
        ._dao.query.filter(follower_id=user_id, is_active=True)
        .order_by("-followed_at")
        .all()
        .items
    )
    entries = _follow_entries(edges, "followed_id")
    return FollowListResponse(users=entries, count=len(entries))
