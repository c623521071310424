"""FastAPI routes for the anonymous messenger.

Every session starts at ``/messenger/verify-code``; the remaining routes
identify the caller by the username chosen at ``/messenger/users``.
"""

from datetime import datetime

from fastapi import APIRouter, HTTPException, Query
from protean.utils.globals import current_domain

from messaging.access import check_username, verify_code
from messaging.api.schemas import (
    ChatUserResponse,
    DirectMessageListResponse,
    DirectMessageResponse,
    GroupMessageListResponse,
    GroupMessageResponse,
    MessageIdResponse,
    P2PStatusResponse,
    PostGroupMessageRequest,
    SendDirectMessageRequest,
    StatusResponse,
    UsernameAvailableResponse,
    UsernameRequest,
    VerifyCodeRequest,
)
from messaging.chat_user.chat_user import ChatUser
from messaging.chat_user.session import CreateChatUser, JoinP2PQueue, LeaveP2P, Logout, p2p_status
from messaging.message.sending import PostGroupMessage, SendDirectMessage, conversation, group_messages

messenger_router = APIRouter(prefix="/messenger", tags=["messenger"])


@messenger_router.post("/verify-code", response_model=StatusResponse)
async def verify_access_code(body: VerifyCodeRequest) -> StatusResponse:
    if not verify_code(body.code):
        raise HTTPException(status_code=401, detail="Invalid access code")
    return StatusResponse()


@messenger_router.post("/check-username", response_model=UsernameAvailableResponse)
async def check_username_available(body: UsernameRequest) -> UsernameAvailableResponse:
    check_username(body.username)
    return UsernameAvailableResponse(username=body.username)


@messenger_router.post("/users", status_code=201, response_model=ChatUserResponse)
async def create_chat_user(body: UsernameRequest) -> ChatUserResponse:
    username = current_domain.process(CreateChatUser(username=body.username), asynchronous=False)
    return ChatUserResponse(username=username)


@messenger_router.post("/logout", response_model=StatusResponse)
async def logout(body: UsernameRequest) -> StatusResponse:
    current_domain.process(Logout(username=body.username), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# P2P
# ---------------------------------------------------------------------------
@messenger_router.post("/p2p/join", response_model=P2PStatusResponse)
async def join_p2p(body: UsernameRequest) -> P2PStatusResponse:
    status = current_domain.process(JoinP2PQueue(username=body.username), asynchronous=False)
    return P2PStatusResponse(**status)


@messenger_router.get("/p2p/status/{username}", response_model=P2PStatusResponse)
async def get_p2p_status(username: str) -> P2PStatusResponse:
    user = current_domain.repository_for(ChatUser).get(username)
    return P2PStatusResponse(**p2p_status(user))


@messenger_router.post("/p2p/messages", status_code=201, response_model=MessageIdResponse)
async def send_direct_message(body: SendDirectMessageRequest) -> MessageIdResponse:
    command = SendDirectMessage(sender=body.sender, receiver=body.receiver, message=body.message)
    message_id = current_domain.process(command, asynchronous=False)
    return MessageIdResponse(message_id=message_id)


@messenger_router.get("/p2p/messages/{username}/{partner}", response_model=DirectMessageListResponse)
async def get_direct_messages(username: str, partner: str) -> DirectMessageListResponse:
    messages = conversation(username, partner)
    return DirectMessageListResponse(
        messages=[
            DirectMessageResponse(
                message_id=str(m.id),
                sender=m.sender,
                receiver=m.receiver,
                message=m.message,
                sent_at=m.sent_at,
            )
            for m in messages
        ],
        count=len(messages),
    )


@messenger_router.post("/p2p/leave", response_model=StatusResponse)
async def leave_p2p(body: UsernameRequest) -> StatusResponse:
    current_domain.process(LeaveP2P(username=body.username), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Group chat
# ---------------------------------------------------------------------------
@messenger_router.post("/group/messages", status_code=201, response_model=MessageIdResponse)
async def post_group_message(body: PostGroupMessageRequest) -> MessageIdResponse:
    command = PostGroupMessage(sender=body.sender, message=body.message, room=body.room)
    message_id = current_domain.process(command, asynchronous=False)
    return MessageIdResponse(message_id=message_id)


@messenger_router.get("/group/messages", response_model=GroupMessageListResponse)
async def get_group_messages(
    room: str | None = None,
    after: datetime | None = None,
    limit: int = Query(default=100, ge=1, le=100),
) -> GroupMessageListResponse:
    messages = group_messages(room=room, after=after, limit=limit)
    return GroupMessageListResponse(
        messages=[
            GroupMessageResponse(
                message_id=str(m.id),
                room=m.room,
                sender=m.sender,
                message=m.message,
                sent_at=m.sent_at,
            )
            for m in messages
        ],
        count=len(messages),
    )
