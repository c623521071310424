"""User registration: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String, Text
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User

logger = structlog.get_logger(__name__)


@identity.command(part_of="User")
class RegisterUser:
    """Create a new user account."""

    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=72)
    is_admin: Boolean(default=False)
    bio: Text()
    location: String(max_length=100)
    profile_picture: String(max_length=500)


@identity.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        if repo._dao.query.filter(username__iexact=command.username).all().items:
            raise ValidationError({"username": ["Username is already taken"]})
        if repo._dao.query.filter(email__iexact=command.email.strip()).all().items:
            raise ValidationError({"email": ["An account with this email already exists"]})

        user = User.register(
            username=command.username,
            email=command.email,
            password=command.password,
            is_admin=command.is_admin,
            bio=command.bio,
            location=command.location,
            profile_picture=command.profile_picture,
        )
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), username=user.username)
        return str(user.id)
