"""Profile updates: command and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import _UNSET, User


@identity.command(part_of="User")
class UpdateProfile:
    """Change the public profile. Omitted fields are left untouched."""

    user_id: Identifier(required=True)
    bio: Text()
    location: String(max_length=100)
    profile_picture: String(max_length=500)


@identity.command_handler(part_of=User)
class UpdateProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        user.update_profile(
            bio=command.bio if command.bio is not None else _UNSET,
            location=command.location if command.location is not None else _UNSET,
            profile_picture=command.profile_picture if command.profile_picture is not None else _UNSET,
        )
        repo.add(user)
