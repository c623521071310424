"""Login: credential check and the RecordLogin command."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User


def authenticate(email, password):
    """Return the user owning ``email`` when ``password`` matches, else None."""
    if not email or not password:
        return None

    repo = current_domain.repository_for(User)
    matches = repo._dao.query.filter(email__iexact=email.strip()).all().items
    if not matches:
        return None

    user = matches[0]
    return user if user.check_password(password) else None


@identity.command(part_of="User")
class RecordLogin:
    user_id: Identifier(required=True)


@identity.command_handler(part_of=User)
class RecordLoginHandler:
    @handle(RecordLogin)
    def record_login(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.record_login()
        repo.add(user)
