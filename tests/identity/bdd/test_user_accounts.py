"""BDD tests for user accounts."""

from identity.user.user import User
from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/user_accounts.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse('a user registers as "{username}" with email "{email}"'),
    target_fixture="user",
)
def register_user(username, email, error):
    try:
        return User.register(username=username, email=email, password="secret123")
    except ValidationError as exc:
        error["exc"] = exc
        return None


@when(parsers.cfparse('the user sets their bio to "{bio}"'))
def set_bio(user, bio):
    user.update_profile(bio=bio)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the user's email is \"{email}\""))
def email_is(user, email):
    assert user.email == email


@then(parsers.cfparse("the user's bio is \"{bio}\""))
def bio_is(user, bio):
    assert user.bio == bio


@then(parsers.cfparse('the password "{password}" is accepted'))
def password_accepted(user, password):
    assert user.check_password(password)


@then(parsers.cfparse('the password "{password}" is rejected'))
def password_rejected(user, password):
    assert not user.check_password(password)
