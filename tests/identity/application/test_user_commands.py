"""Application tests for account commands via domain.process()."""

import pytest
from identity.user.login import RecordLogin, authenticate
from identity.user.profile import UpdateProfile
from identity.user.registration import RegisterUser
from identity.user.user import User
from protean import current_domain
from protean.exceptions import ValidationError


def _register(username="alice", email="alice@example.com", password="secret123", **extra):
    return current_domain.process(
        RegisterUser(username=username, email=email, password=password, **extra),
        asynchronous=False,
    )


class TestRegisterUser:
    def test_returns_user_id(self):
        user_id = _register()

        user = current_domain.repository_for(User).get(user_id)
        assert user.username == "alice"
        assert user.email == "alice@example.com"

    def test_duplicate_username_is_case_insensitive(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(username="ALICE", email="other@example.com")
        assert exc.value.messages["username"] == ["Username is already taken"]

    def test_duplicate_email_is_case_insensitive(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(username="bob", email="Alice@Example.com")
        assert "email" in exc.value.messages

    def test_admin_flag_is_kept(self):
        user_id = _register(is_admin=True)
        assert current_domain.repository_for(User).get(user_id).is_admin is True


class TestLogin:
    def test_authenticate_with_valid_credentials(self):
        user_id = _register()
        user = authenticate("ALICE@example.com", "secret123")
        assert user is not None
        assert str(user.id) == user_id

    def test_wrong_password(self):
        _register()
        assert authenticate("alice@example.com", "nope-nope") is None

    def test_unknown_email(self):
        assert authenticate("ghost@example.com", "secret123") is None

    def test_missing_credentials(self):
        assert authenticate("", "") is None

    def test_record_login_sets_timestamp(self):
        user_id = _register()
        current_domain.process(RecordLogin(user_id=user_id), asynchronous=False)
        assert current_domain.repository_for(User).get(user_id).last_login_at is not None


class TestUpdateProfile:
    def test_updates_given_fields_only(self):
        user_id = _register(bio="Hello", location="Lisbon")

        current_domain.process(UpdateProfile(user_id=user_id, bio="Updated"), asynchronous=False)

        user = current_domain.repository_for(User).get(user_id)
        assert user.bio == "Updated"
        assert user.location == "Lisbon"
