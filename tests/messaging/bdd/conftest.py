"""Shared BDD fixtures and step definitions for the Messaging domain."""

import pytest
from messaging.chat_user.chat_user import ChatUser
from pytest_bdd import given, parsers, then


@pytest.fixture()
def lobby():
    """Chat users by name for the scenario."""
    return {}


@given(parsers.cfparse('"{username}" is waiting for a chat'))
def waiting(username, lobby):
    user = ChatUser.join(username)
    user.enqueue()
    lobby[username] = user


@given(parsers.cfparse('"{username}" is idle'))
def idle(username, lobby):
    lobby[username] = ChatUser.join(username)


@then(parsers.cfparse('"{first}" is chatting with "{second}"'))
def chatting(first, second, lobby):
    assert lobby[first].partner == second
    assert lobby[second].partner == first
    assert lobby[first].connection_id == lobby[second].connection_id


@then(parsers.cfparse('"{username}" is still waiting'))
def still_waiting(username, lobby):
    assert lobby[username].is_waiting
