"""BDD tests for P2P queue pairing."""

from messaging.chat_user.session import pair_waiting
from pytest_bdd import scenarios, when

scenarios("features/p2p_pairing.feature")


@when("the queue is matched")
def match(lobby):
    pair_waiting(list(lobby.values()))
