"""Messaging bounded context: the anonymous messenger.

Users pass a shared access code, pick a throwaway username, and either
queue for a one-to-one chat or post in the group room.
"""

from protean.domain import Domain
from shared.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
messaging = Domain(name="messaging")
