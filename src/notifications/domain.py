"""Notifications bounded context: in-app notices about social activity.

Consumes Identity and Community events and turns follows, comments,
replies, votes and post ratings into per-user notifications with read
state.
"""

from protean.domain import Domain
from shared.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
notifications = Domain(name="notifications")
