from datetime import UTC, datetime

import pytest
from community.review.catalogue_events import CatalogueEventsHandler
from shared.events.catalogue import EntityAdded


@pytest.fixture()
def entity_id():
    """An entity the community has heard about from the catalogue."""
    CatalogueEventsHandler().on_entity_added(
        EntityAdded(
            entity_id="ent-1",
            name="Blue Bottle",
            category_id="cat-1",
            added_at=datetime.now(UTC),
        )
    )
    return "ent-1"
