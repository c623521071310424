"""EntityCard: entity detail with its place in the hierarchy and rating summary.

Catalogue events keep the descriptive fields current; the rating fields are
maintained by the inbound Community review handler.
"""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category, Sector
from catalogue.category.events import CategoryDetailsUpdated
from catalogue.domain import catalogue
from catalogue.entity.entity import Entity
from catalogue.entity.events import EntityAdded, EntityDetailsUpdated, EntityRemoved

SEARCH_LIMIT = 20


@catalogue.projection
class EntityCard:
    entity_id: Identifier(identifier=True, required=True)
    name: String(required=True)
    description: Text()
    picture: String()
    category_id: Identifier(required=True)
    category_name: String()
    sector_id: Identifier()
    sector_name: String()
    created_by: Identifier()
    average_rating: Float(default=0.0)
    review_count: Integer(default=0)
    rating_total: Integer(default=0)
    created_at: DateTime()


def search_entities(term, limit=SEARCH_LIMIT):
    """Entities whose name contains ``term``, case-insensitively."""
    repo = current_domain.repository_for(EntityCard)
    return repo._dao.query.filter(name__icontains=term).order_by("name").limit(limit).all().items


def apply_rating_change(card, added=0, removed=0, count_delta=0):
    """Fold a rating change into the running total and recompute the average."""
    card.rating_total = max(0, card.rating_total + added - removed)
    card.review_count = max(0, card.review_count + count_delta)
    card.average_rating = round(card.rating_total / card.review_count, 2) if card.review_count else 0.0


def _names(category_id, sector_id):
    category_name = sector_name = None
    try:
        category_name = current_domain.repository_for(Category).get(category_id).name
    except ObjectNotFoundError:
        pass
    if sector_id:
        try:
            sector_name = current_domain.repository_for(Sector).get(sector_id).name
        except ObjectNotFoundError:
            pass
    return category_name, sector_name


@catalogue.projector(projector_for=EntityCard, aggregates=[Entity, Category])
class EntityCardProjector:
    @on(EntityAdded)
    def on_entity_added(self, event):
        entity = current_domain.repository_for(Entity).get(event.entity_id)
        category_name, sector_name = _names(event.category_id, event.sector_id)

        current_domain.repository_for(EntityCard).add(
            EntityCard(
                entity_id=event.entity_id,
                name=event.name,
                description=entity.description,
                picture=entity.picture,
                category_id=event.category_id,
                category_name=category_name,
                sector_id=event.sector_id,
                sector_name=sector_name,
                created_by=entity.created_by,
                average_rating=0.0,
                review_count=0,
                rating_total=0,
                created_at=event.added_at,
            )
        )

    @on(EntityDetailsUpdated)
    def on_entity_details_updated(self, event):
        repo = current_domain.repository_for(EntityCard)
        card = repo.get(event.entity_id)
        card.name = event.name
        card.description = event.description
        card.picture = event.picture
        repo.add(card)

    @on(EntityRemoved)
    def on_entity_removed(self, event):
        repo = current_domain.repository_for(EntityCard)
        try:
            card = repo.get(event.entity_id)
        except ObjectNotFoundError:
            return
        repo._dao.delete(card)

    @on(CategoryDetailsUpdated)
    def on_category_details_updated(self, event):
        repo = current_domain.repository_for(EntityCard)
        category_name, sector_name = _names(event.category_id, event.sector_id)
        for card in repo._dao.query.filter(category_id=event.category_id).all().items:
            card.category_name = category_name
            card.sector_id = event.sector_id
            card.sector_name = sector_name
            repo.add(card)
