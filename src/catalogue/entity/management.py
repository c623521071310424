"""Entity management: commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.domain import catalogue
from catalogue.entity.entity import Entity

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Entity")
class AddEntity:
    name: String(required=True, max_length=200)
    category_id: Identifier(required=True)
    description: Text()
    picture: String(max_length=500)
    created_by: Identifier()


@catalogue.command(part_of="Entity")
class UpdateEntity:
    entity_id: Identifier(required=True)
    name: String(max_length=200)
    description: Text()
    picture: String(max_length=500)


@catalogue.command(part_of="Entity")
class RemoveEntity:
    entity_id: Identifier(required=True)


def add_entity(name, category_id, description=None, picture=None, created_by=None):
    """Create an entity under an existing category, inheriting its sector."""
    category = current_domain.repository_for(Category).get(category_id)
    entity = Entity.add(
        name=name,
        category_id=str(category.id),
        sector_id=str(category.sector_id) if category.sector_id else None,
        description=description,
        picture=picture,
        created_by=created_by,
    )
    current_domain.repository_for(Entity).add(entity)
    logger.info("Entity added", entity_id=str(entity.id), category_id=str(category.id))
    return entity


@catalogue.command_handler(part_of=Entity)
class ManageEntityHandler:
    @handle(AddEntity)
    def add_entity(self, command):
        entity = add_entity(
            name=command.name,
            category_id=command.category_id,
            description=command.description,
            picture=command.picture,
            created_by=command.created_by,
        )
        return str(entity.id)

    @handle(UpdateEntity)
    def update_entity(self, command):
        repo = current_domain.repository_for(Entity)
        entity = repo.get(command.entity_id)
        entity.update_details(
            name=command.name,
            description=command.description,
            picture=command.picture,
        )
        repo.add(entity)

    @handle(RemoveEntity)
    def remove_entity(self, command):
        repo = current_domain.repository_for(Entity)
        entity = repo.get(command.entity_id)
        entity.remove()
        repo.add(entity)
        logger.info("Entity removed", entity_id=str(entity.id))
