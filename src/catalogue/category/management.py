"""Sector and category management: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category, Sector
from catalogue.domain import catalogue
from catalogue.entity.entity import Entity, EntityStatus


@catalogue.command(part_of="Sector")
class CreateSector:
    name: String(required=True, max_length=100)
    description: Text()


@catalogue.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()
    sector_id: Identifier()


@catalogue.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()
    sector_id: Identifier()


@catalogue.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def _name_taken(aggregate_cls, name, exclude_id=None):
    repo = current_domain.repository_for(aggregate_cls)
    matches = repo._dao.query.filter(name__iexact=name.strip()).all().items
    return any(str(m.id) != str(exclude_id) for m in matches)


@catalogue.command_handler(part_of=Sector)
class ManageSectorHandler:
    @handle(CreateSector)
    def create_sector(self, command):
        if _name_taken(Sector, command.name):
            raise ValidationError({"name": ["A sector with this name already exists"]})

        sector = Sector.create(name=command.name, description=command.description)
        current_domain.repository_for(Sector).add(sector)
        return str(sector.id)


@catalogue.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        if _name_taken(Category, command.name):
            raise ValidationError({"name": ["Category with this name already exists"]})

        if command.sector_id:
            current_domain.repository_for(Sector).get(command.sector_id)

        category = Category.create(
            name=command.name,
            description=command.description,
            sector_id=command.sector_id,
        )
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        if command.name and _name_taken(Category, command.name, exclude_id=category.id):
            raise ValidationError({"name": ["Category with this name already exists"]})
        if command.sector_id:
            current_domain.repository_for(Sector).get(command.sector_id)

        category.update_details(
            name=command.name,
            description=command.description,
            sector_id=command.sector_id,
        )
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        entities = (
            current_domain.repository_for(Entity)
            ._dao.query.filter(category_id=str(category.id), status=EntityStatus.ACTIVE.value)
            .all()
        )
        if entities.items:
            raise ValidationError({"category": ["Cannot delete category with existing entities"]})

        repo._dao.delete(category)
