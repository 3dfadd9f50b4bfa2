"""Mapper for CategoryRequest -> Category."""

from flashdeck.application.learning.dtos import CategoryRequest
from flashdeck.application.learning.protocols.id_source import IdSourceProtocol
from flashdeck.domain.common.value_objects import CategoryId
from flashdeck.domain.learning.entities import Category


class CategoryMapper:
    """Builds a new Category from a creation request."""

    def __init__(self, id_source: IdSourceProtocol) -> None:
        self.id_source = id_source

    def category_from(self, request: CategoryRequest) -> Category:
        return Category.create(id=CategoryId(self.id_source.new_id()), name=request.name)
