from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.learning.mappers import (
    CategoryMapper,
    FlashcardMapper,
    StudySessionMapper,
)
from flashdeck.application.learning.services import (
    CategoryService,
    FlashcardService,
    StudySessionService,
)
from flashdeck.infrastructure.common.id_source import UuidIdSource
from flashdeck.infrastructure.learning.repositories import (
    CategoryRepository,
    FlashcardRepository,
    StudySessionRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    id_source = providers.Singleton(UuidIdSource)

    # Repositories
    category_repository = providers.Factory(CategoryRepository, db=db)
    study_session_repository = providers.Factory(StudySessionRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)

    # Request -> entity mappers
    category_mapper = providers.Factory(CategoryMapper, id_source=id_source)
    study_session_mapper = providers.Factory(StudySessionMapper, id_source=id_source)
    flashcard_mapper = providers.Factory(FlashcardMapper, id_source=id_source)

    # Learning module services
    category_service = providers.Factory(
        CategoryService,
        category_repository=category_repository,
        category_mapper=category_mapper,
    )

    study_session_service = providers.Factory(
        StudySessionService,
        study_session_repository=study_session_repository,
        category_service=category_service,
        study_session_mapper=study_session_mapper,
    )

    flashcard_service = providers.Factory(
        FlashcardService,
        flashcard_repository=flashcard_repository,
        study_session_service=study_session_service,
        flashcard_mapper=flashcard_mapper,
    )


# Initialize container
container = Container()
