"""API routes for flashcard management."""

from fastapi import APIRouter, Depends, Query, Response, status

from flashdeck.application.learning.dtos import FlashcardRequest
from flashdeck.application.learning.services import FlashcardService
from flashdeck.core import container
from flashdeck.infrastructure.common.di import inject_service
from flashdeck.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardUpsertRequest,
)

router = APIRouter(tags=["flashcards"])

get_flashcard_service = inject_service(container.flashcard_service)


@router.get("", response_model=list[Flashcard], status_code=status.HTTP_200_OK)
def list_flashcards(
    service: FlashcardService = Depends(get_flashcard_service),
) -> list[Flashcard]:
    return [Flashcard.from_entity(flashcard) for flashcard in service.find_all()]


@router.get("/details", response_model=list[Flashcard], status_code=status.HTTP_200_OK)
def list_flashcards_by_study_session(
    study_session_id: str = Query(
        ..., alias="studySessionId", description="ID of the study session"
    ),
    service: FlashcardService = Depends(get_flashcard_service),
) -> list[Flashcard]:
    """
    List the flashcards of a study session.

    Returns 404 if the study session does not exist.
    """
    flashcards = service.find_all_by_study_session_id(study_session_id)
    return [Flashcard.from_entity(flashcard) for flashcard in flashcards]


@router.get("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def get_flashcard(
    flashcard_id: str,
    service: FlashcardService = Depends(get_flashcard_service),
) -> Flashcard:
    return Flashcard.from_entity(service.find_by_id(flashcard_id))


@router.post("", response_model=Flashcard, status_code=status.HTTP_201_CREATED)
def create_flashcard(
    request: FlashcardCreateRequest,
    service: FlashcardService = Depends(get_flashcard_service),
) -> Flashcard:
    """
    Create a flashcard with a server-issued ID.

    Returns 404 if the referenced study session does not exist.
    """
    flashcard = service.create_flashcard(
        FlashcardRequest(
            study_session_id=str(request.study_session_id),
            question=str(request.question),
            answer=str(request.answer),
        )
    )
    return Flashcard.from_entity(flashcard)


@router.put("", response_model=Flashcard, status_code=status.HTTP_200_OK)
def upsert_flashcard(
    request: FlashcardUpsertRequest,
    response: Response,
    service: FlashcardService = Depends(get_flashcard_service),
) -> Flashcard:
    """
    Insert or replace a flashcard keyed by its ID.

    Responds 200 when the ID already existed and 201 when it was created.
    """
    flashcard = request.to_entity()
    if not service.exists_by_id(flashcard.id.value):
        response.status_code = status.HTTP_201_CREATED
    return Flashcard.from_entity(service.save(flashcard))


@router.delete("/{flashcard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard(
    flashcard_id: str,
    service: FlashcardService = Depends(get_flashcard_service),
) -> Response:
    service.delete_by_id(flashcard_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
