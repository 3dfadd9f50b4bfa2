"""API routes for study session management."""

from fastapi import APIRouter, Depends, Query, Response, status

from flashdeck.application.learning.dtos import StudySessionRequest
from flashdeck.application.learning.services import StudySessionService
from flashdeck.core import container
from flashdeck.infrastructure.common.di import inject_service
from flashdeck.infrastructure.common.schemas import IdResponse
from flashdeck.infrastructure.learning.schemas import (
    StudySession,
    StudySessionCreateRequest,
    StudySessionUpsertRequest,
)

router = APIRouter(tags=["study-sessions"])

get_study_session_service = inject_service(container.study_session_service)


@router.get("", response_model=list[StudySession], status_code=status.HTTP_200_OK)
def list_study_sessions(
    service: StudySessionService = Depends(get_study_session_service),
) -> list[StudySession]:
    return [StudySession.from_entity(session) for session in service.find_all()]


@router.get("/details", response_model=list[StudySession], status_code=status.HTTP_200_OK)
def list_study_sessions_by_category(
    category_id: str = Query(..., alias="categoryId", description="ID of the category"),
    service: StudySessionService = Depends(get_study_session_service),
) -> list[StudySession]:
    """
    List the study sessions of a category.

    Returns 404 if the category does not exist.
    """
    sessions = service.find_all_by_category_id(category_id)
    return [StudySession.from_entity(session) for session in sessions]


@router.get("/lookup", response_model=IdResponse, status_code=status.HTTP_200_OK)
def lookup_study_session_id(
    name: str = Query(..., description="Exact study session name"),
    service: StudySessionService = Depends(get_study_session_service),
) -> IdResponse:
    """Resolve a study session name to its ID."""
    return IdResponse(id=service.id_from_study_session_with_name(name))


@router.get("/{session_id}", response_model=StudySession, status_code=status.HTTP_200_OK)
def get_study_session(
    session_id: str,
    service: StudySessionService = Depends(get_study_session_service),
) -> StudySession:
    return StudySession.from_entity(service.find_by_id(session_id))


@router.post("", response_model=StudySession, status_code=status.HTTP_201_CREATED)
def create_study_session(
    request: StudySessionCreateRequest,
    service: StudySessionService = Depends(get_study_session_service),
) -> StudySession:
    """
    Create a study session with a server-issued ID.

    Returns 404 if the referenced category does not exist.
    """
    session = service.create_study_session(
        StudySessionRequest(category_id=str(request.category_id), name=str(request.name))
    )
    return StudySession.from_entity(session)


@router.put("", response_model=StudySession, status_code=status.HTTP_200_OK)
def upsert_study_session(
    request: StudySessionUpsertRequest,
    response: Response,
    service: StudySessionService = Depends(get_study_session_service),
) -> StudySession:
    """
    Insert or replace a study session keyed by its ID.

    Responds 200 when the ID already existed and 201 when it was created.
    """
    session = request.to_entity()
    if not service.exists_by_id(session.id.value):
        response.status_code = status.HTTP_201_CREATED
    return StudySession.from_entity(service.save(session))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_study_session(
    session_id: str,
    service: StudySessionService = Depends(get_study_session_service),
) -> Response:
    service.delete_by_id(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
