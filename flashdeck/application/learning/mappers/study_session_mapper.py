"""Mapper for StudySessionRequest -> StudySession."""

from flashdeck.application.learning.dtos import StudySessionRequest
from flashdeck.application.learning.protocols.id_source import IdSourceProtocol
from flashdeck.domain.common.value_objects import CategoryId, StudySessionId
from flashdeck.domain.learning.entities import StudySession


class StudySessionMapper:
    """Builds a new StudySession from a creation request."""

    def __init__(self, id_source: IdSourceProtocol) -> None:
        self.id_source = id_source

    def study_session_from(self, request: StudySessionRequest) -> StudySession:
        return StudySession.create(
            id=StudySessionId(self.id_source.new_id()),
            category_id=CategoryId(request.category_id),
            name=request.name,
        )
