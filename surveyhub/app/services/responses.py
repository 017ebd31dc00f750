"""Response operations: submit, list and count."""
# app/services/responses.py
from typing import List
from sqlalchemy.orm import Session
from surveyhub.app.core.config import settings
from surveyhub.app.core.errors import InvalidPayload
from surveyhub.app.core.logging import get_logs_writer_logger
from surveyhub.app.schemas.response import AnswerIn, ResponseCreate, ResponseOut
from surveyhub.app.schemas.survey import SurveyOut
from surveyhub.app.services.store import SurveyStore
from surveyhub.app.services.surveys import SurveyService

logger = get_logs_writer_logger()


def _is_blank(answer: AnswerIn) -> bool:
    if isinstance(answer.answer, list):
        return not any(a.strip() for a in answer.answer)
    return not answer.answer.strip()


def check_answers_match(survey: SurveyOut, answers: List[AnswerIn]) -> None:
    """Reject answers to unknown questions and unanswered questions."""
    question_ids = {q.id for q in survey.questions}
    unknown = [a.question_id for a in answers if a.question_id not in question_ids]
    if unknown:
        raise InvalidPayload(f"Unknown question id(s): {', '.join(unknown)}")

    answered = {a.question_id for a in answers if not _is_blank(a)}
    missing = [q.id for q in survey.questions if q.id not in answered]
    if missing:
        raise InvalidPayload(f"Unanswered question(s): {', '.join(missing)}")


class ResponseService:
    def __init__(self, db: Session):
        self.store = SurveyStore(db)
        self.surveys = SurveyService(db)

    def submit(self, payload: ResponseCreate) -> ResponseOut:
        survey_id = (payload.survey_id or "").strip()
        if not survey_id or not payload.answers:
            raise InvalidPayload("Missing required fields: surveyId, answers")

        survey = self.surveys.get(survey_id)
        if settings.STRICT_ANSWERS:
            check_answers_match(survey, payload.answers)

        email = (payload.respondent_email or "").strip() or None
        response = self.store.add_response({
            "survey_id": survey_id,
            "answers": [a.model_dump(by_alias=True) for a in payload.answers],
            "respondent_email": email,
        })
        logger.info("Response %s submitted to survey %s (%s)", response.id, survey_id, email or "anonymous")
        return response

    def list_by_survey(self, survey_id: str, owner: str) -> List[ResponseOut]:
        self.surveys.get_owned(survey_id, owner)
        return self.store.list_responses(survey_id)

    def count_by_survey(self, survey_id: str) -> int:
        return self.store.count_responses(survey_id)
