"""Survey operations: create, read, list, update and delete.

Mutations are allowed only to the survey owner, identified by the email
stored in `created_by`.
"""
# app/services/surveys.py
import uuid
from typing import Any, Dict, List
from sqlalchemy.orm import Session
from surveyhub.app.core.config import settings
from surveyhub.app.core.errors import InvalidPayload, NotSurveyOwner, SurveyNotFound
from surveyhub.app.core.logging import get_logs_writer_logger
from surveyhub.app.schemas.question import QuestionIn, QuestionType
from surveyhub.app.schemas.survey import SurveyCreate, SurveyOut, SurveyUpdate
from surveyhub.app.services.store import SurveyStore

logger = get_logs_writer_logger()


def _required_text(value: str | None, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise InvalidPayload(f"Missing required field: {field}")
    return text


def normalize_questions(questions: List[QuestionIn]) -> List[Dict[str, Any]]:
    """Trim and validate questions before they are stored.

    Args:
        questions: Questions as received from the client.

    Returns:
        List[dict]: Question documents `{id, type, question, options?}`.

    Raises:
        InvalidPayload: No questions, a blank question text, a multiple-choice
            question without a non-blank option, or a repeated question id.
    """
    if not questions:
        raise InvalidPayload("Missing required fields: title, description, questions")

    result = []
    seen_ids = set()
    for position, q in enumerate(questions, start=1):
        text = (q.question or "").strip()
        if not text:
            raise InvalidPayload(f"Question {position} has no text")

        question_id = (q.id or "").strip() or uuid.uuid4().hex
        if question_id in seen_ids:
            raise InvalidPayload(f"Duplicate question id: {question_id}")
        seen_ids.add(question_id)

        doc = {"id": question_id, "type": q.type.value, "question": text}
        if q.type == QuestionType.multiple_choice:
            # trimmed, blank ones dropped, repeats collapsed in order
            options = list(dict.fromkeys(opt.strip() for opt in (q.options or []) if opt and opt.strip()))
            if not options:
                raise InvalidPayload(f"Question {position} needs at least one option")
            doc["options"] = options
        result.append(doc)
    return result


class SurveyService:
    def __init__(self, db: Session):
        self.store = SurveyStore(db)

    def create(self, payload: SurveyCreate, owner: str) -> SurveyOut:
        data = {
            "title": _required_text(payload.title, "title"),
            "description": _required_text(payload.description, "description"),
            "questions": normalize_questions(payload.questions),
            "created_by": owner,
        }
        survey = self.store.create_survey(data)
        logger.info("Survey %s created by %s with %d question(s)", survey.id, owner, len(survey.questions))
        return survey

    def get(self, survey_id: str) -> SurveyOut:
        survey = self.store.get_survey(survey_id)
        if not survey:
            raise SurveyNotFound()
        return survey

    def list_by_owner(self, owner: str) -> List[SurveyOut]:
        return self.store.list_surveys_by_owner(owner)

    def get_owned(self, survey_id: str, owner: str) -> SurveyOut:
        survey = self.get(survey_id)
        if survey.created_by != owner:
            logger.warning("Access to survey %s refused for %s", survey_id, owner)
            raise NotSurveyOwner()
        return survey

    def update(self, survey_id: str, payload: SurveyUpdate, owner: str) -> SurveyOut:
        self.get_owned(survey_id, owner)

        changes = payload.model_dump(exclude_unset=True)
        data = {}
        if changes.get("title") is not None:
            data["title"] = _required_text(payload.title, "title")
        if changes.get("description") is not None:
            data["description"] = _required_text(payload.description, "description")
        if changes.get("questions") is not None:
            data["questions"] = normalize_questions(payload.questions)

        if not data:
            return self.get(survey_id)
        survey = self.store.update_survey(survey_id, data)
        if not survey:
            raise SurveyNotFound()
        logger.info("Survey %s updated by %s: %s", survey_id, owner, ", ".join(sorted(data)))
        return survey

    def delete(self, survey_id: str, owner: str) -> None:
        self.get_owned(survey_id, owner)
        if not self.store.delete_survey(survey_id):
            raise SurveyNotFound()
        removed = 0
        if settings.CASCADE_DELETE_RESPONSES:
            removed = self.store.delete_responses(survey_id)
        logger.info("Survey %s deleted by %s (%d response(s) removed)", survey_id, owner, removed)
