"""Persistence client for the `surveys` and `responses` collections.

Converters normalize the stored document shape on the way in and tolerate
missing fields on the way out. Store errors propagate to the caller.
"""
# app/services/store.py
from typing import Any, Dict, List, Optional
from sqlalchemy import delete as sa_delete, func, select
from sqlalchemy.orm import Session
from surveyhub.db.models import Survey, SurveyResponse
from surveyhub.app.schemas.question import QuestionType
from surveyhub.app.schemas.survey import SurveyOut
from surveyhub.app.schemas.response import ResponseOut


def question_to_document(question: Dict[str, Any]) -> Dict[str, Any]:
    doc = {
        "id": question["id"],
        "type": question["type"],
        "question": question["question"],
    }
    if question["type"] == QuestionType.multiple_choice.value:
        doc["options"] = list(question.get("options") or [])
    return doc


def survey_to_row(data: Dict[str, Any]) -> Dict[str, Any]:
    row = {}
    for field in ("title", "description", "created_by"):
        if field in data:
            row[field] = data[field]
    if "questions" in data:
        row["questions"] = [question_to_document(q) for q in data["questions"]]
    return row


def survey_from_row(row: Survey) -> SurveyOut:
    questions = row.questions if isinstance(row.questions, list) else []
    return SurveyOut(
        id=row.survey_id,
        title=row.title or "",
        description=row.description or "",
        questions=questions,
        created_by=row.created_by or "",
        created_at=row.created_at,
    )


def response_to_row(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "survey_id": data["survey_id"],
        "answers": list(data.get("answers") or []),
        "respondent_email": data.get("respondent_email") or None,
    }


def response_from_row(row: SurveyResponse) -> ResponseOut:
    answers = row.answers if isinstance(row.answers, list) else []
    return ResponseOut(
        id=row.response_id,
        survey_id=row.survey_id or "",
        answers=answers,
        respondent_email=row.respondent_email or None,
        created_at=row.created_at,
    )


class SurveyStore:
    """Reads and writes survey and response documents."""

    def __init__(self, db: Session):
        self.db = db

    # surveys

    def create_survey(self, data: Dict[str, Any]) -> SurveyOut:
        survey = Survey(**survey_to_row(data))
        self.db.add(survey)
        self.db.commit()
        self.db.refresh(survey)
        return survey_from_row(survey)

    def get_survey(self, survey_id: str) -> Optional[SurveyOut]:
        survey = self.db.get(Survey, survey_id)
        return survey_from_row(survey) if survey else None

    def list_surveys_by_owner(self, owner: str) -> List[SurveyOut]:
        surveys = self.db.scalars(
            select(Survey)
            .where(Survey.created_by == owner)
            .order_by(Survey.created_at.desc())
        ).all()
        return [survey_from_row(s) for s in surveys]

    def update_survey(self, survey_id: str, data: Dict[str, Any]) -> Optional[SurveyOut]:
        survey = self.db.get(Survey, survey_id)
        if not survey:
            return None
        for field, value in survey_to_row(data).items():
            setattr(survey, field, value)
        self.db.commit()
        self.db.refresh(survey)
        return survey_from_row(survey)

    def delete_survey(self, survey_id: str) -> bool:
        survey = self.db.get(Survey, survey_id)
        if not survey:
            return False
        self.db.delete(survey)
        self.db.commit()
        return True

    # responses

    def add_response(self, data: Dict[str, Any]) -> ResponseOut:
        response = SurveyResponse(**response_to_row(data))
        self.db.add(response)
        self.db.commit()
        self.db.refresh(response)
        return response_from_row(response)

    def list_responses(self, survey_id: str) -> List[ResponseOut]:
        responses = self.db.scalars(
            select(SurveyResponse)
            .where(SurveyResponse.survey_id == survey_id)
            .order_by(SurveyResponse.created_at.desc())
        ).all()
        return [response_from_row(r) for r in responses]

    def count_responses(self, survey_id: str) -> int:
        return self.db.scalar(
            select(func.count()).select_from(SurveyResponse).where(SurveyResponse.survey_id == survey_id)
        ) or 0

    def delete_responses(self, survey_id: str) -> int:
        result = self.db.execute(sa_delete(SurveyResponse).where(SurveyResponse.survey_id == survey_id))
        self.db.commit()
        return result.rowcount or 0
