"""Pydantic schemes for surveys.
"""
# app/schemas/survey.py
from datetime import datetime
from typing import List, Optional
from pydantic import computed_field
from surveyhub.app.schemas.base import ApiModel
from surveyhub.app.schemas.question import QuestionIn, QuestionOut
from surveyhub.app.services.links import public_survey_url


class SurveyCreate(ApiModel):
    title: str
    description: str
    questions: List[QuestionIn]


class SurveyUpdate(ApiModel):
    title: Optional[str] = None
    description: Optional[str] = None
    questions: Optional[List[QuestionIn]] = None


class SurveyOut(ApiModel):
    id: str
    title: str
    description: str
    questions: List[QuestionOut]
    created_by: str
    created_at: datetime | None = None

    @computed_field
    @property
    def share_url(self) -> str:
        return public_survey_url(self.id)


class SurveyListItem(SurveyOut):
    """Survey with the number of collected responses, for the owner's dashboard."""
    response_count: int = 0
