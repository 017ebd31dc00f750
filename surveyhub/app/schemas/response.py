"""Pydantic schemes for survey responses.
"""
# app/schemas/response.py
from datetime import datetime
from typing import List, Optional, Union
from surveyhub.app.schemas.base import ApiModel


class AnswerIn(ApiModel):
    question_id: str
    answer: Union[str, List[str]]


class ResponseCreate(ApiModel):
    survey_id: str
    answers: List[AnswerIn]
    respondent_email: Optional[str] = None


class ResponseOut(ApiModel):
    id: str
    survey_id: str
    answers: List[AnswerIn]
    respondent_email: str | None = None
    created_at: datetime | None = None
