"""Pydantic schemes for aggregated survey results.
"""
# app/schemas/results.py
from datetime import datetime
from typing import Dict, List
from surveyhub.app.schemas.base import ApiModel
from surveyhub.app.schemas.question import QuestionType


class OptionTally(ApiModel):
    count: int = 0
    pct: int = 0


class QuestionSummary(ApiModel):
    question_id: str
    question: str
    type: QuestionType
    # multiple choice only, keyed by option text in declared order
    options: Dict[str, OptionTally] | None = None
    # text only, raw answers newest first
    answers: List[str] | None = None


class SurveyResults(ApiModel):
    survey_id: str
    title: str
    total_responses: int
    last_response_at: datetime | None = None
    questions: List[QuestionSummary]
