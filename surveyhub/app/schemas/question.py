"""Pydantic schemes for survey questions.
"""
# app/schemas/question.py
import enum
from typing import List, Optional
from surveyhub.app.schemas.base import ApiModel


class QuestionType(str, enum.Enum):
    text = "text"
    multiple_choice = "multipleChoice"


class QuestionIn(ApiModel):
    id: Optional[str] = None
    type: QuestionType
    question: str
    options: Optional[List[str]] = None


class QuestionOut(ApiModel):
    id: str
    type: QuestionType
    question: str
    options: List[str] | None = None
