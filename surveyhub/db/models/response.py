# db/models/response.py
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, JSON
from surveyhub.db import Base
from surveyhub.db.models.survey import utcnow
import uuid


class SurveyResponse(Base):
    __tablename__ = "responses"

    response_id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    # soft reference: surveys may be deleted while their responses stay
    survey_id: Mapped[str] = mapped_column(String, index=True, nullable=False)
    answers: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    respondent_email: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)
