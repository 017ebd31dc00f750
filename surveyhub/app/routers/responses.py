# app/routers/responses.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from surveyhub.db.session import get_db
from surveyhub.app.schemas.response import ResponseCreate, ResponseOut
from surveyhub.app.services.responses import ResponseService

router = APIRouter(prefix="/responses", tags=["responses"])


@router.post("", response_model=ResponseOut, status_code=status.HTTP_201_CREATED)
def submit_response(payload: ResponseCreate, db: Session = Depends(get_db)):
    """Submit a response to a survey. No session required.

    Errors:
        400: Missing surveyId or empty answers.
        404: The survey was not found.
    """
    return ResponseService(db).submit(payload)
