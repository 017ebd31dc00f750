"""Survey endpoints.

- owner dashboard listing and survey creation;
- public survey reading (surveys are shared by link);
- owner-only update, delete, responses, results and CSV export.
"""
# app/routers/surveys.py
from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.orm import Session
from surveyhub.db.session import get_db
from surveyhub.app.core.security import require_owner_email
from surveyhub.app.schemas.survey import SurveyCreate, SurveyListItem, SurveyOut, SurveyUpdate
from surveyhub.app.schemas.response import ResponseOut
from surveyhub.app.schemas.results import SurveyResults
from surveyhub.app.services.surveys import SurveyService
from surveyhub.app.services.responses import ResponseService
from surveyhub.app.services.aggregation import summarize
from surveyhub.app.services.export import export_responses_to_csv

router = APIRouter(prefix="/surveys", tags=["surveys"])


@router.get("", response_model=List[SurveyListItem])
def list_surveys(owner: str = Depends(require_owner_email), db: Session = Depends(get_db)):
    """List the caller's surveys, newest first, with their response counts.

    Errors:
        401: No session.
        400: The session has no email.
    """
    responses = ResponseService(db)
    surveys = SurveyService(db).list_by_owner(owner)
    return [
        SurveyListItem(**s.model_dump(), response_count=responses.count_by_survey(s.id))
        for s in surveys
    ]


@router.post("", response_model=SurveyOut, status_code=status.HTTP_201_CREATED)
def create_survey(payload: SurveyCreate, owner: str = Depends(require_owner_email), db: Session = Depends(get_db)):
    """Create a survey owned by the caller.

    Errors:
        400: Missing title/description, no questions, blank question text,
            or a multiple-choice question without options.
        401: No session.
    """
    return SurveyService(db).create(payload, owner)


@router.get("/{survey_id}", response_model=SurveyOut)
def get_survey(survey_id: str, db: Session = Depends(get_db)):
    """Get a survey. Public: anyone with the link may read it.

    Errors:
        404: The survey was not found.
    """
    return SurveyService(db).get(survey_id)


@router.put("/{survey_id}", response_model=SurveyOut)
def update_survey(
    survey_id: str,
    payload: SurveyUpdate,
    owner: str = Depends(require_owner_email),
    db: Session = Depends(get_db),
):
    """Update title, description and/or questions of the caller's survey.

    Errors:
        401: No session.
        403: The caller does not own the survey.
        404: The survey was not found.
    """
    return SurveyService(db).update(survey_id, payload, owner)


@router.delete("/{survey_id}")
def delete_survey(survey_id: str, owner: str = Depends(require_owner_email), db: Session = Depends(get_db)):
    """Delete the caller's survey.

    Errors:
        401: No session.
        403: The caller does not own the survey.
        404: The survey was not found.
    """
    SurveyService(db).delete(survey_id, owner)
    return {"message": "Survey deleted successfully"}


@router.get("/{survey_id}/responses", response_model=List[ResponseOut])
def list_responses(survey_id: str, owner: str = Depends(require_owner_email), db: Session = Depends(get_db)):
    return ResponseService(db).list_by_survey(survey_id, owner)


@router.get("/{survey_id}/results", response_model=SurveyResults)
def survey_results(survey_id: str, owner: str = Depends(require_owner_email), db: Session = Depends(get_db)):
    """Aggregated results: option counts and percentages, raw text answers."""
    survey = SurveyService(db).get_owned(survey_id, owner)
    responses = ResponseService(db).list_by_survey(survey_id, owner)
    return summarize(survey, responses)


@router.get("/{survey_id}/responses/export")
def export_responses(survey_id: str, owner: str = Depends(require_owner_email), db: Session = Depends(get_db)):
    survey = SurveyService(db).get_owned(survey_id, owner)
    responses = ResponseService(db).list_by_survey(survey_id, owner)
    return Response(
        content=export_responses_to_csv(survey, responses),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="survey-{survey_id}-responses.csv"'},
    )
