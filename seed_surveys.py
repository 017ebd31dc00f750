#!/usr/bin/env python
import sys
from surveyhub.db.session import LocalSession, engine
from surveyhub.db import Base
from surveyhub.db import models  # noqa: F401
from surveyhub.app.core.security import issue_session_token
from surveyhub.app.schemas.question import QuestionIn, QuestionType
from surveyhub.app.schemas.session import SessionUser
from surveyhub.app.schemas.survey import SurveyCreate
from surveyhub.app.services.surveys import SurveyService


def demo_survey() -> SurveyCreate:
    return SurveyCreate(
        title="Team lunch",
        description="Help us plan the next team lunch.",
        questions=[
            QuestionIn(type=QuestionType.multiple_choice, question="Which day works best?",
                       options=["Tuesday", "Wednesday", "Thursday"]),
            QuestionIn(type=QuestionType.multiple_choice, question="Preferred cuisine",
                       options=["Italian", "Thai", "Mexican"]),
            QuestionIn(type=QuestionType.text, question="Any dietary restrictions?"),
        ],
    )


def main():
    email = sys.argv[1] if len(sys.argv) > 1 else "owner@example.com"
    Base.metadata.create_all(bind=engine)
    db = LocalSession()
    try:
        service = SurveyService(db)
        survey = next(iter(service.list_by_owner(email)), None) or service.create(demo_survey(), email)
        token = issue_session_token(SessionUser(user_id=email, email=email))

        print(f"Owner:      {email}")
        print(f"Survey id:  {survey.id}")
        print(f"Share link: {survey.share_url}")
        print(f"Token:      {token}")
    finally:
        db.close()

if __name__ == "__main__":
    main()
