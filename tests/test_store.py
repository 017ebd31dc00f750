from surveyhub.app.services.store import (
    SurveyStore,
    question_to_document,
    response_from_row,
    survey_from_row,
    survey_to_row,
)
from surveyhub.db.models import Survey, SurveyResponse


def test_question_documents_keep_options_only_for_multiple_choice():
    text = question_to_document({"id": "q1", "type": "text", "question": "Why?", "options": ["x"], "extra": 1})
    choice = question_to_document({"id": "q2", "type": "multipleChoice", "question": "Pick", "options": None})

    assert text == {"id": "q1", "type": "text", "question": "Why?"}
    assert choice == {"id": "q2", "type": "multipleChoice", "question": "Pick", "options": []}


def test_survey_to_row_only_includes_given_fields():
    assert survey_to_row({"title": "New"}) == {"title": "New"}


def test_rows_with_missing_fields_are_read_with_defaults():
    survey = survey_from_row(Survey(survey_id="s1", title=None, description=None, questions=None, created_by=None))
    response = response_from_row(SurveyResponse(response_id="r1", survey_id="s1", answers="corrupt", respondent_email=""))

    assert (survey.title, survey.description, survey.questions, survey.created_by) == ("", "", [], "")
    assert response.answers == []
    assert response.respondent_email is None


def test_store_round_trip(db):
    store = SurveyStore(db)
    survey = store.create_survey({
        "title": "Poll",
        "description": "d",
        "questions": [{"id": "q1", "type": "text", "question": "Why?"}],
        "created_by": "owner@example.com",
    })
    store.add_response({"survey_id": survey.id, "answers": [{"questionId": "q1", "answer": "x"}]})

    assert store.get_survey(survey.id).title == "Poll"
    assert store.count_responses(survey.id) == 1
    assert store.list_responses(survey.id)[0].respondent_email is None
    assert store.update_survey("missing", {"title": "x"}) is None
    assert store.delete_survey(survey.id) is True
    assert store.get_survey(survey.id) is None
    assert store.delete_survey(survey.id) is False
    assert store.delete_responses(survey.id) == 1
