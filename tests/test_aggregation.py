from datetime import datetime, timedelta

import pytest

from surveyhub.app.schemas.response import ResponseOut
from surveyhub.app.schemas.survey import SurveyOut
from surveyhub.app.services.aggregation import percentage, summarize

NOW = datetime(2026, 10, 1, 12, 0, 0)


def _survey():
    return SurveyOut(
        id="s1",
        title="Poll",
        description="",
        created_by="owner@example.com",
        questions=[
            {"id": "q1", "type": "multipleChoice", "question": "Pick one", "options": ["A", "B"]},
            {"id": "q2", "type": "text", "question": "Why?"},
        ],
    )


def _response(n, **answers):
    return ResponseOut(
        id=f"r{n}",
        survey_id="s1",
        answers=[{"questionId": qid, "answer": value} for qid, value in answers.items()],
        created_at=NOW + timedelta(minutes=n),
    )


@pytest.mark.parametrize("count, total, expected", [
    (2, 3, 67),
    (1, 3, 33),
    (1, 8, 13),
    (0, 5, 0),
    (3, 3, 100),
    (0, 0, 0),
    (4, 0, 0),
])
def test_percentage(count, total, expected):
    assert percentage(count, total) == expected


def test_summarize_counts_multiple_choice_answers():
    responses = [_response(1, q1="A"), _response(2, q1="A"), _response(3, q1="B")]

    results = summarize(_survey(), responses)

    options = results.questions[0].options
    assert {k: (v.count, v.pct) for k, v in options.items()} == {"A": (2, 67), "B": (1, 33)}
    assert results.total_responses == 3
    assert results.last_response_at == NOW + timedelta(minutes=3)


def test_summarize_without_responses_reports_zeroes():
    results = summarize(_survey(), [])

    assert results.total_responses == 0
    assert results.last_response_at is None
    assert {k: (v.count, v.pct) for k, v in results.questions[0].options.items()} == {"A": (0, 0), "B": (0, 0)}
    assert results.questions[1].answers == []


def test_list_and_unknown_answers_are_not_tallied():
    responses = [_response(1, q1=["A", "B"]), _response(2, q1="C"), _response(3, q1="B")]

    options = summarize(_survey(), responses).questions[0].options

    assert list(options) == ["A", "B"]
    assert (options["A"].count, options["B"].count) == (0, 1)
    assert options["B"].pct == 33


def test_text_answers_are_listed_and_missing_ones_skipped():
    responses = [_response(1, q2="Cheap"), _response(2, q1="A"), _response(3, q2="Close by")]

    question = summarize(_survey(), responses).questions[1]

    assert question.options is None
    assert question.answers == ["Cheap", "Close by"]


def test_results_endpoint_is_owner_only(client, make_survey, owner_headers, intruder_headers):
    survey = make_survey()
    for answer in ("Tue", "Tue", "Wed"):
        client.post("/api/responses", json={"surveyId": survey["id"], "answers": [{"questionId": "q1", "answer": answer}]})
    url = f"/api/surveys/{survey['id']}/results"

    assert client.get(url).status_code == 401
    assert client.get(url, headers=intruder_headers).status_code == 403
    response = client.get(url, headers=owner_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["totalResponses"] == 3
    assert data["questions"][0]["options"] == {"Tue": {"count": 2, "pct": 67}, "Wed": {"count": 1, "pct": 33}}
    assert data["questions"][1]["answers"] == []


def test_list_answers_to_text_questions_are_joined():
    question = summarize(_survey(), [_response(1, q2=["Cheap", "Close by"])]).questions[1]

    assert question.answers == ["Cheap; Close by"]


def test_results_cover_every_stored_option(client, make_survey, owner_headers, survey_payload):
    survey_payload["questions"][0]["options"] = ["A", " A", "B"]
    survey = make_survey(questions=survey_payload["questions"])
    for answer in ("A", "B", "A"):
        client.post("/api/responses", json={"surveyId": survey["id"], "answers": [{"questionId": "q1", "answer": answer}]})

    results = client.get(f"/api/surveys/{survey['id']}/results", headers=owner_headers).json()

    assert survey["questions"][0]["options"] == ["A", "B"]
    assert list(results["questions"][0]["options"]) == survey["questions"][0]["options"]
    assert results["questions"][0]["options"]["A"] == {"count": 2, "pct": 67}
