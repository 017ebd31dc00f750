"""Survey results aggregation.

Multiple-choice questions get a count and a percentage per declared option;
text questions list the raw answers. Only single string answers equal to a
declared option are tallied: list answers and unknown options are ignored.
"""
# app/services/aggregation.py
import math
from typing import Dict, List, Optional
from surveyhub.app.schemas.question import QuestionOut, QuestionType
from surveyhub.app.schemas.response import AnswerIn, ResponseOut
from surveyhub.app.schemas.results import OptionTally, QuestionSummary, SurveyResults
from surveyhub.app.schemas.survey import SurveyOut

LIST_SEPARATOR = "; "


def percentage(count: int, total: int) -> int:
    """Rounded share of `count` in `total`, half up; 0 when `total` is 0."""
    if total <= 0:
        return 0
    return math.floor(count * 100 / total + 0.5)


def find_answer(response: ResponseOut, question_id: str) -> Optional[AnswerIn]:
    for answer in response.answers:
        if answer.question_id == question_id:
            return answer
    return None


def tally_choices(question: QuestionOut, responses: List[ResponseOut]) -> Dict[str, OptionTally]:
    counts = {option: 0 for option in question.options or []}
    for response in responses:
        answer = find_answer(response, question.id)
        if answer and isinstance(answer.answer, str) and answer.answer in counts:
            counts[answer.answer] += 1

    total = len(responses)
    return {
        option: OptionTally(count=count, pct=percentage(count, total))
        for option, count in counts.items()
    }


def collect_text_answers(question: QuestionOut, responses: List[ResponseOut]) -> List[str]:
    answers = []
    for response in responses:
        answer = find_answer(response, question.id)
        if answer is None:
            continue
        if isinstance(answer.answer, list):
            answers.append(LIST_SEPARATOR.join(answer.answer))
        else:
            answers.append(answer.answer)
    return answers


def summarize(survey: SurveyOut, responses: List[ResponseOut]) -> SurveyResults:
    """Build the results summary of `survey` from its `responses`."""
    questions = []
    for question in survey.questions:
        summary = QuestionSummary(question_id=question.id, question=question.question, type=question.type)
        if question.type == QuestionType.multiple_choice:
            summary.options = tally_choices(question, responses)
        else:
            summary.answers = collect_text_answers(question, responses)
        questions.append(summary)

    timestamps = [r.created_at for r in responses if r.created_at is not None]
    return SurveyResults(
        survey_id=survey.id,
        title=survey.title,
        total_responses=len(responses),
        last_response_at=max(timestamps) if timestamps else None,
        questions=questions,
    )
