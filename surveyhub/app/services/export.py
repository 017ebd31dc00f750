# app/services/export.py
import csv
import io
from typing import Any, Dict, List, Tuple
from surveyhub.app.schemas.response import ResponseOut
from surveyhub.app.schemas.survey import SurveyOut
from surveyhub.app.services.aggregation import LIST_SEPARATOR

ANONYMOUS = "Anonymous"


class ResponsesExporter:
    """Flattens the responses of one survey into CSV rows, one per response."""

    def __init__(self, survey: SurveyOut, responses: List[ResponseOut]):
        self.survey = survey
        self.responses = responses

    def question_columns(self) -> List[Tuple[str, str]]:
        """(question id, column name) pairs; repeated question texts get the id appended."""
        columns = []
        used = set()
        for question in self.survey.questions:
            name = question.question
            if name in used:
                name = f"{name} ({question.id})"
            used.add(name)
            columns.append((question.id, name))
        return columns

    def fieldnames(self) -> List[str]:
        return ["response_id", "created_at", "respondent_email"] + [name for _, name in self.question_columns()]

    def rows(self) -> List[Dict[str, Any]]:
        columns = self.question_columns()
        rows = []
        for response in self.responses:
            by_question = {a.question_id: a.answer for a in response.answers}
            row = {
                "response_id": response.id,
                "created_at": response.created_at.isoformat() if response.created_at else None,
                "respondent_email": response.respondent_email or ANONYMOUS,
            }
            for question_id, name in columns:
                value = by_question.get(question_id)
                if isinstance(value, list):
                    value = LIST_SEPARATOR.join(value)
                row[name] = value
            rows.append(row)
        return rows

    def to_csv(self) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=self.fieldnames())
        writer.writeheader()
        writer.writerows(self.rows())
        return output.getvalue()


def export_responses_to_csv(survey: SurveyOut, responses: List[ResponseOut]) -> str:
    """Export the responses of a survey as a CSV string."""
    return ResponsesExporter(survey, responses).to_csv()
