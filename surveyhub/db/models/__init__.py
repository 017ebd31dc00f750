from .survey import Survey
from .response import SurveyResponse
