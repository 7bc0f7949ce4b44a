"""Terminal input clients."""

from .questionnaire import AccountQuestionnaire, NewAccountAnswers

__all__ = ["AccountQuestionnaire", "NewAccountAnswers"]
