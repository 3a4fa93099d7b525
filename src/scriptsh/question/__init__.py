"""Interactive prompt exports."""

from .question import QuestionInfo, complete, question

__all__ = ["QuestionInfo", "complete", "question"]
