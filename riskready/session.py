from __future__ import annotations

import logging
from dataclasses import dataclass, field

from riskready.models import (
    Question,
    QuestionKey,
    RatingScaleQuestion,
    ResultsReport,
    Section,
    SingleChoiceQuestion,
)
from riskready.questionnaire import QUESTIONNAIRE, flatten_questions
from riskready.scoring import build_report

log = logging.getLogger(__name__)


class InvalidAnswerError(ValueError):
    pass


class IncompleteAnswerError(ValueError):
    pass


def validate_answer(question: Question, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAnswerError(f"{question.key.value}: expected an integer, got {value!r}")
    if isinstance(question, SingleChoiceQuestion):
        if not 0 <= value < len(question.options):
            raise InvalidAnswerError(
                f"{question.key.value}: option index {value} outside 0..{len(question.options) - 1}"
            )
    elif isinstance(question, RatingScaleQuestion):
        if not question.minimum <= value <= question.maximum:
            raise InvalidAnswerError(
                f"{question.key.value}: rating {value} outside {question.minimum}..{question.maximum}"
            )
    return value


@dataclass
class AssessmentSession:
    """Traversal state for one respondent working through the questionnaire.

    Answers survive moves in either direction; only ``answer`` and
    ``clear_answer`` touch them, one key per call.
    """

    sections: tuple[Section, ...] = QUESTIONNAIRE
    answers: dict[QuestionKey, int] = field(default_factory=dict)
    position: int = 0
    completed: bool = False

    def __post_init__(self):
        self._sequence = flatten_questions(self.sections)
        if not self._sequence:
            raise ValueError("questionnaire has no questions")

    @property
    def total_questions(self) -> int:
        return len(self._sequence)

    @property
    def current_section(self) -> Section:
        return self._sequence[self.position][0]

    @property
    def current_question(self) -> Question:
        return self._sequence[self.position][1]

    @property
    def section_index(self) -> int:
        return self.sections.index(self.current_section)

    @property
    def question_index(self) -> int:
        return self.current_section.questions.index(self.current_question)

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def progress_pct(self) -> float:
        return self.answered_count / self.total_questions * 100.0

    @property
    def is_first(self) -> bool:
        return self.position == 0

    @property
    def is_last(self) -> bool:
        return self.position == self.total_questions - 1

    @property
    def can_proceed(self) -> bool:
        return self.current_question.key in self.answers

    def current_answer(self) -> int | None:
        return self.answers.get(self.current_question.key)

    def answer(self, value: int) -> None:
        question = self.current_question
        self.answers[question.key] = validate_answer(question, value)

    def clear_answer(self) -> None:
        self.answers.pop(self.current_question.key, None)

    def next(self) -> bool:
        if not self.can_proceed:
            raise IncompleteAnswerError(
                f"{self.current_question.key.value} must be answered before moving on"
            )
        if self.is_last:
            self.completed = True
            log.info("Assessment completed with %d answers", self.answered_count)
            return True
        self.position += 1
        return False

    def previous(self) -> None:
        if not self.is_first:
            self.position -= 1
        self.completed = False

    def results(self) -> ResultsReport:
        return build_report(self.answers)
