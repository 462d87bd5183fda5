from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Mapping

from riskready.models import QuestionKey

log = logging.getLogger(__name__)

AnswerSet = Mapping[QuestionKey | str, int]

NEUTRAL_RATING = 5

# Every rating question falls back to the neutral midpoint when unanswered.
RATING_DEFAULTS: dict[QuestionKey, int] = {
    QuestionKey.INTEREST_FINANCE: NEUTRAL_RATING,
    QuestionKey.MOTIVATION_LEVEL: NEUTRAL_RATING,
    QuestionKey.DATA_INTERPRETATION: NEUTRAL_RATING,
    QuestionKey.WILL_PERSISTENCE: NEUTRAL_RATING,
    QuestionKey.SKILL_EXCEL: NEUTRAL_RATING,
    QuestionKey.LEARNING_ABILITY: NEUTRAL_RATING,
}


def normalize_answers(answers: AnswerSet | None) -> dict[QuestionKey, int]:
    """Key an answer mapping by ``QuestionKey``.

    Unknown keys and ``None`` values are dropped so the scoring functions
    only ever see answers to known questions.
    """
    normalized: dict[QuestionKey, int] = {}
    for raw_key, value in (answers or {}).items():
        try:
            key = QuestionKey(raw_key)
        except ValueError:
            log.debug("Ignoring answer for unknown question %r", raw_key)
            continue
        if value is None:
            continue
        normalized[key] = value
    return normalized


def round_half_up(value: Fraction | int | float) -> int:
    return math.floor(Fraction(value) + Fraction(1, 2))


def is_answered(answers: Mapping[QuestionKey, int], key: QuestionKey) -> bool:
    return key in answers


def rating(answers: Mapping[QuestionKey, int], key: QuestionKey) -> int:
    value = answers.get(key)
    # A rating of 0 is outside every scale and counts as unanswered.
    if value is None or round_half_up(value) == 0:
        return RATING_DEFAULTS[key]
    return round_half_up(value)


def choice(answers: Mapping[QuestionKey, int], key: QuestionKey) -> int | None:
    return answers.get(key)


def choice_in(answers: Mapping[QuestionKey, int], key: QuestionKey, accepted: tuple[int, ...]) -> bool:
    return choice(answers, key) in accepted
