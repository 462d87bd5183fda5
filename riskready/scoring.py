from __future__ import annotations

import logging
from fractions import Fraction

from riskready.answers import (
    AnswerSet,
    choice,
    choice_in,
    is_answered,
    normalize_answers,
    rating,
    round_half_up,
)
from riskready.guidance import (
    generate_alternative_paths,
    generate_career_suggestions,
    generate_next_steps,
    generate_skill_gaps,
)
from riskready.models import (
    QuestionKey,
    Recommendation,
    ResultsReport,
    ScoreBreakdown,
    WiscarScores,
)
from riskready.questionnaire import correct_index

log = logging.getLogger(__name__)

FAVOURABLE_SIGNAL = 8
NEUTRAL_SIGNAL = 5
STRONG_JUDGMENT = 9
BASELINE_JUDGMENT = 6

CORRECT_ANSWER_POINTS = 20
DATA_INTERPRETATION_MULTIPLIER = 2
GRADED_QUESTIONS = (
    QuestionKey.NUMERICAL_REASONING,
    QuestionKey.LOGICAL_REASONING,
    QuestionKey.COMPLIANCE_KNOWLEDGE,
    QuestionKey.RISK_IDENTIFICATION,
)

YES_THRESHOLD = 70
MAYBE_THRESHOLD = 50
CONFIDENCE_UPLIFT = 10
CONFIDENCE_CAP = 95


def _clamp_pct(value: int) -> int:
    return max(0, min(100, value))


def _signal(answers, key: QuestionKey, favourable: tuple[int, ...]) -> int:
    return FAVOURABLE_SIGNAL if choice_in(answers, key, favourable) else NEUTRAL_SIGNAL


def _scaled(value: Fraction | int) -> int:
    return _clamp_pct(round_half_up(Fraction(value) * 10))


def psychometric_score(answers: AnswerSet) -> int:
    answers = normalize_answers(answers)
    signals = [
        rating(answers, QuestionKey.INTEREST_FINANCE),
        _signal(answers, QuestionKey.DETAIL_ORIENTATION, (1, 3)),
        _signal(answers, QuestionKey.WORK_STYLE, (0, 3)),
        _signal(answers, QuestionKey.PROBLEM_SOLVING, (0, 1)),
        rating(answers, QuestionKey.MOTIVATION_LEVEL),
    ]
    return _scaled(Fraction(sum(signals), len(signals)))


def technical_score(answers: AnswerSet) -> int:
    answers = normalize_answers(answers)
    score = 0
    for key in GRADED_QUESTIONS:
        if choice(answers, key) == correct_index(key):
            score += CORRECT_ANSWER_POINTS
    score += rating(answers, QuestionKey.DATA_INTERPRETATION) * DATA_INTERPRETATION_MULTIPLIER
    return _clamp_pct(min(score, 100))


def wiscar_scores(answers: AnswerSet) -> WiscarScores:
    answers = normalize_answers(answers)
    career_interest = FAVOURABLE_SIGNAL if is_answered(answers, QuestionKey.INTEREST_CAREER) else NEUTRAL_SIGNAL
    interest = Fraction(career_interest + rating(answers, QuestionKey.INTEREST_FINANCE), 2)
    cognitive = STRONG_JUDGMENT if choice(answers, QuestionKey.COGNITIVE_READINESS) == 1 else BASELINE_JUDGMENT
    real_world = STRONG_JUDGMENT if choice(answers, QuestionKey.REAL_WORLD_FIT) == 2 else BASELINE_JUDGMENT
    return WiscarScores(
        will=_scaled(rating(answers, QuestionKey.WILL_PERSISTENCE)),
        interest=_scaled(interest),
        skill=_scaled(rating(answers, QuestionKey.SKILL_EXCEL)),
        cognitive_readiness=_scaled(cognitive),
        ability_to_learn=_scaled(rating(answers, QuestionKey.LEARNING_ABILITY)),
        real_world_alignment=_scaled(real_world),
    )


def overall_score(psychometric: int, technical: int, wiscar: WiscarScores) -> int:
    # WISCAR enters as a single pillar: its six dimensions are averaged first.
    pillars = Fraction(psychometric) + Fraction(technical) + wiscar.mean
    return _clamp_pct(round_half_up(pillars / 3))


def recommendation_for(overall: int) -> Recommendation:
    if overall >= YES_THRESHOLD:
        return Recommendation.YES
    if overall >= MAYBE_THRESHOLD:
        return Recommendation.MAYBE
    return Recommendation.NO


def confidence_level(overall: int) -> int:
    return min(overall + CONFIDENCE_UPLIFT, CONFIDENCE_CAP)


def score_answers(answers: AnswerSet) -> ScoreBreakdown:
    answers = normalize_answers(answers)
    psychometric = psychometric_score(answers)
    technical = technical_score(answers)
    wiscar = wiscar_scores(answers)
    overall = overall_score(psychometric, technical, wiscar)
    return ScoreBreakdown(
        psychometric_score=psychometric,
        technical_score=technical,
        wiscar_scores=wiscar,
        overall_score=overall,
        recommendation=recommendation_for(overall),
        confidence_level=confidence_level(overall),
    )


# Public entry point for the scoring contract.
score = score_answers


def build_report(answers: AnswerSet) -> ResultsReport:
    breakdown = score_answers(answers)
    log.debug(
        "Scored %d answers: overall=%d recommendation=%s",
        len(normalize_answers(answers)),
        breakdown.overall_score,
        breakdown.recommendation.value,
    )
    return ResultsReport(
        psychometric_score=breakdown.psychometric_score,
        technical_score=breakdown.technical_score,
        wiscar_scores=breakdown.wiscar_scores,
        overall_score=breakdown.overall_score,
        recommendation=breakdown.recommendation,
        confidence_level=breakdown.confidence_level,
        next_steps=generate_next_steps(breakdown.recommendation),
        career_suggestions=generate_career_suggestions(breakdown.recommendation),
        alternative_paths=generate_alternative_paths(breakdown.recommendation),
        skill_gaps=generate_skill_gaps(breakdown.technical_score),
    )
