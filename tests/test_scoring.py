from __future__ import annotations

import itertools
from fractions import Fraction

import pytest

from riskready.models import QuestionKey, Recommendation, WiscarScores
from riskready.scoring import (
    build_report,
    confidence_level,
    overall_score,
    psychometric_score,
    recommendation_for,
    round_half_up,
    score,
    score_answers,
    technical_score,
    wiscar_scores,
)

ALL_CORRECT = {
    "numerical_reasoning": 1,
    "logical_reasoning": 1,
    "compliance_knowledge": 0,
    "risk_identification": 1,
}


def _uniform_wiscar(value: int) -> WiscarScores:
    return WiscarScores(value, value, value, value, value, value)


def test_empty_answers_use_defaults():
    breakdown = score_answers({})
    assert breakdown.psychometric_score == 50
    assert breakdown.technical_score == 10
    assert breakdown.wiscar_scores == WiscarScores(
        will=50,
        interest=50,
        skill=50,
        cognitive_readiness=60,
        ability_to_learn=50,
        real_world_alignment=60,
    )
    # (50 + 10 + 320/6) / 3 = 37.78
    assert breakdown.overall_score == 38
    assert breakdown.recommendation == Recommendation.NO
    assert breakdown.confidence_level == 48


def test_empty_answers_are_reproducible():
    assert build_report({}) == build_report({})
    assert build_report(None) == build_report({})


def test_technical_score_all_correct_is_capped_at_100():
    answers = dict(ALL_CORRECT, data_interpretation=10)
    assert technical_score(answers) == 100


def test_technical_score_all_wrong_without_rating():
    answers = {
        "numerical_reasoning": 0,
        "logical_reasoning": 0,
        "compliance_knowledge": 3,
        "risk_identification": 2,
    }
    assert technical_score(answers) == 10


def test_technical_score_monotonic_in_correct_answers():
    keys = list(ALL_CORRECT)
    for rating in (1, 5, 10):
        previous = -1
        for count in range(len(keys) + 1):
            answers = {key: ALL_CORRECT[key] for key in keys[:count]}
            answers["data_interpretation"] = rating
            score = technical_score(answers)
            assert score >= previous
            previous = score


def test_psychometric_favourable_answers():
    answers = {
        "interest_finance": 10,
        "detail_orientation": 3,
        "work_style": 0,
        "problem_solving": 1,
        "motivation_level": 9,
    }
    # mean(10, 8, 8, 8, 9) = 8.6
    assert psychometric_score(answers) == 86


def test_psychometric_unfavourable_choices_score_neutral():
    answers = {"detail_orientation": 0, "work_style": 2, "problem_solving": 3}
    assert psychometric_score(answers) == 50


def test_wiscar_interest_counts_any_career_answer():
    assert wiscar_scores({"interest_career": 0}).interest == 65
    assert wiscar_scores({"interest_career": 3, "interest_finance": 10}).interest == 90


def test_wiscar_judgment_questions():
    scores = wiscar_scores({"cognitive_readiness": 1, "real_world_fit": 2})
    assert scores.cognitive_readiness == 90
    assert scores.real_world_alignment == 90
    scores = wiscar_scores({"cognitive_readiness": 0, "real_world_fit": 1})
    assert scores.cognitive_readiness == 60
    assert scores.real_world_alignment == 60


def test_enum_and_string_keys_are_equivalent():
    by_string = {"skill_excel": 9, "will_persistence": 7}
    by_enum = {QuestionKey.SKILL_EXCEL: 9, QuestionKey.WILL_PERSISTENCE: 7}
    assert score_answers(by_string) == score_answers(by_enum)


def test_unknown_keys_are_ignored():
    assert score_answers({"favourite_colour": 3}) == score_answers({})


def test_overall_score_uniform_pillars():
    overall = overall_score(80, 80, _uniform_wiscar(80))
    assert overall == 80
    assert recommendation_for(overall) == Recommendation.YES
    assert confidence_level(overall) == 90


def test_overall_score_weights_wiscar_as_single_pillar():
    wiscar = WiscarScores(100, 0, 0, 0, 0, 0)
    # (60 + 60 + 100/6) / 3 = 45.56
    assert overall_score(60, 60, wiscar) == 46


def test_round_half_up_matches_display_rounding():
    assert round_half_up(Fraction(5, 2)) == 3
    assert round_half_up(Fraction(9, 2)) == 5
    assert round_half_up(Fraction(89, 2)) == 45


@pytest.mark.parametrize(
    "overall,expected",
    [
        (0, Recommendation.NO),
        (49, Recommendation.NO),
        (50, Recommendation.MAYBE),
        (69, Recommendation.MAYBE),
        (70, Recommendation.YES),
        (100, Recommendation.YES),
    ],
)
def test_recommendation_boundaries(overall, expected):
    assert recommendation_for(overall) == expected


def test_confidence_level_capped():
    for overall in range(0, 101):
        assert confidence_level(overall) == min(overall + 10, 95)
    assert confidence_level(100) == 95


def test_scores_stay_in_percentage_range():
    choices = (0, 1, 2, 3)
    ratings = (1, 10)
    for detail, cognitive, real_world, rating in itertools.product(choices, choices, choices, ratings):
        answers = {
            "interest_finance": rating,
            "detail_orientation": detail,
            "work_style": detail,
            "problem_solving": detail,
            "motivation_level": rating,
            "numerical_reasoning": detail,
            "logical_reasoning": detail,
            "compliance_knowledge": detail,
            "risk_identification": detail,
            "data_interpretation": rating,
            "will_persistence": rating,
            "interest_career": detail,
            "skill_excel": rating,
            "cognitive_readiness": cognitive,
            "learning_ability": rating,
            "real_world_fit": real_world,
        }
        report = build_report(answers)
        values = [
            report.psychometric_score,
            report.technical_score,
            report.overall_score,
            report.confidence_level,
            *report.wiscar_scores.values(),
        ]
        for gap in report.skill_gaps:
            values.extend([gap.current, gap.target])
        assert all(0 <= value <= 100 for value in values)


def test_strong_candidate_end_to_end():
    answers = dict(
        ALL_CORRECT,
        interest_finance=9,
        detail_orientation=1,
        work_style=3,
        problem_solving=0,
        motivation_level=9,
        data_interpretation=8,
        will_persistence=9,
        interest_career=2,
        skill_excel=8,
        cognitive_readiness=1,
        learning_ability=9,
        real_world_fit=2,
    )
    report = build_report(answers)
    assert report.psychometric_score == 84
    assert report.technical_score == 96
    assert report.wiscar_scores.as_dict() == {
        "Will": 90,
        "Interest": 85,
        "Skill": 80,
        "CognitiveReadiness": 90,
        "AbilityToLearn": 90,
        "RealWorldAlignment": 90,
    }
    # (84 + 96 + 525/6) / 3 = 89.17
    assert report.overall_score == 89
    assert report.recommendation == Recommendation.YES
    assert report.confidence_level == 95
    assert len(report.career_suggestions) == 5
    assert report.alternative_paths == ()


def test_malformed_answers_are_tolerated_and_clamped():
    answers = {
        "interest_finance": 1000,
        "motivation_level": -50,
        "data_interpretation": -100,
        "numerical_reasoning": 42,
        "logical_reasoning": -7,
        "cognitive_readiness": -1,
        "real_world_fit": 99,
        "skill_excel": 500,
        "will_persistence": -3,
    }
    report = build_report(answers)
    values = [
        report.psychometric_score,
        report.technical_score,
        report.overall_score,
        report.confidence_level,
        *report.wiscar_scores.values(),
    ]
    for gap in report.skill_gaps:
        values.extend([gap.current, gap.target, gap.gap])
    assert all(0 <= value <= 100 for value in values)
    assert report.psychometric_score == 100
    assert report.technical_score == 0
    assert report.wiscar_scores.skill == 100
    assert report.wiscar_scores.will == 0
    assert report.wiscar_scores.cognitive_readiness == 60
    assert report.wiscar_scores.real_world_alignment == 60


def test_fractional_ratings_are_rounded_to_integers():
    breakdown = score_answers({"data_interpretation": 7.5, "skill_excel": 6.4})
    assert breakdown.technical_score == 16
    assert isinstance(breakdown.technical_score, int)
    assert breakdown.wiscar_scores.skill == 60
    assert isinstance(breakdown.wiscar_scores.skill, int)
    assert score_answers({"data_interpretation": 0.2}).technical_score == 10


def test_score_is_the_scoring_entry_point():
    answers = dict(ALL_CORRECT, data_interpretation=10)
    assert score(answers) == score_answers(answers)
    assert score(answers).technical_score == 100
