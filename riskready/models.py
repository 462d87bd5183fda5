from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction


class QuestionKey(str, Enum):
    INTEREST_FINANCE = "interest_finance"
    DETAIL_ORIENTATION = "detail_orientation"
    WORK_STYLE = "work_style"
    PROBLEM_SOLVING = "problem_solving"
    MOTIVATION_LEVEL = "motivation_level"
    NUMERICAL_REASONING = "numerical_reasoning"
    LOGICAL_REASONING = "logical_reasoning"
    COMPLIANCE_KNOWLEDGE = "compliance_knowledge"
    RISK_IDENTIFICATION = "risk_identification"
    DATA_INTERPRETATION = "data_interpretation"
    WILL_PERSISTENCE = "will_persistence"
    INTEREST_CAREER = "interest_career"
    SKILL_EXCEL = "skill_excel"
    COGNITIVE_READINESS = "cognitive_readiness"
    LEARNING_ABILITY = "learning_ability"
    REAL_WORLD_FIT = "real_world_fit"


class QuestionType(str, Enum):
    SINGLE_CHOICE = "single-choice"
    RATING_SCALE = "rating-scale"


class Recommendation(str, Enum):
    YES = "Yes"
    MAYBE = "Maybe"
    NO = "No"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class SingleChoiceQuestion:
    key: QuestionKey
    text: str
    options: tuple[str, ...]
    correct: int | None = None

    @property
    def question_type(self) -> QuestionType:
        return QuestionType.SINGLE_CHOICE

    @property
    def is_gradable(self) -> bool:
        return self.correct is not None


@dataclass(frozen=True)
class RatingScaleQuestion:
    key: QuestionKey
    text: str
    minimum: int
    maximum: int
    labels: tuple[str, str]

    @property
    def question_type(self) -> QuestionType:
        return QuestionType.RATING_SCALE


Question = SingleChoiceQuestion | RatingScaleQuestion


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    description: str
    questions: tuple[Question, ...]


WISCAR_LABELS = {
    "will": "Will",
    "interest": "Interest",
    "skill": "Skill",
    "cognitive_readiness": "CognitiveReadiness",
    "ability_to_learn": "AbilityToLearn",
    "real_world_alignment": "RealWorldAlignment",
}


@dataclass(frozen=True)
class WiscarScores:
    will: int
    interest: int
    skill: int
    cognitive_readiness: int
    ability_to_learn: int
    real_world_alignment: int

    def values(self) -> tuple[int, ...]:
        return tuple(getattr(self, field) for field in WISCAR_LABELS)

    @property
    def mean(self) -> Fraction:
        values = self.values()
        return Fraction(sum(values), len(values))

    def as_dict(self) -> dict[str, int]:
        return {label: getattr(self, field) for field, label in WISCAR_LABELS.items()}


@dataclass(frozen=True)
class SkillGap:
    skill: str
    current: int
    target: int
    gap: int
    priority: Priority


@dataclass(frozen=True)
class ScoreBreakdown:
    psychometric_score: int
    technical_score: int
    wiscar_scores: WiscarScores
    overall_score: int
    recommendation: Recommendation
    confidence_level: int


@dataclass(frozen=True)
class ResultsReport:
    psychometric_score: int
    technical_score: int
    wiscar_scores: WiscarScores
    overall_score: int
    recommendation: Recommendation
    confidence_level: int
    next_steps: tuple[str, ...]
    career_suggestions: tuple[str, ...]
    alternative_paths: tuple[str, ...]
    skill_gaps: tuple[SkillGap, ...]
