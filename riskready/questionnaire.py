from __future__ import annotations

from riskready.models import (
    Question,
    QuestionKey,
    RatingScaleQuestion,
    Section,
    SingleChoiceQuestion,
)

RATING_MIN = 1
RATING_MAX = 10


def _rating(key: QuestionKey, text: str, low_label: str, high_label: str) -> RatingScaleQuestion:
    return RatingScaleQuestion(
        key=key,
        text=text,
        minimum=RATING_MIN,
        maximum=RATING_MAX,
        labels=(low_label, high_label),
    )


PSYCHOMETRIC = Section(
    key="psychometric",
    title="Psychometric Evaluation",
    description="Understanding your personality and motivational fit",
    questions=(
        _rating(
            QuestionKey.INTEREST_FINANCE,
            "How interested are you in financial systems and compliance?",
            "Not interested",
            "Very interested",
        ),
        SingleChoiceQuestion(
            key=QuestionKey.DETAIL_ORIENTATION,
            text="When reviewing documents, I prefer to:",
            options=(
                "Scan quickly for main points",
                "Read thoroughly and check details",
                "Focus on specific sections only",
                "Review multiple times for accuracy",
            ),
        ),
        SingleChoiceQuestion(
            key=QuestionKey.WORK_STYLE,
            text="In a work environment, I thrive when:",
            options=(
                "Working independently on structured tasks",
                "Collaborating closely with team members",
                "Leading projects and making decisions",
                "Supporting others and following procedures",
            ),
        ),
        SingleChoiceQuestion(
            key=QuestionKey.PROBLEM_SOLVING,
            text="When facing a complex problem, I typically:",
            options=(
                "Break it down into smaller components",
                "Look for similar past examples",
                "Brainstorm creative solutions",
                "Consult with experts or colleagues",
            ),
        ),
        _rating(
            QuestionKey.MOTIVATION_LEVEL,
            "Rate your motivation to pursue a career in risk management:",
            "Low motivation",
            "Very motivated",
        ),
    ),
)

TECHNICAL = Section(
    key="technical",
    title="Technical & Aptitude Assessment",
    description="Testing your analytical and domain knowledge",
    questions=(
        SingleChoiceQuestion(
            key=QuestionKey.NUMERICAL_REASONING,
            text=(
                "A company's risk exposure increased from $2M to $2.8M. "
                "What is the percentage increase?"
            ),
            options=("30%", "40%", "28%", "80%"),
            correct=1,
        ),
        SingleChoiceQuestion(
            key=QuestionKey.LOGICAL_REASONING,
            text=(
                "If all audits require documentation AND proper authorization, "
                "and this process lacks proper authorization, then:"
            ),
            options=(
                "The audit is complete",
                "The audit is invalid",
                "Additional documentation is needed",
                "The authorization can be obtained later",
            ),
            correct=1,
        ),
        SingleChoiceQuestion(
            key=QuestionKey.COMPLIANCE_KNOWLEDGE,
            text="Which framework is primarily used for internal control over financial reporting?",
            options=("COSO", "ISO 27001", "ITIL", "BASEL III"),
            correct=0,
        ),
        SingleChoiceQuestion(
            key=QuestionKey.RISK_IDENTIFICATION,
            text="A company stores sensitive customer data without encryption. This represents:",
            options=(
                "Operational risk only",
                "Compliance and cybersecurity risk",
                "Financial risk only",
                "Strategic risk only",
            ),
            correct=1,
        ),
        _rating(
            QuestionKey.DATA_INTERPRETATION,
            "Rate your comfort level with interpreting financial data and reports:",
            "Very uncomfortable",
            "Very comfortable",
        ),
    ),
)

WISCAR = Section(
    key="wiscar",
    title="WISCAR Framework Analysis",
    description="Comprehensive readiness assessment",
    questions=(
        _rating(
            QuestionKey.WILL_PERSISTENCE,
            "How likely are you to complete a challenging 6-month certification program?",
            "Very unlikely",
            "Very likely",
        ),
        SingleChoiceQuestion(
            key=QuestionKey.INTEREST_CAREER,
            text="Which aspect of risk and audit work interests you most?",
            options=(
                "Identifying and preventing fraud",
                "Ensuring regulatory compliance",
                "Analyzing financial controls",
                "Improving business processes",
            ),
        ),
        _rating(
            QuestionKey.SKILL_EXCEL,
            "Rate your current Excel skills:",
            "Beginner",
            "Expert",
        ),
        SingleChoiceQuestion(
            key=QuestionKey.COGNITIVE_READINESS,
            text="When learning new concepts, I:",
            options=(
                "Need multiple examples to understand",
                "Grasp concepts quickly with one explanation",
                "Prefer hands-on practice to learn",
                "Learn best through discussion and questions",
            ),
        ),
        _rating(
            QuestionKey.LEARNING_ABILITY,
            "How comfortable are you with receiving and acting on feedback?",
            "Very uncomfortable",
            "Very comfortable",
        ),
        SingleChoiceQuestion(
            key=QuestionKey.REAL_WORLD_FIT,
            text="You discover a significant control weakness during an audit. Your first action would be:",
            options=(
                "Document it and continue the audit",
                "Immediately report to management",
                "Investigate the root cause thoroughly",
                "Discuss with the auditee first",
            ),
        ),
    ),
)

QUESTIONNAIRE: tuple[Section, ...] = (PSYCHOMETRIC, TECHNICAL, WISCAR)


def flatten_questions(sections: tuple[Section, ...] = QUESTIONNAIRE) -> list[tuple[Section, Question]]:
    return [(section, question) for section in sections for question in section.questions]


_QUESTIONS_BY_KEY: dict[QuestionKey, Question] = {
    question.key: question for _, question in flatten_questions()
}


def get_question(key: QuestionKey | str) -> Question:
    return _QUESTIONS_BY_KEY[QuestionKey(key)]


def correct_index(key: QuestionKey | str) -> int | None:
    question = get_question(key)
    if isinstance(question, SingleChoiceQuestion):
        return question.correct
    return None


def total_questions(sections: tuple[Section, ...] = QUESTIONNAIRE) -> int:
    return sum(len(section.questions) for section in sections)
