from __future__ import annotations

from riskready.models import Priority, Recommendation, SkillGap

NEXT_STEPS = {
    Recommendation.YES: (
        "Enroll in 'Foundations of Risk Management' course",
        "Develop Excel skills for financial analysis",
        "Study internal audit frameworks (COSO, SOX)",
        "Consider entry-level positions or internships",
    ),
    Recommendation.MAYBE: (
        "Strengthen analytical and numerical skills",
        "Take introductory courses in finance and accounting",
        "Practice with case studies and scenarios",
        "Assess interest through informational interviews",
    ),
    Recommendation.NO: (
        "Explore related fields like Quality Assurance",
        "Build foundational business and finance knowledge",
        "Consider roles in operations or administration",
        "Reassess career interests and strengths",
    ),
}

CAREER_SUGGESTIONS = {
    Recommendation.YES: (
        "Risk Analyst",
        "Internal Auditor",
        "Compliance Analyst",
        "Operational Risk Associate",
        "Financial Auditor",
    ),
    Recommendation.MAYBE: (
        "Junior Risk Analyst",
        "Audit Assistant",
        "Compliance Coordinator",
    ),
    Recommendation.NO: (
        "Business Analyst",
        "Data Entry Specialist",
        "Administrative Assistant",
    ),
}

ALTERNATIVE_PATHS = {
    Recommendation.NO: (
        "Quality Assurance Analyst",
        "Business Process Coordinator",
        "Finance Operations Assistant",
        "Data Entry Specialist",
    ),
}


def generate_next_steps(recommendation: Recommendation) -> tuple[str, ...]:
    return NEXT_STEPS[Recommendation(recommendation)]


def generate_career_suggestions(recommendation: Recommendation) -> tuple[str, ...]:
    return CAREER_SUGGESTIONS[Recommendation(recommendation)]


def generate_alternative_paths(recommendation: Recommendation) -> tuple[str, ...]:
    return ALTERNATIVE_PATHS.get(Recommendation(recommendation), ())


def generate_skill_gaps(technical_score: int) -> tuple[SkillGap, ...]:
    """Derive the four tracked skill gaps from the technical readiness score.

    "Current" is a floor-bounded offset of the technical score; "gap" is
    measured against a fixed benchmark per skill rather than ``target``,
    so Communication & Reporting can report ``current > target`` once the
    technical score passes 70. Current values are capped at 100.
    """
    return (
        SkillGap(
            skill="Excel & Data Analysis",
            current=max(technical_score - 20, 30),
            target=85,
            gap=max(55 - technical_score, 0),
            priority=Priority.HIGH if technical_score < 50 else Priority.MEDIUM,
        ),
        SkillGap(
            skill="Internal Controls Knowledge",
            current=max(technical_score - 15, 35),
            target=90,
            gap=max(75 - technical_score, 0),
            priority=Priority.HIGH if technical_score < 60 else Priority.LOW,
        ),
        SkillGap(
            skill="Risk Assessment Frameworks",
            current=max(technical_score - 10, 40),
            target=80,
            gap=max(70 - technical_score, 0),
            priority=Priority.MEDIUM,
        ),
        SkillGap(
            skill="Communication & Reporting",
            current=min(max(technical_score + 10, 50), 100),
            target=80,
            gap=max(70 - technical_score, 0),
            priority=Priority.LOW,
        ),
    )


def priority_gaps(skill_gaps: tuple[SkillGap, ...], limit: int = 3) -> list[SkillGap]:
    order = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}
    ranked = sorted(skill_gaps, key=lambda g: (order[g.priority], -g.gap))
    return ranked[:limit]
