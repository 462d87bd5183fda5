from __future__ import annotations

from datetime import datetime, timezone

from riskready.answers import AnswerSet, normalize_answers
from riskready.models import ResultsReport


def report_to_dict(report: ResultsReport) -> dict:
    return {
        "psychometric_fit_score": report.psychometric_score,
        "technical_readiness_score": report.technical_score,
        "wiscar_scores": report.wiscar_scores.as_dict(),
        "overall_confidence_score": report.overall_score,
        "recommendation": report.recommendation.value,
        "confidence_level": report.confidence_level,
        "next_steps": list(report.next_steps),
        "career_suggestions": list(report.career_suggestions),
        "alternative_paths": list(report.alternative_paths),
        "skill_gaps": [
            {
                "skill": g.skill,
                "current": g.current,
                "target": g.target,
                "gap": g.gap,
                "priority": g.priority.value,
            }
            for g in report.skill_gaps
        ],
    }


def export_payload(answers: AnswerSet, report: ResultsReport, generated_at: datetime | None = None) -> dict:
    generated_at = generated_at or datetime.now(timezone.utc)
    return {
        "generated_at": generated_at.isoformat(),
        "answers": {key.value: value for key, value in normalize_answers(answers).items()},
        "results": report_to_dict(report),
    }


def report_filename(report: ResultsReport) -> str:
    return f"risk_audit_readiness_{report.recommendation.value.lower()}_{report.overall_score}.json"
