from __future__ import annotations

import json
import logging

import pandas as pd
import streamlit as st

from riskready.career_connectors import build_job_search_links, build_training_links, fetch_live_jobs
from riskready.config import load_settings
from riskready.guidance import priority_gaps
from riskready.models import Priority, RatingScaleQuestion, Recommendation
from riskready.reporting import export_payload, report_filename
from riskready.session import AssessmentSession

APP_TITLE = "RiskReady"
APP_SUBTITLE = "Risk & Audit Analyst Readiness Assessment"
RECOMMENDATION_COLORS = {
    Recommendation.YES: "#16a34a",
    Recommendation.MAYBE: "#d97706",
    Recommendation.NO: "#dc2626",
}
PRIORITY_ICONS = {Priority.HIGH: "🔴", Priority.MEDIUM: "🟠", Priority.LOW: "⚪"}

log = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def ensure_state():
    if "page" not in st.session_state:
        st.session_state["page"] = "Landing"
    if "session" not in st.session_state:
        st.session_state["session"] = AssessmentSession()
    if "report" not in st.session_state:
        st.session_state["report"] = None


def reset_assessment():
    log.info("Restarting assessment")
    st.session_state["session"] = AssessmentSession()
    st.session_state["report"] = None
    st.session_state["page"] = "Assessment"


def inject_styles():
    st.markdown(
        """
        <style>
        .hero-wrap {
            background: radial-gradient(circle at 20% 20%, #2563eb 0%, #1e3a8a 45%, #0f172a 100%);
            border-radius: 18px;
            padding: 28px;
            color: #f8fafc;
            margin-bottom: 18px;
        }
        .hero-title { font-size: 2.2rem; font-weight: 700; margin-bottom: 0.4rem; }
        .hero-sub { opacity: 0.92; font-size: 1.03rem; }
        .reco-badge {
            display: inline-block;
            border-radius: 999px;
            padding: 6px 18px;
            color: #ffffff;
            font-weight: 700;
            font-size: 1.1rem;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def as_pct_label(value: float) -> str:
    return f"{value:.0f}%"


def render_landing_page(session: AssessmentSession):
    st.markdown(
        """
        <div class="hero-wrap">
          <div class="hero-title">Is a Risk & Audit Analyst career right for you?</div>
          <div class="hero-sub">Psychometric fit, technical aptitude and WISCAR readiness in one short assessment.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
    col1, col2, col3 = st.columns(3)
    col1.metric("Sections", str(len(session.sections)), "Psychometric + Technical + WISCAR")
    col2.metric("Questions", str(session.total_questions), "Choice + rating scale")
    col3.metric("Outcome", "Yes / Maybe / No", "With next steps and skill gaps")

    overview = pd.DataFrame(
        [
            {"Section": section.title, "Focus": section.description, "Questions": len(section.questions)}
            for section in session.sections
        ]
    )
    st.dataframe(overview, hide_index=True, use_container_width=True)
    if st.button("Start Assessment", type="primary"):
        st.session_state["page"] = "Assessment"
        st.rerun()


def render_question(session: AssessmentSession):
    question = session.current_question
    current = session.current_answer()
    widget_key = f"answer_{question.key.value}"
    if isinstance(question, RatingScaleQuestion):
        value = st.slider(
            question.text,
            min_value=question.minimum,
            max_value=question.maximum,
            value=current if current is not None else question.minimum,
            key=widget_key,
        )
        low, high = question.labels
        left, right = st.columns(2)
        left.caption(low)
        right.markdown(f"<div style='text-align:right'><small>{high}</small></div>", unsafe_allow_html=True)
        if st.checkbox("Confirm rating", value=current is not None, key=f"{widget_key}_confirm"):
            session.answer(int(value))
        else:
            session.clear_answer()
    else:
        choice = st.radio(
            question.text,
            options=list(range(len(question.options))),
            index=current,
            format_func=lambda idx: question.options[idx],
            key=widget_key,
        )
        if choice is not None:
            session.answer(int(choice))


def render_assessment(session: AssessmentSession):
    section = session.current_section
    st.subheader(f"Section {session.section_index + 1} of {len(session.sections)}: {section.title}")
    st.caption(section.description)

    st.caption(f"Progress: {session.answered_count} of {session.total_questions} questions")
    st.progress(session.progress_pct / 100.0)

    with st.container(border=True):
        st.markdown(f"**Question {session.question_index + 1} of {len(section.questions)}**")
        render_question(session)

    back, _, forward = st.columns([1, 2, 1])
    if back.button("Previous", disabled=session.is_first):
        session.previous()
        st.rerun()
    label = "Complete Assessment" if session.is_last else "Next"
    if forward.button(label, disabled=not session.can_proceed, type="primary"):
        if session.next():
            st.session_state["report"] = session.results()
            st.session_state["page"] = "Results"
        st.rerun()


def render_results(session: AssessmentSession, report, settings):
    color = RECOMMENDATION_COLORS[report.recommendation]
    st.markdown(
        f'<span class="reco-badge" style="background:{color}">Recommendation: {report.recommendation.value}</span>',
        unsafe_allow_html=True,
    )
    st.caption(f"Confidence level: {as_pct_label(report.confidence_level)}")

    with st.expander("Overall Assessment Scores", expanded=True):
        c1, c2, c3 = st.columns(3)
        c1.metric("Psychometric Fit", as_pct_label(report.psychometric_score))
        c1.progress(report.psychometric_score / 100.0)
        c2.metric("Technical Readiness", as_pct_label(report.technical_score))
        c2.progress(report.technical_score / 100.0)
        c3.metric("Overall Confidence", as_pct_label(report.overall_score))
        c3.progress(report.overall_score / 100.0)

    with st.expander("WISCAR Framework Analysis", expanded=True):
        wiscar_df = pd.DataFrame(
            [{"Dimension": name, "Score": score} for name, score in report.wiscar_scores.as_dict().items()]
        )
        st.bar_chart(wiscar_df.set_index("Dimension"))

    with st.expander("Career Paths + Skill Gaps", expanded=True):
        left, right = st.columns(2)
        left.markdown("#### Recommended Career Paths")
        for career in report.career_suggestions:
            left.write(f"- {career}")
        right.markdown("#### Skill Development Areas")
        gaps_df = pd.DataFrame(
            [
                {
                    "Skill": gap.skill,
                    "Current": gap.current,
                    "Target": gap.target,
                    "Gap": gap.gap,
                    "Priority": f"{PRIORITY_ICONS[gap.priority]} {gap.priority.value}",
                }
                for gap in report.skill_gaps
            ]
        )
        right.dataframe(gaps_df, hide_index=True, use_container_width=True)

    with st.expander("Your Next Steps", expanded=True):
        for idx, step in enumerate(report.next_steps, start=1):
            st.write(f"{idx}. {step}")
        if report.alternative_paths:
            st.markdown("#### Alternative Paths to Consider")
            for path in report.alternative_paths:
                st.write(f"- {path}")

    with st.expander("Job Postings + Training Connectors", expanded=False):
        location = st.text_input("Preferred job location", value=settings.job_location)
        role = st.selectbox("Role", list(report.career_suggestions))
        live_jobs = fetch_live_jobs(role, location, max_results=settings.max_live_jobs, settings=settings)
        if live_jobs:
            for job in live_jobs:
                st.write(f"- [{job['title']} - {job['company']} ({job['source']})]({job['url']})")
        else:
            st.caption("Live listings require RAPIDAPI_KEY. Use direct platform links.")
        for item in build_job_search_links(role, location):
            st.write(f"- [{item['title']}]({item['url']})")
        for item in build_training_links(priority_gaps(report.skill_gaps)):
            st.write(f"- [{item['provider']}: {item['title']}]({item['url']})")

    a, b = st.columns(2)
    if a.button("Take Assessment Again"):
        reset_assessment()
        st.rerun()
    payload = export_payload(session.answers, report)
    b.download_button(
        "Download Report",
        data=json.dumps(payload, indent=2),
        file_name=report_filename(report),
        mime="application/json",
    )


settings = load_settings()
configure_logging(settings.log_level)

st.set_page_config(page_title=APP_TITLE, layout="wide")
inject_styles()
st.title(APP_TITLE)
st.caption(APP_SUBTITLE)
ensure_state()

session = st.session_state["session"]
page = st.session_state["page"]

if page == "Landing":
    render_landing_page(session)
elif page == "Results" and st.session_state["report"] is not None:
    render_results(session, st.session_state["report"], settings)
else:
    render_assessment(session)
