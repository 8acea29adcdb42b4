"""
Streamlit Web Interface for the Interview Coach.

Run with: streamlit run ui/streamlit_app.py
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
from html import escape

import streamlit as st

import config
from agents.analyzer import analyze
from errors import InterviewCoachError
from graph import InterviewRunner
from schemas import QuestionType, ScoreBand

config.configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="AI Interview Coach",
    page_icon="🎯",
    layout="wide",
)

THEMES = {
    "Light": {"background": "#f9fafb", "card": "#ffffff", "text": "#111827", "muted": "#6b7280"},
    "Dark": {"background": "#0f172a", "card": "#1e293b", "text": "#f1f5f9", "muted": "#94a3b8"},
}

BAND_COLORS = {
    ScoreBand.HIGH: "#22c55e",
    ScoreBand.MEDIUM: "#eab308",
    ScoreBand.LOW: "#ef4444",
}

TYPE_COLORS = {
    QuestionType.TECHNICAL: "#2563eb",
    QuestionType.BEHAVIORAL: "#7c3aed",
    QuestionType.SITUATIONAL: "#ea580c",
}

# Initialize session state
DEFAULTS = {
    "job_description": "",
    "resume": "",
    "analysis": None,
    "runner": None,
    "error": "",
    "theme": "Light",
    # Queued backend action; widgets are disabled while it is set
    "pending": None,
}
for key, value in DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = value


# =============================================================================
# INTENTS
# =============================================================================
# Widget callbacks only queue the action. The backend call runs at the end of
# the next script run, after every input has been rendered disabled.

def queue_analysis():
    st.session_state.job_description = st.session_state.job_description_input
    st.session_state.resume = st.session_state.resume_input
    st.session_state.pending = ("analyze",)


def queue_start():
    st.session_state.pending = ("start",)


def queue_answer():
    st.session_state.pending = ("submit", st.session_state.answer_input)


def queue_retry():
    st.session_state.pending = ("retry",)


def reset_analysis():
    st.session_state.analysis = None
    st.session_state.runner = None
    st.session_state.error = ""


def run_analysis():
    st.session_state.analysis = None
    st.session_state.runner = None
    with st.spinner("Analyzing..."):
        st.session_state.analysis = analyze(
            st.session_state.job_description, st.session_state.resume
        )


def start_interview():
    runner = InterviewRunner.from_analysis(
        st.session_state.analysis, st.session_state.job_description
    )
    runner.start()
    st.session_state.runner = runner


def submit_answer(answer: str):
    with st.spinner("Reviewing your answer..."):
        st.session_state.runner.submit_answer(answer)


def retry_summary():
    with st.spinner("Preparing your summary..."):
        st.session_state.runner.retry_summary()


ACTIONS = {
    "analyze": run_analysis,
    "start": start_interview,
    "submit": submit_answer,
    "retry": retry_summary,
}


def run_pending_action(action: tuple):
    name, *args = action
    st.session_state.error = ""
    try:
        ACTIONS[name](*args)
    except InterviewCoachError as exc:
        logger.warning("Action %s failed: %s", name, exc)
        st.session_state.error = exc.user_message


# =============================================================================
# RENDERING
# =============================================================================

def apply_theme(name: str):
    theme = THEMES[name]
    st.markdown(f"""
    <style>
        .stApp {{ background-color: {theme["background"]}; color: {theme["text"]}; }}
        .coach-card {{
            background: {theme["card"]};
            border-radius: 12px;
            padding: 20px;
            margin-bottom: 16px;
        }}
        .coach-muted {{ color: {theme["muted"]}; font-size: 0.9em; }}
    </style>
    """, unsafe_allow_html=True)


def render_score(label: str, score: int, band: ScoreBand, summary: str):
    color = BAND_COLORS[band]
    st.markdown(f"""
    <div class="coach-card" style="text-align: center; border-top: 4px solid {color};">
        <div class="coach-muted">{escape(label)}</div>
        <div style="font-size: 3.5em; font-weight: bold; color: {color};">{score}%</div>
        <div style="margin-top: 12px;">{escape(summary)}</div>
    </div>
    """, unsafe_allow_html=True)


def render_analysis(analysis, busy: bool):
    render_score("Resume Match Score", analysis.match_score, analysis.band, analysis.summary)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("✅ Your Strengths")
        for strength in analysis.strengths:
            st.write(f"• {strength}")
    with col2:
        st.subheader("⚠️ Missing Skills")
        for skill in analysis.missing_skills:
            st.write(f"• {skill}")

    st.subheader("🎯 Interview Questions")
    for question in analysis.interview_questions:
        color = TYPE_COLORS.get(question.type, "#6b7280")
        st.markdown(f"""
        <div class="coach-card">
            <span style="
                background: {color}22;
                color: {color};
                font-size: 0.75em;
                font-weight: 600;
                padding: 2px 8px;
                border-radius: 999px;
            ">{question.type.value}</span>
            <div style="margin-top: 8px;">{escape(question.question)}</div>
        </div>
        """, unsafe_allow_html=True)

    if analysis.interview_questions:
        st.button(
            "Start Mock Interview", type="primary", key="start_button",
            on_click=queue_start, disabled=busy,
        )


def render_transcript(runner: InterviewRunner):
    for msg in runner.get_messages():
        if msg["role"] == "assistant":
            with st.chat_message("assistant", avatar="👔"):
                st.write(msg["content"])
        else:
            with st.chat_message("user", avatar="👤"):
                st.write(msg["content"])


def render_summary(summary):
    st.success("Interview Complete")
    render_score("Overall Interview Score", summary.overall_score, summary.band, summary.summary)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Recommendation", summary.recommendation.value)
    with col2:
        st.subheader("Strengths")
        for strength in summary.strengths:
            st.write(f"• {strength}")
    with col3:
        st.subheader("Improvements")
        for item in summary.improvements:
            st.write(f"• {item}")


busy = st.session_state.pending is not None

# Sidebar
with st.sidebar:
    st.title("Interview Coach")
    st.session_state.theme = st.radio(
        "Theme",
        list(THEMES),
        index=list(THEMES).index(st.session_state.theme),
        horizontal=True,
    )

    runner = st.session_state.runner
    if runner is not None:
        st.divider()
        st.subheader("Interview")
        position, total = runner.progress()
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Status", runner.status.value)
        with col2:
            st.metric("Question", f"{position}/{total}")

    if st.session_state.analysis is not None:
        st.divider()
        st.button(
            "Start New Analysis", type="secondary", key="sidebar_reset_button",
            on_click=reset_analysis, disabled=busy, use_container_width=True,
        )

apply_theme(st.session_state.theme)

# Main content
st.title("AI Interview Coach")
st.caption("Paste your job description and resume to get your match score and interview questions.")

if st.session_state.error:
    st.error(st.session_state.error)

runner = st.session_state.runner

if runner is None:
    col1, col2 = st.columns(2)
    with col1:
        st.text_area(
            "Job Description", value=st.session_state.job_description, height=260,
            placeholder="Paste the job description here...",
            key="job_description_input", disabled=busy,
        )
    with col2:
        st.text_area(
            "Your Resume", value=st.session_state.resume, height=260,
            placeholder="Paste your resume here...",
            key="resume_input", disabled=busy,
        )

    st.button(
        "Analyze & Generate Questions", type="primary", key="analyze_button",
        on_click=queue_analysis, disabled=busy, use_container_width=True,
    )

    analysis = st.session_state.analysis
    if analysis is not None:
        st.divider()
        render_analysis(analysis, busy)

else:
    render_transcript(runner)

    if runner.is_complete():
        st.divider()
        render_summary(runner.summary)
        st.button(
            "Start New Analysis", type="primary", key="reset_button",
            on_click=reset_analysis, disabled=busy,
        )
    elif runner.summary_pending:
        st.button(
            "Retry Summary", type="primary", key="retry_button",
            on_click=queue_retry, disabled=busy,
        )
    else:
        st.chat_input(
            "Your answer...", key="answer_input",
            on_submit=queue_answer, disabled=busy,
        )

st.divider()
st.caption("AI Interview Coach | Powered by Claude")

if busy:
    action = st.session_state.pending
    try:
        run_pending_action(action)
    finally:
        st.session_state.pending = None
    st.rerun()
