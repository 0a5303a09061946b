# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import requests
import pandas as pd
from config import JOB_ROLES, settings
from schemas import AnalyzeResponseRequest, InsightsRequest
from analysis.errors import InputValidationError
from analysis.validator import validate_input
from ui.form_state import AnalysisFormState, InsightsFormState

# -------------------- CONFIG --------------------
API_URL = settings.api_url
st.set_page_config(page_title="InterviewIQ", page_icon="🧠", layout="wide")
st.title("🧠 InterviewIQ")

st.markdown(
    "Analyze candidate answers while the interview is running, then turn the key responses "
    "into a structured insights dashboard for the hiring decision."
)

FIELD_LABELS = {
    "candidateResponse": "Candidate Response",
    "jobDescription": "Job Description",
    "keywords": "Keywords",
    "candidateResponses": "Candidate Responses",
    "jobRole": "Job Role",
}


class ApiError(Exception):
    def __init__(self, message, field_errors=None):
        super().__init__(message)
        self.field_errors = field_errors or []


def _post(path: str, payload: dict, timeout: int = 90) -> dict:
    try:
        r = requests.post(f"{st.session_state.api_url}{path}", json=payload, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise ApiError(f"Connection error: {e}")
    if r.status_code == 200:
        return r.json()
    detail = r.json().get("detail") if r.headers.get("content-type", "").startswith("application/json") else r.text
    if r.status_code == 422 and isinstance(detail, list):
        raise ApiError("Please fix the highlighted fields.", field_errors=detail)
    raise ApiError(detail or f"Request failed with status {r.status_code}")


def _field_label(path: str) -> str:
    head, _, rest = path.partition(".")
    label = FIELD_LABELS.get(head, head)
    return f"{label} #{int(rest) + 1}" if rest.isdigit() else label


def _show_field_errors(errors):
    for err in errors:
        st.error(f"**{_field_label(err['field'])}:** {err['message']}")


def _sentiment_icon(sentiment: str) -> str:
    s = (sentiment or "").lower()
    if "positive" in s:
        return "😊"
    if "negative" in s:
        return "⚠️"
    return "ℹ️"


# -------------------- SESSION STATE --------------------
if "api_url" not in st.session_state:
    st.session_state.api_url = API_URL

if "analysis_form" not in st.session_state:
    st.session_state.analysis_form = AnalysisFormState()

if "insights_form" not in st.session_state:
    st.session_state.insights_form = InsightsFormState()

# Bumped whenever a response box is removed so the widgets are rebuilt from state
if "insights_version" not in st.session_state:
    st.session_state.insights_version = 0

if "notice" not in st.session_state:
    st.session_state.notice = None


def _on_role_change():
    role = st.session_state.role_select
    if role:
        # Clears description, keywords and the previous result before the new call
        st.session_state.analysis_form.select_role(role)


notice = st.session_state.pop("notice", None)
if notice:
    st.success(notice)

# -------------------- TABS --------------------
tab1, tab2 = st.tabs(["🎙️ Real-time Analysis", "📊 Post-Interview Insights"])

# ==================== TAB 1: Real-time Analysis ====================
with tab1:
    form: AnalysisFormState = st.session_state.analysis_form
    st.subheader("Real-time Response Analysis")
    st.caption(
        "Select a job role to auto-generate details, or enter them manually. "
        "Then provide the candidate's text response for analysis."
    )

    st.selectbox(
        "Job Role (Optional)",
        options=[""] + JOB_ROLES,
        key="role_select",
        format_func=lambda r: r or "Select a job role to generate details",
        on_change=_on_role_change,
        disabled=form.controls_disabled,
    )

    with st.form("analysis_inputs"):
        jd_text = st.text_area(
            "Job Description",
            value=form.job_description,
            key=f"jd_text_{form.widget_seq}",
            placeholder="Generating..." if form.generating_details else "Paste the job description here...",
            height=160,
            disabled=form.controls_disabled,
        )
        keywords = st.text_input(
            "Keywords (comma-separated)",
            value=form.keywords,
            key=f"keywords_{form.widget_seq}",
            placeholder="e.g., Python, teamwork, leadership",
            disabled=form.controls_disabled,
        )
        response_text = st.text_area(
            "Candidate Text Response",
            value=form.candidate_response,
            key="candidate_response",
            placeholder="Paste or type the candidate's response here...",
            height=160,
            disabled=form.controls_disabled,
        )
        submitted = st.form_submit_button("✨ Analyze Text Response", disabled=form.controls_disabled)

    # --- Cascade: role selected, generate job details ---
    if form.generating_details:
        ticket = form.details_seq
        role = form.job_role
        with st.spinner(f"⏳ Generating details for {role}..."):
            try:
                details = _post("/jobs/details", {"jobRole": role})
            except ApiError as e:
                form.fail_job_details(ticket, f"Generation failed: {e}")
            else:
                if form.apply_job_details(ticket, details):
                    st.session_state.notice = f"✅ Details for {role} generated successfully."
        st.rerun()

    # --- On submission ---
    if submitted:
        form.edit_job_details(jd_text, keywords)
        form.candidate_response = response_text
        payload = form.analysis_payload()
        try:
            validate_input(AnalyzeResponseRequest, payload)
        except InputValidationError as e:
            form.field_errors = e.to_detail()
        else:
            ticket = form.begin_analysis()
            with st.spinner("⏳ Analyzing response..."):
                try:
                    result = _post("/analysis/response", payload)
                except ApiError as e:
                    # kept on the form so they survive the rerun below
                    form.fail_analysis(ticket, f"Analysis failed: {e}", e.field_errors)
                else:
                    if form.apply_analysis(ticket, result):
                        st.session_state.notice = "✅ Candidate text response analyzed successfully."
            st.rerun()

    if form.error:
        st.error(f"❌ {form.error}")
    _show_field_errors(form.field_errors)

    res = form.result
    if res:
        with st.container(border=True):
            st.markdown("### 🧾 Analysis Results")
            c1, c2 = st.columns(2)
            with c1:
                st.markdown(f"**{_sentiment_icon(res.get('sentiment'))} Sentiment**")
                st.write(res.get("sentiment", "—"))
            with c2:
                st.markdown("**🗣️ Clarity**")
                st.write(res.get("clarity", "—"))
            c3, c4 = st.columns(2)
            with c3:
                st.markdown("**🔑 Keyword Relevance**")
                st.write(res.get("keywordRelevance", "—"))
            with c4:
                st.markdown("**👍 Overall Assessment**")
                st.write(res.get("overallAssessment", "—"))


# ==================== TAB 2: Post-Interview Insights ====================
with tab2:
    ins: InsightsFormState = st.session_state.insights_form
    version = st.session_state.insights_version
    st.subheader("Post-Interview Insights Dashboard")
    st.caption(
        "Provide the job description and key candidate responses to generate a structured insights dashboard."
    )

    ins.job_description = st.text_area(
        "Job Description",
        value=ins.job_description,
        key="insights_jd",
        placeholder="Paste the job description here...",
        height=120,
        disabled=ins.pending,
    )

    st.markdown("**Candidate Responses**")
    for i, text in enumerate(ins.responses):
        col_text, col_remove = st.columns([12, 1])
        with col_text:
            ins.responses[i] = st.text_area(
                f"Response {i + 1}",
                value=text,
                key=f"insights_response_{version}_{i}",
                height=90,
                disabled=ins.pending,
                label_visibility="collapsed",
                placeholder=f"Response {i + 1}",
            )
        with col_remove:
            if len(ins.responses) > 1 and st.button("✖", key=f"remove_response_{version}_{i}", disabled=ins.pending):
                ins.remove_response(i)
                st.session_state.insights_version += 1
                st.rerun()

    col_add, col_run = st.columns([1, 2])
    with col_add:
        if st.button("➕ Add Response", disabled=ins.pending):
            ins.add_response()
            st.rerun()
    with col_run:
        run_insights = st.button("📊 Generate Dashboard", disabled=ins.pending, use_container_width=True)

    if run_insights:
        payload = ins.payload()
        try:
            validate_input(InsightsRequest, payload)
        except InputValidationError as e:
            _show_field_errors(e.to_detail())
        else:
            ticket = ins.begin()
            with st.spinner("⏳ Generating dashboard..."):
                try:
                    result = _post("/insights", payload, timeout=120)
                except ApiError as e:
                    if e.field_errors:
                        _show_field_errors(e.field_errors)
                    ins.fail(ticket, f"Insight generation failed: {e}")
                else:
                    if ins.apply(ticket, result):
                        st.success("✅ Post-interview insights dashboard generated.")

    if ins.error:
        st.error(f"❌ {ins.error}")

    insights = ins.result
    if insights:
        with st.container(border=True):
            st.markdown("### 🧠 Overall Summary")
            st.write(insights.get("overallSummary", "No summary generated."))

            col_s, col_w = st.columns(2)
            with col_s:
                st.markdown("### 📈 Strengths")
                strengths = insights.get("strengths", [])
                if strengths:
                    for s in strengths:
                        st.markdown(f"- {s}")
                else:
                    st.caption("No specific strengths highlighted.")
            with col_w:
                st.markdown("### 📉 Weaknesses / Areas for Development")
                weaknesses = insights.get("weaknesses", [])
                if weaknesses:
                    for w in weaknesses:
                        st.markdown(f"- {w}")
                else:
                    st.caption("No specific weaknesses highlighted.")

            st.markdown("### 🧩 Skill Assessment")
            skills = insights.get("skillAssessment", [])
            if skills:
                st.table(pd.DataFrame({
                    "Skill": [s.get("skill", "") for s in skills],
                    "Assessment": [s.get("assessment", "") for s in skills],
                }))
            else:
                st.caption("No specific skills assessed.")

            st.markdown("### ⚖️ Comparison Points")
            points = insights.get("comparisonPoints", [])
            if points:
                st.table(pd.DataFrame({
                    "Metric": [p.get("metric", "") for p in points],
                    "Value": [p.get("value", "") for p in points],
                }))
            else:
                st.caption("No comparison points generated.")
