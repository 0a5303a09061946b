from __future__ import annotations
import logging
from typing import Any, Dict, List
from contextlib import asynccontextmanager
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from config import JOB_ROLES, configure_logging, settings
from schemas import AnalyzeResponseResult, InsightsResult, JobDetailsResult
from analysis.errors import InputValidationError, ModelInvocationError
from analysis.flows import (
    analyze_candidate_response,
    generate_job_details,
    generate_post_interview_insights,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Using model %s", settings.model_name)
    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY is not set; model calls will fail.")
    yield
    logger.info("Application shutting down.")


app = FastAPI(title="InterviewIQ (Groq Cloud)", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # OK for demo; restrict for prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ANALYSIS_FAILED = "Could not analyze the candidate text response. Please try again."
INSIGHTS_FAILED = "Could not generate post-interview insights. Please try again."
DETAILS_FAILED = "Could not generate job description and keywords. Please try again or enter manually."


async def _call(flow, payload: Dict[str, Any], failure_message: str):
    """Run one prompt function and map its failures onto HTTP errors."""
    try:
        return await flow(payload)
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_detail())
    except ModelInvocationError:
        logger.exception("%s failed", flow.__name__)
        raise HTTPException(status_code=502, detail=failure_message)


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok", "model": settings.model_name}


@app.get("/jobs/roles", response_model=List[str])
def list_job_roles():
    """Return the job roles offered in the role dropdown."""
    return JOB_ROLES


@app.post("/jobs/details", response_model=JobDetailsResult)
async def job_details(payload: Dict[str, Any] = Body(...)):
    """Generate a job description and keywords for a role."""
    return await _call(generate_job_details, payload, DETAILS_FAILED)


@app.post("/analysis/response", response_model=AnalyzeResponseResult)
async def analyze_response(payload: Dict[str, Any] = Body(...)):
    """Analyze one candidate answer against a job description and keywords."""
    return await _call(analyze_candidate_response, payload, ANALYSIS_FAILED)


@app.post("/insights", response_model=InsightsResult)
async def post_interview_insights(payload: Dict[str, Any] = Body(...)):
    """Build the post-interview insights dashboard for a set of answers."""
    return await _call(generate_post_interview_insights, payload, INSIGHTS_FAILED)
