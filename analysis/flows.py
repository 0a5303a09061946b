"""The three model-backed prompt functions.

Each one validates its request, renders the prompt, calls the model once,
and normalizes the reply:

- analyze_candidate_response: sentiment, clarity and keyword relevance of one answer.
- generate_post_interview_insights: summary, strengths, weaknesses, skills, comparison points.
- generate_job_details: job description and keywords from a role name.
"""

import asyncio
import logging
from typing import Any, Callable, Type, TypeVar

from pydantic import BaseModel

from analysis import llm_groq
from analysis.normalizer import normalize_output
from analysis.prompts import (
    render_analyze_response_prompt,
    render_insights_prompt,
    render_job_details_prompt,
)
from analysis.validator import validate_input
from schemas import (
    AnalyzeResponseRequest,
    AnalyzeResponseResult,
    InsightsRequest,
    InsightsResult,
    JobDetailsRequest,
    JobDetailsResult,
)

logger = logging.getLogger(__name__)

Req = TypeVar("Req", bound=BaseModel)
Res = TypeVar("Res", bound=BaseModel)


async def _run(
    request: Any,
    request_model: Type[Req],
    result_model: Type[Res],
    render: Callable[[Req], str],
) -> Res:
    req = validate_input(request_model, request)
    prompt = render(req)
    # requests is blocking; keep it off the event loop
    raw = await asyncio.to_thread(llm_groq.invoke, prompt, result_model)
    if raw is None:
        logger.info("No output from model for %s; using defaults", result_model.__name__)
    return normalize_output(result_model, raw)


async def analyze_candidate_response(request: AnalyzeResponseRequest | dict) -> AnalyzeResponseResult:
    return await _run(request, AnalyzeResponseRequest, AnalyzeResponseResult, render_analyze_response_prompt)


async def generate_post_interview_insights(request: InsightsRequest | dict) -> InsightsResult:
    return await _run(request, InsightsRequest, InsightsResult, render_insights_prompt)


async def generate_job_details(request: JobDetailsRequest | dict) -> JobDetailsResult:
    return await _run(request, JobDetailsRequest, JobDetailsResult, render_job_details_prompt)
