# tests/test_flows.py

import pytest

from analysis.errors import InputValidationError, ModelInvocationError
from analysis.flows import (
    analyze_candidate_response,
    generate_job_details,
    generate_post_interview_insights,
)
from schemas import (
    AnalyzeResponseResult,
    InsightsResult,
    JobDetailsRequest,
    JobDetailsResult,
)

pytestmark = pytest.mark.asyncio


async def test_analyze_returns_all_four_fields(fake_invoke, analyze_payload):
    fake_invoke.return_value = {
        "sentiment": "Positive",
        "clarity": "Clear and structured",
        "keywordRelevance": "Mentions microservices and ownership",
        "overallAssessment": "Strong candidate",
    }

    result = await analyze_candidate_response(analyze_payload)

    assert isinstance(result, AnalyzeResponseResult)
    assert result.sentiment == "Positive"
    assert result.keyword_relevance == "Mentions microservices and ownership"
    fake_invoke.assert_called_once()
    prompt, schema = fake_invoke.call_args.args
    assert analyze_payload["candidateResponse"] in prompt
    assert schema is AnalyzeResponseResult


async def test_analyze_with_no_output_is_fully_populated(fake_invoke, analyze_payload):
    fake_invoke.return_value = None

    result = await analyze_candidate_response(analyze_payload)

    assert all(isinstance(v, str) and v for v in result.model_dump().values())


async def test_invalid_input_never_reaches_the_model(fake_invoke):
    with pytest.raises(InputValidationError) as exc_info:
        await analyze_candidate_response(
            {"candidateResponse": "short", "jobDescription": "tiny", "keywords": "x"}
        )

    fake_invoke.assert_not_called()
    assert {v.field for v in exc_info.value.violations} == {
        "candidateResponse",
        "jobDescription",
        "keywords",
    }


async def test_model_failure_propagates_as_single_error(fake_invoke, analyze_payload):
    fake_invoke.side_effect = ModelInvocationError("backend down")

    with pytest.raises(ModelInvocationError):
        await analyze_candidate_response(analyze_payload)


async def test_insights_scenario(fake_invoke, insights_payload):
    fake_invoke.return_value = {
        "overallSummary": "Strong systems background; Go and gRPC not demonstrated.",
        "strengths": ["High-throughput service design"],
        "weaknesses": ["No Go experience mentioned"],
        "skillAssessment": [{"skill": "Distributed systems", "assessment": "Strong"}],
        "comparisonPoints": [{"metric": "Scale handled", "value": "10k req/s"}],
    }

    result = await generate_post_interview_insights(insights_payload)

    assert isinstance(result, InsightsResult)
    assert len(result.skill_assessment) >= 1
    assert result.overall_summary
    prompt = fake_invoke.call_args.args[0]
    assert prompt.count("Backend role needing Go and gRPC experience") == 1
    assert "- I built a payment service handling 10k req/s" in prompt


async def test_insights_summary_only(fake_invoke, insights_payload):
    fake_invoke.return_value = {"overallSummary": "ok"}

    result = await generate_post_interview_insights(insights_payload)

    assert result.overall_summary == "ok"
    assert result.strengths == []
    assert result.weaknesses == []
    assert result.skill_assessment == []
    assert result.comparison_points == []


async def test_insights_without_summary_uses_placeholder(fake_invoke, insights_payload):
    fake_invoke.return_value = {"strengths": ["Ownership"]}

    result = await generate_post_interview_insights(insights_payload)

    assert result.overall_summary == "No summary generated."
    assert result.strengths == ["Ownership"]


async def test_job_details_accepts_a_request_model(fake_invoke):
    fake_invoke.return_value = {
        "jobDescription": "We are hiring a software engineer...",
        "keywords": "Python, APIs, testing",
    }

    result = await generate_job_details(JobDetailsRequest(job_role="Software Engineer"))

    assert isinstance(result, JobDetailsResult)
    assert result.keywords == "Python, APIs, testing"
    assert "Job Role: Software Engineer" in fake_invoke.call_args.args[0]
