# tests/test_prompts.py

from analysis.prompts import (
    render_analyze_response_prompt,
    render_insights_prompt,
    render_job_details_prompt,
    render_output_contract,
)
from schemas import (
    AnalyzeResponseRequest,
    AnalyzeResponseResult,
    InsightsRequest,
    InsightsResult,
    JobDetailsRequest,
    JobDetailsResult,
)


def _insights(jd: str, responses: list) -> InsightsRequest:
    return InsightsRequest.model_construct(job_description=jd, candidate_responses=responses)


def test_insights_prompt_is_deterministic():
    req = _insights("JD-MARKER-XYZ backend role", ["RESPONSE-ALPHA", "RESPONSE-BRAVO"])
    assert render_insights_prompt(req) == render_insights_prompt(req)


def test_insights_prompt_contains_each_value_once_in_order():
    prompt = render_insights_prompt(
        _insights("JD-MARKER-XYZ backend role", ["RESPONSE-ALPHA", "RESPONSE-BRAVO"])
    )

    assert prompt.count("JD-MARKER-XYZ") == 1
    assert prompt.count("RESPONSE-ALPHA") == 1
    assert prompt.count("RESPONSE-BRAVO") == 1
    assert prompt.index("RESPONSE-ALPHA") < prompt.index("RESPONSE-BRAVO")
    assert "- RESPONSE-ALPHA\n- RESPONSE-BRAVO" in prompt


def test_values_are_substituted_verbatim():
    # braces and markup in user text must not be treated as template syntax
    req = AnalyzeResponseRequest.model_construct(
        candidate_response="I wrote {code} like <b>this</b> & {{that}}",
        job_description="Job with {placeholder} text",
        keywords="a{b}c",
    )
    prompt = render_analyze_response_prompt(req)

    assert "Candidate Response: I wrote {code} like <b>this</b> & {{that}}" in prompt
    assert "Job Description: Job with {placeholder} text" in prompt
    assert "Keywords: a{b}c" in prompt


def test_job_details_prompt_names_the_role():
    prompt = render_job_details_prompt(JobDetailsRequest(job_role="Software Engineer"))
    assert "Job Role: Software Engineer" in prompt
    assert "comma-separated" in prompt


def test_output_contract_lists_wire_keys_and_descriptions():
    contract = render_output_contract(AnalyzeResponseResult)

    assert '- "keywordRelevance" (string): An analysis of the relevance' in contract
    assert '- "overallAssessment" (string)' in contract
    assert "STRICT JSON" in contract


def test_output_contract_describes_nested_records():
    contract = render_output_contract(InsightsResult)

    assert '- "strengths" (array of strings)' in contract
    assert '- "skillAssessment" (array of objects)' in contract
    assert '  - "skill" (string)' in contract
    assert '  - "metric" (string)' in contract


def test_job_details_contract():
    contract = render_output_contract(JobDetailsResult)
    assert '- "jobDescription" (string)' in contract
    assert '- "keywords" (string)' in contract
