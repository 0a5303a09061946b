from typing import List, Type, get_args, get_origin

from pydantic import BaseModel

from schemas import AnalyzeResponseRequest, InsightsRequest, JobDetailsRequest


SYSTEM_PROMPT = """You are InterviewIQ, an assistant for recruiters and hiring managers.
Be objective and evidence-based. Do not speculate about protected attributes
(age, gender, ethnicity, religion, nationality).

OUTPUT FORMAT (STRICT JSON):
Respond with a single JSON object and nothing else (no markdown, no commentary).
Use exactly these keys and populate every one of them:
{fields}"""


ANALYZE_RESPONSE_TEMPLATE = """You are an AI expert in analyzing candidate responses during interviews.

Analyze the candidate's response based on the following job description and keywords.

Job Description: {job_description}
Keywords: {keywords}

Candidate Response: {candidate_response}

Provide an analysis of the sentiment, clarity, and keyword relevance of the response.
Also provide an overall assessment of the candidate based on your analysis.
Make sure to populate all the fields defined in the output schema."""


INSIGHTS_TEMPLATE = """You are an expert in talent acquisition, and your goal is to provide a hiring manager with key insights about a candidate after an interview, and comparison metrics to help make a decision.

Job Description: {job_description}

Candidate Responses:
{responses}

Write an overall summary of the candidate's performance against the job description.
List the candidate's strengths and weaknesses based on their responses.
Assess each skill the job requires that the responses give evidence for.
Also provide comparison points so that the hiring manager can compare candidates, but intelligently decide what is important to include in this comparison. Focus on objective, measurable criteria where possible, but don't hesitate to include subjective observations."""

INSIGHTS_RESPONSE_LINE = "- {response}"


JOB_DETAILS_TEMPLATE = """You are an expert hiring manager AI. Given a job role, generate a concise job description (around 100-150 words) and a list of 5-10 relevant comma-separated keywords.

Job Role: {job_role}

Generate the job description and keywords according to the output schema.
Keywords should be comma-separated.
The job description should be realistic and suitable for attracting candidates."""


def render_analyze_response_prompt(req: AnalyzeResponseRequest) -> str:
    return ANALYZE_RESPONSE_TEMPLATE.format(
        job_description=req.job_description,
        keywords=req.keywords,
        candidate_response=req.candidate_response,
    )


def render_insights_prompt(req: InsightsRequest) -> str:
    """One bullet line per candidate response, in the order given."""
    responses = "\n".join(
        INSIGHTS_RESPONSE_LINE.format(response=r) for r in req.candidate_responses
    )
    return INSIGHTS_TEMPLATE.format(
        job_description=req.job_description,
        responses=responses,
    )


def render_job_details_prompt(req: JobDetailsRequest) -> str:
    return JOB_DETAILS_TEMPLATE.format(job_role=req.job_role)


# -------------------------------------------------------------------
# Output contract (sent as the system message)
# -------------------------------------------------------------------
def nested_model(annotation) -> Type[BaseModel] | None:
    for arg in get_args(annotation):
        if isinstance(arg, type) and issubclass(arg, BaseModel):
            return arg
    return None


def _type_label(annotation) -> str:
    if get_origin(annotation) in (list, List):
        if nested_model(annotation) is not None:
            return "array of objects"
        return "array of strings"
    if annotation is str:
        return "string"
    return getattr(annotation, "__name__", str(annotation))


def _describe_fields(model: Type[BaseModel], indent: int = 0) -> List[str]:
    lines = []
    pad = "  " * indent
    for name, field in model.model_fields.items():
        key = field.alias or name
        lines.append(f'{pad}- "{key}" ({_type_label(field.annotation)}): {field.description or ""}'.rstrip())
        nested = nested_model(field.annotation)
        if nested is not None:
            lines.extend(_describe_fields(nested, indent + 1))
    return lines


def render_output_contract(model: Type[BaseModel]) -> str:
    return SYSTEM_PROMPT.format(fields="\n".join(_describe_fields(model)))
