from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from typing import Annotated, List


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire; both accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResultModel(CamelModel):
    """Model output; numeric ratings such as 8 are accepted as "8"."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True
    )


def _min_length(value: str, minimum: int, message: str) -> str:
    if len(value) < minimum:
        raise PydanticCustomError("too_short", message)
    return value


def _response_text(value: str) -> str:
    return _min_length(value, 10, "Response must be at least 10 characters.")


def _job_description_text(value: str) -> str:
    return _min_length(value, 20, "Job description must be at least 20 characters.")


ResponseText = Annotated[str, AfterValidator(_response_text)]
JobDescriptionText = Annotated[str, AfterValidator(_job_description_text)]


# -------------------------------------------------------------------
# Real-time response analysis
# -------------------------------------------------------------------
class AnalyzeResponseRequest(CamelModel):
    candidate_response: ResponseText = Field(..., description="The candidate response to be analyzed.")
    job_description: JobDescriptionText = Field(..., description="The job description for the role.")
    keywords: str = Field(..., description="Keywords relevant to the role.")

    @field_validator("keywords")
    @classmethod
    def keywords_length(cls, v: str) -> str:
        return _min_length(v, 3, "Please provide relevant keywords.")


class AnalyzeResponseResult(ResultModel):
    sentiment: str = Field(
        "No sentiment assessment generated.",
        description="The sentiment of the response (e.g., positive, negative, neutral).",
    )
    clarity: str = Field(
        "No clarity assessment generated.",
        description="An assessment of the clarity and coherence of the response.",
    )
    keyword_relevance: str = Field(
        "No keyword relevance assessment generated.",
        description="An analysis of the relevance of the response to the provided keywords.",
    )
    overall_assessment: str = Field(
        "No overall assessment generated.",
        description="An overall assessment of the candidate based on the analysis.",
    )


# -------------------------------------------------------------------
# Post-interview insights
# -------------------------------------------------------------------
class InsightsRequest(CamelModel):
    job_description: JobDescriptionText = Field(..., description="The job description for the role.")
    candidate_responses: List[ResponseText] = Field(
        ..., description="An array of candidate responses during the interview."
    )

    @field_validator("candidate_responses")
    @classmethod
    def responses_present(cls, v: List[str]) -> List[str]:
        if not v:
            raise PydanticCustomError("too_short", "At least one candidate response is required.")
        return v


class SkillAssessment(ResultModel):
    skill: str = Field("Unspecified skill", description="Name of the skill being assessed.")
    assessment: str = Field(
        "No assessment provided.",
        description="Short assessment of the candidate's level in this skill, based on the responses.",
    )


class ComparisonPoint(ResultModel):
    metric: str = Field("Unspecified metric", description="Name of the comparison metric.")
    value: str = Field(
        "N/A", description="The candidate's value or rating for this metric (e.g. 'High', '4/5')."
    )


class InsightsResult(ResultModel):
    overall_summary: str = Field(
        "No summary generated.",
        description="A concise overall summary of the candidate's performance relative to the job.",
    )
    strengths: List[str] = Field(
        default_factory=list, description="Key strengths shown in the candidate's responses."
    )
    weaknesses: List[str] = Field(
        default_factory=list, description="Weaknesses or areas for development."
    )
    skill_assessment: List[SkillAssessment] = Field(
        default_factory=list, description="Assessment of individual skills required by the job."
    )
    comparison_points: List[ComparisonPoint] = Field(
        default_factory=list,
        description="Objective or subjective metrics a hiring manager can use to compare candidates.",
    )


# -------------------------------------------------------------------
# Job details generation
# -------------------------------------------------------------------
class JobDetailsRequest(CamelModel):
    job_role: str = Field(
        ...,
        description="The job role for which to generate details (e.g., Software Engineer, Product Manager).",
    )

    @field_validator("job_role")
    @classmethod
    def role_present(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("missing_role", "Please select a job role.")
        return v


class JobDetailsResult(ResultModel):
    job_description: str = Field(
        "No job description generated.",
        description="A concise and relevant job description for the specified role (around 100-150 words).",
    )
    keywords: str = Field(
        "", description="A comma-separated list of 5-10 relevant keywords for the job role."
    )


# Field-level validation problem reported back to the caller
class FieldViolation(BaseModel):
    field: str
    message: str
