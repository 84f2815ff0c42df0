"""
Pydantic models for the CV-to-job matching endpoint.
"""

from pydantic import BaseModel, Field, field_validator

from cvmatch.schemas.jobs import JobPosting

MIN_SCORE = 0
MAX_SCORE = 100
MAX_RESULTS_LIMIT = 100


class MatchRequest(BaseModel):
    """Body for POST /match."""

    cv_text: str = Field(
        ...,
        max_length=20000,
        description="Raw CV / resume text to match against jobs.",
    )
    job_ids: list[str] | None = Field(
        default=None,
        description="Only score jobs with these IDs (others are dropped).",
    )
    search_query: str | None = Field(
        default=None,
        description="Free-text query used to fetch candidate jobs.",
    )
    location: str | None = None
    radius_km: int | None = None
    minimum_match_score: int = Field(
        default=0,
        ge=MIN_SCORE,
        le=MAX_SCORE,
        description="Drop matches scoring below this value.",
    )
    max_results: int = Field(
        default=10,
        ge=1,
        le=MAX_RESULTS_LIMIT,
        description="Maximum number of matches to return.",
    )

    @field_validator("cv_text")
    @classmethod
    def _validate_cv_text(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("cv_text must not be empty")
        return v


class MatchResult(BaseModel):
    """Score and explanation for one (CV, job) pair."""

    job: JobPosting
    match_score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    match_explanation: str = ""


class MatchResponse(BaseModel):
    """Response returned by /match."""

    matches: list[MatchResult]
    total_jobs_evaluated: int
    extracted_skills: list[str]
    matching_strategy: str
