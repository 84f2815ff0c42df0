"""
Pydantic models for the CV analysis endpoint.
"""

from pydantic import BaseModel, Field


class CvAnalysisRequest(BaseModel):
    """Body for POST /cv/analyze."""

    cv_text: str = Field(
        ...,
        max_length=20000,
        description="Raw CV / resume text to analyse.",
    )
    target_role: str | None = Field(
        default=None,
        description="Optional role the candidate is aiming for.",
    )


class CvAnalysisResponse(BaseModel):
    """Skills found in a CV, grouped by category."""

    technical_skills: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)
    programming_languages: list[str] = Field(default_factory=list)
    frameworks: list[str] = Field(default_factory=list)
    years_of_experience: int | None = None
    summary: str = ""

    def all_skills(self) -> list[str]:
        """Every extracted skill as one flat list (duplicates kept)."""
        return [
            *self.technical_skills,
            *self.soft_skills,
            *self.programming_languages,
            *self.frameworks,
        ]
