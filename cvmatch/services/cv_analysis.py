"""
CV analysis service – runs every registered skill extractor over a CV.

Flow:
  1. Reject blank CV text
  2. Run each extractor once and file its output under the extractor's category
  3. Look for a years-of-experience statement
  4. Build a one-line summary
"""

import logging
import re
from collections.abc import Iterable

from cvmatch.schemas.cv import CvAnalysisRequest, CvAnalysisResponse
from cvmatch.services.errors import CvValidationError
from cvmatch.services.extractors import SkillCategory, SkillExtractor

logger = logging.getLogger(__name__)

# First pattern that matches wins. English and Swedish phrasing.
_EXPERIENCE_PATTERNS = (
    re.compile(
        r"(?<!\d)(\d{1,3})\+?\s*(?:years?|års?)\s*(?:of\s+)?(?:experience|erfarenhet)",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:experience|erfarenhet).*?(?<!\d)(\d{1,3})\+?\s*(?:years?|år)",
        re.IGNORECASE,
    ),
)

_CATEGORY_FIELDS = {
    SkillCategory.TECHNICAL: "technical_skills",
    SkillCategory.SOFT: "soft_skills",
    SkillCategory.PROGRAMMING_LANGUAGE: "programming_languages",
    SkillCategory.FRAMEWORK: "frameworks",
}


def extract_years_of_experience(cv_text: str) -> int | None:
    """Return the stated years of experience, or None when nothing is stated."""
    for pattern in _EXPERIENCE_PATTERNS:
        match = pattern.search(cv_text)
        if match:
            return int(match.group(1))
    return None


def build_summary(
    skill_count: int,
    programming_languages: list[str],
    years_of_experience: int | None,
) -> str:
    summary = f"CV analysis identified {skill_count} skills in total"

    if programming_languages:
        languages = ", ".join(programming_languages[:3])
        summary += f", including programming languages such as {languages}"

    if years_of_experience is not None:
        summary += f". Approximately {years_of_experience} years of experience."
    else:
        summary += "."
    return summary


class CvAnalysisService:
    """Coordinates the skill extractors for a single CV."""

    def __init__(self, extractors: Iterable[SkillExtractor]) -> None:
        self._extractors = list(extractors)

    def analyze_cv(self, request: CvAnalysisRequest) -> CvAnalysisResponse:
        """
        Extract categorised skills, experience and a summary from a CV.

        Parameters
        ----------
        request : CvAnalysisRequest
            CV text plus an optional target role forwarded to the extractors.

        Returns
        -------
        CvAnalysisResponse

        Raises
        ------
        CvValidationError
            If the CV text is empty or whitespace only.
        """
        cv_text = request.cv_text or ""
        logger.info("CV analysis started  chars=%d", len(cv_text))

        if not cv_text.strip():
            logger.warning("Empty CV received")
            raise CvValidationError("CV text must not be empty.")

        categorized: dict[str, list[str]] = {name: [] for name in _CATEGORY_FIELDS.values()}
        for extractor in self._extractors:
            skills = extractor.extract(cv_text, request.target_role)
            categorized[_CATEGORY_FIELDS[extractor.category]].extend(skills)

        years = extract_years_of_experience(cv_text)
        analysis = CvAnalysisResponse(
            **categorized,
            years_of_experience=years,
            summary=build_summary(
                sum(len(skills) for skills in categorized.values()),
                categorized["programming_languages"],
                years,
            ),
        )

        logger.info(
            "CV analysis completed  technical=%d  languages=%d  frameworks=%d  soft=%d",
            len(analysis.technical_skills),
            len(analysis.programming_languages),
            len(analysis.frameworks),
            len(analysis.soft_skills),
        )
        return analysis
