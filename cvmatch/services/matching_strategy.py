"""
Matching strategies – score one job posting against a list of CV skills.

Exactly one strategy is active per deployment; ``build_strategy`` maps the
``matching_strategy`` setting to an instance.
"""

import logging
import re
from abc import ABC, abstractmethod

from cvmatch.schemas.jobs import JobPosting
from cvmatch.schemas.match import MAX_SCORE, MIN_SCORE, MatchResult

logger = logging.getLogger(__name__)

# Skills commonly asked for in postings; used to report what a CV lacks.
COMMON_REQUIRED_SKILLS = (
    "C#", "Java", "Python", "JavaScript", "TypeScript", "React", "Angular", "Vue",
    ".NET", "ASP.NET", "Node.js", "SQL", "NoSQL", "Docker", "Kubernetes",
    "Azure", "AWS", "Git", "CI/CD", "Agile", "Scrum", "REST", "API",
    "Microservices", "TDD", "Clean Code", "SOLID", "Design Patterns",
)

MAX_FREQUENCY_BONUS_PER_SKILL = 5
MISSING_SKILL_PENALTY = 5
MAX_MISSING_PENALTY = 30
TOP_SKILLS_IN_EXPLANATION = 3


def _job_text(job: JobPosting) -> str:
    return f"{job.headline} {job.description}".lower()


class MatchingStrategy(ABC):
    """Interface every matching strategy implements."""

    strategy_name: str

    @abstractmethod
    def calculate_match(self, cv_skills: list[str], job: JobPosting) -> MatchResult:
        """Score ``job`` against ``cv_skills``."""


# ── Skill-frequency strategy ────────────────────────────────────────────────


def count_occurrences(text: str, keyword: str) -> int:
    """Count non-overlapping, case-insensitive occurrences of ``keyword``."""
    if not keyword:
        return 0
    text = text.lower()
    keyword = keyword.lower()

    count = 0
    index = text.find(keyword)
    while index != -1:
        count += 1
        index = text.find(keyword, index + len(keyword))
    return count


def find_missing_skills(job_text: str, cv_skills: list[str]) -> list[str]:
    cv_skills_lower = {s.lower() for s in cv_skills}
    return [
        skill
        for skill in COMMON_REQUIRED_SKILLS
        if skill.lower() in job_text and skill.lower() not in cv_skills_lower
    ]


def build_explanation(
    matched_count: int,
    missing_count: int,
    total_cv_skills: int,
    occurrences: dict[str, int],
) -> str:
    match_percentage = matched_count * 100 // total_cv_skills if total_cv_skills else 0
    explanation = (
        f"Match: {matched_count} of {total_cv_skills} skills ({match_percentage}%). "
    )

    if any(count > 1 for count in occurrences.values()):
        # sorted() is stable, so equal counts keep CV order
        top = sorted(occurrences.items(), key=lambda kv: kv[1], reverse=True)
        top_skills = ", ".join(
            f"{skill} ({count}x)" for skill, count in top[:TOP_SKILLS_IN_EXPLANATION]
        )
        explanation += f"Strong matches: {top_skills}. "

    if missing_count > 0:
        explanation += f"{missing_count} relevant skills are missing from the CV."
    elif matched_count > 0:
        explanation += "No critical skills are missing."

    return explanation.strip()


class SkillBasedMatchingStrategy(MatchingStrategy):
    """
    Scores by how many CV skills the posting mentions, and how often.

    score = matched share (0-100)
            + up to 5 points per skill for repeated mentions
            - 5 points per missing common skill (at most 30)
    clamped to 0..100.
    """

    strategy_name = "Skill-Based Matching"

    def calculate_match(self, cv_skills: list[str], job: JobPosting) -> MatchResult:
        job_text = _job_text(job)

        matched_skills: list[str] = []
        occurrences: dict[str, int] = {}
        for skill in cv_skills:
            count = count_occurrences(job_text, skill)
            if count > 0:
                matched_skills.append(skill)
                occurrences[skill] = count

        missing_skills = find_missing_skills(job_text, cv_skills)

        base_score = len(matched_skills) * 100 // len(cv_skills) if cv_skills else 0
        frequency_bonus = sum(
            min(count - 1, MAX_FREQUENCY_BONUS_PER_SKILL) for count in occurrences.values()
        )
        missing_penalty = min(len(missing_skills) * MISSING_SKILL_PENALTY, MAX_MISSING_PENALTY)
        score = max(MIN_SCORE, min(base_score + frequency_bonus - missing_penalty, MAX_SCORE))

        logger.debug("Skill match  job_id=%s  score=%d", job.id, score)

        return MatchResult(
            job=job,
            match_score=score,
            matched_skills=matched_skills,
            missing_skills=missing_skills,
            match_explanation=build_explanation(
                len(matched_skills), len(missing_skills), len(cv_skills), occurrences
            ),
        )


# ── Keyword-overlap strategy ────────────────────────────────────────────────

_TOKEN_SPLIT = re.compile(r"[\s,.;:]+")
MIN_TOKEN_LENGTH = 3
MAX_KEYWORDS_REPORTED = 10


def tokenize(text: str) -> list[str]:
    """Lower-cased tokens of at least three characters, first occurrence order."""
    tokens = (t for t in _TOKEN_SPLIT.split(text.lower()) if len(t) >= MIN_TOKEN_LENGTH)
    return list(dict.fromkeys(tokens))


class KeywordMatchingStrategy(MatchingStrategy):
    """Scores by word overlap between the posting and the CV skills."""

    strategy_name = "Keyword Matching"

    def calculate_match(self, cv_skills: list[str], job: JobPosting) -> MatchResult:
        job_words = tokenize(_job_text(job))
        cv_words = set(tokenize(" ".join(cv_skills)))

        common = [word for word in job_words if word in cv_words]
        score = min(len(common) * 100 // max(len(job_words), 1), MAX_SCORE)

        logger.debug("Keyword match  job_id=%s  score=%d", job.id, score)

        return MatchResult(
            job=job,
            match_score=score,
            matched_skills=common[:MAX_KEYWORDS_REPORTED],
            match_explanation=f"Keyword match: {len(common)} common keywords found.",
        )


STRATEGIES: dict[str, type[MatchingStrategy]] = {
    "skill_based": SkillBasedMatchingStrategy,
    "keyword": KeywordMatchingStrategy,
}


def build_strategy(name: str) -> MatchingStrategy:
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown matching strategy {name!r}; expected one of {sorted(STRATEGIES)}"
        ) from None
    return strategy_cls()
