"""
Keyword-based skill extractors.

Each extractor owns a fixed vocabulary for one skill category and reports the
terms that appear anywhere in the CV text. Matching is a case-insensitive
substring test: "Go" also hits "Google" and "Java" hits "JavaScript".
"""

from abc import ABC, abstractmethod
from enum import Enum


class SkillCategory(str, Enum):
    TECHNICAL = "technical"
    PROGRAMMING_LANGUAGE = "programming_language"
    FRAMEWORK = "framework"
    SOFT = "soft"


class SkillExtractor(ABC):
    """Base extractor: subclasses set ``category`` and ``keywords``."""

    keywords: tuple[str, ...] = ()

    @property
    @abstractmethod
    def category(self) -> SkillCategory:
        """Response field this extractor feeds."""

    def extract(self, cv_text: str, target_role: str | None = None) -> list[str]:
        """
        Return the vocabulary terms found in ``cv_text``.

        ``target_role`` is accepted so role-aware extractors can be plugged in;
        the keyword extractors ignore it.
        """
        if not cv_text or not cv_text.strip():
            return []

        haystack = cv_text.lower()
        found: dict[str, str] = {}
        for keyword in self.keywords:
            key = keyword.lower()
            if key in haystack and key not in found:
                found[key] = keyword
        return list(found.values())


class TechnicalSkillExtractor(SkillExtractor):
    category = SkillCategory.TECHNICAL
    keywords = (
        "Docker", "Kubernetes", "CI/CD", "DevOps", "Microservices", "REST API",
        "GraphQL", "Git", "Agile", "Scrum", "Azure", "AWS", "GCP",
        "SQL", "NoSQL", "MongoDB", "PostgreSQL", "Redis",
        "Unit Testing", "Integration Testing", "TDD", "BDD",
    )


class ProgrammingLanguageExtractor(SkillExtractor):
    category = SkillCategory.PROGRAMMING_LANGUAGE
    keywords = (
        "C#", "JavaScript", "TypeScript", "Python", "Java", "C++", "Go", "Rust",
        "PHP", "Ruby", "Swift", "Kotlin", "Scala", "F#", "Erlang", "Elixir",
    )


class FrameworkExtractor(SkillExtractor):
    category = SkillCategory.FRAMEWORK
    keywords = (
        ".NET", "ASP.NET", "Entity Framework", "React", "Angular", "Vue",
        "Node.js", "Express", "Django", "Flask", "Spring Boot", "Laravel",
        "jQuery", "Bootstrap", "Tailwind", "Next.js", "Blazor",
    )


class SoftSkillExtractor(SkillExtractor):
    category = SkillCategory.SOFT
    # Swedish and English terms; the job source is Swedish.
    keywords = (
        "Kommunikation", "Problemlösning", "Teamwork", "Ledarskap", "Analytisk",
        "Kreativ", "Självgående", "Ansvarstagande", "Flexibel", "Strukturerad",
        "Communication", "Problem-solving", "Leadership", "Analytical", "Creative",
    )


def default_extractors() -> list[SkillExtractor]:
    return [
        TechnicalSkillExtractor(),
        SoftSkillExtractor(),
        ProgrammingLanguageExtractor(),
        FrameworkExtractor(),
    ]
