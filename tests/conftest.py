"""
Shared fixtures: sample postings and fake collaborators.
"""

from datetime import datetime, timezone

import pytest

from cvmatch.schemas.jobs import JobPosting
from cvmatch.services.cv_analysis import CvAnalysisService
from cvmatch.services.errors import JobServiceUnavailableError
from cvmatch.services.extractors import default_extractors
from cvmatch.services.matching_service import MatchingService
from cvmatch.services.matching_strategy import SkillBasedMatchingStrategy


def make_job(job_id: str, headline: str = "Developer", description: str = "") -> JobPosting:
    return JobPosting(
        id=job_id,
        headline=headline,
        description=description,
        employer="Acme AB",
        location="Stockholm, Stockholms län",
        publication_date=datetime(2024, 5, 1, tzinfo=timezone.utc),
        application_deadline="No deadline provided",
    )


class FakeJobService:
    """Stands in for JobService; records every call."""

    def __init__(self, jobs=None, error: Exception | None = None):
        self.jobs = list(jobs or [])
        self.error = error
        self.calls: list[tuple[str | None, int]] = []

    def get_jobs(self, search_query=None, limit=10):
        self.calls.append((search_query, limit))
        if self.error is not None:
            raise self.error
        return list(self.jobs)


@pytest.fixture
def cv_analysis_service():
    return CvAnalysisService(default_extractors())


@pytest.fixture
def make_matching_service(cv_analysis_service):
    def _build(jobs=None, error=None, strategy=None):
        job_service = FakeJobService(jobs, error)
        service = MatchingService(
            cv_analysis_service,
            job_service,
            strategy or SkillBasedMatchingStrategy(),
            max_workers=4,
        )
        return service, job_service

    return _build


@pytest.fixture
def unavailable_error():
    return JobServiceUnavailableError("Could not fetch jobs from the job search API")
