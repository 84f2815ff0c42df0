"""
Job service – turns raw job API hits into ``JobPosting`` objects.
"""

import logging

from cvmatch.schemas.jobs import JobPosting, JobSearchHit, JobWorkplace
from cvmatch.services.job_client import JobApiClient

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available"
UNKNOWN_EMPLOYER = "Unknown employer"
UNKNOWN_LOCATION = "Unknown location"
NO_DEADLINE = "No deadline provided"


def _location(workplace: JobWorkplace | None) -> str:
    if workplace is None:
        return UNKNOWN_LOCATION
    parts = [p for p in (workplace.municipality, workplace.region) if p]
    return ", ".join(parts) if parts else UNKNOWN_LOCATION


def to_job_posting(hit: JobSearchHit) -> JobPosting:
    return JobPosting(
        id=hit.id,
        headline=hit.headline or "",
        description=(hit.description.text if hit.description else None) or NO_DESCRIPTION,
        employer=(hit.employer.name if hit.employer else None) or UNKNOWN_EMPLOYER,
        location=_location(hit.workplace_address),
        publication_date=hit.publication_date,
        application_deadline=hit.application_deadline or NO_DEADLINE,
    )


class JobService:
    def __init__(self, client: JobApiClient) -> None:
        self._client = client

    def get_jobs(self, search_query: str | None = None, limit: int = 10) -> list[JobPosting]:
        """Fetch up to ``limit`` postings; an empty list is a valid result."""
        logger.info("Fetching jobs  query=%s  limit=%d", search_query, limit)

        response = self._client.search_jobs(search_query, limit)
        jobs = [to_job_posting(hit) for hit in response.hits]

        logger.info("Fetched %d jobs", len(jobs))
        return jobs
