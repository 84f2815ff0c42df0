"""
Job search API client – thin wrapper around ``requests``.

Talks to the public JobTech job search API (``GET /search``). Every transport
or payload problem is raised as ``JobServiceUnavailableError`` so callers can
tell "the API is down" apart from "the API found nothing".
"""

import logging

import requests
from pydantic import ValidationError

from cvmatch.config import Settings, get_settings
from cvmatch.schemas.jobs import JobSearchResponse
from cvmatch.services.errors import JobServiceUnavailableError

logger = logging.getLogger(__name__)


class JobApiClient:
    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self._base_url = settings.job_api_base_url.rstrip("/")
        self._timeout = settings.job_api_timeout

    def search_jobs(self, query: str | None = None, limit: int = 10) -> JobSearchResponse:
        """
        Run a free-text search against the job API.

        Parameters
        ----------
        query : str, optional
            Search terms; omitted from the request when empty.
        limit : int
            Maximum number of hits to ask for.
        """
        params: dict[str, str] = {"limit": str(limit)}
        if query:
            params["q"] = query

        url = f"{self._base_url}/search"
        logger.info("search_jobs  url=%s  params=%s", url, params)

        try:
            resp = requests.get(
                url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as exc:
            # requests' JSONDecodeError is a RequestException too
            logger.error("Job search API request failed: %s", exc)
            raise JobServiceUnavailableError("Could not fetch jobs from the job search API") from exc

        try:
            result = JobSearchResponse.model_validate(payload)
        except ValidationError as exc:
            logger.error("Job search API returned an unexpected payload: %s", exc)
            raise JobServiceUnavailableError("Unexpected data format from the job search API") from exc

        logger.info("search_jobs  returned %d hits", len(result.hits))
        return result
