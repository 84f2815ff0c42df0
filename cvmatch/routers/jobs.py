"""
Jobs router – GET /jobs, a pass-through to the job search API.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from cvmatch.dependencies import get_job_service
from cvmatch.schemas.common import ErrorResponse
from cvmatch.schemas.jobs import JobPosting
from cvmatch.schemas.match import MAX_RESULTS_LIMIT
from cvmatch.services.errors import JobServiceUnavailableError
from cvmatch.services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["jobs"])


@router.get(
    "/jobs",
    response_model=list[JobPosting],
    responses={503: {"model": ErrorResponse}},
)
def get_jobs(
    q: str | None = Query(default=None, description="Free-text search query."),
    limit: int = Query(default=10, ge=1, le=MAX_RESULTS_LIMIT),
    service: JobService = Depends(get_job_service),
):
    logger.info("GET /jobs  q=%s  limit=%d", q, limit)
    try:
        return service.get_jobs(q, limit)

    except JobServiceUnavailableError as exc:
        logger.warning("Could not fetch jobs: %s", exc)
        raise HTTPException(
            status_code=503, detail="The job search service is temporarily unavailable."
        ) from exc

    except Exception as exc:
        logger.exception("Fetching jobs failed")
        raise HTTPException(status_code=500, detail="An unexpected error occurred.") from exc
