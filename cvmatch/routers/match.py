"""
Match router – POST /match endpoint.
Handles both JSON (cv_text) and FormData (PDF file) uploads.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from cvmatch.dependencies import get_matching_service
from cvmatch.schemas.common import ErrorResponse
from cvmatch.schemas.match import MatchRequest, MatchResponse
from cvmatch.services.cv_text import extract_text_from_pdf
from cvmatch.services.errors import CvValidationError, JobServiceUnavailableError
from cvmatch.services.matching_service import MatchingService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["match"])

# Form fields sent as JSON-encoded strings
_JSON_FORM_FIELDS = ("job_ids",)
_PLAIN_FORM_FIELDS = ("search_query", "location", "radius_km", "minimum_match_score", "max_results")


async def _read_form(request: Request) -> dict[str, Any]:
    form = await request.form()
    cv_parts: list[str] = []

    # Extract PDF text if provided
    file = form.get("file")
    if file and hasattr(file, "read"):
        pdf_content = await file.read()
        cv_parts.append(extract_text_from_pdf(pdf_content))

    cv_text = form.get("cv_text")
    if cv_text:
        cv_parts.append(str(cv_text))

    body: dict[str, Any] = {"cv_text": "\n".join(cv_parts)}
    for name in _JSON_FORM_FIELDS:
        raw = form.get(name)
        if raw and str(raw).lower() != "null":
            body[name] = json.loads(str(raw))
    for name in _PLAIN_FORM_FIELDS:
        raw = form.get(name)
        if raw not in (None, ""):
            body[name] = str(raw)
    return body


@router.post(
    "/match",
    response_model=MatchResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Match a CV against job postings from the job search API",
)
async def match_cv_endpoint(
    request: Request,
    service: MatchingService = Depends(get_matching_service),
):
    """
    Accept a CV via JSON or FormData together with the matching options.

    - JSON: { "cv_text": "...", "search_query": "...", "max_results": 10, ... }
    - FormData: file (PDF) and/or cv_text + the same options (job_ids JSON-encoded)

    If both file and cv_text are provided, they are concatenated.
    """
    try:
        content_type = request.headers.get("content-type", "")
        if "multipart/form-data" in content_type:
            body = await _read_form(request)
        else:
            body = await request.json()
        match_request = MatchRequest.model_validate(body)

    except ValueError as exc:
        logger.warning("Match request rejected: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info(
        "POST /match  cv_len=%d  query=%s  min_score=%d  max_results=%d",
        len(match_request.cv_text),
        match_request.search_query,
        match_request.minimum_match_score,
        match_request.max_results,
    )

    try:
        # Retrieval and scoring block; keep them off the event loop
        result = await run_in_threadpool(service.match_cv_with_jobs, match_request)

    except CvValidationError as exc:
        logger.warning("Match validation error: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    except JobServiceUnavailableError as exc:
        logger.warning("Match failed, job search unavailable: %s", exc)
        raise HTTPException(
            status_code=503, detail="The job search service is temporarily unavailable."
        ) from exc

    except Exception as exc:
        logger.exception("Match failed")
        raise HTTPException(
            status_code=500, detail="An unexpected error occurred while matching the CV."
        ) from exc

    logger.info(
        "Match success  matches=%d  evaluated=%d",
        len(result.matches),
        result.total_jobs_evaluated,
    )
    return result
