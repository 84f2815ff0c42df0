"""
CV router – POST /cv/analyze endpoint.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from cvmatch.dependencies import get_cv_analysis_service
from cvmatch.schemas.common import ErrorResponse
from cvmatch.schemas.cv import CvAnalysisRequest, CvAnalysisResponse
from cvmatch.services.cv_analysis import CvAnalysisService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cv", tags=["cv"])


@router.post(
    "/analyze",
    response_model=CvAnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Extract skills and experience from CV text",
)
def analyze_cv(
    body: CvAnalysisRequest,
    service: CvAnalysisService = Depends(get_cv_analysis_service),
):
    logger.info("POST /cv/analyze  cv_len=%d", len(body.cv_text))
    try:
        return service.analyze_cv(body)

    except ValueError as exc:
        logger.warning("CV analysis validation error: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    except Exception as exc:
        logger.exception("CV analysis failed")
        raise HTTPException(
            status_code=500, detail="An unexpected error occurred during CV analysis."
        ) from exc
