"""
Service wiring.

Every getter is cached so the graph is built once per process. Tests swap
pieces out with ``app.dependency_overrides``.
"""

from functools import lru_cache

from cvmatch.config import get_settings
from cvmatch.services.cv_analysis import CvAnalysisService
from cvmatch.services.extractors import default_extractors
from cvmatch.services.job_client import JobApiClient
from cvmatch.services.job_service import JobService
from cvmatch.services.matching_service import MatchingService
from cvmatch.services.matching_strategy import MatchingStrategy, build_strategy


@lru_cache
def get_job_api_client() -> JobApiClient:
    return JobApiClient(get_settings())


@lru_cache
def get_job_service() -> JobService:
    return JobService(get_job_api_client())


@lru_cache
def get_cv_analysis_service() -> CvAnalysisService:
    return CvAnalysisService(default_extractors())


@lru_cache
def get_matching_strategy() -> MatchingStrategy:
    return build_strategy(get_settings().matching_strategy)


@lru_cache
def get_matching_service() -> MatchingService:
    settings = get_settings()
    return MatchingService(
        get_cv_analysis_service(),
        get_job_service(),
        get_matching_strategy(),
        max_workers=settings.match_max_workers,
        default_search_query=settings.default_search_query,
    )
