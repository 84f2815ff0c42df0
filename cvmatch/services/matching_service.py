"""
Matching service – orchestrates the full CV-to-job matching flow.

Flow:
  1. Analyse the CV and flatten its skills into one list
  2. Fetch candidate jobs (over-fetching to leave room for filtering)
  3. Keep only the requested job IDs, if any were given
  4. Score every candidate with the active strategy (thread pool fan-out)
  5. Filter by minimum score, sort by score, truncate to max_results
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor

from cvmatch.schemas.cv import CvAnalysisRequest
from cvmatch.schemas.jobs import JobPosting
from cvmatch.schemas.match import MAX_RESULTS_LIMIT, MatchRequest, MatchResponse, MatchResult
from cvmatch.services.cv_analysis import CvAnalysisService
from cvmatch.services.job_service import JobService
from cvmatch.services.matching_strategy import MatchingStrategy

logger = logging.getLogger(__name__)

OVERFETCH_FACTOR = 3


class MatchingService:
    def __init__(
        self,
        cv_analysis_service: CvAnalysisService,
        job_service: JobService,
        matching_strategy: MatchingStrategy,
        *,
        max_workers: int = 8,
        default_search_query: str = "developer",
    ) -> None:
        self._cv_analysis_service = cv_analysis_service
        self._job_service = job_service
        self._matching_strategy = matching_strategy
        self._max_workers = max_workers
        self._default_search_query = default_search_query

    @property
    def strategy_name(self) -> str:
        return self._matching_strategy.strategy_name

    def match_cv_with_jobs(self, request: MatchRequest) -> MatchResponse:
        """
        Match a CV against candidate jobs and rank the results.

        Parameters
        ----------
        request : MatchRequest
            Already validated request (pydantic enforces the score and
            result-count ranges and a non-blank CV).

        Returns
        -------
        MatchResponse
            Matches sorted by score (ties keep retrieval order). An empty
            candidate set gives an empty, successful response.

        Raises
        ------
        CvValidationError
            If the CV text is blank.
        JobServiceUnavailableError
            If the job search API fails; never reported as "no jobs".
        """
        start = time.time()
        logger.info("Matching started  strategy=%s", self.strategy_name)

        # Step 1 — Extract skills
        analysis = self._cv_analysis_service.analyze_cv(
            CvAnalysisRequest(cv_text=request.cv_text, target_role=request.search_query)
        )
        cv_skills = analysis.all_skills()
        logger.info("Extracted %d skills from CV", len(cv_skills))

        # Step 2 — Candidate jobs
        jobs = self._get_jobs_to_match(request)
        logger.info("Found %d jobs to evaluate", len(jobs))

        if not jobs:
            return MatchResponse(
                matches=[],
                total_jobs_evaluated=0,
                extracted_skills=cv_skills,
                matching_strategy=self.strategy_name,
            )

        # Step 3 — Score every job
        results = self._score_jobs(cv_skills, jobs)

        # Step 4 — Filter, sort (stable), truncate
        ranked = sorted(
            (r for r in results if r.match_score >= request.minimum_match_score),
            key=lambda r: r.match_score,
            reverse=True,
        )
        matches = ranked[: request.max_results]

        logger.info(
            "Matching completed  matches=%d  min_score=%d  evaluated=%d  time=%.3fs",
            len(matches),
            request.minimum_match_score,
            len(jobs),
            time.time() - start,
        )

        return MatchResponse(
            matches=matches,
            total_jobs_evaluated=len(jobs),
            extracted_skills=cv_skills,
            matching_strategy=self.strategy_name,
        )

    def _get_jobs_to_match(self, request: MatchRequest) -> list[JobPosting]:
        query = request.search_query or self._default_search_query
        limit = min(request.max_results * OVERFETCH_FACTOR, MAX_RESULTS_LIMIT)
        logger.debug("Searching jobs  query=%s  limit=%d", query, limit)

        jobs = self._job_service.get_jobs(query, limit)

        if request.job_ids:
            allowed = set(request.job_ids)
            jobs = [job for job in jobs if job.id in allowed]
            logger.debug("Filtered to requested job IDs  remaining=%d", len(jobs))

        return jobs

    def _score_jobs(self, cv_skills: list[str], jobs: list[JobPosting]) -> list[MatchResult]:
        """
        Score all jobs concurrently and wait for every one of them.

        ``map`` keeps input order; the first scoring error is re-raised here
        and fails the whole request.
        """
        logger.debug("Using matching strategy  name=%s", self.strategy_name)
        workers = min(self._max_workers, len(jobs))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(
                pool.map(lambda job: self._matching_strategy.calculate_match(cv_skills, job), jobs)
            )
