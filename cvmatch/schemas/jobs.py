"""
Pydantic models for job postings.

The ``JobSearch*`` models mirror the payload of the external job search API;
``JobPosting`` is the normalised shape the rest of the service works with.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


# ── Upstream payload ────────────────────────────────────────────────────────


class JobDescription(BaseModel):
    text: str | None = None


class JobEmployer(BaseModel):
    name: str | None = None


class JobWorkplace(BaseModel):
    municipality: str | None = None
    region: str | None = None


class JobSearchHit(BaseModel):
    id: str
    headline: str | None = None
    description: JobDescription | None = None
    employer: JobEmployer | None = None
    workplace_address: JobWorkplace | None = None
    publication_date: datetime
    application_deadline: str | None = None


class JobSearchResponse(BaseModel):
    # The API reports totals as {"value": n}; only the hits are used.
    total: Any = None
    hits: list[JobSearchHit] = []


# ── Normalised posting ──────────────────────────────────────────────────────


class JobPosting(BaseModel):
    """A single job posting, read-only once built."""

    model_config = ConfigDict(frozen=True)

    id: str
    headline: str
    description: str
    employer: str
    location: str
    publication_date: datetime
    application_deadline: str
