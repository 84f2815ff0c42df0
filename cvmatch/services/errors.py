"""
Service-level exceptions.

Validation problems are plain ``ValueError`` subclasses so the routers can
treat them exactly like pydantic validation failures (HTTP 400).
"""


class CvValidationError(ValueError):
    """The CV text cannot be analysed (empty or whitespace only)."""


class JobServiceUnavailableError(RuntimeError):
    """The external job search API could not be reached or gave an unusable reply.

    Never raised for a successful search that returned zero jobs.
    """
