from jobmatch.api import (
    candidate_routes,
    cv_routes,
    interview_routes,
)

__all__ = [
    "candidate_routes",
    "cv_routes",
    "interview_routes",
]
