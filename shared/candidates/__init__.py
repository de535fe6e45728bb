from .store import (
    CANDIDATES,
    DEFAULT_CANDIDATE_ID,
    list_candidates,
    get_candidate_by_id,
    get_default_candidate,
    get_candidate_or_default,
)

__all__ = [
    "CANDIDATES",
    "DEFAULT_CANDIDATE_ID",
    "list_candidates",
    "get_candidate_by_id",
    "get_default_candidate",
    "get_candidate_or_default",
]
