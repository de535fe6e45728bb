import logging
from typing import Dict, List, Optional

from shared.schemas.candidate import CandidateProfile
from .profiles import MAYA_CHEN, DANIEL_OKAFOR, PRIYA_RAMAN

logger = logging.getLogger(__name__)

CANDIDATES: Dict[str, CandidateProfile] = {
    profile.id: profile for profile in (MAYA_CHEN, DANIEL_OKAFOR, PRIYA_RAMAN)
}

DEFAULT_CANDIDATE_ID = MAYA_CHEN.id


def list_candidates() -> List[CandidateProfile]:
    """All registered candidates, in registration order."""
    return list(CANDIDATES.values())


def get_candidate_by_id(candidate_id: Optional[str]) -> Optional[CandidateProfile]:
    """Return the candidate with this id, or None if there is none."""
    if not candidate_id:
        return None
    return CANDIDATES.get(candidate_id)


def get_default_candidate() -> CandidateProfile:
    return CANDIDATES[DEFAULT_CANDIDATE_ID]


def get_candidate_or_default(candidate_id: Optional[str]) -> CandidateProfile:
    """
    Resolve a candidate for a tailoring request.

    An unknown or missing id falls back to the default profile.
    """
    candidate = get_candidate_by_id(candidate_id)
    if candidate is None:
        if candidate_id:
            logger.warning(f"Unknown candidate id '{candidate_id}', using default '{DEFAULT_CANDIDATE_ID}'")
        return get_default_candidate()
    return candidate
