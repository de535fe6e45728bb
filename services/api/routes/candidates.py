from typing import List
from fastapi import APIRouter, HTTPException

from shared.candidates import get_candidate_by_id, list_candidates as all_candidates
from shared.schemas.candidate import CandidateProfile

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=List[CandidateProfile])
async def list_candidates():
    """All candidate profiles, default first."""
    return all_candidates()


@router.get("/{candidate_id}", response_model=CandidateProfile)
async def get_candidate(candidate_id: str):
    candidate = get_candidate_by_id(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail=f"Candidate not found: {candidate_id}")
    return candidate
