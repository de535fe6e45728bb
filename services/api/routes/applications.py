import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response

from shared.schemas.application import (
    ApplicationCreate,
    ApplicationRecord,
    ApplicationStats,
    ApplicationStatus,
    ApplicationUpdate,
)
from shared.tracker import ApplicationNotFoundError, ApplicationStore
from ..dependencies import get_application_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/applications", tags=["applications"])


def _not_found(e: ApplicationNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=List[ApplicationRecord])
def list_applications(
    status: Optional[ApplicationStatus] = None,
    store: ApplicationStore = Depends(get_application_store),
):
    """All tracked applications, most recently applied first."""
    return store.list_applications(status=status)


@router.post("", response_model=ApplicationRecord, status_code=201)
def create_application(
    application: ApplicationCreate,
    store: ApplicationStore = Depends(get_application_store),
):
    return store.create_application(application)


# Declared before /{application_id} so "stats" is not taken as an id
@router.get("/stats", response_model=ApplicationStats)
def application_stats(store: ApplicationStore = Depends(get_application_store)):
    return store.get_stats()


@router.get("/{application_id}", response_model=ApplicationRecord)
def get_application(application_id: str, store: ApplicationStore = Depends(get_application_store)):
    try:
        return store.get_application(application_id)
    except ApplicationNotFoundError as e:
        raise _not_found(e)


@router.patch("/{application_id}", response_model=ApplicationRecord)
def update_application(
    application_id: str,
    update: ApplicationUpdate,
    store: ApplicationStore = Depends(get_application_store),
):
    try:
        return store.update_application(application_id, update)
    except ApplicationNotFoundError as e:
        raise _not_found(e)


@router.delete("/{application_id}", status_code=204)
def delete_application(application_id: str, store: ApplicationStore = Depends(get_application_store)):
    try:
        store.delete_application(application_id)
    except ApplicationNotFoundError as e:
        raise _not_found(e)
    return Response(status_code=204)
