"""
Sleep session endpoints.

Live tracking (current / start / end / continue) and history editing
(list / backfill / update / delete).
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, status

from babysleep.api.dependencies import get_sleep_session_service
from babysleep.schemas.sleep_session import (SleepEndRequest, SleepSessionBounds, SleepSessionDeleteResponse,
                                             SleepSessionResponse, SleepStartRequest, )
from babysleep.services.sleep_session_service import SleepSessionService

router = APIRouter()


@router.get("/current", summary="Get the active sleep session, if any.",
            response_model=Optional[SleepSessionResponse], )
def get_current(service: SleepSessionService = Depends(get_sleep_session_service)):
    return service.get_current()


@router.post("/start", summary="Start a sleep session.", response_model=SleepSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def start_session(data: Optional[SleepStartRequest] = Body(None),
                  service: SleepSessionService = Depends(get_sleep_session_service), ):
    return service.start(data.start_time if data else None)


@router.post("/end", summary="End the active sleep session.", response_model=SleepSessionResponse, )
def end_session(data: Optional[SleepEndRequest] = Body(None),
                service: SleepSessionService = Depends(get_sleep_session_service), ):
    return service.end(data.end_time if data else None)


@router.post("/sessions/{session_id}/continue", summary="Reopen a completed sleep session.",
             response_model=SleepSessionResponse, )
def continue_session(session_id: int, service: SleepSessionService = Depends(get_sleep_session_service)):
    return service.continue_session(session_id)


@router.get("/sessions", summary="List sleep sessions, newest first.", response_model=list[SleepSessionResponse], )
def list_sessions(start_date: Optional[datetime.datetime] = Query(None, description="Earliest start (inclusive)"),
                  end_date: Optional[datetime.datetime] = Query(None, description="Latest start (inclusive)"),
                  limit: Optional[int] = Query(None, ge=1, description="Maximum number of sessions"),
                  service: SleepSessionService = Depends(get_sleep_session_service), ):
    return service.list_sessions(start_date, end_date, limit)


@router.post("/sessions", summary="Add a completed sleep session manually.", response_model=SleepSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: SleepSessionBounds, service: SleepSessionService = Depends(get_sleep_session_service)):
    return service.create_backfill(data)


@router.put("/sessions/{session_id}", summary="Edit the bounds of a sleep session.",
            response_model=SleepSessionResponse, )
def update_session(session_id: int, data: SleepSessionBounds,
                   service: SleepSessionService = Depends(get_sleep_session_service), ):
    return service.update_bounds(session_id, data)


@router.delete("/sessions/{session_id}", summary="Delete a sleep session.",
               response_model=SleepSessionDeleteResponse, )
def delete_session(session_id: int, service: SleepSessionService = Depends(get_sleep_session_service)):
    session = service.delete(session_id)
    return SleepSessionDeleteResponse(message="Session deleted", session=session)
