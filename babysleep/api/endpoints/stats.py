"""
Stats endpoints: history, today and weekly views.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from babysleep.db.session import get_db
from babysleep.schemas.stats import OverviewStatsResponse, TodayStatsResponse, WeeklyStatsResponse
from babysleep.stats import compute_overview_stats, compute_today_stats, compute_weekly_stats

router = APIRouter()


@router.get("", summary="Overall, daily and hourly sleep statistics.", response_model=OverviewStatsResponse, )
def get_overview_stats(start_date: Optional[datetime.datetime] = Query(None, description="Earliest start"),
                       end_date: Optional[datetime.datetime] = Query(None, description="Latest start"),
                       as_of: Optional[datetime.datetime] = Query(None,
                                                                  description="Reference datetime (defaults to now)"),
                       db: Session = Depends(get_db), ):
    return compute_overview_stats(db, start_date=start_date, end_date=end_date, as_of=as_of)


@router.get("/today", summary="Naps, day sleep and awake time since the morning wake-up.",
            response_model=TodayStatsResponse, )
def get_today_stats(as_of: Optional[datetime.datetime] = Query(None, description="Reference datetime (defaults to now)"),
                    db: Session = Depends(get_db), ):
    return compute_today_stats(db, as_of=as_of)


@router.get("/weekly", summary="Night/day sleep split over the last 7 days.", response_model=WeeklyStatsResponse, )
def get_weekly_stats(as_of: Optional[datetime.datetime] = Query(None, description="Reference datetime (defaults to now)"),
                     db: Session = Depends(get_db), ):
    return compute_weekly_stats(db, as_of=as_of)
