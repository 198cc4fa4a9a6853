from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from habitvault.api.deps import get_current_user, get_db
from habitvault.models import User
from habitvault.schemas import CompletionRateOut, HeatmapCellOut, TimeframeCompletionOut, WeeklyTrendOut
from habitvault.services import analytics

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/completion-rate", response_model=list[CompletionRateOut])
def completion_rate(
    time_range: Optional[str] = Query(default=None, alias="timeRange"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    return analytics.completion_rates(db, user.id, time_range)


@router.get("/heatmap", response_model=list[HeatmapCellOut])
def heatmap(
    timeframe: Optional[str] = "all",
    period: Optional[str] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    return analytics.heatmap(db, user.id, period=period, timeframe=timeframe)


@router.get("/weekly-trend", response_model=list[WeeklyTrendOut])
def weekly_trend(user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return analytics.weekly_trend(db, user.id)


@router.get("/timeframe-completion", response_model=list[TimeframeCompletionOut])
def timeframe_completion(
    period: Optional[str] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    return analytics.timeframe_completion(db, user.id, period=period)
