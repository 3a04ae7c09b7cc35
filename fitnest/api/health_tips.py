"""Health tip API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from fitnest.config import settings
from fitnest.database import get_session
from fitnest.models.health_tip import HealthTip
from fitnest.schemas.health_tip import HealthTipCreateRequest, HealthTipResponse
from fitnest.services.health_tip_service import (
    create_health_tip,
    get_health_tips,
    get_random_health_tip,
)

router = APIRouter(prefix="/health-tips", tags=["health-tips"])


def _tip_to_response(tip: HealthTip) -> HealthTipResponse:
    return HealthTipResponse(
        id=tip.id,
        title=tip.title,
        content=tip.content,
        type=tip.type,
        icon=tip.icon,
        created_at=tip.created_at.isoformat(),
    )


@router.post("", response_model=HealthTipResponse, status_code=status.HTTP_201_CREATED)
def new_tip(
    request: HealthTipCreateRequest,
    session: Session = Depends(get_session),
):
    tip = create_health_tip(
        session,
        title=request.title,
        content=request.content,
        type=request.type,
        icon=request.icon,
    )
    return _tip_to_response(tip)


@router.get("/random", response_model=HealthTipResponse)
def random_tip(session: Session = Depends(get_session)):
    tip = get_random_health_tip(session)
    if not tip:
        raise HTTPException(status_code=404, detail="No health tips found")
    return _tip_to_response(tip)


@router.get("", response_model=list[HealthTipResponse])
def latest_tips(
    limit: int = Query(default=settings.health_tip_limit, ge=1, le=50),
    session: Session = Depends(get_session),
):
    """Newest tips first."""
    return [_tip_to_response(t) for t in get_health_tips(session, limit=limit)]
