"""Progress API endpoints.

Unknown users and families are not errors here: they score 0 / [].
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from fitnest.database import get_session
from fitnest.schemas.progress import (
    FamilySummaryResponse,
    MemberProgressResponse,
    UserProgressResponse,
)
from fitnest.services.family_service import get_family
from fitnest.services.progress_service import (
    compute_family_progress,
    compute_family_summary,
    compute_user_progress,
)

router = APIRouter(tags=["progress"])


@router.get("/users/{user_id}/daily-progress", response_model=UserProgressResponse)
def daily_progress(user_id: int, session: Session = Depends(get_session)):
    """Today's progress (0-100) across the user's active goals."""
    return UserProgressResponse(progress=compute_user_progress(session, user_id))


@router.get("/families/{family_id}/progress", response_model=list[MemberProgressResponse])
def family_progress(family_id: int, session: Session = Depends(get_session)):
    """Per-member progress in membership order."""
    return [
        MemberProgressResponse(user_id=m.user_id, progress=m.progress)
        for m in compute_family_progress(session, family_id)
    ]


@router.get("/families/{family_id}/summary", response_model=FamilySummaryResponse)
def family_summary(family_id: int, session: Session = Depends(get_session)):
    family = get_family(session, family_id)
    if not family:
        raise HTTPException(status_code=404, detail="Family not found")

    summary = compute_family_summary(session, family_id)
    return FamilySummaryResponse(
        family_id=family.id,
        name=family.name,
        member_count=summary.member_count,
        average_progress=summary.average_progress,
        members=[
            MemberProgressResponse(user_id=m.user_id, progress=m.progress)
            for m in summary.members
        ],
    )
