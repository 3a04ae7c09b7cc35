"""Family & membership API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from fitnest.api.errors import raise_http_error
from fitnest.api.users import user_to_response
from fitnest.database import get_session
from fitnest.models.user import Family
from fitnest.schemas.family import (
    FamilyCreateRequest,
    FamilyMemberCreateRequest,
    FamilyMemberResponse,
    FamilyResponse,
)
from fitnest.schemas.user import UserResponse
from fitnest.services.family_service import (
    add_family_member,
    create_family,
    get_families_by_user,
    get_family,
    get_family_members,
)

router = APIRouter(tags=["family"])


def _family_to_response(family: Family) -> FamilyResponse:
    return FamilyResponse(id=family.id, name=family.name, created_by=family.created_by)


@router.post("/families", response_model=FamilyResponse, status_code=status.HTTP_201_CREATED)
def new_family(
    request: FamilyCreateRequest,
    session: Session = Depends(get_session),
):
    try:
        family = create_family(session, name=request.name, created_by=request.created_by)
    except ValueError as e:
        raise_http_error(e)
    return _family_to_response(family)


@router.get("/families/{family_id}", response_model=FamilyResponse)
def family_detail(family_id: int, session: Session = Depends(get_session)):
    family = get_family(session, family_id)
    if not family:
        raise HTTPException(status_code=404, detail="Family not found")
    return _family_to_response(family)


@router.get("/users/{user_id}/families", response_model=list[FamilyResponse])
def user_families(user_id: int, session: Session = Depends(get_session)):
    """Families the user created or belongs to."""
    return [_family_to_response(f) for f in get_families_by_user(session, user_id)]


@router.post("/family-members", response_model=FamilyMemberResponse, status_code=status.HTTP_201_CREATED)
def join_family(
    request: FamilyMemberCreateRequest,
    session: Session = Depends(get_session),
):
    """Add a user to a family. 409 if they are already a member."""
    try:
        member = add_family_member(session, family_id=request.family_id, user_id=request.user_id)
    except ValueError as e:
        raise_http_error(e)
    return FamilyMemberResponse(id=member.id, family_id=member.family_id, user_id=member.user_id)


@router.get("/families/{family_id}/members", response_model=list[UserResponse])
def family_members(family_id: int, session: Session = Depends(get_session)):
    return [user_to_response(u) for u in get_family_members(session, family_id)]
