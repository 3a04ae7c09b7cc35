"""User API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from fitnest.api.errors import raise_http_error
from fitnest.database import get_session
from fitnest.models.user import User
from fitnest.schemas.user import UserCreateRequest, UserResponse
from fitnest.services.user_service import create_user, get_user, list_users

router = APIRouter(prefix="/users", tags=["users"])


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        name=user.name,
        role=user.role,
        avatar=user.avatar,
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(
    request: UserCreateRequest,
    session: Session = Depends(get_session),
):
    """Create a user. Usernames are unique."""
    try:
        user = create_user(
            session,
            username=request.username,
            password=request.password,
            name=request.name,
            role=request.role,
            avatar=request.avatar,
        )
    except ValueError as e:
        raise_http_error(e)
    return user_to_response(user)


@router.get("", response_model=list[UserResponse])
def all_users(session: Session = Depends(get_session)):
    return [user_to_response(u) for u in list_users(session)]


@router.get("/{user_id}", response_model=UserResponse)
def get_user_detail(user_id: int, session: Session = Depends(get_session)):
    user = get_user(session, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user_to_response(user)
