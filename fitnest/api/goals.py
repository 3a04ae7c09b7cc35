"""Goal API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from fitnest.api.errors import raise_http_error
from fitnest.database import get_session
from fitnest.models.goal import Goal
from fitnest.schemas.goal import GoalCreateRequest, GoalResponse, GoalUpdateRequest
from fitnest.services.goal_service import create_goal, list_goals_by_user, update_goal

router = APIRouter(tags=["goals"])


def _goal_to_response(goal: Goal) -> GoalResponse:
    return GoalResponse(
        id=goal.id,
        name=goal.name,
        type=goal.type,
        target_value=goal.target_value,
        current_value=goal.current_value,
        unit=goal.unit,
        completed=goal.completed,
        user_id=goal.user_id,
        due_date=goal.due_date.isoformat() if goal.due_date else None,
    )


@router.post("/goals", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
def new_goal(
    request: GoalCreateRequest,
    session: Session = Depends(get_session),
):
    try:
        goal = create_goal(
            session,
            user_id=request.user_id,
            name=request.name,
            type=request.type,
            target_value=request.target_value,
            unit=request.unit,
            current_value=request.current_value,
            completed=request.completed,
            due_date=request.due_date,
        )
    except ValueError as e:
        raise_http_error(e)
    return _goal_to_response(goal)


@router.get("/users/{user_id}/goals", response_model=list[GoalResponse])
def user_goals(user_id: int, session: Session = Depends(get_session)):
    return [_goal_to_response(g) for g in list_goals_by_user(session, user_id)]


@router.patch("/goals/{goal_id}", response_model=GoalResponse)
def patch_goal(
    goal_id: int,
    request: GoalUpdateRequest,
    session: Session = Depends(get_session),
):
    """Partially update a goal (progress, completion, target...)."""
    try:
        goal = update_goal(session, goal_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise_http_error(e)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return _goal_to_response(goal)
