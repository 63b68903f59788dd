from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from tasktrack.db.session import get_session
from tasktrack.dependencies.auth import get_current_user
from tasktrack.schemas.auth import AuthContext
from tasktrack.schemas.user import UserCreate, UserOut
from tasktrack.services.user_service import create_user

user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.get("/me", response_model=AuthContext)
def get_me(caller: AuthContext = Depends(get_current_user)):
    return caller


@user_router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(
    body: UserCreate,
    db: Session = Depends(get_session),
    caller: AuthContext = Depends(get_current_user),
):
    user = create_user(db, body, caller.role)
    return UserOut.model_validate(user, from_attributes=True)
