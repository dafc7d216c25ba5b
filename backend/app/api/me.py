"""Current-user endpoint for holders of an access token."""

from fastapi import APIRouter, Depends

from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.user import UserRead
from backend.app.services.credentials import Credential

router = APIRouter(tags=["auth"])


@router.get("/me", response_model=UserRead)
def read_me(current_user: Credential = Depends(get_current_user)):
    return UserRead(id=current_user.user_id, identifier=current_user.identifier)
