# marketplace/routers/users.py
from fastapi import APIRouter, Depends

from marketplace.schemas import UserOut
from marketplace.schemas.user import UserResponse
from marketplace.services import AuthService
from marketplace.storage import Storage
from marketplace.utils.dependencies import get_storage

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, storage: Storage = Depends(get_storage)):
    """Public view of a user; lets clients poll the onboarding flag."""
    user = AuthService(storage).get_user(user_id)
    return UserResponse(user=UserOut.model_validate(user))
