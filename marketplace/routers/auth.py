# marketplace/routers/auth.py
from fastapi import APIRouter, Depends

from marketplace.schemas import SignInRequest, SignUpRequest, User, UserOut
from marketplace.schemas.user import SignInResponse, UserResponse
from marketplace.services import AuthService
from marketplace.storage import Storage
from marketplace.utils.dependencies import get_current_user, get_storage

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse)
def signup(payload: SignUpRequest, storage: Storage = Depends(get_storage)):
    user = AuthService(storage).sign_up(payload)
    return UserResponse(user=UserOut.model_validate(user))


@router.post("/signin", response_model=SignInResponse)
def signin(payload: SignInRequest, storage: Storage = Depends(get_storage)):
    user, vendor, driver, token = AuthService(storage).sign_in(payload)
    return SignInResponse(
        user=UserOut.model_validate(user),
        vendor=vendor,
        driver=driver,
        access_token=token,
    )


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return UserResponse(user=UserOut.model_validate(current_user))
