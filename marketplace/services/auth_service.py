"""
Account service: sign-up, sign-in and user lookups.
"""
from typing import Optional, Tuple

from marketplace.core import security
from marketplace.core.logging import log_auth_event
from marketplace.schemas import Driver, SignInRequest, SignUpRequest, User, UserRole, Vendor
from marketplace.storage import Storage
from marketplace.utils.exceptions import ConflictError, NotFoundError, UnauthorizedError

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Service class for account-related business logic."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def sign_up(self, payload: SignUpRequest) -> User:
        """Create a user; the email must not be registered yet."""
        if self.storage.get_user_by_email(payload.email) is not None:
            log_auth_event("signup", payload.email, success=False, reason="duplicate_email")
            raise ConflictError("Email already registered")

        user = self.storage.create_user({
            "email": payload.email,
            "password": security.hash_password(payload.password),
            "role": payload.role,
            "onboarding_complete": False,
        })
        log_auth_event("signup", user.email, user_id=user.id, role=user.role.value)
        return user

    def sign_in(self, payload: SignInRequest) -> Tuple[User, Optional[Vendor], Optional[Driver], str]:
        """
        Check credentials, then load the profile matching the user's role.
        Returns (user, vendor, driver, access_token).
        """
        user = self.storage.get_user_by_email(payload.email)
        if user is None or not security.verify_password(payload.password, user.password):
            log_auth_event("signin", payload.email, success=False)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        vendor: Optional[Vendor] = None
        driver: Optional[Driver] = None
        if user.role == UserRole.vendor:
            vendor = self.storage.get_vendor_by_user_id(user.id)
        elif user.role == UserRole.driver:
            driver = self.storage.get_driver_by_user_id(user.id)

        token = security.create_access_token({"sub": user.id, "role": user.role.value})
        log_auth_event("signin", user.email, user_id=user.id)
        return user, vendor, driver, token

    def get_user(self, user_id: str) -> User:
        user = self.storage.get_user(user_id)
        if user is None:
            raise NotFoundError("User")
        return user

    def mark_onboarded(self, user_id: str) -> Optional[User]:
        """Flag the owner as onboarded; None when the user does not exist."""
        return self.storage.update_user(user_id, {"onboarding_complete": True})
