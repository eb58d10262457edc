# marketplace/utils/dependencies.py
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from marketplace.core import security
from marketplace.schemas import User
from marketplace.storage import Storage
from marketplace.utils.exceptions import UnauthorizedError
from marketplace.utils.image_utils import BlobStore

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/signin")


def get_storage(request: Request) -> Storage:
    """The store built at startup; tests swap it by building a new app."""
    return request.app.state.storage


def get_blob_store(request: Request) -> BlobStore:
    return request.app.state.blob_store


def get_current_user(token: str = Depends(oauth2_scheme), storage: Storage = Depends(get_storage)) -> User:
    payload = security.verify_token(token)
    if not payload or not payload.get("sub"):
        raise UnauthorizedError("Could not validate credentials")
    user = storage.get_user(payload["sub"])
    if user is None:
        raise UnauthorizedError("Could not validate credentials")
    return user
