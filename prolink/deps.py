from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from prolink.core.security import Identity, current_identity
from prolink.db.session import SessionLocal
from prolink.store.base import ObjectStore
from prolink.store.sqlalchemy_store import SqlAlchemyStore

# Tokens are issued by the external identity provider
bearer_scheme = HTTPBearer(auto_error=False)

_store = SqlAlchemyStore(SessionLocal)

def get_store() -> ObjectStore:
    """
    Dependency for getting the object store
    """
    return _store

def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    """
    Dependency for getting the signed-in viewer
    """
    identity = current_identity(credentials.credentials if credentials else None)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity
