"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.domain.sources import ActivitySources
from app.infrastructure.database import get_db
from app.infrastructure.repositories import (
    ContactRepository,
    InteractionRepository,
    ProjectRepository,
    TaskRepository,
)
from app.infrastructure.security import owner_id_from_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_current_owner_id(token: str = Depends(oauth2_scheme)) -> int:
    """Return the owner id carried by the bearer token."""

    try:
        return owner_id_from_token(token)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def get_activity_sources(db: Session = Depends(get_db)) -> ActivitySources:
    """Return the repositories consulted by the activity engine."""

    return ActivitySources(
        interactions=InteractionRepository(db),
        tasks=TaskRepository(db),
        projects=ProjectRepository(db),
        contacts=ContactRepository(db),
    )
