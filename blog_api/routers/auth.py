"""Signup, signin, Google login and signout endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from blog_api.auth.cookies import clear_session_cookie, set_session_cookie
from blog_api.config import Settings, get_settings
from blog_api.database.session import get_db
from blog_api.schemas.auth import (
    GoogleAuthRequest,
    SigninRequest,
    SignupRequest,
    SignupResponse,
)
from blog_api.schemas.common import MessageResponse
from blog_api.schemas.user import UserPublic, to_public
from blog_api.services import auth as auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    data: SignupRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Create a local account and start a session."""
    user, token = auth_service.signup(db, settings, data)
    set_session_cookie(response, token, settings)
    return {"user": user}


@router.post("/signin", response_model=UserPublic)
def signin(
    data: SigninRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserPublic:
    """Start a session with email and password."""
    user, token = auth_service.signin(db, settings, data)
    set_session_cookie(response, token, settings)
    return to_public(user)


@router.post("/google", response_model=UserPublic)
def google(
    data: GoogleAuthRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserPublic:
    """Start a session for a Google-verified email, creating the account if new."""
    user, token = auth_service.google(db, settings, data)
    set_session_cookie(response, token, settings)
    return to_public(user)


@router.post("/signout", response_model=MessageResponse)
def signout(
    response: Response,
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    """End the session by clearing the cookie. Succeeds with or without one."""
    clear_session_cookie(response, settings)
    logger.info("User signed out")
    return MessageResponse(message="Signout successfully")
