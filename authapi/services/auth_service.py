# File: authapi/services/auth_service.py

"""
Credential service.

  - register_user: hash the password and persist a new user
  - authenticate_user: look the user up by email and verify the password
  - login: authenticate_user + issue a signed access token

Functions take the request's SQLAlchemy session explicitly and are
synchronous; FastAPI runs them in its threadpool so a slow bcrypt call
only holds up its own request.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from authapi.core.security import create_access_token, hash_password, verify_password
from authapi.models.user import User
from authapi.services.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    StorageError,
)

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    try:
        return db.scalar(select(User).where(User.email == normalize_email(email)))
    except SQLAlchemyError as exc:
        logger.exception("User lookup failed")
        raise StorageError() from exc


def register_user(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
) -> User:
    """
    Create a user, storing only the bcrypt hash of ``password``.

    Raises DuplicateEmailError if the email is taken (checked up front and
    again by the unique constraint on commit), StorageError otherwise.
    """
    email = normalize_email(email)
    if get_user_by_email(db, email) is not None:
        raise DuplicateEmailError()

    user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        # lost a race with a concurrent registration for the same email
        db.rollback()
        raise DuplicateEmailError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Could not store new user")
        raise StorageError() from exc

    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> User:
    """
    Return the user whose email and password match.

    Unknown email and wrong password raise the same InvalidCredentialsError.
    """
    user = get_user_by_email(db, email)
    if user is None:
        logger.warning("Login failed: unknown email")
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        logger.warning("Login failed: bad password for user %s", user.id)
        raise InvalidCredentialsError()
    return user


def issue_token(user: User) -> str:
    return create_access_token({"id": user.id, "email": user.email})


def login(db: Session, *, email: str, password: str) -> str:
    """Authenticate and return a signed access token."""
    user = authenticate_user(db, email=email, password=password)
    token = issue_token(user)
    logger.info("Login: user %s", user.id)
    return token
