# File: authapi/api/routes_auth.py

"""
Auth API routes: register and login.

Handlers are plain ``def`` so FastAPI runs them in its threadpool; bcrypt
work in one request never stalls the event loop for the others.
Service errors are turned into the JSON envelope by the handlers in main.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from authapi.db.session import get_db
from authapi.schemas.user import (
    LoginResponse,
    RegisterResponse,
    UserCreate,
    UserLogin,
    UserRead,
)
from authapi.services import auth_service

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    user = auth_service.register_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    return RegisterResponse(
        message="User registered successfully",
        data=UserRead.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse, summary="Log in and get an access token")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    token = auth_service.login(db, email=payload.email, password=payload.password)
    return LoginResponse(token=token)
