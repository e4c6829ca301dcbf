# authkeeper/api/auth.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from authkeeper.database import get_db, get_storage
from authkeeper.core.credentials import CredentialStore
from authkeeper.core.errors import (
    AuthError,
    DuplicateUsername,
    InvalidCredentials,
    StoreError,
    UnknownUser,
    ValidationError,
)
from authkeeper.core.flow import AuthFlow
from authkeeper.core.session import SessionFlag


router = APIRouter()


ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    UnknownUser: status.HTTP_404_NOT_FOUND,
    DuplicateUsername: status.HTTP_409_CONFLICT,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class RegisterRequest(BaseModel):
    username: str | None = None
    password: str | None = None
    confirm_password: str | None = None


def get_auth_flow(db: Session = Depends(get_db), storage: Session = Depends(get_storage)) -> AuthFlow:
    return AuthFlow.start(CredentialStore(db), SessionFlag(storage))


def error_response(exc: AuthError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR),
        content={"status": "error", "error": type(exc).__name__, "message": exc.message}
    )


@router.get("/session")
def read_session(flow: AuthFlow = Depends(get_auth_flow)):
    return {"status": "success", "data": {"username": flow.current_user, "state": flow.state.value}}


@router.post("/login")
def login(req: LoginRequest, flow: AuthFlow = Depends(get_auth_flow)):
    try:
        username = flow.submit_login(req.username, req.password)
        return {"status": "success", "data": {"username": username, "message": "Login successful"}}
    except AuthError as e:
        return error_response(e)


@router.post("/register")
def register(req: RegisterRequest, flow: AuthFlow = Depends(get_auth_flow)):
    try:
        username = flow.submit_register(req.username, req.password, req.confirm_password)
        return {"status": "success", "data": {"username": username, "message": "Registration successful!"}}
    except AuthError as e:
        return error_response(e)


@router.post("/logout")
def logout(flow: AuthFlow = Depends(get_auth_flow)):
    try:
        flow.logout()
        return {"status": "success", "data": {"username": None}}
    except AuthError as e:
        return error_response(e)
