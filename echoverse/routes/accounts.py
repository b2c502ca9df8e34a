"""Account routes: validate the payload, then acknowledge."""

from typing import Any, Dict

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..auth import UserCreate, UserLogin, error_list

router = APIRouter()


def _validation_failed(e: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": error_list(e)})


@router.post("/register")
def register(payload: Dict[str, Any] = Body(...)):
    try:
        UserCreate.model_validate(payload)
    except ValidationError as e:
        return _validation_failed(e)
    return JSONResponse(status_code=201, content={"message": "User registered successfully!"})


@router.post("/login")
@router.post("/api/auth/login")
def login(payload: Dict[str, Any] = Body(...)):
    try:
        UserLogin.model_validate(payload)
    except ValidationError as e:
        return _validation_failed(e)
    return {"message": "User logged in successfully!"}
