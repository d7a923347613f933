from __future__ import annotations

import re
from typing import Optional

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel, Field, field_validator

from users_api.core.errors import error_response
from users_api.services.user_service import ErrorKind, UserFailure, UserService

router = APIRouter(prefix="/users", tags=["users"])

# request-shape check only; the service applies the stricter creation rule
_ADDRESS_SHAPE = re.compile(r"[^@\s]+@[^@\s]+")

_STATUS_BY_KIND = {
    ErrorKind.INVALID_EMAIL: 400,
    ErrorKind.INACTIVE: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_EMAIL: 409,
}


def _required(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value


class CreateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True)
    email: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def _name_present(cls, value: Optional[str]) -> str:
        return _required(value, "Name is required")

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: Optional[str]) -> str:
        value = _required(value, "Email is required")
        if not _ADDRESS_SHAPE.fullmatch(value):
            raise ValueError("Email must be valid")
        return value


class UpdateNameRequest(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def _name_present(cls, value: Optional[str]) -> str:
        return _required(value, "Name is required")


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _failure_response(failure: UserFailure, request: Request):
    return error_response(_STATUS_BY_KIND[failure.kind], failure.message, request.url.path)


@router.post("", status_code=201)
def create_user(payload: CreateUserRequest, request: Request):
    result = _get_user_service(request).create_user(payload.email, payload.name)
    if isinstance(result, UserFailure):
        return _failure_response(result, request)
    return result.to_dict()


# declared before /{user_id} so "active" is not captured as an id
@router.get("/active")
def active_users(request: Request):
    return [user.to_dict() for user in _get_user_service(request).get_all_active_users()]


@router.get("/{user_id}")
def get_user(user_id: str, request: Request):
    result = _get_user_service(request).get_user_by_id(user_id)
    if isinstance(result, UserFailure):
        return _failure_response(result, request)
    return result.to_dict()


@router.put("/{user_id}/name")
def update_name(user_id: str, payload: UpdateNameRequest, request: Request):
    result = _get_user_service(request).update_user_name(user_id, payload.name)
    if isinstance(result, UserFailure):
        return _failure_response(result, request)
    return result.to_dict()


@router.delete("/{user_id}", status_code=204)
def deactivate_user(user_id: str, request: Request):
    failure = _get_user_service(request).deactivate_user(user_id)
    if failure is not None:
        return _failure_response(failure, request)
    return Response(status_code=204)
