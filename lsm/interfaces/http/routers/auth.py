from __future__ import annotations

from fastapi import APIRouter, Depends, status

from lsm.application.errors import NotFound
from lsm.application.use_cases.auth import signin_user, signup_user
from lsm.infrastructure.auth.context import AuthContext
from lsm.infrastructure.auth.jwt_service import JWTService
from lsm.infrastructure.auth.password import PasswordHasher
from lsm.interfaces.http.deps import (
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from lsm.interfaces.http.schemas.auth import (
    AuthResponse,
    SigninRequest,
    SignupRequest,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    payload: SignupRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthResponse:
    result = await signup_user.execute(
        uow=uow,
        payload=signup_user.SignupInput(
            name=payload.name,
            email=payload.email,
            password=payload.password,
            phone_number=payload.phone_number,
        ),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    return AuthResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.post("/signin", response_model=AuthResponse)
async def signin(
    payload: SigninRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthResponse:
    result = await signin_user.execute(
        uow=uow,
        payload=signin_user.SigninInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    return AuthResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.get("/me", response_model=UserResponse)
async def read_me(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> UserResponse:
    user = await uow.users.get(context.user_id)
    if user is None:
        raise NotFound("User not found")
    return UserResponse.model_validate(user)
