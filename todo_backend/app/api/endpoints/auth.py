# todo_backend/app/api/endpoints/auth.py
import logging

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from todo_backend.app.api import deps
from todo_backend.app.core.config import Settings
from todo_backend.app.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from todo_backend.app.schemas.envelope import Envelope
from todo_backend.app.schemas.user import Token, UserCreate, UserLogin, UserResponse
from todo_backend.app.security import hashing
from todo_backend.app.security.jwt import TokenService
from todo_backend.app.store.users import UserStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=Envelope[UserResponse], status_code=status.HTTP_201_CREATED)
async def register(
        user_in: UserCreate,
        users: UserStore = Depends(deps.get_user_store),
        settings: Settings = Depends(deps.get_app_settings),
):
    if user_in.password != user_in.confirm_password:
        raise ValidationError("Passwords do not match")

    # Checked before hashing so a taken email is 409 whatever the password
    if await users.get_by_email(user_in.email):
        raise ConflictError("Email already exists")

    # bcrypt is CPU bound, keep it off the event loop
    hashed_password = await run_in_threadpool(
        hashing.get_password_hash, user_in.password, settings.BCRYPT_ROUNDS
    )

    # A concurrent registration of the same email still hits the unique constraint (ConflictError)
    user = await users.create(
        name=user_in.name,
        email=user_in.email,
        hashed_password=hashed_password,
    )
    logger.info("Registered user id=%s", user.id)

    return Envelope[UserResponse](
        status=status.HTTP_201_CREATED,
        message="User registered successfully",
        data=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=Envelope[Token])
async def login(
        form: UserLogin,
        users: UserStore = Depends(deps.get_user_store),
        tokens: TokenService = Depends(deps.get_token_service),
):
    user = await users.get_by_email(form.email)
    if not user:
        raise NotFoundError("User not found")

    if not await run_in_threadpool(hashing.verify_password, form.password, user.hashed_password):
        logger.info("Failed login for user id=%s", user.id)
        raise AuthError("Invalid credentials")

    token = tokens.issue(user.id)
    logger.info("User id=%s logged in", user.id)

    return Envelope[Token](
        status=status.HTTP_200_OK,
        message="Logged in successfully",
        data=Token(token=token),
    )
