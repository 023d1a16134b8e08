"""Authentication router for registration, login, password reset and profile."""

import logging

from fastapi import APIRouter, status

from omi.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
    ResetService,
)
from omi.presentation.api.schemas.auth import (
    AuthResponse,
    DeleteAccountRequest,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UpdateProfileRequest,
    UserResponse,
)
from omi.presentation.api.schemas.common import MessageResponse
from omi_identity import AuthResult, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.from_public_user(result.user),
        token=result.token,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid email, age or weak password"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Register a new user account.

    Returns the public user and a bearer token for immediate use.
    """
    try:
        result = await auth_service.register(
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            age=request.age,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _auth_response(result)


@router.post(
    "/login",
    summary="Login with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same response. A hash
    made with a different work factor is replaced on success.
    """
    try:
        result = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _auth_response(result)


@router.post(
    "/forgot-password",
    summary="Request a password reset email",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Reset requested (same answer for unknown emails)"},
        503: {"description": "Email could not be sent"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    reset_service: ResetService,
    session: DBSession,
) -> ForgotPasswordResponse:
    """
    Start the password reset flow.

    If the email belongs to an account, a single-use reset link valid for
    one hour is emailed. Outside production the raw token is also returned
    so the flow can be exercised without a mail server.
    """
    try:
        result = await reset_service.request_reset(request.email)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return ForgotPasswordResponse(message=result.message, token=result.token)


@router.post(
    "/reset-password",
    summary="Reset password with a reset token",
    responses={
        200: {"description": "Password reset successfully"},
        400: {"description": "New password too weak"},
        401: {"description": "Invalid or expired reset token"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    reset_service: ResetService,
    session: DBSession,
) -> MessageResponse:
    try:
        message = await reset_service.reset_password(
            token=request.token,
            new_password=request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message=message)


@router.get(
    "/profile",
    summary="Get current user's profile",
    responses={
        200: {"description": "Current user's profile"},
        401: {"description": "Not authenticated"},
    },
)
async def get_profile(
    current_user: CurrentUser,
    auth_service: AuthService,
) -> UserResponse:
    profile = await auth_service.get_profile(current_user.user_id)
    return UserResponse.from_public_user(profile)


@router.put(
    "/profile",
    summary="Update current user's profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid field or missing current password"},
        401: {"description": "Not authenticated or current password incorrect"},
        409: {"description": "Email already registered"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """
    Partially update the profile.

    Changing the password requires ``currentPassword``. The bearer token is
    not re-issued; log in again to get a token carrying a changed email.
    """
    changes = UserUpdate(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        age=request.age,
    )

    try:
        profile = await auth_service.update_profile(
            user_id=current_user.user_id,
            changes=changes,
            current_password=request.current_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return UserResponse.from_public_user(profile)


@router.delete(
    "/account",
    summary="Delete current user's account",
    responses={
        200: {"description": "Account and owned resources deleted"},
        401: {"description": "Not authenticated or password incorrect"},
    },
)
async def delete_account(
    request: DeleteAccountRequest,
    current_user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    """
    Permanently delete the account after confirming the password.

    Favorites, ratings and comments of the account are removed with it.
    """
    try:
        message = await auth_service.delete_account(
            user_id=current_user.user_id,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Account deleted via API: %s", current_user.email)
    return MessageResponse(message=message)
