"""Auth API: registration, OTP verification, login, password reset, account.

Every route delegates to AuthFlowService; domain exceptions are rendered by
the central exception handlers. Routes that open a session also set the
session cookie.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from guardian_gate.api.dependencies import get_auth_flow_service, get_current_user
from guardian_gate.api.session_cookie import clear_session_cookie, set_session_cookie
from guardian_gate.application.dtos.auth import SessionResult
from guardian_gate.application.dtos.user import UserResult
from guardian_gate.application.services.auth_flow_service import AuthFlowService
from guardian_gate.domain.entities import UserEntity
from guardian_gate.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    DeleteAccountRequest,
    EmailCodeRequest,
    EmailRequest,
    LoginOtpRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UserSummary,
)

router = APIRouter()

AuthFlow = Annotated[AuthFlowService, Depends(get_auth_flow_service)]
CurrentUser = Annotated[UserEntity, Depends(get_current_user)]


def _session_response(response: Response, result: SessionResult) -> AuthResponse:
    set_session_cookie(response, result.session)
    return AuthResponse(
        token=result.session.token,
        user=UserSummary.from_result(result.user),
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    status_code=201,
)
async def register(body: RegisterRequest, auth_flow: AuthFlow) -> AuthResponse:
    """Create an unverified account and email a verification code."""
    user = await auth_flow.register(
        name=body.name,
        email=body.email,
        password=body.password,
        confirm_password=body.confirm_password,
    )
    return AuthResponse(
        message="Registration successful! Please check your email for verification code.",
        user=UserSummary.from_result(user),
    )


@router.post("/verify-email", response_model=AuthResponse, response_model_exclude_none=True)
async def verify_email(
    body: EmailCodeRequest, response: Response, auth_flow: AuthFlow
) -> AuthResponse:
    """Confirm the verification code; opens a session."""
    result = await auth_flow.verify_email(body.email, body.token)
    return _session_response(response, result)


@router.post(
    "/resend-verification", response_model=AuthResponse, response_model_exclude_none=True
)
async def resend_verification(body: EmailRequest, auth_flow: AuthFlow) -> AuthResponse:
    await auth_flow.resend_verification(body.email)
    return AuthResponse(message="Verification code sent successfully!")


@router.post("/send-login-otp", response_model=AuthResponse, response_model_exclude_none=True)
async def send_login_otp(body: LoginOtpRequest, auth_flow: AuthFlow) -> AuthResponse:
    """First login step: password check, then a code by email."""
    user = await auth_flow.send_login_otp(body.email, body.password)
    return AuthResponse(
        message="Verification code sent to your email",
        user=UserSummary.from_result(user),
    )


@router.post(
    "/resend-login-otp", response_model=AuthResponse, response_model_exclude_none=True
)
async def resend_login_otp(body: EmailRequest, auth_flow: AuthFlow) -> AuthResponse:
    await auth_flow.resend_login_otp(body.email)
    return AuthResponse(message="New verification code sent successfully!")


@router.post("/verify-login", response_model=AuthResponse, response_model_exclude_none=True)
async def verify_login(
    body: EmailCodeRequest, response: Response, auth_flow: AuthFlow
) -> AuthResponse:
    """Second login step: confirm the code; opens a session."""
    result = await auth_flow.verify_login(body.email, body.token)
    return _session_response(response, result)


@router.post(
    "/forgot-password", response_model=AuthResponse, response_model_exclude_none=True
)
async def forgot_password(body: EmailRequest, auth_flow: AuthFlow) -> AuthResponse:
    await auth_flow.forgot_password(body.email)
    return AuthResponse(message="Password reset code sent to your email")


@router.post(
    "/verify-reset-otp", response_model=AuthResponse, response_model_exclude_none=True
)
async def verify_reset_otp(body: EmailCodeRequest, auth_flow: AuthFlow) -> AuthResponse:
    """Check a reset code; the code stays valid for reset-password."""
    await auth_flow.verify_reset_otp(body.email, body.token)
    return AuthResponse(message="OTP verified successfully")


@router.post("/reset-password", response_model=AuthResponse, response_model_exclude_none=True)
async def reset_password(body: ResetPasswordRequest, auth_flow: AuthFlow) -> AuthResponse:
    await auth_flow.reset_password(
        email=body.email,
        token=body.token,
        password=body.password,
        confirm_password=body.confirm_password,
    )
    return AuthResponse(message="Password reset successfully")


@router.post(
    "/change-password", response_model=AuthResponse, response_model_exclude_none=True
)
async def change_password(
    body: ChangePasswordRequest,
    current_user: CurrentUser,
    auth_flow: AuthFlow,
) -> AuthResponse:
    await auth_flow.change_password(
        user_id=current_user.id,
        current_password=body.current_password,
        new_password=body.new_password,
        confirm_password=body.confirm_password,
    )
    return AuthResponse(message="Password changed successfully")


@router.delete(
    "/delete-account", response_model=AuthResponse, response_model_exclude_none=True
)
async def delete_account(
    body: DeleteAccountRequest,
    response: Response,
    current_user: CurrentUser,
    auth_flow: AuthFlow,
) -> AuthResponse:
    """Delete the signed-in account after email and password re-confirmation."""
    await auth_flow.delete_account(current_user.id, body.email, body.password)
    clear_session_cookie(response)
    return AuthResponse(message="Account deleted successfully")


@router.post("/logout", response_model=AuthResponse, response_model_exclude_none=True)
async def logout(response: Response) -> AuthResponse:
    clear_session_cookie(response)
    return AuthResponse(message="Logged out successfully")


@router.get("/me", response_model=AuthResponse, response_model_exclude_none=True)
async def get_me(current_user: CurrentUser) -> AuthResponse:
    """Return the signed-in user."""
    return AuthResponse(user=UserSummary.from_result(UserResult.from_entity(current_user)))
