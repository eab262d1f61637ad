"""Register Controller."""

from fastapi import APIRouter, Depends, status

from apps.session_auth.application.account.commands import RegisterInteractor
from apps.session_auth.application.account.dto import RegisterRequest
from apps.session_auth.presentation.http.schemas.auth import RegisterBody, RegisterResponse
from apps.session_auth.setup.dependencies import get_register_interactor

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
)
async def register(
    body: RegisterBody,
    interactor: RegisterInteractor = Depends(get_register_interactor),
) -> RegisterResponse:
    """계정을 생성합니다. 세션은 생성하지 않습니다."""
    result = await interactor.execute(RegisterRequest(email=body.email, password=body.password))
    return RegisterResponse(account_id=result.account_id, email=result.email)
