from fastapi import APIRouter, HTTPException, status

from codecracker.dependencies import OrchestratorDep, SettingsDep
from codecracker.models.schemas import DetectRequest, DetectResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=DetectResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Detect cipher type",
    description="Rank the cipher types the ciphertext most likely comes from.",
)
def detect_cipher(
    request: DetectRequest,
    settings: SettingsDep,
    orchestrator: OrchestratorDep,
) -> DetectResponse:
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_ciphertext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_ciphertext_length}",
        )

    return DetectResponse(candidates=orchestrator.detect(request.ciphertext))
