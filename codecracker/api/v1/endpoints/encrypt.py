from fastapi import APIRouter, HTTPException, status

from codecracker.core.exceptions import CryptanalysisError, SolverNotFoundError
from codecracker.dependencies import OrchestratorDep, SettingsDep
from codecracker.models.schemas import (
    EncryptRequest,
    EncryptResult,
    ErrorResponse,
    SolverOptions,
)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResult,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or missing key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type. Useful for generating test ciphertexts.",
)
def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    orchestrator: OrchestratorDep,
) -> EncryptResult:
    """Encrypt plaintext with a specified cipher type."""
    # Validate plaintext length
    if len(request.plaintext) > settings.max_ciphertext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_ciphertext_length}",
        )

    options = SolverOptions(key=request.key, iv=request.iv)
    try:
        return orchestrator.encrypt(request.plaintext, request.cipher_type, options)
    except SolverNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except CryptanalysisError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
