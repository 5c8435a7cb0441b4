from fastapi import APIRouter, HTTPException, status

from codecracker.core.exceptions import CryptanalysisError, SolverNotFoundError
from codecracker.dependencies import OrchestratorDep, SettingsDep
from codecracker.models.schemas import (
    DecryptRequest,
    DecryptResponse,
    ErrorResponse,
    SolverOptions,
)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and optional key.",
)
def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    orchestrator: OrchestratorDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a forced cipher type.

    Without a key, solvers that can search their key space do so; results
    are ranked by plaintext quality.
    """
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_ciphertext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_ciphertext_length}",
        )

    options = SolverOptions(key=request.key, iv=request.iv, max_results=request.max_results)
    try:
        results = orchestrator.decrypt(request.ciphertext, request.cipher_type, options)
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

    return DecryptResponse(results=results)
