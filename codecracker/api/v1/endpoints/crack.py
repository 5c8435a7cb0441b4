from fastapi import APIRouter, HTTPException, status

from codecracker.dependencies import OrchestratorDep, SettingsDep
from codecracker.models.schemas import CrackOptions, CrackRequest, CrackResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=CrackResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Crack ciphertext",
    description=(
        "Detect the likely cipher or encoding and recover the plaintext "
        "without knowing the cipher type."
    ),
)
def crack_ciphertext(
    request: CrackRequest,
    settings: SettingsDep,
    orchestrator: OrchestratorDep,
) -> CrackResponse:
    """
    Crack ciphertext of unknown type.

    The pipeline:
    1. Detect candidate cipher types
    2. Run every matching solver
    3. Rank by fused detection and plaintext-quality confidence
    4. Recursively unwrap layered encodings
    """
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_ciphertext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_ciphertext_length}",
        )

    options = CrackOptions(
        key=request.key,
        iv=request.iv,
        max_results=request.max_results,
        max_depth=request.max_depth,
        min_confidence=request.min_confidence,
    )
    return orchestrator.crack(request.ciphertext, options)
