from fastapi import APIRouter

from codecracker.dependencies import OrchestratorDep
from codecracker.models.schemas import SolversResponse

router = APIRouter()


@router.get(
    "",
    response_model=SolversResponse,
    summary="List solvers",
    description="Registered cipher types and the ones that support encryption.",
)
def list_solvers(orchestrator: OrchestratorDep) -> SolversResponse:
    return SolversResponse(
        registered=orchestrator.registry.list_registered(),
        encryptable=orchestrator.get_encryptable_cipher_types(),
    )
