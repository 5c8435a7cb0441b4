from typing import Annotated

from fastapi import Depends

from codecracker.core.config import Settings, get_settings
from codecracker.services.pipeline.orchestrator import CrackOrchestrator, get_orchestrator


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Orchestrator dependency (process-wide registry of solvers)
OrchestratorDep = Annotated[CrackOrchestrator, Depends(get_orchestrator)]
