from fastapi import APIRouter

from codecracker.api.v1.endpoints import crack, decrypt, detect, encrypt, solvers

api_router = APIRouter()

api_router.include_router(
    crack.router,
    prefix="/crack",
    tags=["Cracking"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    detect.router,
    prefix="/detect",
    tags=["Detection"],
)

api_router.include_router(
    solvers.router,
    prefix="/solvers",
    tags=["Solvers"],
)
