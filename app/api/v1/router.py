from fastapi import APIRouter

from app.api.v1 import debug, desenvolvedores, health, niveis

api_router = APIRouter()

# Recursos principales
api_router.include_router(niveis.router, prefix="/levels", tags=["levels"])
api_router.include_router(
    desenvolvedores.router, prefix="/developers", tags=["developers"]
)

# Diagnóstico
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(debug.router, prefix="/debug", tags=["debug"])
