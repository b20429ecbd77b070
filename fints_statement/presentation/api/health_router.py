# fints_statement/presentation/api/health_router.py
"""Health check endpoints."""

from fastapi import APIRouter, Depends

from fints_statement.core.config import StatementClientConfig, get_config
from fints_statement.presentation.schemas.statement_schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(config: StatementClientConfig = Depends(get_config)):
    """Basic health check endpoint."""
    return HealthResponse(
        status="ok",
        version=config.app.app_version
    )
