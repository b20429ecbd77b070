"""
Main entry point for the FinTS statement client HTTP surface.

Architecture: N-Layer
- Presentation Layer: API routers and schemas (fints_statement/presentation/)
- Application Layer: The statement operation, dialects (fints_statement/application/)
- Domain Layer: Models and services (fints_statement/domain/)
- Infrastructure Layer: Bank parameter data adapters (fints_statement/infrastructure/)
"""

from fastapi import FastAPI

from fints_statement.core.config import get_config
from fints_statement.core.exceptions import StatementClientError, statement_error_handler
from fints_statement.presentation.api import health_router, statement_router
from fints_statement.shared.utils.logging_config import setup_logging

config = get_config()
setup_logging(config.app.log_level, config.app.log_format)

app = FastAPI(
    title=config.app.app_name,
    description="Build statement of account requests and interpret bank responses",
    version=config.app.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_exception_handler(StatementClientError, statement_error_handler)

app.include_router(health_router.router, prefix="/api", tags=["Health"])
app.include_router(statement_router.router, prefix="/api")


@app.get("/", tags=["Root"])
def root():
    return {
        "message": "FinTS statement client running",
        "version": config.app.app_version,
        "endpoints": [
            "/api/health",
            "/api/statements/request",
            "/api/statements/process",
            "/api/statements/dialects",
        ],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=config.app.debug)
