"""Bloglist Backend - blog listing REST API built on FastAPI and SQLModel."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from bloglist.configs import settings
from bloglist.db import check_db_connection
from bloglist.errors import (
    AuthenticationError,
    AuthorizationError,
    BaseAppError,
    DatabaseError,
    PasswordHashingError,
    ValidationError,
    app_exception_handler,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.managers import limiter, rate_limit_exceeded_handler
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import auth_router, blog_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={"docExpansion": "none", "operationsSorter": "method"},
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

routes = [blog_router, user_router, auth_router]

_ = [app.include_router(router) for router in routes]

# Handlers are looked up along the exception MRO, so BaseAppError catches the rest
errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (AuthenticationError, auth_exception_handler),
    (AuthorizationError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (ValidationError, app_exception_handler),
    (BaseAppError, app_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Service status and data store connectivity.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "database": "connected"}
    """
    db_ok = await check_db_connection()
    return HealthCheckResponse(
        version=app.version,
        status="ok" if db_ok else "degraded",
        timestamp=today_str(),
        database="connected" if db_ok else "unavailable",
    )


if __name__ == "__main__":
    from uvicorn import run

    run(
        "bloglist.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=settings.DEBUG,
    )
