import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import ErrorBody, router
from .exceptions import FailureKind, InvalidRequest, WithdrawalError
from .logger_config import setup_logging

# ---- logging ----
setup_logging()
log = logging.getLogger("app")

# ---- failure kind -> status ----
KIND_TO_STATUS = {
    FailureKind.INVALID_INPUT: 400,
    FailureKind.NOTE_UNAVAILABLE: 422,
}

# ---- status -> code mapping (transport errors outside /api/withdraw) ----
STATUS_TO_CODE = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}
def code_for(status: int) -> str:
    return STATUS_TO_CODE.get(status, f"HTTP_{status}")

def error_response(status: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content=ErrorBody(error=error, message=message).model_dump(),
    )

# ---- lifespan ----
@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("🚀 Withdrawal API started")
    try:
        yield
    finally:
        log.info("🛑 Withdrawal API stopped")

def create_app() -> FastAPI:
    app = FastAPI(
        title="Note Dispenser",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # exception handlers
    @app.exception_handler(InvalidRequest)
    async def invalid_request_handler(request: Request, exc: InvalidRequest):
        log.warning("400 invalid request: %s %s -> %s", request.method, request.url.path, exc.message)
        return error_response(400, exc.name, exc.message)

    @app.exception_handler(WithdrawalError)
    async def withdrawal_error_handler(request: Request, exc: WithdrawalError):
        status = KIND_TO_STATUS[exc.kind]
        log.info("%s %s -> %s %s: %s", request.method, request.url.path, status, exc.name, exc.message)
        return error_response(status, exc.name, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exc_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else code_for(exc.status_code).replace("_", " ").title()
        log.warning("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, detail)
        return error_response(exc.status_code, code_for(exc.status_code), str(detail))

    @app.exception_handler(Exception)
    async def unexpected_handler(request: Request, exc: Exception):
        log.error("Unexpected error in withdraw handler: %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(
            500, "InternalServerError", "An unexpected error occurred while processing your request."
        )

    # routers
    app.include_router(router)
    return app

app = create_app()
