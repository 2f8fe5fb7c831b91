"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mortgage_calc.api.routes import mortgage
from mortgage_calc.api.schemas import (
    ErrorResponse,
    FieldError,
    HealthResponse,
    ValidationErrorResponse,
)
from mortgage_calc.config import settings
from mortgage_calc.engine.errors import InvalidArgument, InvalidState

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    configure_logging()
    yield


app = FastAPI(
    title=settings.app_title,
    description="Mortgage payment and CMHC insurance premium calculator",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request-shape errors as a 400 with one entry per field."""
    errors = [
        FieldError(
            field=".".join(str(part) for part in err["loc"] if part != "body"),
            message=err["msg"],
        )
        for err in exc.errors()
    ]
    body = ValidationErrorResponse(errors=errors)
    return JSONResponse(status_code=400, content=body.model_dump())


async def contract_fault_handler(request: Request, exc: Exception):
    """Unvalidated input reached the engine. Not a user error."""
    logger.exception("Calculation contract fault on %s", request.url.path)
    body = ErrorResponse(message=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump())


app.add_exception_handler(InvalidArgument, contract_fault_handler)
app.add_exception_handler(InvalidState, contract_fault_handler)

app.include_router(mortgage.router)


@app.get("/health", response_model=HealthResponse)
async def health():
    return mortgage.health_payload()
