"""
FastAPI entrypoint for the Us & Ours backend application.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
import logging
from usandours.core.config import settings
from usandours.core.exceptions import AppError
from usandours.core.utils import format_error
from usandours.db.session import init_db
from usandours.api.router import api_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.APP_NAME} API started")
    yield


app = FastAPI(
    title="Us & Ours API",
    description="Backend API for a private journal shared by two partners",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (cookies need explicit origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Domain errors -> {"error": message} with the mapped status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=format_error(exc.message, exc.details))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields are reported as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error("Invalid request", jsonable_encoder(exc.errors())),
    )


# Include API routes
app.include_router(api_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "API is running..."}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
