"""
Main FastAPI Application
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from roomnest.core.config import settings
from roomnest.core.database import init_db
from roomnest.core.errors import AppError
from roomnest.core.logging_config import setup_logging
from roomnest.routers import auth_router, properties_router, bookings_router, payments_router

setup_logging(settings)
logger = logging.getLogger("roomnest.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables"""
    if settings.is_production and settings.SECRET_KEY == "change-this":
        logger.warning("[STARTUP] SECRET_KEY is the default value; tokens are forgeable")
    init_db()
    logger.info("[STARTUP] Database tables created/verified")
    yield


app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


# ==================== Error handling ====================

def error_response(status_code: int, message: str, errors: list = None, **extra) -> JSONResponse:
    content = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    content.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message, exc.errors, **exc.extra)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return error_response(400, "Invalid data provided", errors)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("[DB] Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return error_response(400, "Resource already exists")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("[ERROR] Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Server Error")


# Routers
app.include_router(auth_router)
app.include_router(properties_router)
app.include_router(bookings_router)
app.include_router(payments_router)


@app.get("/")
async def root():
    return {
        "success": True,
        "message": f"{settings.APP_NAME} API is running",
        "version": settings.APP_VERSION,
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
