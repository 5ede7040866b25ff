# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router as api_router
from app.config import settings
from app.errors import InputError
from services.crawler import FetchError

logging.basicConfig(
    level=settings.log_level,
    format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

app = FastAPI(title="AEO/GEO Analyzer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"],
    allow_headers=[
        "X-CSRF-Token",
        "X-Requested-With",
        "Accept",
        "Accept-Version",
        "Content-Length",
        "Content-MD5",
        "Content-Type",
        "Date",
        "X-Api-Version",
    ],
)

app.include_router(api_router, prefix="/api")


# --------- エラーレスポンス ---------


@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # body が JSON オブジェクトでない場合も domain 不足として扱う
    return JSONResponse(status_code=400, content={"error": InputError().message})


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.error("[api] fetch failed kind=%s message=%s", exc.kind, exc.message)
    return JSONResponse(
        status_code=500,
        content={"error": "Analysis failed", "message": exc.message, "details": exc.details},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[api] unexpected error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Analysis failed", "message": str(exc), "details": "Network error"},
    )
