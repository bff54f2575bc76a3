from __future__ import annotations

import os
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings
from .errors import DustError
from .logs import get_logger
from .routers import dust
from .schemas import ApiInfo
from .services.dust import Dust

logger = get_logger(__name__)

_SECURITY_HEADERS = {
    'X-Frame-Options': 'DENY',
    'X-Content-Type-Options': 'nosniff',
    'Referrer-Policy': 'strict-origin-when-cross-origin',
}


def _parse_cors_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def _apply_security_headers(response):
    for key, value in _SECURITY_HEADERS.items():
        response.headers[key] = value
    return response


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = '.'.join(str(item) for item in error.get('loc', ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return '; '.join(parts) or 'Invalid request'


async def dust_error_handler(request: Request, exc: DustError):
    logger.debug('request failed', path=request.url.path, status=exc.status_code, error=exc.message)
    return JSONResponse({'error': exc.message}, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse({'error': _validation_message(exc)}, status_code=400)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({'error': str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error('unhandled exception', method=request.method, path=request.url.path, exc_info=exc)
    return _apply_security_headers(JSONResponse({'error': 'Internal server error. Please try again.'}, status_code=500))


@asynccontextmanager
async def lifespan(application: FastAPI):
    config: Settings = application.state.settings
    Path(config.data_dir).mkdir(parents=True, exist_ok=True)
    logger.info('maiden started', version=config.version, data=config.data_dir, api=config.api_prefix)
    yield
    logger.info('maiden stopped')


def _mount_static(application: FastAPI, path: str, directory: str, name: str) -> None:
    if not os.path.isdir(directory):
        logger.warning('static directory missing, not serving it', mount=path, directory=directory)
        return
    application.mount(path, StaticFiles(directory=directory, html=True), name=name)


def create_app(config: Settings = settings) -> FastAPI:
    application = FastAPI(title=config.app_name, version=config.version, lifespan=lifespan)
    application.state.settings = config
    application.state.dust = Dust.from_settings(config)

    cors_origins = _parse_cors_origins(config.cors_origins)
    if cors_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_methods=['GET', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'],
            allow_headers=['Content-Type'],
        )

    @application.middleware('http')
    async def access_log_middleware(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            'request',
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return _apply_security_headers(response)

    application.add_exception_handler(DustError, dust_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    @application.get('/', include_in_schema=False)
    def root():
        return RedirectResponse('/maiden', status_code=302)

    @application.get(config.api_root, response_model=ApiInfo)
    def api_info():
        return ApiInfo(api=config.app_name, version=config.version)

    application.include_router(dust.router, prefix=config.api_prefix)

    _mount_static(application, '/maiden', config.app_dir, 'app')
    _mount_static(application, '/doc', config.doc_dir, 'doc')
    return application


app = create_app()
