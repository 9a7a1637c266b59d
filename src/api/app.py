import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.use_cases.schema import field_errors

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


def error_body(code: str, message: str, **extra) -> dict:
    body = {"success": False, "code": code, "message": message}
    body.update({key: value for key, value in extra.items() if value is not None})
    return body


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning(f"Client error: {error.code} {error.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(error.code, error.message, errors=error.details),
    )


async def handle_server_error(request: Request, exc: ServerError):
    error = exc.base_error
    logger.error(f"Server error: {error.code} {error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(error.code, error.message),
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = field_errors(exc.errors())
    logger.warning(f"Client error: VALIDATION_ERROR {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", "Validation failed", errors=errors),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("ROUTE_NOT_FOUND", "Route not found"),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body("HTTP_ERROR", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield

    app = FastAPI(title="NUPRC CMS API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def unexpected_error_envelope(request: Request, call_next):
        # Last resort for exceptions no handler claimed
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            stack = None
            if ApplicationConfig.APP_ENV != "production":
                stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body("INTERNAL_ERROR", "Internal server error", stack=stack),
            )

    from src.api.routes import (
        ads,
        assistant,
        audit_logs,
        auth,
        board_members,
        contact,
        dashboard,
        faq,
        health_check,
        media,
        news,
        pages,
        portals,
        publications,
        regulations,
        settings,
        site_config,
        upload,
        users,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(users.router, prefix=prefix, tags=["Users"])
    app.include_router(news.router, prefix=prefix, tags=["News"])
    app.include_router(publications.router, prefix=prefix, tags=["Publications"])
    app.include_router(regulations.router, prefix=prefix, tags=["Regulations"])
    app.include_router(media.router, prefix=prefix, tags=["Media"])
    app.include_router(pages.router, prefix=prefix, tags=["Pages"])
    app.include_router(portals.router, prefix=prefix, tags=["Portals"])
    app.include_router(faq.router, prefix=prefix, tags=["FAQ"])
    app.include_router(board_members.router, prefix=prefix, tags=["Board Members"])
    app.include_router(ads.router, prefix=prefix, tags=["Ads"])
    app.include_router(settings.router, prefix=prefix, tags=["Settings"])
    app.include_router(contact.router, prefix=prefix, tags=["Contact"])
    app.include_router(upload.router, prefix=prefix, tags=["Upload"])
    app.include_router(dashboard.router, prefix=prefix, tags=["Dashboard"])
    app.include_router(assistant.router, prefix=prefix, tags=["AI"])
    app.include_router(site_config.router, prefix=prefix, tags=["Config"])
    app.include_router(audit_logs.router, prefix=prefix, tags=["Audit"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

    return app
