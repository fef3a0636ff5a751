import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from vidshare import __version__
from vidshare.adapter.services.password_reset_notifier import build_password_reset_notifier
from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.authorization_gate import AuthorizationGate
from vidshare.app.services.media_upload_signer import MediaUploadSigner
from vidshare.app.services.session_issuer import SessionIssuer
from .error import ClientError, ServerError
from .middleware import install_authorization_gate

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code, content={"error": error_dict}, headers=exc.headers
    )


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} - {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid input") if errors else "Invalid input"
    error_dict = {"code": "INVALID_INPUT", "message": message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict})


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Store error")
    error_dict = {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig, lifespan=None) -> FastAPI:
    # Fails fast with MissingSigningSecret when SESSION_SECRET is absent
    auth_settings = AuthSettings.from_config(ApplicationConfig)
    session_issuer = SessionIssuer(auth_settings)
    gate = AuthorizationGate(auth_settings, session_issuer)

    app = FastAPI(title="vidshare API", version=__version__, lifespan=lifespan)

    app.state.auth_settings = auth_settings
    app.state.session_issuer = session_issuer
    app.state.authorization_gate = gate
    app.state.password_reset_notifier = build_password_reset_notifier(ApplicationConfig)
    app.state.media_upload_signer = MediaUploadSigner.from_config(ApplicationConfig)

    # Registered before CORS so that CORS stays the outermost layer
    install_authorization_gate(app, gate)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from vidshare.api.routes import admin, auth, health_check, media, profile, videos

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(profile.router, tags=["Profile"])
    app.include_router(videos.router, tags=["Videos"])
    app.include_router(media.router, tags=["Media"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)

    return app
