# Imports from standard library or third-party packages
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Imports from this project
import config
from exceptions import InvalidParameter, MalformedIdentifier, NotFound, ValidationFailed
from routers import users
import schemas

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI):
    """Traduit les erreurs métier en réponses HTTP (400 / 404)."""

    @app.exception_handler(InvalidParameter)
    async def invalid_parameter_handler(request: Request, exc: InvalidParameter):
        logger.warning(f"Paramètre invalide sur {request.url.path}: {exc}")
        body = schemas.ErrorResponse(detail=str(exc), field=exc.field, rejected_value=str(exc.raw_value))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

    @app.exception_handler(MalformedIdentifier)
    async def malformed_identifier_handler(request: Request, exc: MalformedIdentifier):
        body = schemas.ErrorResponse(detail=str(exc), field="id", rejected_value=str(exc.token))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        body = schemas.ErrorResponse(detail=str(exc), field="id", rejected_value=str(exc.token))
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        body = schemas.ErrorResponse(detail=str(exc), violations=exc.violations)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def create_app():
    """Crée et configure l'instance de l'application FastAPI."""
    app = FastAPI(
        title="User Directory API",
        description="Annuaire des utilisateurs : recherche, regroupement par entreprise, création et suppression",
        version="1.0.0"
    )

    # Configuration CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Inclusion des routeurs
    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Bienvenue sur l'annuaire des utilisateurs !"}

    return app
