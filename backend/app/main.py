"""
Point d'entrée principal de l'API de gestion de l'école d'infirmiers.
Démarrage : uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.dependencies import build_storage
from app.routers import (
    attendance,
    auth,
    classes,
    filieres,
    internships,
    periodes,
    services,
    students,
    timetables,
    users,
)
from app.scheduler import start_scheduler, stop_scheduler
from app.services.bootstrap import bootstrap

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Cycle de vie de l'application : construit le stockage une seule fois,
    crée le compte administrateur, puis démarre et arrête le scheduler.
    """
    storage = build_storage(settings)
    bootstrap(storage, settings)
    app.state.storage = storage
    start_scheduler(storage, settings.SESSION_PURGE_INTERVAL_HOURS)
    yield
    stop_scheduler()


app = FastAPI(
    title="Nursing School Admin API",
    description="API de gestion administrative d'une école d'infirmiers : élèves, classes, stages, présences, emplois du temps",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS : autorise tous les ports localhost en développement (à restreindre en production).
# allow_credentials est requis : la session voyage dans un cookie.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(auth.router)
app.include_router(users.router)
app.include_router(filieres.router)
app.include_router(classes.router)
app.include_router(students.router)
app.include_router(services.router)
app.include_router(periodes.router)
app.include_router(internships.router)
app.include_router(attendance.router)
app.include_router(attendance.internship_router)
app.include_router(timetables.subjects_router)
app.include_router(timetables.rooms_router)
app.include_router(timetables.teachers_router)
app.include_router(timetables.router)


def format_validation_errors(errors) -> str:
    """Message lisible : un segment "champ : raison" par erreur."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        where = ".".join(loc) or "requête"
        parts.append(f"{where} : {err.get('msg', 'valeur invalide')}")
    return "Données invalides : " + " ; ".join(parts)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Toutes les erreurs HTTP exposent un champ "message", affiché tel quel par le frontend."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": format_validation_errors(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Nursing School Admin API", "version": "0.1.0"}
