"""
Physio CMS — FastAPI app
Démarrer : uvicorn physio_cms.api.main:app --reload --port 8001
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..errors import BlockValidationError, CmsError
from . import auth
from .routes import admin_pages, contact, preview, public

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Erreurs du CMS → JSON {"error": code, "message": ...} avec le statut porté par l'exception."""

    @app.exception_handler(CmsError)
    async def cms_error(request: Request, exc: CmsError):
        content = {"error": exc.code, "message": str(exc)}
        if isinstance(exc, BlockValidationError):
            content["issues"] = [{"path": i.path, "message": i.message} for i in exc.issues]
        if exc.status >= 500:
            log.error("%s %s → %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status, content=content)


app = FastAPI(title="Physio CMS — Physiotherapie / Physio-Konzept", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
register_error_handlers(app)


@app.on_event("startup")
def startup():
    from ..database import init_db
    init_db()
    log.info("DB initialisée (SQLite)")


@app.get("/health")
def health():
    return {"status": "ok", "service": "physio_cms", "version": __version__}


app.include_router(auth.router)
app.include_router(admin_pages.router)
app.include_router(preview.router)
app.include_router(contact.router)
# En dernier : /{slug} attrape tout chemin à un segment
app.include_router(public.router)
