"""
Session admin — cookie `admin_token` posé par /admin/login, ou ?token= pour les scripts.

GET  /admin/login[?next=]  → formulaire mot de passe
POST /admin/login          → pose le cookie, renvoie vers `next` (chemin local) ou /admin
GET  /admin/logout         → efface le cookie

Le reste du CMS ne voit qu'un fournisseur `get_current_user() -> AdminUser | None`.
"""
import html
import logging
from typing import Callable, Optional
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..config import get_settings
from ..errors import Unauthorized
from ..models import AdminUser

log = logging.getLogger(__name__)
router = APIRouter(tags=["Auth"])

COOKIE_NAME    = "admin_token"
COOKIE_MAX_AGE = 60 * 60 * 24 * 7


# ── Identité ───────────────────────────────────────────────────────────────────

def get_current_user(request: Request) -> Optional[AdminUser]:
    s = get_settings()
    token = request.query_params.get("token") or request.cookies.get(COOKIE_NAME, "")
    if token and token == s.admin_token:
        return AdminUser(email=s.admin_email)
    return None


def require_admin(request: Request) -> AdminUser:
    user = get_current_user(request)
    if user is None:
        log.warning("Accès admin refusé : %s %s", request.method, request.url.path)
        raise Unauthorized()
    return user


def user_provider(request: Request) -> Callable[[], Optional[AdminUser]]:
    """Fournisseur d'identité pour BlockStore, relu à chaque save."""
    return lambda: get_current_user(request)


def login_redirect(next_path: str = "") -> RedirectResponse:
    url = "/admin/login" + (f"?next={quote(next_path, safe='/')}" if next_path else "")
    return RedirectResponse(url, status_code=303)


def _safe_next(value: str) -> str:
    # chemin local uniquement (pas de //hote ni d'URL absolue)
    if value.startswith("/") and not value.startswith("//"):
        return value
    return "/admin"


# ── Login / logout ─────────────────────────────────────────────────────────────

_LOGIN_HTML = """<!DOCTYPE html><html lang="de"><head><meta charset="UTF-8">
<meta name="viewport" content="width=device-width,initial-scale=1"><title>Anmeldung | Physio CMS</title>
<style>
body{{margin:0;min-height:100vh;display:grid;place-items:center;background:#f8fafc;font:15px system-ui,sans-serif;color:#1f2937}}
form{{width:320px;padding:32px;background:#fff;border-radius:10px;box-shadow:0 1px 3px rgba(0,0,0,.12)}}
h1{{font-size:1.2rem;margin:0 0 20px}}input{{width:100%;box-sizing:border-box;padding:10px;border:1px solid #cbd5e1;border-radius:6px}}
button{{margin-top:16px;width:100%;padding:10px;border:0;border-radius:6px;background:#0f766e;color:#fff;font-weight:600}}
.err{{color:#b91c1c;font-size:13px}}
</style></head><body>
<form method="post" action="/admin/login">
  <h1>Physio CMS</h1>
  <input type="password" name="password" placeholder="Passwort" aria-label="Passwort" autofocus>
  <input type="hidden" name="next" value="{next}">
  <button type="submit">Anmelden</button>
  {error}
</form>
</body></html>"""


@router.get("/admin/login", response_class=HTMLResponse)
def login_page(error: str = "", next: str = ""):
    err = '<p class="err">Falsches Passwort.</p>' if error else ""
    return HTMLResponse(_LOGIN_HTML.format(next=html.escape(next), error=err))


@router.post("/admin/login")
async def login_submit(request: Request):
    form = await request.form()
    s = get_settings()
    next_path = str(form.get("next", ""))
    if form.get("password", "") != s.admin_password:
        log.warning("Échec de connexion admin")
        url = "/admin/login?error=1" + (f"&next={quote(next_path, safe='/')}" if next_path else "")
        return RedirectResponse(url, status_code=303)

    log.info("Connexion admin (%s)", s.admin_email)
    resp = RedirectResponse(_safe_next(next_path), status_code=303)
    resp.set_cookie(COOKIE_NAME, s.admin_token, max_age=COOKIE_MAX_AGE, httponly=True, samesite="lax")
    return resp


@router.get("/admin/logout")
def logout():
    resp = login_redirect()
    resp.delete_cookie(COOKIE_NAME)
    return resp
