"""
Authorization gate middleware

Runs before routing: public paths pass through, every other path needs a
resolvable session token. The resolved claim is left on request.state for
the get_current_claim dependency.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from vidshare.app.services.authorization_gate import AuthorizationGate
from vidshare.depends import extract_session_token

logger = logging.getLogger(__name__)


def _wants_html(request: Request) -> bool:
    return request.method == "GET" and "text/html" in request.headers.get("accept", "")


def install_authorization_gate(app: FastAPI, gate: AuthorizationGate) -> None:
    @app.middleware("http")
    async def authorization_gate(request: Request, call_next):
        if request.method == "OPTIONS":
            return await call_next(request)

        token = extract_session_token(request, gate.settings.cookie_name)
        decision = gate.authorize(request.url.path, token)

        if decision.allowed:
            request.state.session_claim = decision.claim
            return await call_next(request)

        if _wants_html(request):
            return RedirectResponse(
                decision.redirect_to, status_code=status.HTTP_307_TEMPORARY_REDIRECT
            )

        logger.info(f"Unauthenticated request rejected: {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={
                "error": {
                    "code": "UNAUTHENTICATED",
                    "message": "Authentication required",
                }
            },
            headers={"Location": decision.redirect_to},
        )
