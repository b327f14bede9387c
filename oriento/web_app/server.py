"""FastAPI server for the Oriento assistant."""

# Load .env FIRST so LANGCHAIN_* variables are visible when @traceable
# decorators are evaluated at import time.
from dotenv import load_dotenv
load_dotenv()

from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.concurrency import run_in_threadpool

from oriento.agents import OrientoAgent
from oriento.core import (
    AnswerDelegator,
    AuthenticatedRequest,
    JwtAuthenticator,
    MalformedRequest,
    RequestGate,
    Unauthenticated,
    UpstreamFailure,
)
from oriento.utils.config import server_settings
from oriento.utils.logging import get_logger

logger = get_logger(__name__)

# auto_error=False: the gate decides, so a missing header yields 401 (not 403)
bearer_scheme = HTTPBearer(auto_error=False, scheme_name="Bearer Authentication")


def build_default_gate() -> RequestGate:
    """Wire the JWT authenticator and the Oriento agent from configuration."""
    return RequestGate(
        authenticator=JwtAuthenticator.from_config(),
        delegator=AnswerDelegator(OrientoAgent()),
    )


def get_gate(request: Request) -> RequestGate:
    return request.app.state.gate


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gate: RequestGate = Depends(get_gate),
) -> AuthenticatedRequest:
    return gate.authorize(credentials.credentials if credentials else None)


# ── Exception handlers ─────────────────────────────────────────────────────────

async def _unauthenticated_handler(request: Request, exc: Unauthenticated) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": "Not authenticated"},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _malformed_handler(request: Request, exc: MalformedRequest) -> JSONResponse:
    logger.info("Malformed request on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _upstream_handler(request: Request, exc: UpstreamFailure) -> JSONResponse:
    # Details were already logged by the delegator; the caller gets a generic signal.
    return JSONResponse(status_code=500, content={"detail": "Failed to generate an answer"})


# ── App factory ────────────────────────────────────────────────────────────────

def create_app(gate: Optional[RequestGate] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Pass a ``gate`` to compose custom collaborators (tests do this); otherwise
    the JWT authenticator and Oriento agent are built from configuration.
    """
    settings = server_settings()

    app = FastAPI(
        title="Oriento API",
        description=(
            "Virtual assistant for financial education and management of "
            "small and medium-sized businesses."
        ),
        version="1.0.0",
    )
    app.state.gate = gate or build_default_gate()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings["cors_origins"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Unauthenticated, _unauthenticated_handler)
    app.add_exception_handler(MalformedRequest, _malformed_handler)
    app.add_exception_handler(UpstreamFailure, _upstream_handler)

    @app.get("/health", summary="Health check")
    def health_check() -> dict:
        """Returns 200 OK when the service is running."""
        return {"status": "ok"}

    @app.post(
        "/oriento/ask",
        response_class=PlainTextResponse,
        tags=["Oriento Assistant"],
        summary="Ask Oriento a question",
        responses={
            200: {"description": "Answer generated successfully"},
            401: {"description": "Not authenticated: a bearer token is required"},
            500: {"description": "The answering backend failed to process the question"},
        },
    )
    async def ask(
        request: Request,
        personalidade: int = Query(
            ...,
            description="Assistant personality identifier (currently unused)",
        ),
        authenticated: AuthenticatedRequest = Depends(authenticate),
        gate: RequestGate = Depends(get_gate),
    ) -> PlainTextResponse:
        """
        Send a financial-education question (raw request body) to Oriento and
        return the generated answer as plain text, unmodified.
        """
        body = await request.body()
        try:
            question = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRequest("Request body must be UTF-8 text.") from exc

        logger.info("POST /oriento/ask  subject=%s", authenticated.identity.subject)
        answer = await run_in_threadpool(gate.ask, authenticated, question, personalidade)
        return PlainTextResponse(answer)

    return app
