"""Starlette middleware enforcing HTTP signatures on incoming requests."""

from __future__ import annotations

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from http_signatures.common.errors import ErrorCode, error_response
from http_signatures.common.logging import get_logger
from http_signatures.common.settings import Settings, get_settings
from http_signatures.exceptions import HttpSignatureError
from http_signatures.header_list import HeaderList
from http_signatures.message import RequestMessage
from http_signatures.verifier import Verifier

logger = get_logger(__name__)


class SignatureAuthMiddleware(BaseHTTPMiddleware):
    """Rejects requests without a valid HTTP signature."""

    def __init__(
        self,
        app: ASGIApp,
        verifier: Verifier,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(app)
        if settings is None:
            settings = get_settings()
        self._verifier = verifier
        self._settings = settings
        self._exempt_paths = set(settings.auth_exempt_paths)
        self._required = HeaderList(settings.required_headers) if settings.required_headers else None

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self._settings.auth_enabled:
            return await call_next(request)

        if request.url.path in self._exempt_paths:
            return await call_next(request)

        try:
            params = self._verifier.verify(RequestMessage(request))
        except HttpSignatureError as exc:
            logger.warning(
                "Rejected request signature",
                path=request.url.path,
                reason=type(exc).__name__,
            )
            return error_response(ErrorCode.INVALID_SIGNATURE, "Invalid HTTP signature", 401)

        if self._required is not None:
            covered = params.header_list(self._verifier.implicit_headers)
            missing = [name for name in self._required if name not in covered]
            if missing:
                logger.warning(
                    "Signature does not cover required headers",
                    path=request.url.path,
                    missing=missing,
                )
                return error_response(
                    ErrorCode.UNAUTHORIZED,
                    "Signature does not cover required headers",
                    401,
                    details={"missing": missing},
                )

        request.state.key_id = params.key_id
        structlog.contextvars.bind_contextvars(key_id=params.key_id)
        try:
            return await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("key_id")
