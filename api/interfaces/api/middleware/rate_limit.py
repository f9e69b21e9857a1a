# api/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time
from collections import defaultdict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.infrastructure.config import get_settings

_JANELA_SEGUNDOS = 60.0

# Documentacao interativa nao conta para o limite
_ISENTOS = frozenset({"/api/docs", "/openapi.json"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 1 minuto por IP de origem, em memoria do processo."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._por_ip: dict[str, list[float]] = defaultdict(list)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0 or request.url.path in _ISENTOS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        agora = time.monotonic()
        recentes = [t for t in self._por_ip[client_ip] if agora - t < _JANELA_SEGUNDOS]

        if len(recentes) >= limite:
            self._por_ip[client_ip] = recentes
            return JSONResponse(
                {"detail": "Rate limit excedido. Tente novamente em 1 minuto."},
                status_code=429,
                headers={"Retry-After": str(int(_JANELA_SEGUNDOS))},
            )

        recentes.append(agora)
        self._por_ip[client_ip] = recentes
        return await call_next(request)
