# api/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api.infrastructure.config import get_settings
from api.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import get_connection
    get_connection()  # valida conexao (e aplica schema) no startup
    yield


app = FastAPI(
    title="Diagnostico ESG Municipal API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)

# Routers
from api.interfaces.api.routes.avaliacao_routes import router as avaliacao_router  # noqa: E402
from api.interfaces.api.routes.catalogo_routes import router as catalogo_router  # noqa: E402
from api.interfaces.api.routes.export_routes import router as export_router  # noqa: E402
from api.interfaces.api.routes.painel_routes import router as painel_router  # noqa: E402
from api.interfaces.api.routes.submissao_routes import router as submissao_router  # noqa: E402

app.include_router(catalogo_router, prefix="/api")
app.include_router(avaliacao_router, prefix="/api")
app.include_router(submissao_router, prefix="/api")
app.include_router(painel_router, prefix="/api")
app.include_router(export_router, prefix="/api")
