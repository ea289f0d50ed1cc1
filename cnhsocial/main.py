# cnhsocial/main.py
import logging
from time import perf_counter

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cnhsocial.config import (
    ALLOW_HEADERS,
    ALLOW_METHODS,
    ALLOW_ORIGINS,
    DEBUG,
    ENDPOINTS,
    PLATFORM,
    PORT,
    SERVICE_NAME,
    VERSION,
)
from cnhsocial.routers.aureolink import router as aureolink_router
from cnhsocial.routers.diagnostics import router as diagnostics_router
from cnhsocial.routers.funnel import router as funnel_router

# --- Logging ---
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("cnhsocial")
# o middleware abaixo já registra cada requisição
logging.getLogger("uvicorn.access").setLevel(logging.DEBUG if DEBUG else logging.WARNING)

# --- FastAPI app ---
# sem /docs, /redoc e /openapi.json: só as rotas de ENDPOINTS existem
app = FastAPI(
    title="CNH Social API",
    description="Gateway de diagnóstico e recebimento de pagamentos do CNH Social",
    version=VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# --- Middleware: CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=ALLOW_METHODS,
    allow_headers=ALLOW_HEADERS,
)

# --- Middleware: log de cada requisição ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    origin = request.headers.get("origin")
    start = perf_counter()
    logger.info(f"{request.method} {request.url.path} - Origin: {origin}")
    try:
        response = await call_next(request)
    except Exception:
        # único ponto de log dos erros 500 (internal_error só monta a resposta)
        logger.exception(f"Erro em {request.method} {request.url.path}")
        raise
    elapsed_ms = round((perf_counter() - start) * 1000, 1)
    logger.debug(f"{request.method} {request.url.path} -> {response.status_code} em {elapsed_ms}ms")
    return response

# --- Routers ---
app.include_router(diagnostics_router)
app.include_router(funnel_router)
app.include_router(aureolink_router)

# --- Erros ---
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    # rota inexistente ou método não suportado numa rota conhecida
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "error": "Endpoint não encontrado",
                "available_endpoints": list(ENDPOINTS.values()),
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid payload on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"error": "Requisição inválida", "details": jsonable_errors(exc)},
    )


@app.exception_handler(Exception)
async def internal_error(request: Request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"error": "Erro interno do servidor", "message": str(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]

# --- Events ---
@app.on_event("startup")
async def on_startup():
    logger.info(f"Starting {SERVICE_NAME} {VERSION} on port {PORT} ({PLATFORM})")
    logger.info(f"Health check: http://localhost:{PORT}{ENDPOINTS['health']}")
    logger.info(f"Status: http://localhost:{PORT}{ENDPOINTS['status']}")
    logger.info(f"Teste: http://localhost:{PORT}{ENDPOINTS['test']}")
    logger.info(f"CORS: allow_origins = {ALLOW_ORIGINS}")

@app.on_event("shutdown")
async def on_shutdown():
    logger.info(f"Shutting down {SERVICE_NAME}")
