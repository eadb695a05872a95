"""
Pokedex Backend - FastAPI Application

User accounts with favorites and a 6-slot team, plus a read-only proxy to
the PokeAPI catalog.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from pokedex.config import get_settings
from pokedex.core.errors import InternalError, PokedexError, Unauthenticated, ValidationError
from pokedex.database.connections import (
    close_connections,
    connect_mongo,
    ensure_indexes,
    get_database,
)
from pokedex.routers import auth, favorites, health, pokemon
from pokedex.services.pokeapi import close_pokeapi

settings = get_settings()

# ==================== Logging Setup ====================

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("pokedex")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MongoDB (the API still starts when it is unreachable)
    - Create indexes (otherwise built on the first guarded request once connected)

    Shutdown:
    - Close database and HTTP connections
    """
    logger.info("Starting up Pokedex Backend...")

    if await connect_mongo():
        try:
            await ensure_indexes(await get_database())
        except PyMongoError as e:
            logger.warning("Database index creation failed: %s", e)

    yield

    logger.info("Shutting down Pokedex Backend...")
    await close_connections()
    await close_pokeapi()
    logger.info("Connections closed")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="""
## Pokedex API

Backend for the Pokedex single-page app.

### Features
- **Authentication**: JWT bearer tokens valid for 7 days
- **Favorites**: Keep a list of favorite Pokemon
- **Team**: Build a team of up to 6 Pokemon
- **Catalog**: Read-only pass-through to PokeAPI

### Authentication
Protected endpoints require the token from `POST /auth/login` or
`POST /auth/register` in the Authorization header:
```
Authorization: Bearer your_jwt_token
```

### Degraded mode
When MongoDB is unreachable, user endpoints answer 503 with
`DATABASE_UNAVAILABLE` or `DATABASE_TIMEOUT`; catalog endpoints keep working.
    """,
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== Security Headers ====================

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
}

# JSON only; the interactive docs load scripts from a CDN and are left without it
CONTENT_SECURITY_POLICY = "default-src 'none'; frame-ancestors 'none'"


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Set browser hardening headers on every response."""
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    if request.url.path not in (app.docs_url, app.redoc_url):
        response.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)
    return response


# ==================== Error Handlers ====================


@app.exception_handler(PokedexError)
async def pokedex_error_handler(request: Request, exc: PokedexError):
    """Map domain errors to their status code and error code."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 VALIDATION_ERROR."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    error = ValidationError("Request validation failed", errors)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort: log and hide the details outside development."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError(str(exc) if settings.is_development else None)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# Include routers, at the root and under /api for clients configured either way
for router in (health.router, auth.router, favorites.router, pokemon.router):
    app.include_router(router)
    app.include_router(router, prefix="/api", include_in_schema=False)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
