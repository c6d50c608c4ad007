"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from media_ledger.config import settings
from media_ledger.database import engine, get_db
from media_ledger.errors import RegistryError
from media_ledger.models import Base
from media_ledger.schemas.common import ErrorResponse

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed ledger counters on startup."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    from media_ledger.services.seed_defaults import seed_all_defaults
    from media_ledger.database import async_session
    async with async_session() as session:
        await seed_all_defaults(session)

    yield

    # Cleanup
    await engine.dispose()


app = FastAPI(
    title="Media Ledger API",
    version="1.0.0",
    description="Ledger-backed metadata registry for media assets.",
    lifespan=lifespan,
)

# CORS
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError):
    """Every registry error kind becomes {"error": kind, "detail": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(**exc.to_dict()).model_dump(exclude_none=True),
    )


@app.get("/api/health")
async def health_check():
    """Verify API and database connectivity."""
    try:
        async for db in get_db():
            await db.execute(text("SELECT 1"))
            return {"status": "ok", "database": "connected"}
    except Exception as e:
        logger.warning("Health check failed: %s", e)
        return {"status": "error", "database": str(e)}


# Register routers
from media_ledger.routes.media import router as media_router
from media_ledger.routes.ledger import router as ledger_router
app.include_router(media_router)
app.include_router(ledger_router)
