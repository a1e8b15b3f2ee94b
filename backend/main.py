from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .routers import calculations, reference

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("pipe_quotes")

# Create reference tables (read-only at calculation time)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    description="Quantity takeoff for steel pipe and bend fabrication quotes",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculations.router, prefix="/api")
app.include_router(reference.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "pipe-quotes-engine"}


@app.on_event("startup")
def auto_seed():
    """Seed bundled reference tables on first run."""
    if not settings.SEED_REFERENCE_DATA:
        logger.info("SEED_REFERENCE_DATA disabled, skipping reference seed")
        return
    from .database import SessionLocal
    db = SessionLocal()
    try:
        reference.seed_reference_data(db)
    finally:
        db.close()
