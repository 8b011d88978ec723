from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api.routes import integrations, jobs
from .core.config import settings
from .db.supabase import supabase_manager
from contextlib import asynccontextmanager
import logging

# Logging is configured in jobtrack/__init__.py
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    # Startup
    logger.info("🚀 Application startup initiated")
    logger.info("✅ Application startup complete")

    yield

    # Shutdown
    logger.info("🔄 Application shutdown initiated - cleaning up resources...")
    try:
        logger.info("🐘 Closing database connections...")
        supabase_manager.cleanup()
        logger.info("✅ Resource cleanup completed")
    except Exception as e:
        logger.error(f"❌ Error during shutdown cleanup: {e}")

logger.info("Starting FastAPI application")

app = FastAPI(
    title="JobTrack API",
    description="Backend API for tracking job applications",
    version=APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "JobTrack API is running", "version": APP_VERSION}

# Include routers
app.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
app.include_router(integrations.router, prefix="/integrations", tags=["integrations"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
