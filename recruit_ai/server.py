import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from recruit_ai.services.config import settings
from recruit_ai.services.limiter import limiter
from recruit_ai.utils.db import init_db
from recruit_ai.routers.resume import router as resume_router
from recruit_ai.routers.screening import router as screening_router

# Logging
logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger("uvicorn.error")

# Create FastAPI app
app = FastAPI(
    title="Recruit AI",
    description="Resume structuring and candidate screening",
    version="0.1.0",
    redoc_url="/redoc",
    docs_url="/docs",
)

# Include routers immediately so they appear in Swagger Docs
app.include_router(resume_router, prefix="/api")
app.include_router(screening_router, prefix="/api")

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Root endpoint
@app.get("/")
@limiter.limit("100/minute")
def read_root(request: Request):
    return {"message": "Welcome to Recruit AI"}


# Initialize DB at startup when MongoDB is configured
@app.on_event("startup")
async def start_db():
    if not settings.MONGO_URI:
        logger.info("MONGO_URI not set; stored-application routes are unavailable.")
        return
    try:
        logger.info("Initializing database (startup)...")
        await init_db(settings)
        logger.info("Database initialized successfully.")
    except Exception as e:
        logger.error(f"Database initialization failed: {repr(e)}")


# Local run entrypoint
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("recruit_ai.server:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
