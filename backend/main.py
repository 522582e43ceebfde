from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from heybuddy.config import settings, get_cors_origins
from heybuddy.database import engine, Base
from heybuddy.logger import setup_logging
from heybuddy.routers import (
    syllabi_router,
    todos_router
)

setup_logging()

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Student productivity assistant that turns uploaded syllabi into deadlines and a study schedule"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_origin_regex=r"^http://localhost:\d+$|^http://127\.0\.0\.1:\d+$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(syllabi_router)
app.include_router(todos_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Hey Buddy API",
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
