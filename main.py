"""
Mini IPL - Round-robin Cricket Tournament Simulation API
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mini_ipl import __version__
from mini_ipl.config import settings
from mini_ipl.api.tournament import router as tournament_router

# Initialize FastAPI app
app = FastAPI(
    title="Mini IPL",
    description="Round-robin cricket tournament simulation API",
    version=__version__,
)

default_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

# Add custom origins from environment (comma-separated)
if settings.CORS_ORIGINS:
    default_origins.extend([o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()])

app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tournament_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "Mini IPL API",
        "version": __version__,
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
