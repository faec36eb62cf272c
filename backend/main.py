"""
PixoraTools Diff Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting PixoraTools Diff Backend...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")

    max_lines = config_manager.get_config()["diff"].get("maxLines", 0)
    print(f"[Backend] Diff line limit: {max_lines or 'none'}")

    yield
    print("[Backend] Shutting down PixoraTools Diff Backend...")


app = FastAPI(
    title="PixoraTools Diff Backend",
    description="Line-based text comparison for the PixoraTools Text Diff Checker",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "pixora-diff-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=int(server.get("port", 8000)))
