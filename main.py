from fastapi import FastAPI
from filebrowser.api.routes import create_router
from filebrowser.config import Config
from filebrowser.core.file_browser import FileBrowserService
from filebrowser.observability.logger import logger
from typing import Optional
import uvicorn


def create_app(root_directory: Optional[str] = None) -> FastAPI:
    """Build the application around a single root directory"""
    service = FileBrowserService(root_directory or Config.ROOT_DIRECTORY)

    app = FastAPI(
        title="File Browser",
        description="Browse, search, upload and delete files under a root directory",
        version="1.0.0"
    )

    app.include_router(create_router(service))

    @app.on_event("startup")
    async def startup_event():
        logger.info("application_started", root_directory=service.root_directory)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("application_stopped")

    @app.get("/")
    async def root():
        return {
            "service": "File Browser",
            "version": "1.0.0",
            "status": "healthy"
        }

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=True,
        log_level="info"
    )
