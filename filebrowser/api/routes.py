from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from filebrowser.api.models import (
    BrowseResponse,
    MessageResponse,
    RootDirectoryResponse,
    SearchResponse,
)
from filebrowser.config import Config
from filebrowser.core.errors import FileBrowserError
from filebrowser.core.file_browser import FileBrowserService
from typing import Optional, Union


def create_router(service: FileBrowserService, prefix: Optional[str] = None,
                  default_page_size: Optional[int] = None) -> APIRouter:
    """Build the file browser routes around an already configured service"""
    if prefix is None:
        prefix = Config.API_ROUTE_BASE
    if default_page_size is None:
        default_page_size = Config.DEFAULT_PAGE_SIZE

    router = APIRouter(prefix=prefix, tags=["filebrowser"])

    @router.get("/browse", response_model=BrowseResponse)
    def browse(
        path: Optional[str] = "",
        page: int = 1,
        page_size: int = Query(default_page_size, alias="pageSize")
    ):
        """List a directory under the root"""
        try:
            return service.browse(path, page, page_size)
        except FileBrowserError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)

    @router.get("/search", response_model=Union[BrowseResponse, SearchResponse])
    def search(
        query: Optional[str] = "",
        page: int = 1,
        page_size: int = Query(default_page_size, alias="pageSize")
    ):
        """Recursively search file names under the root"""
        try:
            return service.search(query, page, page_size)
        except FileBrowserError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)

    @router.post("/upload", response_model=MessageResponse)
    def upload(file: Union[UploadFile, str, None] = File(None), path: Optional[str] = ""):
        """Upload a file into a directory under the root"""
        # A part without a filename arrives as a plain string
        is_upload = isinstance(file, UploadFile)
        content = file.file.read() if is_upload else None
        file_name = file.filename if is_upload else None
        try:
            return service.upload(content, file_name, path)
        except FileBrowserError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)

    @router.delete("/delete", response_model=MessageResponse)
    def delete(name: str, is_directory: bool = Query(False, alias="isDirectory")):
        """Delete a file or a directory tree"""
        try:
            return service.delete(name, is_directory)
        except FileBrowserError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)

    @router.get("/home-directory", response_model=RootDirectoryResponse)
    def home_directory():
        """Report the root directory and whether it exists"""
        return service.get_root()

    return router
