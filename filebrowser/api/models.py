# Response bodies are the service result models
from filebrowser.core.models import (
    BrowseResponse,
    DirectoryItem,
    FileItem,
    MessageResponse,
    RootDirectoryResponse,
    SearchResponse,
)

__all__ = [
    "BrowseResponse",
    "DirectoryItem",
    "FileItem",
    "MessageResponse",
    "RootDirectoryResponse",
    "SearchResponse",
]
