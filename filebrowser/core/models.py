from pydantic import BaseModel
from typing import List

class DirectoryItem(BaseModel):
    name: str
    path: str

class FileItem(BaseModel):
    name: str
    path: str
    size: int

class BrowseResponse(BaseModel):
    directoriesQuery: List[DirectoryItem]
    filesQuery: List[FileItem]

class SearchResponse(BaseModel):
    filesQuery: List[FileItem]

class MessageResponse(BaseModel):
    message: str

class RootDirectoryResponse(BaseModel):
    path: str
    exists: bool
