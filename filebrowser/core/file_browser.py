"""File browser service - filesystem operations under a single root directory"""
import fnmatch
import os
import shutil
from contextlib import contextmanager
from itertools import islice
from typing import Iterable, Iterator, List, Optional, TypeVar, Union

from filebrowser.core.models import (
    BrowseResponse,
    DirectoryItem,
    FileItem,
    MessageResponse,
    RootDirectoryResponse,
    SearchResponse,
)
from filebrowser.core.errors import (
    DIRECTORY_NOT_FOUND,
    FILE_NOT_FOUND,
    INTERNAL_SERVER_ERROR,
    NO_FILE_UPLOADED,
    UNAUTHORIZED_ACCESS,
    BadRequestError,
    ForbiddenError,
    InternalError,
    NotFoundError,
)
from filebrowser.observability.logger import log_filesystem_error, logger

FILE_UPLOADED = "File uploaded successfully."
FILE_DELETED = "File deleted."
DIRECTORY_DELETED = "Directory deleted."

T = TypeVar("T")


def resolve_root_directory(path: str) -> str:
    """Expand a leading ~ to the current user's home directory"""
    if path.startswith("~"):
        home_directory = os.path.expanduser("~")
        remainder = path.lstrip("~/")
        return os.path.join(home_directory, remainder) if remainder else home_directory
    return path


def paginate(items: Iterable[T], page: int, page_size: int) -> List[T]:
    """Skip (page-1)*page_size items and take page_size; page_size <= 0 takes everything"""
    if page_size <= 0:
        return list(items)
    skip = max(page - 1, 0) * page_size
    return list(islice(items, skip, skip + page_size))


def _raise_walk_error(error: OSError):
    raise error


class FileBrowserService:
    """
    Browse, search, upload and delete under a fixed root directory.

    The root is resolved once here and never changes. Every call works on
    the live filesystem; nothing is cached between calls.
    """

    def __init__(self, root_directory: str):
        self.root_directory = resolve_root_directory(root_directory)

    @contextmanager
    def _filesystem_errors(self, operation: str, path: str):
        """Map OS failures to API errors"""
        try:
            yield
        except PermissionError as e:
            log_filesystem_error(operation, path, e)
            raise ForbiddenError(UNAUTHORIZED_ACCESS) from e
        except OSError as e:
            log_filesystem_error(operation, path, e)
            raise InternalError(INTERNAL_SERVER_ERROR + str(e)) from e

    @staticmethod
    def _file_item(path: str) -> FileItem:
        return FileItem(name=os.path.basename(path), path=path, size=os.path.getsize(path))

    def browse(self, relative_path: Optional[str] = "", page: int = 1,
               page_size: int = 0) -> BrowseResponse:
        """List immediate subdirectories and files of a directory under root"""
        full_path = os.path.join(self.root_directory, relative_path or "")

        if not os.path.isdir(full_path):
            raise NotFoundError(DIRECTORY_NOT_FOUND)

        with self._filesystem_errors("browse", full_path):
            with os.scandir(full_path) as it:
                entries = list(it)

            # Each list is paged on its own
            directories = (
                DirectoryItem(name=entry.name, path=entry.path)
                for entry in entries if entry.is_dir()
            )
            files = (
                self._file_item(entry.path)
                for entry in entries if entry.is_file()
            )
            result = BrowseResponse(
                directoriesQuery=paginate(directories, page, page_size),
                filesQuery=paginate(files, page, page_size),
            )

        logger.debug(
            "directory_browsed",
            path=full_path,
            page=page,
            page_size=page_size,
            directories=len(result.directoriesQuery),
            files=len(result.filesQuery)
        )
        return result

    def _matching_files(self, pattern: str) -> Iterator[FileItem]:
        for dirpath, _, filenames in os.walk(self.root_directory, onerror=_raise_walk_error):
            for name in fnmatch.filter(filenames, pattern):
                path = os.path.join(dirpath, name)
                # Same rule as browse: dangling links are not files
                if os.path.isfile(path):
                    yield self._file_item(path)

    def search(self, query: Optional[str] = "", page: int = 1,
               page_size: int = 0) -> Union[SearchResponse, BrowseResponse]:
        """
        Recursively find files under root whose name contains query.

        A blank query is a browse of the root directory and returns the
        browse shape. '*' and '?' in the query stay wildcards, '[' is
        matched literally.
        """
        if query is None or not query.strip():
            return self.browse("", page, page_size)

        pattern = "*" + query.replace("[", "[[]") + "*"
        with self._filesystem_errors("search", self.root_directory):
            files = paginate(self._matching_files(pattern), page, page_size)

        logger.debug("files_searched", query=query, page=page, page_size=page_size, matches=len(files))
        return SearchResponse(filesQuery=files)

    def upload(self, content: Optional[bytes], file_name: Optional[str],
               relative_path: Optional[str] = "") -> MessageResponse:
        """Write content to root/relative_path/file_name, replacing any existing file"""
        if not content or not file_name:
            raise BadRequestError(NO_FILE_UPLOADED)

        destination = os.path.join(self.root_directory, relative_path or "", file_name)

        try:
            with open(destination, "wb") as stream:
                stream.write(content)
        except PermissionError as e:
            logger.error("upload_failed", reason="unauthorized", path=destination, exc_info=e)
            raise ForbiddenError(UNAUTHORIZED_ACCESS) from e
        except (OSError, ValueError) as e:
            logger.error("upload_failed", reason="internal", path=destination, error=str(e), exc_info=e)
            raise InternalError(INTERNAL_SERVER_ERROR + str(e)) from e

        logger.info("file_uploaded", path=destination, size=len(content))
        return MessageResponse(message=FILE_UPLOADED)

    def delete(self, name: str, is_directory: bool = False) -> MessageResponse:
        """Delete a file, or a directory and everything below it"""
        full_path = os.path.join(self.root_directory, name)

        if is_directory:
            if not os.path.isdir(full_path):
                raise NotFoundError(DIRECTORY_NOT_FOUND)

            with self._filesystem_errors("delete", full_path):
                shutil.rmtree(full_path)
            logger.info("directory_deleted", path=full_path)
            return MessageResponse(message=DIRECTORY_DELETED)

        if not os.path.isfile(full_path):
            raise NotFoundError(FILE_NOT_FOUND)

        with self._filesystem_errors("delete", full_path):
            os.remove(full_path)
        logger.info("file_deleted", path=full_path)
        return MessageResponse(message=FILE_DELETED)

    def get_root(self) -> RootDirectoryResponse:
        return RootDirectoryResponse(
            path=self.root_directory,
            exists=os.path.isdir(self.root_directory)
        )
