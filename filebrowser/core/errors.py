"""Errors raised by the file browser service"""

DIRECTORY_NOT_FOUND = "Directory not found."
FILE_NOT_FOUND = "File not found."
NO_FILE_UPLOADED = "No file uploaded."
UNAUTHORIZED_ACCESS = "Unauthorized access."
INTERNAL_SERVER_ERROR = "Internal server error: "


class FileBrowserError(Exception):
    """Base error; carries the HTTP status the API layer maps it to"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(FileBrowserError):
    status_code = 404


class BadRequestError(FileBrowserError):
    status_code = 400


class ForbiddenError(FileBrowserError):
    status_code = 403


class InternalError(FileBrowserError):
    status_code = 500
