import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    """Configuration management using environment variables"""

    # Filesystem root exposed by the API (supports ~)
    ROOT_DIRECTORY = os.getenv("ROOT_DIRECTORY", "/app")

    # Pagination
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    # Routing
    API_ROUTE_BASE = os.getenv("API_ROUTE_BASE", "/api/filebrowser")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Server settings
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
