import uvicorn

# Set up logging first
from linkinfo.config.logging_config import setup_logging
setup_logging()

from linkinfo.core.config import settings
from linkinfo.main import app  # noqa: F401

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload,
        reload_dirs=["."]
    )
