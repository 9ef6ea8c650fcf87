import uvicorn

from app.main import app
from app.platform.config import settings
from app.platform.logger import get_logger

logger = get_logger("server")


def run() -> None:
    logger.info(f"AEO Scanner API running on port {settings.PORT}")
    logger.info(f"Health check: http://localhost:{settings.PORT}/health")
    logger.info(f"Scan endpoint: http://localhost:{settings.PORT}/api/scan")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
