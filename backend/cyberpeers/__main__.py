"""
Run the server with ``python -m cyberpeers``.
"""
import uvicorn

from cyberpeers.main import app, logger, settings


def run():
    logger.info("Server is running on port %d", settings.port)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
