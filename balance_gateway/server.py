"""Process entry point: runs the API under a single uvicorn server"""

import uvicorn

from balance_gateway.config import settings


def build_server() -> uvicorn.Server:
    """Create the process-wide server bound to HOST:PORT"""
    config = uvicorn.Config(
        "balance_gateway.api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the JSON logging installed by the app
        log_level=settings.log_level.lower(),
    )
    return uvicorn.Server(config)


def main() -> None:
    # uvicorn handles SIGINT/SIGTERM and shuts the server down gracefully
    build_server().run()


if __name__ == "__main__":
    main()
