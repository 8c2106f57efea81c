"""Run the meeting summary server with uvicorn."""

import uvicorn

from server.app import create_app
from server.config import ServiceConfig


def main() -> None:
    config = ServiceConfig.from_env()
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
