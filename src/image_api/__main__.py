"""Run the Image API with uvicorn."""

import uvicorn

from image_api.app import create_app
from image_api.core.config import AppConfig
from image_api.core.utils.constants import DEFAULT_HOST


def main() -> None:
    config = AppConfig.from_env()
    uvicorn.run(
        create_app(config),
        host=DEFAULT_HOST,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
