"""Run the game server: python -m memequiz"""

import uvicorn

from memequiz.config import get_settings
from memequiz.core.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "memequiz.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
