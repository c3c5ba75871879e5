from __future__ import annotations

import logging

import uvicorn

from .config import load_settings
from .index import create_app
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    app = create_app(settings)

    logger.info(f"Serving on http://{settings.host}:{settings.port}")
    logger.info(
        "Endpoints: /professors, /students, /subjects, /enrollments, /tasks, /status"
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
