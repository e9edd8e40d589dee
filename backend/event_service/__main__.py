# -*- coding: utf-8 -*-
import logging

import uvicorn

from event_service.config import get_settings
from event_service.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    # bind 完了後の "Uvicorn running on ..." は uvicorn 自身がログに出す
    logger.info(f"Events app starting on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "event_service.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
