"""birdlog web application, served with ``uvicorn birdlog.web.main:app``."""

import logging

from birdlog.web.core.factory import create_app

# Keep uvicorn error logger for startup/shutdown messages
uvicorn_error_logger = logging.getLogger("uvicorn.error")
uvicorn_error_logger.setLevel(logging.INFO)

app = create_app()
