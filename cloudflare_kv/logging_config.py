import logging
import logging.config
from typing import Optional

from cloudflare_kv.config import get_settings


def setup_logging(debug: Optional[bool] = None):
    """
    Attach a console handler to the cloudflare_kv logger

    Other loggers are left to the application. The library never calls this itself.
    """
    if debug is None:
        debug = get_settings().DEBUG

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "kv": {
                    "format": "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "kv_console": {
                    "class": "logging.StreamHandler",
                    "formatter": "kv",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "cloudflare_kv": {
                    "handlers": ["kv_console"],
                    "level": "DEBUG" if debug else "INFO",
                    "propagate": False,
                },
            },
        }
    )
