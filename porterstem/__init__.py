"""
This package contains an implementation of the Porter stemming algorithm, together with
helpers to stem sentences, documents and word list files.

"""

__version__ = "1.0.0.dev0"

import logging

from porterstem import (  # noqa:F401
    parsing,
    utils,
)

logger = logging.getLogger("porterstem")
if not logger.handlers:  # To ensure reload() doesn't add another one
    logger.addHandler(logging.NullHandler())
