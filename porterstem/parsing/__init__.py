"""This package contains the Porter stemmer and functions to stem raw text"""

from .porter import PorterStemmer, stem  # noqa:F401
from .preprocessing import (  # noqa:F401
    read_file,
    read_files,
    stem_text,
)
