#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - http://www.gnu.org/licenses/lgpl.html

"""This module contains functions for stemming raw strings and reading them from disk.

Text is only split on whitespace; punctuation, stopwords etc. are left for the caller to handle.

Examples
--------

.. sourcecode:: pycon

    >>> from porterstem.parsing.preprocessing import stem_text
    >>> stem_text("Relational databases need conditional indexing")
    'relat databas need condit index'

"""

import glob

from porterstem import utils
from porterstem.parsing.porter import PorterStemmer


def stem_text(text):
    """Transform `text` into lowercase and stem it.

    Parameters
    ----------
    text : {str, bytes}

    Returns
    -------
    str
        Unicode lowercased and porter-stemmed version of string `text`.

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.preprocessing import stem_text
        >>> stem_text("While it is quite useful to be able to search a large collection of documents almost instantly.")
        'while it is quit us to be abl to search a larg collect of document almost instantly.'

    """
    text = utils.to_unicode(text)
    p = PorterStemmer()
    return p.stem_sentence(text)


def read_file(path):
    """Read the raw contents of the file at `path`, transparently decompressing `.gz` and `.bz2` files.

    Parameters
    ----------
    path : str

    Returns
    -------
    bytes

    """
    with utils.open(path, 'rb') as fin:
        return fin.read()


def read_files(pattern):
    """Read every file matching the glob `pattern`, see :func:`read_file`."""
    return [read_file(fname) for fname in sorted(glob.glob(pattern))]
