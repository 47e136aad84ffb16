#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html


"""This script stems every word of a text file with the Porter stemmer and writes the result
to another file, line by line. Words are separated by whitespace; the number of lines is kept,
but runs of whitespace inside a line collapse to a single space.

Both files are opened with `smart_open`, so compressed (``.gz``, ``.bz2``) and remote
(``s3://``, ``http://``...) paths work too.

Notes
-----

Input file, one or more words per line ::

    caresses ponies
    relational
    troubleshooting

Output file ::

    caress poni
    relat
    troubleshoot


How to use
----------

.. sourcecode:: pycon

    >>> from porterstem.test.utils import datapath, get_tmpfile
    >>> from porterstem.scripts.stem_words import stem_file
    >>>
    >>> tmp_file = get_tmpfile("stemmed_words.txt")
    >>> num_words = stem_file(datapath('porter_vocabulary.txt'), tmp_file)

Command line arguments
----------------------

.. program-output:: python -m porterstem.scripts.stem_words --help
   :ellipsis: 0, -5

"""
import sys
import logging
import argparse

from porterstem import utils
from porterstem.parsing.porter import PorterStemmer

logger = logging.getLogger(__name__)


def stem_file(input_file, output_file, encoding='utf8', errors='strict', progress_per=10000):
    """Stem every word in `input_file` and write the stemmed lines to `output_file`.

    Parameters
    ----------
    input_file : str
        Path to the input text file.
    output_file : str
        Path to output file.
    encoding : str, optional
        Encoding of both files.
    errors : str, optional
        Decoding error handling for `input_file`, as in :func:`open`.
    progress_per : int, optional
        Log a progress line every `progress_per` input lines.

    Returns
    -------
    int
        Number of words stemmed.

    """
    stemmer = PorterStemmer()
    num_words = 0
    logger.info("stemming words from %s to %s", input_file, output_file)
    with utils.open(input_file, 'r', encoding=encoding, errors=errors) as fin, \
            utils.open(output_file, 'w', encoding=encoding) as fout:
        for lineno, line in enumerate(fin):
            if progress_per and lineno and lineno % progress_per == 0:
                logger.info("PROGRESS: at line #%i, stemmed %i words", lineno, num_words)
            words = line.split()
            num_words += len(words)
            fout.write(" ".join(stemmer.stem(word) for word in words))
            fout.write("\n")
    if not num_words:
        logger.warning("no words found in %s", input_file)
    return num_words


if __name__ == "__main__":
    logging.basicConfig(format='%(asctime)s - %(module)s - %(levelname)s - %(message)s', level=logging.INFO)
    parser = argparse.ArgumentParser(description=__doc__[:-135], formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("-i", "--input", required=True, help="Path to input text file")
    parser.add_argument("-o", "--output", required=True, help="Path to output file")
    parser.add_argument("-e", "--encoding", default='utf8', help="Encoding of input and output files")
    parser.add_argument(
        "-p", "--progress-per", type=int, default=10000,
        help="Log progress every N input lines, 0 to disable",
    )
    args = parser.parse_args()

    logger.info("running %s", ' '.join(sys.argv))
    num_words = stem_file(args.input, args.output, encoding=args.encoding, progress_per=args.progress_per)
    logger.info("finished stemming %i words", num_words)
