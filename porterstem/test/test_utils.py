#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - http://www.gnu.org/licenses/lgpl.html

"""
Automated tests for checking various utils functions.
"""

import logging
import unittest

from porterstem import utils


class TestUnicode(unittest.TestCase):

    def test_to_unicode(self):
        self.assertEqual(utils.to_unicode("naïve"), "naïve")
        self.assertEqual(utils.to_unicode("naïve".encode('utf8')), "naïve")
        self.assertEqual(utils.to_unicode("naïve".encode('latin1'), encoding='latin1'), "naïve")

    def test_to_unicode_errors(self):
        with self.assertRaises(UnicodeDecodeError):
            utils.to_unicode(b"\xff")
        self.assertEqual(utils.to_unicode(b"a\xffb", errors='ignore'), "ab")


if __name__ == '__main__':
    logging.basicConfig(level=logging.WARNING)
    unittest.main()
