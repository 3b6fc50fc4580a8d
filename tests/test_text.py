#!/usr/bin/env python3


# part of the longopt software package
# Copyright 2021 by Larry Hastings
# All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.


import unittest

from longopt import text


class TextwrapTests(unittest.TestCase):

    def test_presplit_textwrap(self):
        words = "hello there. how are you? i am fine! so there's that.".split()
        self.assertEqual(
            "hello there.  how are you?  i am fine!  so there's that.",
            text.presplit_textwrap(words))
        self.assertEqual(
            "hello there.  how\nare you?  i am fine!\nso there's that.",
            text.presplit_textwrap(words, 20))
        self.assertEqual(
            "hello there. how are you? i am fine! so there's that.",
            text.presplit_textwrap(words, two_spaces=False))

    def test_long_words_get_their_own_line(self):
        self.assertEqual(
            "a\nsupercalifragilistic\nb",
            text.presplit_textwrap(["a", "supercalifragilistic", "b"], 10))

    def test_nothing(self):
        self.assertEqual("", text.presplit_textwrap([]))


class MergeColumnsTests(unittest.TestCase):

    def test_merge_columns(self):
        got = text.merge_columns(
            ("1\n2\n3", 5, 5),
            ("howdy\nhello\nhi, how are you?\ni'm fine.", 5, 40),
            ("ending\ntext!", 80, 80),
            )
        self.assertEqual(
            "1    howdy            ending\n2    hello            text!\n3    hi, how are you?\n     i'm fine.",
            got)

    def test_too_wide_column_pushes_the_rest_down(self):
        got = text.merge_columns(
            ("", 2, 2),
            ("--very-long", 6, 6),
            ("desc", 20, 20),
            )
        self.assertEqual("  --very-long\n        desc", got)

    def test_exactly_max_width_still_gets_a_space(self):
        got = text.merge_columns(
            ("abcdef", 6, 6),
            ("desc", 10, 10),
            )
        self.assertEqual("abcdef\n      desc", got)

    def test_empty_column_indents(self):
        got = text.merge_columns(
            ("", 4, 4),
            ("-v|--verbose", 20, 20),
            ("Causes the program to produce more output.", 0, 60),
            )
        self.assertEqual("    -v|--verbose        Causes the program to produce more output.", got)


if __name__ == "__main__":
    unittest.main()
