import operator

# please leave this copyright notice in binary distributions.
license = """
longopt/text.py
part of the longopt software package
Copyright 2021 by Larry Hastings
All rights reserved.

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included
in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""


def presplit_textwrap(words, margin=79, *, two_spaces=True):
    """
    Joins "words" into lines no longer than "margin" and
    returns the result as a string.

    "words" should be an iterable of pre-split words.
    A word longer than "margin" gets a line to itself.

    If "two_spaces" is true, words that end in sentence-ending
    punctuation ('.', '?', and '!') are followed by two spaces.
    """
    col = 0
    lastword = ''
    text = []

    for word in words:
        if two_spaces and lastword.endswith(('.', '?', '!')):
            space = "  "
        else:
            space = " "

        if col and ((col + len(space) + len(word)) > margin):
            text.append('\n')
            col = 0
        elif col:
            text.append(space)
            col += len(space)

        text.append(word)
        col += len(word)
        lastword = word

    return "".join(text)


def merge_columns(*columns, column_spacing=1):
    """
    Merges blocks of text side by side, one block per column.

    Each column is a tuple of three items:
        (text, min_width, max_width)
    where text is a str with lines separated by newlines.

    Each column is as wide as its longest line plus column_spacing,
    clamped to min_width and max_width.

    If a column has lines too wide for max_width, the columns to
    its right wait until after the last too-wide line.  That's how
    a long option like
        --a-really-long-option-name
    gets its description started on the following line.

    Trailing whitespace is stripped from every line.
    """
    splits = []
    widths = []
    last_too_wide_lines = []

    for s, min_width, max_width in columns:
        assert isinstance(s, str)
        operator.index(min_width)
        operator.index(max_width)

        lines = s.rstrip().split('\n')
        splits.append(lines)

        measured_width = max(len(line) for line in lines) + column_spacing
        widths.append(min(max_width, max(min_width, measured_width)))

        last_too_wide_line = -1
        for i, line in enumerate(lines):
            if (len(line) + column_spacing) > max_width:
                last_too_wide_line = i
        last_too_wide_lines.append(last_too_wide_line)

    iterators = [enumerate(lines) for lines in splits]
    output = []

    while True:
        line = []
        exhausted = True
        for iterator, width, last_too_wide_line in zip(iterators, widths, last_too_wide_lines):
            i, column = next(iterator, (None, None))
            if i is None:
                line.append(" " * width)
                continue
            exhausted = False
            if i <= last_too_wide_line:
                line.append(column)
                break
            line.append(column.ljust(width))
        if exhausted:
            break
        output.append("".join(line).rstrip())

    return "\n".join(output).rstrip()
