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

import longopt
from longopt import Arity
import sys


name = "example"
description = "this is an example."
version = "1.0.1"

table = longopt.OptionTable()
option = table.add

option(short='v', description="show version.")
option(short='h', description="help information.")
option(long="add", short='a', arity=Arity.REQUIRED, description="add record to table.")
option(long="remove", short='r', arity=Arity.OPTIONAL, description="remove record from table.")
option(long="modify", short='m', description="modify the record in table.")
option(long="query", description="query the table.")


def main(argv=None):
    try:
        parsed = longopt.getopt_long(table, argv)
    except longopt.ParseError as e:
        print(f"error: {e}")
        print()
        print(longopt.usage(name, description, version, table))
        return -1

    if 'h' in parsed.matched:
        print(longopt.usage(name, description, version, table))
        return 0

    if 'v' in parsed.matched:
        print(version)
        return 0

    print("Arguments:")
    print(parsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
