#!/usr/bin/env python3


# part of the scanopt software package
# Copyright 2025 by Larry Hastings
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

import os
import sys

scanopt_root = os.environ.get("SCANOPT_ROOT")
if scanopt_root:
    sys.path.insert(0, scanopt_root)

import scanopt
from scanopt import LongOption


VERSION_OPTION = 1000

long_options = [
    LongOption("file", LongOption.required_argument, 'f'),
    LongOption("output", LongOption.required_argument, 'o'),
    LongOption("verbose", LongOption.no_argument, 'v'),
    LongOption("count", LongOption.required_argument, 'c'),
    LongOption("help", LongOption.no_argument, 'h'),
    # long-only option
    LongOption("version", LongOption.no_argument, VERSION_OPTION),
    ]

usage = """
usage: example_long [OPTIONS]

Options:
  -f, --file FILE      Input file
  -o, --output FILE    Output file
  -v, --verbose        Enable verbose output
  -c, --count COUNT    Set count value
  -h, --help           Show this help message
      --version        Show version information
""".strip()


def main(argv=None):
    file = output = None
    verbose = False
    count = 1

    scanner = scanopt.getopt_long("f:o:vc:h", long_options, argv)

    while True:
        option = scanner.next()
        if option is None:
            break
        if isinstance(option, scanopt.InvalidOption):
            print("Invalid option:", option)
            return 1
        if isinstance(option, scanopt.MissingArgument):
            print("Option requires an argument:", option)
            return 1

        if option.opt == 'f':
            file = option.arg
            print(f"{option.option} = {file}")
        elif option.opt == 'o':
            output = option.arg
            print(f"{option.option} = {output}")
        elif option.opt == 'v':
            verbose = True
            print(f"{option.option} enabled")
        elif option.opt == 'c':
            try:
                count = int(option.arg)
            except ValueError:
                print(f"Invalid count value: {option.arg}")
                return 1
            print(f"{option.option} = {count}")
        elif option.opt == 'h':
            print(usage)
            return 0
        elif option.value == VERSION_OPTION:
            print(f"example_long version {scanopt.__version__}")
            return 0
        else:
            print(f"Long option: {option.long_name}")

    print()
    print("Configuration:")
    print(f"  File: {file}")
    print(f"  Output: {output}")
    print(f"  Verbose: {verbose}")
    print(f"  Count: {count}")

    remaining = scanner.args()
    if remaining:
        print(f"  Remaining args: {' '.join(remaining)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
