#!/usr/bin/env python3

"A small, strict, POSIX-style getopt / getopt_long option scanner."
__version__ = "0.1.0"


# please leave this copyright notice in binary distributions.
license = """
scanopt/__init__.py
part of the scanopt software package
Copyright 2025 by Larry Hastings
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


import big.all as big
import sys

from .optstring import (
    ArgumentPolicy,
    LongOption,
    NO_ARGUMENT,
    OPTIONAL_ARGUMENT,
    REQUIRED_ARGUMENT,
    compile_optstring,
    is_option_character,
    validate_long_options,
    )


__all__ = [
    "ArgumentPolicy",
    "ConfigurationError",
    "InvalidOption",
    "LongOption",
    "MissingArgument",
    "NO_ARGUMENT",
    "OPTIONAL_ARGUMENT",
    "OptionError",
    "OptionScanner",
    "ParsedOption",
    "REQUIRED_ARGUMENT",
    "ScanoptBaseException",
    "UsageError",
    "getopt",
    "getopt_long",
    "parse",
    ]



class ScanoptBaseException(Exception):
    pass

class ConfigurationError(ScanoptBaseException):
    """
    Raised when the scanopt API is used improperly,
    e.g. a malformed optstring.
    """
    pass


class UsageError(ScanoptBaseException):
    """
    Base class for problems with the command-line itself.
    """
    pass


class OptionError(UsageError):
    """
    A command-line option the scanner couldn't accept.

    OptionScanner.next() *returns* these; it doesn't raise them.
    (Iterating over an OptionScanner, or calling parse(), raises them.)

    option is the offending short option character, or the
    name of the offending long option (without the dashes).
    token is the argv element the scanner was examining.
    long is true if option is a long option name.
    """

    def __init__(self, option, token, *, long=False):
        self.option = option
        self.token = token
        self.long = long
        super().__init__(self.format())

    def format(self):
        dashes = "--" if self.long else "-"
        return f"bad option '{dashes}{self.option}'"

    def __repr__(self):
        return f"<{self.__class__.__name__} option={self.option!r} token={self.token!r}>"


class InvalidOption(OptionError):
    """
    Either an unrecognized option, or a long option that
    doesn't take an argument was given one ("--verbose=yes").
    In the latter case, argument is the value that was given.
    """

    def __init__(self, option, token, *, long=False, argument=None):
        self.argument = argument
        super().__init__(option, token, long=long)

    def format(self):
        if not self.long:
            return f"invalid option -- '{self.option}'"
        if self.argument is not None:
            return f"option '--{self.option}' doesn't allow an argument"
        return f"unrecognized option '--{self.option}'"


class MissingArgument(OptionError):
    """
    An option that requires an argument was the last
    thing on the command-line.
    """

    def format(self):
        if self.long:
            return f"option '--{self.option}' requires an argument"
        return f"option requires an argument -- '{self.option}'"



class ParsedOption:
    """
    One option found on the command-line.

    opt is the short option character.  For a long option,
    it's the character the LongOption reports; if the long
    option has no short equivalent, opt is None.

    arg is the option's argument, or None.  It's always
    either an element of argv itself ("-a 10", "--file x")
    or the tail end of one ("-a10", "--file=x").

    long_name and long_index are only set for long options:
    the name as spelled in the LongOption, and that
    LongOption's index in the long option sequence.

    value is the long option's raw reported value,
    or the short option character for short options.
    """

    __slots__ = [
        "opt",
        "arg",
        "long_name",
        "long_index",
        "value",
        ]

    def __init__(self, opt, arg=None, long_name=None, long_index=None, value=None):
        self.opt = opt
        self.arg = arg
        self.long_name = long_name
        self.long_index = long_index
        self.value = opt if value is None else value

    def __repr__(self):
        fields = [f"opt={self.opt!r}"]
        if self.arg is not None:
            fields.append(f"arg={self.arg!r}")
        if self.long_name is not None:
            fields.append(f"long_name={self.long_name!r}")
            fields.append(f"long_index={self.long_index!r}")
            if self.value != self.opt:
                fields.append(f"value={self.value!r}")
        return f"ParsedOption({', '.join(fields)})"

    def __eq__(self, other):
        if not isinstance(other, ParsedOption):
            return NotImplemented
        return (
            (self.opt == other.opt)
            and (self.arg == other.arg)
            and (self.long_name == other.long_name)
            and (self.long_index == other.long_index)
            and (self.value == other.value)
            )

    __hash__ = None

    @property
    def option(self):
        "The option as it'd be spelled on the command-line, e.g. '-v' or '--verbose'."
        if self.long_name is not None:
            return "--" + self.long_name
        return "-" + self.opt



class OptionScanner:
    """
    Scans an argument vector for options, one option per call to next().

    Supports:
        -a                  short option
        -abc                clustered short options, same as -a -b -c
        -a10  -a 10         short option with a required argument ("a:")
        -a10                short option with an optional argument ("a::")
        --name              long option
        --name=value        long option with an argument
        --name value        long option with a required argument
        --                  ends option processing

    Scanning stops at the first positional argument; argv is
    never reordered.  A lone "-" is positional, as is anything
    where the character after the dash isn't a letter or digit
    (so "-.5" and "-=" are positional arguments, not options).

    The scanner is single-use.  Once next() has returned None
    (no more options), it keeps returning None.  Once it has
    returned an OptionError, it keeps returning that same
    OptionError.  Either way the cursor never moves again,
    and args() returns what's left.
    """

    def __init__(self,
        argv,
        optstring="",
        *,
        # sequence of LongOption objects.  if None,
        # "--name" tokens are never treated as options.
        long_options=None,

        # index of the first element of argv to examine.
        # argv[0] is conventionally the program name.
        start=1,

        # if true, record events in a big.Log, as self.log.
        log_events=True,
        ):
        if isinstance(argv, (str, bytes)) or not hasattr(argv, "__getitem__"):
            raise ConfigurationError(f"argv must be a sequence of str, not {type(argv).__name__}")
        if (not isinstance(start, int)) or (start < 0):
            raise ConfigurationError(f"start must be an int >= 0, not {start!r}")

        try:
            self.short_options = compile_optstring(optstring)
            if long_options is not None:
                long_options = validate_long_options(long_options)
        except ValueError as e:
            raise ConfigurationError(str(e)) from None

        self.argv = argv
        self.optstring = optstring
        self.long_options = long_options

        # index of the argv element being examined.
        self.optind = start
        # index of the next character to examine within argv[optind],
        # only meaningful while we're partway through "-abc".
        self.optpos = 1
        # the last short option character examined.
        self.optopt = None
        # index into long_options of the last long option matched.
        self.long_index = None

        self.finished = False
        self.failure = None

        self.log = big.Log() if log_events else None
        if self.log is not None:
            self.log(f"scan start, {max(len(argv) - start, 0)} tokens")

    @property
    def arg_index(self):
        return self.optind

    @property
    def char_index(self):
        return self.optpos

    def __repr__(self):
        state = ""
        if self.finished:
            state = " failed" if self.failure is not None else " finished"
        return f"<OptionScanner optstring={self.optstring!r} optind={self.optind} optpos={self.optpos}{state}>"

    def _advance(self, tokens=1):
        self.optind += tokens
        self.optpos = 1

    def next(self):
        """
        Scans the next option.

        Returns a ParsedOption if there was one,
        None if there are no more options, or an
        OptionError (InvalidOption or MissingArgument).
        """
        if self.finished:
            return self.failure

        result = self._scan()

        if result is None:
            self.finished = True
            if self.log is not None:
                self.log(f"end of options, optind={self.optind}")
        elif isinstance(result, OptionError):
            self.finished = True
            self.failure = result
            if self.log is not None:
                self.log(f"error: {result}")
        elif self.log is not None:
            self.log(f"option {result.option}")
        return result

    def _scan(self):
        argv = self.argv
        if self.optind >= len(argv):
            return None

        token = argv[self.optind]

        # a non-str can't be an option.
        if not isinstance(token, str):
            return None

        if token == "--":
            self._advance()
            return None

        if (self.long_options is not None) and (len(token) > 2) and token.startswith("--"):
            if self.log is None:
                return self._scan_long_option(token)
            self.log.enter(f"long option {token}")
            try:
                return self._scan_long_option(token)
            finally:
                self.log.exit()

        # "foo" and "-" are positional arguments.
        if (not token.startswith("-")) or (len(token) == 1):
            return None

        # so are "-.5" and "-=" (and "--foo", if we don't have long options).
        if not is_option_character(token[1]):
            return None

        return self._scan_short_option(token)

    def _scan_short_option(self, token):
        optpos = self.optpos
        c = self.optopt = token[optpos]

        # ':' is never in short_options, it's only optstring punctuation.
        policy = self.short_options.get(c)
        if policy is None:
            return InvalidOption(c, token)

        if policy == NO_ARGUMENT:
            self.optpos += 1
            if self.optpos >= len(token):
                self._advance()
            return ParsedOption(c)

        remainder = token[optpos + 1:]
        if remainder:
            self._advance()
            return ParsedOption(c, remainder)

        if policy == OPTIONAL_ARGUMENT:
            # optional arguments must be attached.
            self._advance()
            return ParsedOption(c)

        assert policy == REQUIRED_ARGUMENT
        if (self.optind + 1) < len(self.argv):
            arg = self.argv[self.optind + 1]
            self._advance(2)
            return ParsedOption(c, arg)

        return MissingArgument(c, token)

    def _scan_long_option(self, token):
        name, equals, value = token[2:].partition("=")
        # note: "--file=" has an attached argument, the empty string.
        attached = value if equals else None

        for i, long_option in enumerate(self.long_options):
            if long_option.name != name:
                continue

            self.long_index = i
            policy = long_option.has_arg

            if policy == NO_ARGUMENT:
                if attached is not None:
                    return InvalidOption(name, token, long=True, argument=attached)
                arg = None
                self._advance()
            elif policy == REQUIRED_ARGUMENT:
                if attached is not None:
                    arg = attached
                    self._advance()
                elif (self.optind + 1) < len(self.argv):
                    arg = self.argv[self.optind + 1]
                    self._advance(2)
                else:
                    return MissingArgument(name, token, long=True)
            else:
                assert policy == OPTIONAL_ARGUMENT
                # optional arguments must be attached with '='.
                arg = attached
                self._advance()

            if long_option.flag is not None:
                long_option.flag(long_option.value)

            return ParsedOption(long_option.short_option(), arg, long_option.name, i, long_option.value)

        return InvalidOption(name, token, long=True)

    def __iter__(self):
        return self

    def __next__(self):
        result = self.next()
        if result is None:
            raise StopIteration
        if isinstance(result, OptionError):
            raise result
        return result

    def args(self):
        """
        Returns the unconsumed remainder of argv as a list.
        (The list is new; the strings in it are argv's own.)
        Returns an empty list if argv has been consumed.
        """
        return list(self.argv[self.optind:])


def getopt(optstring, argv=None):
    """
    Returns an OptionScanner for argv (default sys.argv)
    using the short option specification optstring.
    """
    if argv is None:
        argv = sys.argv
    return OptionScanner(argv, optstring)

def getopt_long(optstring, long_options, argv=None):
    """
    Returns an OptionScanner for argv (default sys.argv)
    using the short option specification optstring
    and the sequence of LongOption objects long_options.
    """
    if argv is None:
        argv = sys.argv
    return OptionScanner(argv, optstring, long_options=long_options)


def parse(argv, optstring, long_options=None, *, start=1):
    """
    Scans argv in one go.  Returns a tuple:
        (list of ParsedOption, list of positional arguments)

    Raises InvalidOption or MissingArgument on failure.
    """
    scanner = OptionScanner(argv, optstring, long_options=long_options, start=start, log_events=False)
    options = list(scanner)
    return options, scanner.args()
