# Compiles option specifications into the lookup tables
# the scanner consults.
#
# We keep it as a standalone module instead of folding it
# in to scanopt proper just to ensure it remains easy to test.
# It raises ValueError; scanopt turns that into ConfigurationError.

# please leave this copyright notice in binary distributions.
license = """
scanopt/optstring.py
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

import enum


class ArgumentPolicy(enum.IntEnum):
    NO_ARGUMENT = 0
    REQUIRED_ARGUMENT = 1
    OPTIONAL_ARGUMENT = 2

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"

NO_ARGUMENT = ArgumentPolicy.NO_ARGUMENT
REQUIRED_ARGUMENT = ArgumentPolicy.REQUIRED_ARGUMENT
OPTIONAL_ARGUMENT = ArgumentPolicy.OPTIONAL_ARGUMENT


def is_option_character(c):
    """
    Only ASCII letters and digits can be short options.
    (str.isalnum() alone would let through things like
    '²' and 'ß', which no shell user expects to type.)
    """
    return c.isascii() and c.isalnum()


def compile_optstring(optstring):
    """
    Compiles a POSIX getopt short option specification
    into a dict mapping each option character to its
    ArgumentPolicy.

        "a"    -a takes no argument
        "a:"   -a requires an argument
        "a::"  -a accepts an optional argument,
               which must be attached ("-aVALUE")

    Raises ValueError if optstring is malformed.
    If a character is specified more than once, the
    first definition wins, the same as a linear scan
    through the string in C getopt.
    """
    if not isinstance(optstring, str):
        raise ValueError(f"optstring must be str, not {type(optstring).__name__}")

    options = {}
    i = 0
    length = len(optstring)
    while i < length:
        c = optstring[i]
        i += 1
        if c == ':':
            raise ValueError(f"optstring {optstring!r}: ':' at index {i - 1} doesn't follow an option character")
        if not is_option_character(c):
            raise ValueError(f"optstring {optstring!r}: {c!r} isn't a legal option character")

        colons = 0
        while (i < length) and (optstring[i] == ':') and (colons < 2):
            colons += 1
            i += 1

        if c not in options:
            options[c] = ArgumentPolicy(colons)

    return options


class LongOption:
    """
    One entry in a long option specification.

    name is the option without its leading dashes ("verbose").
    has_arg is an ArgumentPolicy (or its int value).
    value is what gets reported when the option is matched:
    normally the equivalent short option character ('v'),
    but any int code works (1000 for a long-only option).

    If flag is not None, it must be a callable; when the option
    is matched, flag(value) is called, and the parsed option
    is reported without a short option character.
    """

    __slots__ = [
        "name",
        "has_arg",
        "value",
        "flag",
        ]

    no_argument = NO_ARGUMENT
    required_argument = REQUIRED_ARGUMENT
    optional_argument = OPTIONAL_ARGUMENT

    def __init__(self, name, has_arg, value, flag=None):
        self.name = name
        self.has_arg = has_arg
        self.value = value
        self.flag = flag

    def __repr__(self):
        flag_str = f" flag={self.flag!r}" if self.flag is not None else ""
        return f"<LongOption --{self.name} {self.has_arg!r} value={self.value!r}{flag_str}>"

    def __eq__(self, other):
        if not isinstance(other, LongOption):
            return NotImplemented
        return (
            (self.name == other.name)
            and (self.has_arg == other.has_arg)
            and (self.value == other.value)
            and (self.flag == other.flag)
            )

    __hash__ = None

    def short_option(self):
        """
        Returns the short option character this long option
        reports, or None if it has no short equivalent.

        Mirrors C getopt_long, which can only return a char:
        int codes 1 through 255 map to that character,
        everything else (including 0) has no short equivalent.
        """
        if self.flag is not None:
            return None
        value = self.value
        if isinstance(value, str):
            if len(value) == 1 and (0 < ord(value) <= 255):
                return value
            return None
        if isinstance(value, int) and (0 < value <= 255):
            return chr(value)
        return None


def validate_long_options(long_options):
    """
    Checks a sequence of LongOption objects.  Returns a tuple
    of new LongOption objects with each has_arg coerced to an
    ArgumentPolicy; the caller's objects are left alone.
    Order is preserved, since matching is first-match-wins.

    Raises ValueError if anything is malformed.
    """
    validated = []
    for i, long_option in enumerate(long_options):
        if not isinstance(long_option, LongOption):
            raise ValueError(f"long_options[{i}] must be LongOption, not {type(long_option).__name__}")
        name = long_option.name
        if not (name and isinstance(name, str)):
            raise ValueError(f"long_options[{i}]: name must be a non-empty str, not {name!r}")
        if name.startswith("-"):
            raise ValueError(f"long_options[{i}]: name {name!r} must not start with a dash")
        if "=" in name:
            raise ValueError(f"long_options[{i}]: name {name!r} must not contain '='")
        try:
            has_arg = ArgumentPolicy(long_option.has_arg)
        except ValueError:
            raise ValueError(f"long_options[{i}] --{name}: has_arg must be no_argument, required_argument, or optional_argument, not {long_option.has_arg!r}") from None
        if (long_option.flag is not None) and (not callable(long_option.flag)):
            raise ValueError(f"long_options[{i}] --{name}: flag must be callable or None")
        validated.append(LongOption(name, has_arg, long_option.value, long_option.flag))
    return tuple(validated)
