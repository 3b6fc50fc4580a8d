#!/usr/bin/env python3

"POSIX short options and GNU long options, scanned the way getopt_long() does it."
__version__ = "0.1.0"


# please leave this copyright notice in binary distributions.
license = """
longopt/__init__.py
part of the longopt software package
Copyright 2021-2023 by Larry Hastings
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
from big.itertools import PushbackIterator
import enum
import sys
import types

from . import text


__all__ = [
    "Arity",
    "ConstructionError",
    "InvalidOption",
    "LongoptBaseException",
    "MissingOptionArgument",
    "Option",
    "OptionTable",
    "ParseError",
    "ParsedArguments",
    "Scanner",
    "UnexpectedArgument",
    "getopt_long",
    "scan",
    "usage",
    ]


class LongoptBaseException(Exception):
    pass

class ConstructionError(LongoptBaseException):
    """
    Raised when an Option or OptionTable is declared improperly.
    """
    pass


class ParseError(LongoptBaseException):
    """
    Raised when scanning an invalid command-line.

    Only the first problem found is reported.  .token is the
    offending command-line text: the whole token for long options,
    "-" plus the letter for short options.
    """
    format = "error in {token!r}"

    def __init__(self, token):
        super().__init__(token)
        self.token = token

    def __str__(self):
        return self.format.format(token=self.token)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.token!r})"

    def __eq__(self, other):
        return (type(self) == type(other)) and (self.token == other.token)

    def __hash__(self):
        return hash((type(self), self.token))

class InvalidOption(ParseError):
    format = "invalid option {token!r}"

class MissingOptionArgument(ParseError):
    format = "option {token!r} requires an argument"

class UnexpectedArgument(ParseError):
    format = "option {token!r} doesn't allow an argument"


class Arity(enum.Enum):
    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


##
## How each arity is spelled.
##
##     * in a getopt() short option specification string ("a:b::c"),
##     * in usage, after a long option ("--add=ARG"),
##     * in usage, after a short-only option ("-a ARG").
##
_short_spec_suffix = {
    Arity.NONE: "",
    Arity.REQUIRED: ":",
    Arity.OPTIONAL: "::",
    }

_long_usage_suffix = {
    Arity.NONE: "",
    Arity.REQUIRED: "=ARG",
    Arity.OPTIONAL: "[=ARG]",
    }

_short_usage_suffix = {
    Arity.NONE: "",
    Arity.REQUIRED: " ARG",
    Arity.OPTIONAL: "[ARG]",
    }


class Option:
    """
    One declared command-line option.

    long is the long name without its leading dashes ("add"),
    short is the single-character short name ("a").  At least
    one of the two is required.  arity is an Arity value saying
    whether the option takes an argument.  description is only
    used when rendering usage.

    Options are immutable.
    """

    __slots__ = ['_long', '_short', '_arity', '_description']

    def __init__(self, long=None, short=None, arity=Arity.NONE, description=""):
        if (long is None) and (short is None):
            raise ConstructionError("Option: must have a long name, a short name, or both")

        if long is not None:
            if not (isinstance(long, str) and long):
                raise ConstructionError(f"Option: long name {long!r} must be a non-empty str")
            if "\0" in long:
                raise ConstructionError(f"Option: long name {long!r} can't contain NUL")
            if long.startswith("-"):
                raise ConstructionError(f"Option: long name {long!r} can't start with '-', leave off the dashes")
            if "=" in long:
                raise ConstructionError(f"Option: long name {long!r} can't contain '='")

        if short is not None:
            if not (isinstance(short, str) and (len(short) == 1)):
                raise ConstructionError(f"Option: short name {short!r} must be a single character")
            if short == "\0":
                raise ConstructionError("Option: short name can't be NUL")
            if short in "-:":
                raise ConstructionError(f"Option: {short!r} isn't a legal short name")

        if not isinstance(arity, Arity):
            raise ConstructionError(f"Option: arity must be an Arity, not {arity!r}")

        if not isinstance(description, str):
            raise ConstructionError(f"Option: description must be a str, not {description!r}")

        object.__setattr__(self, '_long', long)
        object.__setattr__(self, '_short', short)
        object.__setattr__(self, '_arity', arity)
        object.__setattr__(self, '_description', description)

    def __setattr__(self, name, value):
        raise AttributeError("Option objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Option objects are immutable")

    @property
    def long(self):
        return self._long

    @property
    def short(self):
        return self._short

    @property
    def arity(self):
        return self._arity

    @property
    def description(self):
        return self._description

    @property
    def identity(self):
        "The key this option is reported under in ParsedArguments.matched."
        return self._long if self._long is not None else self._short

    def short_spec(self):
        """
        This option's contribution to a getopt() short option
        specification string.  Returns "" if there's no short name.
        """
        if self._short is None:
            return ""
        return self._short + _short_spec_suffix[self._arity]

    def usage_topic(self):
        """
        How this option is spelled in usage, e.g.
            -a|--add=ARG
            -r[ARG]
            --query
        """
        if self._long is None:
            return f"-{self._short}{_short_usage_suffix[self._arity]}"
        long = f"--{self._long}{_long_usage_suffix[self._arity]}"
        if self._short is None:
            return long
        return f"-{self._short}|{long}"

    def __repr__(self):
        return f"<Option long={self._long!r} short={self._short!r} arity={self._arity.name} description={self._description!r}>"

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented
        return (
            (self._long == other._long)
            and (self._short == other._short)
            and (self._arity == other._arity)
            and (self._description == other._description)
            )

    def __hash__(self):
        return hash((self._long, self._short, self._arity, self._description))


class OptionTable:
    """
    An ordered collection of Options.

    Short and long names must be unique across the whole table.
    Insertion order is the order options appear in usage.
    """

    def __init__(self, options=()):
        self._options = []
        self._short = {}
        self._long = {}
        for option in options:
            self.add(option)

    def add(self, option=None, *, long=None, short=None, arity=Arity.NONE, description=""):
        """
        Adds an option to the table and returns it.

        Either pass in an Option, or pass in the keyword arguments
        for one and add() will construct it for you.

        Raises ConstructionError if the option's short or long name
        is already in the table.  A failed add() leaves the table
        unchanged.
        """
        if option is None:
            option = Option(long=long, short=short, arity=arity, description=description)
        elif not isinstance(option, Option):
            raise ConstructionError(f"OptionTable.add: {option!r} is not an Option")
        elif (long, short, arity, description) != (None, None, Arity.NONE, ""):
            raise ConstructionError(f"OptionTable.add: pass in an Option or keyword arguments, not both")

        # check everything before changing anything.
        if (option.short is not None) and (option.short in self._short):
            raise ConstructionError(f"OptionTable.add: short option -{option.short} defined more than once")
        if (option.long is not None) and (option.long in self._long):
            raise ConstructionError(f"OptionTable.add: long option --{option.long} defined more than once")

        self._options.append(option)
        if option.short is not None:
            self._short[option.short] = option
        if option.long is not None:
            self._long[option.long] = option
        return option

    def find_short(self, c):
        return self._short.get(c)

    def find_long(self, name):
        return self._long.get(name)

    def __len__(self):
        return len(self._options)

    def __iter__(self):
        return iter(self._options)

    def __getitem__(self, index):
        return self._options[index]

    def __contains__(self, name):
        return (name in self._long) or (name in self._short)

    def __repr__(self):
        return f"<OptionTable {' '.join(option.usage_topic() for option in self._options)}>"

    def derive_scan_artifacts(self):
        """
        Returns the table in the two shapes getopt_long() wants:

            (short_spec, long_specs)

        short_spec is a getopt() short option specification string:
        every option with a short name contributes its letter,
        followed by ':' if it requires an argument or '::' if the
        argument is optional.

        long_specs is a tuple of (long_name, arity) pairs.

        Both preserve table order.
        """
        short_spec = "".join(option.short_spec() for option in self._options)
        long_specs = tuple((option.long, option.arity) for option in self._options if option.long is not None)
        return short_spec, long_specs

    def render_usage(self, program_name, description="", version=None, *, max_columns=79):
        """
        Renders usage text for a program accepting the options
        in this table.  Returns a str; prints nothing.
        """
        lines = [f"usage: {program_name} [options [args]] [operands]"]

        if description:
            lines.append("")
            lines.append(text.presplit_textwrap(description.split(), margin=max_columns))

        if version:
            lines.append("")
            lines.append(f"version {version}")

        if self._options:
            lines.append("")
            lines.append("options:")

            topics = [option.usage_topic() for option in self._options]
            longest_topic = max(len(topic) for topic in topics)

            column0width = 2
            column1width = min((max_columns // 4) - 4, max(12, longest_topic))
            column1width += 4
            column2width = max_columns - (column0width + column1width)

            for topic, option in zip(topics, self._options):
                column2 = text.presplit_textwrap(option.description.split(), margin=column2width)
                lines.append(text.merge_columns(
                    ('', column0width, column0width),
                    (topic, column1width, column1width),
                    (column2, column2width, column2width),
                    ))

        return "\n".join(lines)


def usage(program_name, description, version, table, *, max_columns=79):
    return table.render_usage(program_name, description, version, max_columns=max_columns)


class ParsedArguments:
    """
    The result of scanning a command-line.

    options is a tuple of (identity, value) pairs, one per option
    encountered, in command-line order.  Repeated options appear
    once per repetition.

    matched maps each option's identity to its value.  If an option
    was repeated, the last value wins.

    operands is a tuple of the remaining positional arguments,
    in command-line order.

    value is None for options that don't take an argument, and for
    options with an optional argument where none was supplied.
    """

    __slots__ = ['options', 'matched', 'operands']

    def __init__(self, options, operands):
        options = tuple(options)
        object.__setattr__(self, 'options', options)
        object.__setattr__(self, 'matched', types.MappingProxyType(dict(options)))
        object.__setattr__(self, 'operands', tuple(operands))

    def __setattr__(self, name, value):
        raise AttributeError("ParsedArguments objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("ParsedArguments objects are immutable")

    def __eq__(self, other):
        if not isinstance(other, ParsedArguments):
            return NotImplemented
        return (dict(self.matched) == dict(other.matched)) and (self.operands == other.operands)

    def __repr__(self):
        return f"<ParsedArguments matched={dict(self.matched)!r} operands={list(self.operands)!r}>"

    def __str__(self):
        lines = []
        for name, value in self.options:
            lines.append(f"option: {name}, value: {'' if value is None else value}")
        for i, operand in enumerate(self.operands):
            lines.append(f"operand{i}: {operand}")
        return "\n".join(lines)


##
## The scanner.
##
## Every scan gets its own Scanner object, which holds
## all the state for that scan: the token cursor, the
## options seen so far, and the event log.  There's no
## module-level state, so scanning the same OptionTable
## over and over (or from several threads) is safe.
##
## The cursor is a big.PushbackIterator over the tokens.
## It only ever looks one token ahead, and only to
## fetch the argument for an option that requires one.
##

class Scanner:
    def __init__(self, table, *, log=None):
        if not isinstance(table, OptionTable):
            raise TypeError(f"Scanner: table must be an OptionTable, not {table!r}")
        self.table = table
        # the caller's log, if any.  otherwise every scan gets a fresh one.
        self.caller_log = log
        self.reset()

    def reset(self):
        self.iterator = None
        self.options = []
        self.operands = []
        self.log = self.caller_log if self.caller_log is not None else big.Log()

    def __call__(self, tokens):
        """
        Scans tokens, a sequence of str.  tokens[0] is the
        program name and is skipped.

        Returns a ParsedArguments object.  Raises a ParseError
        for the first problem found.
        """
        self.reset()
        log = self.log
        log("scan start")

        iterator = self.iterator = PushbackIterator(tokens)
        next(iterator, None)

        log.enter("options")
        try:
            for token in iterator:
                if token == "--":
                    log("'--', everything else is an operand")
                    break

                # "-" by itself is an operand.  (Old UNIX idiom: "read stdin".)
                if (not token.startswith("-")) or (token == "-"):
                    log(f"{token!r} isn't an option, everything from here on is an operand")
                    iterator.push(token)
                    break

                if token.startswith("--"):
                    self.long_option(token)
                else:
                    self.short_options(token)
        finally:
            log.exit()

        self.operands.extend(iterator)
        log("scan complete")
        return ParsedArguments(self.options, self.operands)

    def record(self, option, value):
        self.log(f"matched {option.identity!r} value={value!r}")
        self.options.append((option.identity, value))

    def next_argument(self):
        """
        Consumes and returns the next token as an option's argument.
        Returns None if there isn't one.
        """
        if not self.iterator:
            return None
        return next(self.iterator)

    def long_option(self, token):
        # split_value is the value after "=", if any.
        # Note: it can be an empty string!  ("--file=")
        # You *must* check "if split_value is None".
        name, equals, split_value = token[2:].partition("=")
        if not equals:
            split_value = None

        option = self.table.find_long(name)
        if option is None:
            raise InvalidOption(token)

        arity = option.arity

        if arity == Arity.NONE:
            if split_value is not None:
                raise UnexpectedArgument(token)
            self.record(option, None)
            return

        if arity == Arity.REQUIRED:
            if split_value is None:
                split_value = self.next_argument()
                # "--level --" might mean "level is '--'", or it might mean
                # "oops, forgot level's argument, now stop processing options".
                # We refuse to guess.  Use "--level=--" if you mean it.
                if (split_value is None) or (split_value == "--"):
                    raise MissingOptionArgument(token)
            self.record(option, split_value)
            return

        assert arity == Arity.OPTIONAL
        # optional arguments are only ever "--name=value".
        self.record(option, split_value)

    def short_options(self, token):
        ##
        ##      % prog -abc
        ## is EXACTLY EQUIVALENT TO
        ##      % prog -a -b -c
        ## until we hit a letter that takes an argument.
        ## That letter gets the rest of the token as its
        ## argument (if there's anything left).
        ##
        for i in range(1, len(token)):
            c = token[i]
            option = self.table.find_short(c)
            if option is None:
                raise InvalidOption("-" + c)

            arity = option.arity
            if arity == Arity.NONE:
                self.record(option, None)
                continue

            remainder = token[i + 1:] or None

            if arity == Arity.REQUIRED:
                if remainder is None:
                    remainder = self.next_argument()
                    if remainder is None:
                        raise MissingOptionArgument("-" + c)
            else:
                assert arity == Arity.OPTIONAL

            self.record(option, remainder)
            return


def scan(table, tokens, *, log=None):
    """
    Scans tokens against table and returns a ParsedArguments.
    tokens[0] is the program name and is skipped.

    Raises a ParseError subclass on the first invalid token.
    """
    scanner = Scanner(table, log=log)
    return scanner(tokens)


def getopt_long(table, argv=None, *, log=None):
    """
    Like scan(), but argv defaults to sys.argv.
    """
    if argv is None:
        argv = sys.argv
    return scan(table, argv, log=log)
