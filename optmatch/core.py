"""
Copyright (C) 2023 Yuyao Huang - All Rights Reserved

You may use, distribute and modify this code under the terms of the Apache 2.0
license, which unfortunately won't be written for another century. You should
have received a copy of the Apache 2.0 license with this file. If not, please
write to: huangyuyao@outlook.com, or visit:
https://github.com/tjyuyao/t3w/blob/main/LICENSE
"""

# docstring style reference: https://www.sphinx-doc.org/en/master/usage/extensions/example_google.html

from __future__ import annotations
import re, sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, TextIO, Union

from .utils.docstring import help_from_docstring
from .utils.verbose import trace_dispatch


HELP_TOKEN = "--help"
"""reserved argument that always requests the usage banner and is never matched against option patterns."""

Handler = Callable[[re.Match], None]
"""An option handler receives the full :class:`re.Match` of its argument. ``m[0]`` is the whole argument, ``m[1]`` onwards are the parenthesized captures."""


class PatternError(ValueError):
    """raised by :class:`Opt` when its pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid option pattern {repr(pattern)}: {reason}")
        self.pattern = pattern
        self.reason = reason


class Opt:
    """A single command line option: a pattern recognising one argument, a help description and a handler.

    Example:

        .. code-block:: python

            settings = dict(server="localhost:10000", width=1280, height=1024)

            def set_screen(m):
                settings["width"], settings["height"] = int(m[1]), int(m[2])

            ok = parse_cmd_line(len(sys.argv), sys.argv, [
                Opt("--server=(.*)", "address of server to connect to", lambda m: settings.update(server=m[1])),
                Opt("--screen=([0-9]+)x([0-9]+)", "screen width and height in pixels", set_screen),
            ])

    Values must be embedded in the same argument as the option (``--server=host``), each pattern
    matches exactly one argument string.
    """

    __slots__ = ("regex", "pattern_text", "description", "help", "handler")

    def __init__(self, pattern: Union[str, re.Pattern], help: Optional[str], handler: Handler) -> None:
        """
        Args:
            pattern (str | re.Pattern): regular expression that must match the **whole** argument. Compiled immediately.
            help (str, optional): human readable description. If None, the short description of the handler's docstring is used.
            handler (Callable[[re.Match], None]): called with the match object when an argument matches.

        Raises:
            PatternError: ``pattern`` is not a valid regular expression.
            TypeError: ``pattern`` is neither a string nor a pattern compiled from a string, or ``handler`` is not callable.
        """
        if isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str):
            regex = pattern
        elif isinstance(pattern, str):
            try:
                regex = re.compile(pattern)
            except re.error as e:
                raise PatternError(pattern, str(e)) from e
        else:
            raise TypeError(f"Option pattern should be a str or a str-compiled re.Pattern, got {repr(pattern)}.")

        if not callable(handler):
            raise TypeError(f"Handler of option {repr(regex.pattern)} is not callable, got {type(handler).__name__}.")

        if help is None:
            help = help_from_docstring(handler)

        set_attr = object.__setattr__
        set_attr(self, "regex", regex)
        set_attr(self, "pattern_text", regex.pattern)
        set_attr(self, "description", help)
        set_attr(self, "help", "  " + regex.pattern + ":\t" + help)
        set_attr(self, "handler", handler)

    def __setattr__(self, name, value):
        raise AttributeError(f"'{self.__class__.__name__}' object is immutable, cannot set attribute '{name}'.")

    def __delattr__(self, name):
        raise AttributeError(f"'{self.__class__.__name__}' object is immutable, cannot delete attribute '{name}'.")

    def __repr__(self) -> str:
        return f"Opt({repr(self.pattern_text)}, {repr(self.description)})"

    def match(self, argument: str) -> Optional[re.Match]:
        """anchored match of the whole ``argument`` against this option's pattern.

        Returns:
            re.Match | None: the match to be passed to the handler, or None if the argument is not this option.
        """
        return self.regex.fullmatch(argument)


class ParseOutcome(Enum):
    """why :func:`parse_cmd_line_result` did or did not succeed."""

    OK = "ok"
    HELP_REQUESTED = "help_requested"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass
class ParseResult:
    """Structured outcome of a command line parse.

    Attributes:
        outcome (ParseOutcome): ``INVALID_ARGUMENT`` if any argument was unrecognised, else ``HELP_REQUESTED`` if ``--help`` was given, else ``OK``.
        unrecognised (List[str]): offending arguments in the order they appeared.
        help_requested (bool): whether ``--help`` appeared anywhere.

    Truthiness is the same boolean :func:`parse_cmd_line` returns.
    """

    outcome: ParseOutcome
    unrecognised: List[str] = field(default_factory=list)
    help_requested: bool = False

    @property
    def show_usage(self) -> bool:
        return self.outcome is not ParseOutcome.OK

    def __bool__(self) -> bool:
        return not self.show_usage


def format_usage(prog: str, opts: Iterable[Opt]) -> str:
    """build the usage banner: program name, one help line per option in registration order, then a blank line.

    Args:
        prog (str): program name, usually ``argv[0]``.
        opts (Iterable[Opt]): the registered options.

    Returns:
        str: the banner text exactly as :func:`parse_cmd_line` prints it.
    """
    lines = [f"Usage: {prog}"]
    lines.extend(opt.help for opt in opts)
    lines.append("")
    return "\n".join(lines) + "\n"


def parse_cmd_line_result(
    argv: Sequence[str],
    opts: Iterable[Opt],
    *,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> ParseResult:
    """dispatch every argument after ``argv[0]`` to the first option whose pattern matches it in full.

    An argument equal to ``--help`` requests usage. An argument no option matches is reported as
    ``Unrecognised option: <arg>`` on ``stderr`` and also requests usage, but the remaining arguments
    are still dispatched. If usage was requested, the banner from :func:`format_usage` is printed once
    to ``stdout`` after all arguments have been handled. Exceptions raised by handlers propagate.

    Args:
        argv (Sequence[str]): the argument vector, ``argv[0]`` being the program name.
        opts (Iterable[Opt]): options in priority order, the earliest match wins.
        stdout (TextIO, optional): stream for the usage banner. Defaults to ``sys.stdout``.
        stderr (TextIO, optional): stream for diagnostics. Defaults to ``sys.stderr``.

    Returns:
        ParseResult: which of ok, help requested or invalid argument happened.
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    opts = list(opts)

    help_requested = False
    unrecognised = []

    for arg in argv[1:]:
        if arg == HELP_TOKEN:
            help_requested = True
            continue

        for opt in opts:
            m = opt.match(arg)
            if m is not None:
                trace_dispatch(arg, opt.pattern_text, m)
                opt.handler(m)
                break
        else:
            trace_dispatch(arg, None, None)
            print(f"Unrecognised option: {arg}", file=stderr)
            unrecognised.append(arg)

    if unrecognised: outcome = ParseOutcome.INVALID_ARGUMENT
    elif help_requested: outcome = ParseOutcome.HELP_REQUESTED
    else: outcome = ParseOutcome.OK
    result = ParseResult(outcome, unrecognised, help_requested)

    if result.show_usage:
        print(format_usage(argv[0] if len(argv) else "", opts), end="", file=stdout)

    return result


def parse_cmd_line(
    argc: int,
    argv: Sequence[str],
    opts: Iterable[Opt],
    *,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> bool:
    """parse a command line against ``opts``, see :func:`parse_cmd_line_result` for the rules.

    Args:
        argc (int): number of entries of ``argv`` to consider, clamped to ``len(argv)``.
        argv (Sequence[str]): the argument vector, ``argv[0]`` being the program name.
        opts (Iterable[Opt]): options in priority order.
        stdout (TextIO, optional): stream for the usage banner. Defaults to ``sys.stdout``.
        stderr (TextIO, optional): stream for diagnostics. Defaults to ``sys.stderr``.

    Returns:
        bool: False if the command line was invalid or help was requested, True otherwise.
    """
    argv = list(argv)[:max(argc, 0)] if argc < len(argv) else argv
    return bool(parse_cmd_line_result(argv, opts, stdout=stdout, stderr=stderr))
