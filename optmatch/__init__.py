"""optmatch: match each command line argument against regular expressions and dispatch it to a handler."""

__version__ = '0.1.0'

from .core import (
    HELP_TOKEN,
    Handler,
    Opt,
    ParseOutcome,
    ParseResult,
    PatternError,
    format_usage,
    parse_cmd_line,
    parse_cmd_line_result,
)
