import os
import re
from typing import Iterable, Optional

import rich.traceback
from rich.console import Console
from rich.pretty import pprint

import optmatch


def env_flag(name: str) -> bool:
    """whether environment variable ``name`` is set to one of 1, true or yes (case insensitive)."""
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes"}


VERBOSE = env_flag("OPTMATCH_VERBOSE")

suppress_traceback = [optmatch]


def trace_dispatch(token: str, pattern: Optional[str], match: Optional[re.Match]):
    """pretty-print one dispatch decision to stderr when ``OPTMATCH_VERBOSE`` is set.

    Args:
        token (str): the raw argument being dispatched.
        pattern (str, optional): pattern text of the descriptor that fired, None if nothing did.
        match (re.Match, optional): the full match handed to the handler.
    """
    if not VERBOSE:
        return
    data = dict(token=token, pattern=pattern, groups=match.groups() if match is not None else None)
    pprint(data, console=Console(stderr=True), max_length=16)


# Hide parser frames from rich tracebacks raised inside option handlers, unless verbose.
_old_from_exception = rich.traceback.Traceback.from_exception
def _rich_traceback_from_exception(cls, *args, suppress:Iterable=(), **kwargs):
    suppress = list(suppress)
    if not VERBOSE:
        suppress.extend(suppress_traceback)
    kwargs['locals_max_length'] = int(os.environ.get("OPTMATCH_LOCALS_MAXLEN", 3))
    return _old_from_exception(*args, suppress=suppress, **kwargs)
rich.traceback.Traceback.from_exception = classmethod(_rich_traceback_from_exception)
