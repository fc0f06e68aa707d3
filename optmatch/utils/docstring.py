"""help descriptions recovered from handler docstrings, so that an :class:`~optmatch.Opt` may be registered without repeating itself."""
from __future__ import annotations

from typing import Callable

from docstring_parser import parse


def help_from_docstring(handler: Callable) -> str:
    """Gets the one-line description of ``handler`` from its docstring.

    Google, reST, numpydoc and epydoc styles are all understood. A functools.partial
    falls back to the docstring of the wrapped function.

    :param handler: The option handler.
    :return: The short description, or an empty string if the handler is undocumented.
    """
    doc = getattr(handler, "__doc__", None)
    if doc is None or (hasattr(handler, "func") and doc == type(handler).__doc__):
        doc = getattr(getattr(handler, "func", None), "__doc__", None)
    if not doc:
        return ""

    docstring = parse(doc)
    description = docstring.short_description or ""
    return " ".join(description.split())
