from functools import partial

from optmatch import Opt
from optmatch.utils.docstring import help_from_docstring


def reverse_flux(m):
    """operate with flux polarity reversed"""


def set_server(m, default_port=10000):
    """address of server to connect to

    Args:
        m (re.Match): the match, group 1 holds the address.
        default_port (int): port used when the address has none.
    """


class SetLevel:
    """logging verbosity, 0 to 5"""

    def __call__(self, m):
        pass


def test_one_line_docstring():
    assert help_from_docstring(reverse_flux) == "operate with flux polarity reversed"


def test_google_docstring_uses_short_description():
    assert help_from_docstring(set_server) == "address of server to connect to"


def test_callable_instance():
    assert help_from_docstring(SetLevel()) == "logging verbosity, 0 to 5"


def test_partial_uses_wrapped_function():
    assert help_from_docstring(partial(set_server, default_port=80)) == "address of server to connect to"


def test_undocumented_handler():
    assert help_from_docstring(lambda m: None) == ""


def test_opt_without_help_reads_handler_docstring():
    opt = Opt("--reverseFluxPolarity", None, reverse_flux)
    assert opt.help == "  --reverseFluxPolarity:\toperate with flux polarity reversed"


def test_explicit_help_overrides_docstring():
    opt = Opt("--reverseFluxPolarity", "flip it", reverse_flux)
    assert opt.description == "flip it"
