import pytest

from optmatch import Opt


@pytest.fixture
def calls():
    return []


@pytest.fixture
def screen_opts(calls):
    return [
        Opt("--screen=([0-9]+)x([0-9]+)", "screen width and height in pixels",
            lambda m: calls.append(("screen", m.groups()))),
    ]


@pytest.fixture
def viewer_opts(calls):
    return [
        Opt("--server=(.*)", "address of server to connect to", lambda m: calls.append(("server", m[1]))),
        Opt("--reverseFluxPolarity", "operate with flux polarity reversed", lambda m: calls.append(("flux", m[0]))),
        Opt("--screen=([0-9]+)x([0-9]+)", "screen width and height in pixels",
            lambda m: calls.append(("screen", m.groups()))),
    ]
