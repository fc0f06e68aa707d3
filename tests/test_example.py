import importlib.util
from pathlib import Path

import pytest


@pytest.fixture(scope="module")
def screen_example():
    path = Path(__file__).parents[1] / "examples" / "screen.py"
    spec = importlib.util.spec_from_file_location("screen_example", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_example_applies_settings(screen_example, capsys):
    argv = ["screen", "--server=10.0.0.1:9000", "--reverseFluxPolarity", "--screen=800x600"]
    assert screen_example.main(argv) == 0
    out = capsys.readouterr().out
    assert "server_address='10.0.0.1:9000'" in out
    assert "reverse_flux_polarity=True" in out
    assert "window_width=800" in out
    assert "window_height=600" in out


def test_example_help(screen_example, capsys):
    assert screen_example.main(["screen", "--help"]) == 1
    assert capsys.readouterr().out == (
        "Usage: screen\n"
        "  --server=(.*):\taddress of server to connect to\n"
        "  --reverseFluxPolarity:\toperate with flux polarity reversed\n"
        "  --screen=([0-9]+)x([0-9]+):\tscreen width and height in pixels\n"
        "\n"
    )
