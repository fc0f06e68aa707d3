import sys
from dataclasses import dataclass

from optmatch import *


@dataclass
class ViewerSettings:
    server_address: str = "localhost:10000"
    reverse_flux_polarity: bool = False
    window_width: int = 1280
    window_height: int = 1024


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    settings = ViewerSettings()

    def set_server(m):
        settings.server_address = m[1]

    def reverse_flux(m):
        """operate with flux polarity reversed"""
        settings.reverse_flux_polarity = True

    def set_screen(m):
        settings.window_width = int(m[1])
        settings.window_height = int(m[2])

    if not parse_cmd_line(len(argv), argv, [
        Opt("--server=(.*)", "address of server to connect to", set_server),
        Opt("--reverseFluxPolarity", None, reverse_flux),
        Opt("--screen=([0-9]+)x([0-9]+)", "screen width and height in pixels", set_screen),
    ]):
        return 1

    print(settings)
    return 0


if __name__ == "__main__":
    import rich.traceback
    rich.traceback.install(show_locals=True)
    sys.exit(main())
