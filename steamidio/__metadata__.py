from typing import Literal, NamedTuple

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
)


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: Literal["alpha", "beta", "candidate", "final"]


__title__ = "steamidio"
__author__ = "Gobot1234"
__license__ = "MIT"
__version__ = "0.3.0"
version_info = VersionInfo(major=0, minor=3, micro=0, releaselevel="final")
