"""Version of the extended-collections package."""

import re
from typing import NamedTuple

__all__ = ["version", "version_info", "VersionInfo"]


version = "2.1.0"


_version_pattern = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:([a-z]+)(\d*))?")

_release_levels = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}


class VersionInfo(NamedTuple):
    """Version as a tuple that can be compared like ``sys.version_info``."""

    major: int
    minor: int
    micro: int
    releaselevel: str = "final"
    serial: int = 0

    @classmethod
    def from_str(cls, version_str: str) -> "VersionInfo":
        match = _version_pattern.match(version_str)
        if not match:
            raise ValueError(f"Invalid version: {version_str!r}.")
        major, minor, micro, level, serial = match.groups()
        return cls(
            int(major),
            int(minor),
            int(micro),
            _release_levels.get(level[:1], "final") if level else "final",
            int(serial) if serial else 0,
        )

    def __str__(self) -> str:
        release = f"{self.major}.{self.minor}.{self.micro}"
        if self.releaselevel != "final":
            release += f"{self.releaselevel[:1]}{self.serial}"
        return release


version_info = VersionInfo.from_str(version)
