""" Package entry

"""
import functools
import os
import re

from .VersionSet import FAIL, query_version, version_key


def name_from_filename(filename):
    """Best-effort package name of an RPM file name.

    ``flightctl-agent-0.8.1-1.el9.x86_64.rpm`` gives ``flightctl-agent``,
    ``flightctl-0.8.1-1.el9.x86_64.rpm`` gives ``flightctl``.
    """
    match = re.match(r'^([^-]+-[^-]+)-[0-9]+\.[0-9]+\.[0-9]+', filename)
    if match:
        return match.group(1)
    match = re.match(r'^([^-]+)-[0-9]+\.[0-9]+\.[0-9]+', filename)
    if match:
        return match.group(1)
    return filename


@functools.total_ordering
class PackageEntry:
    def __init__(self, location, version):
        self._location = location
        self._version = version

    @classmethod
    def from_file(cls, location, on_query_failure=FAIL):
        return cls(location, query_version(location, on_query_failure=on_query_failure))

    @property
    def location(self) -> str:
        return self._location

    @property
    def filename(self) -> str:
        return os.path.basename(self._location)

    @property
    def name(self) -> str:
        return name_from_filename(self.filename)

    @property
    def version(self) -> str:
        return self._version

    def __eq__(self, other):
        return (self.filename, self.version) == (other.filename, other.version)

    def __lt__(self, other):
        if self.name == other.name:
            return version_key(self.version) < version_key(other.version)
        return self.name < other.name

    def __hash__(self):
        return hash((self.filename, self.version))

    def __str__(self):
        return f"{self.name}-{self.version}"

    def __repr__(self):
        return f"PackageEntry({self.filename!r}, {self.version!r})"

# vim: sw=4 et
