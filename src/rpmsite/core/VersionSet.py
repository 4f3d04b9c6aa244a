""" Version resolution over a collection of RPM files

"""

import functools

import rpm

from ..config import UNKNOWN_VERSION
from ..errors import ExternalToolFailure
from ..utils.loggerutils import warn
from ..utils.rpmutils import version_lock
from ..wrappers import RpmQueryWrapper

FAIL = 'fail'
SUBSTITUTE = 'substitute'


def compare_versions(one, two):
    return rpm.labelCompare((None, one, None), (None, two, None))


version_key = functools.cmp_to_key(compare_versions)


def sort_versions(versions):
    """Sort ascending in rpm version order and drop repeated strings."""
    out = []
    for version in sorted(versions, key=version_key):
        if version not in out:
            out.append(version)
    return out


def query_version(location, on_query_failure=FAIL):
    try:
        return RpmQueryWrapper(package=str(location)).query()
    except ExternalToolFailure as err:
        if on_query_failure == FAIL:
            raise
        warn(f"Could not read the version of {location}", details=err.output)
        return UNKNOWN_VERSION


class VersionSet:
    """Versions found in a set of packages.

    ``on_query_failure`` decides what a failing ``rpm -qp`` does:
    ``fail`` aborts, ``substitute`` records the version as ``unknown``.
    """

    def __init__(self, on_query_failure=FAIL):
        if on_query_failure not in (FAIL, SUBSTITUTE):
            raise ValueError(f"unsupported query failure policy: {on_query_failure}")
        self.on_query_failure = on_query_failure
        self.found = []

    def add(self, version):
        self.found.append(version)

    def scan(self, locations):
        for location in locations:
            self.add(query_version(location, on_query_failure=self.on_query_failure))
        return self

    @property
    def versions(self):
        return sort_versions(self.found)

    @property
    def latest(self):
        versions = self.versions
        return versions[-1] if versions else None

    @property
    def lock(self):
        latest = self.latest
        return version_lock(latest) if latest is not None else None

# vim: sw=4 et
