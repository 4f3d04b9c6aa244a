import subprocess

from .common import *
from .. import defaults


class RpmQueryWrapper(BaseWrapper):
    # dangling links and other unreadable paths are left for rpm to reject
    package: str = Field()
    queryformat: str = Field(default=defaults.RPM_VERSION_QUERYFORMAT)

    def get_cmd(self):
        return [defaults.RPM_COMMAND, "-qp", "--qf", self.queryformat, self.package]

    def query(self) -> str:
        result = self.run_cmd(stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        lines = result.stdout.splitlines()
        return lines[0].strip() if lines else ''
