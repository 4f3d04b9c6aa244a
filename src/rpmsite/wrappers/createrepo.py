from .common import *
from .. import defaults


class CreaterepoWrapper(BaseWrapper):
    directory: str = Field()
    checksum_type: str = Field(default=defaults.CREATEREPO_CHECKSUM_TYPE)

    def get_cmd(self):
        return [defaults.CREATEREPO_COMMAND, self.directory, f"--checksum={self.checksum_type}"]
