from .createrepo import CreaterepoWrapper
from .rpmquery import RpmQueryWrapper
