import os

from ..config import OUTPUT_DIR
from ..wrappers import CreaterepoWrapper
from ..utils.loggerutils import note
from ..utils.rpmutils import find_package_dirs


def run_createrepo(rpmdir):
    cr = CreaterepoWrapper(directory=rpmdir)
    cr.run_cmd()


def regenerate_metadata(root, exclude=(OUTPUT_DIR,)):
    """Run createrepo once for every directory below root holding RPMs.

    Returns the directories that were processed, in scan order.
    """
    repos = find_package_dirs(root, exclude=exclude)
    for repo in repos:
        note(f"Processing repo: {os.path.relpath(repo, root)}")
        run_createrepo(repo)
    return repos
