import os
import shutil

from ..config import OUTPUT_DIR, REPODATA_DIRNAME, STYLESHEETS
from ..core.RepoTree import PlatformDirectory
from ..errors import EmptyInput, SourceNotFound
from ..utils.loggerutils import note, warn
from ..utils.rpmutils import find_rpms, platform_target
from ..utils.runcreaterepo import regenerate_metadata

CREATE = 'create'
MERGE = 'merge'


class SyncResult:
    """What a tree sync wrote into the destination."""

    def __init__(self, destination, mode):
        self.destination = destination
        self.mode = mode
        self.platforms = []
        self.copied = []
        self.metadata_dirs = []


def validate_source(source):
    if not os.path.isdir(source):
        raise SourceNotFound(source)
    rpms = find_rpms(source, exclude=())
    if not rpms:
        raise EmptyInput(source)
    return rpms


def platform_dirs(source):
    return [name for name in sorted(os.listdir(source)) if os.path.isdir(os.path.join(source, name))]


def copy_platform(platform_src, target_dir, copy_repodata=False):
    os.makedirs(target_dir, exist_ok=True)
    copied = []
    for rpm in find_rpms(platform_src, exclude=()):
        outname = os.path.join(target_dir, os.path.basename(rpm))
        shutil.copy2(rpm, outname)
        copied.append(outname)

    repodata = os.path.join(platform_src, REPODATA_DIRNAME)
    if copy_repodata and os.path.isdir(repodata):
        shutil.copytree(repodata, os.path.join(target_dir, REPODATA_DIRNAME), dirs_exist_ok=True)
    return copied


def sync_tree(source, destination, mode=CREATE, exclude=(OUTPUT_DIR,)):
    """Mirror the platform folders of ``source`` into ``destination``.

    ``create`` starts from an empty destination and keeps one directory
    per platform; ``merge`` keeps the destination and nests platform
    names on their dashes. Metadata is regenerated afterwards for every
    package directory of the destination.
    """
    if mode not in (CREATE, MERGE):
        raise ValueError(f"unsupported sync mode: {mode}")
    validate_source(source)

    if mode == CREATE:
        note("Creating RPM repository structure...")
        if os.path.exists(destination):
            shutil.rmtree(destination)
    os.makedirs(destination, exist_ok=True)

    result = SyncResult(destination, mode)
    note("Copying RPM files...")
    for platform in platform_dirs(source):
        target_dir = os.path.join(destination, platform_target(platform, nested=(mode == MERGE)))
        copied = copy_platform(os.path.join(source, platform), target_dir, copy_repodata=(mode == CREATE))
        note(f"  {platform}: copied {len(copied)} RPM files")
        result.copied.extend(copied)
        result.platforms.append(PlatformDirectory(platform, target_dir))

    note("Regenerating RPM repository metadata")
    result.metadata_dirs = regenerate_metadata(destination, exclude=exclude)
    return result


def copy_stylesheets(input_dir, destination, names=STYLESHEETS):
    copied = []
    for name in names:
        src = os.path.join(input_dir, name)
        if not os.path.isfile(src):
            warn(f"{name} not found in {input_dir}")
            continue
        shutil.copyfile(src, os.path.join(destination, name))
        note(f"Copied {name}")
        copied.append(name)
    return copied
