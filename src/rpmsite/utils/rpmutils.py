import os

from ..config import OUTPUT_DIR


def is_rpm(filename):
    return filename.endswith('.rpm')


def _pruned_walk(directory, exclude):
    excluded = {os.path.normpath(os.path.join(directory, e)) for e in exclude}
    for dirpath, dirs, files in os.walk(directory):
        dirs[:] = sorted(d for d in dirs if os.path.normpath(os.path.join(dirpath, d)) not in excluded)
        yield dirpath, dirs, sorted(files)


def find_rpms(directory, exclude=(OUTPUT_DIR,)):
    """All RPM files below ``directory``, sorted, skipping the staging area."""
    rpms = []
    for dirpath, _, files in _pruned_walk(directory, exclude):
        rpms.extend(os.path.join(dirpath, f) for f in files if is_rpm(f))
    return rpms


def find_package_dirs(directory, exclude=(OUTPUT_DIR,)):
    """Directories that directly contain at least one RPM file."""
    return [dirpath for dirpath, _, files in _pruned_walk(directory, exclude) if any(is_rpm(f) for f in files)]


def platform_display_name(platform):
    # epel-9-x86_64 -> Epel 9 X86_64
    return ' '.join(word[:1].upper() + word[1:] for word in platform.split('-'))


def platform_target(platform, nested):
    """Relative destination directory of a platform folder.

    In nested mode ``epel-9-x86_64`` maps to ``epel/9/x86_64``.
    """
    if nested:
        return os.path.join(*platform.split('-'))
    return platform


def version_lock(version):
    # 0.8.1 -> 0.8.*
    return version.rsplit('.', 1)[0] + '.*'
