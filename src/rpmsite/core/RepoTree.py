""" Repository tree snapshot

A RepoTree is the description of a destination tree that the page
generators consume. It is taken once, after packages and metadata are
in place, so page rendering never depends on what happens to the
filesystem afterwards.
"""

import os

from ..config import INDEX_FILENAME, OUTPUT_DIR


class Entry:
    def __init__(self, name, is_dir, size, mtime):
        self.name = name
        self.is_dir = is_dir
        self.size = size
        self.mtime = mtime

    @classmethod
    def from_path(cls, path):
        st = os.stat(path)
        if os.path.isdir(path):
            return cls(os.path.basename(path), True, None, _tree_mtime(path, st.st_mtime))
        return cls(os.path.basename(path), False, st.st_size, st.st_mtime)

    def __repr__(self):
        kind = 'dir' if self.is_dir else 'file'
        return f"Entry({self.name!r}, {kind})"


def _tree_mtime(path, mtime):
    # newest modification anywhere below path, like du --time
    for dirpath, dirs, files in os.walk(path):
        for name in dirs + files:
            try:
                mtime = max(mtime, os.lstat(os.path.join(dirpath, name)).st_mtime)
            except FileNotFoundError:
                continue
    return mtime


class DirListing:
    def __init__(self, path, entries):
        self.path = path
        self.entries = sorted(entries, key=lambda e: e.name)

    @property
    def is_root(self):
        return self.path == '.'

    def names(self):
        return [e.name for e in self.entries]

    def get(self, name):
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def __iter__(self):
        return iter(self.entries)


class PlatformDirectory:
    """One per-OS/architecture folder with its packages."""

    def __init__(self, name, path, packages=None):
        self.name = name
        self.path = path
        self.packages = sorted(packages or [], key=lambda p: p.filename)

    def __str__(self):
        return self.name


class RepoTree:
    def __init__(self, root):
        self.root = root
        self.listings = {}

    def add_listing(self, listing):
        self.listings[listing.path] = listing

    def listing(self, relpath):
        return self.listings.get(os.path.normpath(relpath))

    def directories(self):
        """Relative directory paths, root first, then sorted."""
        return sorted(self.listings, key=lambda p: (p != '.', p))

    def __iter__(self):
        return (self.listings[p] for p in self.directories())

    @classmethod
    def scan(cls, root, categories=None, root_names=None, exclude=(OUTPUT_DIR,)):
        """Snapshot ``root``.

        The root directory itself is always listed, restricted to
        ``root_names`` when given. Below it only the ``categories``
        directories are walked, or every directory except ``exclude``
        when no categories are given. Hidden names are never listed.
        """
        tree = cls(root)
        tree.add_listing(_scan_dir(root, '.', names=root_names))

        if categories is None:
            tops = [name for name in sorted(os.listdir(root))
                    if _visible(name) and name not in exclude and os.path.isdir(os.path.join(root, name))]
        else:
            tops = [name for name in categories if os.path.isdir(os.path.join(root, name))]

        for top in tops:
            for dirpath, dirs, _ in os.walk(os.path.join(root, top)):
                dirs[:] = sorted(d for d in dirs if _visible(d))
                relpath = os.path.relpath(dirpath, root)
                tree.add_listing(_scan_dir(dirpath, relpath))
        return tree


def _visible(name):
    return not name.startswith('.')


def _scan_dir(path, relpath, names=None):
    entries = []
    for name in os.listdir(path) if names is None else names:
        if name == INDEX_FILENAME or not _visible(name):
            continue
        fullname = os.path.join(path, name)
        # dangling symlinks
        if not os.path.exists(fullname):
            continue
        entries.append(Entry.from_path(fullname))
    return DirListing(relpath, entries)

# vim: sw=4 et
