import html
import math
import os
import tempfile
from datetime import datetime, timezone

from ..config import INDEX_FILENAME
from ..utils.rpmutils import version_lock
from ..utils.loggerutils import note

ROOT_TEMPLATE = 'index.html.template'
SUB_TEMPLATE = 'sub.index.html.template'
DIR_ENTRY_TEMPLATE = 'dir-entry.html.template'
FILE_ENTRY_TEMPLATE = 'file-entry.html.template'

DIR_SIZE = '--'


def utc_timestamp(now=None):
    now = now or datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%d %H:%M:%S UTC')


def format_mtime(mtime):
    return datetime.fromtimestamp(mtime, timezone.utc).strftime('%Y-%m-%d %H:%M')


def human_size(num_bytes):
    """Size in the style of ``du -h``: 512, 4.0K, 12K, 1.5M.

    Like du, values are rounded up.
    """
    if num_bytes < 1024:
        return f'{num_bytes}'
    size = float(num_bytes)
    for unit in ('K', 'M', 'G', 'T'):
        size /= 1024.0
        tenths = math.ceil(size * 10) / 10
        if tenths < 10:
            return f'{tenths:.1f}{unit}'
        whole = math.ceil(size)
        if whole < 1024 or unit == 'T':
            return f'{whole}{unit}'


def render_row(templates, entry):
    name = html.escape(entry.name)
    if entry.is_dir:
        return templates.fragment(DIR_ENTRY_TEMPLATE, {
            'NAME': name,
            'LAST_MODIFIED': format_mtime(entry.mtime) if entry.mtime is not None else '',
            'SIZE': DIR_SIZE,
        })
    return templates.fragment(FILE_ENTRY_TEMPLATE, {
        'NAME': name,
        'LAST_MODIFIED': format_mtime(entry.mtime),
        'SIZE': human_size(entry.size),
    })


def parent_row(templates):
    return templates.fragment(DIR_ENTRY_TEMPLATE, {'NAME': '..', 'LAST_MODIFIED': '', 'SIZE': ''})


def visible_entries(listing, root_allowlist):
    if listing.is_root:
        # only the allow-listed names, in allow-list order
        return [listing.get(name) for name in root_allowlist if listing.get(name) is not None]
    return [entry for entry in listing if entry.name != INDEX_FILENAME]


def render_rows(templates, listing, root_allowlist):
    rows = []
    if not listing.is_root:
        rows.append(parent_row(templates))
    for entry in visible_entries(listing, root_allowlist):
        rows.append(render_row(templates, entry))
    return ''.join(rows)


def write_index(templates, tree, listing, root_allowlist, latest_version, timestamp):
    rows = render_rows(templates, listing, root_allowlist)
    outname = os.path.join(tree.root, listing.path, INDEX_FILENAME)
    template = ROOT_TEMPLATE if listing.is_root else SUB_TEMPLATE

    # rows can be large, hand them over through a file
    with tempfile.NamedTemporaryFile('w', encoding='utf-8', suffix='.rows') as rows_file:
        rows_file.write(rows)
        rows_file.flush()
        templates.render(template, outname, {
            'TABLE_ROWS_FILE': rows_file.name,
            'LATEST_VERSION': latest_version,
            'LATEST_VERSION_LOCK': version_lock(latest_version),
            'TIMESTAMP': timestamp,
        })
    return outname


def create_indexes(templates, tree, root_allowlist, latest_version, timestamp=None):
    """Write one index.html per directory of the snapshot ``tree``."""
    timestamp = timestamp or utc_timestamp()
    written = []
    for listing in tree:
        note(f"Processing directory: {listing.path}")
        written.append(write_index(templates, tree, listing, root_allowlist, latest_version, timestamp))
    return written
