""" Placeholder template renderer

Templates are plain text files with ``{{KEY}}`` tokens. Rendering scans
the template text once and replaces each token with its value; values
are emitted as they are and never scanned for tokens again.

A key ending in ``_FILE`` is a reference: its value is the path of a
file whose contents fill the placeholder named without the suffix.
"""

import os
import re
from pathlib import Path

from ..errors import TemplateNotFound, UnresolvedPlaceholder
from ..utils.loggerutils import warn

PLACEHOLDER_RE = re.compile(r'\{\{([A-Za-z0-9_]+)\}\}')
FILE_SUFFIX = '_FILE'


def placeholders(text):
    """Return the placeholder names referenced by ``text`` in order of appearance."""
    seen = []
    for match in PLACEHOLDER_RE.finditer(text):
        if match.group(1) not in seen:
            seen.append(match.group(1))
    return seen


def resolve_values(values):
    """Turn ``KEY_FILE`` references into plain ``KEY`` values.

    Later pairs win when the same key is given twice.
    """
    resolved = {}
    for key, value in values.items():
        if key.endswith(FILE_SUFFIX):
            key = key.removesuffix(FILE_SUFFIX)
            value = Path(value).read_text(encoding='utf-8')
        resolved[key] = str(value)
    return resolved


def _substitute(text, resolved, name):
    missing = [key for key in placeholders(text) if key not in resolved]
    if missing:
        raise UnresolvedPlaceholder(name, missing)
    return PLACEHOLDER_RE.sub(lambda m: resolved[m.group(1)], text)


def render_string(text, values, name='<string>'):
    return _substitute(text, resolve_values(values), name)


def render_template(template, output, values):
    """Render ``template`` into ``output``.

    ``values`` is an ordered mapping of placeholder names to values.
    The template file is left untouched. Nothing is written when a
    placeholder is left without a value.
    """
    if not os.path.isfile(template):
        raise TemplateNotFound(template)
    text = Path(template).read_text(encoding='utf-8')

    resolved = resolve_values(values)
    unused = [key for key in resolved if key not in placeholders(text)]
    if unused:
        warn(f"{os.path.basename(template)} does not use {', '.join(unused)}")

    content = _substitute(text, resolved, template)
    Path(output).write_text(content, encoding='utf-8')
    return output


class TemplateDir:
    """Templates looked up by file name inside one directory."""

    def __init__(self, directory):
        self.directory = str(directory)

    def path(self, name):
        return os.path.join(self.directory, name)

    def read(self, name):
        path = self.path(name)
        if not os.path.isfile(path):
            raise TemplateNotFound(path)
        return Path(path).read_text(encoding='utf-8')

    def fragment(self, name, values):
        return render_string(self.read(name), values, name=self.path(name))

    def render(self, name, output, values):
        return render_template(self.path(name), output, values)

# vim: sw=4 et
