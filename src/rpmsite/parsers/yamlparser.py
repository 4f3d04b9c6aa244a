import os
from typing import Any
from typing import Dict
import yaml
import pydantic

from ..config import SITE_CONFIG_FILENAME
from ..utils.loggerutils import die, note
from ..validators.siteschema import SiteSchema, Site


def parse_yaml(filename: str | None, overrides: Dict[str, Any] | None = None) -> Site:
    _yml: Dict[str, Any] = {}
    if filename:
        note(f"Reading site configuration from {filename}")
        with open(filename, 'r') as file:
            _yml = yaml.safe_load(file) or {}
        if not isinstance(_yml, dict):
            die(f"Failed to verify configuration {filename}: not a mapping")

    # yaml turns 1d into a string already, but plain numbers need help
    if 'metadata_expire' in _yml:
        _yml['metadata_expire'] = str(_yml['metadata_expire'])

    for key, value in (overrides or {}).items():
        if value is not None:
            _yml[key] = value

    try:
        model = SiteSchema(**_yml)
    except pydantic.ValidationError as se:
        die(f"Failed to verify configuration\n{se}")

    return Site(model)


def find_site_config(filename: str | None, directory: str) -> str | None:
    if filename:
        if not os.path.isfile(filename):
            die(f"Site configuration not found: {filename}")
        return filename
    candidate = os.path.join(directory, SITE_CONFIG_FILENAME)
    return candidate if os.path.isfile(candidate) else None
