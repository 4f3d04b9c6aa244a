import os

from ..config import PACKAGE_TEMPLATES_DIR, TEMPLATES_DIRNAME
from ..core.Template import TemplateDir
from ..parsers.yamlparser import find_site_config, parse_yaml
from ..utils.loggerutils import die


def load_templates(args, input_dir):
    if args.templates_dir:
        if not os.path.isdir(args.templates_dir):
            die(f"Templates directory not found: {args.templates_dir}")
        return TemplateDir(args.templates_dir)
    local = os.path.join(input_dir, TEMPLATES_DIRNAME)
    if os.path.isdir(local):
        return TemplateDir(local)
    return TemplateDir(PACKAGE_TEMPLATES_DIR)


def load_site(args, input_dir, **overrides):
    return parse_yaml(find_site_config(args.config, input_dir), overrides)
