import os

from ..utils.loggerutils import note

REPO_CONFIG_TEMPLATE = 'repo-config.template'


def create_repo_configs(templates, destination, site):
    """Write one .repo file per distribution family of the site config."""
    note("Creating repository configuration files...")
    written = []
    for family, distro in site.distros.items():
        outname = os.path.join(destination, site.repo_config_filename(family))
        templates.render(REPO_CONFIG_TEMPLATE, outname, {
            'REPO_ID': site.repo_id,
            'REPO_TITLE': site.title,
            'DISTRO_LABEL': distro.label,
            'BASEURL': distro.baseurl,
            'GPGKEY': site.gpgkey,
            'METADATA_EXPIRE': site.metadata_expire,
        })
        written.append(outname)
    return written
