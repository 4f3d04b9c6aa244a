"""Schema definition for rpmsite.yaml files"""

from pydantic import BaseModel, Field

from typing import Optional

from ..config import DEFAULT_REPO_NAME, DEFAULT_REPO_OWNER


class site_schema_distro(BaseModel, extra='forbid'):
    label: str
    # relative to site_url, may use $basearch and $releasever
    path: str


def _default_distros():
    return {
        'epel': site_schema_distro(label='EPEL', path='epel-9-$basearch/'),
        'fedora': site_schema_distro(label='Fedora', path='fedora-$releasever-$basearch/'),
    }


class SiteSchema(BaseModel, extra='forbid'):
    repo_owner: str = DEFAULT_REPO_OWNER
    repo_name: str = DEFAULT_REPO_NAME
    repo_id: Optional[str] = None
    title: str = 'Flight Control RPM Repository'
    site_url: str = 'https://rpm.flightctl.io'
    gpgkey: str = 'https://download.copr.fedorainfracloud.org/results/@redhat-et/flightctl/pubkey.gpg'
    metadata_expire: str = '1d'
    categories: list[str] = Field(default_factory=lambda: ['epel', 'fedora'])
    distros: dict[str, site_schema_distro] = Field(default_factory=_default_distros)


class Site:
    """Validated site settings with the derived values the generators need."""

    def __init__(self, model):
        self.model = model

    def __getattr__(self, name):
        return getattr(self.model, name)

    @property
    def repo_id(self):
        return self.model.repo_id or self.model.repo_name

    @property
    def distros(self):
        return {family: SiteDistro(self, distro) for family, distro in self.model.distros.items()}

    def repo_config_filename(self, family):
        return f"{self.repo_name}-{family}.repo"

    @property
    def repo_config_files(self):
        return [self.repo_config_filename(family) for family in self.model.distros]

    @property
    def root_allowlist(self):
        return list(self.categories) + self.repo_config_files


class SiteDistro:
    def __init__(self, site, distro):
        self.label = distro.label
        self.baseurl = site.site_url.rstrip('/') + '/' + distro.path.lstrip('/')
