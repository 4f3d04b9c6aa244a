import os
import tempfile

from ..config import INDEX_FILENAME
from ..core.Package import PackageEntry
from ..core.VersionSet import FAIL
from ..utils.loggerutils import note
from ..utils.rpmutils import find_rpms, platform_display_name

OVERVIEW_TEMPLATE = 'overview.html.template'
PLATFORM_TEMPLATE = 'platform.html.template'
PLATFORM_CARD_TEMPLATE = 'platform-card.html.template'
RPM_ITEM_TEMPLATE = 'rpm-item.html.template'
VERSION_BADGE_TEMPLATE = 'version-badge.html.template'

# never rendered as platform cards
SKIP_PLATFORMS = ('repodata', 'templates')


def collect_packages(platform, on_query_failure=FAIL):
    """Read the package entries of a platform directory that was just populated."""
    platform.packages = sorted(
        (PackageEntry.from_file(location, on_query_failure=on_query_failure) for location in find_rpms(platform.path)),
        key=lambda pkg: pkg.filename,
    )
    return platform.packages


def render_version_badges(templates, versions):
    return ''.join(templates.fragment(VERSION_BADGE_TEMPLATE, {'VERSION': v}) for v in versions)


def render_rpm_list(templates, platform):
    items = []
    for pkg in platform.packages:
        items.append(templates.fragment(RPM_ITEM_TEMPLATE, {
            'PACKAGE_NAME': pkg.name,
            'VERSION': pkg.version,
            'RPM_FILE': pkg.filename,
        }))
    return ''.join(items)


def create_platform_page(templates, platform, timestamp):
    note(f"Creating platform page for {platform.name}...")
    with tempfile.NamedTemporaryFile('w', encoding='utf-8', suffix='.rpmlist') as rpm_list:
        rpm_list.write(render_rpm_list(templates, platform))
        rpm_list.flush()
        return templates.render(PLATFORM_TEMPLATE, os.path.join(platform.path, INDEX_FILENAME), {
            'DISPLAY_NAME': platform_display_name(platform.name),
            'PLATFORM_RPMS': str(len(platform.packages)),
            'RPM_LIST_FILE': rpm_list.name,
            'TIMESTAMP': timestamp,
        })


def create_overview(templates, destination, platforms, versions, latest_version, repo_owner, repo_name, timestamp):
    """Write the landing page and one page per platform of a fresh repository."""
    cards = []
    for platform in platforms:
        if platform.name in SKIP_PLATFORMS:
            continue
        cards.append(templates.fragment(PLATFORM_CARD_TEMPLATE, {
            'DISPLAY_NAME': platform_display_name(platform.name),
            'PLATFORM_RPMS': str(len(platform.packages)),
            'PLATFORM': platform.name,
        }))
        create_platform_page(templates, platform, timestamp)

    note("Creating main repository index...")
    return templates.render(OVERVIEW_TEMPLATE, os.path.join(destination, INDEX_FILENAME), {
        'LATEST_VERSION': latest_version,
        'VERSION_BADGES': render_version_badges(templates, versions),
        'PLATFORM_CARDS': ''.join(cards),
        'TIMESTAMP': timestamp,
        'REPO_OWNER': repo_owner,
        'REPO_NAME': repo_name,
    })
