import os

from . import register
from .common import load_site, load_templates
from ..config import OUTPUT_DIR
from ..core.VersionSet import FAIL, VersionSet
from ..createartifacts.createindex import utc_timestamp
from ..createartifacts.createoverview import collect_packages, create_overview
from ..createartifacts.createrepoconfig import create_repo_configs
from ..createartifacts.createtree import CREATE, copy_stylesheets, sync_tree, validate_source
from ..utils.loggerutils import note
from ..utils.rpmutils import find_rpms


@register("create")
class CreateCommand:
    def run(self, args):
        self.create(args)

    def create(self, args):
        input_dir = os.getcwd()
        site = load_site(args, input_dir, repo_owner=args.repo_owner, repo_name=args.repo_name)
        templates = load_templates(args, input_dir)
        source = args.copr_download_dir
        destination = args.repo_output_dir or os.path.join(OUTPUT_DIR, f"{site.repo_name}-rpm")

        rpms = validate_source(source)
        note(f"Processing {len(rpms)} RPM files from {source}")
        latest = VersionSet(on_query_failure=FAIL).scan(rpms).latest
        note(f"Detected latest version: {latest}")

        result = sync_tree(source, destination, mode=CREATE)
        create_repo_configs(templates, destination, site)

        # versions of what ended up in the repository
        repo_versions = VersionSet(on_query_failure=FAIL)
        for platform in result.platforms:
            for pkg in collect_packages(platform, on_query_failure=FAIL):
                repo_versions.add(pkg.version)

        timestamp = utc_timestamp()
        create_overview(templates, destination, result.platforms, repo_versions.versions, latest,
                        site.repo_owner, site.repo_name, timestamp)

        note("Copying CSS files...")
        copy_stylesheets(input_dir, destination)

        note("RPM repository structure created successfully!")
        note("")
        note("Repository Summary:")
        note(f"  URL: {site.site_url}/")
        note(f"  Total packages: {len(find_rpms(destination))}")
        note(f"  Output directory: {destination}")
        note(f"  Latest version: {latest}")
        note(f"  Metadata directories: {len(result.metadata_dirs)}")
