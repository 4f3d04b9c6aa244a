import os

from . import register
from .common import load_site
from ..core.VersionSet import SUBSTITUTE, VersionSet
from ..createartifacts.createtree import MERGE, sync_tree, validate_source
from ..utils.loggerutils import note
from ..utils.rpmutils import find_rpms


@register("merge")
class MergeCommand:
    def run(self, args):
        self.merge(args)

    def merge(self, args):
        site = load_site(args, os.getcwd())
        source = args.copr_download_dir
        destination = args.repo_output_dir

        rpms = validate_source(source)
        note(f"Processing {len(rpms)} RPM files from {source}")
        latest = VersionSet(on_query_failure=SUBSTITUTE).scan(rpms).latest
        note(f"Detected latest version: {latest}")

        result = sync_tree(source, destination, mode=MERGE)

        note("RPMs merged successfully!")
        note("")
        note("Repository Summary:")
        note(f"  URL: {site.site_url}/")
        note(f"  Total packages: {len(find_rpms(destination))}")
        note(f"  Output directory: {destination}")
        note(f"  Latest version: {latest}")
        note(f"  Metadata directories: {len(result.metadata_dirs)}")
