import os

from . import register
from .common import load_site, load_templates
from ..core.RepoTree import RepoTree
from ..core.VersionSet import SUBSTITUTE, VersionSet
from ..createartifacts.createindex import create_indexes
from ..utils.loggerutils import note
from ..utils.rpmutils import find_rpms


@register("regenerate-html")
class RegenerateHtmlCommand:
    def run(self, args):
        self.regenerate(args)

    def regenerate(self, args):
        input_dir = os.getcwd()
        site = load_site(args, input_dir, repo_owner=args.repo_owner, repo_name=args.repo_name)
        templates = load_templates(args, input_dir)
        repo_dir = args.repo_dir

        note("Regenerating HTML files based on existing RPMs...")
        rpms = find_rpms(repo_dir)
        note(f"Processing {len(rpms)} existing RPM files")

        note("Analyzing existing RPM versions...")
        vset = VersionSet(on_query_failure=SUBSTITUTE).scan(rpms)
        latest = vset.latest or ''
        note(f"Latest version: {latest}")
        note(f"All versions: {' '.join(vset.versions)}")

        tree = RepoTree.scan(repo_dir, categories=site.categories, root_names=site.root_allowlist)
        create_indexes(templates, tree, site.root_allowlist, latest)

        note("HTML files regenerated successfully!")
        note("")
        note("Repository Summary:")
        note(f"  Total packages: {len(rpms)}")
        note(f"  All versions: {' '.join(vset.versions)}")
        note(f"  Latest version: {latest}")
