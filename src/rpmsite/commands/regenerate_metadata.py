from . import register
from ..utils.loggerutils import note
from ..utils.runcreaterepo import regenerate_metadata


@register("regenerate-metadata")
class RegenerateMetadataCommand:
    def run(self, args):
        note("Regenerating RPM repository metadata")
        repos = regenerate_metadata(args.repo_dir)
        if not repos:
            note(f"No RPM files found in {args.repo_dir}")
            return
        note("RPM repository metadata regenerated successfully!")
