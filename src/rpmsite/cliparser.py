from argparse import ArgumentParser
from rpmsite import __version__
from rpmsite.config import DEFAULT_COPR_DOWNLOAD_DIR


def build_parser():
    parser = ArgumentParser('rpmsite', description='Assemble a static RPM repository website')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest="command", required=True, help='sub-command help')

    # One sub parser for each command
    create_parser = subparsers.add_parser('create', help='Create a fresh repository from COPR downloads')
    merge_parser = subparsers.add_parser('merge', help='Merge COPR downloads into an existing repository')
    metadata_parser = subparsers.add_parser('regenerate-metadata', help='Run createrepo_c for every package directory')
    html_parser = subparsers.add_parser('regenerate-html', help='Rewrite the index.html directory listings')

    # Generic options
    for cmd_parser in (create_parser, merge_parser, metadata_parser, html_parser):
        cmd_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
        cmd_parser.add_argument('-c', '--config', default=None, help='Site configuration YAML file')

    for cmd_parser in (create_parser, html_parser):
        cmd_parser.add_argument('-t', '--templates-dir', default=None, help='Directory containing the page templates')

    for cmd_parser in (create_parser, merge_parser):
        cmd_parser.add_argument('copr_download_dir', nargs='?', default=DEFAULT_COPR_DOWNLOAD_DIR, help='Directory with one sub directory of RPMs per platform')

    # create command options
    create_parser.add_argument('repo_output_dir', nargs='?', default=None, help='Directory to write the repository to (default: .output/<repo_name>-rpm)')
    create_parser.add_argument('repo_owner', nargs='?', default=None, help='Owner of the source repository')
    create_parser.add_argument('repo_name', nargs='?', default=None, help='Name of the source repository')

    # merge command options
    merge_parser.add_argument('repo_output_dir', nargs='?', default='.', help='Existing repository checkout (default: current directory)')

    # regenerate-metadata command options
    metadata_parser.add_argument('repo_dir', nargs='?', default='.', help='Repository directory to scan')

    # regenerate-html command options
    html_parser.add_argument('repo_owner', nargs='?', default=None, help='Owner of the source repository')
    html_parser.add_argument('repo_name', nargs='?', default=None, help='Name of the source repository')
    html_parser.add_argument('--repo-dir', default='.', help='Repository directory to render (default: current directory)')

    return parser
