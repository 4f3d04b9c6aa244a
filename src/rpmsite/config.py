"""
Default locations and names used when the command line does not say otherwise.

"""

import os

# build output staging area, never scanned for packages
OUTPUT_DIR: str = ".output"
DEFAULT_COPR_DOWNLOAD_DIR: str = OUTPUT_DIR + "/copr-rpms-temp"

DEFAULT_REPO_OWNER: str = "flightctl"
DEFAULT_REPO_NAME: str = "flightctl"

# looked up in the current directory
TEMPLATES_DIRNAME: str = "templates"
PACKAGE_TEMPLATES_DIR: str = os.path.join(os.path.dirname(__file__), TEMPLATES_DIRNAME)
SITE_CONFIG_FILENAME: str = "rpmsite.yaml"
STYLESHEETS: tuple[str, ...] = ("styles.css", "platform-styles.css")

INDEX_FILENAME: str = "index.html"
REPODATA_DIRNAME: str = "repodata"
UNKNOWN_VERSION: str = "unknown"
