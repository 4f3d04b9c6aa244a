"""
The site builder executes programs that have their own defaults.
These defaults rarely change, but if they do, they'll impact the published metadata.

To avoid such unexpected changes, we define our defaults here
and explicitly pass them to the programs.
"""


CREATEREPO_COMMAND: str = "createrepo_c"
CREATEREPO_CHECKSUM_TYPE: str = "sha256"
RPM_COMMAND: str = "rpm"
RPM_VERSION_QUERYFORMAT: str = "%{VERSION}\\n"
