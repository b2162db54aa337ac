"""Track adoption of a build-tool config file across public GitHub repositories.

Searches GitHub code for the config filename, resolves each repository's stars
and the date the file was first committed, prints a star-ranked list and
writes a cumulative adoption chart as SVG.
"""

from .cli import main
from .models import Candidate

__all__ = ["main", "Candidate"]
