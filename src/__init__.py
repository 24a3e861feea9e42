"""skillsalary — skill-to-salary estimation engine."""

from skillsalary.version import __version__

__all__ = ["__version__"]
