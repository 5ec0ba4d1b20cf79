"""leapnav: label-based jump navigation for text views."""

__version__ = "0.1.0"
