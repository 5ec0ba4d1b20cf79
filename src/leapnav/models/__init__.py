"""Data models for leapnav."""

from leapnav.models.candidate import Candidate
from leapnav.models.navigation import NavigationFailure
from leapnav.models.options import BIDIRECTIONAL, SearchOptions, validate_options
from leapnav.models.search import LabeledMatch, ScanReport
from leapnav.models.text import LineRange, Position, Selection
from leapnav.models.views import ComparisonInput, HostCommand, TabInput, TextInput, ViewGroup

__all__ = [
    "BIDIRECTIONAL",
    "Candidate",
    "ComparisonInput",
    "HostCommand",
    "LabeledMatch",
    "LineRange",
    "NavigationFailure",
    "Position",
    "ScanReport",
    "SearchOptions",
    "Selection",
    "TabInput",
    "TextInput",
    "ViewGroup",
    "validate_options",
]
