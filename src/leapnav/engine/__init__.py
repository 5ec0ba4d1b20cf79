"""Matching, labeling, narrowing and navigation engine."""

from leapnav.engine.controller import JumpController
from leapnav.engine.filter import MatchFilter
from leapnav.engine.index import MatchIndex
from leapnav.engine.labels import LabelAllocator
from leapnav.engine.navigator import ViewNavigator
from leapnav.engine.scanner import CorpusScanner, is_case_sensitive, relevant_views
from leapnav.engine.session import SearchSession, SessionState

__all__ = [
    "CorpusScanner",
    "JumpController",
    "LabelAllocator",
    "MatchFilter",
    "MatchIndex",
    "SearchSession",
    "SessionState",
    "ViewNavigator",
    "is_case_sensitive",
    "relevant_views",
]
