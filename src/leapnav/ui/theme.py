"""Colors, fonts and QSS for the demo editor and its label overlays."""

from __future__ import annotations

COLORS = {
    "primary": "#E67E22",
    "bg": "#FFFFFF",
    "panel_bg": "#FAFAFA",
    "border": "#E0E0E0",
    "text": "#1A1A1A",
    "text_muted": "#999999",
    "label_bg": "#1A1A1A",
    "label_fg": "#FFFFFF",
    "comparison_divider": "#F39C12",
}

FONT_FAMILY = "-apple-system, 'SF Pro Text', 'Helvetica Neue', 'Segoe UI', Roboto, sans-serif"
MONO_FAMILY = "'SF Mono', Menlo, Consolas, 'Liberation Mono', monospace"


def build_stylesheet() -> str:
    """Build the application-wide QSS stylesheet."""
    c = COLORS
    return f"""
QWidget {{
    font-family: {FONT_FAMILY};
    font-size: 13px;
    color: {c["text"]};
    background-color: {c["bg"]};
}}
QPlainTextEdit {{
    font-family: {MONO_FAMILY};
    border: none;
}}
QTabWidget::pane {{
    border-top: 1px solid {c["border"]};
}}
QSplitter::handle {{
    background-color: {c["border"]};
}}
QStatusBar {{
    background-color: {c["panel_bg"]};
    color: {c["text_muted"]};
}}
"""


def query_box_style() -> str:
    return (
        f"QLineEdit {{ font-family: {MONO_FAMILY}; font-size: 14px; "
        f"padding: 6px 10px; border: 2px solid {COLORS['primary']}; "
        f"border-radius: 6px; background-color: {COLORS['bg']}; }}"
    )


def label_style() -> str:
    """Inverted colors so a label reads over any text it covers."""
    return (
        f"QLabel {{ font-family: {MONO_FAMILY}; font-weight: bold; "
        f"color: {COLORS['label_fg']}; background-color: {COLORS['label_bg']}; "
        f"border: 0; padding: 0 1px; }}"
    )
