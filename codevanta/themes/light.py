"""Light theme definitions for CodeVanta."""

from rich.style import Style

from ..models import OutputKind

# Transcript styles per line kind (matching textual-light)
# Primary: #004578, Secondary: #0178D4, Accent: #ffa62b
# Error: #ba3c5b, Success: #4EBF71
KIND_STYLES = {
    OutputKind.COMMAND: Style(color="#004578", bold=True),
    OutputKind.OUTPUT: Style(color="#1a1a1a"),
    OutputKind.ERROR: Style(color="#ba3c5b", bold=True),
    OutputKind.INFO: Style(color="#0178D4"),
    OutputKind.SUCCESS: Style(color="#116329"),
    OutputKind.WELCOME: Style(color="#8250df", bold=True),
}

# Shown before the text so kinds stay distinguishable without color
KIND_MARKERS = {
    OutputKind.ERROR: "✗ ",
    OutputKind.SUCCESS: "✓ ",
}
