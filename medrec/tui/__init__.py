"""
Terminal UI (TUI) for MedRec.

Run with: python -m medrec.tui.tui
"""

__all__ = ["main"]


def main():
    """Launch main TUI (requires textual)."""
    from medrec.tui.tui import main as _main
    _main()
