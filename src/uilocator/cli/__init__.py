"""uilocator Command Line Interface.

Provides CLI commands for:
- Validating locator configuration files
- Showing an element's configured pattern
- Dumping accessibility trees for authoring new patterns
- Checking configured elements against a running application

Usage:
    python -m uilocator.cli --help
    uilocator validate ui_config.yaml -v
    uilocator dump --pid 1234 -o qqmusic_tree.yaml
    uilocator check ui_config.yaml QQMusic --pid 1234

Or via the installed entry point:
    uilocator --help
"""

from .main import main

__all__ = ["main"]
