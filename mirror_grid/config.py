"""Engine-wide defaults.

Import-safe leaf module: it never imports from other project modules.
Levels choose their own bounds; these are only the defaults used by the
bundled examples.
"""

# Grid defaults (columns x rows)
DEFAULT_WIDTH: int = 40
DEFAULT_HEIGHT: int = 13

# Log format used by :func:`mirror_grid.logging_setup.setup_logging`
LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
