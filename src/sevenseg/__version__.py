"""sevenseg version information."""

__version__ = "1.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 1.0.0 - Initial release: segment model, character table, geometry,
#         display/readout composition, PIL renderer, PyQt6 widgets
# 1.1.0 - Single geometry policy (stroke-derived placement), punctuation (-, _, =, '),
#         with_period(False) clears the period, CLI config command
