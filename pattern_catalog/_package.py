"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
PACKAGE_NAME_SHORT = "pattern_catalog"
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Catalogue of classic design patterns with runnable samples and a markdown linter"

CONFIG_DIR_NAME = "pattern-catalog"
