"""Pattern Catalog - Root Package.

A catalogue of classic object-oriented design patterns. Each entry is kept as
structured data with a runnable Python sample; the markdown catalogue is
rendered from that data and any markdown catalogue can be linted and
consolidated.

Key Components:
    - samples: runnable pattern samples grouped by category
    - domain: pattern entries, markdown document model, events and errors
    - application: catalogue and document lint services
    - infrastructure: persistence, markdown tooling, rendering, logging
    - cli: command line interface
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Pattern Catalog Maintainers"
__package_name__ = PACKAGE_NAME
