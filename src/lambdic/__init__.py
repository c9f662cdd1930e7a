"""Reference-unit series alignment, basket aggregation and comparison.

Asset series are loaded from the catalog declared in a YAML config, aligned on their
ISO dates, then either collapsed into a weighted basket or rebased to 1.0 for
side-by-side comparison.
"""

from .config import load_config, ProjectConfig
