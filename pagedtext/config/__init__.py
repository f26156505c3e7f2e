"""Load and validate document configuration YAML for pagedtext builds.

This subpackage parses the project's ``pagedtext.yaml`` file, merges global
defaults with per-document overrides, and produces typed dataclasses
(:class:`ProjectConfig`, :class:`DocumentConfig`) that the generator consumes.
The primary entry point is :func:`load_config`.

Examples
--------
>>> from pathlib import Path
>>> from pagedtext.config import load_config
>>> config = load_config(Path("config/pagedtext.yaml"))  # doctest: +SKIP
>>> config.get_document("romeo").source_url  # doctest: +SKIP
'https://www.gutenberg.org/cache/epub/1513/pg1513.txt'
"""

from .loader import load_config
from .models import ConfigError, DocumentConfig, ProjectConfig

__all__ = ["ConfigError", "DocumentConfig", "ProjectConfig", "load_config"]
