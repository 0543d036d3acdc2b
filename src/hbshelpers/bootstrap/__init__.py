"""Bootstrap (composition root) for hbshelpers.

Assembles the helper registry at runtime: wires concrete adapters (date
formatter, URL builder, pluralizer, random source) into the helpers that need
them, reads configuration, and returns a small container for entrypoints.

Import rules:
- Entry points import *this* package (not adapters/helpers/interfaces/domain).
- This package may import: `hbshelpers.adapters`, `hbshelpers.helpers`,
  `hbshelpers.interfaces`, `hbshelpers.domain`, and `hbshelpers.config`.
- Inner layers must not import `hbshelpers.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_registry, inject_dependencies

__all__ = ["AppContainer", "bootstrap", "build_registry", "inject_dependencies"]
