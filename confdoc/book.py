"""
Aggregation of config records into the generated documentation.

Records are independent; ordering across them is decided here so the
rendered output is byte-identical for identical declarations.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from .models import ConfigDeclaration, ConfigMetadata
from .rules import BOOK_HEADER

logger = logging.getLogger(__name__)


class DuplicateConfigError(ValueError):
    """Two declarations normalize to the same display name."""

    def __init__(self, name: str):
        super().__init__(f"duplicate config name: {name}")
        self.name = name


def collect_configs(declarations: Iterable[ConfigDeclaration]) -> List[ConfigMetadata]:
    """Build one record per declaration, sorted by display name."""
    seen: Dict[str, ConfigMetadata] = {}
    for decl in declarations:
        config = ConfigMetadata.new(
            decl.name,
            decl.config_type,
            decl.default,
            decl.doc_comment,
            decl.deprecation_reason,
        )
        if config.name in seen:
            raise DuplicateConfigError(config.name)
        seen[config.name] = config

    return [seen[name] for name in sorted(seen)]


def render_configuration_book(configs: Iterable[ConfigMetadata]) -> str:
    configs = list(configs)
    logger.info("rendering configuration book with %d configs", len(configs))
    return BOOK_HEADER + "".join(config.to_markdown_paragraph() for config in configs)


def render_link_references(configs: Iterable[ConfigMetadata]) -> str:
    return "\n".join(config.to_markdown_link() for config in configs)


def render_config_list(configs: Iterable[ConfigMetadata]) -> str:
    # deprecated configs are kept out of the list shown next to each lint
    return "".join(str(config) for config in configs if config.deprecation_reason is None)


def configs_for_lint(configs: Iterable[ConfigMetadata], lint: str) -> List[ConfigMetadata]:
    wanted = lint.strip().lower()
    return [config for config in configs if wanted in config.lint_anchors()]


def malformed_configs(configs: Iterable[ConfigMetadata]) -> List[ConfigMetadata]:
    return [config for config in configs if config.is_malformed]
