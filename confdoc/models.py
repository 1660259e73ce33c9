from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .normalize import parse_config_field_doc, to_kebab
from .rules import BOOK_CONFIGS_URL, LINT_INDEX_URL, MALFORMED_DOC_SENTINEL, NESTED_INDENT

logger = logging.getLogger(__name__)


def _doc_lines(doc: str) -> List[str]:
    # split on \n only, dropping one trailing \r per line as for CRLF text
    return [line[:-1] if line.endswith("\r") else line for line in doc.split("\n")]


class ConfigMetadata(BaseModel):
    """
    One configurable parameter, ready for the docs.

    Built once per generation pass through ``new``; never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    config_type: str
    default: str
    lints: Tuple[str, ...] = ()
    doc: str
    deprecation_reason: Optional[str] = None

    @classmethod
    def new(
        cls,
        name: str,
        config_type: str,
        default: str,
        doc_comment: str,
        deprecation_reason: Optional[str] = None,
    ) -> "ConfigMetadata":
        parsed = parse_config_field_doc(doc_comment)
        if parsed is None:
            logger.warning("malformed doc comment for config %r", name)
            lints: Tuple[str, ...] = ()
            doc = MALFORMED_DOC_SENTINEL
        else:
            lints, doc = parsed

        return cls(
            name=to_kebab(name),
            config_type=config_type,
            default=default,
            lints=lints,
            doc=doc,
            deprecation_reason=deprecation_reason,
        )

    @property
    def is_malformed(self) -> bool:
        return self.doc == MALFORMED_DOC_SENTINEL

    def __str__(self) -> str:
        return f"* `{self.name}`: `{self.config_type}`(defaults to `{self.default}`): {self.doc}\n"

    def to_markdown_paragraph(self) -> str:
        doc = "\n".join(
            line[len(NESTED_INDENT):] if line.startswith(NESTED_INDENT) else line
            for line in _doc_lines(self.doc)
        )
        lints = "\n".join(
            f"* [`{lint}`]({LINT_INDEX_URL}#{lint})" for lint in self.lint_anchors()
        )
        return (
            f"## `{self.name}`\n{doc}\n\n"
            f"**Default Value:** `{self.default}` (`{self.config_type}`)\n\n"
            f"---\n**Affected lints:**\n{lints}\n\n"
        )

    def to_markdown_link(self) -> str:
        return f"[`{self.name}`]: {BOOK_CONFIGS_URL}#{self.name}"

    def lint_anchors(self) -> List[str]:
        """First whitespace-delimited token of each lint name; blank names are skipped."""
        return [lint.split()[0] for lint in self.lints if lint.split()]


class ConfigDeclaration(BaseModel):
    """A parameter as declared by the host tool, before parsing."""

    name: str = Field(min_length=1)
    config_type: str
    default: str
    doc_comment: str
    deprecation_reason: Optional[str] = None


class RenderRequest(BaseModel):
    configs: List[ConfigDeclaration] = Field(default_factory=list)


class RenderSummary(BaseModel):
    configs: int = 0
    deprecated: int = 0
    malformed: List[str] = Field(default_factory=list, examples=[["max-line-length"]])


class RenderedBook(BaseModel):
    sha256: str
    markdown: str
    link_references: str
    config_list: str


class RenderResponse(BaseModel):
    book: RenderedBook
    summary: RenderSummary
    configs: List[ConfigMetadata] = Field(default_factory=list)
    decoding: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
