"""
Doc comment parsing and identifier normalization.

Responsibilities:
- config name normalization (snake_case -> kebab-case)
- doc comment recognition (marker + first terminator)
- lint list extraction + description re-indentation
- best-effort decoding of uploaded declaration files
"""

from __future__ import annotations

import hashlib
import logging
import re
import string
from typing import Any, Dict, NamedTuple, Optional, Tuple

from charset_normalizer import from_bytes

from .rules import (
    CONTINUATION,
    DOC_TERMINATOR,
    LINT_MARKER,
    LINT_SEPARATOR,
    NESTED_CONTINUATION,
)

logger = logging.getLogger(__name__)

_CONTINUATION_RE = re.compile(CONTINUATION)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class ParsedDoc(NamedTuple):
    """Lint names and description recovered from a well-formed doc comment."""

    lints: Tuple[str, ...]
    doc: str


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def to_kebab(config_name: str) -> str:
    """Turn a ``snake_case`` config name into its ``kebab-case`` display form."""
    return config_name.replace("_", "-")


def parse_config_field_doc(doc_comment: str) -> Optional[ParsedDoc]:
    """
    Split a config doc comment into its lint names and its description.

    Rules:
    - The comment must start with LINT_MARKER, exactly.
    - The lint list ends at the first DOC_TERMINATOR in the comment.
    - The lint list is ASCII-lowercased and split on LINT_SEPARATOR as-is.
    - The description drops leading terminators, is stripped, and gets its
      continuation lines re-indented for nesting; lines already nested
      are left alone.

    >>> parse_config_field_doc(" Lint: LINT_NAME_1, LINT_NAME_2. Papa penguin")
    ParsedDoc(lints=('lint_name_1', 'lint_name_2'), doc='Papa penguin')

    Returns None when the comment does not follow the convention. Callers
    decide what a degraded entry looks like.
    """
    if not doc_comment.startswith(LINT_MARKER):
        return None

    split_pos = doc_comment.find(DOC_TERMINATOR)
    if split_pos < 0:
        return None

    lint_list = doc_comment[len(LINT_MARKER):split_pos].translate(_ASCII_LOWER)
    lints = tuple(lint_list.split(LINT_SEPARATOR))

    documentation = doc_comment[split_pos:].lstrip(DOC_TERMINATOR).strip()
    documentation = _CONTINUATION_RE.sub(NESTED_CONTINUATION, documentation)

    return ParsedDoc(lints=lints, doc=documentation)


def decode_declarations(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode an uploaded declarations file to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is consumed rather than kept in the text.
    - If decode fails, fall back to UTF-8 with replacement characters and report it.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        decode_fallback = True
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            # Last resort: decode with replacement so rendering can continue deterministically
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"

    if decode_fallback:
        logger.warning("declarations decoded with fallback %s (detected %s)", decode_used, detected)

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "sha256": sha256_hex(raw),
    }
    return text, report
