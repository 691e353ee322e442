"""Content predicates for JSON, YAML, XML, HTML and plain text.

Each predicate is a pure function of its input and answers a single yes/no
question. The predicates overlap: a caller that wants one label has to
evaluate them in ``PRECEDENCE`` order (JSON, XML, HTML, YAML, plain text)
and take the first match. Failures of the underlying JSON/YAML parse are
reported as ``False``, never raised.

Only JSON and YAML are actually parsed. XML and HTML are recognised by
counting markers, so a buffer classified as XML may still fail a strict
XML parse.
"""
from __future__ import annotations

import json
from typing import Union

import yaml
from yaml.constructor import ConstructorError

from formatsniff.core.registry import FormatRegistry
from formatsniff.models.formats import DataFormat

ByteLike = Union[str, bytes, bytearray, memoryview]

# Bracket nesting above this is treated as hostile input, not data.
MAX_NESTING_DEPTH = 512

_XML_DECLARATION = "<?xml version="

_HTML_MARKERS: tuple[str, ...] = (
    "<!doctype html>",
    "</head>",
    "</html>",
    "</body>",
    "</title>",
    "</a>",
    "</div>",
)
_HTML_CONFIDENCE = 3


def _as_text(data: ByteLike) -> str:
    """Read a byte-like value as text, replacing invalid UTF-8."""
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("utf-8", errors="replace")
    raise TypeError(
        f"Expected str or a bytes-like object, got {type(data).__name__}"
    )


def _exceeds_nesting(text: str, limit: int = MAX_NESTING_DEPTH) -> bool:
    """Check whether ``[``/``{`` nesting outside double quotes passes ``limit``."""
    if text.count("[") + text.count("{") <= limit:
        return False

    depth = 0
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in "[{":
            depth += 1
            if depth > limit:
                return True
        elif ch in "]}":
            depth -= 1
    return False


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not a JSON value")


class _StrictLoader(yaml.SafeLoader):
    """SafeLoader that refuses duplicate mapping keys."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if not isinstance(key_node, yaml.ScalarNode):
                    continue
                if key_node.tag == "tag:yaml.org,2002:merge":
                    continue
                key = self.construct_object(key_node, deep=True)
                if key in seen:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


@FormatRegistry.register(DataFormat.JSON)
def is_json(data: ByteLike) -> bool:
    """Check whether the input parses as a single JSON value.

    Any value counts, including bare scalars: ``42`` and ``"hi"`` are JSON.
    """
    text = _as_text(data)
    if _exceeds_nesting(text):
        return False

    try:
        # Numbers stay strings so huge literals parse without int conversion.
        json.loads(
            text,
            parse_int=str,
            parse_float=str,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError):
        return False
    return True


@FormatRegistry.register(DataFormat.XML)
def is_xml(data: ByteLike) -> bool:
    """Check whether the input looks like XML.

    An ``<?xml version=`` declaration at the start settles it. Otherwise the
    input needs both ``<`` and ``>``, and the closing markers (``</`` and
    ``/>``) must at least match the opening tags (``<`` not followed by
    ``/``).
    """
    text = _as_text(data)

    # Quirk: the declaration is also accepted one character in. That covers
    # a decoded byte-order mark, but it is kept as observed behaviour.
    trimmed = text.lstrip()
    if trimmed.startswith(_XML_DECLARATION) or trimmed.startswith(_XML_DECLARATION, 1):
        return True

    if "<" not in text or ">" not in text:
        return False

    closing_tags = text.count("</")
    opening_tags = text.count("<") - closing_tags
    return closing_tags + text.count("/>") >= opening_tags


@FormatRegistry.register(DataFormat.HTML)
def is_html(data: ByteLike) -> bool:
    """Check whether at least three well-known HTML markers are present."""
    lowered = _as_text(data).lower()
    points = sum(1 for marker in _HTML_MARKERS if marker in lowered)
    return points >= _HTML_CONFIDENCE


@FormatRegistry.register(DataFormat.YAML)
def is_yaml(data: ByteLike) -> bool:
    """Check whether the input is key-value YAML that is not JSON or XML.

    JSON and XML win over YAML. A permissive YAML parser accepts almost any
    sentence as a scalar, so input without a ``:`` is rejected before the
    parse is attempted.
    """
    if is_json(data) or is_xml(data):
        return False

    text = _as_text(data)
    if ":" not in text:
        return False
    if _exceeds_nesting(text):
        return False

    try:
        for _ in yaml.load_all(text, Loader=_StrictLoader):
            pass
    except (yaml.YAMLError, RecursionError, ValueError, TypeError):
        return False
    return True


@FormatRegistry.register(DataFormat.PLAIN_TEXT)
def is_plain_text(data: ByteLike) -> bool:
    """Check whether the input is non-empty and not JSON.

    XML, HTML and YAML input also passes; this is the catch-all.
    """
    if is_json(data):
        return False
    return len(data) > 0
