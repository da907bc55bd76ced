"""
Token dictionary: merge, flatten, and resolve token documents.

Turns one or more raw token documents into an ordered list of resolved
TokenRecords. This is the single input shape every formatter consumes.

A token is any mapping that carries a ``value`` key. Values may reference
other tokens with ``{dotted.path}``, either as the whole value or embedded
in a longer string. Resolution is transitive. Broken references and
cycles are structural errors and raise TokenResolutionError.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from .errors import TokenResolutionError
from .ir.tokens import TokenRecord
from .references import REFERENCE_PATTERN, TokenReference

logger = logging.getLogger(__name__)

VALUE_KEY = "value"


def merge_documents(*documents: Mapping[str, Any]) -> dict[str, Any]:
    """
    Deep-merge token documents. Later documents win.

    Nested mappings are merged key by key; any other value is replaced.
    Key order follows first appearance.
    """
    merged: dict[str, Any] = {}
    for document in documents:
        _merge_into(merged, document)
    return merged


def _merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            _merge_into(existing, value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _merge_into(target[key], value)
        else:
            target[key] = value


def _is_token(node: Any) -> bool:
    return isinstance(node, Mapping) and VALUE_KEY in node


def _collect_tokens(
    node: Mapping[str, Any], path: tuple[str, ...], out: dict[tuple[str, ...], Mapping[str, Any]]
) -> None:
    for key, child in node.items():
        child_path = (*path, key)
        if _is_token(child):
            out[child_path] = child
        elif isinstance(child, Mapping):
            _collect_tokens(child, child_path, out)


class _Resolver:
    """Resolves references against a flat path -> raw token index."""

    def __init__(self, tokens: Mapping[tuple[str, ...], Mapping[str, Any]]) -> None:
        self._tokens = tokens
        self._cache: dict[tuple[str, ...], Any] = {}

    def resolve_token(self, path: tuple[str, ...], stack: tuple[tuple[str, ...], ...] = ()) -> Any:
        if path in self._cache:
            return self._cache[path]
        if path in stack:
            cycle = " -> ".join(".".join(p) for p in (*stack, path))
            raise TokenResolutionError(f"Circular reference: {cycle}")

        raw = self._tokens[path][VALUE_KEY]
        resolved = self._resolve_value(raw, (*stack, path))
        self._cache[path] = resolved
        return resolved

    def _resolve_value(self, value: Any, stack: tuple[tuple[str, ...], ...]) -> Any:
        if isinstance(value, str):
            return self._resolve_string(value, stack)
        if isinstance(value, Mapping):
            return {key: self._resolve_value(item, stack) for key, item in value.items()}
        if isinstance(value, list):
            return [self._resolve_value(item, stack) for item in value]
        return value

    def _resolve_string(self, value: str, stack: tuple[tuple[str, ...], ...]) -> Any:
        whole = TokenReference.parse(value)
        if whole is not None:
            return self.resolve_token(self._target(whole, stack), stack)

        def substitute(match: re.Match[str]) -> str:
            ref = TokenReference.from_dotted(match.group(1))
            return str(self.resolve_token(self._target(ref, stack), stack))

        return REFERENCE_PATTERN.sub(substitute, value)

    def _target(self, ref: TokenReference, stack: tuple[tuple[str, ...], ...]) -> tuple[str, ...]:
        if ref.path in self._tokens:
            return ref.path
        # Older documents spell references as {path.to.token.value}
        if ref.path[-1] == VALUE_KEY and ref.path[:-1] in self._tokens:
            return ref.path[:-1]
        source = ".".join(stack[-1]) if stack else "?"
        raise TokenResolutionError(f"Reference {ref} in {source} does not point to a token")


class TokenDictionary:
    """
    Ordered, resolved view of all tokens in a document.

    Records follow document order. The dictionary is read-only once built.
    """

    def __init__(self, records: Sequence[TokenRecord]) -> None:
        self._records = tuple(records)
        self._by_key = {record.key: record for record in self._records}

    @property
    def all_records(self) -> tuple[TokenRecord, ...]:
        return self._records

    def by_category(self, category: str) -> list[TokenRecord]:
        return [record for record in self._records if record.category == category]

    def lookup(self, key: str) -> TokenRecord | None:
        """Find a record by reference key, e.g. ``{primitive.color.neutral.0}``."""
        return self._by_key.get(key)

    def __iter__(self) -> Iterator[TokenRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


def build_dictionary(document: Mapping[str, Any]) -> TokenDictionary:
    """
    Flatten and resolve a token document.

    Args:
        document: Raw token document (already merged if built from several sources).

    Returns:
        TokenDictionary with one record per token.

    Raises:
        TokenResolutionError: On a dangling reference or a reference cycle.
    """
    tokens: dict[tuple[str, ...], Mapping[str, Any]] = {}
    _collect_tokens(document, (), tokens)

    resolver = _Resolver(tokens)
    records = [
        TokenRecord(
            path=path,
            type=raw.get("type"),
            value=resolver.resolve_token(path),
            original_value=raw[VALUE_KEY],
            description=raw.get("description"),
        )
        for path, raw in tokens.items()
    ]
    logger.debug("Resolved %d tokens", len(records))
    return TokenDictionary(records)
