from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

import yaml

from hexflags.config import TABLE_SUFFIX
from hexflags.core.hexval import parse_hex_u64
from hexflags.errors import ArgumentError, NotFoundError, ParseError


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlagTable:
    type_name: str
    entries: tuple[tuple[str, int], ...] = ()
    path: Path | None = None

    @classmethod
    def from_entries(cls, type_name: str, entries: Iterable[tuple[str, int]]) -> FlagTable:
        return cls(type_name=type_name, entries=tuple((str(k), int(v)) for k, v in entries))

    @classmethod
    def from_mapping(cls, type_name: str, mapping: Mapping[str, int]) -> FlagTable:
        return cls.from_entries(type_name, mapping.items())

    def resolve_name(self, value: int) -> str | None:
        # Document order; the first label with a matching value wins.
        for label, stored in self.entries:
            if stored == value:
                return label
        return None

    def __len__(self) -> int:
        return len(self.entries)


def table_path(type_name: str, base_dir: Path) -> Path:
    name = (type_name or "").strip()
    if not name:
        raise ArgumentError("type name must be non-empty")
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise ArgumentError(f"invalid type name: {type_name!r}")
    return Path(base_dir) / f"{name}{TABLE_SUFFIX}"


def load_flag_table(type_name: str, base_dir: str | Path) -> FlagTable:
    path = table_path(type_name, Path(base_dir))
    if not path.exists():
        raise NotFoundError(f"File does not exist: {path}")

    node = _compose_yaml(path)
    if node is None:
        log.debug("empty flag table", extra={"path": str(path)})
        return FlagTable(type_name=type_name.strip(), entries=(), path=path)
    if not isinstance(node, yaml.MappingNode):
        raise ParseError(f"{path}: expected a mapping of flag names to hex values")

    # Walk the node pairs rather than a constructed dict so repeated labels
    # each keep their own entry.
    entries: list[tuple[str, int]] = []
    for key_node, value_node in node.value:
        if not isinstance(key_node, yaml.ScalarNode):
            raise ParseError(f"{path}: flag names must be scalars (line {key_node.start_mark.line + 1})")
        key = key_node.value
        entries.append((key, _parse_value(path, key, value_node)))

    log.debug("loaded flag table", extra={"path": str(path), "entries": len(entries)})
    return FlagTable(type_name=type_name.strip(), entries=tuple(entries), path=path)


def _compose_yaml(path: Path) -> yaml.Node | None:
    try:
        text = path.read_text(encoding="utf-8")
    except Exception as exc:
        raise ParseError(f"{path}: failed to read: {exc}") from exc
    try:
        # BaseLoader keeps every scalar as text, so "10" stays hex 0x10.
        return yaml.compose(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ParseError(f"{path}: invalid yaml: {exc}") from exc


def _parse_value(path: Path, key: str, node: yaml.Node) -> int:
    if not isinstance(node, yaml.ScalarNode):
        raise ParseError(f"{path}: value of '{key}' must be a scalar")
    try:
        return parse_hex_u64(node.value)
    except ValueError as exc:
        raise ParseError(f"{path}: value of '{key}' is not a 64-bit hex number: {node.value!r}") from exc
