"""Curve alias / OID resolution.

Aliases are many-to-one into a canonical name, OIDs one-to-one. Lookups accept
any alias or the dotted OID, case-insensitively. Nothing here raises for an
unknown curve: callers get an empty set or None.
"""
from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Set, Tuple

from ..config import get_settings
from .table import CURVES, SOURCE_DSTU, SOURCE_GOST, CurveEntry

__all__ = [
    "CurveResolver",
    "get_resolver",
    "lookup",
    "aliases_of",
    "oid_of",
    "canonical_name",
    "named_curves_map",
    "disabled_sources",
]


class CurveResolver:
    def __init__(self, curves: Iterable[CurveEntry]):
        self._curves: Tuple[CurveEntry, ...] = tuple(curves)
        self._by_key: Dict[str, CurveEntry] = {}
        oids: Set[str] = set()
        for entry in self._curves:
            if entry.oid in oids:
                raise ValueError(f"OID {entry.oid} assigned to more than one curve")
            oids.add(entry.oid)
            for key in entry.names | {entry.oid}:
                k = key.casefold()
                other = self._by_key.get(k)
                if other is not None and other is not entry:
                    raise ValueError(f"curve name {key} maps to both {other.canonical_name} and {entry.canonical_name}")
                self._by_key[k] = entry

    def __iter__(self):
        return iter(self._curves)

    def lookup(self, name_or_oid: str) -> CurveEntry | None:
        if not isinstance(name_or_oid, str) or not name_or_oid:
            return None
        return self._by_key.get(name_or_oid.strip().casefold())

    def aliases_of(self, name_or_oid: str) -> Set[str]:
        entry = self.lookup(name_or_oid)
        if entry is None:
            return set()
        return set(entry.names) | {name_or_oid}

    def oid_of(self, name: str) -> str | None:
        entry = self.lookup(name)
        return entry.oid if entry is not None else None

    def canonical_name(self, name_or_oid: str) -> str | None:
        entry = self.lookup(name_or_oid)
        return entry.canonical_name if entry is not None else None

    def named_curves_map(self, excluded_sources: Iterable[str] = ()) -> Dict[str, List[str]]:
        excluded = set(excluded_sources)
        grouped: Dict[str, List[str]] = {}
        for entry in self._curves:
            if entry.source in excluded:
                continue
            grouped.setdefault(entry.source, []).append(entry.canonical_name)
        for names in grouped.values():
            names.sort(key=str.casefold)
        return grouped


_RESOLVER: CurveResolver | None = None
_LOCK = threading.Lock()


def get_resolver() -> CurveResolver:
    global _RESOLVER
    if _RESOLVER is None:
        with _LOCK:
            if _RESOLVER is None:
                _RESOLVER = CurveResolver(CURVES)
    return _RESOLVER


def disabled_sources() -> Set[str]:
    settings = get_settings()
    disabled = set()
    if not settings.gost3410_enabled:
        disabled.add(SOURCE_GOST)
    if not settings.dstu4145_enabled:
        disabled.add(SOURCE_DSTU)
    return disabled


def lookup(name_or_oid: str) -> CurveEntry | None:
    return get_resolver().lookup(name_or_oid)


def aliases_of(name_or_oid: str) -> Set[str]:
    """Every name the curve is known by, including the one passed in."""
    return get_resolver().aliases_of(name_or_oid)


def oid_of(name: str) -> str | None:
    return get_resolver().oid_of(name)


def canonical_name(name_or_oid: str) -> str | None:
    return get_resolver().canonical_name(name_or_oid)


def named_curves_map(include_disabled_providers: bool = False) -> Dict[str, List[str]]:
    """Curve names grouped by the standard that defines them."""
    excluded = () if include_disabled_providers else disabled_sources()
    return get_resolver().named_curves_map(excluded)
