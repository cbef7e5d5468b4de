import datetime
import os
from importlib import metadata
from typing import Any, Dict, List

from ..algorithms.catalog import get_catalog, is_enabled
from ..config import get_settings
from ..curves.resolver import disabled_sources, get_resolver

# CycloneDX 1.5 shaped inventory of every algorithm and curve the resolver knows.


def _libcrypto_version() -> str:
    try:
        from cryptography.hazmat.backends.openssl.backend import backend
        return backend.openssl_version_text()
    except Exception:
        return "unknown"


def _app_version() -> str:
    try:
        return metadata.version("certalg")
    except metadata.PackageNotFoundError:
        return os.getenv("CERTALG_VERSION", "0.0.0-dev")


def _algorithms() -> List[Dict[str, Any]]:
    settings = get_settings()
    algs = []
    for spec in get_catalog():
        enabled = is_enabled(spec.key_algorithm) and (settings.accept_legacy_digests or not spec.legacy)
        algs.append({
            "primitive": "sig",
            "name": spec.name,
            "oid": spec.oid,
            "params": {
                "digest": spec.digest.value,
                "digestOid": spec.digest.oid,
                "keyAlgorithm": spec.key_algorithm.value,
                "padding": spec.padding.value,
            },
            "legacy": spec.legacy,
            "enabled": enabled,
        })
    return algs


def _curves() -> List[Dict[str, Any]]:
    disabled = disabled_sources()
    return [
        {
            "name": entry.canonical_name,
            "oid": entry.oid,
            "source": entry.source,
            "aliases": sorted(entry.aliases, key=str.casefold),
            "enabled": entry.source not in disabled,
        }
        for entry in get_resolver()
    ]


def build_inventory() -> Dict[str, Any]:
    algorithms = _algorithms()
    curves = _curves()
    components = [
        {
            "bom-ref": f"alg-{a['name']}",
            "type": "cryptographic-asset",
            "name": a["name"],
            "properties": [{"name": "algorithm.oid", "value": a["oid"]}],
        }
        for a in algorithms
    ]
    components.append({
        "bom-ref": "lib-cryptography",
        "type": "library",
        "name": "pyca-cryptography",
        "version": _libcrypto_version(),
    })
    settings = get_settings()
    return {
        "bomFormat": "CycloneDX",
        "specVersion": "1.5",
        "version": 1,
        "metadata": {
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat().replace("+00:00", "Z"),
            "component": {
                "bom-ref": "app-certalg",
                "type": "library",
                "name": "certalg",
                "version": _app_version(),
            },
        },
        "components": components,
        "properties": [
            {"name": "gost3410.enabled", "value": str(settings.gost3410_enabled).lower()},
            {"name": "dstu4145.enabled", "value": str(settings.dstu4145_enabled).lower()},
            {"name": "legacy_digests.accepted", "value": str(settings.accept_legacy_digests).lower()},
        ],
        "cbom:algorithms": algorithms,
        "cbom:curves": curves,
    }
