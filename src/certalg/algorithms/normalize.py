"""Map provider-reported signature-algorithm names to canonical display names.

Providers spell the same algorithm differently (SHA256WITHRSA, SHA256WithRSA,
sha256WithRSAEncryption). Matching is case-insensitive against catalog names
and their provider aliases; unknown names are returned as given.
"""
from __future__ import annotations

from typing import Any

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm

from .catalog import SignatureAlgorithmCatalog, lookup, lookup_oid
from .constants import parse_digest


def normalize(raw: str, catalog: SignatureAlgorithmCatalog | None = None) -> str:
    spec = lookup(raw, catalog)
    if spec is None:
        return raw
    return spec.name


def _from_x509(cert: x509.Certificate, catalog: SignatureAlgorithmCatalog | None) -> str:
    oid = cert.signature_algorithm_oid.dotted_string
    spec = lookup_oid(oid, catalog=catalog)
    if spec is None:
        # RSASSA-PSS: one OID for every digest, pick by the signature hash
        try:
            h = cert.signature_hash_algorithm
        except UnsupportedAlgorithm:
            h = None
        if h is not None:
            spec = lookup_oid(oid, parse_digest(h.name), catalog=catalog)
    return spec.name if spec is not None else oid


def certificate_signature_algorithm(certificate: Any, catalog: SignatureAlgorithmCatalog | None = None) -> str:
    """Canonical signature-algorithm name of a certificate.

    Accepts a ``cryptography.x509.Certificate`` or any object exposing a raw
    ``signature_algorithm_name`` string.
    """
    if isinstance(certificate, x509.Certificate):
        return _from_x509(certificate, catalog)
    return normalize(certificate.signature_algorithm_name, catalog)
