"""Signature-algorithm catalog.

Single source of truth for every signature algorithm the system knows. Each
entry ties a canonical name to its (digest, key algorithm, padding) triple and
its signature OID. Enumeration, decomposition and composition all read the
catalog; nothing is inferred by parsing names.

Lookups that miss degrade to documented defaults instead of failing:
  key_algorithm_for(unknown)  -> RSA
  digest_for(unknown)         -> SHA256
  compose_name(unknown pair)  -> SHA256withRSA
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

from ..config import get_settings
from ..utils.logging import get_logger
from .constants import (
    DEFAULT_KEY_ALGORITHM,
    DEFAULT_SIGNATURE_ALGORITHM,
    DigestKind,
    KeyAlgorithm,
    PaddingScheme,
    parse_digest,
    parse_key_algorithm,
)
from . import constants as c

__all__ = [
    "SignatureAlgorithmSpec",
    "SignatureAlgorithmCatalog",
    "DEFAULT_SPECS",
    "get_catalog",
    "lookup",
    "lookup_oid",
    "signature_algorithms_for",
    "key_algorithm_for",
    "digest_for",
    "compose_name",
    "is_enabled",
]

log = get_logger()

_LEGACY_DIGESTS = frozenset({DigestKind.MD5, DigestKind.SHA1})


@dataclass(frozen=True)
class SignatureAlgorithmSpec:
    name: str
    digest: DigestKind
    key_algorithm: KeyAlgorithm
    padding: PaddingScheme
    oid: str
    aliases: Tuple[str, ...] = ()

    @property
    def legacy(self) -> bool:
        return self.digest in _LEGACY_DIGESTS


def _rsa(name: str, digest: DigestKind, oid: str, *aliases: str) -> SignatureAlgorithmSpec:
    return SignatureAlgorithmSpec(name, digest, KeyAlgorithm.RSA, PaddingScheme.PKCS1, oid, aliases)


def _pss(name: str, digest: DigestKind, *aliases: str) -> SignatureAlgorithmSpec:
    # all RSASSA-PSS variants share one OID, the digest lives in the parameters
    return SignatureAlgorithmSpec(name, digest, KeyAlgorithm.RSA, PaddingScheme.MGF1, "1.2.840.113549.1.1.10", aliases)


def _ec(name: str, digest: DigestKind, oid: str, *aliases: str) -> SignatureAlgorithmSpec:
    return SignatureAlgorithmSpec(name, digest, KeyAlgorithm.ECDSA, PaddingScheme.NONE, oid, aliases)


def _dsa(name: str, digest: DigestKind, oid: str, *aliases: str) -> SignatureAlgorithmSpec:
    return SignatureAlgorithmSpec(name, digest, KeyAlgorithm.DSA, PaddingScheme.NONE, oid, aliases)


DEFAULT_SPECS: Tuple[SignatureAlgorithmSpec, ...] = (
    _rsa(c.SIGALG_SHA256_WITH_RSA, DigestKind.SHA256, "1.2.840.113549.1.1.11", "sha256WithRSAEncryption", "RSA-SHA256"),
    _rsa(c.SIGALG_SHA384_WITH_RSA, DigestKind.SHA384, "1.2.840.113549.1.1.12", "sha384WithRSAEncryption", "RSA-SHA384"),
    _rsa(c.SIGALG_SHA512_WITH_RSA, DigestKind.SHA512, "1.2.840.113549.1.1.13", "sha512WithRSAEncryption", "RSA-SHA512"),
    _rsa(c.SIGALG_SHA3_256_WITH_RSA, DigestKind.SHA3_256, "2.16.840.1.101.3.4.3.14", "id-rsassa-pkcs1-v1_5-with-sha3-256"),
    _rsa(c.SIGALG_SHA3_384_WITH_RSA, DigestKind.SHA3_384, "2.16.840.1.101.3.4.3.15", "id-rsassa-pkcs1-v1_5-with-sha3-384"),
    _rsa(c.SIGALG_SHA3_512_WITH_RSA, DigestKind.SHA3_512, "2.16.840.1.101.3.4.3.16", "id-rsassa-pkcs1-v1_5-with-sha3-512"),
    _pss(c.SIGALG_SHA256_WITH_RSA_AND_MGF1, DigestKind.SHA256, "SHA256withRSA/PSS"),
    _pss(c.SIGALG_SHA384_WITH_RSA_AND_MGF1, DigestKind.SHA384, "SHA384withRSA/PSS"),
    _pss(c.SIGALG_SHA512_WITH_RSA_AND_MGF1, DigestKind.SHA512, "SHA512withRSA/PSS"),
    _pss(c.SIGALG_SHA1_WITH_RSA_AND_MGF1, DigestKind.SHA1, "SHA1withRSA/PSS"),
    _rsa(c.SIGALG_SHA1_WITH_RSA, DigestKind.SHA1, "1.2.840.113549.1.1.5", "sha1WithRSAEncryption", "RSA-SHA1"),
    _rsa(c.SIGALG_MD5_WITH_RSA, DigestKind.MD5, "1.2.840.113549.1.1.4", "md5WithRSAEncryption", "RSA-MD5"),
    _ec(c.SIGALG_SHA256_WITH_ECDSA, DigestKind.SHA256, "1.2.840.10045.4.3.2", "ecdsa-with-SHA256"),
    _ec(c.SIGALG_SHA384_WITH_ECDSA, DigestKind.SHA384, "1.2.840.10045.4.3.3", "ecdsa-with-SHA384"),
    _ec(c.SIGALG_SHA512_WITH_ECDSA, DigestKind.SHA512, "1.2.840.10045.4.3.4", "ecdsa-with-SHA512"),
    _ec(c.SIGALG_SHA224_WITH_ECDSA, DigestKind.SHA224, "1.2.840.10045.4.3.1", "ecdsa-with-SHA224"),
    _ec(c.SIGALG_SHA3_256_WITH_ECDSA, DigestKind.SHA3_256, "2.16.840.1.101.3.4.3.10", "ecdsa-with-SHA3-256"),
    _ec(c.SIGALG_SHA3_384_WITH_ECDSA, DigestKind.SHA3_384, "2.16.840.1.101.3.4.3.11", "ecdsa-with-SHA3-384"),
    _ec(c.SIGALG_SHA3_512_WITH_ECDSA, DigestKind.SHA3_512, "2.16.840.1.101.3.4.3.12", "ecdsa-with-SHA3-512"),
    # Bouncy Castle reports plain "ECDSA" for SHA1 based certificates
    _ec(c.SIGALG_SHA1_WITH_ECDSA, DigestKind.SHA1, "1.2.840.10045.4.1", "ecdsa-with-SHA1", "ECDSA"),
    _dsa(c.SIGALG_SHA256_WITH_DSA, DigestKind.SHA256, "2.16.840.1.101.3.4.3.2", "dsa_with_SHA256", "DSA-SHA256"),
    _dsa(c.SIGALG_SHA1_WITH_DSA, DigestKind.SHA1, "1.2.840.10040.4.3", "dsaWithSHA1", "DSA-SHA1"),
    SignatureAlgorithmSpec(
        c.SIGALG_GOST3411_WITH_ECGOST3410, DigestKind.GOST3411, KeyAlgorithm.ECGOST3410,
        PaddingScheme.NONE, "1.2.643.2.2.3", ("GOST3411withGOST3410EC",),
    ),
    SignatureAlgorithmSpec(
        c.SIGALG_GOST3411_WITH_DSTU4145, DigestKind.GOST3411, KeyAlgorithm.DSTU4145,
        PaddingScheme.NONE, "1.2.804.2.1.1.1.1.3.1.1", ("GOST3411withDSTU4145LE",),
    ),
    SignatureAlgorithmSpec(c.SIGALG_ED25519, DigestKind.NONE, KeyAlgorithm.ED25519, PaddingScheme.NONE, "1.3.101.112"),
    SignatureAlgorithmSpec(c.SIGALG_ED448, DigestKind.NONE, KeyAlgorithm.ED448, PaddingScheme.NONE, "1.3.101.113"),
)


class SignatureAlgorithmCatalog:
    """Read-only index over a sequence of ``SignatureAlgorithmSpec``."""

    def __init__(self, specs: Iterable[SignatureAlgorithmSpec]):
        self._specs: Tuple[SignatureAlgorithmSpec, ...] = tuple(specs)
        self._by_name: Dict[str, SignatureAlgorithmSpec] = {}
        self._by_oid: Dict[str, List[SignatureAlgorithmSpec]] = {}
        self._by_triple: Dict[Tuple[DigestKind, KeyAlgorithm, PaddingScheme], SignatureAlgorithmSpec] = {}
        for spec in self._specs:
            key = spec.name.casefold()
            if key in self._by_name:
                raise ValueError(f"duplicate signature algorithm {spec.name}")
            self._by_name[key] = spec
            self._by_oid.setdefault(spec.oid, []).append(spec)
            self._by_triple[(spec.digest, spec.key_algorithm, spec.padding)] = spec
        # aliases never shadow a canonical name
        for spec in self._specs:
            for alias in spec.aliases:
                self._by_name.setdefault(alias.casefold(), spec)

    def __iter__(self) -> Iterator[SignatureAlgorithmSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def get(self, name: str) -> SignatureAlgorithmSpec | None:
        if not name:
            return None
        return self._by_name.get(name.strip().casefold())

    def by_oid(self, oid: str, digest: DigestKind | None = None) -> SignatureAlgorithmSpec | None:
        candidates = self._by_oid.get(oid, [])
        if digest is not None:
            candidates = [s for s in candidates if s.digest == digest]
        if len(candidates) != 1:
            return None
        return candidates[0]

    def for_key_algorithm(self, key_algorithm: KeyAlgorithm) -> List[SignatureAlgorithmSpec]:
        return [s for s in self._specs if s.key_algorithm == key_algorithm]

    def compose(
        self, digest: DigestKind, key_algorithm: KeyAlgorithm, padding: PaddingScheme
    ) -> SignatureAlgorithmSpec | None:
        return self._by_triple.get((digest, key_algorithm, padding))


_CATALOG: SignatureAlgorithmCatalog | None = None
_LOCK = threading.Lock()


def get_catalog() -> SignatureAlgorithmCatalog:
    global _CATALOG
    if _CATALOG is None:
        with _LOCK:
            if _CATALOG is None:
                _CATALOG = SignatureAlgorithmCatalog(DEFAULT_SPECS)
    return _CATALOG


def _resolve(catalog: SignatureAlgorithmCatalog | None) -> SignatureAlgorithmCatalog:
    # an empty catalog is falsy, so no `or` here
    return get_catalog() if catalog is None else catalog


def is_enabled(key_algorithm: KeyAlgorithm) -> bool:
    """GOST and DSTU families can be switched off through settings."""
    settings = get_settings()
    if key_algorithm == KeyAlgorithm.ECGOST3410:
        return settings.gost3410_enabled
    if key_algorithm == KeyAlgorithm.DSTU4145:
        return settings.dstu4145_enabled
    return key_algorithm != KeyAlgorithm.UNSUPPORTED


def lookup(name: str, catalog: SignatureAlgorithmCatalog | None = None) -> SignatureAlgorithmSpec | None:
    return _resolve(catalog).get(name)


def lookup_oid(
    oid: str, digest: DigestKind | str | None = None, catalog: SignatureAlgorithmCatalog | None = None
) -> SignatureAlgorithmSpec | None:
    kind = parse_digest(digest) if digest is not None else None
    return _resolve(catalog).by_oid(oid, kind)


def signature_algorithms_for(
    key_algorithm: KeyAlgorithm | str, catalog: SignatureAlgorithmCatalog | None = None
) -> List[str]:
    """All signature-algorithm names usable with ``key_algorithm``, in catalog order."""
    kind = parse_key_algorithm(key_algorithm)
    if kind is None or not is_enabled(kind):
        return []
    accept_legacy = get_settings().accept_legacy_digests
    return [
        s.name
        for s in _resolve(catalog).for_key_algorithm(kind)
        if accept_legacy or not s.legacy
    ]


def key_algorithm_for(name: str, catalog: SignatureAlgorithmCatalog | None = None) -> KeyAlgorithm:
    spec = lookup(name, catalog)
    if spec is None:
        log.debug("unknown signature algorithm %r, assuming %s", name, DEFAULT_KEY_ALGORITHM.value)
        return DEFAULT_KEY_ALGORITHM
    return spec.key_algorithm


def digest_for(name: str, catalog: SignatureAlgorithmCatalog | None = None) -> DigestKind:
    """Digest part of a signature algorithm; ``DigestKind.NONE`` for EdDSA."""
    spec = lookup(name, catalog)
    if spec is None:
        spec = lookup(DEFAULT_SIGNATURE_ALGORITHM, catalog)
        log.debug("unknown signature algorithm %r, assuming digest of %s", name, DEFAULT_SIGNATURE_ALGORITHM)
        return spec.digest if spec is not None else DigestKind.SHA256
    return spec.digest


def compose_name(
    digest: DigestKind | str,
    key_algorithm: KeyAlgorithm | str,
    padding: PaddingScheme | None = None,
    catalog: SignatureAlgorithmCatalog | None = None,
) -> str:
    """Canonical name for a (digest, key algorithm) pair.

    ``digest`` may be a ``DigestKind``, a name such as ``SHA-256`` or a digest
    OID. RSA defaults to PKCS#1 v1.5 padding; pass ``PaddingScheme.MGF1`` for
    the PSS variants. Pairs with no catalog entry resolve to SHA256withRSA.
    """
    d = parse_digest(digest)
    k = parse_key_algorithm(key_algorithm)
    if d is None or k is None:
        log.debug("cannot compose %r/%r, using %s", digest, key_algorithm, DEFAULT_SIGNATURE_ALGORITHM)
        return DEFAULT_SIGNATURE_ALGORITHM
    if padding is None:
        padding = PaddingScheme.PKCS1 if k == KeyAlgorithm.RSA else PaddingScheme.NONE
    spec = _resolve(catalog).compose(d, k, padding)
    if spec is None:
        log.debug("no algorithm for %s/%s/%s, using %s", d.value, k.value, padding.value, DEFAULT_SIGNATURE_ALGORITHM)
        return DEFAULT_SIGNATURE_ALGORITHM
    return spec.name
