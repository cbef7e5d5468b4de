from __future__ import annotations

from typing import Dict, Type

from cryptography.hazmat.primitives import hashes

from .catalog import SignatureAlgorithmCatalog, digest_for
from .constants import DigestKind


class UnsupportedDigest(ValueError):
    """Raised when a hash function is requested for an algorithm that has none."""


_HASHES: Dict[DigestKind, Type[hashes.HashAlgorithm]] = {
    DigestKind.MD5: hashes.MD5,
    DigestKind.SHA1: hashes.SHA1,
    DigestKind.SHA224: hashes.SHA224,
    DigestKind.SHA256: hashes.SHA256,
    DigestKind.SHA384: hashes.SHA384,
    DigestKind.SHA512: hashes.SHA512,
    DigestKind.SHA3_256: hashes.SHA3_256,
    DigestKind.SHA3_384: hashes.SHA3_384,
    DigestKind.SHA3_512: hashes.SHA3_512,
}


def hash_algorithm(kind: DigestKind) -> hashes.HashAlgorithm:
    cls = _HASHES.get(kind)
    if cls is None:
        # NONE (pure EdDSA) and GOST3411, which pyca/cryptography does not ship
        raise UnsupportedDigest(f"no hash function available for digest {kind.value}")
    return cls()


def hash_algorithm_for(name: str, catalog: SignatureAlgorithmCatalog | None = None) -> hashes.HashAlgorithm:
    """Instantiate the hash a signature algorithm signs with.

    EdDSA algorithms hash internally and carry no separate digest, so asking
    for one is an error rather than a silent SHA-256.
    """
    kind = digest_for(name, catalog)
    if kind == DigestKind.NONE:
        raise UnsupportedDigest(f"{name} has no separate digest")
    return hash_algorithm(kind)
