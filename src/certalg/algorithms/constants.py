"""Closed vocabularies shared by the catalog, the classifier and the curve resolver.

 - KeyAlgorithm: family a public key belongs to
 - DigestKind: hash used before signing (NONE for pure EdDSA)
 - PaddingScheme: RSA padding (NONE for everything that is not RSA)
 - SIGALG_*: canonical signature-algorithm names
"""
from __future__ import annotations

from enum import Enum
from typing import Dict

__all__ = [
    "KeyAlgorithm",
    "DigestKind",
    "PaddingScheme",
    "DIGEST_OIDS",
    "parse_digest",
    "parse_key_algorithm",
]


class KeyAlgorithm(str, Enum):
    RSA = "RSA"
    DSA = "DSA"
    ECDSA = "ECDSA"
    ED25519 = "Ed25519"
    ED448 = "Ed448"
    ECGOST3410 = "ECGOST3410"
    DSTU4145 = "DSTU4145"
    UNSUPPORTED = "Unsupported"


class DigestKind(str, Enum):
    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    SHA3_256 = "SHA3-256"
    SHA3_384 = "SHA3-384"
    SHA3_512 = "SHA3-512"
    GOST3411 = "GOST3411"
    NONE = "NONE"

    @property
    def oid(self) -> str | None:
        return DIGEST_OIDS.get(self)


class PaddingScheme(str, Enum):
    NONE = "NONE"
    PKCS1 = "PKCS1"
    MGF1 = "MGF1"


DIGEST_OIDS: Dict[DigestKind, str] = {
    DigestKind.MD5: "1.2.840.113549.2.5",
    DigestKind.SHA1: "1.3.14.3.2.26",
    DigestKind.SHA224: "2.16.840.1.101.3.4.2.4",
    DigestKind.SHA256: "2.16.840.1.101.3.4.2.1",
    DigestKind.SHA384: "2.16.840.1.101.3.4.2.2",
    DigestKind.SHA512: "2.16.840.1.101.3.4.2.3",
    DigestKind.SHA3_256: "2.16.840.1.101.3.4.2.8",
    DigestKind.SHA3_384: "2.16.840.1.101.3.4.2.9",
    DigestKind.SHA3_512: "2.16.840.1.101.3.4.2.10",
    DigestKind.GOST3411: "1.2.643.2.2.9",
}

_DIGEST_BY_OID = {oid: kind for kind, oid in DIGEST_OIDS.items()}


def _squash(value: str) -> str:
    return value.replace("-", "").replace("_", "").upper()


_DIGEST_BY_NAME = {_squash(kind.value): kind for kind in DigestKind}

_KEY_ALGORITHM_BY_NAME = {k.value.upper(): k for k in KeyAlgorithm}
# "EC" is what most providers report for ECDSA keys
_KEY_ALGORITHM_BY_NAME["EC"] = KeyAlgorithm.ECDSA
_KEY_ALGORITHM_BY_NAME["GOST3410"] = KeyAlgorithm.ECGOST3410


def parse_digest(value: DigestKind | str) -> DigestKind | None:
    """Resolve a digest given as enum, name (``SHA-256``) or OID."""
    if isinstance(value, DigestKind):
        return value
    if not value:
        return None
    if value in _DIGEST_BY_OID:
        return _DIGEST_BY_OID[value]
    return _DIGEST_BY_NAME.get(_squash(value))


def parse_key_algorithm(value: KeyAlgorithm | str) -> KeyAlgorithm | None:
    if isinstance(value, KeyAlgorithm):
        return value
    if not value:
        return None
    return _KEY_ALGORITHM_BY_NAME.get(value.upper())


# Canonical signature-algorithm names
SIGALG_MD5_WITH_RSA = "MD5withRSA"
SIGALG_SHA1_WITH_RSA = "SHA1withRSA"
SIGALG_SHA256_WITH_RSA = "SHA256withRSA"
SIGALG_SHA384_WITH_RSA = "SHA384withRSA"
SIGALG_SHA512_WITH_RSA = "SHA512withRSA"
SIGALG_SHA3_256_WITH_RSA = "SHA3-256withRSA"
SIGALG_SHA3_384_WITH_RSA = "SHA3-384withRSA"
SIGALG_SHA3_512_WITH_RSA = "SHA3-512withRSA"
SIGALG_SHA1_WITH_RSA_AND_MGF1 = "SHA1withRSAandMGF1"
SIGALG_SHA256_WITH_RSA_AND_MGF1 = "SHA256withRSAandMGF1"
SIGALG_SHA384_WITH_RSA_AND_MGF1 = "SHA384withRSAandMGF1"
SIGALG_SHA512_WITH_RSA_AND_MGF1 = "SHA512withRSAandMGF1"
SIGALG_SHA1_WITH_ECDSA = "SHA1withECDSA"
SIGALG_SHA224_WITH_ECDSA = "SHA224withECDSA"
SIGALG_SHA256_WITH_ECDSA = "SHA256withECDSA"
SIGALG_SHA384_WITH_ECDSA = "SHA384withECDSA"
SIGALG_SHA512_WITH_ECDSA = "SHA512withECDSA"
SIGALG_SHA3_256_WITH_ECDSA = "SHA3-256withECDSA"
SIGALG_SHA3_384_WITH_ECDSA = "SHA3-384withECDSA"
SIGALG_SHA3_512_WITH_ECDSA = "SHA3-512withECDSA"
SIGALG_SHA1_WITH_DSA = "SHA1withDSA"
SIGALG_SHA256_WITH_DSA = "SHA256withDSA"
SIGALG_GOST3411_WITH_ECGOST3410 = "GOST3411withECGOST3410"
SIGALG_GOST3411_WITH_DSTU4145 = "GOST3411withDSTU4145"
SIGALG_ED25519 = "Ed25519"
SIGALG_ED448 = "Ed448"

# Used when a name or a (digest, key) pair cannot be resolved
DEFAULT_SIGNATURE_ALGORITHM = SIGALG_SHA256_WITH_RSA
DEFAULT_KEY_ALGORITHM = KeyAlgorithm.RSA
