"""Public key -> key-algorithm classification.

Keys are recognised by shape rather than by class hierarchy:
  - pyca/cryptography key objects (RSA, DSA, EC, Ed25519, Ed448)
  - RSA-shaped:  ``modulus`` + ``public_exponent``
  - DSA-shaped:  ``y`` + ``params``
  - EC-shaped:   ``w`` + ``params``; the reported ``algorithm`` name splits
                 ECDSA from ECGOST3410 and DSTU4145, which share the shape
  - EdDSA:       reported ``algorithm`` name only ("Ed25519" / "Ed448")

Anything else is ``KeyAlgorithm.UNSUPPORTED``; classification never raises.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa

from ..algorithms.constants import KeyAlgorithm
from ..curves.resolver import canonical_name

__all__ = ["RSAShaped", "DSAShaped", "ECShaped", "classify", "key_specification"]


@runtime_checkable
class RSAShaped(Protocol):
    modulus: int
    public_exponent: int


@runtime_checkable
class DSAShaped(Protocol):
    y: int
    params: Any


@runtime_checkable
class ECShaped(Protocol):
    w: Any
    params: Any


def _reported_name(public_key: Any) -> str:
    name = getattr(public_key, "algorithm", None)
    return name if isinstance(name, str) else ""


def _ec_family(reported: str) -> KeyAlgorithm:
    upper = reported.upper()
    if "GOST" in upper:
        return KeyAlgorithm.ECGOST3410
    if "DSTU" in upper:
        return KeyAlgorithm.DSTU4145
    return KeyAlgorithm.ECDSA


_EDDSA_NAMES = {
    KeyAlgorithm.ED25519.value.casefold(): KeyAlgorithm.ED25519,
    KeyAlgorithm.ED448.value.casefold(): KeyAlgorithm.ED448,
}


def classify(public_key: Any) -> KeyAlgorithm:
    if isinstance(public_key, (rsa.RSAPublicKey, RSAShaped)):
        return KeyAlgorithm.RSA
    if isinstance(public_key, (dsa.DSAPublicKey, DSAShaped)):
        return KeyAlgorithm.DSA
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        return KeyAlgorithm.ECDSA
    if isinstance(public_key, ECShaped):
        return _ec_family(_reported_name(public_key))
    if isinstance(public_key, ed25519.Ed25519PublicKey):
        return KeyAlgorithm.ED25519
    if isinstance(public_key, ed448.Ed448PublicKey):
        return KeyAlgorithm.ED448
    return _EDDSA_NAMES.get(_reported_name(public_key).casefold(), KeyAlgorithm.UNSUPPORTED)


def _curve_name(params: Any) -> str:
    name = getattr(params, "name", None)
    if not isinstance(name, str) or not name:
        return "unknown"
    return canonical_name(name) or name


def _bit_length(value: Any) -> str:
    if not isinstance(value, int):
        return "unknown"
    return str(value.bit_length())


def key_specification(public_key: Any) -> str | None:
    """Size or curve of a key, the way issuance profiles refer to it.

    RSA and DSA give the modulus / prime length in bits, EC keys their curve
    name, EdDSA keys their algorithm name. Unsupported keys give None.
    """
    kind = classify(public_key)
    if kind == KeyAlgorithm.RSA:
        if isinstance(public_key, rsa.RSAPublicKey):
            return str(public_key.key_size)
        return _bit_length(public_key.modulus)
    if kind == KeyAlgorithm.DSA:
        if isinstance(public_key, dsa.DSAPublicKey):
            return str(public_key.key_size)
        return _bit_length(getattr(public_key.params, "p", None))
    if kind in (KeyAlgorithm.ECDSA, KeyAlgorithm.ECGOST3410, KeyAlgorithm.DSTU4145):
        if isinstance(public_key, ec.EllipticCurvePublicKey):
            return canonical_name(public_key.curve.name) or public_key.curve.name
        return _curve_name(public_key.params)
    if kind in (KeyAlgorithm.ED25519, KeyAlgorithm.ED448):
        return kind.value
    return None
