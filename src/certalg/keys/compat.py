"""Key x signature-algorithm compatibility.

EC-shaped keys split into four families (ECDSA, ECGOST3410, DSTU4145 and the
EdDSA curves) that never share signature algorithms, so compatibility is an
explicit rule per key algorithm rather than a comparison of shapes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List

from ..algorithms import constants as c
from ..algorithms.catalog import compose_name, is_enabled, lookup, signature_algorithms_for
from ..algorithms.constants import KeyAlgorithm, PaddingScheme
from ..config import get_settings
from .classify import classify

__all__ = ["is_compatible", "compatible_signature_algorithms", "enc_sig_alg_for"]


@dataclass(frozen=True)
class _Rule:
    families: FrozenSet[KeyAlgorithm]
    paddings: FrozenSet[PaddingScheme]


_NO_PADDING = frozenset({PaddingScheme.NONE})

_RULES: Dict[KeyAlgorithm, _Rule] = {
    KeyAlgorithm.RSA: _Rule(frozenset({KeyAlgorithm.RSA}), frozenset({PaddingScheme.PKCS1, PaddingScheme.MGF1})),
    KeyAlgorithm.DSA: _Rule(frozenset({KeyAlgorithm.DSA}), _NO_PADDING),
    KeyAlgorithm.ECDSA: _Rule(frozenset({KeyAlgorithm.ECDSA}), _NO_PADDING),
    KeyAlgorithm.ED25519: _Rule(frozenset({KeyAlgorithm.ED25519}), _NO_PADDING),
    KeyAlgorithm.ED448: _Rule(frozenset({KeyAlgorithm.ED448}), _NO_PADDING),
    KeyAlgorithm.ECGOST3410: _Rule(frozenset({KeyAlgorithm.ECGOST3410}), _NO_PADDING),
    KeyAlgorithm.DSTU4145: _Rule(frozenset({KeyAlgorithm.DSTU4145}), _NO_PADDING),
}


def is_compatible(public_key: Any, signature_algorithm: str) -> bool:
    """True when ``signature_algorithm`` may be used to sign with ``public_key``.

    Names missing from the catalog are never compatible, even though
    ``key_algorithm_for`` maps them to RSA.
    """
    kind = classify(public_key)
    rule = _RULES.get(kind)
    if rule is None or not is_enabled(kind):
        return False
    spec = lookup(signature_algorithm)
    if spec is None:
        return False
    if spec.legacy and not get_settings().accept_legacy_digests:
        return False
    return spec.key_algorithm in rule.families and spec.padding in rule.paddings


def compatible_signature_algorithms(public_key: Any) -> List[str]:
    return signature_algorithms_for(classify(public_key))


def enc_sig_alg_for(signature_algorithm: str, public_key: Any) -> str:
    """Signature algorithm for an encryption certificate issued to ``public_key``.

    Keeps the digest strength of ``signature_algorithm`` but moves it onto the
    family of the key. Unknown names come back unchanged.
    """
    spec = lookup(signature_algorithm)
    if spec is None:
        return signature_algorithm
    if spec.key_algorithm in (KeyAlgorithm.ECGOST3410, KeyAlgorithm.DSTU4145):
        return c.SIGALG_SHA1_WITH_RSA
    if spec.key_algorithm in (KeyAlgorithm.ED25519, KeyAlgorithm.ED448):
        return c.SIGALG_SHA256_WITH_RSA
    if spec.key_algorithm == KeyAlgorithm.DSA:
        return compose_name(spec.digest, KeyAlgorithm.RSA)
    kind = classify(public_key)
    if kind == KeyAlgorithm.ECDSA:
        return compose_name(spec.digest, KeyAlgorithm.ECDSA)
    if kind == KeyAlgorithm.RSA:
        padding = PaddingScheme.MGF1 if spec.padding == PaddingScheme.MGF1 else None
        return compose_name(spec.digest, KeyAlgorithm.RSA, padding)
    return signature_algorithm
