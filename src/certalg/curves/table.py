"""Named elliptic curves: canonical name, historical aliases, OID, source.

Canonical names follow SEC 2 where a curve has a SEC name (that is also what
pyca/cryptography reports as ``curve.name``). DSTU 4145 curves are named by
their short key-spec form ("2.5"), the full OID being the arc under
1.2.804.2.1.1.1.1.3.1.1.2.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

SOURCE_SEC = "SEC"
SOURCE_X962 = "X9.62"
SOURCE_BRAINPOOL = "TeleTrusT"
SOURCE_ANSSI = "ANSSI"
SOURCE_GM = "GM"
SOURCE_RFC8410 = "RFC8410"
SOURCE_GOST = "ECGOST3410"
SOURCE_DSTU = "DSTU4145"


@dataclass(frozen=True)
class CurveEntry:
    canonical_name: str
    oid: str
    source: str
    aliases: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def names(self) -> FrozenSet[str]:
        return self.aliases | {self.canonical_name}


def _sec(name: str, arc: int, *aliases: str) -> CurveEntry:
    return CurveEntry(name, f"1.3.132.0.{arc}", SOURCE_SEC, frozenset(aliases))


def _x962_prime(name: str, arc: int, *aliases: str) -> CurveEntry:
    return CurveEntry(name, f"1.2.840.10045.3.1.{arc}", SOURCE_X962, frozenset(aliases))


def _x962_c2(name: str, arc: int) -> CurveEntry:
    return CurveEntry(name, f"1.2.840.10045.3.0.{arc}", SOURCE_X962)


def _brainpool(name: str, arc: int) -> CurveEntry:
    return CurveEntry(name, f"1.3.36.3.3.2.8.1.1.{arc}", SOURCE_BRAINPOOL, frozenset({"brainpoolP" + name[len("brainpoolp"):]}))


def _dstu(arc: int) -> CurveEntry:
    return CurveEntry(f"2.{arc}", f"1.2.804.2.1.1.1.1.3.1.1.2.{arc}", SOURCE_DSTU, frozenset({f"DSTU4145-2.{arc}"}))


CURVES: Tuple[CurveEntry, ...] = (
    # SEC 2 prime curves
    _sec("secp112r1", 6),
    _sec("secp112r2", 7),
    _sec("secp128r1", 28),
    _sec("secp128r2", 29),
    _sec("secp160k1", 9),
    _sec("secp160r1", 8),
    _sec("secp160r2", 30),
    _sec("secp192k1", 31),
    _sec("secp224k1", 32),
    _sec("secp224r1", 33, "P-224"),
    _sec("secp256k1", 10),
    _sec("secp384r1", 34, "P-384"),
    _sec("secp521r1", 35, "P-521"),
    # SEC 2 binary curves
    _sec("sect113r1", 4),
    _sec("sect113r2", 5),
    _sec("sect131r1", 22),
    _sec("sect131r2", 23),
    _sec("sect163k1", 1, "K-163"),
    _sec("sect163r1", 2),
    _sec("sect163r2", 15, "B-163"),
    _sec("sect193r1", 24),
    _sec("sect193r2", 25),
    _sec("sect233k1", 26, "K-233"),
    _sec("sect233r1", 27, "B-233"),
    _sec("sect239k1", 3),
    _sec("sect283k1", 16, "K-283"),
    _sec("sect283r1", 17, "B-283"),
    _sec("sect409k1", 36, "K-409"),
    _sec("sect409r1", 37, "B-409"),
    _sec("sect571k1", 38, "K-571"),
    _sec("sect571r1", 39, "B-571"),
    # X9.62 prime curves; 192v1 and 256v1 are the SEC r1 curves under another name
    _x962_prime("secp192r1", 1, "prime192v1", "P-192"),
    _x962_prime("prime192v2", 2),
    _x962_prime("prime192v3", 3),
    _x962_prime("prime239v1", 4),
    _x962_prime("prime239v2", 5),
    _x962_prime("prime239v3", 6),
    _x962_prime("secp256r1", 7, "prime256v1", "P-256"),
    # X9.62 characteristic-two curves
    _x962_c2("c2pnb163v1", 1),
    _x962_c2("c2pnb163v2", 2),
    _x962_c2("c2pnb163v3", 3),
    _x962_c2("c2pnb176w1", 4),
    _x962_c2("c2tnb191v1", 5),
    _x962_c2("c2tnb191v2", 6),
    _x962_c2("c2tnb191v3", 7),
    _x962_c2("c2pnb208w1", 10),
    _x962_c2("c2tnb239v1", 11),
    _x962_c2("c2tnb239v2", 12),
    _x962_c2("c2tnb239v3", 13),
    _x962_c2("c2pnb272w1", 16),
    _x962_c2("c2pnb304w1", 17),
    _x962_c2("c2tnb359v1", 18),
    _x962_c2("c2pnb368w1", 19),
    _x962_c2("c2tnb431r1", 20),
    # RFC 5639
    _brainpool("brainpoolp160r1", 1),
    _brainpool("brainpoolp160t1", 2),
    _brainpool("brainpoolp192r1", 3),
    _brainpool("brainpoolp192t1", 4),
    _brainpool("brainpoolp224r1", 5),
    _brainpool("brainpoolp224t1", 6),
    _brainpool("brainpoolp256r1", 7),
    _brainpool("brainpoolp256t1", 8),
    _brainpool("brainpoolp320r1", 9),
    _brainpool("brainpoolp320t1", 10),
    _brainpool("brainpoolp384r1", 11),
    _brainpool("brainpoolp384t1", 12),
    _brainpool("brainpoolp512r1", 13),
    _brainpool("brainpoolp512t1", 14),
    CurveEntry("FRP256v1", "1.2.250.1.223.101.256.1", SOURCE_ANSSI),
    CurveEntry("sm2p256v1", "1.2.156.10197.1.301", SOURCE_GM, frozenset({"SM2"})),
    CurveEntry("Ed25519", "1.3.101.112", SOURCE_RFC8410, frozenset({"edwards25519"})),
    CurveEntry("Ed448", "1.3.101.113", SOURCE_RFC8410, frozenset({"edwards448"})),
    # GOST R 34.10-2001, CryptoPro parameter sets (RFC 4357)
    CurveEntry("GostR3410-2001-CryptoPro-A", "1.2.643.2.2.35.1", SOURCE_GOST),
    CurveEntry("GostR3410-2001-CryptoPro-B", "1.2.643.2.2.35.2", SOURCE_GOST),
    CurveEntry("GostR3410-2001-CryptoPro-C", "1.2.643.2.2.35.3", SOURCE_GOST),
    CurveEntry("GostR3410-2001-CryptoPro-XchA", "1.2.643.2.2.36.0", SOURCE_GOST),
    CurveEntry("GostR3410-2001-CryptoPro-XchB", "1.2.643.2.2.36.1", SOURCE_GOST),
    # DSTU 4145-2002 polynomial-basis curves
    *(_dstu(arc) for arc in range(10)),
)
