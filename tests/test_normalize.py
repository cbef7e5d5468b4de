from types import SimpleNamespace

import pytest
from cryptography.hazmat.primitives import hashes

from certalg.algorithms import constants as c
from certalg.algorithms.normalize import certificate_signature_algorithm, normalize

from helpers import pss, self_signed


@pytest.mark.parametrize("raw, expected", [
    ("SHA3-256WITHRSA", c.SIGALG_SHA3_256_WITH_RSA),
    ("SHA256WithRSA", c.SIGALG_SHA256_WITH_RSA),
    ("sha256WithRSAEncryption", c.SIGALG_SHA256_WITH_RSA),
    ("SHA384WITHECDSA", c.SIGALG_SHA384_WITH_ECDSA),
    ("ECDSA", c.SIGALG_SHA1_WITH_ECDSA),
    ("ecdsa-with-SHA256", c.SIGALG_SHA256_WITH_ECDSA),
    ("SHA256WITHRSAANDMGF1", c.SIGALG_SHA256_WITH_RSA_AND_MGF1),
    ("ED25519", c.SIGALG_ED25519),
])
def test_normalize_provider_names(raw, expected):
    assert normalize(raw) == expected


def test_normalize_passes_unknown_names_through():
    assert normalize("Foobar") == "Foobar"
    assert normalize("") == ""


def test_normalize_is_idempotent():
    for name in (c.SIGALG_SHA1_WITH_DSA, c.SIGALG_GOST3411_WITH_DSTU4145, c.SIGALG_SHA3_512_WITH_ECDSA):
        assert normalize(normalize(name)) == name


def test_certificate_rsa(rsa_private_key):
    cert = self_signed(rsa_private_key, hashes.SHA256())
    assert certificate_signature_algorithm(cert) == c.SIGALG_SHA256_WITH_RSA


def test_certificate_rsa_pss(rsa_private_key):
    cert = self_signed(rsa_private_key, hashes.SHA256(), rsa_padding=pss(hashes.SHA256()))
    assert certificate_signature_algorithm(cert) == c.SIGALG_SHA256_WITH_RSA_AND_MGF1
    cert = self_signed(rsa_private_key, hashes.SHA512(), rsa_padding=pss(hashes.SHA512()))
    assert certificate_signature_algorithm(cert) == c.SIGALG_SHA512_WITH_RSA_AND_MGF1


def test_certificate_ecdsa_and_dsa(ec_private_key, dsa_private_key):
    assert certificate_signature_algorithm(self_signed(ec_private_key, hashes.SHA384())) == c.SIGALG_SHA384_WITH_ECDSA
    assert certificate_signature_algorithm(self_signed(dsa_private_key, hashes.SHA256())) == c.SIGALG_SHA256_WITH_DSA


def test_certificate_eddsa(ed25519_private_key, ed448_private_key):
    assert certificate_signature_algorithm(self_signed(ed25519_private_key, None)) == c.SIGALG_ED25519
    assert certificate_signature_algorithm(self_signed(ed448_private_key, None)) == c.SIGALG_ED448


def test_certificate_like_objects():
    assert certificate_signature_algorithm(SimpleNamespace(signature_algorithm_name="SHA1WITHRSA")) == c.SIGALG_SHA1_WITH_RSA
    assert certificate_signature_algorithm(SimpleNamespace(signature_algorithm_name="1.2.3.4")) == "1.2.3.4"
