import json
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization

from certalg import cli
from certalg.cli import main


def _write_public(tmp_path, key, name="key.pem"):
    path = tmp_path / name
    path.write_bytes(key.public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo))
    return str(path)


def test_classify_public_pem(tmp_path, capsys, ec_key):
    assert main(["classify", _write_public(tmp_path, ec_key)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["keyAlgorithm"] == "ECDSA"
    assert out["keySpec"] == "secp256r1"
    assert "SHA256withECDSA" in out["signatureAlgorithms"]


def test_classify_private_pem(tmp_path, capsys, ed25519_private_key):
    path = tmp_path / "priv.pem"
    path.write_bytes(ed25519_private_key.private_bytes(
        serialization.Encoding.PEM, serialization.PrivateFormat.PKCS8, serialization.NoEncryption()))
    assert main(["classify", str(path)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["keyAlgorithm"] == "Ed25519"
    assert out["signatureAlgorithms"] == ["Ed25519"]


def test_compat_exit_codes(tmp_path, capsys, rsa_key):
    pem = _write_public(tmp_path, rsa_key)
    assert main(["compat", pem, "--alg", "sha256WithRSAEncryption"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"compatible": True, "keyAlgorithm": "RSA", "signatureAlgorithm": "SHA256withRSA"}
    assert main(["compat", pem, "--alg", "SHA256withECDSA"]) == 2


def test_algs_and_normalize(capsys):
    assert main(["algs", "DSA"]) == 0
    assert capsys.readouterr().out.split() == ["SHA256withDSA", "SHA1withDSA"]
    assert main(["normalize", "SHA3-256WITHRSA"]) == 0
    assert capsys.readouterr().out.strip() == "SHA3-256withRSA"


def test_curves_and_oid(capsys):
    assert main(["curves"]) == 0
    assert "secp256r1" in json.loads(capsys.readouterr().out)["X9.62"]
    assert main(["oid", "prime256v1"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["oid"] == "1.2.840.10045.3.1.7"
    assert "secp256r1" in out["aliases"]


def test_unknown_curve_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="certalg"):
        assert main(["oid", "nosuchcurve"]) == 1
    assert "unknown curve nosuchcurve" in caplog.text


def test_inventory_to_file(tmp_path, capsys):
    target = tmp_path / "cbom.json"
    assert main(["inventory", "--output", str(target)]) == 0
    assert json.loads(target.read_text(encoding="utf-8"))["bomFormat"] == "CycloneDX"
    assert "wrote" in capsys.readouterr().out


def test_bad_input_returns_error(tmp_path):
    garbage = tmp_path / "garbage.pem"
    garbage.write_bytes(b"not a key")
    assert main(["classify", str(garbage)]) == 1
    assert main(["classify", str(tmp_path / "missing.pem")]) == 1


def test_unsupported_key_type_returns_error(tmp_path, monkeypatch):
    def _unsupported(path):
        raise UnsupportedAlgorithm("key type not supported by this backend")

    monkeypatch.setattr(cli, "_load_public_key", _unsupported)
    assert main(["classify", str(tmp_path / "key.pem")]) == 1
    assert main(["compat", str(tmp_path / "key.pem"), "--alg", "SHA256withRSA"]) == 1
