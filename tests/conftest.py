import pytest
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa

from certalg.config import reload_settings

_ENV = (
    "CERTALG_GOST3410_ENABLED",
    "CERTALG_DSTU4145_ENABLED",
    "CERTALG_ACCEPT_LEGACY_DIGESTS",
    "CERTALG_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    # isolate from any config/certalg.yml in the working tree
    monkeypatch.setenv("CERTALG_CONFIG", str(tmp_path / "absent.yml"))
    for env in _ENV:
        monkeypatch.delenv(env, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_key(rsa_private_key):
    return rsa_private_key.public_key()


@pytest.fixture(scope="session")
def dsa_private_key():
    return dsa.generate_private_key(key_size=1024)


@pytest.fixture(scope="session")
def dsa_key(dsa_private_key):
    return dsa_private_key.public_key()


@pytest.fixture(scope="session")
def ec_private_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_key(ec_private_key):
    return ec_private_key.public_key()


@pytest.fixture(scope="session")
def ed25519_private_key():
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture(scope="session")
def ed25519_key(ed25519_private_key):
    return ed25519_private_key.public_key()


@pytest.fixture(scope="session")
def ed448_private_key():
    return ed448.Ed448PrivateKey.generate()


@pytest.fixture(scope="session")
def ed448_key(ed448_private_key):
    return ed448_private_key.public_key()
