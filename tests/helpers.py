import datetime

from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.x509.oid import NameOID


# Capability-shaped stand-ins for keys decoded by other providers.
class MockPublicKey:
    algorithm = None


class MockNotSupportedPublicKey(MockPublicKey):
    pass


class MockRSAPublicKey(MockPublicKey):
    public_exponent = 1
    modulus = 1000


class MockDSAParams:
    p = 2**1023 + 1


class MockDSAPublicKey(MockPublicKey):
    y = 1
    params = None


class MockECParams:
    def __init__(self, name):
        self.name = name


class MockECDSAPublicKey(MockPublicKey):
    w = None
    params = None
    algorithm = "ECDSA mock"


class MockGOST3410PublicKey(MockPublicKey):
    w = None
    params = None
    algorithm = "GOST mock"


class MockDSTU4145PublicKey(MockPublicKey):
    w = None
    params = None
    algorithm = "DSTU mock"


class MockEd25519PublicKey(MockPublicKey):
    algorithm = "Ed25519"


class MockEd448PublicKey(MockPublicKey):
    algorithm = "Ed448"


def self_signed(private_key, algorithm, rsa_padding=None):
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "TEST")])
    now = datetime.datetime.now(datetime.timezone.utc)
    builder = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=10))
    )
    if rsa_padding is not None:
        return builder.sign(private_key, algorithm, rsa_padding=rsa_padding)
    return builder.sign(private_key, algorithm)


def pss(h):
    return padding.PSS(mgf=padding.MGF1(h), salt_length=padding.PSS.DIGEST_LENGTH)
