"""
Parsing of private keys stored as secrets.

Keys are accepted as PEM or DER, unencrypted.
"""

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from ..exceptions import InvalidKeyError


def load_private_key(data: bytes) -> PrivateKeyTypes:
    """
    Load an unencrypted private key from PEM or DER bytes.

    Args:
        data: Serialized key

    Returns:
        The private key object

    Raises:
        InvalidKeyError: If the bytes are not a private key
    """
    if data.lstrip().startswith(b"-----"):
        loader = serialization.load_pem_private_key
    else:
        loader = serialization.load_der_private_key
    try:
        return loader(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError(f"invalid private key: {e}") from e


def parse_rsa_private_key(data: bytes) -> RSAPrivateKey:
    """
    Parse an RSA private key.

    Raises:
        InvalidKeyError: If the bytes are not an RSA private key
    """
    key = load_private_key(data)
    if not isinstance(key, RSAPrivateKey):
        raise InvalidKeyError(f"expected an RSA private key, got {type(key).__name__}")
    return key


def parse_ed25519_private_key(data: bytes) -> Ed25519PrivateKey:
    """
    Parse an Ed25519 private key.

    Raises:
        InvalidKeyError: If the bytes are not an Ed25519 private key
    """
    key = load_private_key(data)
    if not isinstance(key, Ed25519PrivateKey):
        raise InvalidKeyError(f"expected an Ed25519 private key, got {type(key).__name__}")
    return key


def public_key_pem(key: Union[RSAPrivateKey, Ed25519PrivateKey]) -> bytes:
    """Return the PEM-encoded public half of ``key``."""
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


__all__ = [
    "load_private_key",
    "parse_rsa_private_key",
    "parse_ed25519_private_key",
    "public_key_pem",
]
