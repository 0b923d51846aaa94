from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC

from .crypto_provider import CryptoProvider
from .hash_algorithm import HashAlgorithm


__all__ = [  # pylint: disable=unused-variable
    "CryptoProviderImpl"
]


class CryptoProviderImpl(CryptoProvider):
    """
    Cryptography provider based on the Python package `cryptography <https://github.com/pyca/cryptography>`_.
    """

    @staticmethod
    def hmac_calculate(key: bytes, hash_algorithm: HashAlgorithm, data: bytes) -> bytes:
        hmac = HMAC(key, hash_algorithm.as_cryptography, backend=default_backend())
        hmac.update(data)
        return hmac.finalize()

    @staticmethod
    def hash_calculate(hash_algorithm: HashAlgorithm, data: bytes) -> bytes:
        digest = hashes.Hash(hash_algorithm.as_cryptography, backend=default_backend())
        digest.update(data)
        return digest.finalize()
