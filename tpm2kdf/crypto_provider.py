from abc import ABC, abstractmethod

from .hash_algorithm import HashAlgorithm


__all__ = [  # pylint: disable=unused-variable
    "CryptoProvider"
]


class CryptoProvider(ABC):
    """
    Abstraction of the cryptographic primitives needed by the key derivation functions to allow for different
    backend implementations. Implementations must not share mutable primitive state between calls.
    """

    @staticmethod
    @abstractmethod
    def hmac_calculate(key: bytes, hash_algorithm: HashAlgorithm, data: bytes) -> bytes:
        """
        Args:
            key: The HMAC key.
            hash_algorithm: The hash algorithm to parameterize the HMAC with.
            data: The data to authenticate.

        Returns:
            The HMAC of the data, ``hash_algorithm.digest_size`` bytes long.
        """

    @staticmethod
    @abstractmethod
    def hash_calculate(hash_algorithm: HashAlgorithm, data: bytes) -> bytes:
        """
        Args:
            hash_algorithm: The hash algorithm to use.
            data: The data to hash.

        Returns:
            The digest of the data, ``hash_algorithm.digest_size`` bytes long.
        """
