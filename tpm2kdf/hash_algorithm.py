import enum
from typing_extensions import assert_never

from cryptography.hazmat.primitives import hashes


__all__ = [  # pylint: disable=unused-variable
    "HashAlgorithm",
    "UnsupportedAlgorithmException"
]


class UnsupportedAlgorithmException(ValueError):
    """
    Raised by :meth:`HashAlgorithm.from_alg_id` and by the key derivation functions in case the hash
    algorithm identifier is not recognized.
    """


@enum.unique
class HashAlgorithm(enum.Enum):
    """
    Enumeration of the hash algorithms that can parameterize KDFa and KDFe. The values are the ``TPM_ALG_ID``
    numbers assigned to the algorithms by the TCG algorithm registry.
    """

    SHA_1: int = 0x0004
    SHA_256: int = 0x000B
    SHA_384: int = 0x000C
    SHA_512: int = 0x000D
    SHA3_256: int = 0x0027
    SHA3_384: int = 0x0028
    SHA3_512: int = 0x0029

    @classmethod
    def from_alg_id(cls, alg_id: int) -> "HashAlgorithm":
        """
        Args:
            alg_id: A raw ``TPM_ALG_ID`` value, as found in TPM2 structures.

        Returns:
            The hash algorithm identified by ``alg_id``.

        Raises:
            UnsupportedAlgorithmException: if ``alg_id`` does not identify a supported hash algorithm.
        """

        try:
            return cls(alg_id)
        except ValueError as e:
            raise UnsupportedAlgorithmException(
                f"Unsupported hash algorithm identifier: {alg_id!r}"
            ) from e

    @classmethod
    def ensure(cls, hash_algorithm: object) -> "HashAlgorithm":
        """
        Args:
            hash_algorithm: The value to check.

        Returns:
            ``hash_algorithm``, if it is a member of this enumeration.

        Raises:
            UnsupportedAlgorithmException: if ``hash_algorithm`` is not a member of this enumeration.
        """

        if isinstance(hash_algorithm, cls):
            return hash_algorithm

        raise UnsupportedAlgorithmException(f"Unsupported hash algorithm: {hash_algorithm!r}")

    @property
    def digest_size(self) -> int:
        """
        Returns:
            The byte size of the digests produced by this hash algorithm.
        """

        if self is HashAlgorithm.SHA_1:
            return 20
        if self is HashAlgorithm.SHA_256:
            return 32
        if self is HashAlgorithm.SHA_384:
            return 48
        if self is HashAlgorithm.SHA_512:
            return 64
        if self is HashAlgorithm.SHA3_256:
            return 32
        if self is HashAlgorithm.SHA3_384:
            return 48
        if self is HashAlgorithm.SHA3_512:
            return 64

        return assert_never(self)

    @property
    def digest_bits(self) -> int:
        """
        Returns:
            The bit size of the digests produced by this hash algorithm.
        """

        return self.digest_size * 8

    @property
    def as_cryptography(self) -> hashes.HashAlgorithm:
        """
        Returns:
            The implementation of the hash algorithm as a cryptography `HashAlgorithm` object.
        """

        if self is HashAlgorithm.SHA_1:
            return hashes.SHA1()
        if self is HashAlgorithm.SHA_256:
            return hashes.SHA256()
        if self is HashAlgorithm.SHA_384:
            return hashes.SHA384()
        if self is HashAlgorithm.SHA_512:
            return hashes.SHA512()
        if self is HashAlgorithm.SHA3_256:
            return hashes.SHA3_256()
        if self is HashAlgorithm.SHA3_384:
            return hashes.SHA3_384()
        if self is HashAlgorithm.SHA3_512:
            return hashes.SHA3_512()

        return assert_never(self)
