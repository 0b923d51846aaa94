import logging
from typing import Callable, Optional, Union

from .crypto_provider_impl import CryptoProviderImpl
from .hash_algorithm import HashAlgorithm
from .message import UINT32_MAX, kdfa_message, kdfe_message


__all__ = [  # pylint: disable=unused-variable
    "InvalidLengthException",
    "kdfa",
    "kdfe",
    "truncate_to_bits"
]


logger = logging.getLogger(__name__)


class InvalidLengthException(ValueError):
    """
    Raised by :func:`kdfa`, :func:`kdfe` and :func:`truncate_to_bits` in case the requested bit length is
    invalid, the secret is missing, or the buffer to truncate is too short.
    """


def _byte_length(bits: int) -> int:
    return (bits + 7) // 8


def _check_bits(bits: int) -> None:
    # bool is an int subclass, but never a meaningful length
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise InvalidLengthException(f"The bit length must be an integer, got {bits!r}.")
    if bits <= 0:
        raise InvalidLengthException(f"The bit length must be positive, got {bits}.")
    if bits > UINT32_MAX:
        raise InvalidLengthException(f"The bit length must fit into 32 bits, got {bits}.")


def truncate_to_bits(buffer: bytes, bits: int) -> bytes:
    """
    Truncate a byte-aligned output stream to exactly ``bits`` bits. Trailing bytes are discarded, and if
    ``bits`` is not a multiple of eight, the unused high-order bits of the first byte are cleared.

    Args:
        buffer: The output stream, at least ``ceil(bits / 8)`` bytes long.
        bits: The number of bits to keep.

    Returns:
        The first ``ceil(bits / 8)`` bytes of the buffer, with the top ``8 - bits % 8`` bits of byte 0
        cleared where applicable.

    Raises:
        InvalidLengthException: if ``bits`` is not positive or the buffer is too short.
    """

    _check_bits(bits)

    length = _byte_length(bits)
    if len(buffer) < length:
        raise InvalidLengthException(
            f"Cannot truncate {len(buffer)} bytes to {bits} bits, at least {length} bytes are required."
        )

    result = bytearray(buffer[:length])

    unused_bits = (8 - bits % 8) % 8
    if unused_bits != 0:
        result[0] &= 0xFF >> unused_bits

    return bytes(result)


def _generate(prf: Callable[[int], bytes], bits: int) -> bytes:
    """
    Run the counter loop shared by both KDFs: call the pseudorandom function with counter values 1, 2, ...
    and concatenate the blocks until enough output is available.

    Args:
        prf: Produces the output block for a given counter value.
        bits: The number of bits to derive.

    Returns:
        The truncated and masked output.
    """

    length = _byte_length(bits)

    stream = bytearray()
    counter = 0
    while len(stream) < length:
        counter += 1
        stream += prf(counter)

    return truncate_to_bits(bytes(stream), bits)


def kdfa(
    hash_algorithm: HashAlgorithm,
    key: bytes,
    label: Union[str, bytes],
    context_u: Optional[bytes],
    context_v: Optional[bytes],
    bits: int
) -> bytes:
    """
    KDFa, the counter-mode KDF using HMAC as the pseudorandom function, as defined in TPM2 Part 1 (based on
    NIST SP 800-108). Each output block is
    ``HMAC(key, counter || label || 0x00 || context_u || context_v || bits)``.

    Args:
        hash_algorithm: The hash algorithm to parameterize the HMAC with.
        key: The HMAC key. May be empty.
        label: The label identifying the purpose of the derived key. A single zero byte is appended.
        context_u: The first context value. ``None`` is treated as empty.
        context_v: The second context value. ``None`` is treated as empty.
        bits: The number of bits to derive.

    Returns:
        ``ceil(bits / 8)`` bytes of derived key material.

    Raises:
        UnsupportedAlgorithmException: if the hash algorithm is not supported.
        InvalidLengthException: if ``bits`` is invalid or the key is ``None``.
    """

    hash_algorithm = HashAlgorithm.ensure(hash_algorithm)
    _check_bits(bits)
    if key is None:
        raise InvalidLengthException("The KDFa key must be a byte string, got None.")

    logger.debug("KDFa(%s, label=%r, bits=%d)", hash_algorithm.name, label, bits)

    return _generate(
        lambda counter: CryptoProviderImpl.hmac_calculate(
            key,
            hash_algorithm,
            kdfa_message(counter, label, context_u, context_v, bits)
        ),
        bits
    )


def kdfe(
    hash_algorithm: HashAlgorithm,
    z: bytes,
    label: Union[str, bytes],
    party_u_info: Optional[bytes],
    party_v_info: Optional[bytes],
    bits: int
) -> bytes:
    """
    KDFe, the concatenation KDF using a plain hash as the pseudorandom function, as defined in TPM2 Part 1
    (based on NIST SP 800-56A). Used to derive keys from ECDH shared secrets. Each output block is
    ``Hash(counter || z || label || 0x00 || party_u_info || party_v_info)``. Unlike :func:`kdfa`, the bit
    length is not part of the hashed message.

    Args:
        hash_algorithm: The hash algorithm to use.
        z: The shared secret, usually the x-coordinate of the ECDH point.
        label: The label identifying the purpose of the derived key. A single zero byte is appended.
        party_u_info: The first party information value, usually the x-coordinate of the ephemeral public
            key. ``None`` is treated as empty.
        party_v_info: The second party information value, usually the x-coordinate of the static public key.
            ``None`` is treated as empty.
        bits: The number of bits to derive.

    Returns:
        ``ceil(bits / 8)`` bytes of derived key material.

    Raises:
        UnsupportedAlgorithmException: if the hash algorithm is not supported.
        InvalidLengthException: if ``bits`` is invalid or ``z`` is ``None``.
    """

    hash_algorithm = HashAlgorithm.ensure(hash_algorithm)
    _check_bits(bits)
    if z is None:
        raise InvalidLengthException("The KDFe shared secret must be a byte string, got None.")

    logger.debug("KDFe(%s, label=%r, bits=%d)", hash_algorithm.name, label, bits)

    return _generate(
        lambda counter: CryptoProviderImpl.hash_calculate(
            hash_algorithm,
            kdfe_message(counter, z, label, party_u_info, party_v_info)
        ),
        bits
    )
