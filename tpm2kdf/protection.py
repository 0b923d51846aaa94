import enum
from typing import Union

from .hash_algorithm import HashAlgorithm
from .kdf import kdfa, kdfe


__all__ = [  # pylint: disable=unused-variable
    "Label",
    "derive_ecdh_seed",
    "derive_integrity_key",
    "derive_parameter_encryption_key",
    "derive_session_key",
    "derive_symmetric_protection_key"
]


@enum.unique
class Label(str, enum.Enum):
    """
    Enumeration of the labels used by the TPM2 architecture to bind derived keys to their purpose. Members
    are strings, so they can be passed as label to :func:`~tpm2kdf.kdf.kdfa` and :func:`~tpm2kdf.kdf.kdfe`
    directly.
    """

    ATH: str = "ATH"
    CFB: str = "CFB"
    XOR: str = "XOR"
    STORAGE: str = "STORAGE"
    INTEGRITY: str = "INTEGRITY"
    IDENTITY: str = "IDENTITY"
    DUPLICATE: str = "DUPLICATE"
    SECRET: str = "SECRET"
    OBFUSCATE: str = "OBFUSCATE"


def derive_session_key(
    hash_algorithm: HashAlgorithm,
    session_value: bytes,
    nonce_tpm: bytes,
    nonce_caller: bytes
) -> bytes:
    """
    Derive the key of an authorization session.

    Args:
        hash_algorithm: The hash algorithm of the session.
        session_value: The concatenation of the bind entity's authorization value and the salt. Empty for
            unbound, unsalted sessions.
        nonce_tpm: The first nonce generated by the TPM.
        nonce_caller: The nonce generated by the caller when starting the session.

    Returns:
        The session key, one digest long. Unbound, unsalted sessions have no session key, in which case
        the empty byte string is returned.
    """

    hash_algorithm = HashAlgorithm.ensure(hash_algorithm)

    if session_value == b"":
        return b""

    return kdfa(hash_algorithm, session_value, Label.ATH, nonce_tpm, nonce_caller, hash_algorithm.digest_bits)


def derive_symmetric_protection_key(
    name_algorithm: HashAlgorithm,
    seed: bytes,
    name: bytes,
    key_bits: int
) -> bytes:
    """
    Derive the symmetric key protecting the sensitive area of a duplicated object or a credential.

    Args:
        name_algorithm: The name algorithm of the protecting object.
        seed: The protection seed.
        name: The name of the protected object.
        key_bits: The key size of the symmetric algorithm of the protecting object.

    Returns:
        The symmetric protection key.
    """

    return kdfa(name_algorithm, seed, Label.STORAGE, name, b"", key_bits)


def derive_integrity_key(name_algorithm: HashAlgorithm, seed: bytes) -> bytes:
    """
    Derive the HMAC key for the outer integrity of a duplicated object or a credential.

    Args:
        name_algorithm: The name algorithm of the protecting object.
        seed: The protection seed.

    Returns:
        The HMAC key, one digest long.
    """

    return kdfa(
        name_algorithm,
        seed,
        Label.INTEGRITY,
        b"",
        b"",
        HashAlgorithm.ensure(name_algorithm).digest_bits
    )


def derive_parameter_encryption_key(
    hash_algorithm: HashAlgorithm,
    session_key: bytes,
    nonce_newer: bytes,
    nonce_older: bytes,
    bits: int
) -> bytes:
    """
    Derive the key and IV material for CFB-mode parameter encryption. The caller splits the result into the
    symmetric key and the initialization vector.

    Args:
        hash_algorithm: The hash algorithm of the session.
        session_key: The session key concatenated with the authorization value of the entity.
        nonce_newer: The nonce of the sender of the encrypted parameter.
        nonce_older: The nonce of the receiver of the encrypted parameter.
        bits: The combined size of the symmetric key and the IV.

    Returns:
        The key and IV material.
    """

    return kdfa(hash_algorithm, session_key, Label.CFB, nonce_newer, nonce_older, bits)


def derive_ecdh_seed(
    name_algorithm: HashAlgorithm,
    z: bytes,
    label: Union[Label, str],
    ephemeral_x: bytes,
    static_x: bytes
) -> bytes:
    """
    Derive a seed from an ECDH shared secret, as done when an ECC key protects a duplication blob, a
    credential or a salt.

    Args:
        name_algorithm: The name algorithm of the ECC key.
        z: The x-coordinate of the shared ECDH point.
        label: The purpose of the seed, usually :attr:`Label.DUPLICATE`, :attr:`Label.IDENTITY` or
            :attr:`Label.SECRET`.
        ephemeral_x: The x-coordinate of the ephemeral public key.
        static_x: The x-coordinate of the static public key.

    Returns:
        The seed, one digest long.
    """

    return kdfe(
        name_algorithm,
        z,
        label,
        ephemeral_x,
        static_x,
        HashAlgorithm.ensure(name_algorithm).digest_bits
    )
