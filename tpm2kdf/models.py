from typing import Any

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer
from typing_extensions import Annotated, TypeAlias

from .hash_algorithm import HashAlgorithm
from .kdf import kdfa, kdfe


__all__ = [  # pylint: disable=unused-variable
    "JSONBytes",
    "KDFaParametersModel",
    "KDFeParametersModel",
    "kdfa_from_model",
    "kdfe_from_model"
]


def _json_bytes_decoder(val: Any) -> bytes:
    """
    Decode bytes from a string according to the JSON specification. Each character of the string represents
    the byte with the same code point.

    Args:
        val: The value to type check and decode.

    Returns:
        The value decoded to bytes. If the value is bytes already, it is returned unmodified.

    Raises:
        ValueError: if the value is not correctly encoded.
    """

    if isinstance(val, bytes):
        return val
    if isinstance(val, str):
        if any(ord(char) > 0xFF for char in val):
            raise ValueError("bytes fields encoded as str must only contain code points up to 0xFF.")
        return bytes(map(ord, val))
    raise ValueError("bytes fields must be encoded as bytes or str.")


def _json_bytes_encoder(val: bytes) -> str:
    """
    Encode bytes as a string according to the JSON specification.

    Args:
        val: The bytes to encode.

    Returns:
        The encoded bytes.
    """

    return "".join(map(chr, val))


def _hash_algorithm_decoder(val: Any) -> Any:
    # Member names ("SHA_256") are accepted in addition to the raw TPM_ALG_ID values
    if isinstance(val, str) and val in HashAlgorithm.__members__:
        return HashAlgorithm[val]
    return val


# Workaround for correct serialization of bytes, see :func:`_json_bytes_decoder` above for details.
JSONBytes: TypeAlias = Annotated[
    bytes,
    BeforeValidator(_json_bytes_decoder),
    PlainSerializer(_json_bytes_encoder, return_type=str, when_used="json")
]

_HashAlgorithmField: TypeAlias = Annotated[HashAlgorithm, BeforeValidator(_hash_algorithm_decoder)]


class KDFaParametersModel(BaseModel):
    """
    The model representing the input parameters of a :func:`~tpm2kdf.kdf.kdfa` invocation.
    """

    version: str = "1.0.0"
    hash_algorithm: _HashAlgorithmField
    key: JSONBytes
    label: str
    context_u: JSONBytes = b""
    context_v: JSONBytes = b""
    bits: int = Field(gt=0, le=0xFFFFFFFF)


class KDFeParametersModel(BaseModel):
    """
    The model representing the input parameters of a :func:`~tpm2kdf.kdf.kdfe` invocation.
    """

    version: str = "1.0.0"
    hash_algorithm: _HashAlgorithmField
    z: JSONBytes
    label: str
    party_u_info: JSONBytes = b""
    party_v_info: JSONBytes = b""
    bits: int = Field(gt=0, le=0xFFFFFFFF)


def kdfa_from_model(model: KDFaParametersModel) -> bytes:
    """
    Args:
        model: The KDFa parameters.

    Returns:
        The output of :func:`~tpm2kdf.kdf.kdfa` for the parameters held by the model.
    """

    return kdfa(model.hash_algorithm, model.key, model.label, model.context_u, model.context_v, model.bits)


def kdfe_from_model(model: KDFeParametersModel) -> bytes:
    """
    Args:
        model: The KDFe parameters.

    Returns:
        The output of :func:`~tpm2kdf.kdf.kdfe` for the parameters held by the model.
    """

    return kdfe(
        model.hash_algorithm,
        model.z,
        model.label,
        model.party_u_info,
        model.party_v_info,
        model.bits
    )
