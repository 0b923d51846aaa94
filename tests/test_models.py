import json

import pytest
from pydantic import ValidationError

from tpm2kdf import kdf
from tpm2kdf import (
    HashAlgorithm,
    KDFaParametersModel,
    KDFeParametersModel,
    kdfa,
    kdfa_from_model,
    kdfe_from_model
)


__all__ = [  # pylint: disable=unused-variable
    "test_kdfa_model",
    "test_kdfe_model",
    "test_model_serialization",
    "test_model_validation",
    "test_kdf_core_without_models"
]


def test_kdfa_model() -> None:
    """
    Test KDFa evaluation of a parameters model parsed from JSON.
    """

    model = KDFaParametersModel.model_validate_json(json.dumps({
        "hash_algorithm": "SHA_256",
        "key": "yolo\u0000",
        "label": "IDENTITY",
        "context_u": "kek\u0000",
        "context_v": "yoyo\u0000",
        "bits": 128
    }))

    assert model.hash_algorithm is HashAlgorithm.SHA_256
    assert model.key == b"yolo\x00"
    assert kdfa_from_model(model) == bytes.fromhex("d2d72cc7a8a5eb09e8c79012e2da9f22")


def test_kdfe_model() -> None:
    """
    Test KDFe evaluation of a parameters model, with the hash algorithm given as raw TPM_ALG_ID.
    """

    model = KDFeParametersModel(
        hash_algorithm=0x000B,
        z=bytes.fromhex("6ed15c60fd433f5ddb280d7be43f8ac5a4524c13b92ff293619429ef"),
        label="DUPLICATE",
        party_u_info=bytes.fromhex("af06e1a422edbe6f41e1f8b3ce0af21fc8b1013c1fc8d550ccaee66d"),
        party_v_info=bytes.fromhex("a02e475ec753444d1bc1ad10bca3a7da72ee65297b04d5f42aa8812c"),
        bits=256
    )

    assert model.hash_algorithm is HashAlgorithm.SHA_256
    assert kdfe_from_model(model) \
        == bytes.fromhex("33a199f324be5622494e7c79cb0c8c842273d7688d3a64da97fb48eaea44f0a3")


def test_model_serialization() -> None:
    """
    Test that models survive serialization to JSON, including non-ASCII bytes.
    """

    model = KDFaParametersModel(
        hash_algorithm=HashAlgorithm.SHA_1,
        key=bytes(range(256)),
        label="INTEGRITY",
        bits=521
    )

    restored = KDFaParametersModel.model_validate_json(model.model_dump_json())

    assert restored == model
    assert restored.context_u == b""
    assert kdfa_from_model(restored) \
        == kdfa(HashAlgorithm.SHA_1, bytes(range(256)), "INTEGRITY", b"", b"", 521)


def test_model_validation() -> None:
    """
    Test that invalid parameters are rejected when parsing.
    """

    with pytest.raises(ValidationError):
        KDFaParametersModel(hash_algorithm=HashAlgorithm.SHA_256, key=b"", label="ATH", bits=0)

    with pytest.raises(ValidationError):
        KDFaParametersModel(hash_algorithm="SHA_224", key=b"", label="ATH", bits=128)

    with pytest.raises(ValidationError):
        KDFeParametersModel(hash_algorithm=0x0010, z=b"", label="SECRET", bits=128)

    with pytest.raises(ValidationError):
        KDFeParametersModel(hash_algorithm=HashAlgorithm.SHA_256, z="Ā", label="SECRET", bits=128)


def test_kdf_core_without_models() -> None:
    """
    Test that the model evaluation lives next to the models, keeping the core KDF module free of pydantic.
    """

    assert kdfa_from_model.__module__ == "tpm2kdf.models"
    assert kdfe_from_model.__module__ == "tpm2kdf.models"

    assert "models" not in vars(kdf)
    assert "KDFaParametersModel" not in vars(kdf)
    assert "KDFeParametersModel" not in vars(kdf)
