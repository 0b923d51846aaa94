from .version import __version__ as __version__
from .project import project as project

from .crypto_provider import CryptoProvider as CryptoProvider
from .hash_algorithm import (
    HashAlgorithm as HashAlgorithm,
    UnsupportedAlgorithmException as UnsupportedAlgorithmException
)
from .kdf import (
    InvalidLengthException as InvalidLengthException,
    kdfa as kdfa,
    kdfe as kdfe,
    truncate_to_bits as truncate_to_bits
)
from .message import (
    DerivationMessage as DerivationMessage,
    encode_label as encode_label,
    kdfa_message as kdfa_message,
    kdfe_message as kdfe_message
)
from .models import (
    KDFaParametersModel as KDFaParametersModel,
    KDFeParametersModel as KDFeParametersModel,
    kdfa_from_model as kdfa_from_model,
    kdfe_from_model as kdfe_from_model
)
from .protection import (
    Label as Label,
    derive_ecdh_seed as derive_ecdh_seed,
    derive_integrity_key as derive_integrity_key,
    derive_parameter_encryption_key as derive_parameter_encryption_key,
    derive_session_key as derive_session_key,
    derive_symmetric_protection_key as derive_symmetric_protection_key
)
