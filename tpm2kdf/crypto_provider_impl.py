from typing import Type

from .crypto_provider import CryptoProvider
from .crypto_provider_cryptography import CryptoProviderImpl as _CryptographyProviderImpl


CryptoProviderImpl: Type[CryptoProvider] = _CryptographyProviderImpl


__all__ = [
    "CryptoProviderImpl"
]
