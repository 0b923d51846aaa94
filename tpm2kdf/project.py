__all__ = [ "project" ]

project = {
    "name"         : "TPM2KDF",
    "description"  : "A Python implementation of the TPM2 key derivation functions KDFa and KDFe.",
    "year"         : "2026",
    "author"       : "The TPM2KDF Authors",
    "categories"   : [
        "Topic :: Security :: Cryptography"
    ]
}
