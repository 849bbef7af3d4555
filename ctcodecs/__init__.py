"""
CTCODECS - Constant-time Base64 / Base32 / Hex codecs

Encoders and decoders whose running time and memory access pattern depend
only on the input length, for key material, tokens and digests. Decoding is
strict: non-canonical trailing bits and wrong padding are rejected.
"""

from .engine import CodecError, InvalidInput, Overflow, Variant, ctcodec
from .api_codecs import (
    CODECS,
    Base32,
    Base32Hex,
    Base32HexNoPadding,
    Base32NoPadding,
    Base64,
    Base64NoPadding,
    Base64UrlSafe,
    Base64UrlSafeNoPadding,
    Hex,
    codec_by_name,
)
from .api_strings import (
    b32decode,
    b32encode,
    b32hexdecode,
    b32hexencode,
    b64decode,
    b64encode,
    b64urldecode,
    b64urlencode,
    hexdecode,
    hexencode,
)
from .version import __version__

# ============================================================================
# BUFFER FUNCTIONS (caller-owned output, no allocation)
# ============================================================================

def encoded_len(bin_len: int, variant: Variant) -> int:
    """
    Exact encoded length for `bin_len` input bytes.

    Raises:
        Overflow: if the length is not representable in a native word
    """
    return ctcodec.encoded_len(bin_len, variant)


def encode(out, data, variant: Variant) -> memoryview:
    """
    Encode `data` into `out`.

    Args:
        out: writable buffer of at least encoded_len(len(data)) bytes
        data: bytes-like input (text is taken as UTF-8)
        variant: Variant member

    Returns:
        memoryview over the written prefix of `out`

    Note:
        - Nothing is written when `out` is too small (Overflow)
    """
    return ctcodec.encode(out, data, variant)


def decode(out, encoded, variant: Variant, ignore=None) -> memoryview:
    """
    Decode `encoded` into `out`.

    Args:
        out: writable buffer
        encoded: encoded text or bytes
        variant: Variant member
        ignore: optional characters to skip (e.g. " \\r\\n")

    Returns:
        memoryview over the decoded prefix of `out`

    Raises:
        Overflow: `out` is too small
        InvalidInput: malformed, non-canonical or badly padded input
    """
    return ctcodec.decode(out, encoded, variant, ignore)


def verify(x, y) -> bool:
    """Constant-time equality of two byte strings."""
    return ctcodec.verify(x, y)


__all__ = [
    "CODECS",
    "Base32",
    "Base32Hex",
    "Base32HexNoPadding",
    "Base32NoPadding",
    "Base64",
    "Base64NoPadding",
    "Base64UrlSafe",
    "Base64UrlSafeNoPadding",
    "CodecError",
    "Hex",
    "InvalidInput",
    "Overflow",
    "Variant",
    "__version__",
    "b32decode",
    "b32encode",
    "b32hexdecode",
    "b32hexencode",
    "b64decode",
    "b64encode",
    "b64urldecode",
    "b64urlencode",
    "codec_by_name",
    "ctcodec",
    "decode",
    "encode",
    "encoded_len",
    "hexdecode",
    "hexencode",
    "verify",
]
