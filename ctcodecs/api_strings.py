"""String/byte codec convenience wrappers."""

from .api_codecs import (
    Base32,
    Base32Hex,
    Base32HexNoPadding,
    Base32NoPadding,
    Base64,
    Base64NoPadding,
    Base64UrlSafe,
    Base64UrlSafeNoPadding,
    Hex,
)


def b64encode(data, padding: bool = True) -> str:
    """
    Standard Base64 encoding in constant time.

    Args:
        data: bytes-like input, or text (encoded as UTF-8)
        padding: emit trailing '=' characters

    Returns:
        Base64 text
    """
    return (Base64 if padding else Base64NoPadding).encode_to_string(data)


def b64decode(text, ignore=None, padding: bool = True) -> bytes:
    """
    Strict Base64 decoding in constant time.

    Args:
        text: Base64 text or bytes
        ignore: characters to skip anywhere in the input (e.g. " \\n")
        padding: require (True) or forbid (False) '=' padding

    Raises:
        InvalidInput: non-canonical or malformed input
    """
    return (Base64 if padding else Base64NoPadding).decode_to_bytes(text, ignore)


def b64urlencode(data, padding: bool = True) -> str:
    return (Base64UrlSafe if padding else Base64UrlSafeNoPadding).encode_to_string(data)


def b64urldecode(text, ignore=None, padding: bool = True) -> bytes:
    return (Base64UrlSafe if padding else Base64UrlSafeNoPadding).decode_to_bytes(text, ignore)


def b32encode(data, padding: bool = True) -> str:
    return (Base32 if padding else Base32NoPadding).encode_to_string(data)


def b32decode(text, ignore=None, padding: bool = True) -> bytes:
    return (Base32 if padding else Base32NoPadding).decode_to_bytes(text, ignore)


def b32hexencode(data, padding: bool = True) -> str:
    return (Base32Hex if padding else Base32HexNoPadding).encode_to_string(data)


def b32hexdecode(text, ignore=None, padding: bool = True) -> bytes:
    return (Base32Hex if padding else Base32HexNoPadding).decode_to_bytes(text, ignore)


def hexencode(data) -> str:
    return Hex.encode_to_string(data)


def hexdecode(text, ignore=None) -> bytes:
    """Hex decoding; odd digit counts are rejected."""
    return Hex.decode_to_bytes(text, ignore)


__all__ = [
    "b32decode",
    "b32encode",
    "b32hexdecode",
    "b32hexencode",
    "b64decode",
    "b64encode",
    "b64urldecode",
    "b64urlencode",
    "hexdecode",
    "hexencode",
]
