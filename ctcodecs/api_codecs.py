"""Marker types that fix a Variant for the buffer-based engine calls."""

from .engine import Variant, ctcodec


class _Codec:
    VARIANT: Variant

    @classmethod
    def encoded_len(cls, bin_len: int) -> int:
        return ctcodec.encoded_len(bin_len, cls.VARIANT)

    @classmethod
    def encode(cls, encoded, data) -> memoryview:
        return ctcodec.encode(encoded, data, cls.VARIANT)

    @classmethod
    def encode_to_str(cls, encoded, data) -> str:
        return cls.encode(encoded, data).tobytes().decode("ascii")

    @classmethod
    def encode_to_string(cls, data) -> str:
        src = ctcodec._as_input(data)
        encoded = bytearray(cls.encoded_len(len(src)))
        return cls.encode_to_str(encoded, src)

    @classmethod
    def decode(cls, out, encoded, ignore=None) -> memoryview:
        return ctcodec.decode(out, encoded, cls.VARIANT, ignore)

    @classmethod
    def decode_to_bytes(cls, encoded, ignore=None) -> bytes:
        src = ctcodec._as_input(encoded)
        out = bytearray(len(src))
        return cls.decode(out, src, ignore).tobytes()


class Base64(_Codec):
    """Standard Base64 (``+``/``/``) with ``=`` padding."""
    VARIANT = Variant.BASE64


class Base64NoPadding(_Codec):
    VARIANT = Variant.BASE64_NO_PADDING


class Base64UrlSafe(_Codec):
    """URL-safe Base64 (``-``/``_``) with ``=`` padding."""
    VARIANT = Variant.BASE64_URLSAFE


class Base64UrlSafeNoPadding(_Codec):
    VARIANT = Variant.BASE64_URLSAFE_NO_PADDING


class Base32(_Codec):
    """RFC 4648 Base32 (``A-Z2-7``) with ``=`` padding to 8 characters."""
    VARIANT = Variant.BASE32


class Base32NoPadding(_Codec):
    VARIANT = Variant.BASE32_NO_PADDING


class Base32Hex(_Codec):
    """RFC 4648 extended-hex Base32 (``0-9A-V``) with ``=`` padding."""
    VARIANT = Variant.BASE32_HEX


class Base32HexNoPadding(_Codec):
    VARIANT = Variant.BASE32_HEX_NO_PADDING


class Hex(_Codec):
    """Lowercase hexadecimal; decoding accepts either case."""
    VARIANT = Variant.HEX


CODECS: dict[str, type[_Codec]] = {
    "base64": Base64,
    "base64-nopad": Base64NoPadding,
    "base64url": Base64UrlSafe,
    "base64url-nopad": Base64UrlSafeNoPadding,
    "base32": Base32,
    "base32-nopad": Base32NoPadding,
    "base32hex": Base32Hex,
    "base32hex-nopad": Base32HexNoPadding,
    "hex": Hex,
}


def codec_by_name(name: str) -> type[_Codec]:
    try:
        return CODECS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown codec {name!r}; expected one of: {', '.join(CODECS)}") from None


__all__ = [
    "Base32",
    "Base32Hex",
    "Base32HexNoPadding",
    "Base32NoPadding",
    "Base64",
    "Base64NoPadding",
    "Base64UrlSafe",
    "Base64UrlSafeNoPadding",
    "CODECS",
    "Hex",
    "codec_by_name",
]
