# CTCODECS CONSTANT-TIME CODEC ENGINE ->

import enum as _enum_module
import os as _os_module
import sys as _sys_module
import warnings as _warnings_module


class CodecError(ValueError):
    """Base class for the two codec failure kinds."""


class Overflow(CodecError):
    """The output buffer is too small, or a length is not representable."""


class InvalidInput(CodecError):
    """The input is not a valid, canonical encoding for the variant."""


FAMILY_BASE64 = "base64"
FAMILY_BASE32 = "base32"
FAMILY_HEX = "hex"


class Variant(_enum_module.Enum):
    """Closed set of codec configurations: (family, alphabet, padded)."""

    BASE64 = (FAMILY_BASE64, "base64", True)
    BASE64_NO_PADDING = (FAMILY_BASE64, "base64", False)
    BASE64_URLSAFE = (FAMILY_BASE64, "base64url", True)
    BASE64_URLSAFE_NO_PADDING = (FAMILY_BASE64, "base64url", False)
    BASE32 = (FAMILY_BASE32, "base32", True)
    BASE32_NO_PADDING = (FAMILY_BASE32, "base32", False)
    BASE32_HEX = (FAMILY_BASE32, "base32hex", True)
    BASE32_HEX_NO_PADDING = (FAMILY_BASE32, "base32hex", False)
    HEX = (FAMILY_HEX, "hex", False)

    def __init__(self, family: str, alphabet: str, padded: bool):
        self.family = family
        self.alphabet = alphabet
        self.padded = padded

    @property
    def group_width(self) -> int:
        return {FAMILY_BASE64: 6, FAMILY_BASE32: 5, FAMILY_HEX: 4}[self.family]

    @property
    def block_chars(self) -> int:
        # characters per padding block; hex never pads
        return {FAMILY_BASE64: 4, FAMILY_BASE32: 8, FAMILY_HEX: 1}[self.family]

    @property
    def pad_char(self) -> "int | None":
        if self.family == FAMILY_HEX:
            return None
        return ord("=")


class ctcodec:
    import typing
    import numpy as np
    from cryptography.hazmat.primitives import constant_time

    CodecError = CodecError
    Overflow = Overflow
    InvalidInput = InvalidInput
    Variant = Variant

    @staticmethod
    def _env_int(name: str, default: int) -> int:
        value = _os_module.getenv(name)
        if not value:
            return default
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            parsed = 0
        if parsed <= 0:
            _warnings_module.warn(
                f"{name} must be a positive integer (got {value!r}); using {default}.",
                RuntimeWarning,
            )
            return default
        return parsed

    ENABLE_BULK = _os_module.getenv("CTCODECS_BULK", "1") == "1"
    BULK_THRESHOLD = _env_int("CTCODECS_BULK_THRESHOLD", 4096)
    WORD_MAX = _sys_module.maxsize
    INVALID = 0xFF

    # (first value, last value, first character) per disjoint alphabet sub-range
    _ENCODE_RANGES: typing.ClassVar[dict[str, tuple[tuple[int, int, int], ...]]] = {
        "base64": ((0, 25, ord("A")), (26, 51, ord("a")), (52, 61, ord("0")),
                   (62, 62, ord("+")), (63, 63, ord("/"))),
        "base64url": ((0, 25, ord("A")), (26, 51, ord("a")), (52, 61, ord("0")),
                      (62, 62, ord("-")), (63, 63, ord("_"))),
        "base32": ((0, 25, ord("A")), (26, 31, ord("2"))),
        "base32hex": ((0, 9, ord("0")), (10, 31, ord("A"))),
        "hex": ((0, 9, ord("0")), (10, 15, ord("a"))),
    }
    # decoders also accept the other letter case where the family allows it
    _DECODE_RANGES: typing.ClassVar[dict[str, tuple[tuple[int, int, int], ...]]] = {
        "base64": _ENCODE_RANGES["base64"],
        "base64url": _ENCODE_RANGES["base64url"],
        "base32": _ENCODE_RANGES["base32"],
        "base32hex": _ENCODE_RANGES["base32hex"] + ((10, 31, ord("a")),),
        "hex": _ENCODE_RANGES["hex"] + ((10, 15, ord("A")),),
    }

    # ------------------------------------------------------------------
    # Comparator primitives. Each returns 0xFF when the relation holds and
    # 0x00 otherwise, for ints and for NumPy integer arrays alike.
    # ------------------------------------------------------------------
    @staticmethod
    def _gt(x, y):
        return ((y - x) & 0xFFFF) >> 8

    @staticmethod
    def _ge(x, y):
        return ctcodec._gt(y, x) ^ 0xFF

    @staticmethod
    def _lt(x, y):
        return ctcodec._gt(y, x)

    @staticmethod
    def _le(x, y):
        return ctcodec._ge(y, x)

    @staticmethod
    def _eq(x, y):
        return (((0 - (x ^ y)) & 0xFFFF) >> 8) ^ 0xFF

    # ------------------------------------------------------------------
    # Character maps
    # ------------------------------------------------------------------
    @staticmethod
    def _value_to_char(x, ranges):
        """Map a group value to its alphabet character by masked OR.

        Exactly one sub-range mask is non-zero for a valid value, so the OR
        of all masked candidates is the character.
        """
        out = 0
        for lo, hi, first in ranges:
            in_range = ctcodec._ge(x, lo) & ctcodec._le(x, hi)
            out = out | (in_range & ((x + (first - lo)) & 0xFF))
        return out

    @staticmethod
    def _char_to_value(c, ranges):
        """Map an alphabet character back to its value, or 0xFF if invalid.

        Validity is tracked in its own mask so that the character for value 0
        is told apart from a rejected character without testing the value.
        """
        value = 0
        valid = 0
        for lo, hi, first in ranges:
            in_range = ctcodec._ge(c, first) & ctcodec._le(c, first + (hi - lo))
            value = value | (in_range & ((c - first + lo) & 0xFF))
            valid = valid | in_range
        return value | (valid ^ 0xFF)

    @staticmethod
    def value_to_char(value: int, variant: Variant) -> int:
        return ctcodec._value_to_char(value, ctcodec._ENCODE_RANGES[variant.alphabet])

    @staticmethod
    def char_to_value(char: int, variant: Variant) -> int:
        return ctcodec._char_to_value(char, ctcodec._DECODE_RANGES[variant.alphabet])

    # ------------------------------------------------------------------
    # Length calculator
    # ------------------------------------------------------------------
    @staticmethod
    def _checked(value: int) -> int:
        if value > ctcodec.WORD_MAX:
            raise Overflow("length exceeds the native word size")
        return value

    @staticmethod
    def encoded_len(bin_len: int, variant: Variant) -> int:
        """Exact number of characters `encode` writes for `bin_len` bytes.

        Raises:
            Overflow: if the result does not fit in a native word.
        """
        if bin_len < 0:
            raise ValueError("bin_len must be non-negative")
        checked = ctcodec._checked
        if variant.family == FAMILY_HEX:
            return checked(bin_len * 2)
        if variant.family == FAMILY_BASE64:
            groups = bin_len // 3
            remainder = bin_len - groups * 3
            length = checked(groups * 4)
            if remainder:
                length = checked(length + (4 if variant.padded else 2 + (remainder >> 1)))
            return length
        chars = checked(checked(checked(bin_len * 8) + 4) // 5)
        if not variant.padded:
            return chars
        return checked((chars + 7) & ~7)

    # ------------------------------------------------------------------
    # Buffer coercion
    # ------------------------------------------------------------------
    @staticmethod
    def _as_input(data) -> memoryview:
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            view = memoryview(data)
        except TypeError as exc:
            raise TypeError("expected bytes-like or str input") from exc
        if view.ndim != 1 or view.format != "B":
            view = view.cast("B")
        return view

    @staticmethod
    def _as_output(buf) -> memoryview:
        try:
            view = memoryview(buf)
        except TypeError as exc:
            raise TypeError("output must be a writable bytes-like buffer") from exc
        if view.readonly:
            raise TypeError("output buffer is read-only")
        if view.ndim != 1 or view.format != "B":
            view = view.cast("B")
        return view

    @staticmethod
    def _ignore_set(ignore) -> "tuple[int, ...]":
        if ignore is None:
            return ()
        if isinstance(ignore, str):
            ignore = ignore.encode("utf-8")
        return tuple(sorted(set(bytes(ignore))))

    @staticmethod
    def _is_ignored(c, skip: "tuple[int, ...]"):
        # 0xFF when c is one of the ignored bytes; scans every entry
        hit = c & 0
        for i in skip:
            hit |= ctcodec._eq(c, i)
        return hit

    @staticmethod
    def _use_bulk(length: int) -> bool:
        return ctcodec.ENABLE_BULK and length >= ctcodec.BULK_THRESHOLD

    # ------------------------------------------------------------------
    # Encoder engine
    # ------------------------------------------------------------------
    @staticmethod
    def encode(out, data, variant: Variant) -> memoryview:
        """Encode `data` into the prefix of `out`; return that prefix.

        Nothing is written when `out` is shorter than `encoded_len`.
        """
        src = ctcodec._as_input(data)
        dst = ctcodec._as_output(out)
        encoded_len = ctcodec.encoded_len(len(src), variant)
        if len(dst) < encoded_len:
            raise Overflow(f"output buffer holds {len(dst)} bytes, {encoded_len} required")
        if ctcodec._use_bulk(len(src)):
            pos = ctcodec._bulk_encode(dst, src, variant)
        else:
            ranges = ctcodec._ENCODE_RANGES[variant.alphabet]
            width = variant.group_width
            mask = (1 << width) - 1
            acc = 0
            acc_len = 0
            pos = 0
            for byte in src:
                acc = ((acc << 8) | byte) & 0xFFFF
                acc_len += 8
                while acc_len >= width:
                    acc_len -= width
                    dst[pos] = ctcodec._value_to_char((acc >> acc_len) & mask, ranges)
                    pos += 1
            if acc_len > 0:
                dst[pos] = ctcodec._value_to_char((acc << (width - acc_len)) & mask, ranges)
                pos += 1
        if variant.padded:
            while pos < encoded_len:
                dst[pos] = variant.pad_char
                pos += 1
        return dst[:pos]

    @staticmethod
    def _bulk_encode(dst: memoryview, src: memoryview, variant: Variant) -> int:
        np = ctcodec.np
        width = variant.group_width
        bits = np.unpackbits(np.frombuffer(src, dtype=np.uint8))
        short = (-len(bits)) % width
        if short:
            bits = np.concatenate([bits, np.zeros(short, dtype=np.uint8)])
        weights = np.left_shift(1, np.arange(width - 1, -1, -1)).astype(np.int32)
        values = bits.reshape(-1, width).astype(np.int32) @ weights
        chars = ctcodec._value_to_char(values, ctcodec._ENCODE_RANGES[variant.alphabet])
        count = len(chars)
        dst[:count] = chars.astype(np.uint8).tobytes()
        return count

    # ------------------------------------------------------------------
    # Decoder engine
    # ------------------------------------------------------------------
    @staticmethod
    def decode(out, encoded, variant: Variant, ignore=None) -> memoryview:
        """Decode `encoded` into the prefix of `out`; return that prefix.

        Characters in `ignore` are skipped anywhere. The data portion ends at
        the first character outside the alphabet; what follows must be the
        exact padding the variant mandates, interleaved only with ignored
        characters.

        Raises:
            Overflow: `out` cannot hold the decoded bytes.
            InvalidInput: invalid characters, non-zero or dangling trailing
                bits, or missing, short or excess padding.
        """
        src = ctcodec._as_input(encoded)
        dst = ctcodec._as_output(out)
        skip = ctcodec._ignore_set(ignore)
        if ctcodec._use_bulk(len(src)):
            pos, data_chars, end = ctcodec._bulk_decode(dst, src, variant, skip)
        else:
            ranges = ctcodec._DECODE_RANGES[variant.alphabet]
            width = variant.group_width
            capacity = len(dst)
            acc = 0
            acc_len = 0
            pos = 0
            data_chars = 0
            end = None
            for index, c in enumerate(src):
                if ctcodec._is_ignored(c, skip):
                    continue
                d = ctcodec._char_to_value(c, ranges)
                if d == ctcodec.INVALID:
                    end = index
                    break
                acc = ((acc << width) | d) & 0xFFFF
                acc_len += width
                data_chars += 1
                if acc_len >= 8:
                    acc_len -= 8
                    if pos >= capacity:
                        raise Overflow("output buffer too small for decoded data")
                    dst[pos] = (acc >> acc_len) & 0xFF
                    pos += 1
            ctcodec._check_trailing_bits(acc_len, acc & ((1 << acc_len) - 1), width)
        ctcodec._check_padding(src, end, data_chars, variant, skip)
        return dst[:pos]

    @staticmethod
    def _check_trailing_bits(acc_len: int, leftover: int, width: int) -> None:
        if acc_len >= width:
            raise InvalidInput("dangling character without a full byte")
        if leftover:
            raise InvalidInput("non-zero trailing bits")

    @staticmethod
    def _check_padding(src: memoryview, end, data_chars: int, variant: Variant, skip) -> None:
        block = variant.block_chars
        expected = (block - data_chars % block) % block if variant.padded else 0
        if end is None:
            if expected:
                raise InvalidInput(f"missing padding: {expected} pad characters required")
            return
        pos = end
        while expected > 0:
            if pos >= len(src):
                raise InvalidInput("truncated padding")
            c = src[pos]
            if c == variant.pad_char:
                expected -= 1
            elif not ctcodec._is_ignored(c, skip):
                raise InvalidInput(f"unexpected character at offset {pos}")
            pos += 1
        for offset in range(pos, len(src)):
            if not ctcodec._is_ignored(src[offset], skip):
                raise InvalidInput(f"unexpected character at offset {offset}")

    @staticmethod
    def _bulk_decode(dst: memoryview, src: memoryview, variant: Variant, skip) -> "tuple[int, int, int | None]":
        np = ctcodec.np
        width = variant.group_width
        chars = np.frombuffer(src, dtype=np.uint8).astype(np.int32)
        keep = ctcodec._is_ignored(chars, skip) == 0
        values = ctcodec._char_to_value(chars, ctcodec._DECODE_RANGES[variant.alphabet])
        rejected = (values == ctcodec.INVALID) & keep
        end = None
        if rejected.any():
            end = int(np.argmax(rejected))
            keep[end:] = False
        data = values[keep].astype(np.uint8)
        shifts = np.arange(width - 1, -1, -1, dtype=np.uint8)
        bits = ((data[:, None] >> shifts) & 1).ravel()
        produced = len(bits) // 8
        if produced > len(dst):
            raise Overflow("output buffer too small for decoded data")
        tail = bits[produced * 8:]
        ctcodec._check_trailing_bits(len(tail), int(tail.any()), width)
        dst[:produced] = np.packbits(bits[:produced * 8]).tobytes()
        return produced, len(data), end

    # ------------------------------------------------------------------
    # Constant-time comparison
    # ------------------------------------------------------------------
    @staticmethod
    def verify(x, y) -> bool:
        return ctcodec.constant_time.bytes_eq(bytes(ctcodec._as_input(x)), bytes(ctcodec._as_input(y)))


__all__ = [
    "CodecError",
    "InvalidInput",
    "Overflow",
    "Variant",
    "ctcodec",
]
