import os as _os_module
import sys as _sys_module

from .api_codecs import CODECS, codec_by_name
from .engine import CodecError

WHITESPACE = " \t\r\n"


def cli(argv=None) -> int:
    import argparse

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("CTCODECS_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        return not _sys_module.stderr.isatty()

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            self.reset = "" if plain else "\033[0m"
            self.bold = "" if plain else "\033[1m"
            self.red = "" if plain else "\033[31m"
            self.green = "" if plain else "\033[32m"
            self.yellow = "" if plain else "\033[33m"

        def _wrap(self, msg: str, color: str) -> str:
            if self.plain:
                return msg
            return f"{self.bold}{color}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green)

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow)

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red)

    theme = _CliTheme(_cli_plain_mode())

    def _read_input(path: str) -> bytes:
        if path == "-":
            return _sys_module.stdin.buffer.read()
        with open(path, "rb") as handle:
            return handle.read()

    def _write_output(path, payload: bytes) -> None:
        if path is None or path == "-":
            _sys_module.stdout.buffer.write(payload)
            _sys_module.stdout.buffer.flush()
            return
        with open(path, "wb") as handle:
            handle.write(payload)
        print(theme.ok(f"Wrote {len(payload)} bytes to {path}"), file=_sys_module.stderr)

    parser = argparse.ArgumentParser(prog="ctcodecs", description="Constant-time Base64/Base32/Hex codecs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode binary input to text")
    encode.add_argument("codec", help=f"Codec name: {', '.join(CODECS)}")
    encode.add_argument("path", nargs="?", default="-", help="Input file (default: stdin)")
    encode.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")

    decode = subparsers.add_parser("decode", help="Decode text input to binary")
    decode.add_argument("codec", help=f"Codec name: {', '.join(CODECS)}")
    decode.add_argument("path", nargs="?", default="-", help="Input file (default: stdin)")
    decode.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    decode.add_argument("--ignore", default="", help="Characters to skip while decoding")
    decode.add_argument(
        "-w", "--ignore-whitespace",
        action="store_true",
        help="Skip spaces, tabs and line breaks while decoding"
    )

    length = subparsers.add_parser("len", help="Print the encoded length for a binary length")
    length.add_argument("codec", help=f"Codec name: {', '.join(CODECS)}")
    length.add_argument("size", type=int, help="Binary input length in bytes")

    subparsers.add_parser("list", help="List codec names")

    args = parser.parse_args(argv)

    if args.command == "list":
        for name, codec in CODECS.items():
            print(f"{name}\t{codec.VARIANT.name}")
        return 0

    try:
        codec = codec_by_name(args.codec)
    except ValueError as exc:
        print(theme.err(str(exc)), file=_sys_module.stderr)
        return 2

    if args.command == "len":
        try:
            print(codec.encoded_len(args.size))
        except (CodecError, ValueError) as exc:
            print(theme.err(f"len failed: {exc}"), file=_sys_module.stderr)
            return 1
        return 0

    try:
        payload = _read_input(args.path)
    except OSError as exc:
        print(theme.err(f"Cannot read {args.path}: {exc}"), file=_sys_module.stderr)
        return 1

    if args.command == "encode":
        text = codec.encode_to_string(payload)
        _write_output(args.output, text.encode("ascii") + (b"\n" if args.output is None else b""))
        return 0

    ignore = args.ignore + (WHITESPACE if args.ignore_whitespace else "")
    try:
        decoded = codec.decode_to_bytes(payload, ignore or None)
    except CodecError as exc:
        print(theme.err(f"{args.codec} decode failed: {type(exc).__name__}: {exc}"), file=_sys_module.stderr)
        if not ignore and any(ch in payload for ch in WHITESPACE.encode("ascii")):
            print(theme.warn("Input contains whitespace. Did you mean --ignore-whitespace?"), file=_sys_module.stderr)
        return 1
    _write_output(args.output, decoded)
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...", file=_sys_module.stderr)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
