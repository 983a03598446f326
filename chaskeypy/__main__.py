"""Top-level script environment.

    python -m chaskeypy test
    python -m chaskeypy sign -I "Hello"
    python -m chaskeypy encrypt -k 000102030405060708090a0b0c0d0e0f -n nonce -i message.txt

Keys, IVs and tags are given as 32 hexadecimal digits (the byte view of
the block); ciphertexts and tags are written in hexadecimal.
"""
import argparse
import enum
import io
import sys

from chaskeypy.modes import vectors
from chaskeypy.modes.cbc import Cbc
from chaskeypy.modes.mac import Mac
from chaskeypy.primitives.block import Block, BLOCK_SIZE
from chaskeypy.primitives.chaskey import ChaskeyPi, DEFAULT_ROUNDS
from chaskeypy.primitives.errors import ChaskeyError

DEFAULT_KEY = Block([0x01234567, 0x89ABCDEF, 0xFEDCBA98, 0x76543210])

CHUNK_SIZE = 4096


class ExitCode(enum.IntEnum):
    """Exit status of the command-line front end."""
    Success = 0
    TestFailed = 1
    NotVerified = 2
    BadArguments = 3
    IOFailure = 4


def hex_block(string):
    """Parse 32 hexadecimal digits as the byte view of a block."""
    try:
        data = bytes.fromhex(string)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid hex string '{}'".format(string))
    if len(data) != BLOCK_SIZE:
        msg = "'{}': expected {} hex digits".format(string, 2 * BLOCK_SIZE)
        raise argparse.ArgumentTypeError(msg)
    return Block.from_bytes(data)


def hex_tag(string):
    """Parse a (possibly truncated) tag given in hexadecimal."""
    try:
        data = bytes.fromhex(string)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid hex string '{}'".format(string))
    if not 0 < len(data) <= BLOCK_SIZE:
        msg = "'{}': expected at most {} hex digits".format(string, 2 * BLOCK_SIZE)
        raise argparse.ArgumentTypeError(msg)
    return data


def chunks(stream, size=CHUNK_SIZE):
    """Yield the pairs (chunk, is_last) read from a binary *stream*."""
    chunk = stream.read(size)
    while True:
        following = stream.read(size) if chunk else b""
        yield chunk, not following
        if not following:
            break
        chunk = following


def build_parser():
    parser = argparse.ArgumentParser(
        prog="chaskeypy",
        description="Sign, verify, encrypt and decrypt with Chaskey.")
    subparsers = parser.add_subparsers(dest="operation")
    subparsers.required = True

    subparsers.add_parser("test", help="run the self tests")
    subparsers.add_parser("masters", help="print the CBC test vectors")

    keyed = argparse.ArgumentParser(add_help=False)
    keyed.add_argument("-k", "--key", type=hex_block,
                       help="key as {} hex digits".format(2 * BLOCK_SIZE))
    keyed.add_argument("-K", "--text-key",
                       help="key as a text of {} bytes".format(BLOCK_SIZE))
    keyed.add_argument("-r", "--rounds", type=int, default=DEFAULT_ROUNDS)
    source = keyed.add_mutually_exclusive_group()
    source.add_argument("-i", "--input", help="read the message from a file")
    source.add_argument("-I", "--text", help="use the given message")
    keyed.add_argument("-q", "--quiet", action="store_true")

    subparsers.add_parser("sign", parents=[keyed], help="print the tag of a message")

    verify = subparsers.add_parser("verify", parents=[keyed],
                                   help="check the tag of a message")
    verify.add_argument("tag", type=hex_tag)

    for name in ["encrypt", "decrypt"]:
        cbc = subparsers.add_parser(name, parents=[keyed],
                                    help="{} a message in CBC mode".format(name))
        iv = cbc.add_mutually_exclusive_group()
        iv.add_argument("-n", "--nonce", help="derive the IV from a nonce")
        iv.add_argument("-V", "--iv", type=hex_block,
                        help="IV as {} hex digits".format(2 * BLOCK_SIZE))

    return parser


def get_key(args, stderr):
    if args.key is not None and args.text_key is not None:
        raise ChaskeyError("only one of --key and --text-key can be given")
    if args.key is not None:
        return args.key
    if args.text_key is not None:
        return Block.from_key(args.text_key)
    if not args.quiet:
        print("Using default key {}".format(DEFAULT_KEY), file=stderr)
    return DEFAULT_KEY


def open_input(args, stdin):
    if args.text is not None:
        return io.BytesIO(args.text.encode("utf-8"))
    if args.input is not None:
        return open(args.input, "rb")
    return stdin if stdin is not None else sys.stdin.buffer


def run_test(stdout):
    for primitive in [ChaskeyPi, Mac, Cbc]:
        try:
            primitive.test()
        except AssertionError as e:
            print("{}: failed {}".format(primitive.__name__, e), file=stdout)
            return ExitCode.TestFailed
        print("{}: ok".format(primitive.__name__), file=stdout)
    return ExitCode.Success


def run_masters(stdout):
    cbc = Cbc()
    for i in range(1, len(vectors.CBC_MASTERS) + 1):
        cbc.set(vectors.MAC_VECTORS[i])
        cbc.init_iv([0, 0, 0, 0])
        print(cbc.encrypt(vectors.PLAINTEXT[:i]).hex(), file=stdout)
    return ExitCode.Success


def run_keyed(args, stdin, stdout, stderr):
    key = get_key(args, stderr)
    stream = open_input(args, stdin)
    try:
        if args.operation in ["sign", "verify"]:
            mac = Mac(args.rounds)
            mac.set(key)
            for chunk, is_last in chunks(stream):
                mac.update(chunk, is_last)
            if args.operation == "sign":
                print(mac.digest().hex(), file=stdout)
                return ExitCode.Success
            if mac.verify(args.tag):
                return ExitCode.Success
            if not args.quiet:
                print("Not verified", file=stderr)
            return ExitCode.NotVerified

        cbc = Cbc(args.rounds)
        cbc.set(key)
        if args.nonce is not None:
            cbc.init(args.nonce)
        else:
            cbc.init_iv(args.iv if args.iv is not None else Block())

        if args.operation == "encrypt":
            output = [cbc.encrypt(chunk, is_last) for chunk, is_last in chunks(stream)]
            print(b"".join(output).hex(), file=stdout)
        else:
            ciphertext = bytes.fromhex(stream.read().decode("ascii"))
            print(cbc.decrypt(ciphertext).hex(), file=stdout)
        return ExitCode.Success
    finally:
        if args.text is not None or args.input is not None:
            stream.close()


def main(argv=None, stdin=None, stdout=None, stderr=None):
    """Run the command line *argv* and return the exit status."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)

    try:
        if args.operation == "test":
            return run_test(stdout)
        elif args.operation == "masters":
            return run_masters(stdout)
        else:
            return run_keyed(args, stdin, stdout, stderr)
    except (ChaskeyError, ValueError) as e:
        print(e, file=stderr)
        return ExitCode.BadArguments
    except OSError as e:
        print(e, file=stderr)
        return ExitCode.IOFailure


if __name__ == "__main__":
    sys.exit(main())
