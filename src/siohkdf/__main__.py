import argparse
import base64
import logging
import os
import sys
import warnings

import siohkdf
from siohkdf import HKDFError, HKDFConfiguration
from siohkdf.crypto.hkdf import check_okm_length
from siohkdf.hashes import HashFunction

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024


# Color the LEVEL part of messages, need new terminal on Windows
class ColoredFormatter(logging.Formatter):
    colors = {
        logging.DEBUG: (34, 49),  # blue
        logging.INFO: (32, 49),  # green
        logging.WARNING: (33, 49),  # yellow
        logging.ERROR: (31, 49),  # red
        logging.CRITICAL: (37, 41),  # white on red
    }
    def format(self, record):
        fg, bg = type(self).colors.get(record.levelno, (32, 49))
        record.levelname = f'\033[1;{fg}m\033[1;{bg}m{record.levelname}\033[0m'
        record.name = f'\033[1;29m\033[1;49m{record.name}\033[0m'
        return super().format(record)


def setup_logging(verbosity):
    if hasattr(sys.stderr, 'fileno') and os.isatty(sys.stderr.fileno()):
        logging.getLogger().handlers[0].formatter = ColoredFormatter(logging.BASIC_FORMAT)
    logging.getLogger().setLevel(max(verbosity, logging.DEBUG))
    if verbosity < logging.DEBUG:
        logging.captureWarnings(True)
        warnings.filterwarnings("default")


def hexbytes(value):
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        e = f"not an hexadecimal string: {value!r}"
        raise argparse.ArgumentTypeError(e) from exc


def secret(value):
    """ A secret given in hexadecimal, or ``-`` to read it from stdin """
    if value == '-':
        return sys.stdin.buffer.read()
    return hexbytes(value)


def write_output(reader_or_bytes, output_format, stdout):
    if isinstance(reader_or_bytes, bytes):
        chunks = [reader_or_bytes]
    else:
        chunks = iter(lambda: reader_or_bytes.read(CHUNK_SIZE), b'')

    if output_format == 'raw':
        for chunk in chunks:
            stdout.buffer.write(chunk)
        stdout.buffer.flush()
    elif output_format == 'hex':
        for chunk in chunks:
            stdout.write(chunk.hex())
        stdout.write('\n')
    else:
        # base64 cannot be streamed in arbitrary chunks
        stdout.write(base64.b64encode(b''.join(chunks)).decode())
        stdout.write('\n')


def make_parser():
    parser = argparse.ArgumentParser(prog=__package__,
        description="HMAC-based Extract-and-Expand Key Derivation Function")
    parser.add_argument('-V', '--version', action='version',
        version=f'%(prog)s {siohkdf.__version__}')
    parser.add_argument('-v', '--verbose', action='count', default=0,
        help="Increase logging verbosity (repeatable)")
    parser.add_argument('-s', '--silent', action='count', default=0,
        help="Decrease logging verbosity (repeatable)")
    parser.add_argument('--hash', action='store', default=HashFunction.SHA256.value,
        choices=[hash_function.value for hash_function in HashFunction],
        help="Hash function used by HMAC")
    parser.add_argument('--format', action='store', default='hex',
        choices=('hex', 'base64', 'raw'),
        help="Output format, raw writes the bytes as-is on stdout")

    commands = parser.add_subparsers(dest='command', required=True)

    extract = commands.add_parser('extract',
        help="Extract a pseudorandom key out of input keying material")
    extract.add_argument('--salt', type=hexbytes, default=b'',
        help="Salt (hex), a string of zeros is used when absent")
    extract.add_argument('ikm', type=secret,
        help="Input keying material (hex), use - to read it raw from stdin")

    expand = commands.add_parser('expand',
        help="Expand a pseudorandom key into output keying material")
    expand.add_argument('--info', type=hexbytes, default=b'',
        help="Context and application specific information (hex)")
    expand.add_argument('--length', type=int,
        help="Number of bytes to derive, default to the hash size")
    expand.add_argument('prk', type=secret,
        help="Pseudorandom key (hex), use - to read it raw from stdin")

    derive = commands.add_parser('derive',
        help="Extract then expand input keying material")
    derive.add_argument('--salt', type=hexbytes, default=b'',
        help="Salt (hex), a string of zeros is used when absent")
    derive.add_argument('--info', type=hexbytes, default=b'',
        help="Context and application specific information (hex)")
    derive.add_argument('--length', type=int,
        help="Number of bytes to derive, default to the hash size")
    derive.add_argument('ikm', type=secret,
        help="Input keying material (hex), use - to read it raw from stdin")

    return parser


def run(options, stdout):
    match options.command:
        case 'extract':
            engine = siohkdf.new(options.hash)
            write_output(engine.extract(options.salt, options.ikm),
                options.format, stdout)
        case 'expand':
            engine = siohkdf.new(options.hash)
            length = engine.digest_size if options.length is None else options.length
            check_okm_length(engine.digest, length)
            with engine.new_reader(options.prk, options.info, length) as reader:
                write_output(reader, options.format, stdout)
        case 'derive':
            config = HKDFConfiguration(
                options.hash,
                salt=options.salt,
                info=options.info,
                length=options.length,
            )
            with config.reader(options.ikm) as reader:
                write_output(reader, options.format, stdout)


def main(argv=None, stdout=None):
    logging.basicConfig()
    stdout = stdout or sys.stdout

    parser = make_parser()
    try:
        options = parser.parse_args(argv)
    except Exception as exc:
        logging.critical("Couldn't parse command line", exc_info=exc)
        return 1

    # Configure logging
    verbosity = logging.INFO - options.verbose * 10 + options.silent * 10
    setup_logging(verbosity)

    if options.format == 'raw' and stdout.isatty():
        logger.warning("writing raw bytes to a terminal")

    try:
        run(options, stdout)
    except HKDFError as exc:
        logger.critical("%s", exc)
        return 1
    except Exception as exc:
        logger.critical("Fatal exception", exc_info=exc)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
