# Copyright 2022 vkit-x Administrator. All Rights Reserved.
#
# This project (vkit-x/zenkaku) is dual-licensed under commercial and SSPL licenses.
#
# The commercial license gives you the full rights to create and distribute software
# on your own terms without any SSPL license obligations. For more information,
# please see the "LICENSE_COMMERCIAL.txt" file.
#
# This project is also available under Server Side Public License (SSPL).
# The SSPL licensing is ideal for use cases such as open source projects with
# SSPL distribution, student/academic purposes, hobby projects, internal research
# projects without external distribution, or other projects where all SSPL
# obligations can be met. For more information, please see the "LICENSE_SSPL.txt" file.
from typing import BinaryIO, Iterable, Optional, Sequence
import argparse
import logging
import os
import sys

import attrs

from zenkaku.utility import dyn_structure
from zenkaku.engine.digit_codec import (
    DigitCodecEngineInitConfig,
    DigitCodecRegistry,
    digit_codec_registry,
    digit_codec_engine_executor_factory,
)

logger = logging.getLogger(__name__)

LOGGING_FORMAT = '[%(levelname)s] %(message)s'


def build_argument_parser(registry: DigitCodecRegistry = digit_codec_registry):
    names = registry.list_names()
    default_type = DigitCodecEngineInitConfig().type

    parser = argparse.ArgumentParser(
        prog='zenkaku',
        description='Convert digits in text to various Unicode formats or reverse.',
    )

    conversion_group = parser.add_argument_group('Conversion Options')
    conversion_group.add_argument(
        '-t',
        '--type',
        choices=names,
        default=None,
        help=f'Conversion type (default: {default_type}). Available types: {", ".join(names)}.',
    )
    conversion_group.add_argument(
        '-r',
        '--reverse',
        action='store_true',
        default=None,
        help='Reverse conversion from Unicode digits back to ASCII.',
    )
    conversion_group.add_argument(
        '--config',
        default=None,
        help='JSON file providing "type" and "reverse". Flags take precedence.',
    )

    parser.add_argument(
        '--list-types',
        action='store_true',
        help='Print the available conversion types and exit.',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Enable debug logging.',
    )
    parser.add_argument(
        'text',
        nargs='*',
        help='Text arguments to convert. If empty, reads from stdin.',
    )
    return parser


def load_init_config(args: argparse.Namespace):
    if args.config:
        if not os.path.isfile(os.path.expandvars(args.config)):
            raise FileNotFoundError(f'config={args.config} not found')
        init_config = dyn_structure(
            args.config,
            DigitCodecEngineInitConfig,
            force_path_type=True,
        )
    else:
        init_config = DigitCodecEngineInitConfig()

    if args.type is not None:
        init_config = attrs.evolve(init_config, type=args.type)
    if args.reverse:
        init_config = attrs.evolve(init_config, reverse=True)

    return init_config


def strip_newline(line: bytes):
    if line.endswith(b'\n'):
        line = line[:-1]
    return line


def iterate_records(texts: Sequence[str], stdin: BinaryIO) -> Iterable[bytes]:
    if texts:
        for text in texts:
            yield os.fsencode(text)
    else:
        for line in stdin:
            yield strip_newline(line)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOGGING_FORMAT,
    )

    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    if args.list_types:
        for name in digit_codec_registry.list_names():
            stdout.write(name.encode() + b'\n')
        stdout.flush()
        return 0

    try:
        init_config = load_init_config(args)
    except (KeyError, TypeError, ValueError, OSError, NotImplementedError) as exc:
        # Missing file, invalid JSON or unexpected keys.
        logger.error(f"Invalid config file '{args.config}': {exc}")
        return 1

    try:
        engine_executor = digit_codec_engine_executor_factory.create(init_config)
    except KeyError:
        logger.error(f"Unknown conversion type '{init_config.type}'.")
        return 1
    engine = engine_executor.engine

    num_records = 0
    for record in iterate_records(args.text, stdin):
        stdout.write(engine.run_bytes(record) + b'\n')
        num_records += 1
    stdout.flush()

    logger.debug(f'num_records={num_records}')
    return 0
