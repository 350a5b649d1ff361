"""
CLI for decoding data words from mesytec VME modules.

Words are taken from the command line arguments, or read from stdin until EOF
when no arguments are given. Each word is decoded and printed as one line:

    $ echo "0x40010c07 0x10100868 0xc18d01bd" | vme-decode
    0x40010c07 module_header, module_id=0x01, module_setting=0x3, data_length=7 words
    0x10100868 data_word, channel_address=16, mdpp_flags=0x0
    0xc18d01bd end_of_event, low_stamp=26018237
"""

import argparse
import logging
import sys
from typing import Iterable, TextIO

from dotenv import load_dotenv

from vme_decoder.decoder.record_formatter import RecordFormatter
from vme_decoder.decoder.word_decoder import decode
from vme_decoder.exception import VmeDecoderError
from vme_decoder.model.enum.output_format_enum import OutputFormat
from vme_decoder.reader.word_reader import WordReader
from vme_decoder.schema.decoder_config_schema import DecoderConfig
from vme_decoder.util.config_manager import ConfigManager
from vme_decoder.util.logger_config import setup_logging

logger = logging.getLogger("VmeDecodeMain")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vme-decode",
        description="Decode data words from mesytec VME modules (MDPP / MxDC).",
    )
    p.add_argument("words", nargs="*", help="Data words (hex 0x..., octal 0..., or decimal). Reads stdin if omitted.")
    p.add_argument("--config", default=None, help="YAML config file")
    p.add_argument("--format", choices=[f.value for f in OutputFormat], default=None, help="Output format")
    p.add_argument("--index", action="store_true", help="Prefix each line with the word index")
    p.add_argument("--log-level", default=None, help="Log level (overrides config)")
    return p


def apply_overrides(config: DecoderConfig, args: argparse.Namespace) -> DecoderConfig:
    """CLI flags take precedence over config file values."""
    output_update: dict = {}
    if args.format:
        output_update["FORMAT"] = OutputFormat(args.format)
    if args.index:
        output_update["SHOW_INDEX"] = True

    logging_update: dict = {}
    if args.log_level:
        logging_update["LEVEL"] = args.log_level

    merged = config.model_dump()
    merged["OUTPUT"].update(output_update)
    merged["LOGGING"].update(logging_update)
    return DecoderConfig(**merged)


def run(lines: Iterable[str], formatter: RecordFormatter, out: TextIO) -> int:
    """Read, decode and print words. Returns the number of decoded words."""
    reader = WordReader()
    count = 0
    for index, word in enumerate(reader.read(lines)):
        out.write(formatter.format(decode(word), index=index) + "\n")
        count += 1

    logger.info(f"Decoded {count} word(s)")
    return count


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        config = apply_overrides(ConfigManager.load_decoder_config(args.config), args)
    except (VmeDecoderError, ValueError) as e:
        logger.error(f"[CONFIG] {e}")
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    setup_logging(
        log_level=config.LOGGING.level_no,
        log_to_file=config.LOGGING.LOG_TO_FILE,
        log_dir=config.LOGGING.LOG_DIR,
    )

    formatter = RecordFormatter(
        output_format=config.OUTPUT.FORMAT,
        show_index=config.OUTPUT.SHOW_INDEX,
        unrecognized_label=config.OUTPUT.UNRECOGNIZED_LABEL,
    )

    if args.words:
        source: Iterable[str] = args.words
    else:
        if sys.stdin.isatty():
            print("Reading from stdin. Type Ctrl-D to quit.", file=sys.stderr)
        source = sys.stdin

    try:
        run(source, formatter, sys.stdout)
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
