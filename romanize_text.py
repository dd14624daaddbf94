#!/usr/bin/env python3
import argparse
import sys
from contextlib import nullcontext
from typing import List, Optional

from dotenv import load_dotenv

from romanize.config import RomanizerConfig
from romanize.logger import logger, logs_to_stderr
from romanize.nlp import RomanizationError, get_romanizer
from romanize.schema import RomanizedBatch, RomanizedText


def read_texts(args: argparse.Namespace) -> List[str]:
    """Collect input texts from the command line, a file, or stdin (one per line)."""
    if args.text:
        return args.text
    if args.input:
        with open(args.input, 'r', encoding='utf-8') as f:
            return [line.rstrip('\n') for line in f]
    return [line.rstrip('\n') for line in sys.stdin]


def build_config(args: argparse.Namespace) -> RomanizerConfig:
    """Environment (and .env) settings, overridden by explicit flags."""
    config = RomanizerConfig.from_env()
    if args.language:
        config.language = args.language
    if args.no_pre_romanize:
        config.pre_romanize = False
    if args.user_dict:
        config.user_dict = args.user_dict
    return config


def format_output(texts: List[str], romanized: List[str], as_json: bool) -> str:
    if as_json:
        batch = RomanizedBatch([
            RomanizedText(text=text, romanized=result)
            for text, result in zip(texts, romanized)
        ])
        return batch.model_dump_json(indent=2)
    return "\n".join(romanized)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Romanize Japanese (and embedded Korean) text')
    parser.add_argument('text', nargs='*', help='Text(s) to romanize; read from --input or stdin if omitted')
    parser.add_argument('--input', help='File with one text per line')
    parser.add_argument('--output', help='Write the result to this file instead of stdout')
    parser.add_argument('--json', action='store_true', help='Emit JSON with input and romanized text')
    parser.add_argument('--language', help='Source language code (default: ja)')
    parser.add_argument('--no-pre-romanize', action='store_true', help='Skip the Hangul pre-pass')
    parser.add_argument('--user-dict', help='Janome user dictionary (IPADIC CSV format)')
    args = parser.parse_args(argv)

    load_dotenv()
    config = build_config(args)

    # Results on stdout must not be interleaved with log records
    with (nullcontext() if args.output else logs_to_stderr()):
        return run(args, config)


def run(args: argparse.Namespace, config: RomanizerConfig) -> int:
    texts = read_texts(args)
    try:
        romanizer = get_romanizer(config.language, config)
        romanized = romanizer.romanize_lines(texts)
    except (RomanizationError, ValueError) as e:
        logger.error(f"Romanization failed: {e}")
        return 1

    output = format_output(texts, romanized, args.json)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output + "\n")
        logger.info(f"Wrote {len(romanized)} romanized lines to {args.output}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
