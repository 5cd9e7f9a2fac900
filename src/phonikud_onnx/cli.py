"""
Command line tool for adding nikud to Hebrew text.
"""

import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from .config import Config
from .constants import MATRES_LECTIONIS_MARK
from .engine import Phonikud
from .errors import PhonikudError


def build_parser():
    parser = Config.build_parser()
    parser.add_argument("--text", type=str, default=None,
                       help="Text to add nikud to")
    parser.add_argument("--file", type=str, default=None,
                       help="File containing text to add nikud to, one text per line")
    parser.add_argument("--output", type=str, default=None,
                       help="Write results to this file instead of stdout")
    parser.add_argument("--matres-mark", type=str, default=None,
                       help="Mark to put on matres lectionis letters")
    parser.add_argument("--mark-matres-lectionis", action="store_true",
                       help="Mark matres lectionis with U+05AF")
    parser.add_argument("--log-level", type=str, default="WARNING",
                       choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                       help="Logging level")
    return parser


def read_texts(file_path: str) -> List[str]:
    with open(file_path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    """Main inference function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    matres_mark = args.matres_mark
    if matres_mark is None and args.mark_matres_lectionis:
        matres_mark = MATRES_LECTIONIS_MARK

    try:
        phonikud = Phonikud(args.model, args.tokenizer, Config.from_namespace(args))
    except PhonikudError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.text:
        texts = [args.text]
    elif args.file:
        texts = read_texts(args.file)
    else:
        # Interactive mode
        print("Interactive mode. Enter Hebrew text (Ctrl+C to exit):")
        try:
            while True:
                text = input("> ")
                if not text.strip():
                    continue
                try:
                    print(phonikud.diacritize(text.strip(), matres_mark=matres_mark))
                except PhonikudError as e:
                    print(f"Error: {e}", file=sys.stderr)
        except (KeyboardInterrupt, EOFError):
            print("\nExiting...")
        return 0

    results = []
    try:
        for text in tqdm(texts, desc="Diacritizing", disable=len(texts) < 2):
            results.append(phonikud.diacritize(text, matres_mark=matres_mark))
    except PhonikudError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.writelines(result + "\n" for result in results)
    else:
        for result in results:
            print(result)

    return 0


if __name__ == '__main__':
    sys.exit(main())
