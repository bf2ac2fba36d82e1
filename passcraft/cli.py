"""Passcraft command-line interface.

Usage examples:
    python -m passcraft generate -n 20 -c 5
    python -m passcraft generate --pin -n 6 --avoid-ambiguous
    python -m passcraft generate -n 24 -w correct -w horse -o password.txt
    python -m passcraft assess 'Tr0ub4dor&3' --alphabet-size 94
"""

import argparse
import logging
import sys

from passcraft import (
    ALL_CLASSES,
    DEFAULT_CONFIG,
    CharClass,
    GenerationConfig,
    Mode,
    add_custom_word,
    assess,
    build_alphabet,
    generate,
)

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passcraft",
        description="Generate passwords and PINs and estimate their strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords or PINs")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_CONFIG.length,
        help=f"Password length (default: {DEFAULT_CONFIG.length})",
    )
    gen_p.add_argument(
        "--pin", action="store_true",
        help="Generate a numeric PIN instead of a password",
    )
    _add_class_flags(gen_p)
    gen_p.add_argument(
        "-a", "--avoid-ambiguous", action="store_true",
        help="Leave out look-alike characters (I, L, O, 0, 1)",
    )
    gen_p.add_argument(
        "-w", "--word", dest="words", action="append", default=[],
        help="Custom word to place at the start (repeatable)",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "-o", "--output",
        help="Also write the passwords to a text file, one per line",
    )

    # ── assess ─────────────────────────────────────────────────────────
    assess_p = sub.add_parser(
        "assess", help="Estimate the strength of existing passwords",
    )
    assess_p.add_argument("passwords", nargs="+", help="Passwords to assess")
    assess_p.add_argument(
        "-N", "--alphabet-size", type=int,
        help="Alphabet size (default: derived from the class flags)",
    )
    _add_class_flags(assess_p)
    assess_p.add_argument(
        "-a", "--avoid-ambiguous", action="store_true",
        help="Size the alphabet without look-alike characters",
    )

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "assess":
        return _cmd_assess(args)

    parser.print_help()
    return 0


def _add_class_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--no-uppercase", action="store_true")
    p.add_argument("--no-lowercase", action="store_true")
    p.add_argument("--no-digits", action="store_true")
    p.add_argument("--no-symbols", action="store_true")


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root = logging.getLogger("passcraft")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _config_from_args(args: argparse.Namespace) -> GenerationConfig:
    disabled = {
        CharClass.UPPER: args.no_uppercase,
        CharClass.LOWER: args.no_lowercase,
        CharClass.DIGIT: args.no_digits,
        CharClass.SYMBOL: args.no_symbols,
    }
    words: tuple = ()
    for word in getattr(args, "words", []):
        words = add_custom_word(words, word)

    return GenerationConfig(
        mode=Mode.PIN if getattr(args, "pin", False) else Mode.PASSWORD,
        length=getattr(args, "length", DEFAULT_CONFIG.length),
        classes=frozenset(c for c in ALL_CLASSES if not disabled[c]),
        avoid_ambiguous=args.avoid_ambiguous,
        custom_words=words,
    )


def _cmd_generate(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    size = build_alphabet(config).size
    if args.count < 1:
        print("Error: count must be at least 1", file=sys.stderr)
        return 2

    passwords = []
    for _ in range(args.count):
        try:
            result = generate(config)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        report = assess(result.text, size)
        print(f"  {result.text}  ({report.rating.value}, {report.entropy_bits:.1f} bits)")
        passwords.append(result.text)

    if args.output:
        with open(args.output, "w") as f:
            f.writelines(pwd + "\n" for pwd in passwords)
        log.info("Wrote %d password(s) to %s", len(passwords), args.output)

    return 0


def _cmd_assess(args: argparse.Namespace) -> int:
    size = args.alphabet_size
    if size is None:
        size = build_alphabet(_config_from_args(args)).size
    if size < 1:
        print("Error: alphabet size must be at least 1", file=sys.stderr)
        return 2

    for pwd in args.passwords:
        report = assess(pwd, size)
        print(f"  '{pwd}'  {report.rating.value} ({report.entropy_bits:.1f} bits)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
