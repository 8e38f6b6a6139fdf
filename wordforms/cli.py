import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
    __package__ = "wordforms"

from . import config, storage
from .service import WordformsService, build_service


def _service(args: argparse.Namespace) -> WordformsService:
    settings = config.load_settings(args.config)
    if args.lexicon:
        settings.lexicon = args.lexicon
    return build_service(settings)


def _emit(data: object) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def alternates(args: argparse.Namespace) -> None:
    """Print the alternates of each word as JSON."""

    service = _service(args)
    words = [w.lower() for w in args.words]
    _emit(service.expander.expand_terms(words))


def lemma(args: argparse.Namespace) -> None:
    """Print the lemma of each word."""

    service = _service(args)
    for word in args.words:
        print(f"{word}\t{service.lemmatizer.get_lemma(word.lower())}")


def words(args: argparse.Namespace) -> None:
    """Print all known words sharing the lemma of a word."""

    service = _service(args)
    for form in service.lemmatizer.get_words(args.word.lower(), inclusive=args.inclusive):
        print(form)


def inflect(args: argparse.Namespace) -> None:
    """Print plural, singular and classification of each word."""

    inflector = _service(args).inflector
    result = {}
    for word in args.words:
        result[word] = {
            "plural": inflector.get_plural(word),
            "singular": inflector.get_singular(word),
            "is_plural": inflector.is_plural(word),
            "is_singular": inflector.is_singular(word),
        }
    _emit(result)


def _lexicon_for(args: argparse.Namespace):
    if args.input:
        return storage.load_lexicon(args.input)
    return storage.load_default_lexicon()


def validate(args: argparse.Namespace) -> None:
    """Validate a lexicon file."""

    lexicon = _lexicon_for(args)
    try:
        storage.validate_lexicon(lexicon)
    except ValueError as e:
        raise SystemExit(f"invalid lexicon: {e}")

    print(f"Lexicon '{args.input or storage.DEFAULT_LEXICON_PATH}' OK")


def stats(args: argparse.Namespace) -> None:
    """Show statistics about a lexicon."""

    lexicon = _lexicon_for(args)
    total_forms = sum(len(e.forms) for e in lexicon.entries.values())
    derived = sum(len(e.derived) for e in lexicon.entries.values())

    print(f"Lemmas: {len(lexicon.entries)}")
    print(f"Forms: {total_forms}")
    print(f"Derived: {derived}")
    print(f"Index: {len(lexicon.index)}")


def toggle(args: argparse.Namespace) -> None:
    """Switch the expansion on or off in the runtime configuration."""

    value = "true" if args.command == "enable" else "false"
    config.update_runtime_section(config.SECTION, {"enabled": value}, args.config)
    state = "enabled" if value == "true" else "disabled"
    logging.info("word alternates %s", state)
    print(f"Word alternates {state}")


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="English word forms utility")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")
    parser.add_argument("--config", type=Path, default=None, help="path of config.ini")
    parser.add_argument("--lexicon", type=Path, default=None, help="lexicon to use instead of the configured one")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("alternates", help="expand words into their alternates")
    p.add_argument("words", nargs="+")
    p.set_defaults(func=alternates)

    p = sub.add_parser("lemma", help="show lemmas")
    p.add_argument("words", nargs="+")
    p.set_defaults(func=lemma)

    p = sub.add_parser("words", help="list words sharing a lemma")
    p.add_argument("word")
    p.add_argument(
        "--inclusive",
        action="store_true",
        help="include the word itself",
    )
    p.set_defaults(func=words)

    p = sub.add_parser("inflect", help="show plural and singular forms")
    p.add_argument("words", nargs="+")
    p.set_defaults(func=inflect)

    p = sub.add_parser("validate", help="validate a lexicon")
    p.add_argument("input", type=Path, nargs="?", default=None)
    p.set_defaults(func=validate)

    p = sub.add_parser("stats", help="show lexicon statistics")
    p.add_argument("input", type=Path, nargs="?", default=None)
    p.set_defaults(func=stats)

    p = sub.add_parser("enable", help="enable word alternates")
    p.set_defaults(func=toggle)

    p = sub.add_parser("disable", help="disable word alternates")
    p.set_defaults(func=toggle)

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=handlers)

    args.func(args)


if __name__ == "__main__":
    main()
