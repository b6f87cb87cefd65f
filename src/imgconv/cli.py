import argparse
import sys
from typing import List, Optional

import imgconv.plugins  # Ensure plugins are registered
from imgconv import __version__
from imgconv.core.engine import CoreEngine
from imgconv.core.errors import ImageConverterError
from imgconv.core.models import ConversionRequest
from imgconv.i18n.i18n import DEFAULT_LOCALE, i18n
from imgconv.plugins.registry import PluginRegistry


def _red(text: str) -> str:
    return f"\x1b[31m{text}\x1b[0m"


def _locale(value: str) -> str:
    locale = i18n.match_locale(value)
    if locale is None:
        raise argparse.ArgumentTypeError(f"unknown language '{value}'")
    return locale


def convert_cmd(args: argparse.Namespace) -> int:
    request = ConversionRequest(input_path=args.input, output_path=args.output)
    try:
        report = CoreEngine.convert(request)
    except ImageConverterError as e:
        print(_red(str(e)), file=sys.stderr)
        return 1

    print(i18n.t(
        "log_success",
        input_format=report.input_format,
        output_format=report.output_format,
    ))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the parser with help text in the current locale."""
    parser = argparse.ArgumentParser(prog="imgconv", description=i18n.t("cli_description"))
    parser.add_argument(
        "-i", "--input",
        required=True,
        help=i18n.t("help_input", formats=", ".join(PluginRegistry.available_inputs())),
    )
    parser.add_argument(
        "-o", "--output",
        required=True,
        help=i18n.t("help_output", formats=", ".join(PluginRegistry.available_outputs())),
    )
    parser.add_argument(
        "--lang",
        type=_locale,
        default=DEFAULT_LOCALE,
        help=i18n.t("help_lang", locales=", ".join(i18n.get_available_locales())),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    # --lang is read first so that --help is shown in that language.
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--lang", default=DEFAULT_LOCALE)
    known, _ = pre.parse_known_args(argv)
    i18n.set_locale(known.lang)

    args = build_parser().parse_args(argv)
    sys.exit(convert_cmd(args))


if __name__ == "__main__":
    main()
