"""CLI for rendering a prompt without sending it anywhere.

Usage:
    python -m translate_prompts.cli.render_prompt \
        --kind zh2en \
        --text "你好"

Text can come from --text or from a UTF-8 file via --input. The rendered
prompt is written to stdout, or to --output when given; logs go to stderr.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from translate_prompts import config
from translate_prompts.models.schema import Language, PromptKind, PromptRequest
from translate_prompts.prompts import build_prompt
from translate_prompts.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a translation or polishing prompt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Chinese to English
  python -m translate_prompts.cli.render_prompt --kind zh2en --text "你好"

  # Polish an English draft read from a file
  python -m translate_prompts.cli.render_prompt \\
      --kind polish --lang en \\
      --input drafts/intro.txt \\
      --output prompts/intro.txt
        """,
    )

    parser.add_argument(
        "--kind",
        required=True,
        choices=[kind.value for kind in PromptKind],
        help="Prompt to render",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--text",
        help="Text to embed in the prompt",
    )
    source.add_argument(
        "--input",
        type=Path,
        help="UTF-8 file whose contents are embedded in the prompt",
    )

    parser.add_argument(
        "--lang",
        metavar="{" + ",".join(lang.value for lang in Language) + "}",
        default=None,
        help=(
            "Language of the text for polish prompts "
            f"(default: {config.DEFAULT_POLISH_LANGUAGE}); other tags fall back to English unless --strict"
        ),
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=config.STRICT_LANGUAGE_TAGS,
        help="Fail on an unrecognized language tag instead of falling back to English",
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the prompt to this file instead of stdout",
    )

    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Render a prompt and return the process exit code."""
    args = parse_args(argv)

    configure_logging(
        level=args.log_level,
        log_file=config.LOG_FILE,
        json_format=config.LOG_FORMAT == "json",
    )

    try:
        text = args.text if args.text is not None else args.input.read_text(encoding="utf-8")

        lang = None
        if args.kind == PromptKind.POLISH.value:
            lang = args.lang or config.DEFAULT_POLISH_LANGUAGE

        request = PromptRequest(kind=args.kind, text=text, lang=lang)
        prompt = build_prompt(request, strict=args.strict)

        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(prompt, encoding="utf-8")
            logger.info(f"Wrote {request.kind.value} prompt to {args.output}")
        else:
            sys.stdout.write(prompt + "\n")

    except (OSError, ValidationError, ValueError) as e:
        logger.error(f"Failed to render prompt: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
