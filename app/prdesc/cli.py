from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import load_settings
from .errors import PRDescError
from .pipeline import run_pipeline

USAGE_EPILOG = """\
Supports two types of URLs:
  1. Pull Request URL: https://github.com/owner/repo/pull/123
  2. Compare URL: https://github.com/owner/repo/compare/base...head

Environment variables required:
  GITHUB_PRD_TOKEN  - GitHub personal access token
  GEMINI_API_KEY    - Google Gemini API key

Optional: GEMINI_MODEL, GITHUB_API_URL, MAX_OUTPUT_TOKENS,
LOG_PROMPT_PREVIEW_CHARS, LOG_MODEL_OUTPUT_PREVIEW_CHARS.

Examples:
  # Update existing PR
  prd https://github.com/owner/repo/pull/123

  # Generate title and description from compare link
  prd https://github.com/owner/repo/compare/main...feature-branch
"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"❌ Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="prd",
        description="Generate a PR title and description from GitHub changes using Gemini",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", nargs="?", help="GitHub pull request or compare URL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.url:
        parser.print_help()
        return 0

    try:
        settings = load_settings()
        print("🎆 PR Description Generator Starting...")
        print("=" * 50)
        return run_pipeline(args.url, settings)
    except KeyboardInterrupt:
        print("\n⚠️  Process interrupted by user", file=sys.stderr)
        return 1
    except PRDescError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\n❌ Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
