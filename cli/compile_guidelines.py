#!/usr/bin/env python3
"""
CLI for compiling family content guidelines.

Usage:
    python cli/compile_guidelines.py preferences.json
    python cli/compile_guidelines.py preferences.json --age 7 --language ar
    python cli/compile_guidelines.py preferences.json --json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storyverse.config import STORY_DEFAULTS
from storyverse.core.guidelines import compile_content_guidelines, is_supported_language


def load_preferences(path: Path) -> tuple[dict, Optional[dict]]:
    """
    Read a preferences file.

    Accepts either {"family_preferences": {...}, "child_preferences": {...}}
    or a bare family preferences object.
    """
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    if "family_preferences" in data or "child_preferences" in data:
        return data.get("family_preferences") or {}, data.get("child_preferences")
    return data, None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compile family preferences into story and image guidelines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/compile_guidelines.py family.json
    python cli/compile_guidelines.py family.json --child-name Amira --age 6
    python cli/compile_guidelines.py family.json --json > guidelines.json
        """,
    )

    parser.add_argument(
        "preferences",
        type=Path,
        help="JSON file with family (and optionally child) preferences",
    )

    parser.add_argument(
        "--age",
        type=int,
        default=STORY_DEFAULTS["child_age"],
        help=f"Child's age (default: {STORY_DEFAULTS['child_age']})",
    )

    parser.add_argument(
        "--language",
        type=str,
        default=STORY_DEFAULTS["language"],
        help="Story language code (default: en)",
    )

    parser.add_argument(
        "--child-name",
        type=str,
        default=None,
        help="Child's name, used to attribute child-specific sensitivities",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print guidelines as JSON instead of text",
    )

    args = parser.parse_args(argv)

    if not is_supported_language(args.language):
        parser.error(f"unsupported language code: {args.language}")

    try:
        family, child = load_preferences(args.preferences)
    except (OSError, ValueError) as e:
        print(f"Error reading {args.preferences}: {e}", file=sys.stderr)
        return 1

    guidelines = compile_content_guidelines(
        family, child, args.age, args.language, child_name=args.child_name
    )

    if args.json:
        print(json.dumps(guidelines.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(guidelines.story_guidelines)
        print()
        print(guidelines.image_guidelines)
        print()
        print(f"TONE: {guidelines.tone_guidelines}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
