#!/usr/bin/env python3
"""Preview which tip pybrowserstate would surface.

Builds a tip pool from the given availability flags, then prints the
pool and the selected tip (or several draws, to see the random
fallback at work).

Usage
-----
::

    python scripts/tip_preview.py --default-browser --highlight-update
    python scripts/tip_preview.py --force-all --json
    python scripts/tip_preview.py --draws 10 --seed 42

Options::

    --default-browser    Pretend the app already is the default browser
    --highlight-update   Pretend a recent update should be highlighted
    --tips-disabled      Pretend the user turned tips off
    --force-all          Use every known tip, ignoring availability
    --draws N            Number of selections to print (default: 1)
    --seed N             Seed for the random fallback
    --json               Output machine-readable JSON
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from typing import Any

from pybrowserstate import BrowserStateConfig, Tip, TipSelector


@dataclasses.dataclass(frozen=True)
class _FlagSettings:
    default_browser: bool
    highlight_update: bool
    display_tips: bool

    def is_default_browser(self) -> bool:
        return self.default_browser

    def should_display_tips(self) -> bool:
        return self.display_tips

    def should_highlight_recent_update(self) -> bool:
        return self.highlight_update


def _tip_to_dict(tip: Tip | None) -> dict[str, Any] | None:
    if tip is None:
        return None
    return tip.model_dump(mode="json")


def _format_tip(tip: Tip | None) -> str:
    if tip is None:
        return "(none)"
    suffix = f" setting={tip.setting_key}" if tip.setting_key else ""
    return f"{tip.id} [{tip.priority.value}/{tip.type.value}]{suffix}"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Preview the tip pool and selection for given availability flags.",
    )
    parser.add_argument("--default-browser", action="store_true", help="App is already the default browser")
    parser.add_argument("--highlight-update", action="store_true", help="Highlight a recent update")
    parser.add_argument("--tips-disabled", action="store_true", help="User turned tips off")
    parser.add_argument("--force-all", action="store_true", help="Use every known tip")
    parser.add_argument("--draws", type=int, default=1, help="Number of selections to print")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random fallback")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.force_all:
        overrides["force_all_tips"] = True
    if args.seed is not None:
        overrides["tip_random_seed"] = args.seed
    config = BrowserStateConfig.from_env(**overrides)
    settings = _FlagSettings(
        default_browser=args.default_browser,
        highlight_update=args.highlight_update,
        display_tips=not args.tips_disabled,
    )
    selector = TipSelector(settings, config=config)
    selector.populate()

    visible = selector.select_all()
    draws = [selector.select() for _ in range(max(args.draws, 0))]

    if args.json_mode:
        result = {
            "pool": [_tip_to_dict(tip) for tip in visible],
            "selections": [_tip_to_dict(tip) for tip in draws],
        }
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return

    print("Pool:")
    for tip in visible:
        print(f"  {_format_tip(tip)}")
    if not visible:
        print("  (empty)")
    print("Selections:")
    for index, tip in enumerate(draws, start=1):
        print(f"  {index}: {_format_tip(tip)}")


if __name__ == "__main__":
    main()
