"""Terminal dashboard for a running hub API.

    python scripts/dashboard.py personas --limit 5
    python scripts/dashboard.py bias "Best for housewives and working men"
    python scripts/dashboard.py copy "Visit our store" --tone casual
    python scripts/dashboard.py stats
    python scripts/dashboard.py freeze on|off|clear
"""

import argparse
import sys
from pathlib import Path

from inclusive_hub.dashboard.client import ApiError, HubClient
from inclusive_hub.dashboard.freeze import FreezeStore, FrozenFetcher, JsonFileBackend
from inclusive_hub.dashboard.render import render_bias, render_copy, render_personas, render_stats
from inclusive_hub.schemas.bias import BiasInsight
from inclusive_hub.schemas.copy_suggestion import CopySuggestion
from inclusive_hub.schemas.persona import PersonaPage

STATE_FILE = Path.home() / ".inclusive-hub" / "freeze.json"


def _dump(model):
    return model.model_dump(by_alias=True)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--api", default="http://localhost:3001")
    sub = parser.add_subparsers(dest="command", required=True)

    personas = sub.add_parser("personas")
    personas.add_argument("--page", type=int, default=1)
    personas.add_argument("--limit", type=int, default=12)

    bias = sub.add_parser("bias")
    bias.add_argument("content")
    bias.add_argument("--language", default="en")

    copy = sub.add_parser("copy")
    copy.add_argument("prompt")
    copy.add_argument("--language", default="en")
    copy.add_argument("--tone", default="friendly")

    sub.add_parser("stats")

    freeze = sub.add_parser("freeze")
    freeze.add_argument("action", choices=["on", "off", "clear", "status"])

    args = parser.parse_args(argv)
    client = HubClient(args.api)
    store = FreezeStore(JsonFileBackend(STATE_FILE))
    fetcher = FrozenFetcher(store)

    try:
        if args.command == "personas":
            page = fetcher.fetch(
                "campaigns",
                lambda: client.fetch_campaigns(args.page, args.limit, freeze=store.freeze_mode),
                _dump,
                PersonaPage.model_validate,
            )
            print(render_personas(page.data))
            print(f"\n{len(page.data)} of {page.total} (page {page.page})")
        elif args.command == "bias":
            insight = fetcher.fetch(
                "bias",
                lambda: client.check_bias(args.content, args.language),
                _dump,
                BiasInsight.model_validate,
            )
            print(render_bias(insight))
        elif args.command == "copy":
            suggestion = fetcher.fetch(
                "copy",
                lambda: client.generate_copy(args.prompt, args.language, args.tone),
                _dump,
                CopySuggestion.model_validate,
            )
            print(render_copy(suggestion))
        elif args.command == "stats":
            print(render_stats(client.fetch_platform_stats()))
        elif args.action == "clear":
            store.clear()
            print("Frozen data cleared")
        elif args.action == "status":
            print(f"Freeze mode: {'on' if store.freeze_mode else 'off'}")
        else:
            store.set_freeze_mode(args.action == "on")
            print(f"Freeze mode: {args.action}")
    except ApiError as exc:
        print(f"Error ({exc.status}): {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
