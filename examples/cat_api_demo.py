from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from domain.common.exceptions import BusinessException
from infrastructure.external.api_clients import get_cat_api_client


async def run(args: argparse.Namespace) -> Any:
    async with get_cat_api_client(api_key=args.api_key) as client:
        if args.command == "get":
            return await client.get_image(
                image_id=args.image_id,
                type=args.type,
                results_per_page=args.count,
                category=args.category,
                size=args.size,
            )
        if args.command == "categories":
            return await client.list_categories()
        if args.command == "votes":
            return await client.get_votes(sub_id=args.sub_id)
        if args.command == "favourites":
            return await client.get_favourites(sub_id=args.sub_id)
        return await client.get_overview()


def main() -> int:
    ap = argparse.ArgumentParser(description="The Cat API demo")
    ap.add_argument("command", choices=["get", "categories", "votes", "favourites", "overview"])
    ap.add_argument("--api-key", default=None, help="Overrides CAT_API__API_KEY")
    ap.add_argument("--image-id", default=None)
    ap.add_argument("--type", default=None, help="Comma separated: png,jpg,gif")
    ap.add_argument("--count", type=int, default=None, help="results_per_page (1-100)")
    ap.add_argument("--category", default=None)
    ap.add_argument("--size", default=None, choices=["small", "med", "full"])
    ap.add_argument("--sub-id", default=None)
    args = ap.parse_args()

    try:
        data = asyncio.run(run(args))
    except BusinessException as exc:
        print(f"{exc.error_type}: {exc.message}", file=sys.stderr)
        return 1
    print(json.dumps(data, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
