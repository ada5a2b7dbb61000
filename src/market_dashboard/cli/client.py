"""CLI client for the market dashboard HTTP routes and push channel.

Usage:
  dashboard-client health
  dashboard-client stocks list
  dashboard-client stocks get 1
  dashboard-client currencies margin EUR/USD 0.5 --user admin-sub
  dashboard-client favorites add stock AAPL --user some-sub
  dashboard-client stream --messages 3
"""
import argparse
import asyncio
import json
import sys

import httpx
import websockets


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _get(client: httpx.Client, path: str, **params) -> int:
    r = client.get(path, params=params or None)
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/")


def cmd_indices(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/market/indices")


def cmd_stocks_list(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/stocks")


def cmd_stocks_get(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/stocks/{args.stock_id}")


def cmd_currencies_list(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/currencies")


def cmd_currencies_margin(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.put(f"/currencies/{args.symbol}/margin", json={"margin": args.margin})
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_news(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, "/news", limit=args.limit)


def cmd_favorites_list(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/favorites")


def cmd_favorites_add(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/favorites", json={"item_type": args.item_type, "item_id": args.item_id})
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_favorites_remove(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.delete(f"/favorites/{args.item_type}/{args.item_id}")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_admin_users(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/admin/users")


def _stream_run(url: str, duration: float | None, max_messages: int | None) -> int:
    """Connect to /ws and print market_update envelopes (summarized)."""
    count = 0

    async def run() -> None:
        nonlocal count
        async with websockets.connect(url) as ws:
            print(
                f"Streaming {url} (duration={duration}s, max_messages={max_messages or '∞'})",
                file=sys.stderr,
            )
            async for raw in ws:
                message = json.loads(raw)
                data = message.get("data", {})
                count += 1
                print_json(
                    {
                        "type": message.get("type"),
                        "timestamp": data.get("timestamp"),
                        "stocks": len(data.get("stocks", [])),
                        "currencies": len(data.get("currencies", [])),
                        "indices": len(data.get("indices", [])),
                        "news": len(data.get("news", [])),
                    }
                )
                if max_messages and count >= max_messages:
                    return

    async def run_with_timeout() -> None:
        if duration and duration > 0:
            try:
                await asyncio.wait_for(run(), timeout=duration)
            except asyncio.TimeoutError:
                print(f"Stopped after {duration}s ({count} messages)", file=sys.stderr)
        else:
            await run()

    try:
        asyncio.run(run_with_timeout())
    except KeyboardInterrupt:
        print(f"\nStopped by user ({count} messages)", file=sys.stderr)
        return 130
    except (OSError, websockets.ConnectionClosed, websockets.InvalidURI) as e:
        print(f"Stream error: {e}", file=sys.stderr)
        return 1
    return 0


def _ws_url(base_url: str) -> str:
    if base_url.startswith("https://"):
        return "wss://" + base_url[len("https://"):] + "/ws"
    if base_url.startswith("http://"):
        return "ws://" + base_url[len("http://"):] + "/ws"
    return base_url + "/ws"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exercise market dashboard routes and the /ws push channel.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument("--user", default=None, help="Caller subject sent in the identity header")
    parser.add_argument(
        "--identity-header",
        default="X-User-Id",
        help="Header carrying the caller subject (default: X-User-Id)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET / health check")
    subparsers.add_parser("indices", help="GET /market/indices")

    stocks = subparsers.add_parser("stocks", help="Stock routes (/stocks)")
    stocks_sub = stocks.add_subparsers(dest="stocks_cmd", required=True)
    stocks_sub.add_parser("list", help="GET /stocks")
    p = stocks_sub.add_parser("get", help="GET /stocks/{id}")
    p.add_argument("stock_id", type=int, help="Stock row id")

    currencies = subparsers.add_parser("currencies", help="Currency routes (/currencies)")
    currencies_sub = currencies.add_subparsers(dest="currencies_cmd", required=True)
    currencies_sub.add_parser("list", help="GET /currencies")
    p = currencies_sub.add_parser("margin", help="PUT /currencies/{symbol}/margin (admin)")
    p.add_argument("symbol", help="Pair symbol (e.g. EUR/USD)")
    p.add_argument("margin", type=float, help="New margin percentage (>= 0)")

    p = subparsers.add_parser("news", help="GET /news")
    p.add_argument("--limit", type=int, default=20, help="Max articles (default: 20)")

    favorites = subparsers.add_parser("favorites", help="Favorites routes (/favorites)")
    favorites_sub = favorites.add_subparsers(dest="favorites_cmd", required=True)
    favorites_sub.add_parser("list", help="GET /favorites")
    for name, help_text in [
        ("add", "POST /favorites"),
        ("remove", "DELETE /favorites/{item_type}/{item_id}"),
    ]:
        p = favorites_sub.add_parser(name, help=help_text)
        p.add_argument("item_type", choices=["stock", "currency", "news"])
        p.add_argument("item_id", help="Symbol or id of the item")

    admin = subparsers.add_parser("admin", help="Admin routes (/admin)")
    admin_sub = admin.add_subparsers(dest="admin_cmd", required=True)
    admin_sub.add_parser("users", help="GET /admin/users")

    p = subparsers.add_parser("stream", help="Print market updates from the /ws push channel")
    p.add_argument(
        "--duration",
        type=float,
        default=None,
        metavar="SECS",
        help="Stop after SECS seconds (default: run until Ctrl+C)",
    )
    p.add_argument(
        "--messages",
        type=int,
        default=None,
        metavar="N",
        help="Stop after N messages (default: no limit)",
    )
    return parser


HANDLERS = {
    "health": cmd_health,
    "indices": cmd_indices,
    "news": cmd_news,
    "stocks": {"list": cmd_stocks_list, "get": cmd_stocks_get},
    "currencies": {"list": cmd_currencies_list, "margin": cmd_currencies_margin},
    "favorites": {
        "list": cmd_favorites_list,
        "add": cmd_favorites_add,
        "remove": cmd_favorites_remove,
    },
    "admin": {"users": cmd_admin_users},
}


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    base_url = args.base_url.rstrip("/")

    if args.command == "stream":
        return _stream_run(_ws_url(base_url), args.duration, args.messages)

    handler = HANDLERS[args.command]
    if isinstance(handler, dict):
        handler = handler[getattr(args, f"{args.command}_cmd")]

    headers = {args.identity_header: args.user} if args.user else {}
    try:
        with httpx.Client(base_url=base_url, timeout=args.timeout, headers=headers) as client:
            return handler(client, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
