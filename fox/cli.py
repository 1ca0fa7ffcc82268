"""Command line wrapper around FaxClient.

Usage:
  export ACCOUNT_SID=AC...
  export AUTH_TOKEN=...
  python -m fox send --to +15558675310 --from +15017122661 --media-url https://example.com/doc.pdf
  python -m fox get FX...
  python -m fox list --after 2024-01-01T00:00:00Z
  python -m fox cancel FX...

Credentials (and default FROM/TO numbers) are read from the environment or a
.env file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import requests

from .adapters.twilio_fax_client import FaxClient
from .common.config import Settings
from .domain.errors import FoxError
from .domain.models import FaxQuality, ListOptions, SendOptions, parse_rfc3339


def _datetime_arg(value: str):
    try:
        return parse_rfc3339(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an RFC 3339 timestamp: {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="fox", description="Twilio fax API client")
    ap.add_argument("-v", "--verbose", action="store_true", help="log requests at INFO")
    sub = ap.add_subparsers(dest="command", required=True)

    send = sub.add_parser("send", help="send a fax")
    send.add_argument("--to", default=None, help="destination number (default: $TO)")
    send.add_argument("--from", dest="from_", default=None, help="origin number (default: $FROM)")
    send.add_argument("--media-url", required=True)
    send.add_argument(
        "--quality",
        choices=[q.value for q in FaxQuality],
        default=FaxQuality.FINE.value,
    )
    send.add_argument("--status-callback", default="")
    send.add_argument("--sip-username", default="")
    send.add_argument("--sip-password", default="")
    send.add_argument("--no-store-media", action="store_true")
    send.add_argument("--ttl", type=int, default=0, help="minutes Twilio keeps trying")

    get = sub.add_parser("get", help="fetch a fax by SID")
    get.add_argument("sid")

    lst = sub.add_parser("list", help="list faxes")
    lst.add_argument("--after", type=_datetime_arg, default=None)
    lst.add_argument("--on-or-before", type=_datetime_arg, default=None)
    lst.add_argument("--from", dest="from_", default="")
    lst.add_argument("--to", default="")

    cancel = sub.add_parser("cancel", help="cancel a fax by SID")
    cancel.add_argument("sid")

    return ap


def run(args: argparse.Namespace, settings: Settings, client: FaxClient) -> object:
    if args.command == "send":
        opts = SendOptions(
            quality=FaxQuality(args.quality),
            sip_auth_username=args.sip_username,
            sip_auth_password=args.sip_password,
            status_callback=args.status_callback,
            store_media=not args.no_store_media,
            ttl_minutes=args.ttl,
        )
        fax = client.send(
            args.to or settings.to_number,
            args.from_ or settings.from_number,
            args.media_url,
            opts,
        )
        return fax.to_dict()

    if args.command == "get":
        return client.get(args.sid).to_dict()

    if args.command == "cancel":
        return client.cancel(args.sid).to_dict()

    page = client.list(
        ListOptions(
            date_created_after=args.after,
            date_created_on_or_before=args.on_or_before,
            from_=args.from_,
            to=args.to,
        )
    )
    return {
        "faxes": [f.to_dict() for f in page.faxes],
        "meta": {
            "page": page.meta.page,
            "page_size": page.meta.page_size,
            "next_page_url": page.meta.next_page_url,
            "previous_page_url": page.meta.previous_page_url,
        },
    }


def main(argv: Optional[List[str]] = None, *, session: requests.Session | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    settings = Settings.from_env()
    client = FaxClient.from_settings(settings, session=session)

    try:
        out = run(args, settings, client)
    except FoxError as e:
        print(str(e), file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"fox: request failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0
