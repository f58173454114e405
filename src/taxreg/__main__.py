from __future__ import annotations

import argparse
import sys
import time

from .client import TaxRegistryClient
from .config import Settings
from .core.records import TaxPayer
from .core.results import Err
from .logging_config import setup_logging
from .runner import TaxRegistryServer, run


def _format_row(tp: TaxPayer) -> str:
    return f"{tp.id}\t{tp.first_name}\t{tp.last_name}\t{tp.address}"


def _resolve_url(args: argparse.Namespace) -> str:
    # Environment is only consulted when --url is not given.
    if args.url:
        return args.url
    settings = Settings.from_env()
    return settings.url or f"http://{settings.host}:{settings.port}"


def _cmd_serve(args: argparse.Namespace) -> int:
    settings = Settings.from_env()
    log_level = args.log_level or settings.log_level
    setup_logging(log_level)
    srv = run(
        host=args.host or settings.host,
        port=args.port if args.port is not None else settings.port,
        open_browser=args.open_browser,
        log_level=log_level,
    )
    print(srv.url if isinstance(srv, TaxRegistryServer) else srv.base_url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


def _cmd_add(args: argparse.Namespace) -> int:
    result = TaxRegistryClient(_resolve_url(args)).add_taxpayer(args.tid, args.first_name, args.last_name, args.address)
    if isinstance(result, Err):
        print(result.message, file=sys.stderr)
        return 1
    print("ok")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    for tp in TaxRegistryClient(_resolve_url(args)).get_taxpayers():
        print(_format_row(tp))
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    tp = TaxRegistryClient(_resolve_url(args)).search_taxpayer(args.tid)
    if tp is None:
        print("not found", file=sys.stderr)
        return 1
    print(_format_row(tp))
    return 0


def _tid(value: str) -> int:
    v = value.strip()
    if not (v.isascii() and v.isdigit()):
        raise argparse.ArgumentTypeError(f"TID must be a non-negative integer, got {value!r}")
    return int(v)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="taxreg", description="taxreg: in-memory taxpayer registry")
    sub = p.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="start the HTTP server")
    serve.add_argument("--host", default=None, help="default: TAXREG_HOST or 127.0.0.1")
    serve.add_argument("--port", type=int, default=None, help="default: TAXREG_PORT or 8000")
    serve.add_argument("--log-level", default=None, help="default: TAXREG_LOG_LEVEL or info")
    serve.add_argument("--open-browser", action="store_true")
    serve.set_defaults(func=_cmd_serve)

    add = sub.add_parser("add", help="add a taxpayer to a running server")
    add.add_argument("tid", type=_tid)
    add.add_argument("first_name")
    add.add_argument("last_name")
    add.add_argument("address")
    add.set_defaults(func=_cmd_add)

    lst = sub.add_parser("list", help="list all taxpayers")
    lst.set_defaults(func=_cmd_list)

    search = sub.add_parser("search", help="look up a taxpayer by TID")
    search.add_argument("tid", type=_tid)
    search.set_defaults(func=_cmd_search)

    for cmd in (add, lst, search):
        cmd.add_argument("--url", default=None, help="default: TAXREG_URL or http://TAXREG_HOST:TAXREG_PORT")

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if getattr(args, "func", None) is None:
        p.print_help()
        return 2
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
