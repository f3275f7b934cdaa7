#!/usr/bin/env python3
"""
Resource URL helper

Usage:
  python scripts/resource_url.py resolve --value <path> [--current-context <path>] [--override <path>]
                                         [--deployed <path> ...] [--config <file>] [--context <path>]
                                         [--var <name>] [--scope <scope>]
  python scripts/resource_url.py remote --value <path> --context <path> --api-base-url <url>
                                        [--var <name>] [--scope <scope>]

Examples:
  python scripts/resource_url.py resolve --value css/portal.css --deployed /ResourceServingWebapp
  python scripts/resource_url.py resolve --value /js/app.js --override /cdn --deployed /cdn
  python scripts/resource_url.py resolve --value /js/app.js --config config/container.yaml --context /portal
  python scripts/resource_url.py remote --value /js/app.js --context /portal --api-base-url http://localhost:8000
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

load_dotenv()

from infrastructure.logging.log_setup import setup_console_logging
setup_console_logging(level="INFO")

from application.exceptions import TagError
from application.services.resource_url_resolver import RESOURCE_CONTEXT_INIT_PARAM
from application.tags.resource_include_tag import ResourceIncludeTag
from domain.exceptions import ValidationError
from infrastructure.container.base_loader import ContainerLoadError
from infrastructure.container.in_memory_page_context import InMemoryPageContext
from infrastructure.container.in_memory_servlet_container import InMemoryServletContainer
from infrastructure.container.loader_registry import ContainerLoaderRegistry
from infrastructure.logging.console_logger import ConsoleLogger


DEFAULT_API_TIMEOUT_SEC = 30
DEFAULT_CURRENT_CONTEXT = "/portal"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resource URL helper")
    subparsers = parser.add_subparsers(dest="command")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a resource URL locally")
    resolve_parser.add_argument("--value", type=str, required=True)
    resolve_parser.add_argument("--current-context", type=str, default=DEFAULT_CURRENT_CONTEXT)
    resolve_parser.add_argument("--override", type=str)
    resolve_parser.add_argument("--deployed", type=str, action="append", default=[])
    resolve_parser.add_argument("--config", type=str)
    resolve_parser.add_argument("--context", type=str)
    resolve_parser.add_argument("--var", type=str)
    resolve_parser.add_argument("--scope", type=str)

    remote_parser = subparsers.add_parser("remote", help="Resolve a resource URL via API")
    remote_parser.add_argument("--value", type=str, required=True)
    remote_parser.add_argument("--context", type=str, required=True)
    remote_parser.add_argument("--api-base-url", type=str, required=True)
    remote_parser.add_argument("--var", type=str)
    remote_parser.add_argument("--scope", type=str)

    return parser


def _load_container(args: argparse.Namespace):
    if args.config:
        config_path = Path(args.config)
        loader = ContainerLoaderRegistry().get_loader(config_path)
        try:
            container = loader.load_from_file(config_path)
        except ContainerLoadError as e:
            raise ValueError(f"Failed to load container config: {e}") from e
        context_path = args.context or args.current_context
        servlet_context = container.get(context_path)
        if servlet_context is None:
            raise ValueError(f"Context not found in {config_path}: {context_path}")
        return servlet_context

    container = InMemoryServletContainer()
    init_parameters = {}
    if args.override:
        init_parameters[RESOURCE_CONTEXT_INIT_PARAM] = args.override
    servlet_context = container.deploy(args.current_context, init_parameters=init_parameters)
    for path in args.deployed:
        if container.get(path) is None:
            container.deploy(path)
    return servlet_context


def _resolve_local(args: argparse.Namespace) -> int:
    servlet_context = _load_container(args)
    page_context = InMemoryPageContext(servlet_context=servlet_context)

    tag = ResourceIncludeTag(ConsoleLogger())
    tag.set_page_context(page_context)
    tag.value = args.value
    tag.var = args.var
    tag.scope = args.scope
    tag.do_start_tag()
    tag.do_end_tag()

    if args.var is not None:
        print(f"{args.var}={tag.url}")
    else:
        print(page_context.out.getvalue())
    return 0


def _resolve_remote(args: argparse.Namespace) -> int:
    url = f"{args.api_base_url.rstrip('/')}/contexts/{args.context.strip('/')}/resource-include"
    payload = {"value": args.value}
    if args.var is not None:
        payload["var"] = args.var
    if args.scope is not None:
        payload["scope"] = args.scope

    response = requests.post(url, json=payload, timeout=DEFAULT_API_TIMEOUT_SEC)
    print(f"Status: {response.status_code}")
    print(json.dumps(response.json(), indent=2, ensure_ascii=False))
    return 0 if response.status_code < 400 else 1


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:])

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "resolve":
            exit_code = _resolve_local(args)
        elif args.command == "remote":
            exit_code = _resolve_remote(args)
        else:
            raise ValueError(f"Unknown command: {args.command}")
    except (ValueError, ValidationError, TagError, ContainerLoadError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    except requests.RequestException as exc:
        print(f"ERROR: API request failed: {exc}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
