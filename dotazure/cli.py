#!/usr/bin/env python3
"""
dotazure CLI

Usage:
  python -m dotazure context --cwd path/to/project
  python -m dotazure get AZURE_KEYVAULT_URL -e dev
"""
from __future__ import annotations
import argparse, json, os
from typing import List, Optional
from rich.console import Console
from rich.text import Text

from .context import AzdContext
from .errors import Error, ErrorKind
from .loader import Loader, loader
from .logging import console, setup_logger

err_console = Console(stderr=True)

def print_field(name: str, value: str):
    """Print a labeled value without wrapping long paths"""
    text = Text(f"{name}: ", style="bold")
    text.append(value)
    console().print(text, soft_wrap=True)

def print_error(message: str):
    """Print an error message"""
    text = Text(f"❌ {message}", style="red bold")
    err_console.print(text, soft_wrap=True)

def print_warning(message: str):
    """Print a warning message"""
    text = Text(f"⚠️ {message}", style="yellow")
    err_console.print(text, soft_wrap=True)

def build_context(args: argparse.Namespace) -> AzdContext:
    builder = AzdContext.builder()
    if args.cwd is not None:
        builder = builder.current_dir(args.cwd)
    if args.environment is not None:
        builder = builder.environment_name(args.environment)
    return builder.build()

def cmd_context(args: argparse.Namespace) -> int:
    ctx = build_context(args)
    if args.json:
        print(json.dumps({
            "project_dir": str(ctx.project_dir),
            "environment_name": ctx.environment_name,
            "environment_file": str(ctx.environment_file),
        }, indent=2))
        return 0
    print_field("project", str(ctx.project_dir))
    print_field("environment", ctx.environment_name)
    print_field("env file", str(ctx.environment_file))
    return 0

def cmd_get(args: argparse.Namespace) -> int:
    ld: Loader = loader()
    # a missing project is only benign for the default lookup
    if args.cwd is not None or args.environment is not None:
        ld = ld.context(build_context(args))
    if not ld.replace(args.replace).load():
        print_warning("no environment variables loaded")
    value = os.environ.get(args.key)
    if value is None:
        raise Error(ErrorKind.NOT_FOUND, f"{args.key} not set")
    # raw value on stdout, no rich markup or wrapping, so it can be captured by scripts
    print(value)
    return 0

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--cwd", default=None, help="Directory to start project discovery from")
    common.add_argument("-e", "--environment", default=None, help="Environment name (default: from .azure/config.json)")
    common.add_argument("--verbose", action="store_true")

    ap = argparse.ArgumentParser(prog="dotazure", description="Load environment variables from an azd project")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ctx = sub.add_parser("context", parents=[common], help="Show the resolved project and environment")
    ctx.add_argument("--json", action="store_true", help="Emit JSON")

    get = sub.add_parser("get", parents=[common], help="Load the environment and print a variable")
    get.add_argument("key", help="Environment variable name")
    get.add_argument("--replace", action="store_true", help="Overwrite variables already set")

    return ap.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logger("dotazure", args.verbose)
    try:
        if args.cmd == "context":
            return cmd_context(args)
        return cmd_get(args)
    except Error as e:
        print_error(f"{e.kind.value}: {e}")
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
