#!/usr/bin/env python3
"""
KEYLINE CLI
-----------
Command-line front end for inspecting prefix-tagged files:
1. scan - classify every line with a given prefix configuration
2. demo - run one of the bundled demonstration parsers on a file

Author: KeyLine Team
Date: 2026-10-17
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from keyline import __version__
from keyline.config import config_from_mapping, load_config
from keyline.core.engine import split_lines
from keyline.core.errors import ConfigError, ParseError
from keyline.core.models import ParserConfig
from keyline.demo import DEMOS
from keyline.localization.messages import DefaultMessageProvider
from keyline.parsing.classifier import LineClassifier
from keyline.cli.formatter import ReportFormatter

console = Console()
logger = logging.getLogger("keyline.cli")


class KeyLineCLI:
    """
    CLI wrapper that translates user commands into engine actions.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="keyline",
            description="KeyLine - Prefix-Driven Line Parser Toolkit",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = ReportFormatter(console)
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("--version", action="version", version=f"keyline v{__version__}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("--locale", default="en", help="Language of error messages (default: en)")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        # 'scan' subcommand - classification only, no handlers
        scan_parser = subparsers.add_parser("scan", help="🔍 Show how each line of a file is classified")
        scan_parser.add_argument("path", help="File to scan")
        scan_parser.add_argument("--config", help="YAML file with the prefix configuration")
        scan_parser.add_argument("--key-prefix", help="Prefix introducing a key (default: '@')")
        scan_parser.add_argument("--comment-prefix", help="Prefix introducing a comment")
        scan_parser.add_argument("--section-prefix", help="Prefix introducing a section switch")
        scan_parser.add_argument("--keep-empty", action="store_true", help="Do not skip whitespace-only lines")
        scan_parser.add_argument("--show-blank", action="store_true", help="List blank lines in the outline")

        # 'demo' subcommand - full dispatch through a bundled parser
        demo_parser = subparsers.add_parser("demo", help="▶️  Run a demonstration parser")
        demo_parser.add_argument("name", choices=sorted(DEMOS), help="Demonstration parser to run")
        demo_parser.add_argument("path", help="File to parse")

    def print_header(self, subtitle: str):
        console.print(Panel.fit(
            f"[bold cyan]KeyLine v{__version__}[/bold cyan]\n"
            "════════════════════════════════════════",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def _read_source(self, path: str) -> Optional[List[str]]:
        source_path = Path(path)
        if not source_path.is_file():
            console.print(f"[bold red]Error:[/bold red] File '{path}' not found.")
            return None
        return split_lines(source_path.read_text(encoding="utf-8-sig"))

    def _scan_config(self, args: argparse.Namespace) -> ParserConfig:
        overrides = {
            "key_prefix": args.key_prefix,
            "comment_prefix": args.comment_prefix,
            "section_prefix": args.section_prefix,
        }
        if args.keep_empty:
            overrides["skip_empty_lines"] = False
        if args.config:
            return load_config(args.config, overrides)
        return config_from_mapping({"key_prefix": "@", "comment_prefix": "#"}, overrides)

    def run_scan(self, args: argparse.Namespace) -> int:
        lines = self._read_source(args.path)
        if lines is None:
            return 1
        config = self._scan_config(args)
        classified = LineClassifier(config).classify_all(lines)
        self.formatter.print_outline(classified, args.path, show_blank=args.show_blank)
        self.formatter.print_summary(classified)
        return 0

    def run_demo(self, args: argparse.Namespace) -> int:
        lines = self._read_source(args.path)
        if lines is None:
            return 1
        demo = DEMOS[args.name]()
        demo.parser.messages = DefaultMessageProvider(args.locale)
        try:
            events = demo.parse(lines)
        except ParseError as e:
            self.formatter.show_events(demo.events)
            self.formatter.show_error(e, "\n".join(lines), args.path)
            return 1
        self.formatter.show_events(events)
        console.print(f"\n[bold green]✅ Parsed {args.path} without errors.[/bold green]")
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.print_header("Prefix-Driven Line Parser")
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        try:
            if args.command == "scan":
                self.print_header("Line Classification Scan")
                return self.run_scan(args)
            if args.command == "demo":
                self.print_header(f"Demo: {args.name}")
                return self.run_demo(args)
        except ConfigError as e:
            console.print(f"[bold red]Configuration error:[/bold red] {e}")
            return 2

        self.parser.print_help()
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(KeyLineCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
