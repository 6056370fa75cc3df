"""CLI entry point for Solr index administration."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from solrengine.engines.solr import SolrEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solrengine",
        description="solrengine — Apache Solr driver for searchable models",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"solrengine {_get_version()}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-index", help="Create a Solr core")
    create.add_argument("name", help="Core name")
    create.add_argument("--config-set", default=None, help="Config set (overrides config)")

    delete = commands.add_parser("delete-index", help="Unload a Solr core")
    delete.add_argument("name", help="Core name")

    select = commands.add_parser("select", help="Run a raw query against a core")
    select.add_argument("index", help="Core name")
    select.add_argument("query", nargs="?", default="*:*", help="Solr query (default: *:*)")
    select.add_argument("--rows", type=int, default=None, help="Rows to return (default: select.limit)")
    select.add_argument("--start", type=int, default=0, help="Offset of the first row")

    ping = commands.add_parser("ping", help="Ping a core")
    ping.add_argument("index", help="Core name")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    from solrengine.client.exceptions import SolrError
    from solrengine.config.settings import Settings
    from solrengine.engines.manager import create_solr_engine
    from solrengine.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            return 1
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    engine = create_solr_engine(settings)
    try:
        output = _run(engine, args)
    except SolrError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        engine.client.close()

    print(json.dumps(output, indent=2, default=str))
    return 0


def _run(engine: SolrEngine, args: argparse.Namespace) -> Any:
    if args.command == "create-index":
        options = {"config_set": args.config_set} if args.config_set else {}
        return engine.create_index(args.name, options).data
    if args.command == "delete-index":
        return engine.delete_index(args.name).data
    if args.command == "select":
        client = engine.client.set_core(args.index)
        query = client.create_select().set_query(args.query).set_start(args.start)
        query.set_rows(args.rows or engine.settings.select.limit)
        result = client.select(query, engine.get_endpoint(args.index))
        return {"num_found": result.num_found, "documents": result.documents}
    # ping
    engine.client.set_core(args.index)
    return engine.ping(engine.get_endpoint(args.index))


def _get_version() -> str:
    """Get the package version."""
    try:
        from solrengine import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())
