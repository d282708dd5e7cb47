"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from customerio_node.errors import CustomerIoApiError, CustomerIoNodeError
from customerio_node.models.selectors import Operation, Resource


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="customerio-node", description="Customer.io workflow node")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # describe
    describe_parser = subparsers.add_parser("describe", help="Show resources, operations and fields")
    describe_parser.add_argument(
        "--resource",
        choices=[r.value for r in Resource],
        default=None,
        help="Limit output to one resource",
    )

    # run
    run_parser = subparsers.add_parser("run", help="Run the node over input items")
    run_parser.add_argument(
        "--resource",
        choices=[r.value for r in Resource],
        default=None,
        help="Resource (overrides the params file)",
    )
    run_parser.add_argument(
        "--operation",
        choices=[o.value for o in Operation],
        default=None,
        help="Operation (overrides the params file)",
    )
    run_parser.add_argument(
        "--params",
        type=Path,
        default=None,
        help="YAML/JSON file with node parameters (optional 'perItem' list for per-item overrides)",
    )
    run_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON file with input items (default: one empty item)",
    )
    run_parser.add_argument(
        "--credentials",
        type=Path,
        default=None,
        help="YAML file with customerIoApi values (default: CUSTOMERIO_* env vars)",
    )
    run_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with client settings (base URLs, timeout)",
    )
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the requests that would be sent instead of sending them",
    )
    run_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write results to file (default: stdout)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "describe":
        _run_describe(args)
    elif args.command == "run":
        _run_node(args)
    else:
        parser.print_help()


def _run_describe(args: argparse.Namespace) -> None:
    """Run describe command."""
    from customerio_node.description import describe

    resource = Resource(args.resource) if args.resource else None
    print(json.dumps(describe(resource), indent=2))


def _load_items(path: Path | None) -> list:
    if path is None:
        return [{"json": {}}]
    data = json.loads(path.read_text())
    if isinstance(data, dict):
        data = [data]
    return [item if "json" in item else {"json": item} for item in data]


def _run_node(args: argparse.Namespace) -> None:
    """Run the node: build requests per item, dispatch unless --dry-run."""
    from customerio_node.node import CustomerIoNode
    from customerio_node.parameters import NodeParameters

    raw_params: dict = {}
    if args.params:
        raw_params = yaml.safe_load(args.params.read_text()) or {}
    per_item = raw_params.pop("perItem", None)
    params = NodeParameters(raw_params, per_item)
    overrides = {k: v for k, v in (("resource", args.resource), ("operation", args.operation)) if v}
    if overrides:
        params = params.with_values(**overrides)

    items = _load_items(args.input)

    try:
        if args.dry_run:
            node = CustomerIoNode(params)
            output_data = [spec.model_dump(mode="json") for spec in node.build_requests(items)]
        else:
            from customerio_node.client import CustomerIoClient
            from customerio_node.credentials import CustomerIoCredentials
            from customerio_node.models.settings import Settings

            client = CustomerIoClient(
                CustomerIoCredentials.load(args.credentials),
                Settings.from_yaml(args.config),
            )
            try:
                output_data = CustomerIoNode(params, client).execute(items)
            finally:
                client.close()
    except CustomerIoApiError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except CustomerIoNodeError as e:
        raise SystemExit(f"Error: {e}")

    output = json.dumps(output_data, indent=2, default=str)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(output_data)} result(s) to {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
