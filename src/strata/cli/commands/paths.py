"""
Strata paths command.

SUMMARY: Show the cascade layers of a site

Lists the system, base and theme roots in precedence order. With
``--resource``, also shows that resource's directory on each layer.
"""

from __future__ import annotations

import argparse

from strata.cli import OutputFormatter, add_standard_flags, build_context
from strata.core.exceptions import StrataError

SUMMARY = "Show the cascade layers of a site"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--resource",
        help="Also show the namespaced directories of this resource (e.g., 'widgets')",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        context = build_context(args)
        layers = [layer.to_dict() for layer in context.paths.layers()]
        data: dict = {"layers": layers}
        lines = [f"{layer['name']}: {layer['path']}" for layer in layers]

        if args.resource:
            collection = context.collection(args.resource)
            dirs = [
                {"name": layer.name, "path": str(d), "exists": d.is_dir()}
                for layer, d in zip(collection.paths(), collection.layer_dirs())
            ]
            data["resource"] = {
                "name": collection.registered_name,
                "valid": collection.has_valid_paths(),
                "directories": dirs,
            }
            lines.append(f"{collection.registered_name}:")
            lines.extend(
                f"  {d['name']}: {d['path']}{'' if d['exists'] else ' (missing)'}" for d in dirs
            )

        formatter.success(data, "\n".join(lines))
        return 0
    except StrataError as e:
        formatter.error(e, error_code="paths_error")
        return 1
