"""
Strata CLI package.

Commands are auto-discovered from ``strata/cli/commands/*.py``; each module
provides ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.
"""
from ._args import add_json_flag, add_site_root_flag, add_standard_flags
from ._output import OutputFormatter
from ._utils import build_context, get_site_root

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_site_root_flag",
    "add_standard_flags",
    "build_context",
    "get_site_root",
]
