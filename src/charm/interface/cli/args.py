from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from charm.domain.constants import APP_NAME, APP_VERSION, COLOR_MODES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the charm CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "List every character of a UTF-8 stream with its bytes, "
            "reporting malformed sequences instead of failing on them."
        ),
    )

    # --- Input ---
    p.add_argument(
        "input_path",
        nargs="?",
        default=None,
        metavar="FILE",
        help="File to inspect. Reads standard input when omitted or '-'.",
    )

    # --- Display Columns ---
    p.add_argument(
        "-b", "--bytes",
        dest="count_bytes",
        action="store_true",
        help="Show the byte offset of each unit instead of the character count.",
    )
    p.add_argument(
        "-n", "--names",
        dest="show_names",
        action="store_true",
        help="Show the Unicode name of each character.",
    )
    p.add_argument(
        "-s", "--scripts",
        dest="show_scripts",
        action="store_true",
        help="Show the script of each character.",
    )
    p.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="Highlight control, combining, wide and invalid units (default: auto).",
    )
    p.add_argument(
        "--summary",
        dest="show_summary",
        action="store_true",
        help="Print counters after the listing.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit one JSON object per unit (JSON Lines).",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective display settings as the new defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse namespace into configuration overrides.

    Flags that were not given are left out so that persisted settings
    survive.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.count_bytes:
        overrides["count_bytes"] = True
    if args.show_names:
        overrides["show_names"] = True
    if args.show_scripts:
        overrides["show_scripts"] = True
    if args.show_summary:
        overrides["show_summary"] = True
    if args.color:
        overrides["color"] = args.color

    return overrides
