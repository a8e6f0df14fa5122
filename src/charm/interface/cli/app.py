from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted settings and command-line overrides), input
acquisition, the inspection itself and exit code mapping.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from charm.core.pipeline.inspector import run_inspection
from charm.core.pipeline.validator import validate_config
from charm.domain.config import get_default_config, load_config, save_config
from charm.domain.errors import InputError
from charm.infra.fs import describe_input, is_stdin, open_input
from charm.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from charm.interface.cli import args as cli_args
from charm.interface.cli.render import Renderer

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # Characters are printed verbatim, whatever the locale says
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="backslashreplace")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr; stdout carries the report)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        exit_code = _run(args)
    except Exception:
        # Logging stays up so the supervisor in charm.main can record the crash
        raise
    except BaseException:
        shutdown_logging()
        raise

    shutdown_logging()
    return exit_code


def _run(args: Any) -> int:
    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs persisted state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)
        logger.info("Display settings saved as defaults.")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Input acquisition
    try:
        stream = open_input(args.input_path)
    except InputError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT

    logger.debug(f"Inspecting {describe_input(args.input_path)}")

    # 6. Inspection phase
    renderer = Renderer(sys.stdout, clean_conf, json_output=bool(args.json_output))
    try:
        summary = run_inspection(stream, clean_conf, renderer)
        renderer.finish(summary)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except BrokenPipeError:
        # Reader went away (e.g. piped into `head`)
        _silence_stdout()
        return EXIT_OK
    finally:
        if not is_stdin(args.input_path):
            stream.close()

    # The read error itself was already logged by the inspector
    if not summary.ok:
        return EXIT_READ_ERROR
    return EXIT_OK


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys are merged, so stray entries from other sources never
    reach the validator.
    """
    out = dict(base)
    keys_to_merge = ["count_bytes", "show_names", "show_scripts", "show_summary", "color"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
