#!/usr/bin/env python3
"""
Line-oriented front end.

Runs a single command with --command, or reads commands from stdin until
"exit" or end of input.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from medrec.config import Config, LoggingConfig, load_config
from medrec.logic import LogicManager

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)-20s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(config: LoggingConfig, console: bool = True) -> Optional[Path]:
    """
    Configure root logging from config.

    Args:
        config: Logging section of the application config.
        console: Also log to stderr. Must be False under the TUI.

    Returns:
        Path of the log file, or None when file logging is disabled.
    """
    handlers = []
    log_path = None

    if config.log_to_file:
        log_dir = Path(config.log_dir).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"medrec_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        handlers.append(logging.FileHandler(log_path))

    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=config.level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
        force=True,
    )
    return log_path


def run_repl(logic: LogicManager, stdin=None, stdout=None) -> int:
    """
    Read commands until "exit" or end of input.

    Returns:
        Process exit status.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    interactive = stdin.isatty()

    while True:
        if interactive:
            stdout.write("> ")
            stdout.flush()

        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue

        result = logic.execute(line)
        stdout.write(result.message.rstrip() + "\n")

        if result.is_exit:
            break

    return 0


def main(argv=None) -> int:
    """Main entry point for the medrec command."""
    parser = argparse.ArgumentParser(description="Manage patients, doctors and activities")
    parser.add_argument("--config", type=Path, default=None, help="Config file (TOML)")
    parser.add_argument("--log-level", default=None, help="Override configured log level")
    parser.add_argument("--command", default=None, help="Run one command and exit")
    parser.add_argument("--no-log-file", action="store_true", help="Do not write a log file")

    args = parser.parse_args(argv)

    try:
        config: Config = load_config(args.config)
    except Exception as e:
        print(f"Error: cannot load config: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        config.logging.level = args.log_level
    if args.no_log_file:
        config.logging.log_to_file = False

    # Keep stderr quiet unless the user asked for more detail
    configure_logging(config.logging, console=args.log_level is not None)

    logic = LogicManager(config=config)

    if args.command is not None:
        result = logic.execute(args.command)
        print(result.message.rstrip())
        return 1 if result.error else 0

    return run_repl(logic)


if __name__ == "__main__":
    sys.exit(main())
