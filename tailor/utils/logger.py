"""
Session logging for the tailoring scripts.

A tailoring run either writes a session log (file at DEBUG plus a console
sink) or stays console-only, where anything below WARNING is hidden so the
preview and keyword tables are the only output. Contexts wrap setup_logger
in contexts/{context}/logger.py and add their own prefix.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Console colors; INFO and DEBUG keep loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<white>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Start a session log at log_dir/{context_name}.log.

    Replaces every existing sink. The file receives all levels; stderr
    receives console_level and above. A provenance header (argv, cwd,
    Python version, extra_provenance) opens the log so a tailored resume
    can be traced back to the run that produced it.

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    # stderr keeps stdout clean for piped previews
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def console_only(verbose: bool = False) -> None:
    """Drop every sink and log to stderr only: WARNING and above, or everything when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def log_provenance(extra_context: dict = None) -> None:
    """Write the run header: script, command line, cwd, Python version and extra_context."""
    rule = "=" * 80
    logger.info(rule)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")
    logger.info(rule)
