"""Core conversion runner and command-line entry point.

This module contains the actual runner, separated from argument parsing,
plus ``main()``: the one place where failures become a diagnostic on
standard error and an exit status. Scripts are thin wrappers around it.
"""

import sys
import json
import logging
import argparse
import importlib.util
from pathlib import Path
from typing import Optional, Dict, Any, Sequence, TextIO

from pydantic import ValidationError

from matrix2triplets.contracts import ConversionError, InputNotFound
from matrix2triplets.pipeline.converter import MatrixConverter
from matrix2triplets.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig, InternalConfig


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_ERROR = 1
EXIT_CONFIG_ERROR = 2


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.
    
    Returns the raw dict before Pydantic validation.
    
    Parameters
    ----------
    config_path : str
        Path to user config Python file containing a CONFIG dict.
        
    Returns
    -------
    dict
        Raw user configuration dictionary.
        
    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    
    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    
    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj
    
    raise ValueError(f"No CONFIG dict found in {path}")


def setup_logging(level: str) -> None:
    """Configure the root logger to write to standard error.

    Standard output only carries triplets, so every handler goes to stderr.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Clear existing handlers and add a console handler
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)


def build_config(
    cli_args: Optional[Dict[str, Any]] = None,
    user_config_path: Optional[str] = None,
    verbose: bool = False,
) -> InternalConfig:
    """Load and resolve configuration (Param < User < CLI).

    Raises
    ------
    FileNotFoundError, ValueError
        If the user config file is missing or has no CONFIG dict.
    ValidationError
        If a layer holds an invalid value.
    """
    param_cfg = ParamConfig()

    if user_config_path is not None:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))
    else:
        user_cfg = UserConfig()
    
    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"
    
    # Filter None values
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()
    
    return resolve_config(param_cfg, user_cfg, cli_cfg)


def configure_run(config: InternalConfig, verbose: bool = False) -> None:
    """Set up logging from the resolved config and dump it when verbose."""
    setup_logging(config.logging.level)

    if verbose:
        logger.debug("Resolved configuration:\n%s", json.dumps(config.model_dump(), indent=2))


def convert_input(
    config: InternalConfig,
    input_path: Optional[str] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Read the matrix from ``input_path`` or ``stdin`` and write triplets.

    Files are decoded as UTF-8 with ``surrogateescape``, so bytes that are
    not valid UTF-8 pass through to the output unchanged.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    converter = MatrixConverter(config)

    if input_path is None:
        logger.info("Reading matrix from standard input")
        return converter.convert(stdin, stdout)

    path = Path(input_path)
    if not path.exists():
        raise InputNotFound(path)

    logger.info("Reading matrix from %s", path)
    with path.open(encoding="utf-8", errors="surrogateescape") as f:
        return converter.convert(f, stdout)


def run_conversion(
    input_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    user_config_path: Optional[str] = None,
    verbose: bool = False,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Convert a matrix to triplets.
    
    This is the core execution function. It:
    1. Loads and resolves configuration (Param < User < CLI)
    2. Configures logging
    3. Reads the matrix from ``input_path`` or standard input
    4. Writes triplets to standard output
    
    Parameters
    ----------
    input_path : str, optional
        Matrix file. If None, read ``stdin``.
        
    cli_args : dict, optional
        CLI overrides. Keys: orientation, sort_mode, symmetric, delimiter,
        log_level. None values are ignored.
        
    user_config_path : str, optional
        Python file with a CONFIG dict (BYCOL, NSORT, SYM, DELIM, ...).
        
    verbose : bool, optional
        If True, enable DEBUG logging and dump the resolved config and the
        parsed table to standard error.

    stdin, stdout : file-like, optional
        Streams to use instead of ``sys.stdin`` / ``sys.stdout``.
        
    Returns
    -------
    int
        Number of triplets written.
        
    Raises
    ------
    InputNotFound
        If ``input_path`` does not exist.
    FormatError, ShapeError, SymmetryError
        If the matrix cannot be converted.
    FileNotFoundError, ValueError
        If the user config file is missing or invalid.
        
    Examples
    --------
    Sorted, column-major output of a file::
    
        run_conversion("matrix.txt", cli_args={"orientation": "col", "sort_mode": "lex"})
    """
    config = build_config(cli_args, user_config_path, verbose)
    configure_run(config, verbose)
    return convert_input(config, input_path, stdin, stdout)


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser; options accept ``-sym`` as well as ``--sym``."""
    parser = argparse.ArgumentParser(
        prog="matrix2triplets",
        description="Convert a labelled matrix into 'row column value' triplets.",
    )
    parser.add_argument("input", nargs="?", help="Matrix file (default: standard input)")
    parser.add_argument("-bycol", "--bycol", dest="orientation", action="store_const", const="col",
                        help="Emit column label first (column-major)")
    parser.add_argument("-byrow", "--byrow", dest="orientation", action="store_const", const="row",
                        help="Emit row label first (default)")
    parser.add_argument("-sort", "--sort", dest="sort_mode", action="store_const", const="lex",
                        help="Sort labels lexicographically")
    parser.add_argument("-nsort", "--nsort", dest="sort_mode", action="store_const", const="numeric",
                        help="Sort labels numerically")
    parser.add_argument("-sym", "--sym", dest="symmetric", action="store_const", const=True,
                        help="Check the matrix is symmetric and emit only the lower triangle")
    parser.add_argument("-delim", "--delim", dest="delimiter",
                        help="Field delimiter ('tab' for a tab; default: runs of whitespace)")
    parser.add_argument("-config", "--config", dest="config",
                        help="Python config file with a CONFIG dict")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        type=str.upper, help="Logging level (standard error)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging, dump resolved config and parsed table")
    return parser


def _escape_undecodable(stream) -> None:
    """Let standard streams carry bytes that are not valid UTF-8."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the conversion, and map failures to exit codes."""
    args = build_parser().parse_args(argv)

    try:
        config = build_config(
            cli_args={
                "orientation": args.orientation,
                "sort_mode": args.sort_mode,
                "symmetric": args.symmetric,
                "delimiter": args.delimiter,
                "log_level": args.log_level,
            },
            user_config_path=args.config,
            verbose=args.verbose,
        )
    except (ValidationError, FileNotFoundError, ValueError) as e:
        print(f"matrix2triplets: configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_run(config, args.verbose)
    _escape_undecodable(sys.stdin)
    _escape_undecodable(sys.stdout)

    try:
        convert_input(config, args.input)
    except ConversionError as e:
        print(f"matrix2triplets: {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    return EXIT_OK
