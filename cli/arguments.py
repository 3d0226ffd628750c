import argparse
import logging
from pathlib import Path
from typing import List, Optional

from config.runner_config import RunnerConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def validate_method_args(args: argparse.Namespace) -> None:
    """
    Validate the arguments of the ``method`` command.

    Either an explicit test name or a cursor position is needed.

    Raises:
        ValueError: If arguments are invalid
    """
    if args.test_name:
        return
    if args.file is None:
        raise ValueError("A source file is required unless --test-name is given")
    if args.line is None:
        raise ValueError("--line is required unless --test-name is given")
    if args.line < 1 or args.column < 1:
        raise ValueError("--line and --column are 1-based")


def validate_source_file(path: Path) -> Path:
    """
    Validate that the source file exists and looks like C#.

    Raises:
        ValueError: If the file is missing or not a .cs file
    """
    if not path.is_file():
        raise ValueError(f"Source file not found: {path}")
    if path.suffix.lower() != '.cs':
        raise ValueError(f"Not a C# source file: {path}")
    return path


def config_from_args(args: argparse.Namespace) -> RunnerConfig:
    """
    Build the runner configuration from the parsed options.

    Args:
        args: Parsed command line arguments

    Returns:
        A validated configuration

    Raises:
        ValueError: If the resulting configuration is invalid
    """
    config = RunnerConfig().setup({
        'log_level': args.log_level,
        'find_target_max_iter': args.max_iter,
        'build': {'args': list(args.build_arg)},
        'test': {'args': list(args.test_arg)},
        'dap': {'type': args.dap_type},
        'default_target': args.default_target,
    })
    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    return config


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--target',
        type=str,
        help='Path of the .sln or .csproj to test (searched upwards from the source file if omitted)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Make the test host wait for a debugger to attach'
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog='dotnet-test',
        description='Resolve C# tests from source positions and plan dotnet build/test runs',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # Configuration
    parser.add_argument(
        '--log-level',
        type=str,
        choices=LOG_LEVELS,
        default='WARNING',
        help='Minimum level of notices and log messages'
    )
    parser.add_argument(
        '--log-dir',
        type=str,
        help='Directory for a debug log file'
    )
    parser.add_argument(
        '--max-iter',
        type=int,
        default=10,
        help='Maximum number of directories to climb when searching for a .sln or .csproj'
    )
    parser.add_argument(
        '--build-arg',
        action='append',
        default=[],
        help='Extra argument for dotnet build (repeatable)'
    )
    parser.add_argument(
        '--test-arg',
        action='append',
        default=[],
        help='Extra argument for dotnet test (repeatable)'
    )
    parser.add_argument(
        '--dap-type',
        type=str,
        default='coreclr',
        help='Debug adapter type used when attaching to the test host'
    )
    parser.add_argument(
        '--default-target',
        type=str,
        help='Target used by the "target" command when --target is not given'
    )
    parser.add_argument(
        '--format',
        type=str,
        choices=['shell', 'json'],
        default='shell',
        help='Output the plan as a shell command line or as JSON'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    method_parser = subparsers.add_parser(
        'method',
        help='Run the test method under the cursor',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    method_parser.add_argument('file', type=str, nargs='?', help='C# source file')
    method_parser.add_argument('--line', type=int, help='1-based cursor line')
    method_parser.add_argument('--column', type=int, default=1, help='1-based cursor column')
    method_parser.add_argument(
        '--test-name',
        type=str,
        help='Fully-qualified test name to run instead of resolving the cursor'
    )
    _add_common_arguments(method_parser)

    file_parser = subparsers.add_parser(
        'file',
        help='Run all tests of the top-level types in a file',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    file_parser.add_argument('file', type=str, help='C# source file')
    _add_common_arguments(file_parser)

    target_parser = subparsers.add_parser(
        'target',
        help='Run every test of a solution or project',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    _add_common_arguments(target_parser)

    subparsers.add_parser(
        'attach',
        help='Read dotnet test output from stdin and print the debugger attach request'
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments namespace

    Raises:
        ValueError: If arguments are invalid
    """
    args = build_parser().parse_args(argv)

    if args.command == 'method':
        validate_method_args(args)
    if getattr(args, 'file', None):
        args.file = validate_source_file(Path(args.file))
    if args.log_dir:
        args.log_dir = Path(args.log_dir)

    logger.debug(f"Parsed arguments: {args}")
    return args
