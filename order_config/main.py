# Path: order_config/main.py
"""
order_config - Main Entry Point

Resolves order configuration values from the manifest and values
tables and prints them.

Data Flow:
    INPUT:   manifest.csv (rules) + cfgs.csv (values)
    PROCESS: Manifest matching, specificity ranking, value resolution
    OUTPUT:  Resolved values, applicable manifests, table dump

Usage:
    order-config                          # Run the example scenarios
    order-config --strategy VWAP --aggression P \\
        --section CloseAuction --key SendTimeOffsetSeconds --default 23400
    order-config --strategy VWAP --list   # Applicable manifests
    order-config --dump                   # Merged table
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional, Sequence

from .config_loader import ConfigLoader
from .constants import (
    DataType,
    MENU_HEADER,
    MENU_SEPARATOR,
    STATUS_FAIL,
    STATUS_INFO,
    STATUS_OK,
    STATUS_WARN,
)
from .core.logger import get_output_logger, setup_ipo_logging
from .exceptions import LoadError
from .output.table_formatter import format_manifests, format_table
from .process.matcher import ConfigService, Order


# (description, order attributes, section, key, default)
DEMO_SCENARIOS: tuple = (
    ("VWAP, aggression M", {'strategy': 'VWAP', 'aggression': 'M'},
     'CloseAuction', 'SendTimeOffsetSeconds', 23400),
    ("VWAP, aggression P", {'strategy': 'VWAP', 'aggression': 'P'},
     'CloseAuction', 'SendTimeOffsetSeconds', 23400),
    ("VWAP, aggression A", {'strategy': 'VWAP', 'aggression': 'A'},
     'CloseAuction', 'SendTimeOffsetSeconds', 23400),
    ("VWAP, no aggression", {'strategy': 'VWAP', 'aggression': None},
     'CloseAuction', 'SendTimeOffsetSeconds', 23400),
    ("VWAP, aggression P, account CLIENTXYZ",
     {'strategy': 'VWAP', 'aggression': 'P', 'account': 'CLIENTXYZ'},
     'CloseAuction', 'SendTimeOffsetSeconds', 23400),
    ("TWAP, aggression P, account CLIENTXYZ",
     {'strategy': 'TWAP', 'aggression': 'P', 'account': 'CLIENTXYZ'},
     'CloseAuction', 'SendTimeOffsetSeconds', 23400),
    ("VWAP, undefined key", {'strategy': 'VWAP', 'aggression': 'M'},
     'CloseAuction', 'CancelSeconds', 23400),
    ("TWAP, undefined key", {'strategy': 'TWAP', 'aggression': 'M'},
     'CloseAuction', 'CancelSeconds', 23400),
)

ORDER_ARGUMENTS = ('strategy', 'aggression', 'country', 'asset_type', 'account', 'trader_id')


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  ORDER_CONFIG - Manifest Configuration Resolver")
    print("  Most specific manifest wins")
    print(MENU_HEADER)
    print()


def print_system_info(service: ConfigService, manifest: Path, values: Path) -> None:
    """
    Print loaded table information.

    Args:
        service: Loaded service
        manifest: Manifest file path
        values: Values file path
    """
    print(f"  Manifest: {manifest}")
    print(f"  Values:   {values}")
    print(f"  Loaded:   {len(service.table)} manifests")
    weights = ', '.join(f"{h}={w}" for h, w in service.weights.as_dict().items())
    print(f"  Weights:  {weights or '(none)'}")
    print()


def initialize_system(args: argparse.Namespace) -> ConfigLoader:
    """
    Load configuration and set up logging.

    Args:
        args: Parsed command line arguments

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()

    log_level = config.get('log_level', 'INFO')
    if args.quiet:
        log_level = 'WARNING'
    elif config.get('debug', False):
        log_level = 'DEBUG'

    setup_ipo_logging(
        log_level=log_level,
        log_dir=config.get('log_dir'),
        console_output=config.get('log_console', True),
    )
    return config


def parse_default(value: Optional[str], data_type: DataType):
    """
    Convert the --default argument to the requested type.

    Raises:
        ValueError: If the value does not parse as data_type
    """
    if data_type == DataType.INT:
        return int(value) if value is not None else 0
    if data_type == DataType.DECIMAL:
        try:
            return Decimal(value) if value is not None else Decimal(0)
        except InvalidOperation:
            raise ValueError(f"invalid decimal default: {value}") from None
    return value if value is not None else ''


def lookup(service: ConfigService, order: Order, section: str, key: str,
           data_type: DataType, default):
    """Dispatch to the typed accessor for data_type."""
    if data_type == DataType.INT:
        return service.get_int_config(order, section, key, default)
    if data_type == DataType.DECIMAL:
        return service.get_decimal_config(order, section, key, default)
    return service.get_string_config(order, section, key, default)


def run_demo(service: ConfigService) -> int:
    """
    Run the example scenarios and print each result.

    Args:
        service: Loaded service

    Returns:
        Exit code (0 for success)
    """
    print(f"{STATUS_INFO} Example scenarios:\n")
    for description, attributes, section, key, default in DEMO_SCENARIOS:
        order = Order.from_mapping({'trader_id': 'Joe', **attributes})
        result = service.resolve(order, section, key, DataType.INT)
        value = service.get_int_config(order, section, key, default)
        source = result.manifest or 'default'
        print(f"  {description:<40} {section}/{key} = {value} ({source})")
    print()
    return 0


def run_query(service: ConfigService, args: argparse.Namespace) -> int:
    """
    Resolve or list manifests for the order given on the command line.

    Args:
        service: Loaded service
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success)
    """
    order = Order.from_mapping({name: getattr(args, name) for name in ORDER_ARGUMENTS})

    if args.list:
        scores = service.get_applicable_manifests(order)
        ranked = service.resolver.tiebreaker.rank(scores)
        print(f"{STATUS_OK} {len(ranked)} applicable manifests:\n")
        print(format_manifests(ranked))

    if args.section and args.key:
        data_type = DataType(args.type)
        try:
            default = parse_default(args.default, data_type)
        except ValueError as e:
            print(f"{STATUS_FAIL} {e}")
            return 1

        result = service.resolve(order, args.section, args.key, data_type)
        value = lookup(service, order, args.section, args.key, data_type, default)
        if result.is_found:
            print(f"{STATUS_OK} {args.section}/{args.key} = {value} "
                  f"(manifest {result.manifest}, score {result.score})")
        else:
            print(f"{STATUS_WARN} {args.section}/{args.key} = {value} "
                  f"(default, {result.status.value})")

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='order-config',
        description='order_config - Manifest Configuration Resolver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  order-config                                   Run the example scenarios
  order-config --strategy VWAP --list            List applicable manifests
  order-config --strategy VWAP --aggression P \\
      --section CloseAuction --key SendTimeOffsetSeconds --default 23400
  order-config --dump                            Print the merged table
        """
    )

    tables = parser.add_argument_group('tables')
    tables.add_argument('--manifest', type=Path, help='Manifest (rule) table file')
    tables.add_argument('--values', type=Path, help='Values table file')
    tables.add_argument(
        '--strict',
        action='store_true',
        help='Fail when a table cannot be loaded instead of using defaults'
    )

    order = parser.add_argument_group('order')
    for name in ORDER_ARGUMENTS:
        order.add_argument(f"--{name.replace('_', '-')}", dest=name, default=None)

    request = parser.add_argument_group('request')
    request.add_argument('--section', help='ParamSection to resolve')
    request.add_argument('--key', help='ParamKey to resolve')
    request.add_argument(
        '--type',
        choices=[t.value for t in DataType],
        default=DataType.INT.value,
        help='DataType to resolve (default: int)'
    )
    request.add_argument('--default', help='Value returned when nothing resolves')

    parser.add_argument('--list', '-l', action='store_true',
                        help='List applicable manifests with their scores')
    parser.add_argument('--dump', action='store_true',
                        help='Print the merged manifest table')
    parser.add_argument('--demo', action='store_true',
                        help='Run the example scenarios')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress banner and informational logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for order_config.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.quiet:
        print_banner()

    config = initialize_system(args)
    logger = get_output_logger('cli')

    manifest = args.manifest or config.get('manifest_file')
    values = args.values or config.get('values_file')
    strict = args.strict or config.get('strict_load', False)

    try:
        service = ConfigService.from_files(
            manifest,
            values,
            strict=strict,
            identity_column=config.get('identity_column'),
        )
    except LoadError as e:
        print(f"{STATUS_FAIL} Cannot load tables: {e}")
        logger.error(f"Cannot load tables: {e}")
        return 1

    if service.load_error is not None:
        print(f"{STATUS_WARN} Tables not loaded, using defaults: {service.load_error}")

    if not args.quiet:
        print_system_info(service, manifest, values)

    if args.dump or config.get('dump_table', False):
        print(format_table(service.table))
        print(MENU_SEPARATOR)

    wants_query = args.list or (args.section and args.key)
    if args.demo or not (wants_query or args.dump):
        run_demo(service)

    if wants_query:
        return run_query(service, args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
