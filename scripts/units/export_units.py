#!/usr/bin/env python3
"""Export the built-in unit catalogs to CSV.

Writes the catalog that ``ckconv --units`` displays as a flat table, plus an
info file with per-system statistics, for inspection or for use in other tools.

Usage:
    # Export every system
    python scripts/units/export_units.py

    # Specify output location
    python scripts/units/export_units.py --output data/units.csv

    # One system only
    python scripts/units/export_units.py --system imperial

    # Validate without writing anything
    python scripts/units/export_units.py --dry-run

Environment Variables:
    UNITS_CSV_PATH: Default output path (default: tables/units/units.csv)
"""

import argparse
import os
import sys
import traceback
from datetime import datetime
from pathlib import Path

import pandas as pd

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from ckconv import __version__
from ckconv.systems.systemapi import load_units, system_identifier
from ckconv.systems.unitsystems import SystemID


def _write_info_file(info_path: Path, data: pd.DataFrame, csv_path: Path):
    """Write catalog statistics to info file."""
    with open(info_path, 'w') as f:
        f.write("=" * 70 + "\n")
        f.write("Unit Catalog Information\n")
        f.write("=" * 70 + "\n")
        f.write(f"\nGenerated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        f.write(f"ckconv version: {__version__}\n")
        f.write("\n")

        f.write(f"Total Units: {len(data):,}\n")
        f.write("\n")

        f.write("Breakdown by System:\n")
        for system, group in data.groupby('system', sort=False):
            base = group['base'].iloc[0]
            pct = len(group) / len(data) * 100
            f.write(f"  - {system:15s}: {len(group):3,} units ({pct:5.1f}%), base unit {base}\n")
        f.write("\n")

        f.write("Data Coverage:\n")
        symbol_count = (data['symbol'] != '').sum()
        symbol_pct = symbol_count / len(data) * 100
        f.write(f"  - With Symbol:  {symbol_count:3,} ({symbol_pct:5.1f}%)\n")

        no_symbol = data.loc[data['symbol'] == '', 'name'].tolist()
        if no_symbol:
            f.write(f"  - Name only:    {', '.join(no_symbol)}\n")
        f.write("\n")

        f.write("Factor Range:\n")
        for system, group in data.groupby('system', sort=False):
            smallest = group.loc[group['factor'].idxmin()]
            largest = group.loc[group['factor'].idxmax()]
            f.write(
                f"  - {system:15s}: {smallest['name']} ({smallest['factor']:.10g}) "
                f"to {largest['name']} ({largest['factor']:.10g})\n"
            )
        f.write("\n")

        f.write("Files:\n")
        if csv_path.exists():
            size_kb = csv_path.stat().st_size / 1024
            f.write(f"  - CSV: {csv_path.name} ({size_kb:.2f} KB)\n")


def main():
    parser = argparse.ArgumentParser(
        description='Export the ckconv unit catalogs to CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # Output options
    default_output = Path(os.environ.get('UNITS_CSV_PATH', 'tables/units/units.csv'))
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=default_output,
        help=f'Output path for units.csv (default: {default_output})'
    )
    parser.add_argument(
        '--system', '-s',
        default='',
        help='Only export one system (metric, imperial, ck) or the system of a unit'
    )
    parser.add_argument(
        '--no-info',
        dest='info',
        action='store_false',
        help='Skip the units.info statistics file'
    )

    # Development options
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Run without saving output files (validation only)'
    )

    args = parser.parse_args()

    try:
        system = system_identifier(args.system)
        if system is None:
            print(f"Error: '{args.system}' is not a measurement system or unit", file=sys.stderr)
            return 1

        print("Exporting unit catalog...")
        print("=" * 70)

        data = load_units(system).copy()
        print(f"  Found {len(data)} units in {system.value if system is not SystemID.ALL else 'all systems'}")

        if data['factor'].eq(0).any():
            print("Error: catalog contains a zero conversion factor", file=sys.stderr)
            return 1

        if args.dry_run:
            print("\nDry run complete - no files written")
            return 0

        args.output.parent.mkdir(parents=True, exist_ok=True)
        data.to_csv(args.output, index=False)
        print(f"\nGenerated {args.output} with {len(data):,} units")

        if args.info:
            info_path = args.output.parent / f"{args.output.stem}.info"
            _write_info_file(info_path, data, args.output)
            print(f"Generated info file: {info_path}")

        print("\n" + "=" * 70)
        print("Unit catalog export complete!")
        print(f"Output: {args.output}")

        print("\nSystems:")
        for name, count in data['system'].value_counts(sort=False).items():
            print(f"  - {name}: {count}")

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
