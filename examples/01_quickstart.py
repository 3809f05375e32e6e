#!/usr/bin/env python3
"""Example: Quickstart — scalgo

Minimal working example: parse a document of labeled durations, show
every record on the scale unit, and print the canonical text.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install scalgo
"""
from __future__ import annotations

import scalgo
from scalgo.errors import ScalgoError

SOURCE = '''
# how long things take
@scale day
Label 1: 3.14 years
Label 2: 42 days
Label 3: 1.5 hours
'''


def main() -> None:
    print(f"scalgo version: {scalgo.__version__}")

    # Step 1: Parse the document
    enlistment = scalgo.parse(SOURCE)
    print(f"Parsed {len(enlistment)} records, reference: '{enlistment.ref_record.label}'")

    # Step 2: Show each record on the scale unit
    scale = enlistment.scale_unit
    for record, value in enlistment.scaled_values():
        print(f"  {record.label:<10} {record.value:>8g} {record.unit.name:<6} = {value:.4f} {scale.name}")

    # Step 3: Format to canonical style
    print("\nCanonical text:")
    print(scalgo.format(enlistment), end="")

    # Step 4: Errors carry the offending line
    try:
        scalgo.parse("Tea: 4 min\n@colour blue\n")
    except ScalgoError as exc:
        print(f"\nline {exc.line}: {exc}")


if __name__ == "__main__":
    main()
