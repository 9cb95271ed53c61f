#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path

from timevalue.schedule import amortization_schedule


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a level-payment amortization table.")
    parser.add_argument("--rate", type=float, required=True, help="Interest rate per period.")
    parser.add_argument("--periods", type=int, required=True, help="Number of payment periods.")
    parser.add_argument("--principal", type=float, required=True, help="Opening balance.")
    parser.add_argument("--future-value", type=float, default=0.0, help="Balance after the last payment.")
    parser.add_argument("--timing", choices=["begin", "end"], default="end", help="When payments are due.")
    parser.add_argument("--output", default=None, help="CSV path; prints the table when omitted.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    schedule = amortization_schedule(
        rate=args.rate,
        periods=args.periods,
        present_value=args.principal,
        future_value=args.future_value,
        timing=args.timing,
    )

    print("Amortization summary")
    print(f"- periods: {len(schedule)} (payments due at {args.timing} of period)")
    print(f"- payment per period: {schedule['payment'].iloc[0]:.2f}")
    print(f"- total interest: {schedule['interest'].sum():.2f}")
    print(f"- closing balance: {schedule['balance'].iloc[-1]:.2f}")

    if args.output is None:
        print(schedule.to_string(index=False, float_format=lambda x: f"{x:.2f}"))
        return

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    schedule.to_csv(output_path, index=False)
    print("- file written:")
    print(f"  - {output_path}")


if __name__ == "__main__":
    main()
