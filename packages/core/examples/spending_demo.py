#!/usr/bin/env python3
"""
Spendwise Demo

Extracts draft transactions from voice-style sentences and receipt text,
accepts them into a ledger seeded with three months of history, and prints
the resulting insights, recommendations and forecast.

Usage:
    python examples/spending_demo.py
    python examples/spending_demo.py --say "Spent $42 on dinner" --say "Earned $1500 salary"
    python examples/spending_demo.py --receipt ./receipt.txt --json-logs
"""

import argparse
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from spendwise_core import Origin, TransactionLedger, TransactionType, extract_transaction
from spendwise_core.config import load_config
from spendwise_core.log_config import configure_logging


SAMPLE_RECEIPT = """
CITY DINER
88 Hudson Ave
{today:%m/%d/%y}

2x Pancakes      $18.00
Coffee            $3.50
Subtotal         $21.50
Tax               $1.91
TOTAL            $23.41
"""

SAMPLE_UTTERANCES = [
    "Spent $25 on lunch",
    "Paid 60 dollars for gas",
    "Received $3200 salary",
    "Bought concert tickets for $180",
]


def seed_history(ledger: TransactionLedger, today: date) -> None:
    """Add three months of food and transport spending before today."""
    first_of_month = today.replace(day=1)
    for months_back, food in ((3, "380"), (2, "450"), (1, "520")):
        day = first_of_month
        for _ in range(months_back):
            day = (day - timedelta(days=1)).replace(day=1)
        ledger.add(type="expense", description="Groceries", amount=Decimal(food),
                   category="food", date=day.replace(day=5))
        ledger.add(type="expense", description="Transit pass", amount=Decimal("120"),
                   category="transport", date=day.replace(day=2))
        ledger.add(type=TransactionType.INCOME, description="Salary", amount=Decimal("3200"),
                   category="income", date=day.replace(day=1))


def main():
    """Run the extraction and analytics demonstration."""
    parser = argparse.ArgumentParser(
        description="Extract transactions from text and analyze spending",
    )
    parser.add_argument(
        "--say",
        action="append",
        default=[],
        help="A spoken sentence to extract (repeatable)",
    )
    parser.add_argument(
        "--receipt",
        type=str,
        help="Path to a text file with OCR output from a receipt",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Render structured logs as JSON",
    )
    args = parser.parse_args()

    configure_logging(load_config(log_format="json" if args.json_logs else "console"))

    today = date.today()
    ledger = TransactionLedger(clock=lambda: today)
    seed_history(ledger, today)

    receipt_text = (
        Path(args.receipt).read_text(encoding="utf-8")
        if args.receipt
        else SAMPLE_RECEIPT.format(today=today)
    )

    print("=" * 70)
    print("SPENDWISE - Extraction and Analytics Demo")
    print("=" * 70)
    print()

    print("Step 1: Extracting drafts...")
    drafts = [extract_transaction(text, Origin.UTTERANCE) for text in args.say or SAMPLE_UTTERANCES]
    drafts.append(extract_transaction(receipt_text, Origin.DOCUMENT))

    for draft in drafts:
        print(f"  - [{draft.origin.value:9}] {draft.type.value:7} ${draft.amount:>9,.2f}  "
              f"{draft.category:13} {draft.date}  {draft.description}")
        if draft.amount > 0:
            ledger.accept_draft(draft)
        else:
            print("    (skipped: no amount found, would need user correction)")
    print()

    state = ledger.state
    print(f"Step 2: {state.current.label}")
    print(f"  - Income:   ${state.current.total_income:,.2f}")
    print(f"  - Expenses: ${state.current.total_expense:,.2f}")
    print(f"  - Savings rate: {state.pattern.savings_rate:.1f}%")
    print()

    print("Step 3: Insights")
    for insight in state.insights:
        print(f"  - [{insight.kind.value}] {insight.title}: {insight.message}")
    print()

    print("Step 4: Recommendations")
    for rec in state.recommendations:
        print(f"  - [{rec.priority.value}] {rec.message}")
    print()

    print("Step 5: Forecast")
    if state.forecast:
        print(f"  - Next month: ${state.forecast.projected_amount:,.2f} "
              f"({state.forecast.trend.value}, {state.forecast.confidence.value} confidence)")
    else:
        print("  - Not enough history yet")

    print()
    print("=" * 70)
    print("Demo complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
