"""CLI client for the Mortgage Breakdown API — posts loan terms and prints a terminal report.

Usage:
    python breakdown-cli/print_breakdown.py 200000 5.0 24
    python breakdown-cli/print_breakdown.py 200000 5.0 24 --monthly 1073.64 --yearly
    python breakdown-cli/print_breakdown.py 200000 5.0 24 --save-pdf breakdown.pdf
"""

import argparse
import asyncio
import sys
from decimal import Decimal

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _money(v) -> str:
    return f"£{float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_summary(data: dict) -> None:
    terms = data["terms"]
    _header("Loan Summary")
    print(f"  Principal:          {_money(terms['principal'])}")
    print(f"  Interest Rate:      {float(terms['rate']):.3f}%")
    print(f"  Fixed Period:       {terms['months']} months")
    print(f"  Monthly Payment:    {_money(terms['monthly_payment'])} ({terms['payment_source']})")
    print()
    print(f"  Total Paid:         {_money(data['total_paid'])}")
    print(f"  Total Interest:     {_money(data['total_interest'])}")
    print(f"  Total Principal:    {_money(data['total_principal'])}")
    print(f"  Remaining Balance:  {_money(data['remaining_balance'])}")


def print_yearly(data: dict) -> None:
    yearly = data.get("yearly", [])
    if not yearly:
        return
    _header("By Year")
    print(f"  {'Yr':>3}  {'Interest':>13}  {'Principal':>13}  {'Paid':>13}  {'Balance':>14}")
    print(f"  {'---':>3}  {'-' * 13}  {'-' * 13}  {'-' * 13}  {'-' * 14}")
    for y in yearly:
        print(
            f"  {y['year']:>3}  {_money(y['interest']):>13}  {_money(y['principal']):>13}  "
            f"{_money(y['paid']):>13}  {_money(y['ending_balance']):>14}"
        )


def print_monthly(data: dict) -> None:
    _header("Monthly Breakdown")
    print(f"  {'Mo':>4}  {'Interest':>13}  {'Principal':>13}  {'Balance':>14}")
    print(f"  {'----':>4}  {'-' * 13}  {'-' * 13}  {'-' * 14}")
    for e in data.get("entries", []):
        print(
            f"  {e['month']:>4}  {_money(e['interest']):>13}  "
            f"{_money(e['principal']):>13}  {_money(e['balance']):>14}"
        )


async def save_download(client: httpx.AsyncClient, url: str, form: dict, path: str) -> None:
    resp = await client.post(url, data=form)
    if resp.status_code != 200:
        print(f"Error: download returned {resp.status_code}: {resp.text}", file=sys.stderr)
        sys.exit(1)
    with open(path, "wb") as f:
        f.write(resp.content)
    print(f"Saved {path} ({len(resp.content):,} bytes)")


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print a fixed-rate mortgage breakdown via the Mortgage Breakdown API"
    )
    parser.add_argument("principal", type=Decimal, help="Loan amount")
    parser.add_argument("rate", type=Decimal, help="Annual interest rate in percent, e.g. 5.0")
    parser.add_argument("months", type=int, help="Fixed rate period in months")
    parser.add_argument("--monthly", type=Decimal, help="Monthly payment (calculated if omitted)")
    parser.add_argument("--yearly", action="store_true", help="Print the year roll-up instead of every month")
    parser.add_argument("--save-pdf", metavar="PATH", help="Also download the PDF to PATH")
    parser.add_argument("--save-csv", metavar="PATH", help="Also download the CSV to PATH")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8080",
        help="API base URL (default: http://localhost:8080)",
    )

    args = parser.parse_args()

    payload: dict = {
        "principal": str(args.principal),
        "rate": str(args.rate),
        "months": args.months,
    }
    if args.monthly is not None:
        payload["monthly"] = str(args.monthly)

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(f"{args.api_url}/api/v1/schedule", json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print(
                "Is the server running? Start with: uvicorn mortgage_breakdown.api.app:app --port 8080",
                file=sys.stderr,
            )
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            print(f"  {resp.text}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

        # The download endpoints take the same fields as a form post.
        form = {k: str(v) for k, v in payload.items()}
        if args.save_pdf:
            await save_download(client, f"{args.api_url}/download-pdf", form, args.save_pdf)
        if args.save_csv:
            await save_download(client, f"{args.api_url}/download-csv", form, args.save_csv)

    print_summary(data)
    if args.yearly:
        print_yearly(data)
    else:
        print_monthly(data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
