#!/usr/bin/env python3
"""
seed_data.py

Generates fake inventory data to CSVs under a local folder (default: sample_data).

Files:
- movements.csv   quantity observations per product/category over time
- thresholds.csv  minimum/maximum per product
- tickets.csv     request records behind the report charts

Run:
  python -m stockview.data.seed_data --days 60
"""

from __future__ import annotations
import argparse
import csv
import os
import random
import sys
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from stockview.config import get_config

# -----------------------------
# Config & helper structures
# -----------------------------

PRODUCTS_BY_CATEGORY: Dict[str, List[str]] = {
    "Vinil": ["Vinil Blanco", "Vinil Negro", "Vinil Transparente", "Vinil Azul"],
    "Tarima": ["Tarima Estándar", "Tarima Reforzada", "Tarima Europea"],
    "Material de Empaque": ["Cartón Corrugado", "Esquineros", "Mextape", "Bandas"],
}

BRANCHES = ["Monterrey", "Guadalajara", "Querétaro", "Puebla", None]

TICKET_CATEGORIES = ["Hardware", "Software", "Redes", "Accesos", None]

PRIORITIES = ["critical", "high", "low", None]


# -----------------------------
# Utility functions
# -----------------------------

def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def write_csv(path: str, rows: List[Dict], fieldnames: List[str]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow({k: ("" if row.get(k) is None else row.get(k)) for k in fieldnames})


# -----------------------------
# Core generators
# -----------------------------

def gen_thresholds() -> List[Dict]:
    thresholds = []
    threshold_id = 1
    for category, products in PRODUCTS_BY_CATEGORY.items():
        for name in products:
            minimum = random.randint(5, 30)
            thresholds.append({
                "id": f"th-{threshold_id:04d}",
                "product_name": name,
                "category": category,
                "minimum": minimum,
                "maximum": minimum + random.randint(20, 80),
            })
            threshold_id += 1
    return thresholds

def gen_movements(thresholds: List[Dict], end: datetime, days: int) -> List[Dict]:
    """One count every few days per product, drifting around its threshold range."""
    movements = []
    for t in thresholds:
        level = random.uniform(t["minimum"], t["maximum"] * 1.2)
        ts = end - timedelta(days=days)
        while ts <= end:
            level = max(0.0, level + random.uniform(-12, 10))
            movements.append({
                "product_name": t["product_name"],
                "category": t["category"],
                "quantity": round(level, 1),
                "timestamp": ts.isoformat(timespec="seconds"),
                "priority": random.choice(PRIORITIES),
            })
            ts += timedelta(days=random.randint(1, 4), hours=random.randint(0, 8))
    return movements

def gen_tickets(n: int, end: datetime, days: int) -> List[Dict]:
    tickets = []
    for _ in range(n):
        created = end - timedelta(days=random.uniform(0, days))
        tickets.append({
            "branch": random.choice(BRANCHES),
            "category": random.choice(TICKET_CATEGORIES),
            "created_on": created.isoformat(timespec="seconds"),
        })
    return tickets


# -----------------------------
# Main
# -----------------------------

def main(argv: List[str] = None) -> int:
    config = get_config()
    parser = argparse.ArgumentParser(description="Generate sample inventory CSVs.")
    parser.add_argument("--outdir", default=config.data_dir, help="Output folder")
    parser.add_argument("--days", type=int, default=config.default_seed_days, help="Days of history")
    parser.add_argument("--tickets", type=int, default=300, help="Number of report records")
    parser.add_argument("--seed", type=int, default=config.default_seed_value, help="Random seed")
    parser.add_argument("--no-overwrite", action="store_true", help="Refuse to overwrite existing files")
    args = parser.parse_args(argv)

    random.seed(args.seed)
    outdir = args.outdir
    ensure_dir(outdir)

    # file paths
    files = {
        "movements": os.path.join(outdir, "movements.csv"),
        "thresholds": os.path.join(outdir, "thresholds.csv"),
        "tickets": os.path.join(outdir, "tickets.csv"),
    }
    if args.no_overwrite:
        for p in files.values():
            if os.path.exists(p):
                print(f"Refusing to overwrite existing file: {p}", file=sys.stderr)
                return 2

    end = datetime.now(timezone.utc).replace(microsecond=0)
    thresholds = gen_thresholds()
    movements = gen_movements(thresholds, end, args.days)
    tickets = gen_tickets(args.tickets, end, args.days)

    # write CSVs
    write_csv(files["thresholds"], thresholds,
              ["id", "product_name", "category", "minimum", "maximum"])
    write_csv(files["movements"], movements,
              ["product_name", "category", "quantity", "timestamp", "priority"])
    write_csv(files["tickets"], tickets,
              ["branch", "category", "created_on"])

    # simple summary
    print(f"Generated data in {outdir}")
    print(f" thresholds: {len(thresholds)} | movements: {len(movements)} | tickets: {len(tickets)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
