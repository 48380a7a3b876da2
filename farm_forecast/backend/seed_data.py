#!/usr/bin/env python3
"""
seed_data.py

Generates realistic fake farm inventory to a CSV under a local folder (default: sample_data).

Each farm stocks a handful of feed and supply products. Consumption is recorded
the way farmers actually fill it in: some products carry an average monthly
consumption, some only a feeding schedule, some both, and a few neither.

Run:
  python -m farm_forecast.backend.seed_data --farms 8 --seed 42
"""

from __future__ import annotations
import argparse
import csv
import os
import random
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

from farm_forecast.config import get_config

# -----------------------------
# Config & helper structures
# -----------------------------

REGIONS = ["Arusha", "Dodoma", "Mbeya", "Morogoro", "Mwanza", "Tanga"]
FARM_KINDS = ["Poultry", "Dairy", "Mixed", "Layers", "Broiler"]

@dataclass
class Product:
    name: str
    unit: str
    feed_type: str
    supplier_name: str
    monthly_range: tuple  # plausible average monthly consumption, in unit

PRODUCTS: List[Product] = [
    Product("Layer Mash",           "kg",   "layer",    "Hill Feeds",      (150, 900)),
    Product("Broiler Starter",      "kg",   "broiler",  "Hill Feeds",      (100, 600)),
    Product("Broiler Finisher",     "kg",   "broiler",  "Silverlands",     (200, 1200)),
    Product("Chick Mash",           "kg",   "chick",    "Silverlands",     (40, 250)),
    Product("Dairy Meal",           "kg",   "dairy",    "Interchick",      (300, 1500)),
    Product("Maize Bran",           "kg",   "energy",   "Local Millers",   (200, 1000)),
    Product("Mineral Lick",         "blocks", "supplement", "Interchick",  (4, 30)),
    Product("Vitamin Premix",       "sachets", "supplement", "Vetcare",    (10, 60)),
]

# Share of rows per consumption-input style
CONSUMPTION_STYLES = {
    "monthly": 0.45,
    "frequency": 0.30,
    "both": 0.15,
    "none": 0.10,
}

FREQUENCY_UNITS = {"daily": (1, 4), "weekly": (1, 14), "monthly": (2, 60)}

COLUMNS = [
    "id", "farm_name", "product_name", "unit", "feed_type", "supplier_name",
    "current_stock", "low_stock_threshold", "average_monthly_consumption",
    "feed_frequency", "feed_frequency_unit",
]


# -----------------------------
# Utility functions
# -----------------------------

def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def pick_style() -> str:
    styles = list(CONSUMPTION_STYLES.keys())
    return random.choices(styles, weights=list(CONSUMPTION_STYLES.values()))[0]


# -----------------------------
# Core generators
# -----------------------------

def gen_farms(n: int) -> List[str]:
    farms = []
    for i in range(1, n + 1):
        farms.append(f"{random.choice(REGIONS)} {random.choice(FARM_KINDS)} Farm {i:02d}")
    return farms

def gen_inventory_row(record_id: int, farm_name: str, product: Product) -> Dict:
    monthly: Optional[float] = None
    frequency: Optional[int] = None
    frequency_unit: Optional[str] = None

    style = pick_style()
    if style in ("monthly", "both"):
        monthly = round(random.uniform(*product.monthly_range), 1)
    if style in ("frequency", "both"):
        frequency_unit = random.choice(list(FREQUENCY_UNITS.keys()))
        frequency = random.randint(*FREQUENCY_UNITS[frequency_unit])

    # stock spans from nearly empty to roughly three months of cover
    ref_monthly = monthly if monthly is not None else sum(product.monthly_range) / 2
    current_stock = round(ref_monthly * random.uniform(0.05, 3.0), 1)

    threshold = None
    if random.random() < 0.8:
        threshold = round(ref_monthly * random.choice([0.25, 0.5, 0.75]), 1)

    # None is written as an empty cell, which the CSV source reads back as absent
    return {
        "id": f"inv-{record_id:05d}",
        "farm_name": farm_name,
        "product_name": product.name,
        "unit": product.unit,
        "feed_type": product.feed_type,
        "supplier_name": product.supplier_name,
        "current_stock": current_stock,
        "low_stock_threshold": threshold,
        "average_monthly_consumption": monthly,
        "feed_frequency": frequency,
        "feed_frequency_unit": frequency_unit,
    }

def gen_inventory(farms: List[str]) -> List[Dict]:
    rows = []
    record_id = 1
    for farm in farms:
        stocked = random.sample(PRODUCTS, k=random.randint(3, len(PRODUCTS)))
        for product in stocked:
            rows.append(gen_inventory_row(record_id, farm, product))
            record_id += 1
    return rows


# -----------------------------
# Writers
# -----------------------------

def write_csv(path: str, rows: List[Dict], fieldnames: List[str]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in rows:
            w.writerow(r)


# -----------------------------
# Main
# -----------------------------

def main(argv=None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Generate fake farm inventory to a CSV.")
    parser.add_argument("--farms", type=int, default=config.default_seed_farms, help="Number of farms to generate.")
    parser.add_argument("--output-dir", type=str, default=config.data_dir)
    parser.add_argument("--seed", type=int, default=config.default_seed_value)
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if the CSV already exists.")
    args = parser.parse_args(argv)

    if args.farms <= 0:
        parser.error("--farms must be positive")

    random.seed(args.seed)

    outdir = args.output_dir
    ensure_dir(outdir)
    path = os.path.join(outdir, config.inventory_file)

    if args.no_overwrite and os.path.exists(path):
        print(f"Refusing to overwrite existing file: {path}", file=sys.stderr)
        return 2

    farms = gen_farms(args.farms)
    inventory = gen_inventory(farms)
    write_csv(path, inventory, COLUMNS)

    # simple summary
    print(f"Generated data in {outdir}")
    print(f" farms: {len(farms)} | inventory rows: {len(inventory)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
