"""
Income whitelist loader.
Loads CSV files listing income payer names and income categories.
"""

import csv
from typing import Dict, List
from pathlib import Path


WHITELIST_KINDS = ("name", "category")


def load_income_whitelist_csv(csv_path: str) -> Dict[str, List[str]]:
    """
    Load an income whitelist from a CSV file.

    Args:
        csv_path: Path to CSV file containing whitelist rows

    Returns:
        Dictionary in the INCOME_WHITELIST_CONFIG shape:
        {"names": [...], "categories": [...]}

    Example CSV format:
        kind,value
        name,Acme Corp Payroll
        category,Payroll
    """
    whitelist = {"names": [], "categories": []}

    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"Income whitelist file not found: {csv_path}")

    with open(csv_path, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            kind = (row.get('kind') or '').strip().lower()
            value = (row.get('value') or '').strip()
            if not kind and not value:
                continue
            if kind not in WHITELIST_KINDS:
                raise ValueError(
                    f"Unknown whitelist kind '{kind}' on line {line_no} of {csv_path}"
                )
            if not value:
                continue

            key = "names" if kind == "name" else "categories"
            if value not in whitelist[key]:
                whitelist[key].append(value)

    return whitelist
