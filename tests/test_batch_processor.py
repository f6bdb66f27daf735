"""
Test suite for the baseline batch processor.

Ensures per-file failures are recorded without stopping the batch and that
results export to DataFrames.
"""

import copy
import json
import os
import tempfile
import unittest
from datetime import date
from baseline_batch_processor import BaselineBatchProcessor, ProcessingError
from baseline_engine.baseline import BaselineCalculator, InMemoryTransactionStore
from baseline_engine.config import BASELINE_CONFIG
from baseline_engine.income import IncomeWhitelist


def grocery_rows():
    return [
        {"date": "2025-03-05", "amount_cents": -10000, "name": "Whole Foods", "category_top": "Groceries"},
        {"date": "2025-04-05", "amount_cents": -11000, "name": "Whole Foods", "category_top": "Groceries"},
        {"date": "2025-05-05", "amount_cents": -9000, "name": "Whole Foods", "category_top": "Groceries"},
    ]


def as_bytes(data):
    return json.dumps(data).encode("utf-8")


class TestBatchProcessing(unittest.TestCase):
    """Test cases for process_batch."""

    def setUp(self):
        """Set up test fixtures."""
        self.processor = BaselineBatchProcessor(as_of=date(2025, 5, 18))

    def test_list_and_dict_layouts(self):
        """Test both supported JSON layouts."""
        files = [
            ("alice.json", as_bytes(grocery_rows())),
            ("bob.json", as_bytes({"transactions": grocery_rows()})),
        ]

        result = self.processor.process_batch(files)

        self.assertEqual(result.stats.successful, 2)
        self.assertEqual(result.stats.failed, 0)
        self.assertEqual([r.user_id for r in result.results], ["alice", "bob"])
        self.assertEqual(result.results[0].baseline.monthly_expenses_by_category, {"Groceries": 10000})
        self.assertEqual(result.results[0].transaction_count, 3)
        self.assertEqual(result.results[0].window.start, date(2025, 3, 1))

    def test_errors_recorded_and_batch_continues(self):
        """Test each failure type is recorded while good files still succeed."""
        files = [
            ("broken.json", b"{not json"),
            ("wrong_shape.json", as_bytes({"accounts": []})),
            ("bad_row.json", as_bytes([{"amount_cents": -100}])),
            ("empty.json", as_bytes([])),
            ("good.json", as_bytes(grocery_rows())),
        ]

        result = self.processor.process_batch(files)

        self.assertEqual(result.stats.total_files, 5)
        self.assertEqual(result.stats.processed, 5)
        self.assertEqual(result.stats.successful, 1)
        self.assertEqual(result.stats.failed, 4)
        self.assertAlmostEqual(result.stats.success_rate, 20.0)
        self.assertEqual(result.results[0].user_id, "good")
        self.assertEqual(result.error_summary, {
            "JSON_PARSE_ERROR": 1,
            "INVALID_JSON_STRUCTURE": 1,
            "DATA_VALIDATION_ERROR": 2,
        })
        self.assertTrue(all(isinstance(e, ProcessingError) for e in result.errors))
        self.assertEqual(result.errors[0].file_name, "broken.json")

    def test_cp1252_content(self):
        """Test non-UTF-8 files fall back to other encodings."""
        rows = grocery_rows()
        rows[0]["name"] = "Café – Whole Foods"
        content = json.dumps(rows, ensure_ascii=False).encode("cp1252")

        result = self.processor.process_batch([("carol.json", content)])

        self.assertEqual(result.stats.successful, 1)

    def test_as_of_defaults_to_latest_transaction(self):
        """Test the window follows each file's newest row when as_of is unset."""
        processor = BaselineBatchProcessor()
        result = processor.process_batch([("dave.json", as_bytes(grocery_rows()))])

        self.assertEqual(result.results[0].window.end, date(2025, 5, 31))
        self.assertEqual(result.results[0].baseline.total_monthly_expenses_cents, 10000)

    def test_custom_whitelist(self):
        """Test the income whitelist can be supplied."""
        rows = grocery_rows() + [
            {"date": d, "amount_cents": 100000, "name": "GLOBEX PAYROLL"}
            for d in ["2025-03-01", "2025-04-01", "2025-05-01"]
        ]
        processor = BaselineBatchProcessor(
            as_of=date(2025, 5, 18),
            income_whitelist=IncomeWhitelist.from_values(["Globex"], []),
        )

        result = processor.process_batch([("erin.json", as_bytes(rows))])

        self.assertEqual(result.results[0].baseline.monthly_income_cents, 100000)

    def test_injected_calculator_not_modified(self):
        """Test a caller's calculator keeps its own store and still drives the batch."""
        store = InMemoryTransactionStore()
        config = copy.deepcopy(BASELINE_CONFIG)
        config["exclude_card_payments"] = True
        calculator = BaselineCalculator(transaction_store=store, config=config)
        rows = grocery_rows() + [
            {"date": "2025-04-20", "amount_cents": -50000, "name": "Payment Thank You",
             "category_top": "Credit Card"},
        ]

        result = BaselineBatchProcessor(as_of=date(2025, 5, 18), calculator=calculator).process_batch([
            ("frank.json", as_bytes(rows)),
            ("gina.json", as_bytes(grocery_rows())),
        ])

        self.assertIs(calculator.transaction_store, store)
        self.assertEqual(store.find_by_user_and_date_range("frank", date(2025, 1, 1), date(2025, 12, 31)), [])
        self.assertEqual(result.stats.successful, 2)
        self.assertEqual(result.results[0].baseline.monthly_expenses_by_category, {"Groceries": 10000})

    def test_progress_callback(self):
        """Test the callback sees every file."""
        calls = []
        self.processor.process_batch(
            [("a.json", as_bytes(grocery_rows())), ("b.json", b"[")],
            progress_callback=lambda current, total, message: calls.append((current, total)),
        )
        self.assertEqual(calls, [(1, 2), (2, 2)])


class TestBatchExport(unittest.TestCase):
    """Test cases for loading files and DataFrame export."""

    def setUp(self):
        """Set up test fixtures."""
        self.processor = BaselineBatchProcessor(as_of=date(2025, 5, 18))

    def test_results_to_dataframe(self):
        """Test one row per user and category."""
        result = self.processor.process_batch([
            ("alice.json", as_bytes(grocery_rows())),
            ("nobody.json", as_bytes([{"date": "2025-05-01", "amount_cents": 500, "name": "Venmo"}])),
        ])

        df = self.processor.results_to_dataframe(result.results)

        self.assertEqual(len(df), 2)
        self.assertEqual(list(df["User ID"]), ["alice", "nobody"])
        self.assertEqual(df.iloc[0]["Category"], "Groceries")
        self.assertEqual(df.iloc[0]["Monthly Amount (cents)"], 10000)
        self.assertEqual(df.iloc[0]["Confidence"], "High")
        self.assertEqual(df.iloc[1]["Category"], "")
        self.assertEqual(df.iloc[1]["Paycheck Cadence"], "Irregular")

    def test_errors_to_dataframe(self):
        """Test error export columns."""
        result = self.processor.process_batch([("broken.json", b"{")])

        df = self.processor.errors_to_dataframe(result.errors)

        self.assertEqual(list(df.columns), ["File Name", "Error Type", "Error Message", "Timestamp"])
        self.assertEqual(df.iloc[0]["Error Type"], "JSON_PARSE_ERROR")

    def test_load_files_from_directory(self):
        """Test only .json files are loaded, sorted by name."""
        with tempfile.TemporaryDirectory() as tmpdir:
            for name, content in [("b.json", "[]"), ("a.JSON", "[]"), ("notes.txt", "x")]:
                with open(os.path.join(tmpdir, name), "w", encoding="utf-8") as f:
                    f.write(content)

            files = self.processor.load_files_from_directory(tmpdir)

        self.assertEqual([name for name, _ in files], ["a.JSON", "b.json"])
        self.assertEqual(files[0][1], b"[]")

    def test_load_files_missing_directory(self):
        """Test a missing directory raises."""
        with self.assertRaises(FileNotFoundError):
            self.processor.load_files_from_directory("/nonexistent/baseline/input")


if __name__ == "__main__":
    unittest.main()
