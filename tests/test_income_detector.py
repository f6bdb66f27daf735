"""
Test suite for whitelist income detection.

Baseline income must be a positive, non-refund, non-transfer transaction
whose payer name or sub category is whitelisted. Everything else positive is
an "other inflow".
"""

import unittest
from datetime import date
from baseline_engine.models import Transaction
from baseline_engine.income.income_detector import IncomeDetector, IncomeWhitelist


def make_txn(name, amount_cents, **kwargs):
    return Transaction(date=date(2025, 3, 7), amount_cents=amount_cents, name=name, **kwargs)


class TestBaselineIncome(unittest.TestCase):
    """Test cases for is_baseline_income with the configured whitelist."""

    def setUp(self):
        """Set up test fixtures."""
        self.detector = IncomeDetector()

    def test_whitelisted_name(self):
        """Test payroll from a whitelisted payer."""
        txn = make_txn("COZY EART DIR DEP PPD 0301", 250000)
        self.assertTrue(self.detector.is_baseline_income(txn))
        self.assertFalse(self.detector.is_other_inflow(txn))

    def test_whitelisted_category_verbatim(self):
        """Test sub category must match exactly."""
        self.assertTrue(self.detector.is_baseline_income(
            make_txn("ACME CORP", 180000, category_sub="Payroll")))
        self.assertFalse(self.detector.is_baseline_income(
            make_txn("ACME CORP", 180000, category_sub="payroll")))

    def test_outflow_not_income(self):
        """Test negative amounts are never income."""
        txn = make_txn("Cozy Earth", -5000)
        self.assertFalse(self.detector.is_baseline_income(txn))
        self.assertFalse(self.detector.is_other_inflow(txn))

    def test_refund_from_whitelisted_payer_not_income(self):
        """Test refunds are excluded even from a whitelisted name."""
        txn = make_txn("Cozy Earth Refund", 3000)
        self.assertFalse(self.detector.is_baseline_income(txn))
        self.assertFalse(self.detector.is_other_inflow(txn))

    def test_transfer_from_whitelisted_payer_not_income(self):
        """Test transfers are excluded even from a whitelisted name."""
        txn = make_txn("Cozy Earth Transfer", 100000)
        self.assertFalse(self.detector.is_baseline_income(txn))

    def test_issuer_merchant_not_income(self):
        """Test card issuer credits are transfers, not income."""
        txn = make_txn("Mastercard Stipend", 40000, merchant_name="Chase")
        self.assertFalse(self.detector.is_baseline_income(txn))


class TestOtherInflow(unittest.TestCase):
    """Test cases for is_other_inflow and classify_inflow."""

    def setUp(self):
        """Set up test fixtures."""
        self.detector = IncomeDetector()

    def test_unrecognized_deposit_is_other_inflow(self):
        """Test a real but non-whitelisted inflow."""
        txn = make_txn("Venmo cashout", 5000)
        self.assertFalse(self.detector.is_baseline_income(txn))
        self.assertTrue(self.detector.is_other_inflow(txn))

    def test_classify_inflow_labels(self):
        """Test the diagnostic label for each branch."""
        self.assertEqual(self.detector.classify_inflow(make_txn("Coffee", -450)),
                         IncomeDetector.NOT_INFLOW)
        self.assertEqual(self.detector.classify_inflow(make_txn("Refund from Amazon", 5000)),
                         IncomeDetector.REFUND)
        self.assertEqual(self.detector.classify_inflow(make_txn("Online Transfer from Savings", 5000)),
                         IncomeDetector.TRANSFER)
        self.assertEqual(self.detector.classify_inflow(make_txn("Mastercard Stipend", 40000)),
                         IncomeDetector.BASELINE_INCOME)
        self.assertEqual(self.detector.classify_inflow(make_txn("Venmo cashout", 5000)),
                         IncomeDetector.OTHER_INFLOW)


class TestIncomeWhitelist(unittest.TestCase):
    """Test cases for custom whitelists."""

    def test_custom_names(self):
        """Test an explicit whitelist replaces the configured one."""
        detector = IncomeDetector(whitelist=IncomeWhitelist.from_values(["Acme Payroll"], []))
        self.assertTrue(detector.is_baseline_income(make_txn("ACME PAYROLL DEP", 200000)))
        self.assertFalse(detector.is_baseline_income(make_txn("Cozy Earth", 200000)))

    def test_blank_names_ignored(self):
        """Test blank whitelist names never match everything."""
        whitelist = IncomeWhitelist.from_values(["", "   ", "Acme"], None)
        self.assertEqual(whitelist.names, frozenset(["Acme"]))
        self.assertEqual(whitelist.categories, frozenset())

    def test_from_config(self):
        """Test building from a config-shaped dict."""
        whitelist = IncomeWhitelist.from_config({"names": ["Acme"], "categories": ["Salary"]})
        detector = IncomeDetector(whitelist=whitelist)
        self.assertTrue(detector.is_baseline_income(make_txn("Globex", 1000, category_sub="Salary")))

    def test_empty_whitelist_has_no_income(self):
        """Test nothing is baseline income with an empty whitelist."""
        detector = IncomeDetector(whitelist=IncomeWhitelist())
        txn = make_txn("Cozy Earth", 200000)
        self.assertFalse(detector.is_baseline_income(txn))
        self.assertTrue(detector.is_other_inflow(txn))


if __name__ == "__main__":
    unittest.main()
