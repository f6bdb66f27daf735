"""
Test suite for refund detection.
"""

import unittest
from baseline_engine.categorisation.refund_heuristics import RefundClassifier


class TestRefundClassifier(unittest.TestCase):
    """Test cases for is_refund."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = RefundClassifier()

    def test_refund_positive_amount(self):
        """Test merchant refund on an inflow."""
        self.assertTrue(self.classifier.is_refund("Refund from Amazon", 5000))

    def test_outflow_never_refund(self):
        """Test negative and zero amounts are never refunds."""
        self.assertFalse(self.classifier.is_refund("Refund from Amazon", -5000))
        self.assertFalse(self.classifier.is_refund("Refund from Amazon", 0))

    def test_none_name(self):
        """Test missing name is not a refund."""
        self.assertFalse(self.classifier.is_refund(None, 5000))

    def test_refund_keywords(self):
        """Test each family of refund keywords."""
        for name in ["Target RETURN", "Chargeback 4411", "Cash Back Reward",
                     "Statement credit", "Billing adjustment", "Expense reimbursement",
                     "Mail-in rebate", "Dispute resolved"]:
            self.assertTrue(self.classifier.is_refund(name, 1500), name)

    def test_merchant_return_pattern(self):
        """Test "return to"/"refund from" phrasing."""
        self.assertTrue(self.classifier.is_refund("  return to Best Buy ", 2500))

    def test_ordinary_inflow_not_refund(self):
        """Test deposits without refund signals."""
        self.assertFalse(self.classifier.is_refund("Venmo cashout", 5000))
        self.assertFalse(self.classifier.is_refund("Cozy Earth Dir Dep", 250000))


if __name__ == "__main__":
    unittest.main()
