"""
Baseline Batch Processor for computing budget baselines over many users.
Each JSON file holds one user's transaction history; failures are recorded
per file and never stop the batch.
"""

import json
import logging
import os
from typing import Dict, List, Optional, Tuple, Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
import traceback

from baseline_engine.models import Transaction
from baseline_engine.baseline import (
    BaselineCalculator,
    BudgetBaseline,
    DateRange,
    InMemoryTransactionStore,
)
from baseline_engine.income import IncomeDetector, IncomeWhitelist

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class InvalidJsonStructureError(Exception):
    """Raised when JSON structure cannot be normalized to a transaction list."""
    pass


@dataclass
class ProcessingError:
    """Details of a processing error."""
    file_name: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class UserBaselineResult:
    """Baseline computed for one input file."""
    user_id: str
    baseline: BudgetBaseline
    window: DateRange
    transaction_count: int


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_files: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.successful / self.total_files) * 100


@dataclass
class BatchResult:
    """Complete result of batch processing."""
    stats: BatchStats
    results: List[UserBaselineResult]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)


class BaselineBatchProcessor:
    """Batch processor for per-user transaction files."""

    def __init__(
        self,
        as_of: Optional[date] = None,
        income_whitelist: Optional[IncomeWhitelist] = None,
        calculator: Optional[BaselineCalculator] = None
    ):
        """
        Initialize the batch processor.

        Args:
            as_of: Reference date for every file's trailing window.
                   If not provided, each file's latest transaction date is used.
            income_whitelist: Whitelist for income detection (default: configured whitelist)
            calculator: Pre-built calculator whose classifiers, windows and config are
                reused; it is never modified
        """
        self.as_of = as_of
        self.calculator = calculator or BaselineCalculator(
            income_detector=IncomeDetector(whitelist=income_whitelist)
        )

        if as_of is not None:
            logger.info(f"Initialized batch processor: as_of={as_of} (fixed reference date)")
        else:
            logger.info("Initialized batch processor: as_of=latest transaction date per file")

    def process_batch(
        self,
        files: List[Tuple[str, bytes]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Process a batch of transaction files.

        Args:
            files: List of (filename, content) tuples
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        stats = BatchStats(
            total_files=len(files),
            start_time=datetime.now()
        )

        results = []
        errors = []
        error_types = {}

        logger.info(f"Starting batch processing of {len(files)} files")

        for idx, (filename, content) in enumerate(files):
            error_type = None
            message = None
            try:
                if progress_callback:
                    progress_callback(idx + 1, len(files), f"Processing: {filename}")

                logger.debug(f"Processing file {idx + 1}/{len(files)}: {filename}")

                results.append(self._process_single_file(filename, content))
                stats.processed += 1
                stats.successful += 1

            except json.JSONDecodeError as e:
                error_type = "JSON_PARSE_ERROR"
                message = f"Invalid JSON: {str(e)}"
                logger.error(f"JSON parse error in {filename}: {e}")

            except InvalidJsonStructureError as e:
                error_type = "INVALID_JSON_STRUCTURE"
                message = str(e)
                logger.error(f"Invalid JSON structure in {filename}: {e}")

            except ValueError as e:
                error_type = "DATA_VALIDATION_ERROR"
                message = str(e)
                logger.error(f"Data validation error in {filename}: {e}")

            except Exception as e:
                error_type = "PROCESSING_ERROR"
                message = f"{type(e).__name__}: {str(e)}"
                logger.error(f"Processing error in {filename}: {traceback.format_exc()}")

            if error_type is not None:
                errors.append(ProcessingError(
                    file_name=filename,
                    error_type=error_type,
                    error_message=message
                ))
                stats.failed += 1
                stats.processed += 1
                error_types[error_type] = error_types.get(error_type, 0) + 1

        stats.end_time = datetime.now()

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_files} successful, "
            f"time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types
        )

    def _process_single_file(self, filename: str, content: bytes) -> UserBaselineResult:
        """Compute the baseline for a single user file."""
        # Parse JSON with fallback encoding handling
        try:
            data = json.loads(content.decode("utf-8"))
        except UnicodeDecodeError:
            try:
                data = json.loads(content.decode("cp1252"))
            except UnicodeDecodeError:
                # latin-1 accepts all byte values
                data = json.loads(content.decode("latin-1"))

        raw_transactions = self._normalize_json_structure(data, filename)
        transactions = [Transaction.from_dict(txn) for txn in raw_transactions]

        user_id = Path(filename).stem
        today = self.as_of or max(t.date for t in transactions)

        calculator = self._calculator_for(InMemoryTransactionStore({user_id: transactions}))
        window = calculator.date_windows.last_n_months(calculator.lookback_months, today=today)
        baseline = calculator.calculate_baseline(user_id, today=today)

        return UserBaselineResult(
            user_id=user_id,
            baseline=baseline,
            window=window,
            transaction_count=sum(1 for t in transactions if window.contains(t.date))
        )

    def _calculator_for(self, store: InMemoryTransactionStore) -> BaselineCalculator:
        """Per-file calculator sharing the configured components."""
        base = self.calculator
        return BaselineCalculator(
            transaction_store=store,
            income_detector=base.income_detector,
            transfer_classifier=base.transfer_classifier,
            refund_classifier=base.refund_classifier,
            date_windows=base.date_windows,
            config=base.config
        )

    def _normalize_json_structure(self, data, filename: str) -> List[Dict]:
        """
        Normalize supported JSON layouts to a list of transaction dicts.

        Handles:
        - Root-level list of transactions
        - Dictionary with a 'transactions' key

        Raises:
            InvalidJsonStructureError: If structure cannot be normalized
        """
        if isinstance(data, dict):
            if "transactions" not in data:
                raise InvalidJsonStructureError(
                    f"No 'transactions' key in {filename}. "
                    f"Found keys: {sorted(data.keys())}"
                )
            transactions = data["transactions"]
        elif isinstance(data, list):
            transactions = data
        else:
            raise InvalidJsonStructureError(
                f"Unexpected JSON root type in {filename}: {type(data).__name__}. "
                f"Expected dict or list."
            )

        if not isinstance(transactions, list):
            raise InvalidJsonStructureError(
                f"'transactions' in {filename} is {type(transactions).__name__}, expected list"
            )
        if not transactions:
            raise ValueError("No transactions found in file")

        logger.debug(f"{filename}: found {len(transactions)} transactions")
        return transactions

    def load_files_from_directory(self, directory: str) -> List[Tuple[str, bytes]]:
        """
        Load every .json file in a directory, sorted by name.

        Args:
            directory: Path to the folder of per-user files

        Returns:
            List of (filename, content) tuples
        """
        if not os.path.isdir(directory):
            raise FileNotFoundError(f"Input directory not found: {directory}")

        all_files = []
        for path in sorted(Path(directory).iterdir()):
            if path.is_file() and path.suffix.lower() == ".json":
                all_files.append((path.name, path.read_bytes()))
            else:
                logger.warning(f"Skipping unsupported file: {path.name}")

        logger.info(f"Total files loaded: {len(all_files)}")
        return all_files

    def results_to_dataframe(self, results: List[UserBaselineResult]):
        """
        Convert baseline results to a pandas DataFrame, one row per user and category.

        Users with no expense categories still get one row with an empty category.

        Args:
            results: List of UserBaselineResult objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for result in results:
            baseline = result.baseline
            base_row = {
                "User ID": result.user_id,
                "Window Start": result.window.start.isoformat(),
                "Window End": result.window.end.isoformat(),
                "Transactions": result.transaction_count,
                "Monthly Income (cents)": baseline.monthly_income_cents,
                "Total Monthly Expenses (cents)": baseline.total_monthly_expenses_cents,
                "Paycheck Cadence": baseline.paycheck_cadence.value,
            }

            categories = sorted(baseline.monthly_expenses_by_category.items())
            if not categories:
                rows.append({**base_row, "Category": "", "Monthly Amount (cents)": 0, "Confidence": ""})
                continue

            for category, amount in categories:
                rows.append({
                    **base_row,
                    "Category": category,
                    "Monthly Amount (cents)": amount,
                    "Confidence": baseline.category_confidence_scores[category].value,
                })

        return pd.DataFrame(rows)

    def errors_to_dataframe(self, errors: List[ProcessingError]):
        """
        Convert processing errors to a pandas DataFrame.

        Args:
            errors: List of ProcessingError objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for error in errors:
            row = {
                "File Name": error.file_name,
                "Error Type": error.error_type,
                "Error Message": error.error_message,
                "Timestamp": error.timestamp,
            }
            rows.append(row)

        return pd.DataFrame(rows)
