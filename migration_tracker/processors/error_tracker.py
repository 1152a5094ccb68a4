"""Error and warning aggregation for imports and commands."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import logging

class ErrorTracker:
    """Count problems by type and keep a few examples of each.

    Row-level problems in a CSV (an unparseable number, a blank customer)
    tend to repeat thousands of times; the tracker keeps the count exact
    and the log short.
    """

    def __init__(self, max_samples: int = 3):
        """Initialize error tracker.

        Args:
            max_samples: Maximum number of samples to store per error type
        """
        self.error_counts: Dict[str, int] = defaultdict(int)
        self.error_samples: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.max_samples = max_samples

    def add_error(self, error_type: str, message: str, context: Optional[Dict] = None) -> None:
        """Record one occurrence of a problem.

        Args:
            error_type: Category of the problem, e.g. ``INVALID_NUMBER``
            message: Human readable description
            context: Optional details such as row number or column
        """
        self.error_counts[error_type] += 1
        if len(self.error_samples[error_type]) < self.max_samples:
            self.error_samples[error_type].append({
                'message': message,
                'context': context or {}
            })

    def has_errors(self) -> bool:
        return bool(self.error_counts)

    def total(self) -> int:
        return sum(self.error_counts.values())

    def get_summary(self) -> Dict:
        """Counts and samples, ready for JSON output."""
        return {
            'counts': dict(self.error_counts),
            'samples': dict(self.error_samples)
        }

    def log_summary(self, logger: logging.Logger) -> None:
        """Log the summary as warnings.

        Args:
            logger: Logger to use for output
        """
        if not self.error_counts:
            return

        logger.warning("Problem summary:")
        for error_type, count in self.error_counts.items():
            logger.warning(f"{error_type} ({count} occurrences):")
            for i, sample in enumerate(self.error_samples[error_type], 1):
                details = ', '.join(f"{key}={value}" for key, value in sample['context'].items())
                logger.warning(f"  Sample {i}: {sample['message']}" + (f" [{details}]" if details else ''))
