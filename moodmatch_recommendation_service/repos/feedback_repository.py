"""In-memory feedback history."""

from datetime import UTC, datetime, timedelta
from typing import List, Optional

from moodmatch_recommendation_service.models import FeedbackRecord


class FeedbackRepository:
    """Ordered history of feedback records for one process."""

    def __init__(self):
        self._records: List[FeedbackRecord] = []

    def store_feedback(self, record: FeedbackRecord) -> FeedbackRecord:
        """Append a feedback record."""
        self._records.append(record)
        return record

    def get_all_feedback(self) -> List[FeedbackRecord]:
        """Get all feedback, oldest first."""
        return list(self._records)

    def get_recent_feedback(
        self,
        within: timedelta = timedelta(days=7),
        now: Optional[datetime] = None
    ) -> List[FeedbackRecord]:
        """
        Get feedback newer than a cutoff.

        Args:
            within: Window size
            now: Reference time (default: current UTC time)

        Returns:
            Feedback records inside the window
        """
        cutoff = (now or datetime.now(UTC)) - within
        return [r for r in self._records if r.timestamp > cutoff]

    def get_latest(self, n: int = 5) -> List[FeedbackRecord]:
        """Get the n most recent records, oldest first."""
        return self._records[-n:] if n > 0 else []

    def count_by_type(self, feedback_type: str) -> int:
        """Count records of one feedback type."""
        return sum(1 for r in self._records if r.type == feedback_type)

    def count_feedback(self) -> int:
        """Count all feedback records."""
        return len(self._records)
