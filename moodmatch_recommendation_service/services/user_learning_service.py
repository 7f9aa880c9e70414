"""Service that learns preferences from like/dislike/comment feedback"""
from collections import Counter
from datetime import UTC, datetime, timedelta
from typing import Dict, Iterable, List, Optional
import logging
import uuid

from moodmatch_recommendation_service.models import FeedbackRecord
from moodmatch_recommendation_service.models.feedback_record import CONTENT_TYPES, FEEDBACK_TYPES
from moodmatch_recommendation_service.repos import FeedbackRepository

logger = logging.getLogger(__name__)

FEEDBACK_WEIGHTS = {
    "like": 1.0,
    "dislike": -0.5,
    "comment": 0.3,
}

RECENT_WINDOW = timedelta(days=7)


def generate_session_id(now: Optional[datetime] = None) -> str:
    """Session identifier of the form session_<epoch ms>_<random suffix>."""
    now = now or datetime.now(UTC)
    return f"session_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:9]}"


class UserLearningService:
    """
    Accumulate feedback for one session and turn it into a 0-100
    personalization score.

    Liked tags add the feedback weight to favorite_tags; disliked tags add
    its magnitude to disliked_tags. Artists (songs) and hosts (podcasts)
    accumulate the signed weight.
    """

    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id or generate_session_id()
        self.feedback = FeedbackRepository()

        self.favorite_tags: Counter = Counter()
        self.disliked_tags: Counter = Counter()
        self.favorite_artists: Counter = Counter()
        self.favorite_hosts: Counter = Counter()
        self.mood_preferences: Dict[str, List[str]] = {}
        self.engagement_score = 0.0
        self.last_updated = datetime.now(UTC)

    def record_feedback(
        self,
        item_id: str,
        item_title: str,
        feedback_type: str,
        content_type: str,
        mood: str,
        energy: float = 50.0,
        intensity: float = 50.0,
        tags: Iterable[str] = (),
        creator: Optional[str] = None,
        rating: Optional[float] = None,
        comment: Optional[str] = None,
        timestamp: Optional[datetime] = None
    ) -> FeedbackRecord:
        """
        Record one piece of feedback and update the learned preferences.

        Args:
            item_id: Item the feedback is about
            item_title: Item title
            feedback_type: like, dislike or comment
            content_type: movie, song or podcast
            mood: Mood the user was in
            energy: Mood energy (0-100)
            intensity: Mood intensity (0-100)
            tags: Item genres or categories
            creator: Artist (songs) or host (podcasts)
            rating: Optional explicit rating
            comment: Optional comment text
            timestamp: Feedback time (default: now)

        Returns:
            The stored FeedbackRecord

        Raises:
            ValueError: If feedback_type or content_type is unknown
        """
        if feedback_type not in FEEDBACK_TYPES:
            raise ValueError(f"Invalid feedback type '{feedback_type}', expected one of {FEEDBACK_TYPES}")
        if content_type not in CONTENT_TYPES:
            raise ValueError(f"Invalid content type '{content_type}', expected one of {CONTENT_TYPES}")

        record = FeedbackRecord(
            item_id=item_id,
            item_title=item_title,
            type=feedback_type,
            content_type=content_type,
            mood=mood,
            session_id=self.session_id,
            energy=energy,
            intensity=intensity,
            tags=tuple(tags),
            creator=creator,
            rating=rating,
            comment=comment,
            timestamp=timestamp or datetime.now(UTC),
        )

        self.feedback.store_feedback(record)
        self._update_preferences(record)

        logger.debug(f"Recorded {feedback_type} for {content_type} {item_id} (mood: {mood})")
        return record

    def _update_preferences(self, record: FeedbackRecord) -> None:
        weight = FEEDBACK_WEIGHTS[record.type]

        self.engagement_score = min(max(self.engagement_score + weight, 0.0), 100.0)

        for tag in record.tags:
            if weight > 0:
                self.favorite_tags[tag] += weight
            else:
                self.disliked_tags[tag] += abs(weight)

        if record.creator:
            if record.content_type == "song":
                self.favorite_artists[record.creator] += weight
            elif record.content_type == "podcast":
                self.favorite_hosts[record.creator] += weight

        content_types = self.mood_preferences.setdefault(record.mood, [])
        if record.content_type not in content_types:
            content_types.append(record.content_type)

        self.last_updated = datetime.now(UTC)

    def calculate_recommendation_score(
        self,
        tags: Iterable[str],
        mood: str,
        content_type: str,
        now: Optional[datetime] = None
    ) -> float:
        """
        Personalization score of an item for the current session.

        Starts at 50, then:
        +20 when the user has given feedback on this content type in this mood,
        +2 per feedback in the last 7 days (max 15),
        +5 x the best favorite-tag score among the item's tags (max 20),
        -3 x the worst disliked-tag score among the item's tags (max 25).

        Returns:
            Score clamped to [0, 100]
        """
        tags = list(tags)
        score = 50.0

        if content_type in self.mood_preferences.get(mood, []):
            score += 20

        recent = len(self.feedback.get_recent_feedback(RECENT_WINDOW, now))
        score += min(recent * 2, 15)

        favorite = max((self.favorite_tags[tag] for tag in tags if tag in self.favorite_tags), default=0.0)
        if favorite > 0:
            score += min(favorite * 5, 20)

        disliked = max((self.disliked_tags[tag] for tag in tags if tag in self.disliked_tags), default=0.0)
        if disliked > 0:
            score -= min(disliked * 3, 25)

        return min(max(score, 0.0), 100.0)

    def get_preferences(self) -> Dict:
        """Current learned preferences."""
        return {
            'favorite_tags': dict(self.favorite_tags),
            'favorite_artists': dict(self.favorite_artists),
            'favorite_hosts': dict(self.favorite_hosts),
            'disliked_tags': dict(self.disliked_tags),
            'mood_preferences': {mood: list(types) for mood, types in self.mood_preferences.items()},
            'engagement_score': self.engagement_score,
        }

    def get_feedback_summary(self) -> Dict:
        """Totals, top five favorite tags and the five latest records."""
        return {
            'total_feedback': self.feedback.count_feedback(),
            'likes': self.feedback.count_by_type("like"),
            'dislikes': self.feedback.count_by_type("dislike"),
            'top_tags': [tag for tag, _ in self.favorite_tags.most_common(5)],
            'recent_activity': self.feedback.get_latest(5),
        }

    def export_learning_data(self) -> Dict:
        """JSON-friendly snapshot of the learned state."""
        return {
            'session_id': self.session_id,
            'preferences': self.get_preferences(),
            'feedback_count': self.feedback.count_feedback(),
            'last_updated': self.last_updated.isoformat(),
        }
