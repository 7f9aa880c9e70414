"""Per-query hybrid score record"""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class HybridScore:
    """Blended score of one item. All scores are in [0, 1]."""

    item_id: str
    title: str
    content_score: float
    collaborative_score: float
    hybrid_score: float

    def to_dict(self, scale: Optional[int] = None) -> Dict:
        """
        Convert to a plain dict.

        Args:
            scale: When given (e.g. 100), scores are rescaled and rounded to ints

        Returns:
            Dict with item_id, title and the three scores
        """
        scores = {
            'content_score': self.content_score,
            'collaborative_score': self.collaborative_score,
            'hybrid_score': self.hybrid_score,
        }
        if scale is not None:
            scores = {key: int(round(value * scale)) for key, value in scores.items()}

        return {'item_id': self.item_id, 'title': self.title, **scores}
