"""
Query the hybrid recommenders over the bundled seed catalogs.

Usage:
    python scripts/recommend.py --domain movies --user user1 --mood happy
    python scripts/recommend.py --domain podcasts --user user2 --seen pod_003,pod_004 --top-k 5
"""

import sys
from pathlib import Path

# Add parent directory to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import argparse
import json
import logging

from moodmatch_recommendation_service.config import get_log_level
from moodmatch_recommendation_service.models import MoodProfile
from moodmatch_recommendation_service.policies import POLICIES
from moodmatch_recommendation_service.services import RecommendationService

# Configure logging
logging.basicConfig(
    level=get_log_level(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main execution function."""
    parser = argparse.ArgumentParser(description="Get mood-based hybrid recommendations")
    parser.add_argument("--domain", choices=sorted(POLICIES), default="movies", help="Content domain")
    parser.add_argument("--user", type=str, required=True, help="User ID")
    parser.add_argument("--mood", type=str, default=None, help="Mood key (e.g. happy, sad, relaxed)")
    parser.add_argument(
        "--confidence", type=float, default=100.0, help="Mood confidence 0-100 (default: 100)"
    )
    parser.add_argument(
        "--seen", type=str, default="", help="Comma-separated item IDs to exclude"
    )
    parser.add_argument("--top-k", type=int, default=10, help="Number of results (default: 10)")
    parser.add_argument(
        "--scale", type=int, default=100, help="Report scores as integers 0-SCALE (default: 100)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for MF training")

    args = parser.parse_args(argv)

    seen = [item_id.strip() for item_id in args.seen.split(",") if item_id.strip()]
    mood = MoodProfile(primary=args.mood, confidence=args.confidence) if args.mood else None

    try:
        service = RecommendationService.from_seed_data(random_state=args.seed)
        results = service.recommend(
            args.domain,
            args.user,
            mood=mood,
            seen_item_ids=seen,
            top_k=args.top_k,
            scale=args.scale
        )

        logger.info(f"✓ {len(results)} {args.domain} recommendations for {args.user}")
        print(json.dumps(results, indent=2))
        return results

    except Exception as e:
        logger.error(f"Error getting recommendations: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
