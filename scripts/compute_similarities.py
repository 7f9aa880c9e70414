"""
Build the content similarity matrices for the seed catalogs and report
their statistics.
"""

import sys
from pathlib import Path

# Add parent directory to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import argparse
import logging

import numpy as np

from moodmatch_recommendation_service.config import get_log_level
from moodmatch_recommendation_service.datasets import SEED_DATA
from moodmatch_recommendation_service.policies import POLICIES, get_policy
from moodmatch_recommendation_service.services import CatalogDataLoader, ContentSimilarityFilter

# Configure logging
logging.basicConfig(
    level=get_log_level(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def compute_similarities(domain: str) -> dict:
    """
    Build every similarity matrix for one domain's seed catalog.

    Args:
        domain: movies, music or podcasts

    Returns:
        Dictionary of similarity matrices in catalog order
    """
    logger.info("=" * 70)
    logger.info(f"COMPUTING {domain.upper()} SIMILARITIES")
    logger.info("=" * 70)

    policy = get_policy(domain)
    items = CatalogDataLoader().load_items(domain, SEED_DATA[domain][0])

    content_filter = ContentSimilarityFilter(policy)
    content_filter.load_catalog(items)

    return content_filter.get_similarity_matrices()


def similarity_statistics(domain: str, similarities: dict) -> dict:
    """
    Log and return statistics for each similarity matrix.

    Returns:
        Dictionary of matrix name -> statistics
    """
    computer = ContentSimilarityFilter(get_policy(domain)).similarity_computer

    logger.info("\n" + "=" * 70)
    logger.info(f"{domain.upper()} SIMILARITY STATISTICS")
    logger.info("=" * 70)

    all_stats = {}
    for sim_name, matrix in similarities.items():
        stats = computer.get_similarity_statistics(matrix)
        all_stats[sim_name] = stats

        logger.info(f"\n{sim_name}:")
        logger.info(f"  Mean: {stats['mean']:.4f}")
        logger.info(f"  Std:  {stats['std']:.4f}")
        logger.info(f"  Min:  {stats['min']:.4f}")
        logger.info(f"  Max:  {stats['max']:.4f}")
        logger.info(f"  Median: {stats['median']:.4f}")

    return all_stats


def save_similarities(similarities: dict, output_dir: Path, domain: str):
    """
    Save similarity matrices as .npy files named <domain>_<matrix>.npy.

    Args:
        similarities: Dictionary with similarity matrices
        output_dir: Output directory
        domain: Domain name used as file prefix
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    for name, matrix in similarities.items():
        output_path = output_dir / f"{domain}_{name}.npy"
        np.save(output_path, matrix)
        logger.info(f"✓ Saved {output_path.name}")


def main(argv=None):
    """Main execution function."""
    parser = argparse.ArgumentParser(
        description="Compute content similarity matrices for the seed catalogs"
    )
    parser.add_argument(
        "--domain",
        choices=sorted(POLICIES) + ["all"],
        default="all",
        help="Domain to compute (default: all)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Save matrices as .npy files to this directory (default: don't save)",
    )

    args = parser.parse_args(argv)
    domains = sorted(POLICIES) if args.domain == "all" else [args.domain]

    try:
        results = {}
        for domain in domains:
            similarities = compute_similarities(domain)
            results[domain] = similarity_statistics(domain, similarities)

            if args.output_dir:
                save_similarities(similarities, Path(args.output_dir), domain)

        logger.info("\n" + "=" * 70)
        logger.info("✓ SIMILARITY COMPUTATION COMPLETE")
        logger.info("=" * 70)

        return results

    except Exception as e:
        logger.error(f"Error during similarity computation: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
