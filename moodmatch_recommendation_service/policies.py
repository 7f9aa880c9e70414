"""Per-domain recommendation policies.

A DomainPolicy carries everything that differs between the movie, music and
podcast recommenders: the mood -> tag table, which item attributes feed the
metadata similarity and how they are weighted, and the metadata/text blend.
The filters and the hybrid recommender are otherwise identical across domains.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

TAGS = "tags"            # Jaccard overlap of tag sets
LABEL = "label"          # 1 when both items carry the same non-empty value
RELATED = "related"      # 1 when the second value is in the first value's related list
CLOSENESS = "closeness"  # 1 - |a - b| / scale


@dataclass(frozen=True)
class SimilarityComponent:
    """One weighted term of the metadata similarity."""

    name: str
    kind: str
    attribute: Callable[[Any], Any]
    weight: float
    scale: float = 1.0
    related: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class DomainPolicy:
    """Numeric weights and predicates for one content domain."""

    name: str
    content_type: str
    mood_table: Mapping[str, Tuple[str, ...]]
    mood_tags: Callable[[Any], Iterable[str]]
    components: Tuple[SimilarityComponent, ...]
    default_mood: Optional[str] = None
    metadata_weight: float = 0.7
    text_weight: float = 0.3
    rating_max: float = 5.0

    def target_tags(self, mood: str) -> Tuple[str, ...]:
        """
        Tags that satisfy a mood.

        Unknown moods map to the default mood's entry; without a default
        the mood itself is the only target.
        """
        mood = (mood or "").lower()
        if mood in self.mood_table:
            return tuple(self.mood_table[mood])
        if self.default_mood is not None:
            return tuple(self.mood_table[self.default_mood])
        return (mood,)


# ===== MOVIES =====

MOVIE_MOOD_GENRES: Dict[str, Tuple[str, ...]] = {
    "happy": ("Comedy", "Family"),
    "sad": ("Drama", "Horror"),
    "excited": ("Action", "Adventure", "Animation"),
    "energetic": ("Action", "Crime"),
    "relaxed": ("Horror", "Music"),
    "romantic": ("Romance",),
    "focused": ("Drama", "Crime"),
    "thoughtful": ("Drama", "Sci-Fi"),
    "angry": ("Action", "Thriller"),
    "peaceful": ("Family", "Animation"),
    "neutral": ("Comedy", "Drama", "Romance"),
}

MOVIE_POLICY = DomainPolicy(
    name="movies",
    content_type="movie",
    mood_table=MOVIE_MOOD_GENRES,
    mood_tags=lambda movie: movie.genres,
    default_mood="neutral",
    components=(
        SimilarityComponent("genre", TAGS, lambda movie: movie.genres, 0.5),
        SimilarityComponent("cast", TAGS, lambda movie: movie.cast, 0.3),
        SimilarityComponent("director", LABEL, lambda movie: movie.director, 0.2),
    ),
)

# ===== MUSIC =====

MUSIC_RELATED_MOODS: Dict[str, Tuple[str, ...]] = {
    "happy": ("happy", "energetic"),
    "sad": ("sad", "thoughtful"),
    "energetic": ("energetic", "happy"),
    "relaxed": ("relaxed", "romantic"),
    "romantic": ("romantic", "relaxed"),
    "thoughtful": ("thoughtful", "sad"),
}

MUSIC_MOOD_TABLE: Dict[str, Tuple[str, ...]] = {
    **MUSIC_RELATED_MOODS,
    "focused": ("relaxed", "thoughtful"),
}

MUSIC_POLICY = DomainPolicy(
    name="music",
    content_type="song",
    mood_table=MUSIC_MOOD_TABLE,
    mood_tags=lambda song: (song.mood,) if song.mood else (),
    components=(
        SimilarityComponent("genre", TAGS, lambda song: song.genres, 0.35),
        SimilarityComponent("mood", RELATED, lambda song: song.mood, 0.3, related=MUSIC_RELATED_MOODS),
        SimilarityComponent("energy", CLOSENESS, lambda song: song.energy, 0.2, scale=100.0),
        SimilarityComponent("artist", LABEL, lambda song: song.artist, 0.15),
    ),
    metadata_weight=0.8,
    text_weight=0.2,
)

# ===== PODCASTS =====

PODCAST_MOOD_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "happy": ("Comedy", "Entertainment", "Society"),
    "sad": ("Story", "Personal", "Documentary"),
    "energetic": ("Interview", "Business", "News"),
    "relaxed": ("Arts", "Design", "Education"),
    "focused": ("Science", "Education", "Technology"),
    "romantic": ("Story", "Arts", "Personal"),
    "thoughtful": ("Psychology", "Science", "Society"),
}

PODCAST_POLICY = DomainPolicy(
    name="podcasts",
    content_type="podcast",
    mood_table=PODCAST_MOOD_CATEGORIES,
    mood_tags=lambda podcast: podcast.categories,
    default_mood="relaxed",
    components=(
        SimilarityComponent("category", TAGS, lambda podcast: podcast.categories, 0.6),
        SimilarityComponent("host", LABEL, lambda podcast: podcast.host, 0.25),
        SimilarityComponent("rating", CLOSENESS, lambda podcast: podcast.rating, 0.15, scale=5.0),
    ),
)

POLICIES: Dict[str, DomainPolicy] = {
    policy.name: policy
    for policy in (MOVIE_POLICY, MUSIC_POLICY, PODCAST_POLICY)
}


def get_policy(domain: str) -> DomainPolicy:
    """
    Look up a policy by domain name.

    Raises:
        ValueError: If the domain is unknown
    """
    try:
        return POLICIES[domain]
    except KeyError:
        raise ValueError(f"Unknown domain '{domain}', expected one of {sorted(POLICIES)}") from None
