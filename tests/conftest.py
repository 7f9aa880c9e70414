"""Shared test fixtures and configuration for pytest."""
from typing import Dict, List

import numpy as np
import pytest

from moodmatch_recommendation_service.models import Movie, Podcast, Rating, Song


# ===== Catalog Fixtures =====

@pytest.fixture
def movie_catalog() -> List[Movie]:
    """Five movies m1..m5, quality ratings already on a 0-5 scale."""
    return [
        Movie(
            id="m1",
            title="The Shawshank Redemption",
            genres=("Drama", "Crime"),
            cast=("Tim Robbins", "Morgan Freeman"),
            director="Frank Darabont",
            overview="Two imprisoned men bond over a number of years, finding solace and "
                     "eventual redemption through acts of common decency.",
            rating=4.65,
        ),
        Movie(
            id="m2",
            title="The Godfather",
            genres=("Crime", "Drama"),
            cast=("Marlon Brando", "Al Pacino"),
            director="Francis Ford Coppola",
            overview="The aging patriarch of an organized crime dynasty transfers control of "
                     "his clandestine empire to his reluctant son.",
            rating=4.6,
        ),
        Movie(
            id="m3",
            title="Inception",
            genres=("Action", "Sci-Fi", "Thriller"),
            cast=("Leonardo DiCaprio", "Marion Cotillard"),
            director="Christopher Nolan",
            overview="A thief who steals corporate secrets through the use of dream-sharing "
                     "technology is given the inverse task of planting an idea.",
            rating=4.4,
        ),
        Movie(
            id="m4",
            title="Forrest Gump",
            genres=("Drama", "Romance"),
            cast=("Tom Hanks", "Sally Field"),
            director="Robert Zemeckis",
            overview="The presidencies of Kennedy and Johnson unfold through the perspective "
                     "of an Alabama man with an IQ of 75.",
            rating=4.4,
        ),
        Movie(
            id="m5",
            title="Interstellar",
            genres=("Adventure", "Drama", "Sci-Fi"),
            cast=("Matthew McConaughey", "Anne Hathaway"),
            director="Christopher Nolan",
            overview="A team of explorers travel through a wormhole in space in an attempt "
                     "to ensure humanity's survival.",
            rating=4.3,
        ),
    ]


@pytest.fixture
def podcast_catalog() -> List[Podcast]:
    """Podcasts with overlapping and disjoint categories."""
    return [
        Podcast(id="p1", title="Letters Never Sent", host="Claire Holm",
                categories=("Story", "Personal"), rating=4.0,
                description="Listeners read the letters they never mailed."),
        Podcast(id="p2", title="Cold Trail", host="Derek Vance",
                categories=("Documentary",), rating=4.8,
                description="A documentary series reopening forgotten cases."),
        Podcast(id="p3", title="The Daily Chuckle", host="Maya Torres",
                categories=("Comedy", "Entertainment"), rating=5.0,
                description="Two comedians riff on the week's strangest headlines."),
        Podcast(id="p4", title="Small Hours", host="Claire Holm",
                categories=("Story", "Documentary", "Personal"), rating=3.0,
                description="Late-night personal essays and documentary stories."),
    ]


@pytest.fixture
def song_catalog() -> List[Song]:
    """Songs across several moods and energy levels."""
    return [
        Song(id="s1", title="Happy", artist="Pharrell Williams", genres=("Pop", "Soul"),
             mood="happy", energy=85, rating=4.5,
             description="Upbeat feel-good anthem with handclaps."),
        Song(id="s2", title="Walking on Sunshine", artist="Katrina and the Waves",
             genres=("Pop", "Rock"), mood="happy", energy=88, rating=4.3,
             description="Bright horns and an exuberant vocal."),
        Song(id="s3", title="Someone Like You", artist="Adele", genres=("Pop", "Soul"),
             mood="sad", energy=25, rating=4.7,
             description="Piano ballad about heartbreak."),
        Song(id="s4", title="Lose Yourself", artist="Eminem", genres=("Hip-Hop",),
             mood="energetic", energy=92, rating=4.8,
             description="Driving rap anthem about seizing a single shot."),
        Song(id="s5", title="Weightless", artist="Marconi Union", genres=("Ambient", "Electronic"),
             mood="relaxed", energy=10, rating=4.2,
             description="Slow ambient soundscape designed to calm."),
    ]


# ===== Rating Fixtures =====

def _ratings(rows) -> List[Rating]:
    return [Rating(user_id=u, item_id=i, rating=r, timestamp=float(n)) for n, (u, i, r) in enumerate(rows)]


@pytest.fixture
def user1_ratings() -> List[Rating]:
    """user1 rated m1, m2 and m3."""
    return _ratings([
        ("user1", "m1", 5.0),
        ("user1", "m2", 4.5),
        ("user1", "m3", 4.0),
    ])


@pytest.fixture
def movie_ratings() -> List[Rating]:
    """Nine ratings across three users (stays on the neighbor path)."""
    return _ratings([
        ("user1", "m1", 5.0),
        ("user1", "m2", 4.5),
        ("user1", "m3", 4.0),
        ("user2", "m1", 5.0),
        ("user2", "m4", 5.0),
        ("user2", "m5", 3.5),
        ("user3", "m3", 5.0),
        ("user3", "m5", 4.5),
        ("user3", "m2", 4.0),
    ])


@pytest.fixture
def eleven_ratings(movie_ratings) -> List[Rating]:
    """Eleven ratings across three users (one past the MF threshold)."""
    return movie_ratings + _ratings([
        ("user1", "m4", 3.0),
        ("user3", "m1", 4.0),
    ])


# ===== Feature Fixtures =====

@pytest.fixture
def sample_tag_features() -> np.ndarray:
    """Multi-hot tag matrix for three items."""
    return np.array([
        [1, 1, 0, 0],
        [1, 0, 1, 0],
        [0, 0, 0, 1],
    ], dtype=float)


@pytest.fixture
def sample_records() -> List[Dict]:
    """Raw movie records as they arrive from a dataset."""
    return [
        {
            "id": "tt0111161",
            "title": "The Shawshank Redemption",
            "genres": ["Drama", "Crime"],
            "cast": ["Tim Robbins", "Morgan Freeman"],
            "director": "Frank Darabont",
            "overview": "Two imprisoned men bond over a number of years.",
            "rating": 9.3,
        },
        {
            "id": "tt1375666",
            "title": "Inception",
            "genres": "Action, Sci-Fi, Thriller",
            "director": None,
            "overview": "A thief who steals corporate secrets.",
            "rating": 4.4,
        },
    ]
