"""Seed movie catalog (ratings on IMDb's 0-10 scale) and user ratings (0-5)"""

MOVIE_DATASET = [
    {
        "id": "tt0111161",
        "title": "The Shawshank Redemption",
        "genres": ["Drama", "Crime"],
        "cast": ["Tim Robbins", "Morgan Freeman"],
        "director": "Frank Darabont",
        "overview": "Two imprisoned men bond over a number of years, finding solace and eventual "
                    "redemption through acts of common decency.",
        "rating": 9.3,
        "poster_path": "/shawshank.jpg",
    },
    {
        "id": "tt0068646",
        "title": "The Godfather",
        "genres": ["Crime", "Drama"],
        "cast": ["Marlon Brando", "Al Pacino"],
        "director": "Francis Ford Coppola",
        "overview": "The aging patriarch of an organized crime dynasty transfers control of his "
                    "clandestine empire to his reluctant son.",
        "rating": 9.2,
        "poster_path": "/godfather.jpg",
    },
    {
        "id": "tt1375666",
        "title": "Inception",
        "genres": ["Action", "Sci-Fi", "Thriller"],
        "cast": ["Leonardo DiCaprio", "Marion Cotillard"],
        "director": "Christopher Nolan",
        "overview": "A thief who steals corporate secrets through the use of dream-sharing "
                    "technology is given the inverse task of planting an idea.",
        "rating": 8.8,
        "poster_path": "/inception.jpg",
    },
    {
        "id": "tt0109830",
        "title": "Forrest Gump",
        "genres": ["Drama", "Romance"],
        "cast": ["Tom Hanks", "Sally Field"],
        "director": "Robert Zemeckis",
        "overview": "The presidencies of Kennedy and Johnson unfold through the perspective of "
                    "an Alabama man with an IQ of 75.",
        "rating": 8.8,
        "poster_path": "/forrest.jpg",
    },
    {
        "id": "tt0816692",
        "title": "Interstellar",
        "genres": ["Adventure", "Drama", "Sci-Fi"],
        "cast": ["Matthew McConaughey", "Anne Hathaway"],
        "director": "Christopher Nolan",
        "overview": "A team of explorers travel through a wormhole in space in an attempt to "
                    "ensure humanity's survival.",
        "rating": 8.6,
        "poster_path": "/interstellar.jpg",
    },
    {
        "id": "tt0114709",
        "title": "Toy Story",
        "genres": ["Animation", "Family", "Comedy"],
        "cast": ["Tom Hanks", "Tim Allen"],
        "director": "John Lasseter",
        "overview": "A cowboy doll is profoundly threatened and jealous when a new spaceman "
                    "action figure supplants him as top toy in a boy's bedroom.",
        "rating": 8.3,
        "poster_path": "/toystory.jpg",
    },
    {
        "id": "tt0081505",
        "title": "The Shining",
        "genres": ["Horror", "Drama"],
        "cast": ["Jack Nicholson", "Shelley Duvall"],
        "director": "Stanley Kubrick",
        "overview": "A family heads to an isolated hotel for the winter where a sinister "
                    "presence influences the father into violence.",
        "rating": 8.4,
        "poster_path": "/shining.jpg",
    },
    {
        "id": "tt0338013",
        "title": "Eternal Sunshine of the Spotless Mind",
        "genres": ["Drama", "Romance", "Sci-Fi"],
        "cast": ["Jim Carrey", "Kate Winslet"],
        "director": "Michel Gondry",
        "overview": "When their relationship turns sour, a couple undergoes a medical procedure "
                    "to have each other erased from their memories.",
        "rating": 8.3,
        "poster_path": "/eternalsunshine.jpg",
    },
    {
        "id": "tt2582802",
        "title": "Whiplash",
        "genres": ["Drama", "Music"],
        "cast": ["Miles Teller", "J.K. Simmons"],
        "director": "Damien Chazelle",
        "overview": "A promising young drummer enrolls at a cut-throat music conservatory where "
                    "his dreams of greatness are mentored by an instructor who will stop at nothing.",
        "rating": 8.5,
        "poster_path": "/whiplash.jpg",
    },
    {
        "id": "tt0468569",
        "title": "The Dark Knight",
        "genres": ["Action", "Crime", "Drama"],
        "cast": ["Christian Bale", "Heath Ledger"],
        "director": "Christopher Nolan",
        "overview": "When the menace known as the Joker wreaks havoc and chaos on the people of "
                    "Gotham, Batman must accept one of the greatest tests of his ability to fight injustice.",
        "rating": 9.0,
        "poster_path": "/darkknight.jpg",
    },
]

MOVIE_RATINGS = [
    {"userId": "user1", "movieId": "tt0111161", "rating": 5, "timestamp": 1000},
    {"userId": "user1", "movieId": "tt0068646", "rating": 4.5, "timestamp": 1001},
    {"userId": "user1", "movieId": "tt1375666", "rating": 4, "timestamp": 1002},
    {"userId": "user2", "movieId": "tt0111161", "rating": 5, "timestamp": 2000},
    {"userId": "user2", "movieId": "tt0109830", "rating": 5, "timestamp": 2001},
    {"userId": "user2", "movieId": "tt0816692", "rating": 3.5, "timestamp": 2002},
    {"userId": "user3", "movieId": "tt1375666", "rating": 5, "timestamp": 3000},
    {"userId": "user3", "movieId": "tt0816692", "rating": 4.5, "timestamp": 3001},
    {"userId": "user3", "movieId": "tt0068646", "rating": 4, "timestamp": 3002},
]
