"""Seed song catalog (ratings 0-5) and user ratings"""

MUSIC_DATASET = [
    {"id": "song_001", "title": "Happy", "artist": "Pharrell Williams", "album": "G I R L",
     "genres": ["Pop", "Soul"], "mood": "happy", "energy": 85, "rating": 4.5,
     "release_year": 2013, "duration": 233,
     "description": "Upbeat feel-good anthem with handclaps and a bouncing groove."},
    {"id": "song_002", "title": "Walking on Sunshine", "artist": "Katrina and the Waves",
     "album": "Walking on Sunshine", "genres": ["Pop", "Rock"], "mood": "happy", "energy": 88,
     "rating": 4.3, "release_year": 1985, "duration": 239,
     "description": "Bright horns and an exuberant vocal about falling in love."},
    {"id": "song_003", "title": "Someone Like You", "artist": "Adele", "album": "21",
     "genres": ["Pop", "Soul"], "mood": "sad", "energy": 25, "rating": 4.7,
     "release_year": 2011, "duration": 285,
     "description": "Piano ballad about heartbreak and accepting the end of a relationship."},
    {"id": "song_004", "title": "Hurt", "artist": "Johnny Cash", "album": "American IV",
     "genres": ["Country", "Folk"], "mood": "sad", "energy": 20, "rating": 4.8,
     "release_year": 2002, "duration": 218,
     "description": "Stark acoustic reflection on regret, memory and mortality."},
    {"id": "song_005", "title": "Lose Yourself", "artist": "Eminem", "album": "8 Mile",
     "genres": ["Hip-Hop"], "mood": "energetic", "energy": 92, "rating": 4.8,
     "release_year": 2002, "duration": 326,
     "description": "Driving rap anthem about seizing a single shot at success."},
    {"id": "song_006", "title": "Till I Collapse", "artist": "Eminem", "album": "The Eminem Show",
     "genres": ["Hip-Hop"], "mood": "energetic", "energy": 95, "rating": 4.6,
     "release_year": 2002, "duration": 297,
     "description": "Stomping workout track about pushing past exhaustion."},
    {"id": "song_007", "title": "Weightless", "artist": "Marconi Union", "album": "Weightless",
     "genres": ["Ambient", "Electronic"], "mood": "relaxed", "energy": 10, "rating": 4.2,
     "release_year": 2011, "duration": 480,
     "description": "Slow ambient soundscape designed to calm and lower the heart rate."},
    {"id": "song_008", "title": "Holocene", "artist": "Bon Iver", "album": "Bon Iver",
     "genres": ["Indie", "Folk"], "mood": "relaxed", "energy": 30, "rating": 4.5,
     "release_year": 2011, "duration": 337,
     "description": "Gentle layered folk about feeling small against a vast winter landscape."},
    {"id": "song_009", "title": "At Last", "artist": "Etta James", "album": "At Last!",
     "genres": ["Soul", "Jazz"], "mood": "romantic", "energy": 35, "rating": 4.8,
     "release_year": 1960, "duration": 182,
     "description": "Lush string arrangement and a soaring vocal celebrating love found."},
    {"id": "song_010", "title": "Thinking Out Loud", "artist": "Ed Sheeran", "album": "x",
     "genres": ["Pop", "Soul"], "mood": "romantic", "energy": 45, "rating": 4.4,
     "release_year": 2014, "duration": 281,
     "description": "Slow-dance love song about growing old together."},
    {"id": "song_011", "title": "Bohemian Rhapsody", "artist": "Queen", "album": "A Night at the Opera",
     "genres": ["Rock"], "mood": "thoughtful", "energy": 70, "rating": 4.9,
     "release_year": 1975, "duration": 355,
     "description": "Operatic rock suite moving from ballad to hard rock to reflection."},
    {"id": "song_012", "title": "The Sound of Silence", "artist": "Simon & Garfunkel",
     "album": "Sounds of Silence", "genres": ["Folk", "Rock"], "mood": "thoughtful", "energy": 30,
     "rating": 4.6, "release_year": 1965, "duration": 185,
     "description": "Quiet meditation on isolation and the failure to communicate."},
]

MUSIC_RATINGS = [
    {"userId": "user1", "songId": "song_001", "rating": 5, "timestamp": 1000},
    {"userId": "user1", "songId": "song_002", "rating": 4.5, "timestamp": 1001},
    {"userId": "user1", "songId": "song_005", "rating": 4, "timestamp": 1002},
    {"userId": "user1", "songId": "song_010", "rating": 3.5, "timestamp": 1003},
    {"userId": "user2", "songId": "song_003", "rating": 5, "timestamp": 2000},
    {"userId": "user2", "songId": "song_004", "rating": 4.5, "timestamp": 2001},
    {"userId": "user2", "songId": "song_012", "rating": 4.5, "timestamp": 2002},
    {"userId": "user2", "songId": "song_008", "rating": 4, "timestamp": 2003},
    {"userId": "user3", "songId": "song_005", "rating": 5, "timestamp": 3000},
    {"userId": "user3", "songId": "song_006", "rating": 5, "timestamp": 3001},
    {"userId": "user3", "songId": "song_001", "rating": 4, "timestamp": 3002},
    {"userId": "user3", "songId": "song_011", "rating": 4.5, "timestamp": 3003},
]
