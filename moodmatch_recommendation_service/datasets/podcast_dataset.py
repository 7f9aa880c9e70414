"""Seed podcast catalog (ratings 0-5) and user ratings"""

PODCAST_DATASET = [
    {"id": "pod_001", "title": "The Daily Chuckle", "host": "Maya Torres",
     "categories": ["Comedy", "Entertainment"], "rating": 4.3, "language": "en", "episodes": 210,
     "description": "Two comedians riff on the week's strangest headlines."},
    {"id": "pod_002", "title": "Neighborhood Notes", "host": "Sam Okafor",
     "categories": ["Society", "Comedy"], "rating": 4.0, "language": "en", "episodes": 96,
     "description": "Funny and warm conversations about community life and local characters."},
    {"id": "pod_003", "title": "Letters Never Sent", "host": "Claire Holm",
     "categories": ["Story", "Personal"], "rating": 4.7, "language": "en", "episodes": 64,
     "description": "Listeners read the letters they never mailed, about loss, love and goodbye."},
    {"id": "pod_004", "title": "Cold Trail", "host": "Derek Vance",
     "categories": ["Documentary", "Story"], "rating": 4.6, "language": "en", "episodes": 40,
     "description": "A documentary series reopening forgotten cases and the families left behind."},
    {"id": "pod_005", "title": "Founders Unfiltered", "host": "Priya Raman",
     "categories": ["Business", "Interview"], "rating": 4.4, "language": "en", "episodes": 180,
     "description": "Candid interviews with startup founders about the hardest years of building a company."},
    {"id": "pod_006", "title": "Morning Wire Brief", "host": "Alex Chen",
     "categories": ["News"], "rating": 4.1, "language": "en", "episodes": 900,
     "description": "A fast daily briefing on the news that matters before work."},
    {"id": "pod_007", "title": "Slow Studio", "host": "Ines Marlow",
     "categories": ["Arts", "Design"], "rating": 4.2, "language": "en", "episodes": 75,
     "description": "Unhurried studio visits with painters, potters and designers."},
    {"id": "pod_008", "title": "Curious Minds", "host": "Ben Adler",
     "categories": ["Science", "Education"], "rating": 4.8, "language": "en", "episodes": 320,
     "description": "Scientists explain one big idea per episode, from black holes to gut bacteria."},
    {"id": "pod_009", "title": "Code and Coffee", "host": "Alex Chen",
     "categories": ["Technology", "Education"], "rating": 4.3, "language": "en", "episodes": 150,
     "description": "Software engineers talk tools, careers and the craft of programming."},
    {"id": "pod_010", "title": "Inner Weather", "host": "Dr. Lena Brooks",
     "categories": ["Psychology", "Society"], "rating": 4.5, "language": "en", "episodes": 110,
     "description": "A psychologist explores habits, emotions and why people think the way they do."},
    {"id": "pod_011", "title": "Small Hours", "host": "Claire Holm",
     "categories": ["Personal", "Arts"], "rating": 4.4, "language": "en", "episodes": 52,
     "description": "Late-night personal essays and poems read over soft piano."},
    {"id": "pod_012", "title": "Lab Notes", "host": "Ben Adler",
     "categories": ["Science", "Technology"], "rating": 4.6, "language": "en", "episodes": 88,
     "description": "Behind the scenes of research labs and the experiments that failed first."},
]

PODCAST_RATINGS = [
    {"userId": "user1", "podcastId": "pod_001", "rating": 5, "timestamp": 1000},
    {"userId": "user1", "podcastId": "pod_002", "rating": 4, "timestamp": 1001},
    {"userId": "user1", "podcastId": "pod_006", "rating": 3.5, "timestamp": 1002},
    {"userId": "user1", "podcastId": "pod_009", "rating": 4.5, "timestamp": 1003},
    {"userId": "user2", "podcastId": "pod_003", "rating": 5, "timestamp": 2000},
    {"userId": "user2", "podcastId": "pod_004", "rating": 4.5, "timestamp": 2001},
    {"userId": "user2", "podcastId": "pod_011", "rating": 4.5, "timestamp": 2002},
    {"userId": "user2", "podcastId": "pod_010", "rating": 4, "timestamp": 2003},
    {"userId": "user3", "podcastId": "pod_008", "rating": 5, "timestamp": 3000},
    {"userId": "user3", "podcastId": "pod_012", "rating": 4.5, "timestamp": 3001},
    {"userId": "user3", "podcastId": "pod_009", "rating": 4, "timestamp": 3002},
    {"userId": "user3", "podcastId": "pod_005", "rating": 3.5, "timestamp": 3003},
]
