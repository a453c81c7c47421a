"""Demo catalog seeded into a fresh store at startup."""

import logging

from tastematch.models import PreferenceProfile
from tastematch.services.catalog import CatalogStore

logger = logging.getLogger(__name__)

DEMO_USER = {
    "username": "demo_user",
    "name": "Jamie Smith",
    "email": "jamie@example.com",
    "subscription": "Premium User",
}

DEMO_PREFERENCES = {
    "energy": 7,
    "acoustics": 4,
    "popularity": 5,
    "mood": 6,
    "instrumental": 3,
    "experimental": 8,
    "genres": ["Indie Pop", "Electronic", "Alt Rock", "Hip Hop"],
}

DEMO_ARTISTS = [
    {
        "name": "Tame Impala",
        "image_url": "https://via.placeholder.com/300?text=Tame+Impala",
        "genres": ["Psychedelic Rock", "Indie Pop"],
        "popularity": 85,
    },
    {
        "name": "MGMT",
        "image_url": "https://via.placeholder.com/300?text=MGMT",
        "genres": ["Indie Pop", "Psychedelic Pop"],
        "popularity": 78,
    },
    {
        "name": "Beach House",
        "image_url": "https://via.placeholder.com/300?text=Beach+House",
        "genres": ["Dream Pop", "Indie Pop"],
        "popularity": 75,
    },
    {
        "name": "Unknown Mortal Orchestra",
        "image_url": "https://via.placeholder.com/300?text=UMO",
        "genres": ["Psychedelic Rock", "Indie Rock"],
        "popularity": 70,
    },
    {
        "name": "Glass Animals",
        "image_url": "https://via.placeholder.com/300?text=Glass+Animals",
        "genres": ["Indie Pop", "Psychedelic Pop"],
        "popularity": 82,
    },
]


def _track(title, artist, album, slug, duration, attrs, genres):
    energy, acoustics, popularity, mood, instrumental, experimental = attrs
    return {
        "title": title,
        "artist": artist,
        "album": album,
        "cover_url": f"https://via.placeholder.com/300?text={album.replace(' ', '+')}",
        "audio_url": f"https://example.com/audio/{slug}.mp3",
        "duration": duration,
        "energy": energy,
        "acoustics": acoustics,
        "popularity": popularity,
        "mood": mood,
        "instrumental": instrumental,
        "experimental": experimental,
        "genres": genres,
    }


# Attribute tuples: energy, acoustics, popularity, mood, instrumental, experimental
DEMO_TRACKS = [
    _track("Midnight Echoes", "Aurora Skies", "Neon Dreams", "midnight-echoes", 225,
           (7, 3, 6, 7, 2, 8), ["Electronic", "Indie Pop"]),
    _track("Electric Dreams", "Neon Pulse", "Synthetic Emotions", "electric-dreams", 252,
           (8, 2, 5, 8, 3, 7), ["Electronic", "Synth Pop"]),
    _track("Crystal Waves", "Lunar Echo", "Ocean Whispers", "crystal-waves", 237,
           (5, 6, 4, 6, 4, 5), ["Ambient", "Electronic"]),
    _track("Neon Heights", "Synth Collective", "Digital Horizons", "neon-heights", 270,
           (9, 2, 7, 9, 2, 6), ["Electronic", "Dance"]),
    _track("Let It Happen", "Tame Impala", "Currents", "let-it-happen", 467,
           (8, 4, 9, 7, 3, 7), ["Psychedelic Rock", "Indie Pop"]),
    _track("The Less I Know The Better", "Tame Impala", "Currents",
           "the-less-i-know-the-better", 219,
           (7, 5, 10, 6, 2, 6), ["Psychedelic Rock", "Indie Pop"]),
    _track("Feels Like We Only Go Backwards", "Tame Impala", "Lonerism",
           "feels-like-we-only-go-backwards", 194,
           (6, 4, 8, 5, 3, 7), ["Psychedelic Rock", "Indie Rock"]),
    _track("Electric Feel", "MGMT", "Oracular Spectacular", "electric-feel", 229,
           (7, 5, 9, 8, 2, 6), ["Indie Pop", "Psychedelic Pop"]),
    _track("Kids", "MGMT", "Oracular Spectacular", "kids", 285,
           (8, 3, 10, 9, 2, 5), ["Indie Pop", "Synth Pop"]),
    _track("Space Song", "Beach House", "Depression Cherry", "space-song", 321,
           (5, 6, 8, 5, 4, 6), ["Dream Pop", "Indie Pop"]),
]

# (name, description, titles of member tracks)
DEMO_PLAYLISTS = [
    ("Workout Mix", "High energy tracks for workouts",
     ["Midnight Echoes", "Electric Dreams", "Neon Heights", "Kids"]),
    ("Chill Vibes", "Relaxing tunes for unwinding",
     ["Crystal Waves", "Feels Like We Only Go Backwards", "Space Song"]),
    ("Focus Time", "Concentration-enhancing tracks",
     ["Let It Happen", "Electric Feel"]),
]

DEMO_LIKED_TRACKS = [
    "Let It Happen",
    "The Less I Know The Better",
    "Electric Feel",
    "Space Song",
]


def seed_demo_catalog(store: CatalogStore) -> None:
    """Populate an empty store with the demo user, catalog, playlists and likes."""
    user = store.create_user(**DEMO_USER)
    store.create_preferences(user.id, PreferenceProfile(**DEMO_PREFERENCES))

    for artist in DEMO_ARTISTS:
        store.create_artist(**artist)

    track_ids = {}
    for track in DEMO_TRACKS:
        track_ids[track["title"]] = store.create_track(**track).id

    for name, description, titles in DEMO_PLAYLISTS:
        playlist = store.create_playlist(
            user.id,
            name,
            description=description,
            image_url=f"https://via.placeholder.com/300?text={name.replace(' ', '+')}",
        )
        for title in titles:
            store.add_track_to_playlist(playlist.id, track_ids[title])

    for title in DEMO_LIKED_TRACKS:
        store.like_track(user.id, track_ids[title])

    logger.info(
        "Seeded demo catalog: %d artists, %d tracks, %d playlists",
        len(DEMO_ARTISTS),
        len(DEMO_TRACKS),
        len(DEMO_PLAYLISTS),
    )
