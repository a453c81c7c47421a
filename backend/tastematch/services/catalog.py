"""In-memory catalog store.

Holds users, preference profiles, tracks, artists, playlists and likes for
the lifetime of the process. One instance is created at startup and handed
to the matching engine and to request handlers.
"""

import logging
import threading
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from tastematch.exceptions import InvalidInputError, NotFoundError
from tastematch.models import (
    Artist,
    LikedTrack,
    Playlist,
    PlaylistSummary,
    PreferenceProfile,
    PreferenceUpdate,
    Track,
    User,
)

logger = logging.getLogger(__name__)

# Top tracks returned per artist
ARTIST_TOP_TRACKS_LIMIT = 10


def _validation_message(exc: ValidationError) -> str:
    """Flatten a pydantic error into a one-line message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error.get("loc", ())) or "value"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


class CatalogStore:
    """Authoritative in-memory repository for catalog entities.

    Getters raise :class:`NotFoundError` rather than returning ``None``.
    Every public method runs under a single re-entrant lock so readers never
    observe a half-applied write.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

        self._users: Dict[int, User] = {}
        self._preferences: Dict[int, PreferenceProfile] = {}
        self._tracks: Dict[int, Track] = {}
        self._artists: Dict[int, Artist] = {}
        self._playlists: Dict[int, Playlist] = {}

        # Join relations keyed by (playlist_id, track_id) / (user_id, track_id)
        self._playlist_tracks: Dict[Tuple[int, int], datetime] = {}
        self._liked_tracks: Dict[Tuple[int, int], datetime] = {}

        self._next_user_id = 1
        self._next_track_id = 1
        self._next_artist_id = 1
        self._next_playlist_id = 1

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(
        self,
        username: str,
        name: str,
        email: str,
        subscription: str = "Free",
    ) -> User:
        with self._lock:
            if any(u.username == username for u in self._users.values()):
                raise InvalidInputError(f"Username {username!r} is already taken")
            user = self._build(
                User,
                id=self._next_user_id,
                username=username,
                name=name,
                email=email,
                subscription=subscription,
            )
            self._next_user_id += 1
            self._users[user.id] = user
        logger.info("Created user %d (%s)", user.id, username)
        return user

    def get_user(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_user_by_username(self, username: str) -> User:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user
        raise NotFoundError("User", username)

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------
    def create_preferences(
        self,
        user_id: int,
        profile: Optional[PreferenceProfile] = None,
    ) -> PreferenceProfile:
        """Attach a profile to an existing user, replacing any previous one."""
        with self._lock:
            self.get_user(user_id)
            profile = profile or PreferenceProfile()
            self._preferences[user_id] = profile
        return profile

    def get_preferences(self, user_id: int) -> PreferenceProfile:
        with self._lock:
            profile = self._preferences.get(user_id)
        if profile is None:
            raise NotFoundError("Preferences for user", user_id)
        return profile

    def update_preferences(
        self,
        user_id: int,
        partial: Union[PreferenceUpdate, Dict[str, Any]],
    ) -> PreferenceProfile:
        """Merge ``partial`` onto the user's profile.

        Fields that are not supplied keep their previous value. The merged
        profile is validated before it replaces the stored one, so a failed
        update leaves the store untouched.
        """
        if not isinstance(partial, PreferenceUpdate):
            try:
                partial = PreferenceUpdate.model_validate(partial)
            except ValidationError as exc:
                raise InvalidInputError(_validation_message(exc)) from exc

        with self._lock:
            current = self.get_preferences(user_id)
            merged = {**current.model_dump(), **partial.changes()}
            try:
                updated = PreferenceProfile.model_validate(merged)
            except ValidationError as exc:
                raise InvalidInputError(_validation_message(exc)) from exc
            self._preferences[user_id] = updated

        logger.info(
            "Updated preferences for user %d: %s",
            user_id,
            sorted(partial.changes()),
        )
        return updated

    # ------------------------------------------------------------------
    # Tracks
    # ------------------------------------------------------------------
    def create_track(self, **fields: Any) -> Track:
        with self._lock:
            track = self._build(Track, id=self._next_track_id, **fields)
            self._next_track_id += 1
            self._tracks[track.id] = track
        logger.debug("Created track %d (%s)", track.id, track.title)
        return track

    def get_track(self, track_id: int) -> Track:
        with self._lock:
            track = self._tracks.get(track_id)
        if track is None:
            raise NotFoundError("Track", track_id)
        return track

    def list_tracks(self) -> List[Track]:
        with self._lock:
            return list(self._tracks.values())

    def search_tracks(self, query: str) -> List[Track]:
        """Tracks whose title, artist or album contains ``query`` (case-insensitive)."""
        needle = self._normalize_query(query)
        with self._lock:
            return [
                track
                for track in self._tracks.values()
                if needle in track.title.lower()
                or needle in track.artist.lower()
                or needle in track.album.lower()
            ]

    def get_artist_top_tracks(self, artist_id: int) -> List[Track]:
        """Up to 10 tracks credited to the artist, in catalog order."""
        with self._lock:
            artist = self.get_artist(artist_id)
            name = artist.name.lower()
            matches = [t for t in self._tracks.values() if t.artist.lower() == name]
        return matches[:ARTIST_TOP_TRACKS_LIMIT]

    # ------------------------------------------------------------------
    # Artists
    # ------------------------------------------------------------------
    def create_artist(self, **fields: Any) -> Artist:
        with self._lock:
            artist = self._build(Artist, id=self._next_artist_id, **fields)
            self._next_artist_id += 1
            self._artists[artist.id] = artist
        logger.debug("Created artist %d (%s)", artist.id, artist.name)
        return artist

    def get_artist(self, artist_id: int) -> Artist:
        with self._lock:
            artist = self._artists.get(artist_id)
        if artist is None:
            raise NotFoundError("Artist", artist_id)
        return artist

    def list_artists(self) -> List[Artist]:
        with self._lock:
            return list(self._artists.values())

    def search_artists(self, query: str) -> List[Artist]:
        needle = self._normalize_query(query)
        with self._lock:
            return [a for a in self._artists.values() if needle in a.name.lower()]

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------
    def create_playlist(
        self,
        user_id: int,
        name: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Playlist:
        with self._lock:
            self.get_user(user_id)
            playlist = self._build(
                Playlist,
                id=self._next_playlist_id,
                user_id=user_id,
                name=name,
                description=description,
                image_url=image_url,
            )
            self._next_playlist_id += 1
            self._playlists[playlist.id] = playlist
        logger.info("Created playlist %d for user %d", playlist.id, user_id)
        return playlist

    def get_playlist(self, playlist_id: int) -> Playlist:
        with self._lock:
            playlist = self._playlists.get(playlist_id)
        if playlist is None:
            raise NotFoundError("Playlist", playlist_id)
        return playlist

    def get_playlist_summary(self, playlist_id: int) -> PlaylistSummary:
        with self._lock:
            return self._summarize(self.get_playlist(playlist_id))

    def list_user_playlists(self, user_id: int) -> List[PlaylistSummary]:
        """Playlists owned by the user, each with its track count."""
        with self._lock:
            return [
                self._summarize(p)
                for p in self._playlists.values()
                if p.user_id == user_id
            ]

    def get_playlist_tracks(self, playlist_id: int) -> List[Track]:
        """Tracks in the playlist, in the order they were added."""
        with self._lock:
            self.get_playlist(playlist_id)
            return self._resolve_tracks(
                track_id for pid, track_id in self._playlist_tracks if pid == playlist_id
            )

    def add_track_to_playlist(self, playlist_id: int, track_id: int) -> bool:
        """Add a track to a playlist.

        Returns ``False`` when the track was already a member; the original
        ``added_at`` is kept in that case.
        """
        with self._lock:
            self.get_playlist(playlist_id)
            self.get_track(track_id)
            key = (playlist_id, track_id)
            if key in self._playlist_tracks:
                return False
            self._playlist_tracks[key] = datetime.utcnow()
        logger.info("Added track %d to playlist %d", track_id, playlist_id)
        return True

    def remove_track_from_playlist(self, playlist_id: int, track_id: int) -> bool:
        """Remove a membership. Returns ``False`` when there was nothing to remove."""
        with self._lock:
            removed = self._playlist_tracks.pop((playlist_id, track_id), None)
        if removed is None:
            return False
        logger.info("Removed track %d from playlist %d", track_id, playlist_id)
        return True

    # ------------------------------------------------------------------
    # Likes
    # ------------------------------------------------------------------
    def like_track(self, user_id: int, track_id: int) -> LikedTrack:
        """Record a like. Liking twice keeps the first ``liked_at``."""
        with self._lock:
            self.get_user(user_id)
            self.get_track(track_id)
            key = (user_id, track_id)
            liked_at = self._liked_tracks.get(key)
            if liked_at is None:
                liked_at = self._liked_tracks[key] = datetime.utcnow()
                logger.info("User %d liked track %d", user_id, track_id)
        return LikedTrack(user_id=user_id, track_id=track_id, liked_at=liked_at)

    def unlike_track(self, user_id: int, track_id: int) -> bool:
        with self._lock:
            removed = self._liked_tracks.pop((user_id, track_id), None)
        if removed is None:
            return False
        logger.info("User %d unliked track %d", user_id, track_id)
        return True

    def is_track_liked(self, user_id: int, track_id: int) -> bool:
        with self._lock:
            return (user_id, track_id) in self._liked_tracks

    def list_liked_tracks(self, user_id: int) -> List[Track]:
        """Tracks the user liked, oldest like first."""
        with self._lock:
            return self._resolve_tracks(
                track_id for uid, track_id in self._liked_tracks if uid == user_id
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _build(model, **fields: Any):
        try:
            return model.model_validate(fields)
        except ValidationError as exc:
            raise InvalidInputError(_validation_message(exc)) from exc

    @staticmethod
    def _normalize_query(query: str) -> str:
        if not query:
            raise InvalidInputError("Search query must not be empty")
        return query.lower()

    def _summarize(self, playlist: Playlist) -> PlaylistSummary:
        track_count = sum(1 for pid, _ in self._playlist_tracks if pid == playlist.id)
        return PlaylistSummary(**playlist.model_dump(), track_count=track_count)

    def _resolve_tracks(self, track_ids: Iterable[int]) -> List[Track]:
        return [self._tracks[tid] for tid in track_ids if tid in self._tracks]
