import pytest
from pydantic import ValidationError

from tastematch.exceptions import InvalidInputError, NotFoundError
from tastematch.models import PreferenceProfile, PreferenceUpdate


def _add_track(store, title, artist="Artist", album="Album", **extra):
    return store.create_track(
        title=title,
        artist=artist,
        album=album,
        cover_url="",
        audio_url="",
        duration=200,
        **extra,
    )


def test_seeded_catalog_contents(store):
    assert [a.name for a in store.list_artists()][:2] == ["Tame Impala", "MGMT"]
    assert len(store.list_tracks()) == 10
    assert store.get_user(1).username == "demo_user"
    assert store.get_user(1).initials == "JS"
    assert [p.track_count for p in store.list_user_playlists(1)] == [4, 3, 2]
    assert [t.title for t in store.list_liked_tracks(1)] == [
        "Let It Happen",
        "The Less I Know The Better",
        "Electric Feel",
        "Space Song",
    ]


def test_get_user_by_username(store):
    user = store.get_user_by_username("demo_user")

    assert user.id == 1
    assert user == store.get_user(1)


def test_get_user_by_username_is_exact(store):
    with pytest.raises(NotFoundError):
        store.get_user_by_username("nobody")
    with pytest.raises(NotFoundError):
        store.get_user_by_username("DEMO_USER")


def test_getters_raise_not_found(store):
    with pytest.raises(NotFoundError):
        store.get_track(999)
    with pytest.raises(NotFoundError):
        store.get_artist(999)
    with pytest.raises(NotFoundError):
        store.get_user(999)
    with pytest.raises(NotFoundError):
        store.get_playlist(999)
    with pytest.raises(NotFoundError):
        store.get_preferences(999)


def test_ids_are_sequential_and_never_reused(empty_store):
    first = _add_track(empty_store, "One")
    second = _add_track(empty_store, "Two")

    assert (first.id, second.id) == (1, 2)
    assert empty_store.list_tracks() == [first, second]


def test_search_tracks_matches_title_artist_and_album_case_insensitively(store):
    assert [t.title for t in store.search_tracks("ELECTRIC")] == ["Electric Dreams", "Electric Feel"]
    assert {t.artist for t in store.search_tracks("tame")} == {"Tame Impala"}
    assert [t.title for t in store.search_tracks("oracular")] == ["Electric Feel", "Kids"]
    assert store.search_tracks("no such thing") == []


def test_search_rejects_empty_query(store):
    with pytest.raises(InvalidInputError):
        store.search_tracks("")
    with pytest.raises(InvalidInputError):
        store.search_artists("")


def test_search_whitespace_query_is_matched_literally(store):
    titles = [t.title for t in store.search_tracks(" ")]
    artists = [a.name for a in store.search_artists(" ")]

    assert "Let It Happen" in titles
    assert "Tame Impala" in artists
    assert "MGMT" not in artists


def test_search_artists_matches_name_only(store):
    assert [a.name for a in store.search_artists("glass")] == ["Glass Animals"]
    # Genres are not searched
    assert store.search_artists("psychedelic") == []


def test_artist_top_tracks_match_name_case_insensitively_in_catalog_order(store):
    tracks = store.get_artist_top_tracks(1)

    assert [t.title for t in tracks] == [
        "Let It Happen",
        "The Less I Know The Better",
        "Feels Like We Only Go Backwards",
    ]


def test_artist_top_tracks_are_capped_at_ten(empty_store):
    artist = empty_store.create_artist(name="Prolific", genres=["Pop"])
    for i in range(12):
        _add_track(empty_store, f"Song {i}", artist="PROLIFIC" if i % 2 else "prolific")

    tracks = empty_store.get_artist_top_tracks(artist.id)

    assert [t.title for t in tracks] == [f"Song {i}" for i in range(10)]


def test_artist_top_tracks_empty_for_artist_without_tracks(store):
    artist = store.create_artist(name="Newcomer", genres=["Folk"], popularity=3)

    assert store.get_artist_top_tracks(artist.id) == []


def test_artist_top_tracks_unknown_artist(store):
    with pytest.raises(NotFoundError):
        store.get_artist_top_tracks(999)


def test_update_preferences_merges_partial_fields(store):
    updated = store.update_preferences(1, {"energy": 2, "genres": ["Jazz"]})

    assert updated.energy == 2
    assert updated.genres == ("Jazz",)
    assert updated.acoustics == 4
    assert updated.experimental == 8
    assert store.get_preferences(1) == updated


def test_update_preferences_accepts_update_model(store):
    updated = store.update_preferences(1, PreferenceUpdate(mood=10))

    assert updated.mood == 10
    assert updated.energy == 7


def test_update_preferences_for_unknown_user_leaves_store_unchanged(store):
    before = store.get_preferences(1)

    with pytest.raises(NotFoundError):
        store.update_preferences(42, {"energy": 3})

    assert store.get_preferences(1) == before
    with pytest.raises(NotFoundError):
        store.get_preferences(42)


@pytest.mark.parametrize(
    "changes",
    [{"energy": 0}, {"mood": 11}, {"tempo": 5}, {"acoustics": "loud"}],
)
def test_update_preferences_rejects_invalid_values(store, changes):
    before = store.get_preferences(1)

    with pytest.raises(InvalidInputError):
        store.update_preferences(1, changes)

    assert store.get_preferences(1) == before


def test_missing_genres_become_empty_tuple(empty_store):
    user = empty_store.create_user("solo", "Solo Listener", "solo@example.com")
    profile = empty_store.create_preferences(user.id, PreferenceProfile(genres=None))
    track = _add_track(empty_store, "Untagged", genres=None)

    assert profile.genres == ()
    assert track.genres == ()


def test_create_track_rejects_out_of_range_attributes(empty_store):
    with pytest.raises(InvalidInputError):
        _add_track(empty_store, "Too Loud", energy=11)
    assert empty_store.list_tracks() == []


def test_duplicate_username_rejected(store):
    with pytest.raises(InvalidInputError):
        store.create_user("demo_user", "Someone Else", "else@example.com")


def test_playlist_membership_is_idempotent(store):
    playlist = store.create_playlist(1, "Road Trip")

    assert store.add_track_to_playlist(playlist.id, 1) is True
    assert store.add_track_to_playlist(playlist.id, 1) is False
    assert store.get_playlist_summary(playlist.id).track_count == 1

    assert store.remove_track_from_playlist(playlist.id, 1) is True
    assert store.remove_track_from_playlist(playlist.id, 1) is False
    assert store.get_playlist_summary(playlist.id).track_count == 0


def test_playlist_add_requires_existing_playlist_and_track(store):
    with pytest.raises(NotFoundError):
        store.add_track_to_playlist(999, 1)
    with pytest.raises(NotFoundError):
        store.add_track_to_playlist(1, 999)


def test_playlist_counts_do_not_bleed_between_similar_ids(empty_store):
    user = empty_store.create_user("u", "U Ser", "u@example.com")
    for i in range(11):
        _add_track(empty_store, f"T{i + 1}")
    playlists = [empty_store.create_playlist(user.id, f"P{i + 1}") for i in range(11)]

    empty_store.add_track_to_playlist(playlists[10].id, 1)  # playlist 11, track 1
    empty_store.add_track_to_playlist(playlists[0].id, 11)  # playlist 1, track 11

    summaries = {p.id: p.track_count for p in empty_store.list_user_playlists(user.id)}
    assert summaries[1] == 1
    assert summaries[11] == 1
    assert [t.id for t in empty_store.get_playlist_tracks(1)] == [11]
    assert [t.id for t in empty_store.get_playlist_tracks(11)] == [1]


def test_playlist_tracks_in_order_added(store):
    playlist = store.create_playlist(1, "Ordered")
    for track_id in (5, 2, 9):
        store.add_track_to_playlist(playlist.id, track_id)

    assert [t.id for t in store.get_playlist_tracks(playlist.id)] == [5, 2, 9]


def test_create_playlist_for_unknown_user(store):
    with pytest.raises(NotFoundError):
        store.create_playlist(999, "Orphan")


def test_like_and_unlike_are_idempotent(store):
    first = store.like_track(1, 1)
    second = store.like_track(1, 1)

    assert first.liked_at == second.liked_at
    assert store.is_track_liked(1, 1) is True
    assert [t.id for t in store.list_liked_tracks(1)].count(1) == 1

    assert store.unlike_track(1, 1) is True
    assert store.unlike_track(1, 1) is False
    assert store.is_track_liked(1, 1) is False


def test_like_unknown_track(store):
    with pytest.raises(NotFoundError):
        store.like_track(1, 999)


def test_stored_entities_are_immutable(store):
    track = store.get_track(1)

    with pytest.raises(ValidationError):
        track.energy = 1

    assert store.get_track(1).energy == 7


def test_stored_genres_cannot_be_changed_in_place(store):
    track_genres = store.get_track(1).genres
    artist_genres = store.get_artist(1).genres
    profile_genres = store.get_preferences(1).genres

    with pytest.raises(AttributeError):
        track_genres.append("Polka")
    with pytest.raises(AttributeError):
        artist_genres.append("Polka")
    with pytest.raises(AttributeError):
        profile_genres.clear()

    assert "Polka" not in store.get_track(1).genres
    assert "Polka" not in store.get_artist(1).genres
    assert store.get_preferences(1).genres == (
        "Indie Pop",
        "Electronic",
        "Alt Rock",
        "Hip Hop",
    )
