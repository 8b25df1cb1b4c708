from streamchart.models import Song
from streamchart.services.song_filter import filter_songs


def _song(rank, title, artists):
    return Song(rank=rank, title=title, artists=artists, play_count=rank * 10)


SONGS = [
    _song(1, "Blinding Lights", ["The Weeknd"]),
    _song(2, "Shape of You", ["Ed Sheeran"]),
    _song(3, "Someone You Loved", ["Lewis Capaldi"]),
    _song(4, "Sunflower", ["Post Malone", "Swae Lee"]),
    _song(5, "Starboy", ["The Weeknd", "Daft Punk"]),
]


def test_empty_query_keeps_every_song():
    assert filter_songs(SONGS, "") == SONGS


def test_title_match_is_case_insensitive():
    assert [s.rank for s in filter_songs(SONGS, "SHAPE")] == [2]


def test_any_artist_can_match():
    assert [s.rank for s in filter_songs(SONGS, "swae")] == [4]
    assert [s.rank for s in filter_songs(SONGS, "daft")] == [5]


def test_matches_keep_chart_order():
    assert [s.rank for s in filter_songs(SONGS, "weeknd")] == [1, 5]
    assert [s.rank for s in filter_songs(SONGS, "you")] == [2, 3]


def test_no_match_returns_empty_list():
    assert filter_songs(SONGS, "zzz") == []


def test_included_and_excluded_songs_partition_the_chart():
    for query in ["o", "lee", "LIGHTS", "e s", "x"]:
        needle = query.lower()
        result = filter_songs(SONGS, query)

        def contains(song):
            return needle in song.title.lower() or any(needle in a.lower() for a in song.artists)

        assert all(contains(song) for song in result)
        excluded = [song for song in SONGS if song not in result]
        assert not any(contains(song) for song in excluded)
        assert result == [song for song in SONGS if song in result]
