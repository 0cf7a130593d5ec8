import base64

from musiccatalog.core.models import EmbeddedPicture, OutputShape, ReconciledFields
from musiccatalog.core.reconciler import reconcile_fields
from musiccatalog.core.records import build_track_record, build_track_url, render_track
from musiccatalog.utils.text import parse_filename


def test_fallback_record_basic_shape():
    filename = "Boygenius - Cool About It.mp3"
    fields = reconcile_fields(None, parse_filename(filename))
    record = build_track_record(fields, filename, "bedroompop")

    assert render_track(record) == {
        'id': "boygenius-cool-about-it",
        'artist': "Boygenius",
        'title': "Cool About It",
        'album': None,
        'year': None,
        'genre': None,
        'duration': None,
        'duration_formatted': None,
        'bitrate': None,
        'has_album_art': False,
        'filename': filename,
        'url': "/bedroompop/Boygenius - Cool About It.mp3",
    }


def test_tagged_record_basic_shape(motion_sickness_tags):
    filename = "01 motion sickness.mp3"
    fields = reconcile_fields(motion_sickness_tags, parse_filename(filename))
    rendered = render_track(build_track_record(fields, filename, "bedroompop"))

    assert rendered['id'] == "phoebe-bridgers-motion-sickness"
    assert rendered['duration'] == 193
    assert rendered['duration_formatted'] == "3:13"
    assert rendered['genre'] == "indie rock, folk"
    assert rendered['has_album_art'] is False
    assert rendered['album'] == "Stranger in the Alps"
    assert rendered['year'] == 2017
    assert rendered['bitrate'] == 320000
    assert 'metadata' not in rendered


def test_tagged_record_full_shape(motion_sickness_tags):
    filename = "Phoebe Bridgers - Motion Sickness.mp3"
    fields = reconcile_fields(motion_sickness_tags, parse_filename(filename))
    rendered = render_track(build_track_record(fields, filename, "bedroompop", OutputShape.FULL))

    assert list(rendered) == ['id', 'artist', 'title', 'filename', 'url', 'metadata']
    assert rendered['url'] == "/bedroompop/Phoebe Bridgers - Motion Sickness.mp3"
    assert rendered['metadata'] == {
        'title': "Motion Sickness",
        'artist': "Phoebe Bridgers",
        'album': "Stranger in the Alps",
        'year': 2017,
        'genre': ["indie rock", "folk"],
        'duration': 192.7,
        'bitrate': 320000,
        'sampleRate': 44100,
        'albumArt': None,
    }


def test_full_shape_embeds_artwork_with_default_description():
    picture = EmbeddedPicture(format="image/jpeg", data=b"\xff\xd8\xff\xe0")
    fields = ReconciledFields(artist="Clairo", title="Sofia", picture=picture)
    rendered = render_track(build_track_record(fields, "Clairo - Sofia.mp3", "bedroompop", "full"))

    assert rendered['metadata']['albumArt'] == {
        'format': "image/jpeg",
        'data': base64.b64encode(b"\xff\xd8\xff\xe0").decode('ascii'),
        'description': "Album Art",
    }


def test_full_shape_keeps_artwork_description():
    picture = EmbeddedPicture(format="image/png", data=b"png", description="Front Cover")
    fields = ReconciledFields(artist="Clairo", title="Sofia", picture=picture)
    rendered = render_track(build_track_record(fields, "a.mp3", "bedroompop", OutputShape.FULL))

    assert rendered['metadata']['albumArt']['description'] == "Front Cover"


def test_basic_shape_reduces_artwork_to_flag():
    picture = EmbeddedPicture(format="image/png", data=b"png")
    fields = ReconciledFields(artist="Clairo", title="Sofia", picture=picture)
    rendered = render_track(build_track_record(fields, "a.mp3", "bedroompop"))

    assert rendered['has_album_art'] is True
    assert "png" not in str(rendered)


def test_build_track_url():
    assert build_track_url("bedroompop", "a b.mp3") == "/bedroompop/a b.mp3"
    assert build_track_url("/bedroompop/", "x.mp3") == "/bedroompop/x.mp3"
    assert build_track_url("", "x.mp3") == "/x.mp3"
