import json

import pytest

from musiccatalog.core.exceptions import FileOperationError, ProcessingError
from musiccatalog.utils.filesystem import ensure_directory, find_audio_files, write_json_document

from conftest import touch


def test_find_audio_files_filters_and_sorts(audio_dir):
    touch(audio_dir, "b.MP3", "a.mp3", "cover.jpg", "notes.txt")
    (audio_dir / "folder.mp3").mkdir()

    files = find_audio_files(str(audio_dir), (".mp3",))

    assert [path.rsplit("/", 1)[-1] for path in files] == ["a.mp3", "b.MP3"]


def test_find_audio_files_missing_directory(tmp_path):
    with pytest.raises(ProcessingError):
        find_audio_files(str(tmp_path / "missing"), (".mp3",))


def test_ensure_directory_rejects_files(tmp_path):
    blocker = tmp_path / "api"
    blocker.write_text("x", encoding='utf-8')

    with pytest.raises(FileOperationError):
        ensure_directory(str(blocker))

    assert ensure_directory(str(tmp_path / "nested" / "dir")) is True
    assert (tmp_path / "nested" / "dir").is_dir()


def test_write_json_document_returns_size(tmp_path):
    output = tmp_path / "api" / "catalog.json"

    size = write_json_document({'genre': "bedroompop", 'artist': "Beabadoobee"}, str(output))

    assert size == output.stat().st_size
    assert json.loads(output.read_text(encoding='utf-8'))['artist'] == "Beabadoobee"


@pytest.mark.parametrize(
    "document",
    [
        {'artist': "Caf\udce9 Band"},
        {'tracks': [object()]},
    ],
)
def test_unserializable_document_keeps_previous_output(tmp_path, document):
    output = tmp_path / "catalog.json"
    write_json_document({'genre': "bedroompop"}, str(output))
    previous = output.read_bytes()

    with pytest.raises(FileOperationError):
        write_json_document(document, str(output))

    assert output.read_bytes() == previous
