import pytest
from sound_catalog import create_app


@pytest.fixture(scope='function')
def assets(tmp_path):
    """
    Fixture that creates an empty asset tree (music, description, cover).
    """
    dirs = {name: tmp_path / name for name in ('music', 'description', 'cover')}
    for d in dirs.values():
        d.mkdir()
    return dirs


@pytest.fixture(scope='function')
def add_sound(assets):
    """Factory writing an audio file and, unless `sidecar` is None, its description."""

    def _add(file_name, sidecar="A sound\ntag", audio_bytes=b'ID3fake'):
        (assets['music'] / file_name).write_bytes(audio_bytes)
        if sidecar is not None:
            sidecar_name = file_name.replace('.mp3', '.txt', 1)
            (assets['description'] / sidecar_name).write_text(sidecar, encoding='utf-8')
        return file_name

    return _add


@pytest.fixture(scope='function')
def app(assets):
    """
    Fixture that creates a test app instance pointed at the temporary assets.
    """
    app = create_app(
        'testing',
        MUSIC_DIR=str(assets['music']),
        DESCRIPTION_DIR=str(assets['description']),
        COVER_DIR=str(assets['cover']),
    )
    yield app


@pytest.fixture(scope='function')
def client(app):
    """A test client for the app."""
    return app.test_client()
