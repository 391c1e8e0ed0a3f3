def test_get_audio_streams_file(client, assets):
    (assets['music'] / 'song.mp3').write_bytes(b'ID3audio')

    resp = client.get('/audio/song.mp3')
    assert resp.status_code == 200
    assert resp.mimetype == 'audio/mpeg'
    assert resp.data == b'ID3audio'
    resp.close()


def test_get_audio_missing_returns_404(client):
    resp = client.get('/audio/missing.mp3')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Audio file not found'}


def test_get_audio_serves_unreferenced_files(client, assets):
    # No sidecar and not an .mp3: still served because it exists on disk
    (assets['music'] / 'stray.bin').write_bytes(b'\x00\x01')

    resp = client.get('/audio/stray.bin')
    assert resp.status_code == 200
    assert resp.mimetype == 'audio/mpeg'
    resp.close()


def test_get_audio_directory_name_returns_404(client, assets):
    (assets['music'] / 'folder.mp3').mkdir()

    resp = client.get('/audio/folder.mp3')
    assert resp.status_code == 404


def test_get_cover_streams_file(client, assets):
    (assets['cover'] / 'song.jpg').write_bytes(b'\xff\xd8\xff')

    resp = client.get('/cover/song.jpg')
    assert resp.status_code == 200
    assert resp.mimetype == 'image/jpeg'
    assert resp.data == b'\xff\xd8\xff'
    resp.close()


def test_get_cover_missing_returns_404(client):
    resp = client.get('/cover/missing.jpg')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Cover image not found'}


def test_cover_link_from_catalog_may_be_dead(client, add_sound):
    add_sound('song.mp3')

    cover = client.get('/sounds').get_json()[0]['cover']
    resp = client.get(cover)
    assert resp.status_code == 404
