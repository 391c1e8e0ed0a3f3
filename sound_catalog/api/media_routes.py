from pathlib import Path

import structlog
from flask import Blueprint, jsonify, send_file
from werkzeug.security import safe_join

from sound_catalog.api.swagger_helpers import with_error_response
from sound_catalog.settings import get_settings

media_bp = Blueprint("media", __name__)
log = structlog.get_logger()


def _send_asset(directory: Path, file_name: str, mimetype: str, missing_message: str):
    """Stream ``directory/file_name`` or answer 404 when it is not a file."""
    path = safe_join(str(directory), file_name)
    if path is None or not Path(path).is_file():
        log.info("media.not_found", directory=str(directory), file_name=file_name)
        return jsonify({"error": missing_message}), 404
    return send_file(path, mimetype=mimetype)


@media_bp.route("/audio/<string:file_name>", methods=["GET"])
@with_error_response(404, "Audio file not found.")
def get_audio(file_name: str):
    """Download an audio file.
    ---
    tags:
      - Media
    produces:
      - audio/mpeg
    parameters:
      - in: path
        name: file_name
        type: string
        required: true
        description: File name inside the music directory, e.g. cool_beat.mp3
    responses:
      200:
        description: Raw audio bytes.
        schema:
          type: file
    """
    return _send_asset(get_settings().music_dir, file_name, "audio/mpeg", "Audio file not found")


@media_bp.route("/cover/<string:file_name>", methods=["GET"])
@with_error_response(404, "Cover image not found.")
def get_cover(file_name: str):
    """Download a cover image.
    ---
    tags:
      - Media
    produces:
      - image/jpeg
    parameters:
      - in: path
        name: file_name
        type: string
        required: true
        description: File name inside the cover directory, e.g. cool_beat.jpg
    responses:
      200:
        description: Raw JPEG bytes.
        schema:
          type: file
    """
    return _send_asset(get_settings().cover_dir, file_name, "image/jpeg", "Cover image not found")
