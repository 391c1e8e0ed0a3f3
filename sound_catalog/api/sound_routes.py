from flask import Blueprint, current_app, jsonify, request

from sound_catalog.api.swagger_helpers import with_error_response
from sound_catalog.services import catalog_service
from sound_catalog.services.catalog_service import ServiceError
from sound_catalog.settings import get_settings

sounds_bp = Blueprint("sounds", __name__)

NOT_FOUND_MESSAGE = "No sounds found"


@sounds_bp.route("/sounds", methods=["GET"])
@with_error_response(404, "No sounds in the catalog, or none matched the search term.")
@with_error_response(500, "A description file is missing or malformed.")
def get_sounds():
    """List the sound catalog, optionally filtered.
    The catalog is rebuilt from the asset directories on every call.
    ---
    tags:
      - Sounds
    produces:
      - application/json
    parameters:
      - in: header
        name: search
        type: string
        required: false
        description: Case-insensitive substring matched against the name and every tag.
    responses:
      200:
        description: The matching sounds, in directory order.
        schema:
          type: array
          items:
            type: object
            properties:
              id:
                type: integer
              name:
                type: string
              description:
                type: string
              tags:
                type: array
                items:
                  type: string
              audio:
                type: string
                example: /audio/cool_beat.mp3
              cover:
                type: string
                example: /cover/cool_beat.jpg
    """
    settings = get_settings()
    try:
        sounds = catalog_service.build_catalog(settings.music_dir, settings.description_dir)
    except ServiceError as e:
        current_app.logger.exception(e)
        return _err(e, 500)

    sounds = catalog_service.filter_sounds(sounds, request.headers.get("search"))
    if not sounds:
        return _err(NOT_FOUND_MESSAGE, 404)
    return jsonify([s.to_dict() for s in sounds])


def _err(msg, status=400):
    return jsonify({"error": str(msg)}), status
