from flask import Blueprint

from .sound_routes import sounds_bp
from .media_routes import media_bp

# Master blueprint, mounted at the application root
api = Blueprint('api', __name__)

api.register_blueprint(sounds_bp)
api.register_blueprint(media_bp)
