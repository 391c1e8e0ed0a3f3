import os

basedir = os.path.abspath(os.getcwd())


def _env_port(default: int = 3000) -> int:
    try:
        return int(os.environ.get("PORT", str(default)))
    except (TypeError, ValueError):
        return default


class Config:
    SWAGGER = {"title": "Sound Catalog API", "uiversion": 3, "specs_route": "/docs/"}
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = _env_port()

    # Asset layout: <ASSETS_DIR>/music, /description and /cover unless overridden
    ASSETS_DIR = os.environ.get("ASSETS_DIR") or os.path.join(basedir, "assets")
    MUSIC_DIR = os.environ.get("MUSIC_DIR") or os.path.join(ASSETS_DIR, "music")
    DESCRIPTION_DIR = os.environ.get("DESCRIPTION_DIR") or os.path.join(ASSETS_DIR, "description")
    COVER_DIR = os.environ.get("COVER_DIR") or os.path.join(ASSETS_DIR, "cover")


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True


class ProductionConfig(Config):
    DEBUG = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
