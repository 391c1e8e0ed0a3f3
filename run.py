import os

import structlog
from dotenv import load_dotenv

load_dotenv()

from sound_catalog import create_app
from sound_catalog.settings import EXTENSION_KEY

# Create the Flask app instance using the application factory
# It will load the config based on FLASK_CONFIG or default to 'development'
config_name = os.getenv('FLASK_CONFIG') or 'default'
app = create_app(config_name)

log = structlog.get_logger()

if __name__ == '__main__':
    # For production, use a proper WSGI server like Gunicorn or Waitress.
    settings = app.extensions[EXTENSION_KEY]
    log.info("server.starting", host=settings.host, port=settings.port)
    print(f"Server running on port {settings.port}")
    print(f"API docs available at: http://{settings.host}:{settings.port}/docs/")
    app.run(host=settings.host, port=settings.port, threaded=True)
