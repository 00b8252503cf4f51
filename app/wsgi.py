"""
WSGI compatibility layer.

Exposes the catalog API to WSGI servers such as Gunicorn or Waitress.
The ASGI lifespan does not run under WSGI, so the schema is created
here before the first request.
"""

from asgiref.wsgi import AsgiToWsgi

from app.infrastructure.subway.database import init_schema
from app.interfaces.subway.dependencies import get_engine
from app.main import app

init_schema(get_engine())

application = AsgiToWsgi(app)
