"""
Point d'entrée du serveur HTTP.

Lance l'application avec uvicorn sur `APP_HOST:PORT` (PORT=8080 par défaut, surchargeable via
l'environnement ou le fichier `.env`).
"""

import structlog
import uvicorn

from greeter.app.main import app
from greeter.core.container import container

log = structlog.get_logger(__name__)


def main():
    settings = container.settings
    log.info("server_starting", host=settings.APP_HOST, port=settings.PORT)
    uvicorn.run(app, host=settings.APP_HOST, port=settings.PORT, reload=False)


if __name__ == "__main__":
    main()
