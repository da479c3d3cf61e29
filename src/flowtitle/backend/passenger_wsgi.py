"""WSGI entrypoint for deploying the flowtitle web UI behind Passenger."""

import logging

from flowtitle.backend.app import create_app

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Passenger expects a module-level variable named ``application``.
application = create_app()
