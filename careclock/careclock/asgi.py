"""
ASGI config for careclock project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "careclock.settings")

application = get_asgi_application()
