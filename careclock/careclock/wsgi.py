"""
WSGI config for careclock project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "careclock.settings")

application = get_wsgi_application()
