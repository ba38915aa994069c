"""
WSGI config for the Virtual Vault storefront.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "virtualvault.settings")

application = get_wsgi_application()
