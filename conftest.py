import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rail_request.conf.test_settings")
django.setup()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "integration: tests executing against a graphene schema")
