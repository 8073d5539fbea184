"""Typed client for the TeamCity REST API."""

import logging

from teamcity_client.client.teamcity import TeamCityClient
from teamcity_client.config.models import ServerProfile

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["ServerProfile", "TeamCityClient", "__version__"]
