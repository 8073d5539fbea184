"""E2E test configuration: a client bound to a live TeamCity server."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from teamcity_client.client.teamcity import TeamCityClient
from teamcity_client.config.models import ServerProfile


@pytest.fixture
def live_client(request) -> Iterator[TeamCityClient]:
    url = request.config.getoption("--server-url")
    token = request.config.getoption("--server-token")
    if not url or not token:
        pytest.skip("Live server credentials not provided")
    with TeamCityClient(ServerProfile(name="e2e", url=url, token=token)) as tc:
        yield tc
