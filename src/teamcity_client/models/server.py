"""Server information model."""

from __future__ import annotations

from pydantic import Field

from teamcity_client.models.common import TeamCityModel


class Server(TeamCityModel):
    """Version and identity of the TeamCity server."""

    version: str | None = None
    version_major: int | None = Field(default=None, alias="versionMajor")
    version_minor: int | None = Field(default=None, alias="versionMinor")
    start_time: str | None = Field(default=None, alias="startTime")
    current_time: str | None = Field(default=None, alias="currentTime")
    build_number: str | None = Field(default=None, alias="buildNumber")
    build_date: str | None = Field(default=None, alias="buildDate")
    internal_id: str | None = Field(default=None, alias="internalId")
    role: str | None = None
    web_url: str | None = Field(default=None, alias="webUrl")
