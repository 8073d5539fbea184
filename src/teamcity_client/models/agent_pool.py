"""Agent pool data models."""

from __future__ import annotations

from pydantic import Field

from teamcity_client.models.common import TeamCityModel


class AgentPoolReference(TeamCityModel):
    """Reference to an agent pool."""

    id: int | None = None
    name: str | None = None
    href: str | None = None


class AgentPool(TeamCityModel):
    """An agent pool. ``max_agents`` of ``None`` means unlimited."""

    id: int | None = None
    name: str | None = None
    href: str | None = None
    max_agents: int | None = Field(default=None, alias="maxAgents")


class AgentPoolList(TeamCityModel):
    """Response of the agent pool listing."""

    count: int = 0
    href: str | None = None
    agent_pools: list[AgentPoolReference] = Field(default_factory=list, alias="agentPool")
