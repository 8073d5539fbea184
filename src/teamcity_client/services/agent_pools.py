"""Agent pool operations."""

from __future__ import annotations

import httpx

from teamcity_client.client.rest import RestHelper
from teamcity_client.models.agent_pool import AgentPool, AgentPoolList
from teamcity_client.models.locator import Locator


class AgentPoolService:
    def __init__(self, http: httpx.Client) -> None:
        self.rest = RestHelper(http, "agentPools/")

    def create(self, pool: AgentPool) -> AgentPool:
        return self.rest.post("", pool.to_wire(), "Agent Pool", AgentPool)

    def get(self, pool_id: int) -> AgentPool:
        return self.rest.get(str(Locator.id_int(pool_id)), "Agent Pool", AgentPool)

    def list(self) -> AgentPoolList:
        return self.rest.get("", "Agent Pools", AgentPoolList)

    def delete(self, pool_id: int) -> None:
        self.rest.delete(str(Locator.id_int(pool_id)), "Agent Pool")
