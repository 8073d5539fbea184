"""Pydantic data models for the TeamCity REST API."""

from teamcity_client.models.agent_pool import AgentPool, AgentPoolList, AgentPoolReference
from teamcity_client.models.build_feature import (
    BuildFeature,
    FeatureGolang,
    GenericBuildFeature,
)
from teamcity_client.models.build_type import (
    BuildType,
    BuildTypeReference,
    BuildTypeReferences,
)
from teamcity_client.models.locator import Locator
from teamcity_client.models.parameters import Parameter, Parameters, ParameterType
from teamcity_client.models.project import Project, ProjectReference
from teamcity_client.models.project_feature import (
    GenericProjectFeature,
    ProjectFeature,
    ProjectFeatureSlackConnection,
    ProjectFeatureSlackNotifier,
    ProjectFeatureVersionedSettings,
    SlackConnectionOptions,
    VersionedSettingsOptions,
)
from teamcity_client.models.properties import Properties, Property
from teamcity_client.models.server import Server
from teamcity_client.models.vcs_root import (
    GitVcsRoot,
    GitVcsRootOptions,
    VcsRoot,
    VcsRootReference,
)

__all__ = [
    "AgentPool",
    "AgentPoolList",
    "AgentPoolReference",
    "BuildFeature",
    "BuildType",
    "BuildTypeReference",
    "BuildTypeReferences",
    "FeatureGolang",
    "GenericBuildFeature",
    "GenericProjectFeature",
    "GitVcsRoot",
    "GitVcsRootOptions",
    "Locator",
    "Parameter",
    "ParameterType",
    "Parameters",
    "Project",
    "ProjectFeature",
    "ProjectFeatureSlackConnection",
    "ProjectFeatureSlackNotifier",
    "ProjectFeatureVersionedSettings",
    "ProjectReference",
    "Properties",
    "Property",
    "Server",
    "SlackConnectionOptions",
    "VcsRoot",
    "VcsRootReference",
    "VersionedSettingsOptions",
]
