"""VCS root data models, with a typed helper for Git roots."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from teamcity_client.models.common import PropertiesField, TeamCityModel
from teamcity_client.models.project import ProjectReference
from teamcity_client.models.properties import Properties, properties_of

GIT_VCS_NAME = "jetbrains.git"


class VcsRootReference(TeamCityModel):
    """Short representation of a VCS root."""

    id: str | None = None
    name: str | None = None
    href: str | None = None
    project: ProjectReference | None = None


class VcsRoot(TeamCityModel):
    """A VCS root in its raw, property-based form."""

    id: str | None = None
    name: str | None = None
    vcs_name: str | None = Field(default=None, alias="vcsName")
    href: str | None = None
    project: ProjectReference | None = None
    modification_check_interval: int | None = Field(
        default=None, alias="modificationCheckInterval",
    )
    properties: PropertiesField = Field(default_factory=Properties)

    @property
    def project_id(self) -> str | None:
        return self.project.id if self.project else None

    def reference(self) -> VcsRootReference:
        return VcsRootReference(
            id=self.id, name=self.name, href=self.href, project=self.project,
        )


class GitAuthMethod(str, Enum):
    ANONYMOUS = "ANONYMOUS"
    PASSWORD = "PASSWORD"
    UPLOADED_KEY = "TEAMCITY_SSH_KEY"
    DEFAULT_KEY = "PRIVATE_KEY_DEFAULT"
    KEY_FILE = "PRIVATE_KEY_FILE"


class GitUsernameStyle(str, Enum):
    USERID = "USERID"
    NAME = "NAME"
    EMAIL = "EMAIL"
    FULL = "FULL"


class GitAgentCleanPolicy(str, Enum):
    ON_BRANCH_CHANGE = "ON_BRANCH_CHANGE"
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"


class GitVcsRootOptions(BaseModel):
    """Settings of a Git VCS root. ``password`` is secure and never read back."""

    fetch_url: str
    push_url: str | None = None
    default_branch: str = "refs/heads/master"
    branch_spec: list[str] = Field(default_factory=list)
    enable_tag_build: bool = False
    username_style: GitUsernameStyle = GitUsernameStyle.USERID
    submodule_checkout: bool = True
    auth_method: GitAuthMethod = GitAuthMethod.ANONYMOUS
    username: str | None = None
    password: str | None = None
    private_key_path: str | None = None
    uploaded_key: str | None = None
    agent_clean_policy: GitAgentCleanPolicy = GitAgentCleanPolicy.ON_BRANCH_CHANGE

    def properties(self) -> Properties:
        return properties_of([
            ("url", self.fetch_url),
            ("push_url", self.push_url),
            ("branch", self.default_branch),
            ("teamcity:branchSpec", "\n".join(self.branch_spec) or None),
            ("reportTagRevisions", "true" if self.enable_tag_build else None),
            ("usernameStyle", self.username_style.value),
            ("submoduleCheckout", "CHECKOUT" if self.submodule_checkout else "IGNORE"),
            ("authMethod", self.auth_method.value),
            ("username", self.username),
            ("secure:password", self.password),
            ("privateKeyPath", self.private_key_path),
            ("teamcitySshKey", self.uploaded_key),
            ("agentCleanPolicy", self.agent_clean_policy.value),
        ])

    @classmethod
    def from_properties(cls, props: Properties) -> GitVcsRootOptions:
        spec = props.get("teamcity:branchSpec") or ""
        return cls(
            fetch_url=props.get("url", ""),
            push_url=props.get("push_url"),
            default_branch=props.get("branch", "refs/heads/master"),
            branch_spec=[line for line in spec.splitlines() if line],
            enable_tag_build=props.get("reportTagRevisions") == "true",
            username_style=props.get("usernameStyle", GitUsernameStyle.USERID.value),
            submodule_checkout=props.get("submoduleCheckout", "CHECKOUT") == "CHECKOUT",
            auth_method=props.get("authMethod", GitAuthMethod.ANONYMOUS.value),
            username=props.get("username"),
            private_key_path=props.get("privateKeyPath"),
            uploaded_key=props.get("teamcitySshKey"),
            agent_clean_policy=props.get(
                "agentCleanPolicy", GitAgentCleanPolicy.ON_BRANCH_CHANGE.value,
            ),
        )


class GitVcsRoot(BaseModel):
    """Typed view over a ``jetbrains.git`` VCS root."""

    project_id: str = ""
    name: str
    id: str | None = None
    modification_check_interval: int | None = None
    options: GitVcsRootOptions

    def to_vcs_root(self) -> VcsRoot:
        return VcsRoot(
            id=self.id,
            name=self.name,
            vcs_name=GIT_VCS_NAME,
            project=ProjectReference(id=self.project_id),
            modification_check_interval=self.modification_check_interval,
            properties=self.options.properties(),
        )

    @classmethod
    def from_vcs_root(cls, root: VcsRoot) -> GitVcsRoot:
        if root.vcs_name != GIT_VCS_NAME:
            raise ValueError(f"VCS root '{root.id}' is not a Git root ({root.vcs_name})")
        return cls(
            id=root.id,
            name=root.name or "",
            project_id=root.project_id or "",
            modification_check_interval=root.modification_check_interval,
            options=GitVcsRootOptions.from_properties(root.properties),
        )
