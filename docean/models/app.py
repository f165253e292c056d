"""App Platform API types.

An app is described by an ``AppSpec``: a name, a region and the
components to run (services, workers, static sites, functions).
"""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypeAlias, TypedDict

# =============================================================================
# Enumerated Fields
# =============================================================================

DomainType: TypeAlias = Literal["UNSPECIFIED", "DEFAULT", "PRIMARY", "ALIAS"]
TlsVersion: TypeAlias = Literal["1.2", "1.3"]
EnvScope: TypeAlias = Literal["UNSET", "RUN_TIME", "BUILD_TIME", "RUN_AND_BUILD_TIME"]
EnvType: TypeAlias = Literal["GENERAL", "SECRET"]
JobKind: TypeAlias = Literal["UNSPECIFIED", "PRE_DEPLOY", "POST_DEPLOY", "FAILED_DEPLOY"]
InstanceSizeSlug: TypeAlias = Literal[
    "basic-xxs",
    "basic-xs",
    "basic-s",
    "basic-m",
    "professional-xs",
    "professional-s",
    "professional-m",
    "professional-1l",
    "professional-l",
    "professional-xl",
]

# =============================================================================
# Spec Components
# =============================================================================


class AppSpecDomain(TypedDict):
    domain: str
    type: DomainType
    wildcard: bool
    zone: NotRequired[str]
    minimum_tls_version: TlsVersion


class AppEnvSpec(TypedDict):
    key: str
    scope: EnvScope
    type: EnvType
    value: str


class AppRouteSpec(TypedDict):
    path: str
    preserve_path_prefix: bool


class AppGitHubSource(TypedDict):
    branch: str
    deploy_on_push: bool
    repo: str


class AppSpecDeployable(TypedDict):
    """Fields shared by every runnable component."""

    github: NotRequired[AppGitHubSource]
    run_command: NotRequired[str]
    source_dir: NotRequired[str]
    envs: NotRequired[list[AppEnvSpec]]
    environment_slug: NotRequired[str]
    routes: NotRequired[list[AppRouteSpec]]
    instance_size_slug: NotRequired[InstanceSizeSlug]
    instance_count: NotRequired[int]
    cors: NotRequired[dict[str, Any]]
    health_check: NotRequired[dict[str, Any]]
    http_port: NotRequired[int]
    internal_ports: NotRequired[list[int]]


class AppSpecBuildable(AppSpecDeployable):
    dockerfile_path: NotRequired[str]
    build_command: NotRequired[str]


class AppSpecService(AppSpecBuildable):
    name: str


class AppSpecWorker(AppSpecBuildable):
    name: NotRequired[str]
    kind: NotRequired[JobKind]


class AppSpecFunction(AppSpecBuildable):
    name: NotRequired[str]
    kind: NotRequired[JobKind]


class AppSpecStaticSite(AppSpecDeployable):
    name: NotRequired[str]
    index_document: NotRequired[str]
    error_document: NotRequired[str]
    catchall_document: NotRequired[str]
    output_dir: NotRequired[str]


class AppSpec(TypedDict):
    name: str
    region: NotRequired[str]
    domains: NotRequired[list[AppSpecDomain]]
    services: NotRequired[list[AppSpecService]]
    static_sites: NotRequired[list[AppSpecStaticSite]]
    workers: NotRequired[list[AppSpecWorker]]
    functions: NotRequired[list[AppSpecFunction]]


# =============================================================================
# App
# =============================================================================


class App(TypedDict):
    """App as returned by ``/apps``."""

    id: str
    spec: AppSpec
    owner_uuid: NotRequired[str]
    default_ingress: NotRequired[str]
    live_url: NotRequired[str]
    live_domain: NotRequired[str]
    region: NotRequired[dict[str, Any]]
    tier_slug: NotRequired[str]
    created_at: NotRequired[str]
    updated_at: NotRequired[str]
    last_deployment_created_at: NotRequired[str]
    active_deployment: NotRequired[dict[str, Any]]
    in_progress_deployment: NotRequired[dict[str, Any]]


class AppRequest(TypedDict):
    """Body for ``POST /apps`` and ``PUT /apps/{id}``."""

    spec: AppSpec
    project_id: NotRequired[str]


class Deployment(TypedDict):
    id: str
    phase: NotRequired[str]  # PENDING_BUILD, BUILDING, DEPLOYING, ACTIVE, ERROR...
    cause: NotRequired[str]
    spec: NotRequired[AppSpec]
    created_at: NotRequired[str]
    updated_at: NotRequired[str]
    progress: NotRequired[dict[str, Any]]


__all__ = [
    "App",
    "AppEnvSpec",
    "AppGitHubSource",
    "AppRequest",
    "AppRouteSpec",
    "AppSpec",
    "AppSpecBuildable",
    "AppSpecDeployable",
    "AppSpecDomain",
    "AppSpecFunction",
    "AppSpecService",
    "AppSpecStaticSite",
    "AppSpecWorker",
    "Deployment",
    "DomainType",
    "EnvScope",
    "EnvType",
    "InstanceSizeSlug",
    "JobKind",
    "TlsVersion",
]
