"""
Models for task definitions and their container definitions, as returned
by the orchestration API (camelCase document keys).
"""
from typing import List, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class DevicePermission(str, Enum):
    """
    Access granted to a container on a host device.
    """
    READ = "read"
    WRITE = "write"
    MKNOD = "mknod"


class SourceModel(BaseModel):
    """
    Base for task definition records. Accepts both document keys and field names.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Ulimit(SourceModel):
    """
    A resource limit as a soft/hard pair.
    """
    name: str
    soft_limit: int = Field(alias="softLimit")
    hard_limit: int = Field(alias="hardLimit")


class KeyValuePair(SourceModel):
    """
    One environment variable.
    """
    name: str
    value: Optional[str] = None


class HostEntry(SourceModel):
    """
    An entry for the container's /etc/hosts.
    """
    hostname: str
    ip_address: str = Field(alias="ipAddress")


class HealthCheck(SourceModel):
    """
    Health check command; durations are whole seconds.
    """
    command: List[str]
    retries: Optional[int] = None
    interval: Optional[int] = None
    timeout: Optional[int] = None
    start_period: Optional[int] = Field(default=None, alias="startPeriod")


class LogConfiguration(SourceModel):
    """
    Log driver and its options.
    """
    log_driver: str = Field(alias="logDriver")
    options: Dict[str, str] = {}


class KernelCapabilities(SourceModel):
    """
    Linux capabilities added to or dropped from the default set.
    """
    add: Optional[List[str]] = None
    drop: Optional[List[str]] = None


class Device(SourceModel):
    """
    A host device exposed to the container.
    """
    host_path: str = Field(alias="hostPath")
    container_path: Optional[str] = Field(default=None, alias="containerPath")
    permissions: Optional[List[DevicePermission]] = None


class Tmpfs(SourceModel):
    """
    A tmpfs mount. Size is in MiB.
    """
    container_path: Optional[str] = Field(default=None, alias="containerPath")
    mount_options: Optional[List[str]] = Field(default=None, alias="mountOptions")
    size: Optional[int] = None


class LinuxParameters(SourceModel):
    """
    Linux-specific container settings.
    """
    init_process_enabled: Optional[bool] = Field(default=None, alias="initProcessEnabled")
    shared_memory_size: Optional[int] = Field(default=None, alias="sharedMemorySize")
    capabilities: Optional[KernelCapabilities] = None
    devices: Optional[List[Device]] = None
    tmpfs: Optional[List[Tmpfs]] = None


class ContainerDefinition(SourceModel):
    """
    The full definition of a single container within a task definition.
    """
    name: Optional[str] = None
    image: Optional[str] = None

    # Execution
    command: Optional[List[str]] = None
    entry_point: Optional[List[str]] = Field(default=None, alias="entryPoint")
    working_directory: Optional[str] = Field(default=None, alias="workingDirectory")
    user: Optional[str] = None

    # Environment
    environment: Optional[List[KeyValuePair]] = None

    # Networking
    hostname: Optional[str] = None
    links: Optional[List[str]] = None
    dns_servers: Optional[List[str]] = Field(default=None, alias="dnsServers")
    dns_search_domains: Optional[List[str]] = Field(default=None, alias="dnsSearchDomains")
    extra_hosts: Optional[List[HostEntry]] = Field(default=None, alias="extraHosts")

    # Security
    docker_security_options: Optional[List[str]] = Field(default=None, alias="dockerSecurityOptions")
    pseudo_terminal: Optional[bool] = Field(default=None, alias="pseudoTerminal")
    privileged: Optional[bool] = None
    readonly_root_filesystem: Optional[bool] = Field(default=None, alias="readonlyRootFilesystem")

    # Resources
    ulimits: Optional[List[Ulimit]] = None
    linux_parameters: Optional[LinuxParameters] = Field(default=None, alias="linuxParameters")

    # Lifecycle
    health_check: Optional[HealthCheck] = Field(default=None, alias="healthCheck")

    # Metadata
    docker_labels: Optional[Dict[str, str]] = Field(default=None, alias="dockerLabels")
    log_configuration: Optional[LogConfiguration] = Field(default=None, alias="logConfiguration")


class TaskDefinition(SourceModel):
    """
    A task definition: one or more containers scheduled together.
    """
    family: Optional[str] = None
    revision: Optional[int] = None
    container_definitions: List[ContainerDefinition] = Field(default=[], alias="containerDefinitions")
