# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Converters for translating task definitions into local Compose services.

Every function here is pure: inputs are never mutated and nothing is shared
between calls.
"""
import logging
from datetime import timedelta
from typing import List, Dict, Optional

from ..MODELS.task_definition import (
    ContainerDefinition,
    Device,
    DevicePermission,
    HealthCheck,
    HostEntry,
    KernelCapabilities,
    KeyValuePair,
    LogConfiguration,
    TaskDefinition,
    Tmpfs,
    Ulimit,
)
from ..MODELS.service_definition import (
    HealthCheckConfig,
    LoggingConfig,
    ServiceConfig,
    UlimitsConfig,
)
from ..MODELS.compose_config import ComposeConfig
from ..UTILS.size_format import format_mib

logger = logging.getLogger(__name__)

# Abbreviation order for device permissions: read, write, mknod.
DEVICE_PERMISSION_ABBREVIATIONS = [
    (DevicePermission.READ, "r"),
    (DevicePermission.WRITE, "w"),
    (DevicePermission.MKNOD, "m"),
]


class ConversionError(ValueError):
    """
    Raised when a container definition cannot be expressed as a Compose service.
    """

    def __init__(self, message: str, field: Optional[str] = None,
                 index: Optional[int] = None, container: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.index = index
        self.container = container


def convert_to_compose(task_definition: TaskDefinition) -> ComposeConfig:
    """
    Converts every container of a task definition into a Compose project.

    :param task_definition: The task definition to convert.
    :return: A Compose project with one service per container, in container order.
    :raises ConversionError: On the first container that cannot be converted.
    """
    services = []
    for container_definition in task_definition.container_definitions:
        try:
            services.append(convert_to_compose_service(container_definition))
        except ConversionError as e:
            raise ConversionError(
                f"container {container_definition.name!r}: {e}",
                field=e.field,
                index=e.index,
                container=container_definition.name,
            ) from e
    return ComposeConfig(services=services)


def convert_to_compose_service(container_definition: ContainerDefinition) -> ServiceConfig:
    """
    Converts a single container definition into a Compose service.

    :param container_definition: The container definition to convert.
    :return: The equivalent Compose service.
    :raises ConversionError: If a tmpfs mount lacks a path or a size.
    """
    logger.debug("Converting container definition %s", container_definition.name)

    linux_parameters = container_definition.linux_parameters
    init = None
    shm_size = None
    cap_add = None
    cap_drop = None
    devices = None
    tmpfs = None
    if linux_parameters is not None:
        init = linux_parameters.init_process_enabled
        shm_size = convert_shm_size(linux_parameters.shared_memory_size)
        if linux_parameters.capabilities is not None:
            cap_add = convert_cap_add(linux_parameters.capabilities)
            cap_drop = convert_cap_drop(linux_parameters.capabilities)
        if linux_parameters.devices is not None:
            devices = convert_devices(linux_parameters.devices)
        if linux_parameters.tmpfs is not None:
            tmpfs = convert_to_tmpfs(linux_parameters.tmpfs)

    return ServiceConfig(
        name=container_definition.name,
        image=container_definition.image,
        command=_copy(container_definition.command),
        entrypoint=_copy(container_definition.entry_point),
        working_dir=container_definition.working_directory,
        user=container_definition.user,
        init=init,
        environment=convert_environment(container_definition.environment or []),
        hostname=container_definition.hostname,
        links=_copy(container_definition.links),
        dns=_copy(container_definition.dns_servers),
        dns_search=_copy(container_definition.dns_search_domains),
        extra_hosts=convert_extra_hosts(container_definition.extra_hosts or []),
        security_opt=_copy(container_definition.docker_security_options),
        tty=container_definition.pseudo_terminal,
        privileged=container_definition.privileged,
        read_only=container_definition.readonly_root_filesystem,
        cap_add=cap_add,
        cap_drop=cap_drop,
        ulimits=convert_ulimits(container_definition.ulimits or []),
        devices=devices,
        tmpfs=tmpfs,
        shm_size=shm_size,
        health_check=convert_health_check(container_definition.health_check),
        labels=convert_docker_labels(container_definition.docker_labels or {}),
        logging=convert_logging(container_definition.log_configuration),
    )


def convert_ulimits(ulimits: List[Ulimit]) -> Dict[str, UlimitsConfig]:
    """
    Maps each limit name to its soft/hard pair. A repeated name keeps the last pair.
    """
    compose_ulimits = {}
    for ulimit in ulimits:
        compose_ulimits[ulimit.name] = UlimitsConfig(
            soft=ulimit.soft_limit,
            hard=ulimit.hard_limit,
        )
    return compose_ulimits


def convert_to_tmpfs(tmpfs: List[Tmpfs]) -> List[str]:
    """
    Formats tmpfs mounts as '<path>:size=<size>[,<option>,...]'.

    :param tmpfs: The tmpfs mounts of a container.
    :return: One mount string per entry.
    :raises ConversionError: If an entry has no container path, or no size.
        A size of zero counts as no size.
    """
    mounts = []
    for index, mount in enumerate(tmpfs):
        if not mount.container_path:
            raise ConversionError(
                f"tmpfs entry {index} is missing a container path",
                field="containerPath",
                index=index,
            )
        if not mount.size:
            raise ConversionError(
                f"tmpfs entry {index} ({mount.container_path}) is missing a size",
                field="size",
                index=index,
            )

        options = [f"size={format_mib(mount.size)}"]
        options.extend(mount.mount_options or [])
        mounts.append(f"{mount.container_path}:{','.join(options)}")
    return mounts


def convert_devices(devices: List[Device]) -> List[str]:
    """
    Formats devices as 'host[:container[:permissions]]', e.g. '/dev/sda:/dev/xvdc:rw'.
    """
    compose_devices = []
    for device in devices:
        if not device.container_path:
            compose_devices.append(device.host_path)
            continue

        mapping = f"{device.host_path}:{device.container_path}"
        if device.permissions:
            mapping += ":" + _abbreviate_permissions(device.permissions)
        compose_devices.append(mapping)
    return compose_devices


def _abbreviate_permissions(permissions: List[DevicePermission]) -> str:
    granted = set(permissions)
    return "".join(abbrev for permission, abbrev in DEVICE_PERMISSION_ABBREVIATIONS
                   if permission in granted)


def convert_shm_size(shared_memory_size: Optional[int]) -> Optional[str]:
    """
    Formats a shared memory size in MiB, e.g. 1024 -> '1GiB'.
    """
    return format_mib(shared_memory_size)


def convert_cap_add(capabilities: KernelCapabilities) -> Optional[List[str]]:
    return _copy(capabilities.add)


def convert_cap_drop(capabilities: KernelCapabilities) -> Optional[List[str]]:
    return _copy(capabilities.drop)


def convert_docker_labels(docker_labels: Dict[str, str]) -> Dict[str, str]:
    return dict(docker_labels)


def convert_environment(environment: List[KeyValuePair]) -> Dict[str, Optional[str]]:
    """
    Maps variable names to values. A repeated name keeps the last value.
    """
    return {pair.name: pair.value for pair in environment}


def convert_extra_hosts(extra_hosts: List[HostEntry]) -> List[str]:
    """
    Formats host entries as 'hostname:ip', keeping their order.
    """
    return [f"{host.hostname}:{host.ip_address}" for host in extra_hosts]


def convert_health_check(health_check: Optional[HealthCheck]) -> Optional[HealthCheckConfig]:
    """
    Converts a health check, turning second counts into durations.
    Unset numeric fields stay unset.
    """
    if health_check is None:
        return None

    return HealthCheckConfig(
        test=list(health_check.command),
        retries=health_check.retries,
        interval=_seconds(health_check.interval),
        timeout=_seconds(health_check.timeout),
        start_period=_seconds(health_check.start_period),
    )


def convert_logging(log_configuration: Optional[LogConfiguration]) -> Optional[LoggingConfig]:
    if log_configuration is None:
        return None

    return LoggingConfig(
        driver=log_configuration.log_driver,
        options=dict(log_configuration.options),
    )


def _seconds(value: Optional[int]) -> Optional[timedelta]:
    if value is None:
        return None
    return timedelta(seconds=value)


def _copy(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return list(values)
