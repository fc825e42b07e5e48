"""
Converters for rendering Compose projects as docker-compose YAML.
"""
import logging
from datetime import timedelta
from typing import Any, Dict, Optional

import yaml

from ..MODELS.compose_config import ComposeConfig
from ..MODELS.service_definition import HealthCheckConfig, ServiceConfig

logger = logging.getLogger(__name__)


def render_compose(config: ComposeConfig) -> str:
    """
    Renders a Compose project as a YAML document.

    Unset fields, empty lists and empty mappings are left out. Keys are sorted
    so the same project always renders to the same text.

    :param config: The Compose project.
    :return: The YAML document.
    :raises ValueError: If a service has no name to key it by, or two services share a name.
    """
    services = {}
    for position, svc in enumerate(config.services):
        if not svc.name:
            raise ValueError(f"Service at position {position} has no name")
        if svc.name in services:
            raise ValueError(f"Service name {svc.name!r} is used more than once")
        services[svc.name] = service_to_dict(svc)

    logger.debug("Rendering %d services", len(services))
    return yaml.safe_dump(
        {"version": config.version, "services": services},
        default_flow_style=False,
        sort_keys=True,
    )


def service_to_dict(svc: ServiceConfig) -> Dict[str, Any]:
    """
    Builds the docker-compose mapping for a single service.

    :param svc: The service to render.
    :return: A mapping using Compose file keys.
    """
    data = {
        "container_name": svc.name,
        "image": svc.image,
        "command": svc.command,
        "entrypoint": svc.entrypoint,
        "working_dir": svc.working_dir,
        "user": svc.user,
        "init": svc.init,
        "environment": dict(svc.environment),
        "hostname": svc.hostname,
        "links": svc.links,
        "dns": svc.dns,
        "dns_search": svc.dns_search,
        "extra_hosts": svc.extra_hosts,
        "security_opt": svc.security_opt,
        "tty": svc.tty,
        "privileged": svc.privileged,
        "read_only": svc.read_only,
        "cap_add": svc.cap_add,
        "cap_drop": svc.cap_drop,
        "ulimits": {name: {"soft": u.soft, "hard": u.hard} for name, u in svc.ulimits.items()},
        "devices": svc.devices,
        "tmpfs": svc.tmpfs,
        "shm_size": svc.shm_size,
        "healthcheck": _health_check_to_dict(svc.health_check),
        "labels": dict(svc.labels),
        "logging": None,
    }
    if svc.logging is not None:
        data["logging"] = _drop_empty({
            "driver": svc.logging.driver,
            "options": dict(svc.logging.options),
        })
    return _drop_empty(data)


def _health_check_to_dict(health_check: Optional[HealthCheckConfig]) -> Optional[Dict[str, Any]]:
    if health_check is None:
        return None
    return _drop_empty({
        "test": list(health_check.test),
        "retries": health_check.retries,
        "interval": format_duration(health_check.interval),
        "timeout": format_duration(health_check.timeout),
        "start_period": format_duration(health_check.start_period),
    })


def format_duration(duration: Optional[timedelta]) -> Optional[str]:
    """
    Formats a duration as a Compose duration string, e.g. 90 seconds -> '90s'.
    Sub-second durations are written in milliseconds.
    """
    if duration is None:
        return None
    total = duration.total_seconds()
    if total == int(total):
        return f"{int(total)}s"
    return f"{int(round(total * 1000))}ms"


def _drop_empty(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None and v != [] and v != {}}
