"""
Models for Compose services, including ulimits, health checks, and logging.
"""
from datetime import timedelta
from typing import List, Dict, Optional
from pydantic import BaseModel


class UlimitsConfig(BaseModel):
    """
    Soft and hard values for one resource limit.
    """
    soft: int
    hard: int


class HealthCheckConfig(BaseModel):
    """
    Defines a command to run to check the health of a service.
    """
    test: List[str]
    retries: Optional[int] = None
    interval: Optional[timedelta] = None
    timeout: Optional[timedelta] = None
    start_period: Optional[timedelta] = None


class LoggingConfig(BaseModel):
    """
    Logging driver for a service.
    """
    driver: str
    options: Dict[str, str] = {}


class ServiceConfig(BaseModel):
    """
    The full definition of a single Compose service, translated from a container definition.
    """
    name: Optional[str] = None
    image: Optional[str] = None

    # Execution
    command: Optional[List[str]] = None
    entrypoint: Optional[List[str]] = None
    working_dir: Optional[str] = None
    user: Optional[str] = None
    init: Optional[bool] = None

    # Environment
    environment: Dict[str, Optional[str]] = {}

    # Networking
    hostname: Optional[str] = None
    links: Optional[List[str]] = None
    dns: Optional[List[str]] = None
    dns_search: Optional[List[str]] = None
    extra_hosts: List[str] = []

    # Security
    security_opt: Optional[List[str]] = None
    tty: Optional[bool] = None
    privileged: Optional[bool] = None
    read_only: Optional[bool] = None
    cap_add: Optional[List[str]] = None
    cap_drop: Optional[List[str]] = None

    # Resources
    ulimits: Dict[str, UlimitsConfig] = {}
    devices: Optional[List[str]] = None
    tmpfs: Optional[List[str]] = None
    shm_size: Optional[str] = None

    # Lifecycle
    health_check: Optional[HealthCheckConfig] = None

    # Metadata
    labels: Dict[str, str] = {}
    logging: Optional[LoggingConfig] = None
