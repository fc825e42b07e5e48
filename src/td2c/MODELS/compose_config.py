"""
Models for a complete local Compose project.
"""
from typing import List
from pydantic import BaseModel
from .service_definition import ServiceConfig

COMPOSE_FILE_VERSION = "3.4"


class ComposeConfig(BaseModel):
    """
    Complete configuration for a multi-service stack.
    Equivalent to a docker-compose.yml file.
    """
    version: str = COMPOSE_FILE_VERSION
    services: List[ServiceConfig] = []
