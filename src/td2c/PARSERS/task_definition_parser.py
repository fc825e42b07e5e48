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
Parsers for task definition documents (JSON or YAML).
"""
import json
import logging
import yaml
from typing import Dict, Any
from ..MODELS.task_definition import TaskDefinition

logger = logging.getLogger(__name__)

# Key wrapping the task definition in a describe-task-definition response.
ENVELOPE_KEY = "taskDefinition"


class TaskDefinitionParser:
    """
    Parser for task definition files.
    """

    def parse(self, path: str) -> TaskDefinition:
        """
        Parses a task definition from a path.

        :param path: Path to the task definition file.
        :return: Parsed task definition.
        """
        with open(path, 'r') as f:
            content = f.read()
        return self.parse_from_string(content)

    def parse_from_string(self, content: str) -> TaskDefinition:
        """
        Parses a task definition from a string.

        Accepts either the bare task definition or the describe-task-definition
        response that wraps it under 'taskDefinition'.

        :param content: JSON or YAML content.
        :return: Parsed task definition.
        :raises ValueError: If the document is empty or not a mapping.
        """
        if not content.strip():
            raise ValueError("Task definition document is empty")

        # Tab-indented JSON does not load as YAML
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            data = yaml.safe_load(content)
        if not data:
            raise ValueError("Task definition document is empty")
        if not isinstance(data, dict):
            raise ValueError(f"Task definition must be a mapping, got {type(data).__name__}")

        data = self._unwrap(data)
        task_definition = TaskDefinition.model_validate(data)
        logger.debug("Parsed task definition %s with %d containers",
                     task_definition.family, len(task_definition.container_definitions))
        return task_definition

    def _unwrap(self, data: Dict[str, Any]) -> Dict[str, Any]:
        envelope = data.get(ENVELOPE_KEY)
        if isinstance(envelope, dict):
            return envelope
        return data
