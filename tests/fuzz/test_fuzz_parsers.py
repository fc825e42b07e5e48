import random
import string
import pytest
import yaml
from td2c.PARSERS.task_definition_parser import TaskDefinitionParser
from td2c.CONVERTERS.to_compose import convert_to_compose

def random_string(rng, length):
    return ''.join(rng.choice(string.printable) for _ in range(length))

def test_fuzz_task_definition_parser():
    """Random input either parses or fails with a document error."""
    rng = random.Random(1234)
    parser = TaskDefinitionParser()
    for _ in range(100):
        content = random_string(rng, rng.randint(0, 1000))
        try:
            convert_to_compose(parser.parse_from_string(content))
        except (ValueError, yaml.YAMLError):
            pass

def test_edge_cases_parser():
    parser = TaskDefinitionParser()

    # Only whitespace
    with pytest.raises(ValueError):
        parser.parse_from_string("   \n\t  ")

    # Scalar document
    with pytest.raises(ValueError):
        parser.parse_from_string("nginx")

    # No containers
    task = parser.parse_from_string("family: empty")
    assert convert_to_compose(task).services == []

    # Many containers
    content = "containerDefinitions:\n" + "".join(
        f"  - name: c{i}\n    image: busybox\n" for i in range(500)
    )
    assert len(convert_to_compose(parser.parse_from_string(content)).services) == 500
