import json
import logging
import pytest
import yaml
from click.testing import CliRunner
from td2c.CLI.main import cli

TASK_DEFINITION = {
    'taskDefinition': {
        'family': 'fargate-task-definition',
        'containerDefinitions': [
            {
                'name': 'web',
                'image': 'nginx',
                'extraHosts': [{'hostname': 'somehost', 'ipAddress': '162.242.195.82'}],
                'healthCheck': {'command': ['CMD-SHELL', 'echo hello'], 'timeout': 10},
                'linuxParameters': {
                    'tmpfs': [{'containerPath': '/run', 'mountOptions': ['rw'], 'size': 64}],
                },
            },
        ],
    },
}

@pytest.fixture
def task_file(tmp_path):
    path = tmp_path / "task-definition.json"
    with open(path, 'w') as f:
        json.dump(TASK_DEFINITION, f)
    return str(path)

def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'Task definition to Compose' in result.output

def test_cli_convert(task_file):
    runner = CliRunner()
    result = runner.invoke(cli, ['-f', task_file, 'convert'])
    assert result.exit_code == 0
    data = yaml.safe_load(result.output)
    web = data['services']['web']
    assert web['extra_hosts'] == ['somehost:162.242.195.82']
    assert web['healthcheck'] == {'test': ['CMD-SHELL', 'echo hello'], 'timeout': '10s'}
    assert web['tmpfs'] == ['/run:size=64MiB,rw']

def test_cli_convert_no_file():
    runner = CliRunner()
    result = runner.invoke(cli, ['-f', 'non_existent.json', 'convert'])
    assert result.exit_code == 1
    assert 'Error: non_existent.json not found.' in result.output

def test_cli_convert_invalid_tmpfs(tmp_path):
    path = tmp_path / "task-definition.json"
    path.write_text(json.dumps({'containerDefinitions': [
        {'name': 'web', 'linuxParameters': {'tmpfs': [{'containerPath': '/run'}]}}
    ]}))
    runner = CliRunner()
    result = runner.invoke(cli, ['-f', str(path), 'convert'])
    assert result.exit_code == 1
    assert 'missing a size' in result.output

@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)

def test_cli_convert_verbose(task_file, caplog, restore_root_logger):
    runner = CliRunner()
    result = runner.invoke(cli, ['-v', '-f', task_file, 'convert'])
    assert result.exit_code == 0
    messages = [r.getMessage() for r in caplog.records]
    assert 'Converting container definition web' in messages

def test_cli_convert_directory(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ['-f', str(tmp_path), 'convert'])
    assert result.exit_code == 1
    assert 'Error: cannot read' in result.output
    assert 'Traceback' not in result.output

def test_cli_convert_duplicate_names(tmp_path):
    path = tmp_path / "task-definition.json"
    path.write_text(json.dumps({'containerDefinitions': [
        {'name': 'web', 'image': 'a'},
        {'name': 'web', 'image': 'b'},
    ]}))
    runner = CliRunner()
    result = runner.invoke(cli, ['-f', str(path), 'convert'])
    assert result.exit_code == 1
    assert "Error: Service name 'web' is used more than once" in result.output
