"""
Command Line Interface for TD2C.
"""
import click
import yaml
from ..PARSERS.task_definition_parser import TaskDefinitionParser
from ..CONVERTERS.to_compose import convert_to_compose
from ..CONVERTERS.to_compose_yaml import render_compose
from ..UTILS.logging_setup import setup_logging

@click.group()
@click.option('--file', '-f', default='task-definition.json', help='Task definition file path')
@click.option('--verbose', '-v', is_flag=True, help='Log conversion details to stderr')
@click.pass_context
def cli(ctx, file, verbose):
    """
    TD2C - Task definition to Compose converter.

    Translates a container task definition into a docker-compose file
    for running the same containers locally.
    """
    ctx.ensure_object(dict)
    ctx.obj['file'] = file
    if verbose:
        setup_logging()

@cli.command()
@click.pass_context
def convert(ctx):
    """Print the Compose file for the task definition."""
    path = ctx.obj['file']
    try:
        task_definition = TaskDefinitionParser().parse(path)
        config = convert_to_compose(task_definition)
        click.echo(render_compose(config), nl=False)
    except FileNotFoundError:
        click.echo(f"Error: {path} not found.", err=True)
        ctx.exit(1)
    except OSError as e:
        click.echo(f"Error: cannot read {path}: {e.strerror}", err=True)
        ctx.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})

if __name__ == '__main__':
    main()
