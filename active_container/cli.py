"""CLI for inspecting wrapper resolution."""

import importlib
import logging

import click

from active_container.config import configure
from active_container.delegates import WrapDelegate
from active_container.exceptions import ActiveContainerError
from active_container.logging import set_level
from active_container.registry import registry
from active_container.wrapper import Wrapper


def _qualified(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _load_modules(modules: tuple[str, ...]) -> None:
    for module_name in modules:
        try:
            importlib.import_module(module_name)
        except ImportError as ex:
            raise click.ClickException(f"Cannot import {module_name}: {ex}")
        if module_name not in registry.modules:
            registry.modules.append(module_name)


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False))
@click.option("--profile")
@click.option("--debug", is_flag=True)
def cli(config_path, profile, debug):
    """Inspects model and wrapper classes."""
    if debug:
        set_level(logging.DEBUG)
    try:
        configure(path=config_path, profile=profile)
    except ActiveContainerError as ex:
        raise click.ClickException(str(ex))


@cli.command()
@click.argument("name")
@click.option("--module", "-m", "modules", multiple=True)
def resolve(name: str, modules: tuple[str, ...]):
    """Resolves a model name to its wrapper, or a wrapper name to its model."""
    _load_modules(modules)
    try:
        if name.endswith(registry.suffix):
            wrapper_class = registry.lookup(name)
            if not issubclass(wrapper_class, Wrapper):
                raise click.ClickException(f"{name} is not a wrapper class")
            object_class = wrapper_class.object_class()
            if object_class is None:
                raise click.ClickException(f"{name} has no object class")
            click.echo(_qualified(object_class))
        else:
            click.echo(_qualified(registry.lookup(registry.wrapper_name(name))))
    except ActiveContainerError as ex:
        raise click.ClickException(str(ex))


@cli.command()
@click.option("--module", "-m", "modules", multiple=True)
def show(modules: tuple[str, ...]):
    """Lists registered wrappers with their models and delegates."""
    _load_modules(modules)
    for name in registry.names():
        cls = registry.lookup(name)
        if not issubclass(cls, Wrapper):
            continue
        try:
            model = _qualified(cls.object_class())
        except ActiveContainerError:
            model = "?"

        delegated = cls.delegated()
        wrapping = sorted(
            n for n, d in delegated.items() if isinstance(d, WrapDelegate)
        )
        plain = sorted(n for n in delegated if n not in wrapping)
        line = f"{name} -> {model} delegates: {', '.join(plain)}"
        if wrapping:
            line += f" wraps: {', '.join(wrapping)}"
        click.echo(line)


if __name__ == "__main__":
    cli()  # pragma: no cover
