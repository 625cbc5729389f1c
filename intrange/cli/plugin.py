from abc import ABCMeta
from importlib import import_module
from logging import getLogger
from typing import Iterable, Optional, Any, Set

from click import Group
from typing_extensions import Protocol, runtime_checkable

_logger = getLogger(__name__)


@runtime_checkable
class Plugin(Protocol, metaclass=ABCMeta):
    def plugin_path(self) -> str:
        ...


class CliModule:
    def __init__(self, *, name: str, commands: Optional[Iterable[Any]] = None):
        self.__name = name
        self.__commands = list(commands) if commands is not None else []

    def name(self) -> str:
        return self.__name

    def commands(self) -> Set[str]:
        return {cmd.name for cmd in self.__commands}

    def install(self, group: Group):
        for cmd in self.__commands:
            if cmd.name in group.commands:
                raise RuntimeError(f"CLI module '{self.__name}' redefines the command '{cmd.name}'")

            group.add_command(cmd)


@runtime_checkable
class CliPlugin(Plugin, Protocol):
    def cli_module(self) -> CliModule:
        ...


def load(module_name: str) -> CliPlugin:
    _logger.debug("Loading plugin module %s", module_name)

    try:
        if module_name.startswith("."):
            module = import_module(module_name, "intrange")
        else:
            module = import_module(module_name)
    except ImportError:
        _logger.fatal("Plugin module %s not found", module_name)
        raise

    if not isinstance(module, CliPlugin):
        raise ValueError(f"Module {module_name} is no CLI plugin (needs plugin_path() and cli_module())")

    return module


def install(module_name: str, group: Group, installed: Set[str]):
    plugin = load(module_name)

    if plugin.plugin_path() in installed:
        _logger.error("Trying to install plugin %s (module %s), but a plugin with the same name was already installed",
                      plugin.plugin_path(), module_name)
        return

    module = plugin.cli_module()
    module.install(group)
    installed.add(plugin.plugin_path())

    _logger.debug("Installed CLI module %s with commands %s", module.name(), ", ".join(sorted(module.commands())))
