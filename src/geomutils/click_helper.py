"""
Command line helpers.
1. Load all commands which are defined in `geomutils.commands` package,
   each command is defined in separate module.
2. Parse and execute whatever is given in command line.
Also contains click parameter types for geometry values.
"""
import dataclasses
import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Callable, Dict, Iterable, List, Optional

import click

from geomutils.config import GeometryConfig, load_config
from geomutils.errors import Error
from geomutils.geometry import Point, Rect, Size

LOG = logging.getLogger(__name__)


@click.group()
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with default precision, scaling and alignment.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def _root(ctx, config_path, verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = load_config(config_path) if config_path else GeometryConfig()


@dataclasses.dataclass
class CollectedCommand:
    name: str
    action_module: ModuleType


CollectedCommandsType = Dict[str, CollectedCommand]

# Lets negative numbers like "-1" or "-5,-5,4,4" be passed as arguments.
NUMERIC_ARGS = dict(ignore_unknown_options=True)


class _NumbersType(click.ParamType):
    """
    Comma separated numbers, e.g. "0,0,10,20".
    Subclasses set `factory` which builds value out of parsed numbers.
    """
    arity_names = ()
    factory: Callable

    def convert(self, value, param, ctx):
        if isinstance(value, (Point, Size, Rect)):
            return value

        parts = [p.strip() for p in str(value).split(",")]
        if len(parts) != len(self.arity_names):
            self.fail(
                f"expected {','.join(self.arity_names)}, got {value!r}", param, ctx
            )
        try:
            numbers = [float(p) for p in parts]
        except ValueError:
            self.fail(f"{value!r} contains non-numeric values", param, ctx)

        return type(self).factory(*numbers)


class RectType(_NumbersType):
    name = "rect"
    arity_names = ("x", "y", "w", "h")
    factory = Rect.from_xywh


class SizeType(_NumbersType):
    name = "size"
    arity_names = ("w", "h")
    factory = Size.from_wh


class PointType(_NumbersType):
    name = "point"
    arity_names = ("x", "y")
    factory = Point.from_xy


RECT = RectType()
SIZE = SizeType()
POINT = PointType()


def enum_choice(enum_type):
    return click.Choice([m.name.lower() for m in enum_type], case_sensitive=False)


def format_vec(values: Iterable[float]) -> str:
    return ",".join(f"{v:g}" for v in values)


def _collect_commands(commands_module) -> CollectedCommandsType:
    LOG.debug("Collecting commands...")
    discovered_actions = {}

    for m in pkgutil.iter_modules(commands_module.__path__):
        action_name = m.name
        module_str = ".".join([commands_module.__name__, m.name])
        LOG.debug(f"    '{action_name}'")
        action_module = importlib.import_module(module_str)

        module_commands: Iterable[click.Command] = inspect.getmembers(
            action_module, lambda obj: isinstance(obj, click.Command)
        )

        for cmd_name, cmd in module_commands:
            cmd_descr = CollectedCommand(
                cmd_name, action_module
            )
            _root.add_command(cmd)
            discovered_actions[cmd_name] = cmd_descr

    return discovered_actions


def parse_and_run(commands_module, args: Optional[List[str]] = None) -> int:
    """
    1. Load all commands which are defined in given package.
       Each command should be defined in separate module.
    2. Parse and execute whatever is given in command line.
    Example:
    ```
    from geomutils import commands
    from geomutils.click_helper import parse_and_run

    if __name__ == "__main__":
        sys.exit(parse_and_run(commands))
    ```

    :param commands_module: module instance commands are defined in
    :param args: command line arguments, `sys.argv[1:]` if not set
    :return: exit code
    """
    try:
        _collect_commands(commands_module)
        res = _root.main(args=args, prog_name="geomutils", standalone_mode=False)
        # --help and friends report their exit code as a result
        return res if isinstance(res, int) else 0
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except Error as e:
        LOG.error(f"Error: {e.message}")
        return e.exitcode
