import click
from pathlib import Path

from ..utils import module_list, parse_env_pairs


def path_complete(ctx, param, incomplete):
    current_path = Path(incomplete)

    if current_path.exists():
        base_path = current_path
    else:
        base_path = current_path.parent

    paths = [str(base_path)]
    for path in base_path.iterdir():
        if path.is_dir():
            paths.append(str(path))

    return paths


class ModuleType(click.ParamType):
    name = "modules"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value

        return module_list(value)


def env_callback(ctx, param, value):
    try:
        return parse_env_pairs(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc))


MODULE_TYPE = ModuleType()
