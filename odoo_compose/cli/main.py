import click
import logging

from ..api.environment import Environment
from ..api.invocation import Invocation
from ..configuration.misc import setup_logger
from ..exceptions import SequenceError
from .utils import MODULE_TYPE, env_callback, path_complete


_logger = logging.getLogger(__name__)


@click.command(
    help=(
        "Install or update modules in a database using a one-off "
        "container, then restart the odoo service."
    )
)
@click.option(
    '-i',
    '--install',
    type=MODULE_TYPE,
    help="Comma separated modules to install",
)
@click.option(
    '-u',
    '--update',
    type=MODULE_TYPE,
    help="Comma separated modules to update",
)
@click.option(
    '-d',
    '--database',
    help="Database name",
)
@click.option(
    '-dcp',
    '--compose-path',
    help="Directory containing the compose file, defaults to cwd",
    type=click.Path(file_okay=False),
    shell_complete=path_complete,
)
@click.option(
    '-s',
    '--service',
    help="Compose service running odoo",
)
@click.option(
    '-e',
    '--env',
    help="KEY=VALUE passed to the one-off container",
    multiple=True,
    callback=env_callback,
)
@click.option('--log-level')
@click.pass_context
def command(
    ctx,
    install,
    update,
    database,
    compose_path,
    service,
    env,
    log_level
):
    if log_level:
        logging.basicConfig(level=log_level.upper())
    else:
        setup_logger()

    odoo_env = Environment()

    if service:
        odoo_env.context.service = service

    try:
        invocation = Invocation.parse(
            install=install,
            update=update,
            database=database,
            compose_path=compose_path or odoo_env.context.compose_path,
            env=env,
        )
        odoo_env.apply(invocation, echo=click.echo)
    except SequenceError as exc:
        _logger.debug("Sequence aborted", exc_info=True)
        click.echo("Error: {}".format(exc), err=True)
        ctx.exit(exc.exit_code)

    click.echo(
        "Modules {} applied on {}, service {} restarted".format(
            invocation.action.csv,
            invocation.database,
            odoo_env.context.service
        )
    )
