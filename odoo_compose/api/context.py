from pathlib import Path

from ..compat import split
from ..env import EnvironmentVariables


class Context(object):
    """
    The context in which you use the Environment.

    The context is usually loaded from the environment variables of
    the running process and then refined by command line options.

    Attributes:

        service (str): Name of the compose service running odoo.

        compose_path (Path): Directory in which compose commands are run.
            When ``None``, the current working directory is used.

        compose_command (List<str>): The program and arguments used to
            call docker compose.

        odoo_bin (str): Odoo executable inside the container.

        strict_files (bool): Require a compose file to be present in
            the compose path before running anything.
    """
    def __init__(
        self,
        service='odoo',
        compose_path=None,
        compose_command=None,
        odoo_bin='odoo',
        strict_files=True,
    ):
        if compose_command is None:
            compose_command = ['docker', 'compose']

        if isinstance(compose_command, str):
            compose_command = split(compose_command)

        self.service = service
        self.compose_path = Path(compose_path) if compose_path else None
        self.compose_command = list(compose_command)
        self.odoo_bin = odoo_bin
        self.strict_files = strict_files

    @classmethod
    def from_env(klass, envvars=None):
        """
        Creates a ``Context`` from environment variables.
        """
        if envvars is None:
            envvars = EnvironmentVariables()

        args = {}

        if envvars.ODOO_COMPOSE_SERVICE:
            args['service'] = envvars.ODOO_COMPOSE_SERVICE

        if envvars.ODOO_COMPOSE_PATH:
            args['compose_path'] = Path(envvars.ODOO_COMPOSE_PATH)

        if envvars.ODOO_COMPOSE_COMMAND:
            args['compose_command'] = envvars.ODOO_COMPOSE_COMMAND

        if envvars.ODOO_COMPOSE_ODOO_BIN:
            args['odoo_bin'] = envvars.ODOO_COMPOSE_ODOO_BIN

        args['strict_files'] = envvars.ODOO_COMPOSE_STRICT_FILES

        return Context(**args)
