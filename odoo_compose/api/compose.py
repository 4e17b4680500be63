import logging

from ..compat import pipe

_logger = logging.getLogger(__name__)


COMPOSE_FILES = (
    'compose.yaml',
    'compose.yml',
    'docker-compose.yaml',
    'docker-compose.yml',
)


class ComposeApi(object):
    """
    Forward calls to the docker compose command line.

    Every call blocks until the external process exits and returns
    its returncode. Commands are run in the current working directory.
    """
    def __init__(self, environment):
        self.environment = environment

    @property
    def command(self):
        return list(self.environment.context.compose_command)

    def find_compose_file(self, path):
        for filename in COMPOSE_FILES:
            compose_file = path / filename
            if compose_file.is_file():
                _logger.debug("Found compose file %s", compose_file)
                return compose_file

        return None

    def run_one_off(self, service, args, env=None):
        cmd = self.command + ['run', '--rm']

        for key, value in (env or {}).items():
            cmd += ['-e', "{}={}".format(key, value)]

        cmd.append(service)
        cmd += list(args)

        return pipe(cmd)

    def stop(self, service):
        return pipe(self.command + ['stop', service])

    def start_detached(self, service):
        return pipe(self.command + ['up', '-d', service])
