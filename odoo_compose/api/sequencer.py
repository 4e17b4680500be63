import logging
from collections import namedtuple

from ..compat import signal_name
from ..configuration.misc import cd
from ..exceptions import (
    ApplyFailed,
    InvalidPath,
    MissingAction,
    MissingDatabase,
    StartFailed,
    StopFailed,
)
from .invocation import Action

_logger = logging.getLogger(__name__)

APPLY = 'apply'
STOP = 'stop'
START = 'start'

# Returncode used when the external program can't be launched at all.
NOT_EXECUTED = 127


class StepResult(namedtuple('StepResult', ['step', 'returncode', 'reason'])):
    __slots__ = ()

    @property
    def ok(self):
        return self.returncode == 0

    @classmethod
    def from_returncode(klass, step, returncode):
        if returncode == 0:
            reason = None
        elif returncode < 0:
            reason = "killed by {}".format(signal_name(-returncode))
        else:
            reason = "exited with code {}".format(returncode)

        return klass(step, returncode, reason)


class CommandSequencer(object):
    """
    Apply modules then restart the odoo service.

    The three steps are executed in order from inside the compose path
    and each one only runs if the previous one succeeded. Nothing is
    retried or rolled back: if stopping or starting the service fails
    after the modules were applied, the service is left as is.

    Parameters:
        environment (Environment): Environment providing the compose api
            and the context.
        echo (callable): Called with each progress message. Defaults to
            :func:`print`.
    """

    def __init__(self, environment, echo=None):
        self.environment = environment
        self.echo = echo or print

    @property
    def compose(self):
        return self.environment.compose

    @property
    def service(self):
        return self.environment.context.service

    def resolve_path(self, invocation):
        path = invocation.compose_path

        try:
            path = path.expanduser().resolve(strict=True)
        except (OSError, RuntimeError):
            raise InvalidPath(
                "Compose path {} does not exist".format(path)
            )

        if not path.is_dir():
            raise InvalidPath(
                "Compose path {} is not a directory".format(path)
            )

        if (
            self.environment.context.strict_files and
            self.compose.find_compose_file(path) is None
        ):
            raise InvalidPath(
                "No compose file found in {}".format(path)
            )

        return path

    def apply_args(self, invocation):
        action = invocation.action

        return [
            self.environment.context.odoo_bin,
            '-d', invocation.database,
            action.flag, action.csv,
            '--stop-after-init',
        ]

    def run(self, invocation):
        """
        Run the apply, stop and start steps for the invocation.

        Returns:
            List<StepResult>: The result of the three steps.

        Raises:
            PreflightError: The invocation can't be run. No external
                command was called.
            StepFailed: One of the steps returned a non zero code. Later
                steps weren't called.
        """
        if not isinstance(invocation.action, Action):
            raise MissingAction("One of install or update is required")

        if not invocation.database:
            raise MissingDatabase("A database name is required")

        path = self.resolve_path(invocation)

        _logger.info(
            "Running %s of %s on %s in %s",
            invocation.action.kind,
            invocation.action.csv,
            invocation.database,
            path
        )

        results = []

        with cd(path):
            results.append(
                self._step(
                    APPLY,
                    ApplyFailed,
                    "{} modules {} on database {}".format(
                        invocation.action.kind.capitalize(),
                        invocation.action.csv,
                        invocation.database,
                    ),
                    self.compose.run_one_off,
                    self.service,
                    self.apply_args(invocation),
                    invocation.env
                )
            )

            results.append(
                self._step(
                    STOP,
                    StopFailed,
                    "Stop service {}".format(self.service),
                    self.compose.stop,
                    self.service
                )
            )

            results.append(
                self._step(
                    START,
                    StartFailed,
                    "Start service {}".format(self.service),
                    self.compose.start_detached,
                    self.service
                )
            )

        return results

    def _step(self, step, error, message, func, *args):
        self.echo("{}...".format(message))

        try:
            returncode = func(*args)
        except OSError as exc:
            _logger.error("Step %s couldn't be executed: %s", step, exc)
            result = StepResult(step, NOT_EXECUTED, str(exc))
        else:
            result = StepResult.from_returncode(step, returncode)

        if not result.ok:
            self.echo("{}: failed ({})".format(message, result.reason))
            raise error(result)

        self.echo("{}: done".format(message))

        return result
