import logging

from .context import Context
from .compose import ComposeApi
from .sequencer import CommandSequencer


_logger = logging.getLogger(__name__)


class Environment(object):
    """
    Odoo compose environment object.

    Container holding the context and the apis used to drive an odoo
    service defined in a compose file.

    Attributes:
        context (Context): The context to use

        compose (ComposeApi): Api forwarding calls to docker compose.
    """

    def __init__(
        self,
        context=None,
    ):
        if context is None:
            context = Context.from_env()

        self.context = context
        self.compose = ComposeApi(self)

    def sequencer(self, echo=None):
        return CommandSequencer(self, echo=echo)

    def apply(self, invocation, echo=None):
        """
        Apply the invocation and restart the service.

        See :meth:`CommandSequencer.run`.
        """
        _logger.debug("Applying %r", invocation)
        return self.sequencer(echo=echo).run(invocation)
