from collections import namedtuple
from pathlib import Path

from ..exceptions import ConflictingAction, MissingAction, MissingDatabase
from ..utils import module_list

INSTALL = 'install'
UPDATE = 'update'

ODOO_FLAGS = {
    INSTALL: '-i',
    UPDATE: '-u',
}


class Action(namedtuple('Action', ['kind', 'modules'])):
    """
    What to do with which modules.

    Only built through :meth:`install` or :meth:`update` so an action is
    always exactly one of both.
    """
    __slots__ = ()

    @classmethod
    def install(klass, modules):
        return klass._build(INSTALL, modules)

    @classmethod
    def update(klass, modules):
        return klass._build(UPDATE, modules)

    @classmethod
    def _build(klass, kind, modules):
        modules = module_list(modules)

        if not modules:
            raise MissingAction(
                "No module to {} was provided".format(kind)
            )

        return klass(kind, modules)

    @property
    def flag(self):
        return ODOO_FLAGS[self.kind]

    @property
    def csv(self):
        return ",".join(self.modules)


class Invocation(object):
    """
    A single request to apply modules to a database.

    Attributes:
        action (Action): Install or update and the ordered list of modules.
        database (str): Database in which the modules are applied.
        compose_path (Path): Directory in which compose commands are run.
        env (tuple): ``(KEY, VALUE)`` pairs forwarded to the one-off
            container.
    """

    __slots__ = ('_action', '_database', '_compose_path', '_env')

    def __init__(self, action, database, compose_path=None, env=None):
        if not isinstance(action, Action):
            raise MissingAction("One of install or update is required")

        if not database or not database.strip():
            raise MissingDatabase("A database name is required")

        if compose_path is None:
            compose_path = Path.cwd()

        object.__setattr__(self, '_action', action)
        object.__setattr__(self, '_database', database.strip())
        object.__setattr__(self, '_compose_path', Path(compose_path))
        object.__setattr__(self, '_env', tuple(dict(env or {}).items()))

    def __setattr__(self, key, value):
        raise AttributeError("Invocation is immutable")

    def __repr__(self):
        return "Invocation({!r}, {!r}, {!r})".format(
            self._action,
            self._database,
            str(self._compose_path)
        )

    @property
    def action(self):
        return self._action

    @property
    def modules(self):
        return self._action.modules

    @property
    def database(self):
        return self._database

    @property
    def compose_path(self):
        return self._compose_path

    @property
    def env(self):
        return dict(self._env)

    @classmethod
    def parse(
        klass,
        install=None,
        update=None,
        database=None,
        compose_path=None,
        env=None
    ):
        """
        Build an invocation from raw option values.

        ``install`` and ``update`` may be a comma separated string or a
        sequence of module names. Exactly one of them must be given. An
        option counts as given when it isn't ``None``, even if it holds
        no module.
        """
        if install is not None and update is not None:
            raise ConflictingAction(
                "--install and --update can't be used together"
            )

        if install is not None:
            action = Action.install(install)
        elif update is not None:
            action = Action.update(update)
        else:
            raise MissingAction("One of --install or --update is required")

        return klass(action, database, compose_path, env)
