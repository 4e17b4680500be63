"""
Environment Variables
=====================
"""
from os import environ


def to_bool(value):
    if value:
        return value.lower() == 'true'
    else:
        return False


def from_bool(value):
    return str(value)


class EnvironmentVariable(property):
    def __init__(
        self,
        serializer=None,
        deserializer=None,
        default=None,
    ):
        super().__init__()
        self.__name = None
        self.serializer = serializer
        self.deserializer = deserializer
        self.default = default

    def __set_name__(self, owner, name):
        self.__name = name

    def __get__(self, owner, klass):
        # An empty value is handled like an unset variable
        value = environ.get(self.__name)

        if not value:
            if callable(self.default):
                return self.default()
            return self.default

        if self.deserializer:
            value = self.deserializer(value)

        return value

    def __set__(self, owner, value):
        if self.serializer:
            environ[self.__name] = self.serializer(value)
        else:
            environ[self.__name] = value


class StoredEnv(EnvironmentVariable):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.__name = None

    def __set_name__(self, owner, name):
        super().__set_name__(owner, name)
        owner.__fields__.add(name)
        self.__name = name

    def __get__(self, owner, klass):
        try:
            return owner._values[self.__name]
        except KeyError:
            value = super().__get__(owner, klass)
            owner._values[self.__name] = value
            return value

    def __set__(self, owner, value):
        super().__set__(owner, value)
        owner._values[self.__name] = value


class StoredBoolEnv(StoredEnv):
    deserializer = to_bool
    serializer = from_bool

    def __init__(self, **kwargs):
        kwargs['serializer'] = StoredBoolEnv.serializer
        kwargs['deserializer'] = StoredBoolEnv.deserializer
        super().__init__(**kwargs)


class EnvironmentVariables(object):
    """
    EnvironmentVariables parser

    Attributes:
        ODOO_COMPOSE_SERVICE: Name of the compose service running odoo.

        ODOO_COMPOSE_PATH: Directory holding the compose file. Defaults
            to the current working directory.

        ODOO_COMPOSE_COMMAND: Command used to call docker compose. It is
            split like a shell would, so ``docker-compose`` or
            ``podman compose`` can be used as well.

        ODOO_COMPOSE_ODOO_BIN: Odoo executable inside the container.

        ODOO_COMPOSE_STRICT_FILES: When TRUE (the default), refuse to run
            in a directory that doesn't contain a compose file.
    """

    __fields__ = set()

    ODOO_COMPOSE_SERVICE = StoredEnv(default='odoo')
    ODOO_COMPOSE_PATH = StoredEnv()
    ODOO_COMPOSE_COMMAND = StoredEnv(default='docker compose')
    ODOO_COMPOSE_ODOO_BIN = StoredEnv(default='odoo')
    ODOO_COMPOSE_STRICT_FILES = StoredBoolEnv(default=True)

    def __init__(self):
        self._values = {}

    @classmethod
    def fields(cls):
        for attr in cls.__fields__:
            yield attr

    def values(self):
        return {
            field: getattr(self, field)
            for field in self.fields()
        }
