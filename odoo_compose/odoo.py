"""
Module
------

Collection of API that can be used to apply odoo modules to a
service managed by docker compose.
"""
from .api.environment import Environment
from .api.invocation import Action, Invocation

__all__ = ['Environment', 'Action', 'Invocation']
