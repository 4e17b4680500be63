import os
import pytest
import tempfile
from click.testing import CliRunner

from odoo_compose.api.context import Context
from odoo_compose.odoo import Environment


ENV_VARS = [
    'ODOO_COMPOSE_SERVICE',
    'ODOO_COMPOSE_PATH',
    'ODOO_COMPOSE_COMMAND',
    'ODOO_COMPOSE_ODOO_BIN',
    'ODOO_COMPOSE_STRICT_FILES',
]


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def change_test_dir(request, monkeypatch):
    with tempfile.TemporaryDirectory() as temp_dir:
        monkeypatch.chdir(temp_dir)
        yield


@pytest.fixture
def compose_dir(tmp_path):
    project = tmp_path / 'project'
    project.mkdir()
    (project / 'docker-compose.yml').write_text(
        "services:\n  odoo:\n    image: odoo:17\n"
    )
    return project


@pytest.fixture
def env():
    return Environment(Context())


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cwd():
    return os.getcwd()
