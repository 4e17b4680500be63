import os
import pytest
from mock import MagicMock, call, patch

from odoo_compose.api.context import Context
from odoo_compose.api.environment import Environment
from odoo_compose.api.invocation import Invocation
from odoo_compose.api.sequencer import CommandSequencer, StepResult
from odoo_compose.exceptions import (
    ApplyFailed,
    ConflictingAction,
    InvalidPath,
    MissingAction,
    MissingDatabase,
    StartFailed,
    StopFailed,
)


@pytest.fixture
def compose(env):
    manager = MagicMock()

    with patch.object(env.compose, 'run_one_off') as run_one_off, \
         patch.object(env.compose, 'stop') as stop, \
         patch.object(env.compose, 'start_detached') as start_detached:

        run_one_off.return_value = 0
        stop.return_value = 0
        start_detached.return_value = 0

        manager.attach_mock(run_one_off, 'run_one_off')
        manager.attach_mock(stop, 'stop')
        manager.attach_mock(start_detached, 'start_detached')

        yield manager


def apply_call(database, flag, modules, env=None):
    return call.run_one_off(
        'odoo',
        ['odoo', '-d', database, flag, modules, '--stop-after-init'],
        env or {}
    )


def test_run_install(env, compose, compose_dir):
    invocation = Invocation.parse(
        install="sd_library_mgmt",
        database="training",
        compose_path=compose_dir
    )

    results = env.apply(invocation, echo=lambda msg: None)

    assert compose.mock_calls == [
        apply_call('training', '-i', 'sd_library_mgmt'),
        call.stop('odoo'),
        call.start_detached('odoo'),
    ]
    assert [result.step for result in results] == ['apply', 'stop', 'start']
    assert all(result.ok for result in results)


def test_run_update_joins_modules(env, compose, compose_dir):
    invocation = Invocation.parse(
        update=['a', 'b', 'c'],
        database="training",
        compose_path=compose_dir
    )

    env.apply(invocation, echo=lambda msg: None)

    compose.run_one_off.assert_called_once_with(
        'odoo',
        ['odoo', '-d', 'training', '-u', 'a,b,c', '--stop-after-init'],
        {}
    )


def test_run_forwards_env(env, compose, compose_dir):
    invocation = Invocation.parse(
        install="a,b,c",
        database="training",
        compose_path=compose_dir,
        env={'PGHOST': 'db'}
    )

    env.apply(invocation, echo=lambda msg: None)

    assert compose.mock_calls[0] == apply_call(
        'training', '-i', 'a,b,c', {'PGHOST': 'db'}
    )


def test_steps_run_in_compose_path(env, compose, compose_dir, cwd):
    seen = []

    def record(*args):
        seen.append(os.getcwd())
        return 0

    compose.run_one_off.side_effect = record
    compose.stop.side_effect = record
    compose.start_detached.side_effect = record

    invocation = Invocation.parse(
        install="a",
        database="training",
        compose_path=compose_dir
    )
    env.apply(invocation, echo=lambda msg: None)

    assert seen == [str(compose_dir.resolve())] * 3
    assert os.getcwd() == cwd


def test_apply_failed(env, compose, compose_dir, cwd):
    compose.run_one_off.return_value = 1

    invocation = Invocation.parse(
        install="sd_library_mgmt",
        database="training",
        compose_path=compose_dir
    )

    with pytest.raises(ApplyFailed) as exc_info:
        env.apply(invocation, echo=lambda msg: None)

    assert exc_info.value.result == StepResult(
        'apply', 1, 'exited with code 1'
    )
    assert exc_info.value.exit_code == 3
    compose.stop.assert_not_called()
    compose.start_detached.assert_not_called()
    assert os.getcwd() == cwd


def test_stop_failed(env, compose, compose_dir, cwd):
    compose.stop.return_value = 2

    invocation = Invocation.parse(
        update="a",
        database="training",
        compose_path=compose_dir
    )

    with pytest.raises(StopFailed) as exc_info:
        env.apply(invocation, echo=lambda msg: None)

    assert exc_info.value.exit_code == 4
    compose.run_one_off.assert_called_once()
    compose.stop.assert_called_once_with('odoo')
    compose.start_detached.assert_not_called()
    assert os.getcwd() == cwd


def test_start_failed(env, compose, compose_dir, cwd):
    compose.start_detached.return_value = -9

    invocation = Invocation.parse(
        update="a",
        database="training",
        compose_path=compose_dir
    )

    with pytest.raises(StartFailed) as exc_info:
        env.apply(invocation, echo=lambda msg: None)

    result = exc_info.value.result
    assert result.step == 'start'
    assert result.reason == 'killed by SIGKILL'
    assert exc_info.value.exit_code == 5
    assert len(compose.mock_calls) == 3
    assert os.getcwd() == cwd


def test_missing_program(env, compose, compose_dir, cwd):
    compose.run_one_off.side_effect = FileNotFoundError(
        2, "No such file or directory", "docker"
    )

    invocation = Invocation.parse(
        install="a",
        database="training",
        compose_path=compose_dir
    )

    with pytest.raises(ApplyFailed) as exc_info:
        env.apply(invocation, echo=lambda msg: None)

    assert exc_info.value.result.returncode == 127
    assert 'docker' in exc_info.value.result.reason
    compose.stop.assert_not_called()
    assert os.getcwd() == cwd


def test_preflight_makes_no_calls(env, compose, compose_dir):
    with pytest.raises(ConflictingAction):
        env.apply(
            Invocation.parse(
                install="a",
                update="b",
                database="training",
                compose_path=compose_dir
            )
        )

    with pytest.raises(MissingAction):
        env.apply(
            Invocation.parse(database="training", compose_path=compose_dir)
        )

    with pytest.raises(MissingDatabase):
        env.apply(
            Invocation.parse(install="a", database="", compose_path=compose_dir)
        )

    assert compose.mock_calls == []


def test_invalid_path(env, compose, tmp_path):
    missing = Invocation.parse(
        install="a",
        database="training",
        compose_path=tmp_path / 'missing'
    )

    with pytest.raises(InvalidPath):
        env.apply(missing)

    not_a_dir = tmp_path / 'file'
    not_a_dir.write_text('')

    with pytest.raises(InvalidPath):
        env.apply(
            Invocation.parse(
                install="a",
                database="training",
                compose_path=not_a_dir
            )
        )

    empty = tmp_path / 'empty'
    empty.mkdir()

    with pytest.raises(InvalidPath) as exc_info:
        env.apply(
            Invocation.parse(
                install="a",
                database="training",
                compose_path=empty
            )
        )

    assert 'No compose file' in str(exc_info.value)
    assert compose.mock_calls == []


def test_without_strict_files(tmp_path):
    env = Environment(Context(strict_files=False, service='web'))
    empty = tmp_path / 'empty'
    empty.mkdir()

    with patch.object(env.compose, 'run_one_off', return_value=0), \
         patch.object(env.compose, 'stop', return_value=0) as stop, \
         patch.object(env.compose, 'start_detached', return_value=0):

        env.apply(
            Invocation.parse(
                install="a",
                database="training",
                compose_path=empty
            ),
            echo=lambda msg: None
        )

    stop.assert_called_once_with('web')


def test_echo_messages(env, compose, compose_dir):
    messages = []
    compose.stop.return_value = 1

    sequencer = CommandSequencer(env, echo=messages.append)

    with pytest.raises(StopFailed):
        sequencer.run(
            Invocation.parse(
                install="a,b",
                database="training",
                compose_path=compose_dir
            )
        )

    assert messages == [
        "Install modules a,b on database training...",
        "Install modules a,b on database training: done",
        "Stop service odoo...",
        "Stop service odoo: failed (exited with code 1)",
    ]


def test_default_echo_prints(env, compose, compose_dir, capsys):
    env.apply(
        Invocation.parse(
            install="a",
            database="training",
            compose_path=compose_dir
        )
    )

    out = capsys.readouterr().out
    assert "Start service odoo: done" in out
