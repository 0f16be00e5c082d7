"""
Tests for the connection check CLI and reporters.

Run with: pytest tests/test_main.py -v
"""

import io
import json
import sqlite3

import pytest

from dbfactory.checker import ConnectionChecker, mask_config
from dbfactory.config_loader import load_config
from dbfactory.factory import ConnectionFactory
from dbfactory.main import main
from dbfactory.registry import Registry
from dbfactory.reporters import ConsoleReporter


class FirstChoice:
    def choice(self, seq):
        return seq[0]


@pytest.fixture
def config_path(tmp_path):
    """Connections file pointing at two real SQLite databases."""
    primary = tmp_path / 'primary.db'
    replica = tmp_path / 'replica.db'
    for path in (primary, replica):
        sqlite3.connect(path).close()

    path = tmp_path / 'database.yaml'
    path.write_text(f"""
default: local
connections:
  local:
    driver: sqlite
    database: "{primary}"
    password: hunter2
    read:
      - database: "{replica}"
  broken:
    driver: sqlite
    database: "{tmp_path / 'missing.db'}"
  unknown:
    driver: oracle
""")
    return path


class TestConnectionChecker:
    """Tests for end-to-end connection checks."""

    def test_default_role(self, config_path):
        checker = ConnectionChecker(load_config(config_path))

        result = checker.check()

        assert result.passed
        assert result.connection_name == 'local'
        assert result.driver == 'sqlite'
        assert result.target['database'].endswith('primary.db')
        assert result.target['password'] == '******'
        assert 'read' not in result.target

    def test_read_role_uses_replica(self, config_path):
        factory = ConnectionFactory(Registry(), rng=FirstChoice())
        checker = ConnectionChecker(load_config(config_path), factory)

        result = checker.check('local', 'read')

        assert result.passed
        assert result.target['database'].endswith('replica.db')

    def test_connection_failure_is_reported(self, config_path):
        result = ConnectionChecker(load_config(config_path)).check('broken')

        assert result.failed
        assert 'does not exist' in result.error_message

    def test_to_dict(self, config_path):
        data = ConnectionChecker(load_config(config_path)).check().to_dict()

        assert data['passed'] is True
        assert data['role'] == 'default'
        json.dumps(data)

    def test_mask_config_is_recursive(self):
        masked = mask_config({'password': 'x', 'read': [{'password': 'y', 'host': 'r1'}]})

        assert masked == {'password': '******', 'read': [{'password': '******', 'host': 'r1'}]}


class TestConsoleReporter:
    """Tests for console output."""

    def test_plain_report(self, config_path):
        result = ConnectionChecker(load_config(config_path)).check('broken')
        output = io.StringIO()

        ConsoleReporter(use_rich=False, output=output).report(result)

        text = output.getvalue()
        assert 'CONNECTION CHECK' in text
        assert 'Status: FAILED' in text
        assert 'driver: sqlite' in text

    def test_rich_report(self, config_path):
        result = ConnectionChecker(load_config(config_path)).check()
        output = io.StringIO()

        ConsoleReporter(use_rich=True, output=output).report(result)

        assert 'Connection OK' in output.getvalue()


class TestMain:
    """Tests for CLI exit codes and output files."""

    def test_success(self, config_path):
        assert main(['--config', str(config_path), '--quiet']) == 0

    def test_connection_failure(self, config_path):
        assert main(['--config', str(config_path), '-n', 'broken', '--quiet']) == 1

    def test_configuration_error(self, config_path, capsys):
        assert main(['--config', str(config_path), '-n', 'unknown', '--quiet']) == 2
        assert 'Unsupported driver [oracle]' in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path):
        assert main(['--config', str(tmp_path / 'nope.yaml'), '--quiet']) == 2

    def test_saves_json(self, config_path, tmp_path):
        output_dir = tmp_path / 'reports'

        assert main(['--config', str(config_path), '--role', 'write', '--quiet', '--output', str(output_dir)]) == 0

        reports = list(output_dir.glob('check_local_write_*.json'))
        assert len(reports) == 1
        data = json.loads(reports[0].read_text())
        assert data['target']['database'].endswith('primary.db')
        history = (output_dir / 'check_history.jsonl').read_text().splitlines()
        assert json.loads(history[0])['passed'] is True

    def test_plain_output(self, config_path, capsys):
        assert main(['--config', str(config_path), '--no-color']) == 0
        assert 'Status: OK' in capsys.readouterr().out
