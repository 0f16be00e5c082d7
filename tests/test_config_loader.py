"""
Unit tests for connection configuration loading.

Run with: pytest tests/test_config_loader.py -v
"""

import pytest

from dbfactory.config_loader import (
    ConfigError,
    ConfigLoader,
    MissingDriverError,
    load_config,
)


@pytest.fixture
def write_config(tmp_path):
    """Write YAML content to a temporary file and return its path."""
    def write(content: str):
        path = tmp_path / 'database.yaml'
        path.write_text(content)
        return path
    return write


class TestConfigLoader:
    """Tests for YAML loading and validation."""

    def test_loads_connections(self, write_config):
        path = write_config("""
default: main
connections:
  main:
    driver: pgsql
    database: app
    read:
      - host: r1
      - host: r2
    write:
      host: w1
  local:
    driver: sqlite
    database: ":memory:"
""")

        loader = load_config(path)

        assert loader.get_connection_names() == ['main', 'local']
        assert loader.get_default_connection_name() == 'main'
        main = loader.get_connection()
        assert main['read'] == [{'host': 'r1'}, {'host': 'r2'}]
        assert main['write'] == {'host': 'w1'}
        assert loader.get_connection('local')['database'] == ':memory:'

    def test_default_is_first_connection(self, write_config):
        path = write_config("""
connections:
  first:
    driver: mysql
  second:
    driver: pgsql
""")

        assert load_config(path).get_default_connection_name() == 'first'

    def test_get_connection_returns_copy(self, write_config):
        path = write_config("""
connections:
  main:
    driver: mysql
""")
        loader = load_config(path)

        loader.get_connection('main')['driver'] = 'changed'

        assert loader.get_connection('main')['driver'] == 'mysql'

    def test_substitutes_environment_variables(self, write_config, monkeypatch):
        monkeypatch.setenv('DBF_TEST_PASSWORD', 's3cret')
        path = write_config("""
connections:
  main:
    driver: mysql
    password: ${DBF_TEST_PASSWORD}
""")

        assert load_config(path).get_connection('main')['password'] == 's3cret'

    def test_unresolved_environment_variable(self, write_config, monkeypatch):
        monkeypatch.delenv('DBF_TEST_MISSING', raising=False)
        path = write_config("""
connections:
  main:
    driver: mysql
    write:
      host: w1
      password: ${DBF_TEST_MISSING}
""")

        with pytest.raises(ConfigError, match="write.password"):
            load_config(path)

    def test_missing_driver(self, write_config):
        path = write_config("""
connections:
  main:
    database: app
""")

        with pytest.raises(MissingDriverError, match="main"):
            load_config(path)

    def test_blank_driver(self, write_config):
        path = write_config("""
connections:
  main:
    driver:
    database: app
""")

        with pytest.raises(MissingDriverError, match="main"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader(tmp_path / 'nope.yaml').load()

    def test_invalid_yaml(self, write_config):
        path = write_config("connections: [unclosed")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_no_connections(self, write_config):
        path = write_config("default: main\n")

        with pytest.raises(ConfigError, match="No database connections"):
            load_config(path)

    def test_unknown_default(self, write_config):
        path = write_config("""
default: other
connections:
  main:
    driver: mysql
""")

        with pytest.raises(ConfigError, match="Default connection not found"):
            load_config(path)

    def test_unknown_connection(self, write_config):
        path = write_config("""
connections:
  main:
    driver: mysql
""")

        with pytest.raises(ConfigError, match="Connection not found: other"):
            load_config(path).get_connection('other')
