import pytest
import yaml

from h3vertex.config import Config, Options


class TestConfig:

    def test_from_yaml(self, tmp_path, table_file):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({
            'table_path': str(table_file),
            'log_level': 'DEBUG',
            'log_dir': None,
            'options': {'resolution': 3},
        }))
        cfg = Config.from_yaml(str(path))

        assert cfg.table_path == str(table_file)
        assert cfg.log_level == 'DEBUG'
        assert cfg.log_dir is None
        assert cfg.options == Options(resolution=3)
        cfg.validate()

    def test_from_yaml_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("table_path: grid.yaml\n")
        cfg = Config.from_yaml(str(path))

        assert cfg.log_level == 'INFO'
        assert cfg.log_dir == 'logs'
        assert cfg.options.resolution == 1

    def test_from_args_skips_none_options(self, table_file):
        cfg = Config.from_args(table_path=str(table_file), resolution=None)
        assert cfg.options.resolution == 1

    def test_requires_table(self):
        with pytest.raises(ValueError):
            Config().validate()

    def test_missing_table(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(table_path=str(tmp_path / "missing.yaml")).validate()

    def test_bad_log_level(self, table_file):
        with pytest.raises(ValueError):
            Config(table_path=str(table_file), log_level="LOUD").validate()

    def test_bad_resolution(self, table_file):
        with pytest.raises(ValueError):
            Config.from_args(table_path=str(table_file), resolution=0).validate()
