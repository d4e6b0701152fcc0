"""Tests for configuration loading."""
import logging
import math

import pytest

from homology import PersistenceConfig, calculate_persistence_diagrams


class TestConfig:
    def test_defaults(self):
        config = PersistenceConfig()
        assert config.twist is True
        assert config.use_union_find is True
        assert math.isinf(config.unpaired_value)
        assert config.max_dimension == 2
        assert config.epsilon is None

    def test_replace_skips_none(self):
        config = PersistenceConfig(epsilon=1.0).replace(twist=False, epsilon=None)
        assert config.twist is False
        assert config.epsilon == 1.0

    def test_from_dict_ignores_unknown_keys(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = PersistenceConfig.from_dict({'twist': False, 'colour': 'red'})
        assert config.twist is False
        assert 'colour' in caplog.text

    def test_from_yaml(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('persistence:\n  use_union_find: false\n  unpaired_value: 3\n')
        config = PersistenceConfig.from_yaml(path)
        assert config.use_union_find is False
        assert config.unpaired_value == 3.0

    def test_from_yaml_flat(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('unpaired_value: .inf\nmax_dimension: 1\n')
        config = PersistenceConfig.from_yaml(path)
        assert math.isinf(config.unpaired_value)
        assert config.max_dimension == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PersistenceConfig.from_yaml(tmp_path / 'nope.yaml')

    def test_config_drives_calculation(self, hollow_triangle):
        config = PersistenceConfig(unpaired_value=7.0, use_union_find=False)
        _, d1 = calculate_persistence_diagrams(hollow_triangle, config)
        assert list(d1) == [(3.0, 7.0, True)]
        _, d1 = calculate_persistence_diagrams(hollow_triangle, config, unpaired_value=8.0)
        assert list(d1) == [(3.0, 8.0, True)]
