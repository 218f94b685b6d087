"""Test configuration loading and validation."""

import logging
from pathlib import Path

import numpy as np
import pytest
import yaml

from hashviz import EngineConfig, InvalidArgument, clamp_table_size, load_config, load_engine_config
from hashviz.probing import ResolutionStrategy

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def test_load_config(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("table_size: 13\nstrategy: linear\n")
    assert load_config(path) == {"table_size": 13, "strategy": "linear"}


def test_load_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_load_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("table_size: [1, 2\n")
    with pytest.raises(yaml.YAMLError):
        load_config(path)


def test_default_config_file():
    cfg = load_engine_config(DEFAULT_CONFIG)
    assert cfg == EngineConfig()


def test_engine_section_or_top_level(tmp_path):
    nested = tmp_path / "nested.yaml"
    nested.write_text("engine:\n  table_size: 7\n  strategy: double\n")
    flat = tmp_path / "flat.yaml"
    flat.write_text("table_size: 7\nstrategy: double\n")
    assert load_engine_config(nested) == load_engine_config(flat)


def test_create_store_from_config():
    store = EngineConfig(table_size=7, strategy="quadratic", hash_function="folding").create_store()
    assert store.size == 7
    assert store.strategy is ResolutionStrategy.QUADRATIC
    assert store.insert(12345).index == 51 % 7


def test_custom_hash_config():
    cfg = EngineConfig(hash_function="custom")
    assert cfg.uses_custom_hash
    with pytest.raises(InvalidArgument):
        cfg.create_store()
    store = cfg.create_store(lambda key, size: 0)
    assert store.insert(42).index == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"table_size": 0},
        {"table_size": 200},
        {"strategy": "cuckoo"},
        {"hash_function": "sha1"},
        {"log_level": "LOUD"},
        {"random_key_high": True},
    ],
)
def test_invalid_config(overrides):
    with pytest.raises(InvalidArgument):
        EngineConfig(**overrides)


def test_unknown_keys_rejected():
    with pytest.raises(InvalidArgument):
        EngineConfig.from_dict({"table_size": 5, "colour": "blue"})


def test_clamp_table_size():
    assert clamp_table_size(0) == 1
    assert clamp_table_size(50) == 50
    assert clamp_table_size(500) == 100
    assert clamp_table_size(500, max_size=1000) == 500


def test_configure_logging():
    logger = EngineConfig(log_level="DEBUG").configure_logging()
    assert logger.name == "hashviz"
    assert logger.level == logging.DEBUG


def test_random_keys_respect_config_bound():
    cfg = EngineConfig(strategy="linear", random_key_high=5)
    store = cfg.create_store()
    rng = np.random.default_rng(3)
    for _ in range(20):
        result = store.insert_random(rng, high=cfg.random_key_high)
        assert 0 <= result.key < 5
    assert len(store) <= 5
