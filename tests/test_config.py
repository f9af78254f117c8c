from pathlib import Path

from gridpath.config import CONFIG, CONFIG_PATH, load_config


def test_repo_config_loaded():
    assert CONFIG_PATH.name == "config.yaml"
    assert CONFIG.search.metric == "manhattan"
    assert CONFIG.search.moves == "four"
    assert CONFIG.logging.global_level == "INFO"


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.search.metric == "manhattan"
    assert cfg.search.reset_grid is True
    assert cfg.logging.module_levels == {}


def test_load_custom_values(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n"
        "  metric: euclidean\n"
        "  moves: eight\n"
        "  reset_grid: false\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    gridpath.search.planner: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.search.metric == "euclidean"
    assert cfg.search.moves == "eight"
    assert cfg.search.reset_grid is False
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"gridpath.search.planner": "WARNING"}


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).search.moves == "four"
