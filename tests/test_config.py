import pytest
from summary_cli.config import SummaryConfig, WORDNET_ENV, write_default_config


def test_defaults(monkeypatch):
    monkeypatch.delenv(WORDNET_ENV, raising=False)
    cfg = SummaryConfig.load()
    assert cfg.default_sentences == 3
    assert cfg.wordnet_path is None


def test_dump_and_load_round_trip(tmp_path, monkeypatch):
    monkeypatch.delenv(WORDNET_ENV, raising=False)
    path = tmp_path / "summary.json"
    path.write_text(SummaryConfig(default_sentences=5, port=9000).dump())
    cfg = SummaryConfig.load(path)
    assert cfg.default_sentences == 5
    assert cfg.port == 9000


def test_env_fills_wordnet_path(monkeypatch):
    monkeypatch.setenv(WORDNET_ENV, "/opt/dict")
    assert SummaryConfig.load_json_str("{}").wordnet_path == "/opt/dict"
    assert SummaryConfig.load_json_str('{"wordnet_path": "/srv/wn"}').wordnet_path == "/srv/wn"


def test_write_default_config_refuses_existing(tmp_path):
    path = tmp_path / "summary.json"
    write_default_config(path)
    with pytest.raises(FileExistsError):
        write_default_config(path)
