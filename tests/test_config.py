from config import DEFAULT_EVENTS_FILENAME, load_config


def _isolate(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))


def test_defaults_to_xdg_data_home(monkeypatch, tmp_path) -> None:
    _isolate(monkeypatch, tmp_path)

    config = load_config()

    assert config.events_path == tmp_path / "data" / "dpick" / DEFAULT_EVENTS_FILENAME
    assert config.events_path.parent.is_dir()


def test_reads_events_path_with_trailing_commas(monkeypatch, tmp_path) -> None:
    _isolate(monkeypatch, tmp_path)
    config_dir = tmp_path / "config" / "dpick"
    config_dir.mkdir(parents=True)
    target = tmp_path / "marks" / "dates.parquet"
    (config_dir / "config.json").write_text('{"events_path": "%s",}' % target)

    assert load_config().events_path == target


def test_invalid_json_falls_back_to_defaults(monkeypatch, tmp_path) -> None:
    _isolate(monkeypatch, tmp_path)
    config_dir = tmp_path / "config" / "dpick"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text("{not json")

    config = load_config()

    assert config.events_path.name == DEFAULT_EVENTS_FILENAME


def test_override_wins_over_file(monkeypatch, tmp_path) -> None:
    _isolate(monkeypatch, tmp_path)
    override = tmp_path / "other.parquet"

    assert load_config(str(override)).events_path == override
