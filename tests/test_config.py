from docket_view.config import load_config


def test_env_override(monkeypatch, tmp_path):
    cfg_file = tmp_path / "docket.yaml"
    cfg_file.write_text("policy:\n  window_days: 10\nclaims:\n  named_defendant_exclusive_seconds: 60\n", encoding="utf-8")
    monkeypatch.setenv("DOCKET_POLICY__WINDOW_DAYS", "45")
    config = load_config(cfg_file)
    assert config.policy.window_days == 45
    assert config.policy.window_ms == 45 * 24 * 60 * 60 * 1000
    assert config.claims.exclusive_ms == 60_000


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml")
    assert config.policy.window_ms == 30 * 24 * 60 * 60 * 1000
    assert config.claims.named_defendant_exclusive_seconds == 900
    assert config.countdown.default_total_ms == 3_600_000
    assert config.windows.bound_ms("next-2h") == 2 * 3_600_000
    assert config.windows.bound_ms("all") is None


def test_null_disables_exclusive_window(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCKET_CLAIMS__NAMED_DEFENDANT_EXCLUSIVE_SECONDS", "null")
    config = load_config(tmp_path / "absent.yaml")
    assert config.claims.exclusive_ms is None
