from galton.shared.settings import Settings, load_settings
from galton.client.main import parse_args


def test_defaults(monkeypatch):
    for name in ("GALTON_ROWS", "GALTON_BALLS", "GALTON_CAPACITY", "GALTON_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings(12, 200, 100, "INFO")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GALTON_ROWS", "20")
    monkeypatch.setenv("GALTON_BALLS", "1000")
    monkeypatch.setenv("GALTON_CAPACITY", "junk")
    monkeypatch.setenv("GALTON_LOG_LEVEL", "debug")
    s = load_settings()
    assert (s.rows, s.balls, s.capacity, s.log_level) == (20, 1000, 100, "DEBUG")


def test_command_line_wins():
    s = parse_args(["--rows", "5", "--capacity", "7", "--log-level", "warning"],
                   defaults=Settings(12, 200, 100, "INFO"))
    assert s == Settings(5, 200, 7, "WARNING")
