"""
Unit tests for ServiceConfig.from_env.
"""

from server.config import ServiceConfig


def test_defaults(monkeypatch, tmp_path):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "EMAIL_USER", "EMAIL_PASS", "PORT", "UPLOAD_DIR", "MAX_UPLOAD_BYTES"):
        monkeypatch.delenv(name, raising=False)

    config = ServiceConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))

    assert config.gemini_model == "gemini-1.5-flash"
    assert config.port == 5000
    assert config.max_upload_bytes == 5 * 1024 * 1024
    assert config.upload_dir == "uploads"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("GEMINI_API_KEY", "key-123")
    monkeypatch.setenv("EMAIL_USER", "bot@x.com")
    monkeypatch.setenv("SMTP_PORT", "2525")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = ServiceConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))

    assert config.gemini_api_key == "key-123"
    assert config.email_user == "bot@x.com"
    assert config.smtp_port == 2525
    assert config.log_level == "DEBUG"


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    monkeypatch.delenv("EMAIL_PASS", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("EMAIL_PASS=app-password\n")

    config = ServiceConfig.from_env(dotenv_path=str(env_file))

    assert config.email_pass == "app-password"
