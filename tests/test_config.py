from config import Config, DEFAULT_LOGO_URL, get_config, reload_config


def test_defaults(monkeypatch):
    for name in ("DEFAULT_LANGUAGE", "ENABLE_PDF_EXPORT", "LOG_LEVEL", "LOGO_URL"):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config.default_language == "ar"
    assert config.enable_pdf_export is True
    assert config.enable_browser_print is True
    assert config.log_level == "INFO"
    assert config.logo_url == DEFAULT_LOGO_URL


def test_from_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_LANGUAGE", "EN")
    monkeypatch.setenv("ENABLE_PDF_EXPORT", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PDF_FONT_PATH", "/fonts/Noto.ttf")
    config = Config.from_env()
    assert config.default_language == "en"
    assert config.enable_pdf_export is False
    assert config.log_level == "DEBUG"
    assert config.pdf_font_path == "/fonts/Noto.ttf"


def test_unknown_default_language_falls_back_to_arabic(monkeypatch):
    monkeypatch.setenv("DEFAULT_LANGUAGE", "fr")
    assert Config.from_env().default_language == "ar"


def test_to_dict_hides_paths():
    data = Config(pdf_font_path="/secret/font.ttf").to_dict()
    assert data["has_pdf_font"] is True
    assert "/secret/font.ttf" not in data.values()


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_reload_config_reads_environment(monkeypatch):
    monkeypatch.setenv("BRAND_NAME", "Intake Test")
    assert reload_config().brand_name == "Intake Test"


def test_to_dict_lists_only_live_settings():
    assert set(Config().to_dict()) == {
        "log_level", "default_language", "logo_url", "brand_name",
        "enable_pdf_export", "enable_browser_print", "has_pdf_font",
    }
