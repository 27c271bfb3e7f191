from __future__ import annotations

import pytest

from waldhari.core.config import reset_settings
from waldhari.core.environment import get_system_locale
from waldhari.core.exceptions import ServiceUnavailableError
from waldhari.core.i18n import CsvLanguageService
from waldhari.core.logging import LogLevel
from waldhari.core.testing import RecordingLogService


def _write_catalog(data_dir, mod, language, feature, *lines):
    lang_dir = data_dir / mod / language
    lang_dir.mkdir(parents=True, exist_ok=True)
    path = lang_dir / f"{feature}.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_constructor_default_values(data_dir, recorder):
    service = CsvLanguageService()

    assert (data_dir / "Waldhari.Core").is_dir()
    assert service.features == ["General"]
    assert service.current_language == get_system_locale()


def test_constructor_custom_mod_and_language(data_dir, recorder):
    service = CsvLanguageService("TestMod", "fr-FR")

    assert (data_dir / "TestMod").is_dir()
    assert service.localization_dir == data_dir / "TestMod"
    assert service.current_language == "fr-FR"
    assert service.features == ["General"]
    assert len(service) == 0


def test_constructor_custom_features(recorder):
    service = CsvLanguageService("TestMod", "en-US", ["Menu", "Mission"])

    assert service.features == ["Menu", "Mission"]
    assert service.current_language == "en-US"


def test_constructor_null_features_defaults_to_general(recorder):
    service = CsvLanguageService(features=None)

    assert service.features == ["General"]


def test_constructor_logs_initialization(recorder):
    CsvLanguageService("TestMod", "en-US", ["Menu"])

    assert any("TestMod" in message for message in recorder.messages(LogLevel.INFO))
    assert any("Menu" in message for message in recorder.messages(LogLevel.DEBUG))


def test_constructor_fails_when_directory_cannot_be_created(tmp_path, recorder):
    blocker = tmp_path / "blocker"
    blocker.write_text("file")

    with pytest.raises(ServiceUnavailableError):
        CsvLanguageService("TestMod", "en-US", base_dir=blocker)


@pytest.mark.parametrize(
    ("requested", "expected"),
    [("fr-FR", "fr-FR"), ("   ", "   ")],
)
def test_determine_language_returns_code_verbatim(recorder, requested, expected):
    service = CsvLanguageService("TestMod", "en-US")

    assert service.determine_language(requested) == expected


@pytest.mark.parametrize("requested", [None, ""])
def test_determine_language_falls_back_to_system_locale(recorder, requested):
    service = CsvLanguageService("TestMod", "en-US")

    assert service.determine_language(requested) == get_system_locale()


def test_configured_locale_is_used_as_system_locale(monkeypatch, recorder):
    monkeypatch.setenv("WALDHARI_LOCALE", "de-DE")
    reset_settings()
    service = CsvLanguageService("TestMod")

    assert service.current_language == "de-DE"


def test_end_to_end_load(data_dir, recorder):
    service = CsvLanguageService("TestMod", "en-US", ["General"])
    _write_catalog(data_dir, "TestMod", "en-US", "General", "greeting;Hello", "# comment", "")

    service.load("TestMod", "en-US")

    assert service.messages == {"greeting": "Hello"}
    assert service.get_message("GREETING") == "Hello"
    assert recorder.messages(LogLevel.INFO)[-1] == "语言 'en-US' 已加载 1 条消息"


def test_loads_on_construction(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "fr-FR", "General", "greeting;Bonjour")

    service = CsvLanguageService("TestMod", "fr-FR")

    assert service.get_message("greeting") == "Bonjour"
    assert "GREETING" in service


def test_missing_language_directory_is_not_an_error(recorder):
    service = CsvLanguageService("TestMod", "fr-FR")

    assert service.current_language == "fr-FR"
    assert len(service) == 0
    assert any("fr-FR" in message for message in recorder.messages(LogLevel.WARN))


def test_whitespace_language_is_accepted(recorder):
    service = CsvLanguageService("TestMod", "   ")

    assert service.current_language == "   "
    assert len(service) == 0


def test_features_load_in_order_and_first_wins(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "Menu", "title;Main menu", "menu.start;Start")
    _write_catalog(data_dir, "TestMod", "en-US", "Mission", "TITLE;Mission", "mission.fail;Failed")

    service = CsvLanguageService("TestMod", "en-US", ["Menu", "Mission"])

    assert service.messages == {
        "title": "Main menu",
        "menu.start": "Start",
        "mission.fail": "Failed",
    }
    assert len(recorder.messages(LogLevel.WARN)) == 1


def test_missing_feature_file_is_skipped(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "Menu", "menu.start;Start")

    service = CsvLanguageService("TestMod", "en-US", ["Missing", "Menu"])

    assert service.messages == {"menu.start": "Start"}
    warnings = recorder.messages(LogLevel.WARN)
    assert len(warnings) == 1
    assert "Missing.csv" in warnings[0]


def test_empty_feature_list_loads_nothing(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "General", "greeting;Hello")

    service = CsvLanguageService("TestMod", "en-US", [])

    assert len(service) == 0
    assert recorder.messages(LogLevel.WARN) == []


def test_duplicate_key_keeps_first_value_and_warns_once(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "General", "key;v1", "key;v2")

    service = CsvLanguageService("TestMod", "en-US")

    assert service.get_message("key") == "v1"
    duplicates = [message for message in recorder.messages(LogLevel.WARN) if "key" in message]
    assert len(duplicates) == 1


def test_malformed_line_logs_error_and_continues(data_dir, recorder):
    _write_catalog(
        data_dir, "TestMod", "en-US", "General",
        "invalid_line_without_separator",
        "key;value",
    )

    service = CsvLanguageService("TestMod", "en-US")

    assert service.messages == {"key": "value"}
    errors = recorder.messages(LogLevel.ERROR)
    assert len(errors) == 1
    assert "invalid_line_without_separator" in errors[0]


def test_utf8_bom_is_ignored(data_dir, recorder):
    lang_dir = data_dir / "TestMod" / "fr-FR"
    lang_dir.mkdir(parents=True)
    (lang_dir / "General.csv").write_text("salut;Ça va\n", encoding="utf-8-sig")

    service = CsvLanguageService("TestMod", "fr-FR")

    assert service.get_message("salut") == "Ça va"


def test_load_replaces_previous_language(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "General", "greeting;Hello", "only.en;English")
    _write_catalog(data_dir, "TestMod", "fr-FR", "General", "greeting;Bonjour")
    service = CsvLanguageService("TestMod", "en-US")

    service.load("TestMod", "fr-FR")

    assert service.current_language == "fr-FR"
    assert service.messages == {"greeting": "Bonjour"}


def test_load_to_missing_language_clears_messages(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "General", "greeting;Hello")
    service = CsvLanguageService("TestMod", "en-US")

    service.load("TestMod", "it-IT")

    assert len(service) == 0
    assert service.get_message("greeting") == "greeting"


def test_load_is_idempotent(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "General", "greeting;Hello")
    service = CsvLanguageService("TestMod", "en-US")

    service.load("TestMod", "en-US")
    service.load("TestMod", "en-US")

    assert service.messages == {"greeting": "Hello"}


def test_get_message_missing_key_returns_key(recorder):
    service = CsvLanguageService("TestMod", "en-US")

    assert service.get_message("missing") == "missing"
    assert any("missing" in message for message in recorder.messages(LogLevel.WARN))


@pytest.mark.parametrize("message_id", [None, ""])
def test_get_message_empty_id_returns_empty_string(recorder, message_id):
    service = CsvLanguageService("TestMod", "en-US")
    recorder.clear()

    assert service.get_message(message_id) == ""
    assert len(recorder.messages(LogLevel.WARN)) == 1


def test_explicit_logger_bypasses_facade(data_dir, recorder):
    explicit = RecordingLogService()

    service = CsvLanguageService("TestMod", "en-US", logger=explicit)
    service.get_message("missing")

    assert explicit.records
    assert recorder.records == []


def test_custom_catalog_extension(monkeypatch, data_dir, recorder):
    monkeypatch.setenv("WALDHARI_CATALOG_EXTENSION", "txt")
    reset_settings()
    lang_dir = data_dir / "TestMod" / "en-US"
    lang_dir.mkdir(parents=True)
    (lang_dir / "General.txt").write_text("greeting;Hello\n", encoding="utf-8")

    service = CsvLanguageService("TestMod", "en-US")

    assert service.get_message("greeting") == "Hello"


def test_invalid_utf8_file_is_reported_and_loading_continues(data_dir, recorder):
    lang_dir = data_dir / "TestMod" / "fr-FR"
    lang_dir.mkdir(parents=True)
    (lang_dir / "General.csv").write_bytes("salut;Ça va\n".encode("cp1252"))
    (lang_dir / "Menu.csv").write_text("title;Menu principal\n", encoding="utf-8")

    service = CsvLanguageService("TestMod", "fr-FR", ["General", "Menu"])

    assert service.get_message("title") == "Menu principal"
    assert service.get_message("salut") == "\ufffda va"
    assert any("General.csv" in message for message in recorder.messages(LogLevel.ERROR))


def test_messages_view_is_read_only(data_dir, recorder):
    _write_catalog(data_dir, "TestMod", "en-US", "General", "greeting;Hello")
    service = CsvLanguageService("TestMod", "en-US")

    view = service.messages
    with pytest.raises(TypeError):
        view["greeting"] = "Hi"

    service.load("TestMod", "fr-FR")

    assert dict(view) == {}
