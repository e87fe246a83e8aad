from jank.services.settings_service import SettingsService
from jank.utils.constants import SETTINGS_CUSTOM_PALETTE


def test_settings_roundtrip_geometry(settings_service: SettingsService):
    blob = b"\x01\x02\x03"
    settings_service.set_geometry(blob)
    got = settings_service.get_geometry()
    assert isinstance(got, (bytes, bytearray))
    assert bytes(got) == blob


def test_settings_roundtrip_splitter(settings_service: SettingsService):
    blob = b"\xaa\xbb"
    settings_service.set_splitter(blob)
    got = settings_service.get_splitter()
    assert isinstance(got, (bytes, bytearray))
    assert bytes(got) == blob


def test_settings_theme_selection(settings_service: SettingsService):
    assert settings_service.get_theme_selection() is None  # default
    settings_service.set_theme_selection("dracula")
    assert settings_service.get_theme_selection() == "dracula"


def test_settings_custom_palette(settings_service: SettingsService):
    assert settings_service.get_custom_palette() is None
    palette = {
        "background": "#101010",
        "text": "#eeeeee",
        "accent": "#ff0000",
        "editor_background": "#000000",
    }
    settings_service.set_custom_palette(palette)
    assert settings_service.get_custom_palette() == palette


def test_settings_theme_survives_reopen(qsettings, tmp_settings_path):
    from PyQt6.QtCore import QSettings

    SettingsService(qsettings).set_theme_selection("sepia")
    reopened = SettingsService(QSettings(str(tmp_settings_path), QSettings.Format.IniFormat))
    assert reopened.get_theme_selection() == "sepia"


def test_settings_corrupt_palette(qsettings, settings_service: SettingsService):
    qsettings.setValue(SETTINGS_CUSTOM_PALETTE, "{not json")
    assert settings_service.get_custom_palette() is None

    qsettings.setValue(SETTINGS_CUSTOM_PALETTE, "[1, 2]")
    assert settings_service.get_custom_palette() is None
