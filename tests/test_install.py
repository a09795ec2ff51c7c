import pytest
from pathlib import Path
from unittest.mock import patch

from wpsprint.core.classifier import SPREADSHEET, WORD_PROCESSOR
from wpsprint.core.errors import InstallationNotFound
from wpsprint.core.install import INSTALL_VALUE, find_install_dir, locate_executable


@pytest.fixture
def mock_winreg():
    with patch("wpsprint.core.install.winreg") as mock_reg:
        yield mock_reg


def test_locate_in_install_dir(tmp_path):
    (tmp_path / "et.exe").touch()
    assert locate_executable(SPREADSHEET, tmp_path) == tmp_path / "et.exe"


def test_locate_in_office6_subdir(tmp_path):
    (tmp_path / "office6").mkdir()
    (tmp_path / "office6" / "wps.exe").touch()
    assert locate_executable(WORD_PROCESSOR, tmp_path) == tmp_path / "office6" / "wps.exe"


def test_locate_missing_executable(tmp_path):
    (tmp_path / "wps.exe").touch()
    with pytest.raises(InstallationNotFound, match="et.exe"):
        locate_executable(SPREADSHEET, tmp_path)


def test_locate_without_installation(mock_winreg):
    mock_winreg.OpenKey.side_effect = FileNotFoundError()
    with pytest.raises(InstallationNotFound):
        locate_executable(SPREADSHEET)


def test_find_install_dir_prefers_current_user(mock_winreg):
    mock_winreg.QueryValueEx.return_value = (r"C:\Users\me\AppData\Local\Kingsoft\WPS Office\office6", 1)

    result = find_install_dir()

    assert result == Path(r"C:\Users\me\AppData\Local\Kingsoft\WPS Office\office6")
    mock_winreg.OpenKey.assert_called_once()
    assert mock_winreg.OpenKey.call_args[0][0] is mock_winreg.HKEY_CURRENT_USER
    mock_winreg.QueryValueEx.assert_called_once_with(mock_winreg.OpenKey.return_value, INSTALL_VALUE)
    mock_winreg.CloseKey.assert_called_once()


def test_find_install_dir_falls_back_to_local_machine(mock_winreg):
    def open_key(hive, path):
        if hive is mock_winreg.HKEY_CURRENT_USER:
            raise FileNotFoundError()
        return "hklm-key"

    mock_winreg.OpenKey.side_effect = open_key
    mock_winreg.QueryValueEx.return_value = (r"C:\Program Files\WPS Office", 1)

    assert find_install_dir() == Path(r"C:\Program Files\WPS Office")
    mock_winreg.CloseKey.assert_called_once_with("hklm-key")


def test_find_install_dir_none(mock_winreg):
    mock_winreg.OpenKey.return_value = "key"
    mock_winreg.QueryValueEx.side_effect = FileNotFoundError()

    assert find_install_dir() is None
    assert mock_winreg.CloseKey.call_count == 2
