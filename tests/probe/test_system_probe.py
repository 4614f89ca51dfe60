import asyncio

import pytest

from importeur.probe import system_probe
from importeur.probe.system_probe import Probe, key_exists, path_exists, read_value


@pytest.fixture
def fake_winreg(mocker):
    """Replace the winreg module used by the probe with a mock."""
    winreg = mocker.MagicMock()
    winreg.HKEY_LOCAL_MACHINE = "HKLM"
    mocker.patch.object(system_probe, "winreg", winreg)
    return winreg


@pytest.mark.unit
def test_key_exists_true_when_key_opens(fake_winreg):
    assert key_exists(r"SOFTWARE\WOW6432Node\GOG.com\GalaxyClient") is True
    fake_winreg.OpenKey.assert_called_once_with("HKLM", r"SOFTWARE\WOW6432Node\GOG.com\GalaxyClient")


@pytest.mark.unit
@pytest.mark.parametrize("error", [FileNotFoundError("missing"), PermissionError("denied"), OSError("boom")])
def test_key_exists_false_on_lookup_errors(fake_winreg, error):
    fake_winreg.OpenKey.side_effect = error
    assert key_exists(r"SOFTWARE\Nope") is False


@pytest.mark.unit
def test_key_exists_false_without_registry(mocker):
    mocker.patch.object(system_probe, "winreg", None)
    assert key_exists(r"SOFTWARE\WOW6432Node\Valve\Steam") is False


@pytest.mark.unit
def test_read_value_returns_string(fake_winreg):
    key = fake_winreg.OpenKey.return_value.__enter__.return_value
    fake_winreg.QueryValueEx.return_value = (r"D:\Steam", 1)

    assert read_value(r"SOFTWARE\WOW6432Node\Valve\Steam", "InstallPath") == r"D:\Steam"
    fake_winreg.QueryValueEx.assert_called_once_with(key, "InstallPath")


@pytest.mark.unit
def test_read_value_none_when_value_missing(fake_winreg):
    fake_winreg.QueryValueEx.side_effect = FileNotFoundError("no value")
    assert read_value(r"SOFTWARE\WOW6432Node\Valve\Steam", "InstallPath") is None


@pytest.mark.unit
def test_read_value_none_without_registry(mocker):
    mocker.patch.object(system_probe, "winreg", None)
    assert read_value(r"SOFTWARE\WOW6432Node\Valve\Steam", "InstallPath") is None


@pytest.mark.unit
def test_path_exists(tmp_path):
    existing = tmp_path / "Launcher"
    existing.mkdir()

    assert path_exists(str(existing)) is True
    assert path_exists(str(tmp_path / "missing")) is False


@pytest.mark.unit
def test_path_exists_false_on_os_error(mocker):
    fake_path = mocker.patch.object(system_probe, "Path")
    fake_path.return_value.exists.side_effect = PermissionError("denied")
    assert path_exists(r"C:\Program Files\GOG Galaxy") is False


@pytest.mark.unit
def test_path_exists_false_on_invalid_path():
    # Embedded NUL bytes are rejected by the OS layer
    assert path_exists("bad\x00path") is False


@pytest.mark.unit
@pytest.mark.asyncio
async def test_probe_offloads_checks_to_threads(tmp_path, mocker):
    to_thread = mocker.spy(asyncio, "to_thread")
    probe = Probe()

    assert await probe.path_exists(str(tmp_path)) is True
    to_thread.assert_called_once()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_probe_concurrent_checks(tmp_path):
    probe = Probe()
    paths = [str(tmp_path), str(tmp_path / "missing")] * 10

    results = await asyncio.gather(*(probe.path_exists(p) for p in paths))

    assert results == [True, False] * 10
