import json

import pytest

from importeur import commands
from importeur.commands import (
    CommandError,
    build_import_orchestrator,
    detect_all_launchers,
    games_for_launcher,
    import_games,
    list_target_platform_users,
    locate_target_platform_install,
    parse_games,
)
from importeur.launchers.registry import LAUNCHER_REGISTRY, STEAM_RULE


def _game_dict(name, launcher_id="epic"):
    return {
        "id": name.lower().replace(" ", "-"),
        "name": name,
        "executable": "game.exe",
        "install_path": rf"C:\Games\{name}",
        "launcher_id": launcher_id,
    }


@pytest.mark.unit
@pytest.mark.asyncio
async def test_detect_all_launchers_returns_wire_dicts(fake_probe):
    gog_key = LAUNCHER_REGISTRY["gog"].rule.registry_key
    launchers = await detect_all_launchers(probe=fake_probe(keys=[gog_key]))

    assert [launcher["id"] for launcher in launchers] == ["epic", "ubisoft", "ea", "gog", "battlenet"]
    gog = launchers[3]
    assert gog["detected"] is True
    assert gog["install_path"] == r"C:\Program Files (x86)\GOG Galaxy"
    assert gog["games"][0]["launcher_id"] == "gog"
    for launcher in launchers:
        if not launcher["detected"]:
            assert launcher["games"] == []
            assert launcher["install_path"] is None

    # Must be serialisable for a front-end
    json.dumps(launchers, ensure_ascii=False)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_detect_all_launchers_matched_path_from_config(fake_probe, fast_config):
    fast_config["detection"]["report_matched_path"] = True
    probe = fake_probe(paths=[r"C:\Program Files\Epic Games\Launcher"])

    launchers = await detect_all_launchers(fast_config, probe=probe)

    assert launchers[0]["install_path"] == r"C:\Program Files\Epic Games\Launcher"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_games_for_launcher():
    games = await games_for_launcher("ubisoft")
    assert [game["name"] for game in games] == ["Assassin's Creed Valhalla"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_games_for_unknown_launcher_is_empty():
    assert await games_for_launcher("unknown-id") == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_games_for_launcher_rejects_non_string():
    with pytest.raises(CommandError):
        await games_for_launcher(None)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_import_games_reference_example(fast_config):
    selection = [_game_dict("Fortnite"), _game_dict("GameWithError"), _game_dict("Diablo IV", "battlenet")]

    result = await import_games(selection, fast_config)

    assert result == {"success": 2, "failed": ["GameWithError"]}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_import_games_empty(fast_config):
    assert await import_games([], fast_config) == {"success": 0, "failed": []}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_import_games_accepts_detected_games(fast_config):
    games = await games_for_launcher("epic")
    result = await import_games(games, fast_config)
    assert result == {"success": 2, "failed": []}


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    None,
    {"games": []},
    [{"name": "Fortnite"}],
    [_game_dict("Fortnite"), "not a game"],
])
async def test_import_games_malformed_payload(payload, fast_config):
    with pytest.raises(CommandError) as exc:
        await import_games(payload, fast_config)
    assert str(exc.value)


@pytest.mark.unit
def test_parse_games_reports_position():
    with pytest.raises(CommandError) as exc:
        parse_games([_game_dict("Fortnite"), {"id": "x"}])
    assert "position 1" in str(exc.value)


@pytest.mark.unit
def test_build_import_orchestrator_uses_config(fast_config):
    fast_config["import"].update({"failure_marker": "BROKEN", "delay_seconds": 0.5, "max_concurrent": 3})

    orchestrator = build_import_orchestrator(fast_config)

    assert orchestrator.max_concurrent == 3
    assert orchestrator.action.failure_marker == "BROKEN"
    assert orchestrator.action.delay == 0.5


@pytest.mark.unit
def test_build_import_orchestrator_defaults():
    orchestrator = build_import_orchestrator()
    assert orchestrator.max_concurrent == 1
    assert orchestrator.action.failure_marker == "Error"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_locate_target_platform_install_prefers_registry(fake_probe):
    probe = fake_probe(
        paths=[r"C:\Program Files (x86)\Steam"],
        values={(STEAM_RULE.registry_key, "InstallPath"): r"E:\Steam"},
    )
    assert await locate_target_platform_install(probe) == r"E:\Steam"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_locate_target_platform_install_absent(fake_probe):
    assert await locate_target_platform_install(fake_probe()) is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_locate_target_platform_install_default_probe(mocker):
    mocker.patch("importeur.probe.system_probe.read_value", return_value=None)
    mocker.patch("importeur.probe.system_probe.path_exists", return_value=False)

    assert await commands.locate_target_platform_install() is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_target_platform_users(fake_probe, tmp_path):
    (tmp_path / "userdata" / "123456789").mkdir(parents=True)
    probe = fake_probe(values={(STEAM_RULE.registry_key, "InstallPath"): str(tmp_path)})

    assert await list_target_platform_users(probe) == ["123456789"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_target_platform_users_without_steam(fake_probe):
    with pytest.raises(CommandError, match="Steam not found"):
        await list_target_platform_users(fake_probe())
