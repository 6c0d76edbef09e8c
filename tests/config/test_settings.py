"""Tests for PatternSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from patternctl.config.settings import PatternSettings
from patternctl.domain.devices import DeviceAction
from tests.conftest import write_config


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert [t.name for t in settings.approval.tiers] == ["Supervisor", "Manager", "Director"]
        assert settings.approval.demo_amounts == [500, 3000, 7000]
        assert list(settings.remote.buttons) == ["1", "2", "3", "4"]
        assert settings.tree.max_depth is None
        assert settings.connection.name == "main"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_tiers(self, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            '[approval]\ntiers = [{ name = "Clerk", upper = 50 }, { name = "Boss" }]\n',
        )
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert [(t.name, t.upper) for t in settings.approval.tiers] == [
            ("Clerk", 50),
            ("Boss", None),
        ]
        assert settings.approval.demo_amounts == [500, 3000, 7000]

    def test_buttons_replace_defaults(self, tmp_path: Path) -> None:
        write_config(tmp_path, '[remote.buttons]\n"A" = { device = "fan", action = "on" }\n')
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert list(settings.remote.buttons) == ["A"]
        assert settings.remote.buttons["A"].action is DeviceAction.ON

    def test_discovered_by_walk_up(self, tmp_path: Path) -> None:
        config = write_config(tmp_path, "[tree]\nmax_depth = 2\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        settings = PatternSettings.from_cli(search_from=child)
        assert settings.tree.max_depth == 2
        assert settings.config_path == config

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[connection]\nname = "replica"\n')
        settings = PatternSettings.from_cli(config_path=str(custom), search_from=tmp_path)
        assert settings.connection.name == "replica"
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.connection.name == "main"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "[approval\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PatternSettings.from_cli(search_from=tmp_path)

    def test_invalid_tier_layout(self, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            '[approval]\ntiers = [{ name = "A", upper = 100 }, { name = "B", upper = 50 }]\n',
        )
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            PatternSettings.from_cli(search_from=tmp_path)

    def test_unknown_device(self, tmp_path: Path) -> None:
        write_config(tmp_path, '[remote.buttons]\n"1" = { device = "tv", action = "on" }\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            PatternSettings.from_cli(search_from=tmp_path)


class TestEnvAndFlags:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_config(tmp_path, "[tree]\nmax_depth = 2\n")
        monkeypatch.setenv("PATTERNCTL_TREE__MAX_DEPTH", "5")
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert settings.tree.max_depth == 5

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(
            search_from=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "no_interact = true\n")
        settings = PatternSettings.from_cli(search_from=tmp_path, no_interact=False)
        assert settings.no_interact is False
