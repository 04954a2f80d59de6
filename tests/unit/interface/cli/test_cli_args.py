from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV string parsing logic.
3. Unset options never override the configuration file.
"""

import pytest

from frisk.interface.cli.args import args_to_overrides, build_parser, log_level_from_args


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_short_flags_mapping() -> None:
    args = parse_args(["-p", "/data", "-d", "2", "-i", "build,dist", "-c"])

    overrides = args_to_overrides(args)

    assert overrides["path"] == "/data"
    assert overrides["depth"] == 2
    assert overrides["ignore"] == ["build", "dist"]
    assert overrides["compact"] is True


def test_cli_scheduling_flags() -> None:
    overrides = args_to_overrides(parse_args(["--sequential", "-w", "3"]))

    assert overrides["mode"] == "sequential"
    assert overrides["workers"] == 3


def test_cli_color_flags_are_tri_state() -> None:
    assert args_to_overrides(parse_args([]))["color"] is None
    assert args_to_overrides(parse_args(["--color"]))["color"] is True
    assert args_to_overrides(parse_args(["--no-color"]))["color"] is False


def test_cli_empty_ignore_disables_list() -> None:
    assert args_to_overrides(parse_args(["-i", ""]))["ignore"] == []


def test_cli_defaults_do_not_override() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides["path"] is None
    assert overrides["depth"] is None
    assert "ignore" not in overrides
    assert "compact" not in overrides
    assert "mode" not in overrides


@pytest.mark.parametrize(
    "argv, level",
    [([], "WARNING"), (["-v"], "INFO"), (["--debug"], "DEBUG")],
)
def test_log_level_from_args(argv, level) -> None:
    assert log_level_from_args(parse_args(argv)) == level


def test_verbose_and_debug_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        parse_args(["-v", "--debug"])
