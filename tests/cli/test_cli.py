"""Tests for the port-selector CLI.

Usage:
    pytest tests/cli/test_cli.py -v
"""

import logging

import pytest

from port_selector import Protocol, is_free, is_free_tcp, random_free_port
from port_selector.cli import main

# --- check ---


@pytest.mark.dual_stack
@pytest.mark.flaky(reruns=2)
def test_cli_check_free_port(capsys):
    port = random_free_port()

    assert main(["check", str(port)]) == 0
    assert capsys.readouterr().out.strip() == "free"


@pytest.mark.dual_stack
def test_cli_check_used_port(occupy, capsys):
    port = occupy.random(Protocol.STREAM)

    assert main(["check", str(port)]) == 1
    assert capsys.readouterr().out.strip() == "in use"


@pytest.mark.dual_stack
@pytest.mark.flaky(reruns=2)
def test_cli_check_single_protocol(occupy, capsys):
    port = occupy.random(Protocol.STREAM)

    assert main(["check", "--protocol", "tcp", str(port)]) == 1
    assert main(["check", "--protocol", "udp", str(port)]) == 0
    assert capsys.readouterr().out.split() == ["in", "use", "free"]


# --- random / scan / select ---


@pytest.mark.dual_stack
@pytest.mark.flaky(reruns=2)
def test_cli_random(capsys):
    assert main(["random"]) == 0
    port = int(capsys.readouterr().out)

    assert is_free(port)


@pytest.mark.dual_stack
@pytest.mark.flaky(reruns=2)
def test_cli_random_tcp(capsys):
    assert main(["random", "-p", "tcp"]) == 0
    port = int(capsys.readouterr().out)

    assert is_free_tcp(port)


@pytest.mark.dual_stack
@pytest.mark.flaky(reruns=2)
def test_cli_scan(occupy, capsys):
    port = occupy.random_both()

    assert main(["scan", str(port)]) == 0
    found = int(capsys.readouterr().out)

    assert found > port
    assert is_free(found)


def test_cli_scan_past_last_port(capsys):
    assert main(["scan", "65536"]) == 1
    assert "no free port at or above 65536" in capsys.readouterr().err


@pytest.mark.dual_stack
@pytest.mark.flaky(reruns=2)
def test_cli_select_range(capsys):
    assert main(["select", "--range", "50000", "60000", "--tcp-only"]) == 0
    port = int(capsys.readouterr().out)

    assert 50000 <= port < 60000


@pytest.mark.dual_stack
def test_cli_select_gives_up(occupy, capsys):
    port = occupy.random(Protocol.STREAM)

    assert main(["select", "--range", str(port), str(port + 1), "-n", "3", "--tcp-only"]) == 1
    assert "no free port found after 3 attempts" in capsys.readouterr().err


@pytest.mark.dual_stack
@pytest.mark.flaky(reruns=2)
def test_cli_select_uses_settings(monkeypatch, capsys):
    monkeypatch.setenv("PORT_SELECTOR_RANGE_LOW", "51000")
    monkeypatch.setenv("PORT_SELECTOR_RANGE_HIGH", "52000")

    assert main(["select"]) == 0
    port = int(capsys.readouterr().out)

    assert 51000 <= port < 52000


# --- errors ---


def test_cli_select_invalid_range(capsys):
    assert main(["select", "--range", "6000", "5000"]) == 2
    assert "range_low" in capsys.readouterr().err


def test_cli_invalid_settings(monkeypatch, capsys):
    monkeypatch.setenv("PORT_SELECTOR_LOG_LEVEL", "chatty")

    assert main(["scan", "65536"]) == 2
    assert "Error:" in capsys.readouterr().err


def test_cli_protocol_filters_are_exclusive():
    with pytest.raises(SystemExit) as exc_info:
        main(["select", "--tcp-only", "--udp-only"])

    assert exc_info.value.code == 2


def test_cli_requires_command():
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_cli_verbose_enables_debug_logging():
    main(["-v", "scan", "65536"])

    assert logging.getLogger("port_selector").level == logging.DEBUG
