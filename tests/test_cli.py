from ircserv.cli import main
from ircserv.server import Server

PASSWORD = "password"


def test_missing_arguments(capsys):
    assert main([]) == 1
    assert "Not enought argument" in capsys.readouterr().err


def test_too_many_arguments(capsys):
    assert main(["1", "2", "3"]) == 1
    assert capsys.readouterr().err.startswith("Error: IRC:")


def test_bad_port_is_reported(capsys):
    password = PASSWORD
    assert main(["abc", password]) == 0
    assert "Failed to convert the port" in capsys.readouterr().out


def test_busy_port_is_reported(capsys):
    password = PASSWORD
    with Server("0", password, host="127.0.0.1") as busy:
        port = busy.address[1]
        assert main([str(port), password]) == 0
    assert "bind failed" in capsys.readouterr().out