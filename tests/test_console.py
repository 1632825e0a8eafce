from unittest import mock

import pytest
import serial

from mazeroute.console import main, open_port, read_byte, run, write_byte


class FakePort:
    def __init__(self, incoming=()):
        self.incoming = list(incoming)
        self.written = []
        self.closed = False

    def read(self, size=1):
        if not self.incoming:
            return b""
        return self.incoming.pop(0)[:size]

    def write(self, data):
        self.written.append(bytes(data))
        return len(data)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


def scripted_input(lines):
    queue = list(lines)

    def _input(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    return _input


def test_read_byte_returns_single_byte():
    port = FakePort([b"c"])
    assert read_byte(port) == b"c"


def test_read_byte_timeout_gives_empty():
    assert read_byte(FakePort()) == b""


def test_write_byte_sends_only_first_byte():
    port = FakePort()
    assert write_byte(port, "FRL") == b"F"
    assert port.written == [b"F"]


def test_write_byte_accepts_bytes():
    port = FakePort()
    write_byte(port, b"R")
    assert port.written == [b"R"]


def test_write_byte_empty_sends_nul():
    port = FakePort()
    assert write_byte(port, "") == b"\x00"
    assert port.written == [b"\x00"]


def test_run_sends_command_after_marker():
    port = FakePort([b"x", b"c", b"3", b"c", b"1"])
    lines = []
    run(port, scripted_input(["F\n", "q\n"]), lines.append)
    assert port.written == [b"F"]
    assert lines.count("Received +") == 2
    assert "Received Distance: -1" in lines
    assert lines[-1] == "ZIGBEE IO DONE!"


def test_run_waits_through_other_bytes():
    port = FakePort([b"a", b"b", b"c", b"2"])
    lines = []
    run(port, scripted_input(["q"]), lines.append)
    reads = [line for line in lines if line.startswith("Byte read")]
    assert len(reads) == 4
    assert port.incoming == []
    assert port.written == []


def test_run_stops_on_end_of_input():
    port = FakePort([b"c", b"0"])
    lines = []
    run(port, scripted_input([]), lines.append)
    assert port.written == []
    assert lines[-1] == "ZIGBEE IO DONE!"


def test_run_passes_prompt():
    port = FakePort([b"c", b"0"])
    prompts = []
    lines = []

    def _input(prompt):
        prompts.append(prompt)
        return "q"

    run(port, _input, lines.append)
    assert prompts == ["Input Command : "]
    assert port.written == []
    assert "Received +" in lines
    assert lines[-1] == "ZIGBEE IO DONE!"


def test_open_port_configuration():
    with mock.patch("serial.Serial") as factory:
        result = open_port("COM9", 19200)
    assert result is factory.return_value
    kwargs = factory.call_args.kwargs
    assert kwargs["port"] == "COM9"
    assert kwargs["baudrate"] == 19200
    assert kwargs["bytesize"] == serial.EIGHTBITS
    assert kwargs["parity"] == serial.PARITY_NONE
    assert kwargs["stopbits"] == serial.STOPBITS_ONE


def test_open_port_defaults():
    with mock.patch("serial.Serial") as factory:
        result = open_port()
    assert result is factory.return_value
    kwargs = factory.call_args.kwargs
    assert kwargs["port"] == "COM5"
    assert kwargs["baudrate"] == 9600


def test_main_reports_open_failure(capsys):
    with mock.patch("serial.Serial", side_effect=serial.SerialException("FileNotFoundError")):
        assert main([]) == 1
    out = capsys.readouterr().out
    assert "serial port does not exist" in out
    assert "some other error occurred" in out


def test_main_runs_and_closes_port(capsys):
    port = FakePort([b"c", b"5"])
    with mock.patch("serial.Serial", return_value=port), mock.patch(
        "builtins.input", side_effect=["q"]
    ):
        assert main(["--port", "COM7"]) == 0
    assert port.closed is True
    assert "ZIGBEE IO DONE!" in capsys.readouterr().out


@pytest.mark.parametrize("command", ["L", "R", "B"])
def test_run_writes_each_command(command):
    port = FakePort([b"c", b"1", b"c", b"1"])
    run(port, scripted_input([command, "q"]), lambda line: None)
    assert port.written == [command.encode()]