"""Manual command console talking to a Zigbee link over a serial port."""

import argparse

import serial

DEFAULT_PORT = "COM5"
DEFAULT_BAUDRATE = 9600
START_MARKER = b"c"
QUIT_COMMAND = "q"


def open_port(port=DEFAULT_PORT, baudrate=DEFAULT_BAUDRATE):
    """Open a serial port at 8N1 with short read and write timeouts."""
    return serial.Serial(
        port=port,
        baudrate=baudrate,
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        timeout=0.06,
        write_timeout=0.06,
        inter_byte_timeout=0.05,
    )


def read_byte(port):
    """Read a single byte; return b"" when the read timed out."""
    return bytes(port.read(1))[:1]


def write_byte(port, data):
    """Write the first byte of ``data`` (a NUL byte if empty) and return it."""
    if isinstance(data, str):
        data = data.encode("latin-1")
    byte = bytes(data[:1]) or b"\x00"
    port.write(byte)
    return byte


def _show(byte):
    return byte.decode("latin-1")


def run(port, input_func=input, output=print):
    """Wait for the start marker, then send one typed command; repeat until 'q'."""
    output("\n---------- Manual Command Mode ----------")
    while True:
        received = b""
        while received != START_MARKER:
            received = read_byte(port)
            output(f"Byte read from read buffer is: {_show(received)} ")
        output("Received +")

        distance = -1
        distance_byte = read_byte(port)
        output(f"Byte read from read buffer is: {_show(distance_byte)} ")
        output(f"Received Distance: {distance}")

        try:
            line = input_func("Input Command : ")
        except EOFError:
            break
        if line.endswith("\n"):
            line = line[:-1]
        if line == QUIT_COMMAND:
            break
        written = write_byte(port, line)
        output(f"Byte written to write buffer is: {_show(written)} ")

    output("\n---------- Communication Done ----------")
    output("ZIGBEE IO DONE!")


def main(argv=None):
    """Open the serial port and run the manual command console."""
    parser = argparse.ArgumentParser(description="Send manual commands over a Zigbee serial link.")
    parser.add_argument("--port", default=DEFAULT_PORT, help="serial port name")
    parser.add_argument("--baudrate", type=int, default=DEFAULT_BAUDRATE, help="baud rate")
    args = parser.parse_args(argv)

    try:
        port = open_port(args.port, args.baudrate)
    except serial.SerialException as error:
        text = str(error)
        if "FileNotFound" in text or "No such file" in text:
            print(" serial port does not exist ")
        print(" some other error occurred. Inform user.")
        return 1

    with port:
        run(port)
    return 0