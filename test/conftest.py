"""
statsdnet: fixtures for tests

"""
import selectors
import socket
import threading
import time
from types import TracebackType
from typing import Callable, Iterator, List, Optional, Type

import pytest

from statsdnet import logutil

logutil.configure_logging()


def port_is_listening(hostname: str, port: int, timeout: float = 0.5) -> bool:
    try:
        connection = socket.create_connection((hostname, port), timeout)
        connection.close()
        return True
    except socket.error:
        return False


@pytest.fixture(scope="session", name="get_available_port")
def fixture_get_available_port() -> Callable[[], int]:
    first_free_port = 30000

    def get_available_port():
        nonlocal first_free_port
        port = first_free_port
        while port < 40000:
            if not port_is_listening("localhost", port):
                first_free_port = port + 1
                return port
            port += 1
        raise RuntimeError("No available port")

    return get_available_port


class RecordingOutputChannel:
    def __init__(self) -> None:
        self.buffers: List[bytes] = []

    def send(self, buffer: bytes, length: Optional[int] = None) -> None:
        self.buffers.append(bytes(buffer[:length] if length is not None else buffer))

    @property
    def lines(self) -> List[str]:
        return [buffer.decode("utf-8") for buffer in self.buffers]


class UdpServer:
    def __init__(self, port: int) -> None:
        self.port = port
        self.socket = socket.socket(family=socket.AF_INET, type=socket.SOCK_DGRAM)

    def __enter__(self) -> "UdpServer":
        self.socket.bind(("127.0.0.1", self.port))
        return self

    def __exit__(self, exc_type: Type, exc_val: BaseException, exc_tb: TracebackType) -> None:
        self.socket.close()

    def has_message(self, timeout: float = -1) -> bool:
        selector = selectors.DefaultSelector()
        selector.register(self.socket, selectors.EVENT_READ)
        try:
            return len(selector.select(timeout=timeout)) > 0
        finally:
            selector.unregister(self.socket)

    def get_message(self) -> str:
        self.socket.settimeout(5)
        return self.socket.recv(2048).decode()


class TcpServer:
    """Accepts any number of connections and collects everything written to them"""
    def __init__(self, port: int) -> None:
        self.port = port
        self.socket = socket.socket(family=socket.AF_INET, type=socket.SOCK_STREAM)
        self.socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.connection_count = 0
        self._received = bytearray()
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._threads: List[threading.Thread] = []

    def __enter__(self) -> "TcpServer":
        self.socket.bind(("127.0.0.1", self.port))
        self.socket.listen(16)
        self.socket.settimeout(0.1)
        self._start(self._accept_loop)
        return self

    def __exit__(self, exc_type: Type, exc_val: BaseException, exc_tb: TracebackType) -> None:
        self._stop.set()
        for thread in self._threads:
            thread.join()
        self.socket.close()

    @property
    def received(self) -> bytes:
        with self._lock:
            return bytes(self._received)

    def wait_for(self, size: int, timeout: float = 5.0) -> bytes:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            data = self.received
            if len(data) >= size:
                return data
            time.sleep(0.01)
        return self.received

    def _start(self, target, *args) -> None:
        thread = threading.Thread(target=target, args=args, daemon=True)
        self._threads.append(thread)
        thread.start()

    def _accept_loop(self) -> None:
        while not self._stop.is_set():
            try:
                connection, _ = self.socket.accept()
            except socket.timeout:
                continue
            with self._lock:
                self.connection_count += 1
            self._start(self._read_loop, connection)

    def _read_loop(self, connection: socket.socket) -> None:
        connection.settimeout(0.1)
        with connection:
            while not self._stop.is_set():
                try:
                    data = connection.recv(4096)
                except socket.timeout:
                    continue
                except OSError:
                    return
                if not data:
                    return
                with self._lock:
                    self._received.extend(data)


@pytest.fixture(name="udp_server")
def fixture_udp_server(get_available_port: Callable[[], int]) -> Iterator[UdpServer]:
    with UdpServer(port=get_available_port()) as udp_server:
        yield udp_server


@pytest.fixture(name="tcp_server")
def fixture_tcp_server(get_available_port: Callable[[], int]) -> Iterator[TcpServer]:
    with TcpServer(port=get_available_port()) as tcp_server:
        yield tcp_server


@pytest.fixture(name="recording_channel")
def fixture_recording_channel() -> RecordingOutputChannel:
    return RecordingOutputChannel()
