"""Program configuration and the configuration file."""

from __future__ import annotations

import os
import re
import socket
import time
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from .files import PathLike, dir_exists, file_exists, read_text_file
from .log import LogLevel, log

NO_SPEED_LIMIT = 0
DEFAULT_LISTEN_IP = "127.0.0.1"
DEFAULT_PORT = 6667

SIZE_NAMES = ("Byte", "KByte", "MByte", "GByte", "TByte", "PByte")

_SPEED_RE = re.compile(r"\s*([+-]?\d+)\s*(\S{1,100})")
_DELAY_RE = re.compile(r"\s*\+?(\d+)")
_ULONG_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


class ConfigError(ValueError):
    """Raised for an invalid configuration value."""


class Flag(IntEnum):
    """Boolean switches of the configuration."""

    OUTPUT = 1
    ALLOW_ALL_CERTS = 2
    USE_IPV4 = 3
    USE_IPV6 = 4
    VERIFY_CHECKSUM = 5
    SENDED = 6
    ACCEPT_ALL_NICKS = 7
    DONT_CONFIRM_OFFSETS = 8


@dataclass(frozen=True)
class SendDelay:
    """Delay before the xdcc send command goes out."""

    delay_seconds: int
    time_to_send: float


@dataclass
class XdccGetConfig:
    """Settings gathered from the config file and the command line."""

    log_level: LogLevel = LogLevel.INFO
    downloads: list = field(default_factory=list)
    max_transfer_speed: int = NO_SPEED_LIMIT
    send_delay: SendDelay | None = None
    flags: set[Flag] = field(default_factory=set)
    irc_server: str | None = None
    channels: list[str] = field(default_factory=list)
    target_dir: str | None = None
    nick: str | None = None
    login_command: str | None = None
    listen_ip: str | None = None
    listen_port: int = 0
    args: list[str] = field(default_factory=list)
    port: int = DEFAULT_PORT

    def set_flag(self, flag: Flag) -> None:
        self.flags.add(flag)

    def clear_flag(self, flag: Flag) -> None:
        self.flags.discard(flag)

    def has_flag(self, flag: Flag) -> bool:
        return flag in self.flags

    def effective_listen_ip(self) -> str:
        """The listen ip for passive dcc, falling back to the loopback address."""
        return self.listen_ip or DEFAULT_LISTEN_IP

    def effective_listen_port(self) -> int:
        """The listen port for passive dcc, 0 meaning any port."""
        return self.listen_port or 0


def get_size_of(value: int, unit: str) -> int | None:
    """Return ``value`` units in bytes, or None if ``unit`` is unknown."""
    try:
        exponent = SIZE_NAMES.index(unit)
    except ValueError:
        return None
    return value * 1024 ** exponent


def parse_max_transfer_speed(value: str) -> int:
    """Parse a speed like ``1MByte`` into bytes per second; anything invalid means no limit."""
    match = _SPEED_RE.match(value)
    if match is None:
        return NO_SPEED_LIMIT
    size = get_size_of(int(match.group(1)), match.group(2))
    if size is None or size <= 0:
        return NO_SPEED_LIMIT
    return size


def parse_delay(value: str, now: float | None = None) -> SendDelay:
    """Parse a delay in seconds; text that is not a number counts as 0."""
    match = _DELAY_RE.match(value)
    seconds = int(match.group(1)) if match else 0
    if now is None:
        now = time.time()
    return SendDelay(seconds, now + seconds)


def validate_ipv4(address: str) -> str:
    """Return ``address`` if it is a dotted IPv4 address, else raise ConfigError."""
    try:
        socket.inet_pton(socket.AF_INET, address)
    except (OSError, ValueError):
        raise ConfigError(f"the listen ip {address} is not valid ipv4 address.") from None
    return address


def _to_port(text: str) -> int:
    """Parse an unsigned number with C prefixes (0x hex, 0 octal) into 16 bits."""
    match = _ULONG_RE.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits, 16)
    elif digits.startswith("0"):
        value = int(digits, 8) if len(digits) > 1 else 0
    else:
        value = int(digits)
    if sign == "-":
        value = -value
    return value & 0xFFFF


def config_directory(home: PathLike | None = None) -> Path:
    """The directory that holds the configuration file."""
    base = Path(home) if home is not None else Path.home()
    return base / ".xdccget"


def default_config_content(home: PathLike | None = None) -> str:
    """Text of the configuration file written when none exists."""
    base = os.fspath(home) if home is not None else str(Path.home())
    download_dir = os.path.join(base, "Downloads")
    lines = [
        "# default directory where to store the downloads",
        f"downloadDir={download_dir}",
        "# default logging level, valid options: information, warn, error, quiet",
        "logLevel=information",
        "# allow all certificates and dont validate them",
        "allowAllCerts=true",
        "# stay connected after downloads finished to automatically verify checksums",
        "verifyChecksums=false",
        "# Do not send file offsets to the bots if set to false. Can be used on bots "
        "where the transfer gets stucked after a short while.",
        "confirmFileOffsets=false",
        "# Limit the maximum transfer speed for the downloads in each xdccget instance "
        "to the specified value per seconds. valid suffixes are KByte, MByte and TByte",
        "#maxTransferSpeed=1MByte",
        "# Sets the listen ip for passive dcc transfers. Should normally your external ip address.",
        "#listenIp=85.48.89.195",
        "# Sets the listen port for passive dcc transfers. This port needs to be forwared "
        "in your router, such that external TCP acknowledgements are not blocked.",
        "#listenPort=55554",
    ]
    return "\n".join(lines) + "\n"


_LOG_LEVELS = {
    "information": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "error": LogLevel.ERR,
    "quiet": LogLevel.QUIET,
}


def _toggle(config: XdccGetConfig, flag: Flag, on: bool) -> None:
    if on:
        config.set_flag(flag)
    else:
        config.clear_flag(flag)


def _apply_setting(config: XdccGetConfig, key: str, value: str) -> None:
    if key == "downloadDir":
        config.target_dir = value
    elif key == "logLevel":
        if value in _LOG_LEVELS:
            config.log_level = _LOG_LEVELS[value]
    elif key == "allowAllCerts":
        _toggle(config, Flag.ALLOW_ALL_CERTS, value == "true")
    elif key == "verifyChecksums":
        _toggle(config, Flag.VERIFY_CHECKSUM, value == "true")
    elif key == "confirmFileOffsets":
        _toggle(config, Flag.DONT_CONFIRM_OFFSETS, value != "true")
    elif key == "maxTransferSpeed":
        config.max_transfer_speed = parse_max_transfer_speed(value)
    elif key == "listenIp":
        config.listen_ip = validate_ipv4(value)
    elif key == "listenPort":
        config.listen_port = _to_port(value)


def parse_config_string(config: XdccGetConfig, content: str) -> XdccGetConfig:
    """Apply ``key=value`` lines to ``config``; blank lines and ``#`` comments are skipped."""
    for raw in content.split("\n"):
        line = raw.strip(" \r\t")
        if not line or line.startswith("#"):
            continue
        parts = line.split("=")
        if len(parts) != 2:
            continue
        key, value = (part.strip(" \t") for part in parts)
        _apply_setting(config, key, value)
    return config


def parse_config_file(config: XdccGetConfig, home: PathLike | None = None) -> XdccGetConfig:
    """Read the configuration file into ``config``, writing a default one first if missing."""
    directory = config_directory(home)
    path = directory / "config"

    if not file_exists(path):
        if not dir_exists(directory):
            try:
                directory.mkdir(mode=0o755)
            except OSError as exc:
                log(LogLevel.WARN, f"cant create dir {directory}: {exc}", config.log_level)
        path.write_bytes(default_config_content(home).encode("utf-8"))

    return parse_config_string(config, read_text_file(path))