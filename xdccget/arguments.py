"""Command-line parsing and parsing of channel and download lists."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass

from .config import (
    Flag,
    XdccGetConfig,
    _to_port,
    parse_delay,
    parse_max_transfer_speed,
    validate_ipv4,
)
from .log import LogLevel

VERSION = "xdccget 1.1"

_NICK_CHARS = "abcdefghiklmnopqrstuvwxyzABCDEFGHIJHKLMOPQRSTUVWXYZ"


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""


@dataclass
class DccDownload:
    """A bot and the xdcc command to send it."""

    bot_nick: str
    xdcc_cmd: str
    md5: str | None = None


def parse_dcc_download(text: str) -> tuple[str, str]:
    """Split ``"bot xdcc send #1"`` at the first space into nick and command.

    Without a space the nick is empty and the command is the text after its first character.
    """
    space = text.find(" ")
    if space == -1:
        space = 0
    return text[:space], text[space + 1:]


def _split_list(text: str) -> list[str]:
    if not text:
        return []
    return [item.strip(" \t") for item in text.split(",")]


def parse_channels(text: str) -> list[str]:
    """Split a comma separated channel list, trimming blanks around each name."""
    return _split_list(text)


def parse_dcc_downloads(text: str) -> list[DccDownload]:
    """Split a comma separated list of ``bot command`` entries into downloads."""
    return [DccDownload(*parse_dcc_download(item)) for item in _split_list(text)]


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """The command-line parser; parse errors raise UsageError."""
    parser = _Parser(
        prog="xdccget",
        description="xdccget -- download from cmd with xdcc",
    )
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("-v", "--verbose", dest="log_level", action="store_const",
                        const=LogLevel.WARN, help="Produce verbose output")
    parser.add_argument("-q", "--quiet", dest="log_level", action="store_const",
                        const=LogLevel.QUIET, help="Don't produce any output")
    parser.add_argument("-i", "--information", dest="log_level", action="store_const",
                        const=LogLevel.INFO, help="Produce information output.")
    parser.add_argument("-c", "--checksum-verify", action="store_true",
                        help="Stay connected after download completed to verify checksums.")
    parser.add_argument("-4", "--ipv4", action="store_true",
                        help="Use ipv4 to connect to irc server.")
    parser.add_argument("-6", "--ipv6", action="store_true",
                        help="Use ipv6 to connect to irc server.")
    parser.add_argument("-p", "--port", metavar="<port number>",
                        help="Use the following port to connect to server. default is 6667.")
    parser.add_argument("-d", "--directory", metavar="<download-directory>",
                        help="Directory, where to place the files.")
    parser.add_argument("-n", "--nick", metavar="<nickname>",
                        help="Use this specific nickname while connecting to the irc-server.")
    parser.add_argument("-l", "--login", metavar="<login-command>",
                        help="Use this login-command to authorize your nick after connecting.")
    parser.add_argument("--accept-all-nicks", action="store_true",
                        help="Accept DCC send requests from ALL bots without verifying nicknames.")
    parser.add_argument("--dont-confirm-offsets", action="store_true",
                        help="Do not send file offsets to the bots.")
    parser.add_argument("--throttle", metavar="<speed>",
                        help="Limit the transfer speed per second, e.g. 1MByte.")
    parser.add_argument("--delay", metavar="<time in seconds>",
                        help="Delay the sending of the xdcc send command.")
    parser.add_argument("--listen-ip", metavar="<ipv4 address>",
                        help="Listen ip address for passive dcc.")
    parser.add_argument("--listen-port", metavar="<port number>",
                        help="Listen port for passive dcc.")
    parser.add_argument("server", help="<server>")
    parser.add_argument("channels", help="<channel(s)>")
    parser.add_argument("bot_cmds", help="<bot cmds>")
    return parser


def parse_arguments(argv: Sequence[str] | None, config: XdccGetConfig) -> XdccGetConfig:
    """Apply the command line ``argv`` to ``config`` and return it."""
    ns = build_parser().parse_args(argv)

    if ns.log_level is not None:
        config.log_level = ns.log_level
    if ns.checksum_verify:
        config.set_flag(Flag.VERIFY_CHECKSUM)
    if ns.ipv4:
        config.set_flag(Flag.USE_IPV4)
    if ns.ipv6:
        config.set_flag(Flag.USE_IPV6)
    if ns.accept_all_nicks:
        config.set_flag(Flag.ACCEPT_ALL_NICKS)
    if ns.dont_confirm_offsets:
        config.set_flag(Flag.DONT_CONFIRM_OFFSETS)
    if ns.directory is not None:
        config.target_dir = ns.directory
    if ns.nick is not None:
        config.nick = ns.nick
    if ns.login is not None:
        config.login_command = ns.login
    if ns.port is not None:
        config.port = _to_port(ns.port)
    if ns.throttle is not None:
        config.max_transfer_speed = parse_max_transfer_speed(ns.throttle.strip(" \t"))
    if ns.delay is not None:
        config.send_delay = parse_delay(ns.delay.strip(" \t"))
    if ns.listen_ip is not None:
        config.listen_ip = validate_ipv4(ns.listen_ip).strip(" \t")
    if ns.listen_port is not None:
        config.listen_port = _to_port(ns.listen_port)

    config.args = [ns.server, ns.channels, ns.bot_cmds]
    return config


def create_random_nick(length: int) -> str:
    """A random nickname of ``length`` letters."""
    return "".join(random.choice(_NICK_CHARS) for _ in range(length))