import pytest

from xdccget.arguments import (
    DccDownload,
    UsageError,
    build_parser,
    create_random_nick,
    parse_arguments,
    parse_channels,
    parse_dcc_download,
    parse_dcc_downloads,
)
from xdccget.config import (
    ConfigError,
    DEFAULT_PORT,
    Flag,
    XdccGetConfig,
    get_size_of,
)
from xdccget.log import LogLevel

POSITIONAL = ["irc.example.net", "#chan", "bot xdcc send #1"]


def test_parse_dcc_download_splits_at_first_space():
    assert parse_dcc_download("bot xdcc send #42") == ("bot", "xdcc send #42")


def test_parse_dcc_download_without_space():
    nick, cmd = parse_dcc_download("abc")
    assert nick == ""
    assert cmd == "abc"[1:]


def test_parse_channels_trims():
    assert parse_channels("#a, #b ,\t#c") == ["#a", "#b", "#c"]


def test_parse_channels_empty():
    assert parse_channels("") == []


def test_parse_dcc_downloads():
    downloads = parse_dcc_downloads("bot1 xdcc send #1 , bot2 xdcc send #2")
    assert downloads == [
        DccDownload("bot1", "xdcc send #1"),
        DccDownload("bot2", "xdcc send #2"),
    ]
    assert downloads[0].md5 is None


def test_parse_arguments_positional_and_defaults():
    config = parse_arguments(POSITIONAL, XdccGetConfig())
    assert config.args == POSITIONAL
    assert config.port == DEFAULT_PORT
    assert config.log_level == LogLevel.INFO


def test_parse_arguments_options():
    argv = ["-q", "-p", "6668", "-d", "/tmp/dl", "-n", "nick", "-c", "-4",
            "--accept-all-nicks", "--dont-confirm-offsets"] + POSITIONAL
    config = parse_arguments(argv, XdccGetConfig())
    assert config.log_level == LogLevel.QUIET
    assert config.port == 6668
    assert config.target_dir == "/tmp/dl"
    assert config.nick == "nick"
    for flag in (Flag.VERIFY_CHECKSUM, Flag.USE_IPV4, Flag.ACCEPT_ALL_NICKS,
                 Flag.DONT_CONFIRM_OFFSETS):
        assert config.has_flag(flag)
    assert not config.has_flag(Flag.USE_IPV6)


def test_last_log_level_wins():
    config = parse_arguments(["-q", "-v"] + POSITIONAL, XdccGetConfig())
    assert config.log_level == LogLevel.WARN


def test_port_accepts_hex():
    config = parse_arguments(["--port=0x1A0B"] + POSITIONAL, XdccGetConfig())
    assert config.port == 0x1A0B


def test_throttle_and_delay():
    argv = ["--throttle", " 1MByte", "--delay", "5"] + POSITIONAL
    config = parse_arguments(argv, XdccGetConfig())
    assert config.max_transfer_speed == get_size_of(1, "MByte")
    assert config.send_delay.delay_seconds == 5


def test_listen_ip_and_port():
    argv = ["--listen-ip", "10.0.0.1", "--listen-port", "55554"] + POSITIONAL
    config = parse_arguments(argv, XdccGetConfig())
    assert config.effective_listen_ip() == "10.0.0.1"
    assert config.effective_listen_port() == 55554


def test_invalid_listen_ip_raises():
    with pytest.raises(ConfigError):
        parse_arguments(["--listen-ip", "not-an-ip"] + POSITIONAL, XdccGetConfig())


def test_too_few_arguments():
    with pytest.raises(UsageError):
        parse_arguments(POSITIONAL[:2], XdccGetConfig())


def test_too_many_arguments():
    with pytest.raises(UsageError):
        parse_arguments(POSITIONAL + ["extra"], XdccGetConfig())


def test_unknown_option():
    with pytest.raises(UsageError):
        build_parser().parse_args(["--bogus"] + POSITIONAL)


def test_create_random_nick():
    nick = create_random_nick(12)
    assert len(nick) == 12
    assert nick.isalpha() and nick.isascii()


def test_create_random_nick_empty():
    assert create_random_nick(0) == ""