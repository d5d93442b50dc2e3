# xdccget

Building blocks for fetching files from IRC bots over XDCC, written in plain
Python with no third-party dependencies. Python 3.10 or later is required.

## Modules

- `xdccget.config` – `XdccGetConfig` (settings and `Flag` switches),
  `parse_config_file` / `parse_config_string` for the `~/.xdccget/config`
  file, and helpers such as `get_size_of`, `parse_max_transfer_speed`,
  `parse_delay` and `validate_ipv4`. Invalid values raise `ConfigError`.
- `xdccget.arguments` – `parse_arguments(argv, config)` applies a command
  line to a configuration (parse errors raise `UsageError`);
  `parse_channels`, `parse_dcc_download` and `parse_dcc_downloads` split
  channel lists and `"<bot> <xdcc command>"` requests into `DccDownload`
  objects; `create_random_nick` makes a random nickname.
- `xdccget.progress` – `DownloadProgress` with a `SpeedAverager` that
  smooths the last eight speed samples, plus `format_size`, `format_eta`,
  `progress_bar`, `format_progress` and `terminal_columns`.
- `xdccget.hashing` – `create_hash_algorithm("MD5")` returns a
  `HashAlgorithm` that hashes files and strings, compares digests and
  converts hex digests to bytes.
- `xdccget.colors` – `convert_to_mirc`, `convert_from_mirc` and
  `strip_from_mirc` translate between mIRC colour/format codes and the
  `[B]`, `[U]`, `[I]`, `[COLOR=RED]`, `[COLOR=RED/BLUE]` tag form.
- `xdccget.log` – `LogLevel`, `format_log_line` and `log` for levelled,
  optionally ANSI-coloured log lines (info to stdout, warnings and errors to
  stderr).
- `xdccget.files` – `read_chunks`, `read_text_file`, `file_exists`,
  `dir_exists` and `get_file_size`.

## Examples

Tagged text to mIRC codes and back:

```python
from xdccget.colors import convert_to_mirc, convert_from_mirc, strip_from_mirc

raw = convert_to_mirc("Hello, [B]Tim[/B]")   # "Hello, \x02Tim\x02"
convert_from_mirc(raw)                         # "Hello, [B]Tim[/B]"
strip_from_mirc(raw)                           # "Hello, Tim"
```

Channel lists and download requests:

```python
from xdccget.arguments import parse_channels, parse_dcc_downloads

parse_channels("#sample-channel, #other-channel")
# ["#sample-channel", "#other-channel"]
downloads = parse_dcc_downloads("sample-bot xdcc send #42, other-bot xdcc send #7")
downloads[0].bot_nick, downloads[0].xdcc_cmd   # ("sample-bot", "xdcc send #42")
```

A command line applied to a configuration:

```python
from xdccget.arguments import parse_arguments
from xdccget.config import Flag, XdccGetConfig

config = parse_arguments(
    ["--port=6697", "--throttle", "1MByte", "-c",
     "irc.example.com", "#sample-channel", "sample-bot xdcc send #42"],
    XdccGetConfig(),
)
config.port                              # 6697
config.max_transfer_speed                # 1048576
config.has_flag(Flag.VERIFY_CHECKSUM)    # True
config.args                              # ["irc.example.com", "#sample-channel", "sample-bot xdcc send #42"]
```

Size units accept `Byte`, `KByte`, `MByte`, `GByte`, `TByte` and `PByte`;
an unknown unit or a value that is not positive means no limit (0):

```python
from xdccget.config import get_size_of, parse_max_transfer_speed

get_size_of(1, "MByte")            # 1048576
parse_max_transfer_speed("2KByte") # 2048
parse_max_transfer_speed("fast")   # 0
```

Checking a file against an expected MD5:

```python
from xdccget.hashing import create_hash_algorithm

md5 = create_hash_algorithm("MD5")
digest = md5.hash_file("download.bin")
expected = md5.hex_to_binary("d41d8cd98f00b204e9800998ecf8427e")
md5.equals(digest, expected)
```

## Configuration file

`parse_config_file(config, home=None)` reads `<home>/.xdccget/config`
(`home` defaults to the user's home directory), writing a commented default
file first if none exists. Recognised keys are `downloadDir`, `logLevel`
(`information`, `warn`, `error`, `quiet`), `allowAllCerts`,
`verifyChecksums`, `confirmFileOffsets`, `maxTransferSpeed`, `listenIp` and
`listenPort`. Blank lines, lines starting with `#`, unknown keys and lines
that do not hold exactly one `=` are ignored. An invalid `listenIp` raises
`ConfigError`.

## What this package does not do

It has no IRC client and no DCC transfer code: it does not connect to a
server, join channels, send XDCC commands or receive files. It also
installs no command; `parse_arguments` only turns a command line into an
`XdccGetConfig` for a program built on top of it.

## Tests

The test suite uses pytest, installed with the `test` extra:

```
pip install .[test]
pytest
```