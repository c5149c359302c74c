# ravenserver

Building blocks for local stand-ins of a game's online services: Quazal
PRUDP packet parsing and serialisation, the packet checksum, the RC4
stream cipher with the protocol's fixed key, zlib payload compression,
a little-endian byte stream, and a reader for `raven.ini`-style settings.

## Installation

```
pip install .
```

## Modules

- `ravenserver.packet.QPacket` – a dataclass for one PRUDP packet.
  `QPacket.parse(data, service_name)` reads the source and destination
  virtual ports, type/flags byte, session id, signature and sequence id,
  then the fields that depend on the packet type: a connection signature
  for SYN and CONNECT (plus the rest of the packet as payload for CONNECT
  on the `grfs_secure` service), and for DATA a fragment id and a payload,
  sized by a length field when the `HAS_SIZE` flag is set. Too little data
  raises `IndexError`. `packet.serialize(auto_checksum=True)` returns the
  wire bytes; with `auto_checksum` the checksum is computed and stored on
  the packet, otherwise the stored `checksum` is written.
- `ravenserver.typeflags` – `PacketType`, `PacketFlags`, and
  `read_packet_type`, `check_flag`, `make_type_flags` for the byte that
  packs a type (low three bits) and flags (upper five bits).
- `ravenserver.vport` – `VPort` (`from_byte`, `to_byte`) and `StreamType`.
- `ravenserver.checksum` – `make_checksum(data, setting=0xFF)`; a setting
  of `0xFF` derives the seed from the protocol in the first byte through
  `protocol_setting(protocol)`.
- `ravenserver.encryption` – `encrypt(data)` and `decrypt(data)`, RC4 with
  a fresh state on each call.
- `ravenserver.compression` – `compress(data, level=9)` and
  `decompress(data, original_size)`; the output of `decompress` is
  zero-padded to `original_size`, and failures raise `CompressionError`.
  Empty input gives empty output.
- `ravenserver.stream.ByteStream` – reads `u8`/`u16`/`u32` and raw bytes
  from a position (`IndexError` past the end), `skip`, `remaining`, and
  appending writes; `data` and `position` are properties.
- `ravenserver.ini.IniParser` – `load(filename)` and `loads(text)` parse
  `[section]` headers and `key = value` lines, skipping blank lines and
  lines starting with `;` or `#`. `get_string`, `get_int` (leading
  integer within the 32-bit signed range), `get_float` and `get_bool`
  (`true/yes/on/1`, `false/no/off/0`, any case) fall back to a default.
- `ravenserver.config` – `load_config(path="raven.ini")` and
  `config_from_parser(parser)` build a `RavenConfig` from the
  `[Account]` (`Username`, `Password`), `[DedicatedServer]`
  (`OnlineConfigService`), `[Network]` (`IP`) and `[Hooks]`
  (`PatchOnlineConfigServiceAddress`, `LogHermesEvents`, `LogRMCEvents`)
  settings.
- `ravenserver.filelog.FileLogger` – appends
  `YYYY-MM-DD HH:MM:SS [INF|DBG|ERR] - message` lines to a file and,
  optionally, to the console. Messages use `%`-style formatting and are
  cut to 255 bytes. It can be used as a context manager.

## What it does not do

The package has no command to run and starts no services. It does not
listen on any network port, serve the onlineconfig document over HTTP,
answer PRUDP packets or keep track of connected clients. It only provides
the packet, cipher, compression and configuration pieces listed above.

## Tests

```
pip install .[test]
pytest
```