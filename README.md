# pcskit

Small building blocks for a command-line shell that talks to a cloud-storage
service. The package has no dependencies.

## Installation

```
pip install pcskit
```

To run the tests:

```
pip install "pcskit[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `pcskit.hashtable` | `Hashtable`: a string-keyed table that can ignore ASCII case. `add` raises `KeyError` on a duplicate key, `set` returns the old value, and `remove` returns the removed value |
| `pcskit.args` | `parse_args` turns an argument vector into an `Args` object (command, positional arguments, `-abc` and `--name=value` options). It raises `ArgumentError` when an option is repeated |
| `pcskit.jsonnode` | `JsonNode` and `JsonType`: a tree of JSON values. Member lookup by name ignores case |
| `pcskit.jsoncodec` | `parse`, `parse_prefix`, `dumps` and `minify`: a lenient JSON reader and writer. It accepts single-quoted strings and `//` or `/* */` comments. `JsonParseError` carries the failing `position` |
| `pcskit.errmsg` | `login_errmsg`, `errmsg_by_errno`, `share_errmsg`, `download_errmsg`, `buy_errmsg`, `record_errmsg`: English messages for the service's error codes |
| `pcskit.localfs` | `LocalFileInfo`, `get_local_file_info`, `get_directory_files`, `create_directory_recursive` (raises `TargetIsFileError`), `delete_file_recursive`, `set_file_last_modify_time` |
| `pcskit.writecache` | `WriteCache` and `Block`: hold blocks of data in offset order and write them out in one pass |

## Examples

Parsing command-line arguments:

```python
from pcskit.args import parse_args, ArgumentError

args = parse_args(["pcs", "upload", "-r", "--config=my.conf", "local.txt", "/remote"])
args.cmd                  # "upload"
args.argv                 # ["local.txt", "/remote"]
args.has_opt("r")         # True
args.get_opt("config")    # "my.conf"

# test_arg is True when the argument count is in range and every option given is allowed.
if not args.test_arg(1, 2, "r", "config"):
    raise SystemExit("Wrong arguments")
```

Reading and writing lenient JSON:

```python
from pcskit.jsoncodec import parse, dumps

node = parse("{'errno': 0, /* comment */ \"list\": [1, 2.5, \"x\"]}")
node.get_item("ERRNO").value_int   # 0 (member names match without regard to case)
dumps(node, formatted=False)       # '{"errno":0,"list":[1,2.500000,"x"]}'
```

Looking up an error message:

```python
from pcskit.errmsg import errmsg_by_errno, login_errmsg

errmsg_by_errno(-8)   # "This file is already exists in this directory"
login_errmsg(4)       # "Wrong password"
```

Local files:

```python
from pcskit.localfs import create_directory_recursive, get_directory_files

create_directory_recursive("downloads/2024/photos")
for info in get_directory_files("downloads", recursive=True):
    print(info.path, info.isdir, info.size)   # paths are relative to "downloads"
```

Buffering out-of-order writes:

```python
from pcskit.writecache import WriteCache

with open("out.bin", "wb") as fp:
    cache = WriteCache(fp)
    cache.add(4, b"5678")
    cache.add(0, b"1234")
    cache.flush()     # writes the blocks in offset order
    cache.reset()
```

## What it does not do

This package is a library of parts. It does not provide:

- a `pcs` command or an interactive shell,
- an HTTP client for the storage service,
- a way to log in, upload or download.

The `errmsg` tables only turn error codes the service returns into text.