# qstools

Building blocks for a command line client of an object-storage service that
addresses objects as `qs://bucket/key`. The package has no runtime
dependencies.

## What is inside

| Module | Purpose |
| --- | --- |
| `qstools.convert` | `parse_byte_size` turns strings such as `"1GB"` or `"1 G"` into a byte count and raises `ByteSizeError` on bad input; `unix_readable_size` shortens `"1.2 GB"` to `"1.2G"` and raises `ReadableSizeFormatError` when the input is not `<number> <unit>B`. |
| `qstools.parts` | `calculate_part_size` picks a multipart upload part size for an object size and raises `LocalFileTooLargeError` when the object is larger than `MAXIMUM_OBJECT_SIZE`. |
| `qstools.workdir` | `parse_fs_work_dir` and `parse_qs_work_dir` split a local or remote path into a working directory and a file name. |
| `qstools.paths` | `parse_flow`, `parse_local_path`, `parse_qs_path` and `is_qs_path` decide which way data flows (`FlowType`) and what kind of object a path names (`ObjectType`). `parse_local_path` raises `PathParseError` when a path cannot be inspected. |
| `qstools.printing` | `align_print_with_colon` and `align_columns` line up text for terminal output. |
| `qstools.check` | `double_check_string` and `check_confirm`, and the `InputCheck` and `ConfirmCheck` classes behind them, ask the user to retype a value or confirm an action. |
| `qstools.logger` | `init_logger_with_debug` and `init_logger_with_level_and_writer` build a `logging.Logger` that writes `[LEVEL] - <unix nanoseconds> <message>` lines. |
| `qstools.messages_en`, `qstools.messages_zh` | `en_us_messages()` and `zh_cn_messages()` return the English and Simplified Chinese message catalogues as fresh dictionaries from template to translation. |
| `qstools.extract` | `extract_messages` collects the literal templates passed to `i18n.*` calls in the Python files of a directory. |

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Sizes:

```python
from qstools.convert import parse_byte_size, unix_readable_size

parse_byte_size("1 GB")       # 1073741824
unix_readable_size("1 GB")    # "1G"
```

Working directories on the remote side. Repeated separators are collapsed
unless URI cleaning is turned off:

```python
from qstools.workdir import parse_qs_work_dir

parse_qs_work_dir("path///to///dir/", False)   # ("/path/to/dir/", "")
parse_qs_work_dir("/path/to/file", False)      # ("/path/to/", "file")
```

Remote paths and the direction of a transfer:

```python
from qstools.paths import FlowType, is_qs_path, parse_flow, parse_qs_path

is_qs_path("qs://bucket/key")                  # True
object_type, bucket, key = parse_qs_path("qs://abcdef/def/ghi")
# object_type is ObjectType.FILE, bucket == "abcdef", key == "def/ghi"
parse_flow("local.txt", "qs://bucket/key") is FlowType.TO_REMOTE   # True
```

Aligned output:

```python
from qstools.printing import align_print_with_colon

print(align_print_with_colon("e1: test1", "e12: example2", "long1: s3"))
#    e1: test1
#   e12: example2
# long1: s3
```

Part sizes for multipart uploads:

```python
from qstools.parts import calculate_part_size

calculate_part_size(1024)   # 134217728, the default part size
```

Prompts read from standard input by default; a different `prompt` callable
can be passed to the check classes:

```python
from qstools.check import ConfirmCheck

ConfirmCheck(msg="Remove it?", prompt=lambda text: "y").check_confirm()   # True
```

Message catalogues:

```python
from qstools.messages_zh import zh_cn_messages

zh_cn_messages()["not confirmed"]   # "未确认"
```

## Command

`qstools-extract` reads the Python files in a directory (the current one by
default), collects the templates used with `i18n.*` calls — the second
argument of `i18n.fprintf`, the first of the others — and writes them as a
JSON object mapping each template to itself:

```
qstools-extract
qstools-extract path/to/sources -o data.json
```

Without `-o`, the output goes to `../../translations/en_US/data.json`. The
command exits with status 1 if a file cannot be read or parsed, or the output
cannot be written.

## What it does not do

- It does not talk to a storage service: it has no client, no upload,
  download, listing or bucket commands. It only parses and classifies the
  paths such commands would use.
- It does not detect the locale or format localised messages. The catalogues
  are plain dictionaries; choosing one and filling in its `%s`/`%v`
  placeholders is left to the caller.