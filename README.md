# dlnet

Building blocks for network programs. The package needs nothing outside the
standard library.

## Modules

- `dlnet.stringutil`: text helpers.
  - `split(text, delimiter="|")` keeps empty pieces. `cut(text, delimiter="|")`
    splits at the first delimiter and drops empty halves.
  - `replace(text, old, new)`, plus `trim_left`, `trim_right` and `trim`. A text
    made only of the trimmed character is returned unchanged.
  - `is_end_with(full, ending)`.
  - Hex helpers: `hexmem(data)`, `hexdump(data)`, `bin_to_hex(data, upper=False)`
    and `ptr2string(address)`, which gives strings like `"0x7f00"`.
  - `hex_to_bin(text)` raises `ValueError` when the input has odd length or a
    bad digit.
- `dlnet.urlcodec`: `url_encode(source, limit=None)` and `url_decode(source, limit=None)`.
  - Letters, digits and `-_.~` pass through unchanged. A space becomes `+`, and
    every other byte becomes `%XX`.
  - Text is encoded as UTF-8 first.
  - `url_decode` returns text for text input and bytes for bytes input.
  - A malformed escape raises `UrlCodecError`.
- `dlnet.base64codec`: `base64_encode(data)` produces padded base64.
  `base64_decode(text)` is lenient. It stops at the first `=` or any character
  outside the alphabet.
- `dlnet.byteutils`: byte packing and byte order.
  - Big-endian packing: `encode_u16/24/32(value)` and `decode_u16/24/32(data)`.
    Decoding raises `ValueError` on short input.
  - Host/network byte-order conversion: `host_to_network16/32/64` and
    `network_to_host16/32/64`.
- `dlnet.sha1`: an incremental `SHA1` hasher.
  - Methods: `update`, the `<<` operator, `result()` (five 32-bit words),
    `hexdigest()` and `reset()`.
  - Feeding input after the digest was taken raises `SHA1Error`.
- `dlnet.ringbuffer`: `RingBuffer(capacity)`, a fixed-size circular byte FIFO.
  - Methods: `write`, `read`, `peek`, `consume`, `data_size`, `remain_size` and
    `first_segment`.
  - A write that does not fit raises `BufferFullError`.
- `dlnet.timers`: cancelable tasks and a timer queue.
  - `TaskCancelable` wraps a task; `cancel()` drops it.
  - `Timer` is one timer entry.
  - `TimerManager` holds the queue: `add_timer`, `add`, `del_timer`,
    `get_recent_timeout` and `process_all_timeout`.
  - A timer function gets the timer's argument. It returns the next delay in
    milliseconds, or 0 to stop.
  - `get_recent_timeout()` returns `None` when no timer is queued.
- `dlnet.selfip`: `get_self_ip(server_ip)` returns the local IPv4 address used
  to reach a server. It sends no packet, and raises `OSError` on failure.
- `dlnet.dispatch`: task queues and related helpers.
  - `DispatchQueue` runs tasks in order on its own thread. It has
    `dispatch`, `stop` and `is_current_thread`, and a shared
    `DispatchQueue.global_queue()`. `stop()` drops tasks still queued.
  - `LoopQueue` collects tasks and runs them on `run_once()`.
  - `ScopeGuard` is a context manager that calls a function on exit unless
    `dismiss()` was called.
  - `set_thread_name(name, thread=None)`.
- `dlnet.ioutil`: path and file helpers.
  - Functions: `is_path_exists`, `dir_name`, `create_dir`, `get_file_size`
    and `is_file_exist`.
  - `open_file(path, mode="ab")` creates the parent directory and retries
    before raising `OSError`.
- `dlnet.mylog`: a levelled line logger.
  - Functions: `debug`, `info`, `warning` and `critical`. Each one returns the
    line it wrote, or `None` if the line was filtered out.
  - Settings: `set_my_log_level` / `get_my_log_level` with `MyLogLevel`, and
    `set_output_func` to redirect lines away from standard output.
  - `MyOut` builds a single line with `<<`.
- `dlnet.filelog`: file writers. Both support `with`, `write`, `flush` and
  `close`.
  - `DailyFileLog(base, ext, max_files)` writes `<base>_<YYYY-MM-DD><ext>` and
    switches files at local midnight.
  - `RotateFileLog(base, ext, max_files, max_size)` writes `<base>_0<ext>` and
    shifts the numbered files up once the size limit is reached.

## Install

```
pip install .
```

## Examples

```python
from dlnet.base64codec import base64_encode, base64_decode
from dlnet.sha1 import SHA1
from dlnet.ringbuffer import RingBuffer

assert base64_decode(base64_encode(b"hello")) == b"hello"

h = SHA1()
h.update(b"abc")
print(h.hexdigest())   # a9993e364706816aba3e25717850c26c9cd0d89d

ring = RingBuffer(8)
ring.write(b"abcdef")
print(ring.read(4))    # b'abcd'
```

```python
from dlnet.timers import TimerManager

timers = TimerManager()
timers.add_timer(100, lambda arg: 0, None)
timers.process_all_timeout()   # ms until the next due timer, or 0 if none remain
```

```python
from dlnet.filelog import RotateFileLog

with RotateFileLog("logs/app", ".log", 3, 1024 * 1024) as log:
    log.write("started\n")
```

## What it does not do

The package holds supporting utilities only. It has no socket server, event
loop or protocol handling, and it has no command-line program.

## Tests

```
pip install .[test]
pytest
```