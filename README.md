# parallab

Small, self-contained concurrency building blocks for Python, written on top
of `threading`, `asyncio` and the standard library, with no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `parallab.atomic_max` | `AtomicMax`: a thread-safe running maximum |
| `parallab.stop_control` | `StopSource` / `StopToken`: cooperative cancellation for threads |
| `parallab.ticket_office` | `TicketOffice`: thread-safe selling from a fixed stock |
| `parallab.thread_pool` | `ThreadPool`: fixed-size worker pool returning futures |
| `parallab.coro_task` | `Task`, `simple_coroutine`: an eagerly started generator task with one result |
| `parallab.chapters` | `Book`, `BookChapter`, `list_book_chapters`: a lazy chapter generator |
| `parallab.awaiting` | `SumAwaiter`, `ResumableTask`, `coroutine_with_await`: resuming a coroutine by hand |
| `parallab.compute` | `async_compute`, `example_task`: chained asyncio computations |
| `parallab.async_file` | `OpenMode`, `AsyncFile`, `open_file`, `copy_file`, `copy_two_files`: file copying without blocking the event loop |
| `parallab.bitonic` | `bitonic_sort`, `bitonic_pass`, `stage_count`: the bitonic sorting network |
| `parallab.gaussian` | `gaussian_kernel`, `kernel_size`, `GaussianKernel`: normalised 1-D Gaussian weights |
| `parallab.radio` | `RadioServer`, `RadioClient`, `parse_args`, `encode_samples`, `decode_samples`: 16-bit PCM audio over UDP |
| `parallab.tv_packet` | `PacketHeader`, `PacketType`, `encode_packet`, `decode_packet`: framed video/audio packets |

## Examples

### Running maximum across threads

```python
from parallab.atomic_max import AtomicMax

best = AtomicMax(0)
best.update(10)
best.update(5)
print(best.value)  # 10
```

### Cooperative stopping

```python
import threading
from parallab.stop_control import StopSource

source = StopSource()
watcher = source.get_token()

worker = threading.Thread(target=watcher.wait_for_stop)
worker.start()
source.request_stop()
worker.join()
print(watcher.stop_requested())  # True
```

A `StopToken()` built without a source never reports a stop, and its
`wait_for_stop()` raises `RuntimeError`.

### Selling tickets

```python
from parallab.ticket_office import TicketOffice

office = TicketOffice(50)
print(office.sell_tickets(60))  # 50, only what was left
print(office.tickets_left)      # 0
```

`TicketOffice` raises `ValueError` for a negative stock or a non-positive order.

### Thread pool

```python
from parallab.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    futures = [pool.enqueue(lambda i=i: i * 2) for i in range(10)]
    print([f.result() for f in futures])
```

`enqueue` returns a `concurrent.futures.Future`; an exception raised inside a
task is re-raised by its `result()`. `tasks_pending()` counts tasks queued or
running. On `shutdown()` (also called when the `with` block ends) running tasks
finish, while tasks still waiting in the queue are dropped and their futures
cancelled.

### Async file copying

```python
import asyncio
from parallab.async_file import copy_file

copied = asyncio.run(copy_file("a.in", "a.out"))
```

`copy_file` returns the number of bytes copied; reads and writes run in the
event loop's default executor.

### Bitonic sort

```python
from parallab.bitonic import bitonic_sort

print(bitonic_sort([7, 3, 1, 8, 2, 6, 5, 4]))
```

The input length must be a non-zero power of two; otherwise `ValueError` is raised.

### Gaussian kernel

```python
from parallab.gaussian import gaussian_kernel, kernel_size

kernel = gaussian_kernel(3)
assert len(kernel.weights) == kernel_size(3)  # 7
print(kernel.sigma)  # 1.0
```

### TV packets

```python
from parallab.tv_packet import PacketType, encode_packet, decode_packet

frame = encode_packet(PacketType.VIDEO, b"jpeg bytes")
header, payload = decode_packet(frame)
```

Each packet starts with an 8-byte header: one type byte, three padding bytes
and a little-endian 32-bit payload size.

## Command-line demos

```
parallab-atomic-max        # running maximum after a few updates
parallab-stop              # a worker thread stopped after two seconds
parallab-tickets           # selling from a stock of 100 tickets
parallab-task              # a generator task returning a greeting
parallab-chapters          # chapters of three books, one per line
parallab-await             # suspending and resuming a coroutine by hand
parallab-compute [DELAY]   # two chained asynchronous computations
parallab-copy [DIRECTORY]  # write a.in and b.in, then copy them to a.out and b.out
parallab-bitonic [SIZE]    # bitonic sort compared with the built-in sort
```

`parallab-copy` writes its sample files into the given directory, or the
current one.

### Radio

The radio streams 16-bit signed mono samples over UDP. Start a server on a
port, then point a client at it:

```
parallab-radio 5000
parallab-radio 127.0.0.1 5000
```

The server reads raw little-endian samples from standard input and sends them
to the first client that contacts it; the client writes the samples it
receives, as raw little-endian data, to standard output, filling gaps with
silence. Progress is logged to standard error. Ports must lie between 1 and
65535. `RadioServer` and `RadioClient` also accept a `capture` or `playback`
callable in place of standard input and output.

## What this package does not do

- It does not open microphones, speakers or cameras: the radio only moves raw
  PCM between standard streams (or your callables) and the network.
- `parallab.tv_packet` only frames and parses packets; there is no webcam
  station or receiver window.
- `parallab.gaussian` computes kernel weights only; it does not blur images.
- `parallab.bitonic` runs the sorting network in plain Python, not on a GPU.