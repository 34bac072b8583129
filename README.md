# awaitkit

Small helpers for asyncio code, and a few thread synchronisation primitives.

- `awaitkit.parallel.parallel(...)` awaits several awaitables at once and returns their results as a tuple, in argument order.
- `awaitkit.timeout` has `timeout`, `timeout_fallback` and `timeout_value`, which await work under a deadline given in seconds.
- `awaitkit.timeout_with_result.timeout_with_result` awaits work that may fail and reports a three-way `TimeoutResult`: `Success`, `Failure` or `TimedOut` (from `awaitkit.core`).
- `awaitkit.errors` holds the `CustomError` family and turns a failed or timed-out result into one of them.
- `awaitkit.atomic.AtomicBool`, `awaitkit.spinlock.SpinMutex` and `awaitkit.channel.channel()` are for code running in threads.

No third-party libraries are needed. Python 3.11 or later is required.

## Installation

```
pip install awaitkit
```

With the test dependencies:

```
pip install "awaitkit[test]"
```

## Running awaitables in parallel

```python
import asyncio
from awaitkit.parallel import parallel
from awaitkit.app import get_posts, get_followers

async def run():
    posts, followers = await parallel(get_posts(123), get_followers(123))
    print(posts, followers)

asyncio.run(run())
```

Results keep the order of the arguments, not the order in which they finish.
A value such as an error object is returned like any other result. If one
awaitable raises, the others are cancelled and the exception propagates. A
non-awaitable argument raises `TypeError`.

## Deadlines

All of these are coroutines and must be awaited. `duration` is a non-negative
number of seconds; anything else raises `TypeError` or `ValueError`. A fallback
may be a value, an awaitable or a callable, and is evaluated only when it is
needed.

- `timeout(duration, body, fallback=...)` awaits `body` (an awaitable, or a
  callable returning one). When the deadline passes, the body is cancelled and
  `TimeoutExpired` is raised. Its `reason` is the fallback's value, or
  `"Operation timed out after <duration> seconds"` when there is no fallback.
  Exceptions from the body propagate unchanged.
- `timeout_fallback(duration, body, fallback)` returns the body's value, or the
  fallback's value on timeout.
- `timeout_value(duration, body, fallback=...)` evaluates `body` in its own task.
  Here `body` may also be a plain value or a plain callable. If the task raises,
  `TimeoutExpired` is raised with the fallback's value, or `"Task panicked"`,
  and the original exception as its cause. On timeout the behaviour is the same
  as `timeout`.

```python
import asyncio
from awaitkit.timeout import timeout_fallback, TimeoutExpired, timeout
from awaitkit.app import get_data

async def run():
    print(await timeout_fallback(1, get_data(), 42))   # 42: get_data takes 1.5 s
    try:
        await timeout(1, get_data, "too long!")
    except TimeoutExpired as exc:
        print(exc.reason)                               # too long!

asyncio.run(run())
```

## Three-way results

```python
import asyncio
from awaitkit.timeout_with_result import timeout_with_result
from awaitkit.core import Success, Failure, TimedOut
from awaitkit.app import get_data_3

async def run():
    result = await timeout_with_result(1, get_data_3(1100))
    match result:
        case Success(value):
            print("value", value)
        case Failure(error):
            print("error", error)
        case TimedOut():
            print("timed out")

asyncio.run(run())
```

A value returned in time becomes `Success`, and an exception raised in time
becomes `Failure`. Without a fallback, a timeout gives `TimedOut`. With one,
the fallback's value becomes `Success`, and an exception it raises becomes
`Failure`.

`result.unwrap()` returns the value of a `Success`. Otherwise it raises
`TimeoutResultError`, whose `error` and `timed_out` attributes say what
happened. `core.from_residual(err)` turns that exception back into a `Failure`
or `TimedOut`.

`errors.from_timeout_result_error(err)` maps such an exception onto a
`CustomError`. A wrapped `CustomError` is passed through. A timeout becomes
`OperationTimeout("Operation did not complete within the allotted time")`. Any
other wrapped error raises `TypeError`. The error kinds are `Unauthorized`,
`ResourceNotFound`, `OperationTimeout` and `UnknownError`. Each prints as
`"<prefix>: <message>"`, for example `Resource not found: 123`.

## Thread primitives

`AtomicBool(value=False)` has `load`, `store`, `swap`, `fetch_or`, `fetch_and`
and `fetch_xor`, which return the old value. `compare_exchange(expected, new)`
returns `(succeeded, previous_value)`.

`SpinMutex(data).lock()` waits, yielding the thread, until the lock is free. It
returns a `MutexGuard`. The guard's `value` reads and writes the data. The lock
is given back by `release()` or by leaving a `with` block. Using a released
guard raises `RuntimeError`.

```python
import threading
from awaitkit.channel import channel

tx, rx = channel()
threading.Thread(target=lambda: tx.send("Hello")).start()
print(rx.recv())
```

`channel()` returns an unbounded `Sender` and `Receiver` pair:

- `send` raises `SendError` (with the unsent `item`) once the channel is closed.
- `recv` blocks until an item arrives. It raises `RecvError` once the channel is closed and empty.
- `try_recv` does not block. It raises `ChannelEmpty` or `ChannelDisconnected`; both are subclasses of `TryRecvError`.

Either half can `close()` the channel, or act as a context manager that closes
it on exit. Iterating over a `Receiver` yields items until the channel is
closed and drained.

## Demo command

```
awaitkit-demo
```

This runs `app.fetch_and_add()`. It fetches data that takes 1.1 seconds under a
one-second deadline, so it prints
`error: Operation timed out: Operation did not complete within the allotted time`.
The command takes no options beyond `--help`. The fetch functions in
`awaitkit.app` only sleep and return made-up data; they talk to no real
service.