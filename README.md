# reqkit

Building blocks for HTTP clients: typed request options, header and cookie
parsing, URL escaping helpers, and a thread pool for running work in the
background.

## Installation

```
pip install reqkit
```

## Modules

- `reqkit.error`: `ErrorCode` (an `IntEnum` of transfer failures) and `Error`,
  a dataclass with `code` and `message`. An `Error` is false when its code is
  `ErrorCode.OK` and true otherwise.
- `reqkit.timeout`: `Timeout` and `ConnectTimeout` take whole milliseconds or a
  `datetime.timedelta`. `Timeout.milliseconds()` returns the value and raises
  `OverflowError` above the signed 64-bit range or `ArithmeticError` below it.
  `LowSpeed(limit, time)` is a frozen dataclass.
- `reqkit.util`:
  - `Header` is a mutable mapping with case-insensitive keys. A name keeps the
    spelling of its first insertion, and iteration is ordered by the lower-cased
    name.
  - `split(text, delimiter)` splits a string and drops a trailing empty field.
  - `parse_header(headers)` returns `(header, status_line, reason)`. Every
    `HTTP/` status line clears the fields collected so far, so only the last
    response's fields are kept.
  - `parse_cookies(lines)` builds `Cookies` from tab-separated cookie-jar lines,
    taking the last two fields as name and value. It raises `ValueError` on a
    line with fewer than two fields.
  - `url_encode(text)` percent-encodes everything but unreserved characters.
  - `url_decode(text)` decodes percent escapes and leaves `+` unchanged.
- `reqkit.auth`:
  - `AuthMode` has the members `BASIC`, `DIGEST` and `NTLM`.
  - `Authentication(username, password, auth_mode)` has an `auth_string`
    property that gives `user:password`.
  - `EncodedAuthentication` percent-encodes both parts. With no arguments its
    string is empty, and giving only one part raises `TypeError`.
  - `ProxyAuthentication` maps a protocol to an `EncodedAuthentication`. It has
    `has(protocol)`, and indexing it returns the encoded string.
- `reqkit.cookies`: `Cookies` is a mutable mapping iterated in name order. Its
  `encode` flag defaults to `True`.
- `reqkit.containers`: `Parameter` and `Pair` are frozen dataclasses with `key`
  and `value`.
  - `Parameters` and `Payload` keep items in insertion order. `add(*items)`
    accepts item objects or `(key, value)` tuples.
  - `get_content()` joins the items as `key=value&...` and URL-encodes them
    unless `encode` is `False`.
  - In `Parameters`, an item with an empty value renders as the bare key.
- `reqkit.proxies`: `Proxies` maps a protocol to a proxy URL. It has
  `has(protocol)`, and indexing it returns the URL.
- `reqkit.redirect`:
  - `PostRedirectFlags` is an `IntFlag` with `NONE`, `POST_301`, `POST_302`,
    `POST_303` and `POST_ALL`.
  - `any_flag(flag)` tells whether any flag is set.
  - `Redirect` is a keyword-only dataclass with these fields and defaults:
    `maximum=50` (0 refuses redirects, -1 allows any number), `follow=True`,
    `cont_send_cred=False` and `post_flags=POST_ALL`.
- `reqkit.threadpool`: `ThreadPool(min_threads, max_threads, max_idle_ms)` keeps
  between the minimum and maximum number of worker threads.
  - Threads above the minimum retire after staying idle for `max_idle_time`.
  - The pool has the methods `start`, `stop`, `pause`, `resume` and `wait`.
  - `submit(fn, *args, **kwargs)` returns a `concurrent.futures.Future`, and
    submitting to a stopped pool starts it.
  - `start` on a running pool raises `RuntimeError`, and so does `stop` on a
    stopped one.
  - The pool works as a context manager.
- `reqkit.background`: a process-wide `GlobalThreadPool` with `get_instance()`
  and `exit_instance()`.
  - `startup(min_threads, max_threads, max_idle_ms)` configures and starts the
    pool. It does nothing if the pool is already running.
  - `run_async(fn, *args, **kwargs)` submits work to the pool.
  - `cleanup()` stops and discards the pool.

## Examples

Build a query string:

```python
from reqkit.containers import Parameters

params = Parameters([("key", "value"), ("hello", "world")])
params.add(("test", "case"))
print(params.get_content())   # key=value&hello=world&test=case
```

Parse a raw header block:

```python
from reqkit.util import parse_header

header, status_line, reason = parse_header(
    "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n"
)
print(header["content-type"])  # text/html
print(status_line)             # HTTP/1.1 200 OK
print(reason)                  # OK
```

Encode proxy credentials:

```python
from reqkit.auth import EncodedAuthentication

password = "password"
auth = EncodedAuthentication("user", password)
print(auth.auth_string)        # user:password
```

Run work in the background:

```python
from reqkit.background import startup, run_async, cleanup

startup(1, 4, 60000)
future = run_async(sum, [1, 2, 3])
print(future.result())         # 6
cleanup()
```

## What it does not do

reqkit does not open connections or send requests. It has no session and no
response type. It supplies option values, parsing and escaping helpers, and a
thread pool for a client built on top of it.

## Running the tests

```
pip install -e ".[test]"
pytest
```