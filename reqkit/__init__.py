"""Building blocks for HTTP clients: request options, header and cookie parsing, URL escaping and a thread pool."""

__version__ = "0.1.0"

__all__ = [
    "auth",
    "background",
    "containers",
    "cookies",
    "error",
    "proxies",
    "redirect",
    "threadpool",
    "timeout",
    "util",
]