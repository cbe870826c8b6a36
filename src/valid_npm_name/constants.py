"""Registry limits and reserved package names."""

from __future__ import annotations

MAX_PACKAGE_NAME_LENGTH = 214

# Node.js core modules, including the subpath builtins.
_CORE_MODULES = (
    "assert",
    "assert/strict",
    "async_hooks",
    "buffer",
    "child_process",
    "cluster",
    "console",
    "constants",
    "crypto",
    "dgram",
    "diagnostics_channel",
    "dns",
    "dns/promises",
    "domain",
    "events",
    "fs",
    "fs/promises",
    "http",
    "http2",
    "https",
    "inspector",
    "inspector/promises",
    "module",
    "net",
    "os",
    "path",
    "path/posix",
    "path/win32",
    "perf_hooks",
    "process",
    "punycode",
    "querystring",
    "readline",
    "readline/promises",
    "repl",
    "stream",
    "stream/consumers",
    "stream/promises",
    "stream/web",
    "string_decoder",
    "sys",
    "timers",
    "timers/promises",
    "tls",
    "trace_events",
    "tty",
    "url",
    "util",
    "util/types",
    "v8",
    "vm",
    "wasi",
    "worker_threads",
    "zlib",
)

_RESERVED_NAMES = (
    "node_modules",
    "favicon.ico",
)

BLACK_LIST: frozenset[str] = frozenset(_CORE_MODULES + _RESERVED_NAMES)
