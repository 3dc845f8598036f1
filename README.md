# mcpplay

A small playground for the Model Context Protocol (MCP). It runs an MCP
server over server-sent events (SSE) that offers a calculator with two
tools, `sum` and `sub`. It also has a few other command-line commands.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```
mcpplay --version
mcpplay basic
```

`basic` prints a greeting line.

### example

```
mcpplay example
mcpplay example example first second
mcpplay example example-no-args
```

Each form prints `This is an example function`. The two optional
arguments of `example example` are accepted and not used. A single free
word after `example` is also accepted.

### server

```
mcpplay server start
mcpplay server start 9000
```

`server start` serves MCP on `localhost`, on port 8080 unless a port
(0–65535) is given. It runs until interrupted with Ctrl+C. Without
`start`, `mcpplay server` only prints the example message.

The log level comes from the `MCPPLAY_LOG` environment variable and is
`DEBUG` by default.

The protocol works like this:

- A client opens a stream with `GET /sse`. Its first event is `endpoint`, whose
  data is the path to post to: `/message?sessionId=<id>`.
- The client sends JSON-RPC messages with `POST` to that path. The server
  answers `202`. It answers `404` for an unknown session and `400` for a body
  that is not JSON.
- Replies arrive as `message` events on the open stream.
- Each session has its own calculator.
- The supported methods are `initialize`, `ping`, `tools/list` and `tools/call`.
- Notifications and client responses get no reply.
- Any other method gets a "method not found" error (-32601).

The calculator offers:

- `sum`: the sum of two integers `a` and `b`
- `sub`: the difference `a - b`

Both operands must be 32-bit signed integers, and so must the result.
Otherwise the call fails with an invalid-params error (-32602). Results
are returned as text.

### scaffold

```
mcpplay scaffold command my-command
```

Run this from the root of the project. It does four things:

- It normalises the name. The name is lower-cased and every non-alphanumeric
  character becomes `_`, so the name above becomes `my_command`.
- It copies `.meta/templates/command.rs` to `src/commands/<name>.rs`.
- It appends `pub(crate) mod <name>;` to `src/commands.rs`.
- It inserts the new command next to the scaffold markers in `src/main.rs`.

It fails if the template is missing, and it fails if the command file
already exists. In both cases it exits with status 1.

## Using it as a library

```python
from mcpplay.calculator import Calculator, ToolError

calc = Calculator()
calc.sum(2, 3)                          # "5"
calc.call_tool("sub", {"a": 7, "b": 4}) # {"content": [{"type": "text", "text": "3"}], "isError": False}
calc.list_tools()
calc.get_info()
```

Parts of the library:

- `mcpplay.server.McpServer` answers single JSON-RPC messages through
  `handle_message`. `make_app` returns the aiohttp application that serves the
  SSE and message endpoints, and `start(port)` runs it.
- `mcpplay.scaffold` provides `scaffold_command(name, project_dir)`,
  `normalize_name` and `title_case`.

## Limitations

- The server speaks only the SSE transport, on `localhost`. It has no stdio
  transport and no authentication.
- Its only tools are the two calculator tools.
- The scaffold command only edits files. It does not build or check the
  project it writes into.