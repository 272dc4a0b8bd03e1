# ircserv

A small IRC server. It listens on a TCP port, accepts clients, greets each one,
collects what they send, and parses each received batch that contains a line
break as an IRC message following RFC 1459/2812: an optional prefix, a command
made of letters, up to fourteen middle parameters and an optional trailing one.

## Running the server

```
pip install .
ircserv <port> <password>
```

For example `ircserv 6667 password`.

Both arguments are required; with any other number of arguments the command
prints an error and exits with status 1. The port must be a whole decimal
number (leading whitespace and a sign are allowed); anything else stops the
server with the error `Failed to convert the port`. The server binds on all
interfaces. Press Ctrl-C to shut it down; it reports `End of the server` and
closes every connection.

Set `IRCSERV_VERBOSE=1` in the environment to see debug, log, warning and
success reports on standard output, including a breakdown of every parsed
message. Errors (such as a line that cannot be parsed) are always shown.

## Using the library

### Parsing messages

```python
from ircserv.message import IRCMessage, MessageParseError

msg = IRCMessage.parse(":nick!user@host PRIVMSG #chan :hello there")
msg.command        # "PRIVMSG"
msg.params         # ["#chan", "hello there"]
msg.has_trailing   # True
msg.prefix         # "nick!user@host"
msg.nickname       # "nick"
msg.username       # "user"
msg.hostname       # "host"
msg.param(5)       # "" for a missing parameter
```

`IRCMessage.parse` raises `MessageParseError` (a `ValueError`) for input that
is not a valid message, such as an empty string, a prefix with nothing after
it, or a line with no command.

### Numeric replies

`ircserv.replies` has one function per numeric reply, each returning the
reply line, for example:

```python
from ircserv.replies import err_needmoreparams, rpl_list

err_needmoreparams("alice", "JOIN")
# "461 alice JOIN :Not enough parameters\r\n"
rpl_list("server", "alice", "#chan", 3, "topic")
# "322 server alice #chan 3 :topic\r\n"
```

### Running a server from code

```python
from ircserv.server import Server

password = "password"
with Server("6667", password) as server:
    server.serve_forever()
```

`Server` also accepts an integer port, a `host` to bind on and a `reporter`
(`ircserv.diagnostics.Reporter`, which takes `verbose` and an optional output
`stream`). Instead of `serve_forever()` you can drive it with
`poll_once(timeout)`; `address` gives the bound address, and `close()` (or
leaving the `with` block) shuts everything down. Port parsing is available on
its own as `ircserv.server.parse_port`. Each connection is tracked as an
`ircserv.client.Client` holding its pending input.

## What it does not do

The server only parses and reports what clients send. It does not act on any
command: there is no registration, no password check, no nicknames, channels
or message delivery, and it never sends the numeric replies from
`ircserv.replies` to clients. The only thing a client receives is the welcome
line on connection.

## Tests

```
pip install -e .[test]
pytest
```