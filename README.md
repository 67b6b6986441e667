# tgkit

tgkit provides the low-level parts that a Telegram bot is built on. It has no
dependencies outside the Python standard library.

## Contents

### Tools

- `tgkit.tools.strings`
  - `starts_with` and `ends_with` check prefixes and suffixes.
  - `split(text, delimiter)` splits text but drops a trailing empty field.
  - `generate_random_string(length)` builds a random string.
  - `url_encode(value, additional_legit_chars)` percent-encodes every UTF-8 byte
    outside `A-Z a-z 0-9 _ . - ~ :` and the extra characters you pass.
  - `url_decode(value)` reverses it and raises `ValueError` on a bad escape.
- `tgkit.tools.files`
  - `read_file(path)` reads a whole file and returns its bytes.
  - `write_file(content, path)` writes a whole file. Text is stored as UTF-8.

### Networking

- `tgkit.net.url.Url.parse(url)` returns a frozen `Url` with these fields:
  `protocol`, `host`, `path` (with its leading `/`), `query` and `fragment`.
- `tgkit.net.http_parser` builds and reads raw HTTP/1.1 messages as bytes.
  - `HttpReqArg(name, value, is_file=False, mime_type="text/plain", file_name="")`
    is one request argument. Values that are not text or bytes are turned into
    text. Booleans become `"1"` or `"0"`.
  - `generate_request(url, args, keep_alive)` sends a `GET` when there are no
    arguments. Otherwise it sends a `POST`. The body is
    `application/x-www-form-urlencoded`, or `multipart/form-data` if any
    argument is a file.
  - `generate_multipart_form_data`, `generate_multipart_boundary` and
    `generate_www_form_urlencoded` build the request bodies.
  - `generate_response`, `parse_header` and `extract_body` build responses and
    read them back.
- `tgkit.net.http_client` holds the abstract `HttpClient` with
  `make_request(url, args)`, which returns the response body as bytes. There are
  two implementations:
  - `SslHttpClient` speaks HTTP/1.1 over a TLS 1.2 socket on port 443.
    - It does not verify certificates unless you pass `verify=True`.
    - The first read waits at most `read_timeout` seconds, 20 by default.
  - `UrllibHttpClient` uses `urllib.request`.
    - POST arguments are always sent as `multipart/form-data`.
    - The query part of the URL is not sent.
    - A response with an error status still returns its body.
    - Transport failures raise `RuntimeError`.
- `tgkit.net.server`
  - `HttpServer(address, handler)` is a threaded HTTP/1.1 server. `start()`
    blocks until `stop()` is called, and the `ready` event is set once the
    server is listening.
  - The handler receives the request body and the parsed head, and returns the
    complete response.
  - A request without a positive `Content-Length` is answered with 400. A
    handler that raises produces a 500.
  - `WebhookServer(address, path, event_handler)` passes every POST to `path` to
    `event_handler.handle_update`, after running the body through `parse_update`.
    By default `parse_update` is `json.loads`.
  - `TcpWebhookServer(port, path, event_handler)` listens on IPv4 TCP.
    `LocalWebhookServer(unix_socket_path, path, event_handler)` listens on a Unix
    socket.
- `tgkit.net.long_poll.LongPoll(api, event_handler, limit=100, timeout=10)`
  - Each `start()` call fetches one batch through
    `api.get_updates(offset=..., limit=..., timeout=..., allowed_updates=...)`.
  - It hands every update to `event_handler.handle_update` and moves the offset
    past the highest `update_id` it has seen.

### Data types

`tgkit.types` contains dataclasses for Bot API objects:

- `media`: `PhotoSize`, `Animation`, `Audio`, `Voice`, `MaskPosition`,
  `Sticker`, `File`, `Location`, `Contact`, `InputFile`, `InputMediaType` and
  `InputMedia`. `InputFile.from_file(path, mime_type)` reads a file and names
  it after the last part of the path.
- `payments`: `ShippingAddress`, `OrderInfo` and `Invoice`.
- `chat`: `ChatPermissions`, `BotCommand`, `PollOption`, `ResponseParameters`,
  `WebhookInfo`, `GameHighScore`, `InlineQuery`, `CallbackQuery` and `Update`.
- `markup`: `GenericReply` and `ReplyKeyboardMarkup`.
- `inline`: `InlineQueryResult` and its subclasses. Each subclass sets `type`
  from its `TYPE`, for example `"article"` or `"photo"`.

## Example

```python
from tgkit.net.url import Url
from tgkit.net.http_parser import HttpReqArg, generate_request, extract_body
from tgkit.tools.strings import url_encode

url = Url.parse("https://api.example.com/sendMessage")
request = generate_request(url, [HttpReqArg("chat_id", 42), HttpReqArg("text", "hi")], False)

print(url.host)                                     # api.example.com
print(request.splitlines()[0])                      # b'POST /sendMessage HTTP/1.1'
print(url_encode("a b", ""))                        # a%20b
print(extract_body("HTTP/1.1 200 OK\r\n\r\n{}"))    # {}
```

## What it does not do

tgkit does not include a Bot API client. There are no methods such as
`sendMessage` or `getUpdates`, and nothing converts JSON into the data types.
`LongPoll` and the webhook servers need you to supply the object that fetches
updates and the event handler that receives them. By default the webhook
servers pass updates on as decoded JSON, not as `Update` objects. No command-line
program is installed.