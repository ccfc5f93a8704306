# soltoolkit

Helpers for the Solana wire format, small polled HTTP JSON-RPC clients, and
tools for Shadow Drive storage accounts. The package uses only the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `soltoolkit.codec`: base58 and base64 encoding (`bs58_encode`,
  `bs58_decode`, `bs64_encode`, `bs64_decode`), the compact-u16 length
  format (`short_u16_encode`, and `short_u16_decode`, which returns the value
  together with the new cursor), and `key_to_string`, which gives the base58
  text of a key passed as text, bytes or an object that can be turned into
  bytes.
- `soltoolkit.urls`: `parse_url`, `assemble_url` and `ws_from_http`. They
  split a URL into a dictionary of components, join such a dictionary back
  into a URL, and derive the `ws`/`wss` URL of an HTTP endpoint for a given
  port.
- `soltoolkit.http_client`: `RpcHttpRequestClient` sends queued JSON-RPC
  requests one after another. `RpcMultiHttpRequestClient` runs each request
  on its own client. Both move forward only when you call `process(delta)`.
  The network call is made by a transport function, `http_transport` by
  default, which you can replace. A failed or timed-out request passes an
  empty dictionary to its callback and raises `RpcRequestError`. The multi
  client logs that error instead of raising it.
- `soltoolkit.lookup_table`: `AddressLookupTable`, the lookup table entry
  of a versioned message, with `from_bytes` and `serialize`.
- `soltoolkit.shdw_accounts`: `StorageAccountV2` and `UserInfo` account
  decoders. Malformed data raises `ShdwAccountError`.
- `soltoolkit.shdw_program`: the program and endpoint constants,
  `human_size_to_bytes` (for example `"10KB"` gives `10000`, in decimal
  units) and `initialize_account_data`, which builds the instruction data
  that creates a storage account.
- `soltoolkit.shdw_upload`: `filename_hash`, `upload_message` (the text
  the storage owner signs) and `build_upload_form`. `build_upload_form`
  returns an `UploadForm` that holds the multipart body and its headers.

## Examples

Encoding:

```python
from soltoolkit.codec import bs58_encode, bs58_decode

text = bs58_encode(bytes(32))          # "11111111111111111111111111111111"
assert bs58_decode(text) == bytes(32)
```

URLs:

```python
from soltoolkit.urls import parse_url, assemble_url, ws_from_http

parts = parse_url("https://api.devnet.solana.com:443/path?x=1")
# {'query': 'x=1', 'scheme': 'https', 'path': '/path',
#  'port': 443, 'host': 'api.devnet.solana.com'}
assert assemble_url(parts) == "https://api.devnet.solana.com:443/path?x=1"
assert ws_from_http("http://localhost:8899", 8900) == "ws://localhost:8900"
```

A JSON-RPC call. The client does not block: queue the request, then call
`process` until the callback has run.

```python
import time
from soltoolkit.http_client import RpcHttpRequestClient
from soltoolkit.urls import parse_url

client = RpcHttpRequestClient()
request = {"id": 1, "jsonrpc": "2.0", "method": "getLatestBlockhash", "params": []}
client.asynchronous_request(
    request,
    parse_url("https://api.devnet.solana.com:443"),
    lambda response: print(response.get("result")),
)

while not client.is_completed():
    client.process(0.1)
    time.sleep(0.1)
client.close()
```

Shadow Drive data:

```python
from soltoolkit.shdw_accounts import StorageAccountV2
from soltoolkit.shdw_program import human_size_to_bytes, initialize_account_data

data = initialize_account_data("my-storage", human_size_to_bytes("10MB"))
account = StorageAccountV2.from_bytes(raw_account_bytes)
print(account.to_dict()["identifier"])
```

## What the package does not do

- It has no high-level client object with one method per RPC call. You build
  request dictionaries yourself and pass them to the HTTP clients.
- It has no websocket client and no subscription handling.
- It does not build, sign or send transactions, and it does not derive
  program addresses. To upload a file, you must sign the upload message
  yourself and then pass the signature to `build_upload_form`. You must also
  send the resulting form yourself.