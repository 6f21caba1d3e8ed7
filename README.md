# suikit

A Python client for the Sui JSON-RPC API. It reads coins, events, objects,
transaction blocks, Move package structure, name-service records and
system state; asks a node to build unsigned transactions through the
`unsafe_*` methods; executes transactions from their bytes and signatures;
requests test coins from a faucet; and subscribes to event and transaction
streams over a websocket. It also derives ed25519 keys from mnemonics along
hardened paths and turns them into Sui addresses.

Runtime dependencies are `httpx`, `cryptography` and `websocket-client`.
The `test` extra adds `pytest`.

## Reading from a node

`suikit.client.SuiClient` holds one JSON-RPC connection and exposes each
group of calls as an attribute:

| attribute      | class                                   |
|----------------|-----------------------------------------|
| `base`         | `suikit.rpc.BaseAPI`                    |
| `coin`         | `suikit.coin.CoinAPI`                   |
| `event`        | `suikit.event.EventAPI`                 |
| `move`         | `suikit.move.MoveAPI`                   |
| `name_service` | `suikit.name_service.NameServiceAPI`    |
| `objects`      | `suikit.objects.ObjectAPI`              |
| `transaction`  | `suikit.transaction.TransactionReadAPI` |
| `system`       | `suikit.system.SystemAPI`               |
| `write`        | `suikit.write.WriteTransactionAPI`      |

```python
from suikit.client import SuiClient

owner = "0xd939e3fe7ea4d503f84767dca0c58b7ec1c71f085638a4c0611aa64aa71b5fcf"

with SuiClient("https://fullnode.example.com") as client:
    balance = client.coin.get_balance(owner, "0x2::sui::SUI")
    coins = client.coin.get_coins(owner, "0x2::sui::SUI", limit=5)
    gas_price = client.system.get_reference_gas_price()
    checkpoints = client.system.get_checkpoints(limit=5, descending_order=True)
    tx = client.transaction.get_transaction_block(
        "2LYaFDf5oU64xguKAjSiH7TarPSkxc35sN6rPc8RsoWf",
        {"showInput": True, "showEffects": True},
    )
```

Results are the decoded JSON `result` of each call (dicts, lists, strings).
`get_latest_checkpoint_sequence_number` and `get_reference_gas_price`
return an `int`; `get_total_transaction_blocks` returns an `int` and 0 when
the node reports nothing.

`SuiClient(rpc_url, http_client=None, timeout=30.0)` accepts a custom
`httpx.Client`; `close()` then leaves that client open. The `url` property
gives the endpoint.

For any method without a wrapper, `client.base.sui_call(method, *args)`
returns the whole response envelope.

### Errors

- A failed HTTP request, an undecodable answer, or an `error` field in the
  answer raises `suikit.rpc.RpcError` (its `error` attribute holds the
  node's error value). A missing `result` also raises `RpcError`.
- Exceptions to that rule: `ObjectAPI.get_object` does not look at the
  `error` field; `MoveAPI` methods return `None` when the request itself
  fails; `get_chain_identifier` and `resolve_name_service_address` return an
  empty string when there is no result.
- Paginated calls check `limit` before sending and raise
  `suikit.validate.ValidationError` when it is negative.

### Building and executing transactions

`client.write` wraps `sui_executeTransactionBlock` and the `unsafe_*`
builders: `move_call`, `merge_coins`, `split_coin`, `split_coin_equal`,
`publish`, `transfer_object`, `transfer_sui`, `pay`, `pay_sui`,
`pay_all_sui`, `request_add_stake`, `request_withdraw_stake` and
`batch_transaction`. The builders return the node's transaction metadata;
`move_call` sends the gas object only when one is given.

```python
meta = client.write.transfer_sui(
    signer=owner,
    sui_object_id="0x2aceb239c7c04c43a2e39824a003291f8e2b1d6027324df5bbf67cb30c1fcfbe",
    gas_budget="100000000",
    recipient="0x4ae8be62692d1bbf892b657ee78a59954240ee0525f20a5b5687a70995cf0eff",
    amount="1",
)
```

## Keys and addresses

```python
from suikit.signer import new_signer_with_mnemonic

account = new_signer_with_mnemonic(
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
print(account.address)
```

`suikit.signer`:

- `mnemonic_to_seed(mnemonic, passphrase="")` gives the 64-byte seed; it
  raises `ValueError` unless the phrase has 12, 15, 18, 21 or 24 words.
- `new_signer(seed)` takes a 32-byte ed25519 seed and returns a `Signer`
  with `private_key` (seed followed by public key, 64 bytes), `public_key`
  and `address` (`0x` plus the BLAKE2b-256 of the flag byte and public key).
- `new_signer_with_mnemonic(mnemonic)` derives along `m/44'/784'/0'/0'/0'`.

`suikit.derive` has `new_master_key`, `derive_for_path`, `is_valid_path`
and the `Key` dataclass with `derive`, `public_key` and `raw_seed`. Only
hardened derivation exists: a non-hardened index raises
`NoPublicDerivationError`, a malformed or out-of-range path raises
`InvalidPathError`.

`suikit.intent.intent_with_scope(IntentScope.TRANSACTION_DATA)` returns the
intent prefix `[0, 0, 0]`.

## Faucet

```python
from suikit.faucet import request_sui_from_faucet

request_sui_from_faucet("https://faucet.example.com", account.address, {})
```

The request goes to `<host>/v1/gas`. Any status other than 200 or 202, or a
failed request, raises `suikit.faucet.FaucetError`.

## Subscriptions

```python
from suikit.subscribe import WebsocketClient

with WebsocketClient("wss://fullnode.example.com") as ws:
    for event in ws.subscribe_event(
        {"MoveEventType": "0x3::validator::StakingRequestEvent"}
    ):
        print(event)
```

Each subscription opens its own connection and yields the `params.result`
of each notification. An error reply or message raises `SubscriptionError`;
the stream ends when the connection closes. `close()` closes every open
subscription connection.

## Helpers

- `suikit.utils.pretty_print(value)` prints indented JSON, or `str(value)`
  when it cannot be encoded.
- `suikit.utils.is_field_non_empty(obj, field_name)` tells whether an
  attribute or mapping key is set to a non-zero value.
- `suikit.validate` has `is_hex`, `check_address` and `validate_range`.

## What it does not do

- It does not sign transactions. A `Signer` holds the keys and address, but
  there is no call that signs transaction bytes and executes them in one
  step; pass bytes and signatures made elsewhere to
  `execute_transaction_block`.
- Only ed25519 accounts are supported; there is no secp256k1 signer.
- Mnemonics are checked by word count only, not against a word list or
  checksum.
- There are no built-in network endpoints: node and faucet addresses must
  be supplied by the caller.