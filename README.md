# ordinals

Tools for working with the ordinal numbers of satoshis. The package converts
between the integer, decimal, degree, percentile and name notations. It works
out a sat's rarity. It also reads and writes inscription envelopes in taproot
witness scripts.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Show the first sat of each reward epoch:

```
ordinals epochs
```

Parse an object and print it back in canonical form:

```
ordinals parse nvtdijuwxlp
ordinals parse "1°0′0″0‴"
ordinals parse 1.1
```

An object can be any of these:

- a sat number, name, degree, percentile or decimal
- an inscription id
- an outpoint
- a satpoint
- a 64-digit hash
- an integer
- a segwit address

The result is printed as indented JSON. When parsing fails, the command prints
`error: ...` to standard error and exits with status 1.

## Library

### Sats and rarity

```python
from ordinals.sat import Sat, epoch_starting_sats
from ordinals.rarity import Rarity

sat = Sat.parse("1°0′0″0‴")
print(sat.n, sat.name(), sat.rarity())      # 2067187500000000 ... legendary
print(sat.degree(), sat.decimal(), sat.percentile())
print(sat.height(), sat.epoch(), sat.cycle(), sat.period(), sat.third())

assert Rarity.parse("epic") is Rarity.EPIC
assert Sat(0).rarity() is Rarity.MYTHIC
```

`ordinals.sat` also provides these functions:

- `height_subsidy`
- `epoch_subsidy`
- `height_starting_sat`
- `epoch_starting_sat`
- `epoch_starting_sats`

### Other notations

```python
from ordinals.object import Object
from ordinals.inscription_id import InscriptionId
from ordinals.sat_point import OutPoint, SatPoint
from ordinals.outgoing import parse_outgoing
from ordinals.representation import Representation

Object.parse("0123456789abcdef" * 4 + "i1")
InscriptionId.parse("11" * 32 + "i0")
SatPoint.parse("11" * 32 + ":1:1")
Representation.detect("1.1")            # Representation.DECIMAL
parse_outgoing("0sat")                  # Amount(sats=0)
```

`OutPoint` and `SatPoint` support consensus serialisation through `encode()`
and `decode()`. `ordinals.address.Address` parses and formats bech32 and
bech32m addresses. `ordinals.amount.Amount` parses amounts with a
denomination, for example `1.5 BTC` or `100 sat`.

### Inscriptions

```python
from ordinals.inscription import Inscription, Transaction, TxIn, parse_witness

inscription = Inscription(content_type=b"text/plain;charset=utf-8", body=b"hello")
witness = inscription.to_witness()
assert parse_witness(witness) == [inscription]

tx = Transaction(inputs=[TxIn(witness=witness)])
Inscription.from_transaction(tx)        # [TransactionInscription(...)]
```

`Inscription.from_file(path, content_size_limit)` builds an inscription from a
file. It chooses the content type with `ordinals.media.content_type_for_path`.
For `.mp4` files, `check_mp4_codec` rejects any video track that is not H.264.

`ordinals.script` holds a small script reader (`instructions`) and a writer
(`ScriptBuilder`).

## What this package does not do

This package works offline only. It has no connection to a Bitcoin node, no
index of the chain, no explorer server and no wallet. For that reason, finding
where a sat is, listing the sats held by a live output, and creating
inscriptions on chain are not available.

`ordinals.cli.list_ranges` describes sat ranges that you supply yourself. It
does not look anything up.