# morphdict

Building blocks for a dictionary-based morphological analyser that works on
single-byte (Windows-1251) word forms: readers and scanners for packed
dictionary trees, wildcard matching, capitalization schemes, and the
grammar tables, character classes and codepage handling of a Ukrainian
analyser.

## Modules

- `morphdict.encoding` – `read_serial` (7-bit variable-length values) and
  `read_word16` (little-endian 16-bit words), each returning the value and
  the next offset; `lexeme_key` encodes a lexeme id as the shortest
  big-endian key of one to four bytes; `FlexInfo` holds a grammar word and
  a flag byte.
- `morphdict.collector` – `Collector(capacity)`, a bounded byte buffer.
  `append` takes a byte value or a byte string, all or nothing, and raises
  `CollectorOverflow` when it does not fit; `len()` and `bytes()` give its
  contents.
- `morphdict.charset` – `Charset`, a set of byte values iterated in
  ascending order; `collect(output)` appends them to a `Collector` and
  returns how many were appended.
- `morphdict.capscheme` – `CharType` (`CAPITAL`, `REGULAR`, `DLMCHAR`,
  `INVALID`) and the scheme checks `is_good_scheme(scheme, min_cap)`,
  `is_good_scheme_min0`, `is_good_scheme_min1`, `is_good_scheme_min2`.
- `morphdict.scandict` – `scan_tree(action, data, key, wide)` walks a tree
  along a key and offers every stem list on the way, deepest first;
  `get_track(action, data, wide, dicpos)` visits every node with a list
  together with the characters leading to it. `LookupList` matches the rest
  of a word against a stem list, `SelectView` picks the single stem entry at
  a given offset; both have `action(data)` to bind them to a dictionary.
  Actions return `None` to go on; any other value stops the scan and is
  returned.
- `morphdict.buildforms` – `get_flex_forms(output, table, fxinfo, prefix,
  suffix)` appends `prefix + flexion + suffix` and a zero byte to a
  `Collector` for every flexion of the table matching `fxinfo`, and returns
  the number of forms built.
- `morphdict.wildscan` – `wild_scan_tree(target, data, pattern, wide)`
  matches a pattern with `?` (any one character) and `*` (any run of
  characters) against a tree; `is_wildcard` and `is_asterisk` check
  patterns.
- `morphdict.ukr_flags` – `SearchFlags`, `GramFlags`, `VerbTime`,
  `VerbFace`, `VerbForm`, the `GramInfo` record with properties such as
  `case_index`, `gender`, `verb_time`, and `LemmatizeError` carrying one of
  the codes `LEMMBUFF_FAILED`, `LIDSBUFF_FAILED`, `GRAMBUFF_FAILED`,
  `WORDBUFF_FAILED`.
- `morphdict.ukr_chartype` – `char_type`, `to_lower` and `to_upper` for the
  Ukrainian alphabet in Windows-1251 (Latin `I`/`i` lower-case to `і`).
- `morphdict.ukr_stem` – `StemInfo` (loaded with `StemInfo.load(data,
  pos)`, with `min_cap_scheme`, `flex_table_offset`, `swap_table_offset`,
  `verb_swap_level`), the alternation levels `verb_mix_power`,
  `verb_mix_power_0`, `verb_mix_power_1`, `verb_mix_power_2`, and
  `is_verb`, `is_adjective`, `is_participle`, `normal_info`.
- `morphdict.codepages` – `Codepage`, `resolve_codepage` for names such as
  `"utf-8"`, `"koi8"`, `"dos"` or `"1251"` (case is ignored), and
  `encode_word` / `decode_word` to convert words to and from the dictionary
  encoding. Words of 256 bytes or more raise
  `LemmatizeError(WORDBUFF_FAILED)`.

## Installation

```
pip install .
```

## Example

```python
from morphdict.codepages import Codepage, resolve_codepage, encode_word, decode_word
from morphdict.ukr_chartype import to_lower
from morphdict.charset import Charset
from morphdict.collector import Collector

assert resolve_codepage("UTF-8") is Codepage.UTF8

word = encode_word("Київ", Codepage.CP1251)          # Windows-1251 bytes
lower = to_lower(word)
print(decode_word(lower, Codepage.UTF8).decode("utf-8"))   # київ

chars = Charset()
for byte in b"cab":
    chars.add(byte)
out = Collector(8)
assert chars.collect(out) == 3
assert bytes(out) == b"abc"
```

## What is not included

The package holds no dictionary data: no stem tree, flexion tables,
mix tables or class map. It therefore offers no ready analyser that checks,
lemmatizes or builds forms of Ukrainian words, and no command-line tool.
The scanners work on any dictionary bytes passed to them.

## Tests

```
pip install .[test]
pytest
```