# acrotester

Host-side building blocks for working with a device programmer tester from
Python: the wire packet format, the flow and spec configuration files, the
site mapping in `Config.ini`, and the rules behind the main window's views.

## Modules

- `acrotester.framing`: the binary packet format. `encode_packet(payload)`
  prefixes a payload with a 32-byte header (magic number `APRO`, header
  version 1 and payload length, all big-endian; the rest zero).
  `FrameDecoder.feed(data)` buffers a byte stream and returns the payloads of
  every complete packet; a wrong magic number or version raises
  `ProtocolError` (its `payloads` attribute holds what was decoded before) and
  discards the buffer. `FrameDecoder.clear()` drops partial data.
- `acrotester.config_items`: `TestItem` (a test-flow step) and `SpecItem`
  (limits and bin of a parameter set). `import_config(path, kind)` reads the
  `FlowConfig.TestItems` (`kind="flow"`) or `SpecConfig.SpecList`
  (`kind="spec"`) entries of a JSON file; `load_flow_items` and
  `load_spec_items` do the same for an already parsed document.
  `export_flow` and `export_spec` replace that list in an existing file and
  keep the rest of it. Every failure raises `ConfigError`. Items also offer
  `to_json()` and `set_column(column, text)` for table edits.
- `acrotester.flow_table`: `FlowTable`, an ordered list of `TestItem` with
  `add`, `insert`, `delete`, `move_up`, `move_down`, `set_test_mode` (which
  returns the colour the mode is shown in) and `rows()` for display. Adding or
  inserting renumbers ids from 1; an invalid row raises `FlowTableError`.
- `acrotester.site_mapping`: `parse_sites_auto_map(text)` turns
  `<Site01,1><Site02,2>` into a dict sorted by alias;
  `load_site_mapping(path)` reads `SitesAutoMap` from an INI file, falling
  back to four default sites. A missing file, an empty value, no entries or
  no `Site01` raise `SiteMappingError`.
- `acrotester.product_info`: `ProductInfo`, the product summary as
  `key: value` lines, with `display(row)`, `lines()`, `update_value(key, value)`
  and `update_leakage_rate()`.
- `acrotester.views`: `scene_path_labels(scene, paths)` lists the path
  captions of a scene (`老化测试`, `AG06`, `AP8000`) as `PathLabel`s with
  their rectangles; `path_label_layout(labels)` gives the area they need;
  `status_color(yield_rate)` and `library_title(index, rate)` follow the yield
  legend; `ViewVisibility` tracks which named views are shown.

## Example

```python
from acrotester.framing import FrameDecoder, encode_packet

packet = encode_packet(b'{"jsonrpc": "2.0", "method": "GetProjectInfo", "id": 1}')
decoder = FrameDecoder()
for payload in decoder.feed(packet):
    print(payload)
```

```python
from acrotester.config_items import export_flow, import_config
from acrotester.flow_table import FlowTable

table = FlowTable(import_config("line.tester_config", "flow"))
table.add()
table[0].set_column(3, "5")  # loop count of the first step
export_flow("line.tester_config", table.items)
```

## What this package does not do

It opens no network connection and talks to no programmer or handler: there
is no JSON-RPC client, no request sending or response handling, and no
command identifiers or device records. It has no graphical interface and no
command-line program; the view helpers only compute text, colours and sizes.

## Installing and testing

```
pip install acrotester[test]
pytest
```

Python 3.10 or later; no third-party runtime dependencies.