# meshprops

Typed access to the properties (attributes) that Envoy exposes to extensions
running inside an Istio service mesh, together with codecs for the binary
formats those properties use on the wire.

## Install

```
pip install meshprops
```

For running the test suite:

```
pip install "meshprops[test]"
pytest
```

## Property sources

Every accessor reads raw bytes from the current property source. A source is
anything with a `get(path)` method that takes a path (a sequence of strings),
returns `bytes`, and raises `PropertyNotFoundError` when nothing is there.
`meshprops.host.PropertyStore` is an in-memory source; it can be filled from a
mapping of paths to bytes or with `set(path, value)`, which returns the store so
calls can be chained:

```python
from meshprops.host import PropertyStore, use_property_source
from meshprops.serialization import serialize_uint64
from meshprops.connection import get_downstream_remote_address, get_downstream_remote_port

store = PropertyStore()
store.set(["source", "address"], b"10.244.0.1:63649")
store.set(["source", "port"], serialize_uint64(63649))

with use_property_source(store):
    print(get_downstream_remote_address())  # 10.244.0.1:63649
    print(get_downstream_remote_port())     # 63649
```

`set_property_source(source)` installs a source in the current context and
returns the one it replaces; `use_property_source(source)` installs one only
inside a `with` block. With no source installed, every lookup finds nothing.

`meshprops.host` also offers the typed readers the accessors are built on:
`get_property`, `get_property_bool`, `get_property_string`,
`get_property_uint64`, `get_property_float64`, `get_property_timestamp`,
`get_property_string_map`, `get_property_string_slice`,
`get_property_byte_slice_map`, `get_property_byte_slice_slice` and
`get_istio_filter_metadata`.

## Accessors

Accessors are grouped by the kind of attribute they read:

- `meshprops.connection`: downstream connection (addresses, ports, TLS details)
- `meshprops.request`: request path, host, method, headers, time, sizes
- `meshprops.response`: status code, flags, headers, trailers, sizes
- `meshprops.upstream`: upstream connection and TLS details
- `meshprops.wasm`: plugin, node, locality, extensions and filter metadata
- `meshprops.xds`: xDS cluster, route and filter-chain information
- `meshprops.pilot`: Istio node metadata (labels, namespace, interception mode)
- `meshprops.proxyconfig`: Istio `ProxyConfig` values

Each module also exposes the property paths it reads as tuple constants, such as
`meshprops.connection.SOURCE_ADDRESS`.

Errors:

- A missing property raises `PropertyNotFoundError` (a `LookupError`).
- `get_node_locality()` and `get_node_proxy_config_proxy_stats_matcher()` return
  whatever components are present, and raise `LookupError` only when none is.
  In the stats matcher an absent component is `None`.
- The filter-metadata accessors never raise for missing data; they return an
  `IstioFilterMetadata` with empty fields.
- Data that cannot be decoded raises `ValueError`, and
  `get_node_meta_interception_mode()` raises `ValueError` for a mode other than
  `NONE`, `TPROXY` or `REDIRECT`.
- `get_listener_direction()` maps unknown values to `UNSPECIFIED`.

## Types

`meshprops.types` holds the value types that accessors return:
`EnvoyTrafficDirection`, `IstioTrafficInterceptionMode`, `EnvoyLocality`,
`EnvoyExtension`, `IstioService`, `IstioFilterMetadata` and
`IstioProxyStatsMatcher`, plus `parse_istio_traffic_interception_mode`. The two
enums print as their names and fall back to `UNSPECIFIED` and `REDIRECT`
respectively for unknown integer values.

## Wire formats

`meshprops.serialization` encodes and decodes the formats property values use:

- booleans (one byte; empty data decodes as `False`)
- little-endian `uint64` and `float64`
- timestamps as nanoseconds since the Unix epoch, decoded to aware UTC
  `datetime` values (so precision is limited to microseconds)
- length-prefixed string slices and string maps
- byte-slice slices and byte-slice maps
- protobuf-style repeated strings (each at most 255 bytes)

These codecs are handy for building fixtures in a `PropertyStore`.

## What this package does not do

It has no connection to a running proxy: there is no built-in source that
fetches properties from a live host. To read real values, supply your own object
with a `get(path)` method and install it with `set_property_source` or
`use_property_source`.