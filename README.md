# rdapclient

A library for RDAP (Registration Data Access Protocol) bootstrapping.

Every RDAP query is answered by some RDAP server. Service Registry files
list which servers handle which domains, IP networks, AS numbers and
entity handles. `rdapclient` downloads those files, caches them, and
answers the question "which RDAP servers should I ask about this?".

## Installation

```
pip install rdapclient
```

## Looking up RDAP servers

```python
from rdapclient.bootstrap.client import BootstrapClient
from rdapclient.bootstrap.question import Question, RegistryType

client = BootstrapClient()

answer = client.lookup(Question(RegistryType.DNS, "www.example.br"))
print(answer.query)   # the canonical form that was looked up
print(answer.entry)   # the registry entry that matched, "" if none
for url in answer.urls:
    print(url)
```

The supported registries are `RegistryType.DNS`, `RegistryType.IPV4`,
`RegistryType.IPV6`, `RegistryType.ASN` and the experimental
`RegistryType.SERVICE_PROVIDER`. Each one names its registry file through
`RegistryType.filename()`, for instance `dns.json`.

Queries take the forms the registries expect:

- domains: `"example.cz"`, lower-cased, trailing dot removed, and matched
  against the longest registered suffix (down to the root entry `""`);
- IP addresses or networks: `"192.0.2.0"`, `"192.0.2.0/25"`, `"2001:db8::"`;
  the most specific registered network containing the query wins;
- AS numbers: `"AS2856"`, `"as2856"` or `"2856"`;
- entity handles: `"12345-TAG"`, matched on the service tag after the last
  `~`, or failing that the last `-`.

A query that matches nothing gives an answer with an empty `entry` and no
URLs. An AS number or IP address that cannot be parsed, or an address of
the wrong IP version, raises `ValueError`.

A question can carry a timeout, in seconds, for the download it may
trigger:

```python
question = Question(RegistryType.ASN, "AS2856").with_timeout(10)
```

The client can be given a `base_url` for another bootstrap service
(default `https://data.iana.org/rdap/`), a `requests.Session`, a cache, and
a `verbose` callback that receives progress messages.

## Registry files and caching

`lookup()` downloads a registry file when the client has not loaded it yet,
or when a newer copy in the cache cannot be reloaded. `download()` fetches
one immediately and saves it to the cache. A download that does not return
HTTP 200 raises `requests.HTTPError`; a document that cannot be parsed
raises `BootstrapError`.

The accessors `asn()`, `dns()`, `ipv4()`, `ipv6()` and `service_provider()`
return the loaded registry, or `None`, without touching the network.

```python
client.download(RegistryType.DNS)
registry = client.dns()
for tld in registry.file().entries:
    print(tld)
```

By default files are kept in a `MemoryCache` with a 24 hour timeout. A
`DiskCache` keeps them in a directory that several clients can share, and a
client reloads a file when another one has saved a newer copy:

```python
from rdapclient.bootstrap.cache.disk_cache import DiskCache

cache = DiskCache()          # ~/.openrdap by default
cache.set_timeout(3600)      # seconds
client = BootstrapClient(cache=cache)
```

A cache reports each file's `FileState`: `ABSENT`, `GOOD`, `SHOULD_RELOAD`
(disk cache only) or `EXPIRED`. Expired files can still be loaded.

When a custom `base_url` is used, cached files are named with a short hash
of it (see `BootstrapClient.filename_for()`), so registries from different
services never mix.

The registries can also be built directly from a JSON document:

```python
from rdapclient.bootstrap.dns_registry import DNSRegistry

with open("dns.json", "rb") as fh:
    registry = DNSRegistry(fh.read())
answer = registry.lookup(Question(RegistryType.DNS, "example.com"))
```

`ASNRegistry`, `NetRegistry` (which also takes the IP version, 4 or 6) and
`ServiceProviderRegistry` work the same way, and
`rdapclient.bootstrap.file.parse_file()` returns the parsed document as a
`RegistryFile`.

## Object model and errors

`rdapclient.models` holds dataclasses for RDAP objects: `Link`, `Notice`,
`Remark`, `Event`, `PublicID`, `Common` and `Autnum`. Each may carry a
`rdapclient.decode_data.DecodeData`, which keeps the raw values of the
fields seen while decoding (`value()`, `fields()`, `unknown_fields()`) and
any notes recorded for them (`notes()`).

`rdapclient.client_error` defines `ClientError`, carrying a
`ClientErrorType` such as `OBJECT_DOES_NOT_EXIST` or `NO_WORKING_SERVERS`,
`is_client_error()` to test for a particular kind, and
`client_error_from_rdap_error()` to turn an RDAP error response into a
`ClientError`.

## What this package does not do

It finds RDAP servers but does not query them: there is no RDAP query
client, no decoder that fills the object model from a server response, no
output formatting, and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```