# osinfo

Detect the operating system type and version: its id, name, version,
variant, edition and codename.

On Linux the information comes from `/etc/os-release`. On Windows it is read
from the registry key `SOFTWARE\Microsoft\Windows NT\CurrentVersion`.

## Installation

```
pip install osinfo
```

The package has no runtime dependencies. Install the `test` extra to run the
tests with pytest.

## Command line

```
osinfo
```

This prints the detected operating system and each of its fields, one per
line (`ID`, `Name`, `Version`, `Variant`, `Edition`, `Codename`). The same
command is available as `python -m osinfo.detect`.

## Library use

```python
from osinfo.detect import get

info = get()
print(info)            # e.g. "ubuntu (Ubuntu) (client)"
print(info.id)
print(info.name)
print(info.version)    # e.g. "22.4.0.0", "Rolling Release" or "Unknown"
print(info.variant)    # "server", "client", ...
print(info.edition)
print(info.codename)   # e.g. "jammy" on Linux, "22H2" on Windows
```

`get()` returns an `osinfo.os_info.OSInfo`. Its fields are `id`, `name`,
`version`, `variant`, `edition` and `codename`; any of the text fields may be
`None` when the value is not known. `OSInfo.unknown()` gives id `"Unknown"`,
an empty name and an unknown version; `OSInfo.with_id(id)` and
`OSInfo.with_name(name)` start from that and set one field. `str(info)` shows
the id followed by the name and the variant in parentheses, where they are set.

### Linux

`osinfo.linux.parse_os_release(content)` builds an `OSInfo` from the text of
an os-release file, or returns `None` when it has no `ID=` line:

- `ID` gives the id, `NAME` the name, `VERSION_ID` the version
- `VARIANT_ID` gives the variant, `"client"` when it is absent
- `VERSION_CODENAME` gives the codename; failing that, the text in
  parentheses in `VERSION` is used

`osinfo.linux.retrieve(distributions, root)` reads the release files
described by a sequence of `ReleaseInfo` objects under a root directory and
returns the first description found. `get_info()` falls back to
`OSInfo.unknown()` when nothing is found.

### Windows

`osinfo.windows.os_info_from_values(values)` builds an `OSInfo` from a mapping
of registry value names to data (`ProductName`, `InstallationType`,
`EditionID`, `DisplayVersion`, and the version numbers read by
`version_from_values`). If the registry cannot be read, only the id
`"windows"` is known.

### Versions

`osinfo.version.version_from_string` turns a version string into a version
object:

- an empty string gives `UnknownVersion`
- a string of up to four dot-separated numbers gives `SemanticVersion`, and
  missing parts are filled with zeros (`"1.2"` becomes `1.2.0.0`)
- anything else gives `CustomVersion`, which keeps the text as it was

`RollingVersion` stands for rolling releases and can carry a release date.
Versions can be compared and sorted.

### Matchers

`osinfo.matcher` holds small helpers for pulling values out of release text:

```python
from osinfo.matcher import Between, KeyValue

KeyValue("VERSION_ID").find('VERSION_ID="8.1"')                    # "8.1"
Between("(", ")").find("22.04.1 LTS (Jammy Jellyfish)")           # "Jammy Jellyfish"
```

`AllTrimmed`, `PrefixedWord` and `PrefixedVersion` are also available. Each
matcher's `find` returns `None` when there is no match.

## Limitations

Only Linux and Windows are detected. On any other platform, macOS included,
`get()` returns `OSInfo.unknown()`. On Linux only `/etc/os-release` is read;
older distribution-specific release files are not consulted.