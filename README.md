# nvmef

Pure-Python helpers for working with NVMe over Fabrics on Linux. The package
needs no third-party libraries.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is inside

- `nvmef.fabrics_strings` – decodes discovery log page fields into readable
  text: `trtype_str`, `adrfam_str`, `subtype_str`, `treq_str`, `eflags_str`,
  `sectype_str`, `prtype_str`, `qptype_str`, `cms_str`. A value that has no
  name decodes to `"unrecognized"`. The field values are also available as
  enums, for example `TransportType`, `AddressFamily` and `SubsystemType`.
- `nvmef.hostid` – finds the system UUID. `system_uuid(root)` tries the DMI
  `product_uuid` file, then the SMBIOS entries, then the device tree, and
  raises `UuidUnavailableError` if none of them has one. Each source can also
  be read on its own: `uuid_from_product_uuid`, `uuid_from_dmi_entries`,
  `uuid_from_device_tree`. `hostnqn_generate` builds a host NQN from the
  system UUID, or from a random UUID if there is none. `hostnqn_from_file`
  and `hostid_from_file` read the first line of `/etc/nvme/hostnqn` and
  `/etc/nvme/hostid` (or a path you give) and return `None` when the file is
  missing or empty.
- `nvmef.filters` – tells apart sysfs entry names: `is_namespace`
  (`nvme0n1`), `is_path` (`nvme0c1n1`), `is_ctrl` (`nvme0`) and
  `is_subsystem` (`nvme-subsys0`). `scan_subsystems`, `scan_ctrls`,
  `scan_namespaces` and `scan_paths` list the matching entries of a directory
  in sorted order.
- `nvmef.mi_format` – formatting helpers for NVMe-MI data: `hexdump`,
  `sec_proto_description`, `port_type_name`, and `parse_security_protocols`,
  which reads the supported protocol list of a Security Receive response and
  raises `ValueError` when the response is short.
- `nvmef.strutil` – small string helpers: `strcount`, `strends`, `strchomp`.

## Example

```python
from nvmef.fabrics_strings import trtype_str, subtype_str
from nvmef.filters import is_ctrl
from nvmef.hostid import hostnqn_generate
from nvmef.mi_format import hexdump

print(trtype_str(3))        # "tcp"
print(subtype_str(2))       # "nvme subsystem"
print(is_ctrl("nvme0"))     # True
print(hostnqn_generate())   # "nqn.2014-08.org.nvmexpress:uuid:..."
print(hexdump(b"NVMe\x00\x01"), end="")
```

## What it does not do

The package does not talk to devices. It does not connect or disconnect
controllers, does not fetch discovery log pages, does not send NVMe-MI or
admin commands, and does not build fabrics connect option strings. It
provides no command-line tool. It decodes, formats and reads files only.