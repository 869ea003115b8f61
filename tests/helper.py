import copy
import json

VALID_SHA256 = "aB" * 32

VALID_ENTRY = {
    "id": "acme-pack",
    "tool": "acme",
    "version": "1.0.0",
    "description": "Acme controls mapped to common frameworks",
    "signer": "acme-release",
    "frameworks": ["soc2", "iso27001"],
    "mappingIds": ["acme-soc2", "acme-iso27001"],
    "packUrl": "https://packs.example.com/acme-1.0.0.tgz",
    "publicKeyUrl": "https://packs.example.com/acme.pub",
    "sha256": VALID_SHA256,
    "source": "vendor",
    "createdAt": "2024-01-15",
}


def make_entry(**overrides) -> dict:
    entry = copy.deepcopy(VALID_ENTRY)
    entry.update(overrides)
    return entry


def make_entry_without(*fields) -> dict:
    entry = make_entry()
    for field in fields:
        del entry[field]
    return entry


def write_index(path, data):
    with open(path, "w") as fp:
        if isinstance(data, str):
            fp.write(data)
        else:
            json.dump(data, fp, indent=4)
    return str(path)
