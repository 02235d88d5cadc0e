"""Example: path lookups over parsed JSON."""

import json

from dict_tools import KeyNotFoundError, deep_fetch, deep_fetch_multi, deep_map_value


def main() -> None:
    """Run example."""
    document = json.loads('{"people": [{"name": "Joe", "phones": ["+31 1"]}, {"name": "Jane", "phones": []}]}')

    print(deep_fetch(document, "people/0/phones/-1"))
    print(deep_fetch(document, "people/1/phones/0", default_factory=lambda: "no phone"))
    print(deep_fetch_multi(document, "people/0/name", "people/1/name"))
    print(deep_map_value(document["people"], "name"))

    try:
        _ = deep_fetch(document, "people/0/email")
    except KeyNotFoundError as exc:
        print(exc)


if __name__ == "__main__":
    main()
