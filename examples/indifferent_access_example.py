"""Example: reading a symbol/string keyed payload through IndifferentDict."""

from dict_tools import Symbol, dumps, indifferent


def main() -> None:
    """Run example."""
    payload = {
        Symbol("user"): {"name": "Jane", Symbol("roles"): [{"name": "admin"}]},
        "page": 2,
    }
    params = indifferent(payload)

    print(params.user.name)
    print(params["user"][Symbol("roles")][0].name)
    print(params.get("per_page", 50))

    params["per_page"] = 25
    print(list(params.keys()))
    print(dumps(params))


if __name__ == "__main__":
    main()
