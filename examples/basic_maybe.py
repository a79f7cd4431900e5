"""
Basic Maybe usage: wrapping, mapping, chaining and tracing.

Run: python examples/basic_maybe.py
"""
import operator

from maybepy import (
    present,
    absent,
    from_nullable,
    map2,
    and_then,
    case_of,
    with_default,
    attempt,
    trace,
    logger,
)


def parse_port(raw):
    return attempt(lambda: int(raw), ValueError).filter(lambda p: 0 < p < 65536)


def main():
    logger.set_level("DEBUG")

    # Raw config values may be missing (None) or malformed
    config = {"host": "localhost", "port": "8080", "backup_port": "eighty"}
    host = from_nullable(config.get("host"))
    port = trace("port", and_then(parse_port, from_nullable(config.get("port"))))
    backup = trace("backup_port", and_then(parse_port, from_nullable(config.get("backup_port"))))

    address = map2(lambda h, p: f"{h}:{p}", host, port)
    print("address:", with_default(address, "<unset>"))
    print("backup:", case_of({"present": str, "absent": lambda: "none configured"}, backup))

    prices = [present(300), absent(), present(500), present(150), absent()]
    total = present(0)
    for p in prices:
        if p.is_present():
            total = map2(operator.add, total, p)
    print("total:", with_default(total, 0))


if __name__ == "__main__":
    main()
