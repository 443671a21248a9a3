#!/usr/bin/env python3
"""Bounded Sequential List — Positional Insert/Delete With Explicit Failures.

================================================================================
WHAT DOES THIS SHOW?
================================================================================

A SequentialList holds at most CAPACITY items (10 by default). Every
primitive returns a Result:

    insert_before(pos, item)  → Ok(None) | Err(OutOfRangeError | MemoryOverflowError)
    delete(pos)               → Ok(item) | Err(OutOfRangeError)

Generic operations (sort, combine, search_by, ...) are built on those
primitives only.

Run::

    python examples/01_bounded_list.py
"""

from linear_lists import (
    MemoryOverflowError,
    Ok,
    Err,
    SequentialList,
    bounded,
    configure_logging,
)


def main() -> None:
    configure_logging(level="DEBUG", json_format=False)

    print("=" * 60)
    print("1. Fill a list from the front")
    print("=" * 60)
    items = SequentialList()
    for n in range(items.capacity):
        items.insert_before(0, n).unwrap()
    print(f"  {items}")

    print("\n2. Sort in place")
    items.sort()
    print(f"  {items}")

    print("\n3. An 11th insert is rejected, not resized")
    match items.insert_before(5, 10):
        case Ok():
            print("  unexpected success")
        case Err(MemoryOverflowError() as error):
            print(f"  {error.category.value}: {error.message}")
        case Err(error):
            print(f"  other failure: {error!r}")

    print("\n4. Move items between lists")
    Small = bounded(4)
    tail = Small.from_iterable(["x", "y"]).unwrap()
    head = Small.from_iterable(["a"]).unwrap()
    head.combine(tail)
    print(f"  head={head} tail={tail}")

    print("\n5. Search")
    print(f"  first even above 4: {items.search_by(lambda n: n % 2 == 0 and n > 4)}")


if __name__ == "__main__":
    main()
