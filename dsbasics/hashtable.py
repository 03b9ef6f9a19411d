"""A fixed-size hash table with chained buckets."""

from __future__ import annotations

SIZE = 7


def hash_key(key: str) -> int:
    """Map a key to a bucket index from 1 to 6 by summing its character codes."""
    return sum(map(ord, key)) % 6 + 1


class HashTable:
    """Hash table of string keys; setting a key again adds another entry."""

    def __init__(self) -> None:
        self._buckets: list[list[tuple[str, int]]] = [[] for _ in range(SIZE)]

    def set(self, key: str, value: int) -> None:
        """Append an entry to the end of the key's bucket."""
        self._buckets[hash_key(key)].append((key, value))

    def find(self, key: str) -> tuple[int, int]:
        """Return the bucket index and 1-based block of a key; raise KeyError if absent."""
        index = hash_key(key)
        for block, (stored, _) in enumerate(self._buckets[index], start=1):
            if stored == key:
                return index, block
        raise KeyError(key)

    def get(self, key: str) -> int:
        """Return the value of the first entry for a key; raise KeyError if absent."""
        index, block = self.find(key)
        return self._buckets[index][block - 1][1]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(stored == key for stored, _ in self._buckets[hash_key(key)])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def render(self) -> str:
        """Show every bucket, one line each."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            if bucket:
                entries = " | ".join(f"{key}: {value}" for key, value in bucket)
                lines.append(f"{index}: {entries}")
            else:
                lines.append(f"{index}: Empty")
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Fill the sample table, showing it after each insert, then locate a key."""
    table = HashTable()
    print(table.render())
    for key, value in (("Kiro", 1), ("Dodo", 1), ("Mrmr", 2), ("Sasa", 3), ("Mama", 4), ("Jeje", 5)):
        table.set(key, value)
        print(table.render())
    try:
        index, block = table.find("Mrmr")
    except KeyError:
        print("Key does not exist!")
    else:
        print(f"Found key at index: {index}, block: {block}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())