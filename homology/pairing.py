import numpy as np


class PersistencePairing:
    """
    Birth-death correspondence between positions of a filtered complex.

    Holds `(creator, destroyer)` index pairs, ordered by destroyer, and the
    indices of creators that are never destroyed. Only plain integers are
    stored; the complex the pairing came from can be discarded.
    """

    def __init__(self, pairs=(), unpaired=()):
        pairs = sorted(((int(c), int(d)) for c, d in pairs), key=lambda p: p[1])
        unpaired = tuple(sorted(int(i) for i in unpaired))

        seen = set()
        for creator, destroyer in pairs:
            if creator >= destroyer:
                raise ValueError(f'Creator {creator} does not precede destroyer {destroyer}')
            for i in (creator, destroyer):
                if i in seen:
                    raise ValueError(f'Index {i} appears more than once in the pairing')
                seen.add(i)
        for i in unpaired:
            if i in seen:
                raise ValueError(f'Unpaired index {i} also appears in a pair')
            seen.add(i)

        self._pairs = tuple(pairs)
        self._unpaired = unpaired
        self._partner = {}
        for c, d in self._pairs:
            self._partner[c] = d
            self._partner[d] = c

    @classmethod
    def from_pairs(cls, pairs, size):
        """Pairing over positions 0..size-1; every index not in a pair is unpaired."""
        pairs = list(pairs)
        used = {i for p in pairs for i in p}
        return cls(pairs, (i for i in range(size) if i not in used))

    @property
    def pairs(self):
        return self._pairs

    @property
    def unpaired(self):
        return self._unpaired

    @property
    def creators(self):
        return tuple(c for c, _ in self._pairs)

    @property
    def destroyers(self):
        return tuple(d for _, d in self._pairs)

    def partner(self, i):
        """Index paired with `i`, or None if `i` is unpaired or unknown."""
        return self._partner.get(i)

    def indices(self):
        return sorted(list(self._partner) + list(self._unpaired))

    def restrict(self, indices):
        """Sub-pairing whose creators lie in `indices`."""
        indices = set(indices)
        return PersistencePairing([p for p in self._pairs if p[0] in indices],
                                  [i for i in self._unpaired if i in indices])

    def __len__(self):
        return len(self._pairs)

    def __bool__(self):
        return bool(self._pairs) or bool(self._unpaired)

    def __iter__(self):
        return iter(self._pairs)

    def __contains__(self, pair):
        c, d = pair
        return self._partner.get(c) == d and c < d

    def __eq__(self, other):
        if not isinstance(other, PersistencePairing):
            return NotImplemented
        return self._pairs == other._pairs and self._unpaired == other._unpaired

    def __hash__(self):
        return hash((self._pairs, self._unpaired))

    def __array__(self, dtype=None, copy=None):
        out = np.array(self._pairs, dtype=np.int64).reshape(-1, 2)
        return out if dtype is None else out.astype(dtype)

    def __repr__(self):
        return f'PersistencePairing(pairs={list(self._pairs)}, unpaired={list(self._unpaired)})'
