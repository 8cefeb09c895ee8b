import sys
import threading
from dataclasses import dataclass

import numpy as np

DEFAULT_SIZE = 179


@dataclass(frozen=True)
class CourseRecord:
    course_id: str
    name: str
    prerequisite: str = ""

    def __str__(self):
        return f"Course ID: {self.course_id}, Course Name: {self.name}, Prerequisite: {self.prerequisite}"


class CourseEntry:
    def __init__(self, course, key):
        self.course = course
        self.key = key


class CourseIndex:
    """ A fixed size hash table of course records.
    Collisions are chained, each slot keeps its entries in the order they were inserted.
    The table never grows, so a long chain is the only thing that slows a lookup down
    """

    def __init__(self, size=DEFAULT_SIZE):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Table size has to be a positive integer, got {size!r}")
        self.size = size
        # Empty list means an empty slot
        self.table = [[] for _ in range(size)]
        self.lock = threading.Lock()

    def hash_of(self, key):
        """ Polynomial rolling hash (h = h*31 + byte) over the utf-8 bytes of the key, modulo the table size.
        The loop unrolls into sum(byte_i * 31^(n-1-i)), so numpy can do it in one go.
        uint32 arrays wrap silently, which is exactly the overflow behaviour we want
        """
        data = np.array(list(key.encode("utf-8", "surrogatepass")), dtype=np.uint32)
        exponents = np.arange(len(data) - 1, -1, -1, dtype=np.uint32)
        powers = np.power(np.uint32(31), exponents, dtype=np.uint32)
        h = (data * powers).sum(dtype=np.uint32)
        return int(h) % self.size

    def insert(self, course):
        key = self.hash_of(course.course_id)
        with self.lock:
            # Tail append, so the first one in is the first one found
            self.table[key].append(CourseEntry(course, key))

    def search(self, course_id):
        key = self.hash_of(course_id)
        with self.lock:
            for entry in self.table[key]:
                if entry.course.course_id == course_id:
                    return entry.course
        return None

    def print_all(self):
        """ Yields every course in bucket order: slot 0 up, then down each chain.
        This is NOT sorted, and isn't meant to be
        """
        with self.lock:
            chains = [list(chain) for chain in self.table]
        for chain in chains:
            for entry in chain:
                yield entry.course

    def write_all(self, out=None):
        out = out if out is not None else sys.stdout
        for course in self.print_all():
            out.write(f"{course}\n")

    def count(self):
        with self.lock:
            return sum(len(chain) for chain in self.table)

    def __len__(self):
        return self.count()

    def chain_lengths(self):
        with self.lock:
            return np.array([len(chain) for chain in self.table], dtype=np.int64)

    def load_factor(self):
        return self.count() / self.size
