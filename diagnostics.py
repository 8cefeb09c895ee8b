import sys
from time import perf_counter

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from course_index import CourseIndex
from course_loader import load_courses


def chain_stats(index):
    lengths = index.chain_lengths()
    entries = int(lengths.sum())
    return {
        "slots": index.size,
        "entries": entries,
        "used_slots": int(np.count_nonzero(lengths)),
        "longest_chain": int(lengths.max()),
        "load_factor": entries / index.size,
    }


def plot_chain_lengths(index, path="chains.png"):
    """ Bar chart of how many entries landed in each slot"""
    lengths = index.chain_lengths()
    fig, ax = plt.subplots()
    ax.bar(np.arange(len(lengths)), lengths, width=1.0)
    ax.set_xlabel("Slot")
    ax.set_ylabel("Entries")
    ax.set_title(f"{int(lengths.sum())} courses in {index.size} slots")
    fig.savefig(path)
    plt.close(fig)
    return path


def time_lookups(index, ids):
    strt = perf_counter()
    found = sum(1 for i in ids if index.search(i) is not None)
    return perf_counter() - strt, found


if __name__ == "__main__":
    filename = sys.argv[1] if len(sys.argv) > 1 else "CS 300 ABCU_Advising_Program_Input"
    index = CourseIndex()
    load_courses(filename, index)

    for k, v in chain_stats(index).items():
        print(f"{k}: {v}")

    seconds, found = time_lookups(index, [c.course_id for c in index.print_all()])
    print(f"Looked up {found} courses in {seconds} seconds")
    print(f"Saved {plot_chain_lengths(index)}")
