#!/usr/bin/env python3
"""
Demo: Slice views share storage until append reallocates.

Walks through:
1. Taking a sub-range view and writing through it
2. Appending within capacity (the original sees the write)
3. Appending past capacity (the result detaches)
"""

from seqmap.formatting import sprintln
from seqmap.sequence import append, cap, make


def main():
    s = make(3, capacity=5, kind=str)
    for i, v in enumerate(["a", "b", "c"]):
        s[i] = v
    print(sprintln("s:", s, "len:", len(s), "cap:", cap(s)))

    # =========================================================================
    # STEP 1: Sub-range view aliases s
    # =========================================================================
    view = s[1:3]
    view[0] = "B"
    print(sprintln("view:", view, "cap:", cap(view)))
    print(sprintln("s after view write:", s))

    # =========================================================================
    # STEP 2: Append inside capacity writes into the shared buffer
    # =========================================================================
    grown = append(s, "d")
    grown[0] = "A"
    print(sprintln("grown:", grown, "shares buffer:", grown.shares_buffer(s)))
    print(sprintln("s sees index 0:", s[0]))

    # =========================================================================
    # STEP 3: Append past capacity reallocates
    # =========================================================================
    moved = append(grown, "e", "f")
    moved[0] = "z"
    print(sprintln("moved:", moved, "cap:", cap(moved), "shares buffer:", moved.shares_buffer(s)))
    print(sprintln("s unchanged:", s))


if __name__ == "__main__":
    main()
