"""
Demonstration routines.

Each routine prints one line per operation and returns the containers
or variables it built, keyed by name, so callers can snapshot them.
"""
from typing import Any, Callable, Dict

from seqmap.declarations import Scope
from seqmap.formatting import sprintln
from seqmap.mapping import Map, maps_equal
from seqmap.sequence import Slice, append, cap, copy, make, slices_equal


def variables_demo() -> Dict[str, Any]:
    scope = Scope()

    # One variable, kind inferred from the initializer.
    a, = scope.declare("a", values=["initial"])
    print(sprintln(a))

    # Several variables at once with an explicit kind.
    b, c = scope.declare("b", "c", kind=int, values=(1, 2))
    print(sprintln(b, c))

    d, = scope.declare("d", values=[True])
    print(sprintln(d))

    # No initializer: the variable holds the zero value of its kind.
    e, = scope.declare("e", kind=int)
    print(sprintln(e))

    f, = scope.short_declare(f="apple")
    print(sprintln(f))

    return {name: scope.lookup(name) for name in scope.names()}


def maps_demo() -> Dict[str, Any]:
    m = Map(int)

    m["k1"] = 7
    m.set("k2", 13)
    print(sprintln("map:", m))

    v1 = m["k1"]
    print(sprintln("v1:", v1))

    # A missing key reads as the zero value of the value kind.
    v3 = m["k3"]
    print(sprintln("v3:", v3))

    print(sprintln("len:", len(m)))

    m.delete("k2")
    print(sprintln("map:", m))

    m.clear()
    print(sprintln("map:", m))

    # The presence flag separates a missing key from a stored zero.
    _, prs = m.get("k2")
    print(sprintln("prs:", prs))

    n = Map.of(int, {"foo": 1, "bar": 2})
    print(sprintln("map:", n))

    n2 = Map.of(int, {"bar": 2, "foo": 1})
    if maps_equal(n, n2):
        print("n == n2")

    return {"m": m, "n": n, "n2": n2}


def slices_demo() -> Dict[str, Any]:
    # An uninitialized slice is nil and has length 0.
    s = Slice.nil(str)
    print(sprintln("uninit:", s, s.is_nil, len(s) == 0))

    s = make(3, kind=str)
    print(sprintln("emp:", s, "len:", len(s), "cap:", cap(s)))

    s[0] = "a"
    s[1] = "b"
    s[2] = "c"
    print(sprintln("set:", s))
    print(sprintln("get:", s[2]))
    print(sprintln("len:", len(s)))

    # append may return a view over a new buffer; always keep its result.
    s = append(s, "d")
    s = append(s, "e", "f")
    print(sprintln("apd:", s))

    c = make(len(s), kind=str)
    copy(c, s)
    print(sprintln("cpy:", c))

    l = s[2:5]
    print(sprintln("sl1:", l))
    l = s[:5]
    print(sprintln("sl2:", l))
    l = s[2:]
    print(sprintln("sl3:", l))

    t = Slice.of(str, "g", "h", "i")
    print(sprintln("dcl:", t))

    t2 = Slice.of(str, "g", "h", "i")
    if slices_equal(t, t2):
        print("t == t2")

    # Inner slices of a two-level structure may differ in length.
    two_d = make(3, kind=Slice)
    for i in range(3):
        inner_len = i + 1
        two_d[i] = make(inner_len, kind=int)
        for j in range(inner_len):
            two_d[i][j] = i + j
    print(sprintln("2d: ", two_d))

    return {"s": s, "c": c, "l": l, "t": t, "two_d": two_d}


DEMOS: Dict[str, Callable[[], Dict[str, Any]]] = {
    "variables": variables_demo,
    "maps": maps_demo,
    "slices": slices_demo,
}
