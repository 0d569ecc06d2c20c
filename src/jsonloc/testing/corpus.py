from __future__ import annotations

import random
import string


_WS = [" ", "  ", "\t", "\n", "\r\n", "\r"]
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t", "\\u0041", "\\u00e9", "\\ud83d\\ude00"]


def generate_json_sources(*, seed: int, count: int) -> list[str]:
    """Generate ``count`` valid JSON documents, deterministic for a given seed.

    Documents mix nesting, every literal kind, escapes, non-ASCII text and all
    whitespace flavours so that position tracking gets exercised.
    """
    r = random.Random(seed)
    return [_gen_doc(r) for _ in range(count)]


def _ws(r: random.Random) -> str:
    if r.random() < 0.5:
        return ""
    return "".join(r.choice(_WS) for _ in range(r.randint(1, 3)))


def _gen_doc(r: random.Random) -> str:
    return _ws(r) + _gen_value(r, depth=0) + _ws(r)


def _gen_value(r: random.Random, *, depth: int) -> str:
    k = r.random()
    if depth < 4 and k < 0.25:
        return _gen_object(r, depth=depth + 1)
    if depth < 4 and k < 0.45:
        return _gen_array(r, depth=depth + 1)
    return _gen_literal(r)


def _gen_literal(r: random.Random) -> str:
    k = r.random()
    if k < 0.4:
        return _string_lit(r)
    if k < 0.75:
        return _number_lit(r)
    if k < 0.9:
        return r.choice(["true", "false"])
    return "null"


def _gen_object(r: random.Random, *, depth: int) -> str:
    members = []
    for _ in range(r.randint(0, 5)):
        key = _string_lit(r)
        members.append(f"{_ws(r)}{key}{_ws(r)}:{_ws(r)}{_gen_value(r, depth=depth)}{_ws(r)}")
    return "{" + ",".join(members) + _ws(r) + "}"


def _gen_array(r: random.Random, *, depth: int) -> str:
    items = [f"{_ws(r)}{_gen_value(r, depth=depth)}{_ws(r)}" for _ in range(r.randint(0, 6))]
    return "[" + ",".join(items) + _ws(r) + "]"


def _string_lit(r: random.Random) -> str:
    alphabet = string.ascii_letters + string.digits + " _-:,{}[]" + "éüß漢字"
    parts: list[str] = []
    for _ in range(r.randint(0, 12)):
        if r.random() < 0.15:
            parts.append(r.choice(_ESCAPES))
        else:
            parts.append(r.choice(alphabet))
    return '"' + "".join(parts) + '"'


def _number_lit(r: random.Random) -> str:
    sign = "-" if r.random() < 0.3 else ""
    if r.random() < 0.2:
        integer = "0"
    else:
        integer = str(r.randint(1, 9)) + "".join(r.choice(string.digits) for _ in range(r.randint(0, 6)))
    frac = ""
    if r.random() < 0.4:
        frac = "." + "".join(r.choice(string.digits) for _ in range(r.randint(1, 5)))
    exp = ""
    if r.random() < 0.2:
        exp = r.choice("eE") + r.choice(["", "+", "-"]) + str(r.randint(0, 30))
    return sign + integer + frac + exp
