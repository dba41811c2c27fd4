"""Reading and writing JSON text to and from :class:`JsonNode` trees.

The reader is lenient: it accepts ``/* */`` and ``//`` comments, single-quoted
strings, and by default ignores anything after the first value.
"""

from __future__ import annotations

import math
import sys

from .jsonnode import JsonNode, JsonType

_DBL_EPSILON = sys.float_info.epsilon
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


class JsonParseError(ValueError):
    """Raised when text cannot be read as JSON; ``position`` marks the failure."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.size = len(text)

    def char(self, pos: int) -> str:
        return self.text[pos] if 0 <= pos < self.size else ""

    def fail(self, message: str, pos: int) -> JsonParseError:
        return JsonParseError(message, min(pos, self.size))

    def skip_space(self, pos: int) -> int:
        while pos < self.size and ord(self.text[pos]) <= 32:
            pos += 1
        return pos

    def skip_comments(self, pos: int) -> int:
        text = self.text
        if text.startswith("/*", pos):
            pos += 2
            while pos < self.size and not text.startswith("*/", pos):
                pos += 1
            if text.startswith("*/", pos):
                pos += 2
        elif text.startswith("//", pos):
            pos += 2
            while pos < self.size and text[pos] != "\n":
                pos += 1
            if pos < self.size:
                pos += 1
        return pos

    def skip(self, pos: int) -> int:
        while True:
            start = pos
            pos = self.skip_comments(self.skip_space(pos))
            if pos == start:
                return pos

    def value(self, pos: int) -> tuple[JsonNode, int]:
        text = self.text
        if text.startswith("null", pos):
            return JsonNode.null(), pos + 4
        if text.startswith("false", pos):
            return JsonNode.boolean(False), pos + 5
        if text.startswith("true", pos):
            return JsonNode(JsonType.TRUE, value_int=1), pos + 4
        ch = self.char(pos)
        if ch in ('"', "'") and ch:
            string, pos = self.string(pos)
            return JsonNode.string(string), pos
        if ch == "-" or ("0" <= ch <= "9" and ch):
            return self.number(pos)
        if ch == "[":
            return self.array(pos)
        if ch == "{":
            return self.object(pos)
        raise self.fail("unexpected input", pos)

    def digits(self, pos: int) -> bool:
        ch = self.char(pos)
        return bool(ch) and "0" <= ch <= "9"

    def number(self, pos: int) -> tuple[JsonNode, int]:
        n, sign, scale = 0.0, 1.0, 0
        subscale, sub_sign = 0, 1
        if self.char(pos) == "-":
            sign = -1.0
            pos += 1
        if self.char(pos) == "0":
            pos += 1
        if self.char(pos) and "1" <= self.char(pos) <= "9":
            while self.digits(pos):
                n = n * 10.0 + (ord(self.text[pos]) - 48)
                pos += 1
        if self.char(pos) == "." and self.digits(pos + 1):
            pos += 1
            while self.digits(pos):
                n = n * 10.0 + (ord(self.text[pos]) - 48)
                scale -= 1
                pos += 1
        if self.char(pos) in ("e", "E") and self.char(pos):
            pos += 1
            if self.char(pos) == "+":
                pos += 1
            elif self.char(pos) == "-":
                sub_sign = -1
                pos += 1
            while self.digits(pos):
                subscale = subscale * 10 + (ord(self.text[pos]) - 48)
                pos += 1
        try:
            power = 10.0 ** (scale + subscale * sub_sign)
        except OverflowError:
            power = math.inf
        return JsonNode.number(sign * n * power), pos

    def hex4(self, pos: int) -> int:
        value = 0
        for offset in range(4):
            ch = self.char(pos + offset)
            if not ch or ch not in "0123456789abcdefABCDEF":
                return 0
            value = (value << 4) | int(ch, 16)
        return value

    def string(self, pos: int) -> tuple[str, int]:
        quote = self.char(pos)
        if quote not in ('"', "'") or not quote:
            raise self.fail("expected a string", pos)
        out: list[str] = []
        pos += 1
        escapes = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
        while pos < self.size and self.text[pos] != quote:
            ch = self.text[pos]
            if ch != "\\":
                out.append(ch)
                pos += 1
                continue
            pos += 1
            if pos >= self.size:
                break
            ch = self.text[pos]
            if ch in escapes:
                out.append(escapes[ch])
            elif ch == "u":
                pos = self.unicode_escape(pos, out)
            else:
                out.append(ch)
            pos += 1
        if self.char(pos) == quote:
            pos += 1
        return "".join(out), min(pos, self.size)

    def unicode_escape(self, pos: int, out: list[str]) -> int:
        code = self.hex4(pos + 1)
        pos += 4
        if 0xDC00 <= code <= 0xDFFF or code == 0:
            return pos
        if 0xD800 <= code <= 0xDBFF:
            if self.char(pos + 1) != "\\" or self.char(pos + 2) != "u":
                return pos
            low = self.hex4(pos + 3)
            pos += 6
            if not 0xDC00 <= low <= 0xDFFF:
                return pos
            code = 0x10000 + (((code & 0x3FF) << 10) | (low & 0x3FF))
        out.append(chr(code))
        return pos

    def array(self, pos: int) -> tuple[JsonNode, int]:
        node = JsonNode(JsonType.ARRAY)
        pos = self.skip(pos + 1)
        if self.char(pos) == "]":
            return node, pos + 1
        child, pos = self.value(self.skip(pos))
        node.append(child)
        pos = self.skip(pos)
        while self.char(pos) == ",":
            child, pos = self.value(self.skip(pos + 1))
            node.append(child)
            pos = self.skip(pos)
        if self.char(pos) == "]":
            return node, pos + 1
        raise self.fail("malformed array", pos)

    def member(self, node: JsonNode, pos: int) -> int:
        name, pos = self.string(self.skip(pos))
        pos = self.skip(pos)
        if self.char(pos) != ":":
            raise self.fail("expected ':'", pos)
        child, pos = self.value(self.skip(pos + 1))
        node.add(name, child)
        return self.skip(pos)

    def object(self, pos: int) -> tuple[JsonNode, int]:
        node = JsonNode(JsonType.OBJECT)
        pos = self.skip(pos + 1)
        if self.char(pos) == "}":
            return node, pos + 1
        pos = self.member(node, pos)
        while self.char(pos) == ",":
            pos = self.member(node, pos + 1)
        if self.char(pos) == "}":
            return node, pos + 1
        raise self.fail("malformed object", pos)


def parse(text: str, require_null_terminated: bool = False) -> JsonNode:
    """Read the first JSON value in ``text``.

    With ``require_null_terminated`` only whitespace and comments may follow it.
    """
    reader = _Reader(text)
    node, end = reader.value(reader.skip(0))
    if require_null_terminated:
        end = reader.skip(end)
        if end < reader.size:
            raise reader.fail("unexpected trailing text", end)
    return node


def parse_prefix(text: str) -> tuple[JsonNode, int]:
    """Read the first JSON value in ``text``; return it and the index just after it."""
    reader = _Reader(text)
    return reader.value(reader.skip(0))


def _format_number(node: JsonNode) -> str:
    d = node.value_double
    if (
        math.isfinite(d)
        and abs(node.value_int - d) <= _DBL_EPSILON
        and _INT_MIN <= d <= _INT_MAX
    ):
        return "%d" % node.value_int
    if math.isfinite(d) and abs(math.floor(d) - d) <= _DBL_EPSILON and abs(d) < 1.0e60:
        return "%.0f" % d
    if abs(d) < 1.0e-6 or abs(d) > 1.0e9:
        return "%e" % d
    return "%f" % d


_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _format_string(value: str | None) -> str:
    if value is None:
        return ""
    parts = ['"']
    for ch in value:
        if ord(ch) > 31 and ch not in ('"', "\\"):
            parts.append(ch)
        else:
            parts.append(_ESCAPES.get(ch, "\\u%04x" % ord(ch)))
    parts.append('"')
    return "".join(parts)


def _format(node: JsonNode, depth: int, formatted: bool) -> str:
    kind = node.type
    if kind == JsonType.NULL:
        return "null"
    if kind == JsonType.FALSE:
        return "false"
    if kind == JsonType.TRUE:
        return "true"
    if kind == JsonType.NUMBER:
        return _format_number(node)
    if kind == JsonType.STRING:
        return _format_string(node.value_string)
    if kind == JsonType.ARRAY:
        if not node.children:
            return "[]"
        separator = ", " if formatted else ","
        return "[" + separator.join(
            _format(child, depth + 1, formatted) for child in node.children
        ) + "]"
    if kind == JsonType.OBJECT:
        return _format_object(node, depth, formatted)
    raise ValueError(f"unknown node type: {kind!r}")


def _format_object(node: JsonNode, depth: int, formatted: bool) -> str:
    if not node.children:
        return "{" + ("\n" + "\t" * (depth - 1) if formatted else "") + "}"
    depth += 1
    indent = "\t" * depth if formatted else ""
    parts = ["{\n" if formatted else "{"]
    last = len(node.children) - 1
    for position, child in enumerate(node.children):
        parts.append(indent)
        parts.append(_format_string(child.name))
        parts.append(":\t" if formatted else ":")
        parts.append(_format(child, depth, formatted))
        if position != last:
            parts.append(",")
        if formatted:
            parts.append("\n")
    if formatted:
        parts.append("\t" * (depth - 1))
    parts.append("}")
    return "".join(parts)


def dumps(node: JsonNode, formatted: bool = True) -> str:
    """Render ``node`` as JSON text, indented with tabs when ``formatted``."""
    return _format(node, 0, formatted)


def minify(text: str) -> str:
    """Strip whitespace and comments from JSON text, leaving string literals intact."""
    out: list[str] = []
    pos, size = 0, len(text)
    while pos < size:
        ch = text[pos]
        if ch in " \t\r\n":
            pos += 1
        elif text.startswith("//", pos):
            while pos < size and text[pos] != "\n":
                pos += 1
        elif text.startswith("/*", pos):
            while pos < size and not text.startswith("*/", pos):
                pos += 1
            pos += 2
        elif ch == '"':
            out.append(ch)
            pos += 1
            while pos < size and text[pos] != '"':
                if text[pos] == "\\":
                    out.append(text[pos])
                    pos += 1
                    if pos >= size:
                        break
                out.append(text[pos])
                pos += 1
            if pos < size:
                out.append(text[pos])
                pos += 1
        else:
            out.append(ch)
            pos += 1
    return "".join(out)