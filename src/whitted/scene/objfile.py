"""Wavefront OBJ parser producing triangle groups.

Supported records:
    v x y z       vertex (1-indexed)
    vn x y z      vertex normal (1-indexed)
    f a b c ...   polygon, fan-triangulated as (a, b, c), (a, c, d), ...
    g name        following faces go to the named group

Face references may be ``i``, ``i/t``, ``i//n`` or ``i/t/n``; texture
indices must be integers but are otherwise unused. When every reference of
a face carries a normal index the face becomes SmoothTriangles, otherwise
flat Triangles. Negative indices count back from the most recent vertex
or normal, as in the OBJ format.

Faces whose vertices are collinear would make zero-area triangles. Those
triangles are dropped and counted in ObjFile.degenerate.

Anything else (comments, blank lines, unsupported records) is counted in
ObjFile.ignored and otherwise skipped.

Example:
    >>> from whitted.scene.objfile import parse_obj
    >>> obj = parse_obj(["v -1 1 0", "v -1 0 0", "v 1 0 0", "f 1 2 3"])
    >>> len(obj.default_group.children)
    1
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from whitted.core.errors import MalformedObjNumberError
from whitted.core.tuples import Tuple, point, vector
from whitted.geometry.shape import Shape, group, smooth_triangle, triangle
from whitted.geometry.triangle import is_degenerate

logger = logging.getLogger(__name__)


@dataclass
class ObjFile:
    """Parsed OBJ contents.

    Attributes:
        vertices: Vertex points, in file order.
        normals: Vertex normals, in file order.
        default_group: Group holding faces that precede any ``g`` record.
        groups: Named groups, in order of first appearance.
        ignored: Number of lines that were skipped.
        degenerate: Number of zero-area triangles dropped from faces.
    """

    vertices: list[Tuple] = field(default_factory=list)
    normals: list[Tuple] = field(default_factory=list)
    default_group: Shape = field(default_factory=group)
    groups: dict[str, Shape] = field(default_factory=dict)
    ignored: int = 0
    degenerate: int = 0

    def vertex(self, index: int) -> Tuple:
        """Vertex by 1-based index."""
        if index < 1:
            raise IndexError(f"OBJ indices start at 1, got {index}")
        return self.vertices[index - 1]

    def normal(self, index: int) -> Tuple:
        """Normal by 1-based index."""
        if index < 1:
            raise IndexError(f"OBJ indices start at 1, got {index}")
        return self.normals[index - 1]

    def to_group(self) -> Shape:
        """Collect every non-empty group into a single new group shape."""
        return obj_to_group(self)


def obj_to_group(obj: ObjFile) -> Shape:
    """Return a group holding the default group (if non-empty) and each named group."""
    root = group()
    if obj.default_group.children:
        root.add_child(obj.default_group)
    for named in obj.groups.values():
        root.add_child(named)
    return root


# =============================================================================
# Parsing
# =============================================================================


def _parse_float(token: str, line_number: int, line: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise MalformedObjNumberError(f"{token!r} is not a number", line_number, line) from None


def _parse_triple(tokens: list[str], line_number: int, line: str) -> tuple[float, float, float]:
    if len(tokens) < 3:
        raise MalformedObjNumberError(
            f"expected 3 coordinates, got {len(tokens)}", line_number, line
        )
    x, y, z = (_parse_float(token, line_number, line) for token in tokens[:3])
    return x, y, z


def _check_index(token: str, line_number: int, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedObjNumberError(f"{token!r} is not an index", line_number, line) from None


def _resolve_index(token: str, count: int, what: str, line_number: int, line: str) -> int:
    """Turn a 1-based (or negative, relative) OBJ index into a 0-based one."""
    index = _check_index(token, line_number, line)

    resolved = index - 1 if index > 0 else count + index
    if index == 0 or not 0 <= resolved < count:
        raise MalformedObjNumberError(
            f"{what} index {index} out of range (have {count})", line_number, line
        )
    return resolved


def _parse_face(
    obj: ObjFile, refs: list[str], line_number: int, line: str
) -> list[Shape]:
    if len(refs) < 3:
        raise MalformedObjNumberError(
            f"face needs at least 3 vertices, got {len(refs)}", line_number, line
        )

    points: list[Tuple] = []
    normals: list[Tuple | None] = []
    for ref in refs:
        parts = ref.split("/")
        v_index = _resolve_index(parts[0], len(obj.vertices), "vertex", line_number, line)
        points.append(obj.vertices[v_index])

        if len(parts) >= 2 and parts[1]:
            _check_index(parts[1], line_number, line)

        if len(parts) >= 3 and parts[2]:
            n_index = _resolve_index(parts[2], len(obj.normals), "normal", line_number, line)
            normals.append(obj.normals[n_index])
        else:
            normals.append(None)

    smooth = all(n is not None for n in normals)
    triangles = []
    for i in range(1, len(points) - 1):
        if is_degenerate(points[0], points[i], points[i + 1]):
            obj.degenerate += 1
            logger.debug("Dropping zero-area triangle on OBJ line %d", line_number)
            continue
        if smooth:
            triangles.append(
                smooth_triangle(
                    points[0], points[i], points[i + 1], normals[0], normals[i], normals[i + 1]
                )
            )
        else:
            triangles.append(triangle(points[0], points[i], points[i + 1]))
    return triangles


def parse_obj(lines: Iterable[str]) -> ObjFile:
    """Parse OBJ records into vertices, normals and triangle groups.

    Args:
        lines: Lines of OBJ text (a file object, a list, ...).

    Returns:
        The parsed ObjFile.

    Raises:
        MalformedObjNumberError: If a v, vn or f record holds a non-numeric
            field or references a vertex or normal that does not exist.
    """
    obj = ObjFile()
    current = obj.default_group

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens or tokens[0].startswith("#"):
            obj.ignored += 1
            continue

        keyword, args = tokens[0], tokens[1:]
        if keyword == "v":
            obj.vertices.append(point(*_parse_triple(args, line_number, line)))
        elif keyword == "vn":
            obj.normals.append(vector(*_parse_triple(args, line_number, line)))
        elif keyword == "f":
            for tri in _parse_face(obj, args, line_number, line):
                current.add_child(tri)
        elif keyword == "g":
            if args:
                name = " ".join(args)
                if name not in obj.groups:
                    obj.groups[name] = group()
                current = obj.groups[name]
            else:
                current = obj.default_group
        else:
            obj.ignored += 1
            logger.debug("Ignoring OBJ line %d: %r", line_number, line.rstrip("\n"))

    logger.debug(
        "Parsed OBJ: %d vertices, %d normals, %d groups, %d ignored lines, %d degenerate triangles",
        len(obj.vertices),
        len(obj.normals),
        len(obj.groups),
        obj.ignored,
        obj.degenerate,
    )
    return obj


def parse_obj_file(path: str | os.PathLike[str]) -> ObjFile:
    """Parse an OBJ file from disk."""
    with open(path, encoding="utf-8") as f:
        obj = parse_obj(f)
    logger.info("Loaded %s (%d vertices)", os.fspath(path), len(obj.vertices))
    return obj
