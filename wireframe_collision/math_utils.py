#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math

logger = logging.getLogger(__name__)

EPSILON = 1e-6


class Vec3:
    """Immutable 3-component vector (point or free vector, caller decides)."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vec3 is immutable")

    @classmethod
    def zero(cls) -> 'Vec3':
        return cls(0.0, 0.0, 0.0)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        """Unit vector in the same direction; the zero vector stays zero."""
        m = self.length()
        if m == 0:
            return Vec3.zero()
        return self / m

    def perpendicular(self) -> 'Vec3':
        """Some vector perpendicular to this one.

        Not normalized. For a vector on the z axis the result is (0, z, 0),
        which is only perpendicular because x and y are both zero.
        """
        if self.x != 0.0 or self.y != 0.0:
            return Vec3(-self.y, self.x, 0.0)
        return Vec3(0.0, self.z, self.y)

    def is_close(self, other: 'Vec3', eps: float = EPSILON) -> bool:
        return (abs(self.x - other.x) <= eps and
                abs(self.y - other.y) <= eps and
                abs(self.z - other.z) <= eps)


def dot(a: Vec3, b: Vec3) -> float:
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return a.cross(b)


def normalize(v: Vec3) -> Vec3:
    return v.normalize()


def perpendicular(v: Vec3) -> Vec3:
    return v.perpendicular()


def _ieee_div(n: float, d: float) -> float:
    # Python raises on float division by zero; follow IEEE 754 instead.
    if d != 0.0:
        return n / d
    if n == 0.0 or math.isnan(n):
        return math.nan
    return math.copysign(math.inf, n) * math.copysign(1.0, d)


class Vec4:
    """Homogeneous point produced by Mat4.mul_point()."""
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float = 1.0):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))
        object.__setattr__(self, 'w', float(w))

    def __setattr__(self, name, value):
        raise AttributeError("Vec4 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vec4 is immutable")

    def __repr__(self):
        return f"Vec4({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.w:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def perspective_divide(self) -> Vec3:
        """Divide x, y, z by w.

        A zero w is not guarded: the result carries inf/nan components.
        """
        w = self.w
        if w == 0.0:
            logger.debug("perspective divide with w == 0 for %r", self)
        return Vec3(_ieee_div(self.x, w), _ieee_div(self.y, w), _ieee_div(self.z, w))


class Mat4:
    """4x4 matrix, [row][col] storage, row-vector convention.

    A point is transformed as ``point @ matrix``; translation lives in row 3.
    Every constructor and operator returns a new matrix.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is None:
            self.m = [[0.0] * 4 for _ in range(4)]
            return
        rows = [list(map(float, row)) for row in data]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("Mat4 requires 4x4 data")
        self.m = rows

    def __repr__(self):
        body = ", ".join("[" + ", ".join(f"{v:.3f}" for v in row) + "]" for row in self.m)
        return f"Mat4([{body}])"

    def __getitem__(self, index):
        # read-only view of the row
        return tuple(self.m[index])

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return self.m == other.m
        return NotImplemented

    __hash__ = None

    def rows(self):
        return tuple(tuple(row) for row in self.m)

    def is_close(self, other: 'Mat4', eps: float = EPSILON) -> bool:
        return all(abs(a - b) <= eps
                   for row_a, row_b in zip(self.m, other.m)
                   for a, b in zip(row_a, row_b))

    # ── Constructors ────────────────────────────────────────────────────
    @classmethod
    def identity(cls) -> 'Mat4':
        res = cls()
        for i in range(4):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def translate(cls, t: Vec3) -> 'Mat4':
        mat = cls.identity()
        mat.m[3][0] = t.x
        mat.m[3][1] = t.y
        mat.m[3][2] = t.z
        return mat

    @classmethod
    def scale(cls, s: Vec3) -> 'Mat4':
        mat = cls.identity()
        mat.m[0][0] = s.x
        mat.m[1][1] = s.y
        mat.m[2][2] = s.z
        return mat

    @classmethod
    def rotate_x(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[1][1] = c
        mat.m[1][2] = s
        mat.m[2][1] = -s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotate_y(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][2] = -s
        mat.m[2][0] = s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotate_z(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][1] = s
        mat.m[1][0] = -s
        mat.m[1][1] = c
        return mat

    @classmethod
    def affine(cls, scale: Vec3, rotate: Vec3, translate: Vec3) -> 'Mat4':
        """Scale, then rotate X, Y, Z, then translate.

        Composed as S @ (Rz @ (Ry @ Rx)) @ T; keep this multiply order.
        """
        rotate_xyz = cls.rotate_z(rotate.z) @ (cls.rotate_y(rotate.y) @ cls.rotate_x(rotate.x))
        return cls.scale(scale) @ (rotate_xyz @ cls.translate(translate))

    @classmethod
    def perspective_fov(cls, fov_y: float, aspect_ratio: float,
                        near_clip: float, far_clip: float) -> 'Mat4':
        """Perspective projection, vertical fov in radians, depth mapped to [0, 1].

        The output w equals the input z. Degenerate inputs (zero fov or
        aspect, near == far) give inf/nan entries instead of raising.
        """
        h = _ieee_div(1.0, math.tan(fov_y / 2.0))
        depth = far_clip - near_clip
        mat = cls()
        mat.m[0][0] = _ieee_div(h, aspect_ratio)
        mat.m[1][1] = h
        mat.m[2][2] = _ieee_div(far_clip, depth)
        mat.m[2][3] = 1.0
        mat.m[3][2] = _ieee_div(-near_clip * far_clip, depth)
        return mat

    @classmethod
    def viewport(cls, left: float, top: float, width: float, height: float,
                 min_depth: float, max_depth: float) -> 'Mat4':
        """Clip space to pixels. Y is flipped for a top-left screen origin."""
        mat = cls()
        mat.m[0][0] = width / 2.0
        mat.m[1][1] = -height / 2.0
        mat.m[2][2] = max_depth - min_depth
        mat.m[3][0] = left + width / 2.0
        mat.m[3][1] = top + height / 2.0
        mat.m[3][2] = min_depth
        mat.m[3][3] = 1.0
        return mat

    # ── Algebra ─────────────────────────────────────────────────────────
    def __matmul__(self, other):
        if isinstance(other, Mat4):
            res = Mat4()
            for r in range(4):
                for c in range(4):
                    val = 0.0
                    for k in range(4):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    def transpose(self) -> 'Mat4':
        return Mat4([[self.m[c][r] for c in range(4)] for r in range(4)])

    def rigid_inverse(self) -> 'Mat4':
        """Inverse of a rotation + translation matrix.

        Transposes the upper 3x3 and maps the translation row to -t @ R^T.
        Matrices with scale or skew get a wrong answer, silently; check
        is_rigid() first when the input is not known to be rigid.
        """
        m = self.m
        res = Mat4.identity()
        r = res.m
        for i in range(3):
            for j in range(3):
                r[i][j] = m[j][i]
        for j in range(3):
            r[3][j] = -(m[3][0] * r[0][j] + m[3][1] * r[1][j] + m[3][2] * r[2][j])
        return res

    def is_rigid(self, eps: float = EPSILON) -> bool:
        """True if the upper 3x3 is orthonormal and column 3 is (0, 0, 0, 1)."""
        m = self.m
        if any(abs(m[i][3]) > eps for i in range(3)) or abs(m[3][3] - 1.0) > eps:
            return False
        for i in range(3):
            for j in range(3):
                d = sum(m[i][k] * m[j][k] for k in range(3))
                if abs(d - (1.0 if i == j else 0.0)) > eps:
                    return False
        return True

    def mul_point(self, v: Vec3) -> Vec4:
        """Row vector (x, y, z, 1) times this matrix."""
        m = self.m
        return Vec4(
            m[0][0]*v.x + m[1][0]*v.y + m[2][0]*v.z + m[3][0],
            m[0][1]*v.x + m[1][1]*v.y + m[2][1]*v.z + m[3][1],
            m[0][2]*v.x + m[1][2]*v.y + m[2][2]*v.z + m[3][2],
            m[0][3]*v.x + m[1][3]*v.y + m[2][3]*v.z + m[3][3],
        )


def multiply(m1: Mat4, m2: Mat4) -> Mat4:
    return m1 @ m2


def transform(v: Vec3, m: Mat4) -> Vec3:
    """Transform a point (w = 1) and apply the perspective divide."""
    return m.mul_point(v).perspective_divide()
