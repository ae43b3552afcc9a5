"""
どこで: `src/svgfig/core/trans.py`。
何を: 座標変換（translate/rotate/scale）の列 Trans と、その行列表現を定義する。
なぜ: 「先に追加した変換が先に図形へ適用される」順序で変換を組み立てられるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from types import NotImplementedType
from typing import TypeAlias

import numpy as np


@dataclass(frozen=True, slots=True)
class Translate:
    """平行移動 `(dx, dy)`。"""

    dx: float
    dy: float

    def matrix(self) -> np.ndarray:
        return np.array(
            [[1.0, 0.0, float(self.dx)], [0.0, 1.0, float(self.dy)], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )


@dataclass(frozen=True, slots=True)
class Rotate:
    """原点まわりの回転 [deg]。y 軸下向きのキャンバスでは正の角度が時計回りになる。"""

    degrees: float

    def matrix(self) -> np.ndarray:
        rad = np.deg2rad(float(self.degrees))
        c = float(np.cos(rad))
        s = float(np.sin(rad))
        return np.array(
            [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )


@dataclass(frozen=True, slots=True)
class Scale:
    """原点基準の拡大縮小 `(sx, sy)`。"""

    sx: float
    sy: float

    @property
    def is_uniform(self) -> bool:
        return self.sx == self.sy

    def matrix(self) -> np.ndarray:
        return np.array(
            [[float(self.sx), 0.0, 0.0], [0.0, float(self.sy), 0.0], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )


TransformOp: TypeAlias = Translate | Rotate | Scale


@dataclass(frozen=True, slots=True)
class Trans:
    """座標変換の追記専用列。

    Parameters
    ----------
    ops : tuple[TransformOp, ...]
        追加順の変換列。先頭が最初に図形へ適用される。

    Notes
    -----
    各ビルダーはレシーバを変更せず、末尾に 1 要素追加した新しい Trans を返す。
    SVG の transform 属性は左端のトークンが最後に点へ適用されるため、
    シリアライズ時は追加順の逆順で出力する（`svgfig.export.svg.format_transform`）。
    """

    ops: tuple[TransformOp, ...] = ()

    def __post_init__(self) -> None:
        ops = tuple(self.ops)
        for op in ops:
            if not isinstance(op, (Translate, Rotate, Scale)):
                raise TypeError(f"Trans に追加できない変換型: {type(op)!r}")
        object.__setattr__(self, "ops", ops)

    def _push(self, op: TransformOp) -> "Trans":
        return Trans(ops=self.ops + (op,))

    def translate(self, dx: float, dy: float) -> "Trans":
        return self._push(Translate(dx, dy))

    def rotate(self, degrees: float) -> "Trans":
        return self._push(Rotate(degrees))

    def scale(self, sx: float, sy: float | None = None) -> "Trans":
        """拡大縮小を追加する。`sy` 省略時は一様スケールとする。"""

        return self._push(Scale(sx, sx if sy is None else sy))

    def scale_xy(self, sx: float, sy: float) -> "Trans":
        return self._push(Scale(sx, sy))

    def then(self, other: "Trans") -> "Trans":
        """self の変換を適用した後に other の変換を適用する Trans を返す。"""

        return Trans(ops=self.ops + other.ops)

    def __add__(self, other: object) -> "Trans | NotImplementedType":
        if not isinstance(other, Trans):
            return NotImplemented
        return self.then(other)

    def __len__(self) -> int:
        return len(self.ops)

    def is_identity(self) -> bool:
        return not self.ops

    def matrix(self) -> np.ndarray:
        """合成後の 3x3 同次アフィン行列を返す。

        Returns
        -------
        np.ndarray
            float64 shape (3, 3)。SVG の transform 属性と同じく、
            出力トークン順（追加順の逆順）に左から掛け合わせた行列。
        """

        m = np.eye(3, dtype=np.float64)
        for op in reversed(self.ops):
            m = m @ op.matrix()
        return m

    def apply(self, points: np.ndarray) -> np.ndarray:
        """点列に変換を追加順に 1 つずつ適用して返す。

        Parameters
        ----------
        points : np.ndarray
            shape (N, 2) の点列。

        Returns
        -------
        np.ndarray
            float64 shape (N, 2) の変換後点列。

        Raises
        ------
        ValueError
            points が shape (N, 2) でない場合。
        """

        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError("points は shape (N,2) の 2 次元配列である必要がある")

        homo = np.concatenate([pts, np.ones((pts.shape[0], 1), dtype=np.float64)], axis=1)
        for op in self.ops:
            homo = homo @ op.matrix().T
        return homo[:, :2]


__all__ = ["Rotate", "Scale", "Trans", "TransformOp", "Translate"]
