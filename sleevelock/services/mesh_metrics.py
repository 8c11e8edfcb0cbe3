"""Mesh inspection and comparison of exported STL files.

Used to confirm that two generation runs produced tolerance-identical
meshes: bounding box dimensions, volume and a symmetric chamfer distance.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import trimesh
from scipy.spatial import cKDTree

log = logging.getLogger(__name__)


@dataclass
class MeshInfo:
    """Basic properties of one mesh."""

    path: str
    dims: list[float]
    volume: Optional[float]
    watertight: bool
    faces: int


@dataclass
class Comparison:
    """Result of comparing two meshes."""

    chamfer_distance: float
    max_dim_delta: float
    volume_delta: Optional[float]
    a: MeshInfo
    b: MeshInfo

    def within(self, tolerance: float) -> bool:
        """True when every measured difference is at most `tolerance`."""
        deltas = [self.chamfer_distance, self.max_dim_delta]
        if self.volume_delta is not None:
            deltas.append(self.volume_delta)
        return all(d <= tolerance for d in deltas)

    def as_dict(self) -> dict:
        return asdict(self)


def load_mesh(path: Path) -> trimesh.Trimesh:
    """Load an STL/OBJ file and return a single trimesh."""
    mesh = trimesh.load(path, force="mesh")
    if not isinstance(mesh, trimesh.Trimesh):
        raise ValueError(f"Expected single mesh, got {type(mesh).__name__}")
    return mesh


def inspect(path: Path, mesh: Optional[trimesh.Trimesh] = None) -> MeshInfo:
    if mesh is None:
        mesh = load_mesh(path)
    return MeshInfo(
        path=str(path),
        dims=(mesh.bounds[1] - mesh.bounds[0]).tolist(),
        volume=abs(float(mesh.volume)) if mesh.is_watertight else None,
        watertight=bool(mesh.is_watertight),
        faces=len(mesh.faces),
    )


def _sample_points(mesh: trimesh.Trimesh, n: int, seed: int) -> np.ndarray:
    points, _ = trimesh.sample.sample_surface(mesh, n, seed=seed)
    return points


def chamfer_distance(a: trimesh.Trimesh, b: trimesh.Trimesh, n_samples: int = 10_000,
                     seed: int = 0) -> float:
    """Symmetric chamfer distance [mm]: mean nearest-neighbour distance both ways.

    Uses the same sampling seed on both meshes, so identical meshes give 0.
    """
    pts_a = _sample_points(a, n_samples, seed)
    pts_b = _sample_points(b, n_samples, seed)

    dist_b_to_a, _ = cKDTree(pts_a).query(pts_b, k=1)
    dist_a_to_b, _ = cKDTree(pts_b).query(pts_a, k=1)

    return float((np.mean(dist_b_to_a) + np.mean(dist_a_to_b)) / 2)


def compare(path_a: Path, path_b: Path, n_samples: int = 10_000) -> Comparison:
    """Compare two mesh files."""
    mesh_a, mesh_b = load_mesh(path_a), load_mesh(path_b)
    info_a, info_b = inspect(path_a, mesh_a), inspect(path_b, mesh_b)

    if info_a.volume is not None and info_b.volume is not None:
        volume_delta = abs(info_a.volume - info_b.volume)
    else:
        log.warning("Volume not compared: mesh is not watertight")
        volume_delta = None

    return Comparison(
        chamfer_distance=chamfer_distance(mesh_a, mesh_b, n_samples),
        max_dim_delta=max(abs(x - y) for x, y in zip(info_a.dims, info_b.dims)),
        volume_delta=volume_delta,
        a=info_a,
        b=info_b,
    )
