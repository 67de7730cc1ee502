"""Render every surfgeom solid and scene on one page.

The meshes are handed straight to matplotlib's 3-D axes
(``plot_surface`` / ``plot_wireframe``); no marching cubes are needed since
every sampler already produces a structured grid.

Usage::

    python scripts/gallery_3d.py                   # saves gallery_3d.png
    python scripts/gallery_3d.py --out my_file.png
    python scripts/gallery_3d.py --res 12          # coarser meshes
    python scripts/gallery_3d.py --wireframe -v    # wireframes, debug logging

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from surfgeom import (
    Mesh,
    draw_cylinder,
    draw_hemisphere,
    draw_plane_nzz,
    draw_sphere,
    draw_superquadric,
    setup_logging,
)
from surfgeom.scenes import aligned_cylinders, cap_and_cup, superquadric_gallery

logger = logging.getLogger("surfgeom.gallery")


# ---------------------------------------------------------------------------
# Panel catalogue  (label, {name: Mesh})
# ---------------------------------------------------------------------------

def _make_panels(res: int) -> list[tuple[str, dict[str, Mesh]]]:
    full = (-180.0, 180.0, -90.0, 90.0)
    unit = (1.0, 1.0, 1.0)
    return [
        # --- single solids ---
        ("draw_cylinder",
         {"cylinder": draw_cylinder((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 0.4, 2, 2 * res)}),
        ("draw_plane_nzz",
         {"plane": draw_plane_nzz((0.0, 0.0, 0.0), (1.0, -1.0, 2.0), -1.0, 1.0, -1.0, 1.0, 4, 4)}),
        ("draw_hemisphere (cap)",
         {"cap": draw_hemisphere((0.0, 0.0, 0.0), 1.0, -180.0, 180.0, 2 * res, res, cup=False)}),
        ("draw_hemisphere (cup)",
         {"cup": draw_hemisphere((0.0, 0.0, 0.0), 1.0, -180.0, 180.0, 2 * res, res, cup=True)}),
        ("draw_sphere",
         {"sphere": draw_sphere((0.0, 0.0, 0.0), 1.0, 2 * res, res)}),
        ("superquadric k=0.5",
         {"star": draw_superquadric((0.0, 0.0, 0.0), unit, (0.5, 0.5, 0.5), *full, 2 * res, res)}),
        ("superquadric k=4",
         {"cube": draw_superquadric((0.0, 0.0, 0.0), unit, (4.0, 4.0, 4.0), *full, 2 * res, res)}),
        ("superquadric r=(1,0.5,0.3)",
         {"ellipsoid": draw_superquadric((0.0, 0.0, 0.0), (1.0, 0.5, 0.3), (2.0, 2.0, 2.0),
                                         *full, 2 * res, res)}),
        # --- composite scenes ---
        ("aligned_cylinders", aligned_cylinders(ndiv_perimeter=res)),
        ("superquadric_gallery", superquadric_gallery(2 * res, res)),
        ("cap_and_cup", cap_and_cup(n=res)),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _set_equal_limits(ax, meshes) -> None:
    bounds = np.array([m.bounds() for m in meshes])      # (M, 3, 2)
    lo = bounds[:, :, 0].min(axis=0)
    hi = bounds[:, :, 1].max(axis=0)
    centre = 0.5 * (lo + hi)
    half = 0.5 * float((hi - lo).max()) or 1.0
    ax.set_xlim(centre[0] - half, centre[0] + half)
    ax.set_ylim(centre[1] - half, centre[1] + half)
    ax.set_zlim(centre[2] - half, centre[2] + half)
    ax.set_box_aspect([1, 1, 1])


def render_gallery(panels, out_path: str, ncols: int = 4, wireframe: bool = False) -> None:
    nrows = (len(panels) + ncols - 1) // ncols
    fig = plt.figure(figsize=(ncols * 3.0, nrows * 3.0), facecolor="#111111")

    _FACE_COLOR = (1.0, 0.82, 0.2)   # warm gold
    _VIEW_ELEV  = 20
    _VIEW_AZIM  = 35

    for idx, (label, meshes) in enumerate(panels):
        ax = fig.add_subplot(nrows, ncols, idx + 1, projection="3d")
        ax.set_facecolor("#111111")
        ax.set_axis_off()
        ax.set_title(label, color="white", fontsize=7, pad=1)

        for name, mesh in meshes.items():
            logger.debug("%s/%s: %s", label, name, mesh)
            if wireframe:
                ax.plot_wireframe(*mesh, color=_FACE_COLOR, linewidth=0.4)
            else:
                ax.plot_surface(*mesh, color=_FACE_COLOR, shade=True,
                                linewidth=0, antialiased=True)

        _set_equal_limits(ax, meshes.values())
        ax.view_init(elev=_VIEW_ELEV, azim=_VIEW_AZIM)

    fig.suptitle("surfgeom — parametric surface gallery", color="white",
                 fontsize=13, y=1.002)
    plt.tight_layout(pad=0.3)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("Saved: %s", out_path)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render all surfgeom solids and scenes to a single PNG gallery."
    )
    parser.add_argument("--out",  default="gallery_3d.png", help="Output PNG path")
    parser.add_argument("--cols", type=int, default=4, help="Number of columns (default 4)")
    parser.add_argument("--res",  type=int, default=20,
                        help="Divisions along the polar angle (default 20)")
    parser.add_argument("--wireframe", action="store_true", help="Draw wireframes instead of surfaces")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    panels = _make_panels(args.res)
    render_gallery(panels, args.out, ncols=args.cols, wireframe=args.wireframe)


if __name__ == "__main__":
    main()
