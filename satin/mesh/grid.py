"""Grid for the axial and radial integration domain."""

import numpy as np

Z_NODES = 8001
Z_SCALE = 25
Z_RES = 4e-2  # [cm]
R_MAX = 0.5  # [cm]
R_RES = 2e-3  # [cm]


class Grid:
    """
    Fixed mesh for the gaussian-beam integral.

    The axial window holds `z_nodes` samples centered at
    `z_nodes // 2`, and the radial nodes run from zero up
    to `r_max` included, in centimeters.
    """

    def __init__(
        self,
        z_nodes=Z_NODES,
        z_scale=Z_SCALE,
        z_res=Z_RES,
        r_max=R_MAX,
        r_res=R_RES,
    ):
        # Initialize parameters
        self.z_nodes = z_nodes
        self.z_center = z_nodes // 2
        self.z_scale = z_scale
        self.z_res = z_res
        self.r_max = r_max
        self.r_res = r_res

        self._init_grid_arrays()

    def _init_grid_arrays(self):
        """Set 1D grid arrays."""
        self.z_index = np.arange(self.z_nodes, dtype=np.int64) - self.z_center

        # Radial nodes are accumulated step by step, not spaced
        # by linspace, so the last node matches r += r_res exactly
        r_nodes = []
        r = 0.0
        while r <= self.r_max:
            r_nodes.append(r)
            r += self.r_res
        self.r_grid = np.array(r_nodes, dtype=np.float64)
        self.r_nodes = len(self.r_grid)
        self.annulus_factor = 2 * np.pi * self.r_res
