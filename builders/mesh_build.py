# builders/mesh_build.py

from core.types import (
    TowerSpec,
    TowerGeometry,
    Model3D
)
from builders.build_modules.threeD_helpers import create_tower_model

def generate_3D_model(geometry: TowerGeometry, spec: TowerSpec) -> Model3D:
    """
    Turn the lattice into solids: a cylinder per strut and a torus per ring.
    Every call builds a new model; nothing is cached between rebuilds.
    """
    model, n_struts, n_rings, skipped = create_tower_model(
        geometry.struts,
        geometry.rings,
        strut_radius=spec.strut_radius
    )

    return Model3D(threeD_model=model, n_struts=n_struts, n_rings=n_rings, skipped=skipped)
