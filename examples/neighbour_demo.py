"""
Neighbour query demo

This example walks through the LatticeMap addressing scheme:
- Encoding and decoding between site indices and cells
- Neighbour shells with open and periodic boundaries
- Superset neighbour lists for a batch of sites
"""

from latmap import LatticeMap, create_lattice_map


def example_addressing():
    """Example 1: Index <-> cell arithmetic."""
    print("="*60)
    print("Example 1: Site addressing on a 4x4x4 lattice, 2 basis sites")
    print("="*60)

    lattice_map = LatticeMap(n_basis=2,
                             repetitions=(4, 4, 4),
                             periodic=(True, True, True))
    print(f"\n{lattice_map}")

    for index in (0, 37, 127):
        cell = lattice_map.index_to_cell(index)
        basis = lattice_map.basis_site_from_index(index)
        print(f"  site {index:3d} -> cell {tuple(cell)}, basis site {basis}, "
              f"cell sites {lattice_map.indices_from_cell(*cell).tolist()}")


def example_boundaries():
    """Example 2: Open vs periodic boundaries."""
    print("\n" + "="*60)
    print("Example 2: First shell of a corner site")
    print("="*60)

    for geometry in ('bulk', 'slab', 'cluster'):
        lattice_map = create_lattice_map(geometry, repetitions=(4, 4, 4))
        neighbours = lattice_map.neighbour_indices(0, shells=1)
        print(f"  {geometry:8s} periodic={lattice_map.periodic}: "
              f"{len(neighbours)} sites")


def example_superset():
    """Example 3: Superset neighbour list."""
    print("\n" + "="*60)
    print("Example 3: Superset of neighbourhoods")
    print("="*60)

    lattice_map = create_lattice_map('cluster', repetitions=(4, 4, 4))
    sites = [0, 0, 21]
    superset = lattice_map.superset_neighbour_indices(sites)
    print(f"  sites {sites} -> {len(superset)} unique sites")
    print(f"  {superset.tolist()}")


if __name__ == '__main__':
    example_addressing()
    example_boundaries()
    example_superset()
