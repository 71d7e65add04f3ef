"""
Honeycomb Demo: Unitcells, Bonds and Hamiltonians

This example walks through the data model:
- Building a unitcell by hand and from a preset
- Grouping bonds per site and computing bond vectors
- Copying with overrides
- Bond Hamiltonians selected by bond label
- Saving to JSON and plotting
"""

import logging
import numpy as np
import sys
import tempfile
from pathlib import Path

# Add latbase to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from latbase import Bond, Site, Unitcell, bond_vector, create_unitcell
from latbase.hamiltonian import combine, heisenberg_from_unitcell, kitaev_from_unitcell
from latbase.io import load_unitcell, save_unitcell


def example_hand_built():
    """Example 1: Two-site square unitcell."""
    print("="*60)
    print("Example 1: Hand-built unitcell")
    print("="*60)

    uc = Unitcell(
        [[1.0, 0.0], [0.0, 1.0]],
        [Site([0.0, 0.0], "A"), Site([0.5, 0.5], "B")],
        [Bond(1, 2, "J", (0, 0)), Bond(2, 1, "J", (1, 0))],
        validate=True,
    )
    print(uc)

    table = uc.organized_bonds_from()
    for i in range(1, uc.num_sites() + 1):
        print(f"  bonds from site {i}: {table[i]}")

    print(f"\nVector of bond 2: {bond_vector(uc.bond(2), uc)}")
    print(f"Unpaired bonds: {uc.unpaired_bonds()}")


def example_honeycomb():
    """Example 2: Honeycomb preset."""
    print("\n" + "="*60)
    print("Example 2: Honeycomb preset")
    print("="*60)

    uc = create_unitcell('honeycomb_kitaev', lattice_constant=1.0)
    print(f"\nUnitcell: {uc!r}")

    for bond in uc.organized_bonds_from()[1]:
        vector = uc.bond_vector(bond)
        print(f"  {bond}: vector = {vector}, length = {np.linalg.norm(vector):.3f}")

    # Same geometry with the B site relabelled
    relabelled = uc.similar()
    relabelled.site(2).set_label("C")
    print(f"\nOriginal B label: {uc.site(2).get_label()}, "
          f"copy: {relabelled.site(2).get_label()}")


def example_hamiltonian():
    """Example 3: Heisenberg-Kitaev couplings."""
    print("\n" + "="*60)
    print("Example 3: Heisenberg-Kitaev bond Hamiltonian")
    print("="*60)

    uc = create_unitcell('honeycomb_kitaev')
    heisenberg = heisenberg_from_unitcell(uc)
    heisenberg.J_bonds = [["x", "y", "z"]]
    kitaev = kitaev_from_unitcell(uc)
    kitaev.J = np.array([-1.0, -1.0, -1.0])

    h = combine(heisenberg, kitaev)
    print(f"\n{h}")
    for bond in uc.organized_bonds_from()[1]:
        print(f"\n  {bond}:\n{h(bond).real}")


def example_persistence():
    """Example 4: JSON save/load and plotting."""
    print("\n" + "="*60)
    print("Example 4: Persistence and plotting")
    print("="*60)

    uc = create_unitcell('triangular', lattice_constant=2.0)
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "triangular.json"
        save_unitcell(uc, path)
        loaded = load_unitcell(path)
    print(f"\nLoaded {loaded!r}, equal to saved: {loaded == uc}")

    try:
        import matplotlib
        matplotlib.use('Agg')
        from latbase.visualization import plot_unitcell

        ax = plot_unitcell(create_unitcell('honeycomb_kitaev'))
        output = Path(tempfile.gettempdir()) / "honeycomb_kitaev.png"
        ax.figure.savefig(output)
        print(f"Saved plot to {output}")
    except ImportError as e:
        print(f"(Plotting skipped: {e})")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    example_hand_built()
    example_honeycomb()
    example_hamiltonian()
    example_persistence()
