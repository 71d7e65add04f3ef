import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from ..core.topology import bond_vector
from ..errors import DimensionMismatchError

label_colors = [
    '#2E86AB', '#A23B72', '#3CAB70', '#F5B700', '#0F8B8D',
    '#8963BA', '#EC9A29', '#2C5784', '#9B4F0F', '#1B998B'
]


def _color_index(labels):
    # stable label -> color slot, in order of first appearance
    return {label: i % len(label_colors) for i, label in enumerate(dict.fromkeys(labels))}


def plot_unitcell(container, ax=None, show_labels=True, show_periodic=True,
                  title=None):
    """
    Draw the sites and bonds of a 2D unitcell or lattice.

    Bonds are drawn from their origin site along `bond_vector`, so periodic
    bonds (dashed) point into the neighbouring copy of the cell. Bond colors
    follow the bond labels.

    Parameters
    ----------
    container : unitcell- or lattice-like
        Object with 2D sites.
    ax : matplotlib Axes, optional
        Axes to draw into; a new figure is created if None.
    show_labels : bool
        Annotate sites with their labels.
    show_periodic : bool
        Draw bonds with non-zero wrap.
    title : str, optional
        Axes title, defaults to the container's class name.

    Returns
    -------
    ax : matplotlib Axes
    """
    sites = container.get_sites()
    if any(len(site.get_point()) != 2 for site in sites):
        raise DimensionMismatchError("plot_unitcell only supports 2D sites")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    ax.set_title(title or type(container).__name__)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.grid(True, linestyle=':', alpha=0.3)
    ax.set_aspect('equal')

    bonds = container.get_bonds()
    colors = _color_index(bond.get_label() for bond in bonds)
    for bond in bonds:
        periodic = any(w != 0 for w in bond.get_wrap())
        if periodic and not show_periodic:
            continue
        vector = bond_vector(bond, container)
        start = np.asarray(sites[bond.get_from() - 1].get_point(), dtype=float)
        end = start + vector
        ax.plot([start[0], end[0]], [start[1], end[1]],
                linestyle='--' if periodic else '-',
                color=label_colors[colors[bond.get_label()]],
                alpha=0.7, linewidth=1.2, zorder=2)

    if sites:
        points = np.array([site.get_point() for site in sites], dtype=float)
        ax.scatter(points[:, 0], points[:, 1], color='k', s=60, zorder=3)
        if show_labels:
            for point, site in zip(points, sites):
                ax.annotate(str(site.get_label()), point,
                            textcoords='offset points', xytext=(5, 5), fontsize=8)

    if colors:
        legend_elements = [
            Line2D([0], [0], color=label_colors[i], linewidth=1.2, alpha=0.7,
                   label=str(label))
            for label, i in colors.items()
        ]
        ax.legend(handles=legend_elements, title="Bond labels", loc='upper right')
    return ax
