"""
Binary Search Tree Demo — Tree shapes, removal cases, and depth growth.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from binary_search_tree import BinarySearchTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

EXAMPLE_VALUES = [5, 3, 8, 1, 4, 7, 9]
# sorted insertion recurses once per node; stay well under the recursion limit
MAX_CHAIN_SIZE = 400
GROWTH_SIZES = [10, 25, 50, 100, 200, 300, 400]
N_TRIALS = 20
DISTRIBUTION_SIZE = 255
DISTRIBUTION_TRIALS = 500

COLORS = {
    "sorted": "#e74c3c",
    "random": "#3498db",
    "log2": "#27ae60",
    "node": "#9b59b6",
    "replaced": "#f39c12",
}


def build_tree(values):
    bst = BinarySearchTree()
    for value in values:
        bst.insert(int(value))
    return bst


def layout(node, level=0, positions=None, counter=None):
    """Place each node at (in-order index, -level)."""
    if positions is None:
        positions = {}
    if counter is None:
        counter = [0]
    if node.left is not None:
        layout(node.left, level + 1, positions, counter)
    positions[id(node)] = (counter[0], -level)
    counter[0] += 1
    if node.right is not None:
        layout(node.right, level + 1, positions, counter)
    return positions


def draw_edges(ax, node, positions):
    x, y = positions[id(node)]
    for child in (node.left, node.right):
        if child is None:
            continue
        cx, cy = positions[id(child)]
        ax.plot([x, cx], [y, cy], color="#555555", linewidth=1.5, zorder=1)
        draw_edges(ax, child, positions)


def draw_nodes(ax, node, positions, highlight=None):
    x, y = positions[id(node)]
    color = COLORS["replaced"] if node.value == highlight else COLORS["node"]
    ax.scatter([x], [y], s=900, color=color, zorder=2)
    ax.text(x, y, str(node.value), ha="center", va="center",
            color="white", fontsize=12, fontweight="bold", zorder=3)
    for child in (node.left, node.right):
        if child is not None:
            draw_nodes(ax, child, positions, highlight)


def draw_tree(ax, bst, title, highlight=None):
    ax.set_title(title)
    ax.axis("off")
    if bst.root is None:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)
        return
    positions = layout(bst.root)
    draw_edges(ax, bst.root, positions)
    draw_nodes(ax, bst.root, positions, highlight)
    ax.margins(0.15)


def example_1_remove_cases():
    """Build the example tree and walk through the three removal cases."""
    print("=" * 60)
    print("Example 1: Insert and Remove")
    print("=" * 60)

    bst = build_tree(EXAMPLE_VALUES)
    print(f"Inserted:  {EXAMPLE_VALUES}")
    print(f"Render:    {bst.render()}")
    print(f"Size:      {bst.size()}")
    print(f"Depth:     {bst.depth()}")
    print(f"Duplicate insert of 5 returns {bst.insert(5)}")

    fig, axes = plt.subplots(2, 2, figsize=(12, 9))
    draw_tree(axes[0, 0], bst, "Initial tree")

    bst.remove(1)
    print(f"\nremove(1) (leaf):         {bst.render()}")
    draw_tree(axes[0, 1], bst, "After remove(1): leaf")

    bst.remove(3)
    print(f"remove(3) (one child):    {bst.render()}")
    draw_tree(axes[1, 0], bst, "After remove(3): one child")

    bst.remove(5)
    print(f"remove(5) (two children): {bst.render()}")
    print(f"Root value is now {bst.root.value} (minimum of the right subtree)")
    draw_tree(axes[1, 1], bst, "After remove(5): two children", highlight=bst.root.value)

    print(f"remove(42) (absent) returns {bst.remove(42)}")

    fig.suptitle("Removal Cases", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_remove_cases.png", dpi=150)
    plt.close(fig)

    return fig, bst


def example_2_depth_growth():
    """Compare depth of sorted vs random insertion orders."""
    print("\n" + "=" * 60)
    print("Example 2: Depth Growth (sorted vs random insertion)")
    print("=" * 60)

    sizes = np.array([n for n in GROWTH_SIZES if n <= MAX_CHAIN_SIZE])
    sorted_depths = []
    random_means = []
    random_stds = []

    for n in sizes:
        sorted_depths.append(build_tree(range(n)).depth())
        depths = [build_tree(np.random.permutation(n)).depth() for _ in range(N_TRIALS)]
        random_means.append(np.mean(depths))
        random_stds.append(np.std(depths))
        print(f"n = {n:4d}  sorted depth = {sorted_depths[-1]:4d}  "
              f"random depth = {random_means[-1]:6.2f} ± {random_stds[-1]:.2f}")

    random_means = np.array(random_means)
    random_stds = np.array(random_stds)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(sizes, sorted_depths, "o-", color=COLORS["sorted"], linewidth=2, label="Sorted insertion")
    axes[0].plot(sizes, random_means, "o-", color=COLORS["random"], linewidth=2, label="Random insertion")
    axes[0].set_xlabel("Number of nodes")
    axes[0].set_ylabel("Depth")
    axes[0].set_title("Depth vs Size")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, random_means, "o-", color=COLORS["random"], linewidth=2, label="Random insertion (mean)")
    axes[1].fill_between(sizes, random_means - random_stds, random_means + random_stds,
                         color=COLORS["random"], alpha=0.2)
    axes[1].plot(sizes, np.log2(sizes), "--", color=COLORS["log2"], linewidth=2, label="log2(n)")
    axes[1].set_xlabel("Number of nodes")
    axes[1].set_ylabel("Depth")
    axes[1].set_title("Random Insertion vs log2(n)")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_depth_growth.png", dpi=150)
    plt.close(fig)

    return fig, (sizes, sorted_depths, random_means)


def example_3_depth_distribution():
    """Distribution of depth over many random trees of the same size."""
    print("\n" + "=" * 60)
    print(f"Example 3: Depth Distribution (n = {DISTRIBUTION_SIZE}, {DISTRIBUTION_TRIALS} trees)")
    print("=" * 60)

    depths = np.array([
        build_tree(np.random.permutation(DISTRIBUTION_SIZE)).depth()
        for _ in range(DISTRIBUTION_TRIALS)
    ])
    optimal = int(np.ceil(np.log2(DISTRIBUTION_SIZE + 1))) - 1

    print(f"Optimal depth:  {optimal}")
    print(f"Mean depth:     {depths.mean():.2f}")
    print(f"Min / max:      {depths.min()} / {depths.max()}")

    fig, ax = plt.subplots(figsize=(8, 6))
    bins = np.arange(depths.min(), depths.max() + 2) - 0.5
    ax.hist(depths, bins=bins, color=COLORS["random"], alpha=0.8, edgecolor="white")
    ax.axvline(optimal, color=COLORS["log2"], linestyle="--", linewidth=2, label=f"Optimal ({optimal})")
    ax.axvline(depths.mean(), color=COLORS["sorted"], linestyle="-", linewidth=2,
               label=f"Mean ({depths.mean():.1f})")
    ax.set_xlabel("Depth")
    ax.set_ylabel("Count")
    ax.set_title("Depth of Randomly Built Trees")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_depth_distribution.png", dpi=150)
    plt.close(fig)

    return fig, depths


def generate_pdf_report(figures):
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        ax.text(0.5, 0.65, "Binary Search Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.5, "Recursive insert, remove, contains, size, depth",
                fontsize=16, ha="center", va="center", transform=ax.transAxes,
                color="gray")
        ax.text(0.5, 0.35, f"Seed: {SEED}", fontsize=11, ha="center", va="center",
                transform=ax.transAxes, color="#888888")
        pdf.savefig(fig)
        plt.close(fig)

        for title, _ in figures:
            img_path = next(VIZ_DIR.glob(f"{title}*.png"), None)
            if img_path is None:
                continue
            page = plt.figure(figsize=(11, 8.5))
            ax = page.add_axes([0.05, 0.05, 0.9, 0.9])
            ax.imshow(plt.imread(img_path))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {REPORT_PATH}")
    return REPORT_PATH


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 18 + "BINARY SEARCH TREE DEMO" + " " * 17 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    figures = []

    fig1, _ = example_1_remove_cases()
    figures.append(("01", fig1))

    fig2, _ = example_2_depth_growth()
    figures.append(("02", fig2))

    fig3, _ = example_3_depth_distribution()
    figures.append(("03", fig3))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
