"""
Dynamic Array Demo -- Doubling growth, amortized append cost, shift cost of
positional insert/remove, and the fail-fast iterator.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from dynamic_array import (
    DynamicArray,
    ConcurrentModificationError,
    INITIAL_CAPACITY,
)

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

N_APPENDS = 2_000
SHIFT_SIZES = [500, 1_000, 2_000, 4_000, 8_000]
SHIFT_REPEATS = 50


def append_trace(n, initial_capacity=INITIAL_CAPACITY):
    """Append n items and record (size, capacity, slots copied) after each append.

    A capacity change during an append means the previous size worth of slots
    was copied into the new backing list.
    """
    arr = DynamicArray(initial_capacity)
    sizes = np.zeros(n, dtype=np.int64)
    capacities = np.zeros(n, dtype=np.int64)
    copies = np.zeros(n, dtype=np.int64)
    for i in range(n):
        cap_before = arr.capacity()
        size_before = arr.size()
        arr.append(i)
        sizes[i] = arr.size()
        capacities[i] = arr.capacity()
        if arr.capacity() != cap_before:
            copies[i] = size_before
    return sizes, capacities, copies


def time_shift(size, position, repeats=SHIFT_REPEATS):
    """Mean seconds for one insert_at + remove_at pair at a relative position."""
    arr = DynamicArray.from_iterable(range(size))
    arr.ensure_capacity(size + 1)
    index = int(position * size)
    start = time.perf_counter()
    for _ in range(repeats):
        arr.insert_at(index, -1)
        arr.remove_at(index)
    return (time.perf_counter() - start) / repeats


# ---------------------------------------------------------------------------
# Example 1: Capacity Growth
# ---------------------------------------------------------------------------
def example_1_capacity_growth():
    """Show the capacity staircase produced by doubling."""
    print("=" * 60)
    print("Example 1: Capacity Growth")
    print("=" * 60)

    sizes, capacities, _ = append_trace(N_APPENDS)
    grow_points = np.flatnonzero(np.diff(capacities)) + 1

    print(f"\n  Appended {N_APPENDS:,} items starting from capacity {INITIAL_CAPACITY}")
    print(f"  Reallocations: {len(grow_points)}")
    for idx in grow_points:
        print(f"    size {sizes[idx]:>5,} -> capacity {capacities[idx]:>5,}")
    print(f"  Final capacity: {capacities[-1]:,} ({capacities[-1] / sizes[-1]:.2f}x size)")

    zero_start = DynamicArray(0)
    print(f"\n  DynamicArray(0).capacity() = {zero_start.capacity()}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    axes[0].step(sizes, capacities, where="post", color=COLORS["blue"], label="capacity")
    axes[0].plot(sizes, sizes, color=COLORS["dark"], linestyle="--", label="size")
    axes[0].scatter(sizes[grow_points], capacities[grow_points], color=COLORS["red"],
                    zorder=3, s=20, label="reallocation")
    axes[0].set_xlabel("Size (elements)")
    axes[0].set_ylabel("Slots")
    axes[0].set_title("Capacity vs Size\nCapacity doubles whenever the array is full",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    load = sizes / capacities
    axes[1].plot(sizes, load, color=COLORS["green"])
    axes[1].axhline(0.5, color=COLORS["orange"], linestyle=":", label="0.5 floor after growth")
    axes[1].set_xlabel("Size (elements)")
    axes[1].set_ylabel("size / capacity")
    axes[1].set_ylim(0, 1.05)
    axes[1].set_title("Load Factor\nNever below one half once past the first block",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_capacity_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/01_capacity_growth.png")


# ---------------------------------------------------------------------------
# Example 2: Amortized Append Cost
# ---------------------------------------------------------------------------
def example_2_amortized_cost():
    """Count slots copied by reallocation and compare with the 2n bound."""
    print("\n" + "=" * 60)
    print("Example 2: Amortized Append Cost")
    print("=" * 60)

    sizes, _, copies = append_trace(N_APPENDS, initial_capacity=1)
    total_copies = np.cumsum(copies)
    per_append = total_copies / sizes

    print(f"\n  Total slots copied for {N_APPENDS:,} appends: {total_copies[-1]:,}")
    print(f"  Copies per append: {per_append[-1]:.3f} (bound: 2.0)")
    assert np.all(total_copies <= 2 * sizes), "Amortized bound violated"
    print("  Cumulative copies stay below 2n at every step.")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    axes[0].plot(sizes, total_copies, color=COLORS["purple"], label="cumulative copies")
    axes[0].plot(sizes, 2 * sizes, color=COLORS["red"], linestyle="--", label="2n")
    axes[0].set_xlabel("Appends")
    axes[0].set_ylabel("Slots copied")
    axes[0].set_title("Cumulative Reallocation Copies\nLinear total work",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, per_append, color=COLORS["blue"])
    axes[1].axhline(2.0, color=COLORS["red"], linestyle="--", label="bound")
    axes[1].set_xlabel("Appends")
    axes[1].set_ylabel("Copies per append")
    axes[1].set_title("Amortized Cost per Append\nO(1) on average",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_amortized_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/02_amortized_cost.png")


# ---------------------------------------------------------------------------
# Example 3: Shift Cost by Position
# ---------------------------------------------------------------------------
def example_3_shift_cost():
    """Time insert_at/remove_at at the front, middle and back."""
    print("\n" + "=" * 60)
    print("Example 3: Shift Cost by Position")
    print("=" * 60)

    positions = {"front": 0.0, "middle": 0.5, "back": 1.0}
    results = {name: [] for name in positions}

    for size in SHIFT_SIZES:
        row = []
        for name, pos in positions.items():
            t = time_shift(size, pos)
            results[name].append(t)
            row.append(f"{name}={t * 1e6:8.1f}us")
        print(f"  n={size:>6,}: " + "  ".join(row))

    fig, ax = plt.subplots(figsize=(8, 5))
    palette = [COLORS["red"], COLORS["orange"], COLORS["green"]]
    for (name, times), color in zip(results.items(), palette):
        ax.plot(SHIFT_SIZES, np.array(times) * 1e6, marker="o", color=color, label=name)
    ax.set_xlabel("Array size")
    ax.set_ylabel("insert_at + remove_at (us)")
    ax.set_title("Shift Cost by Position\nFront shifts every element, back shifts none",
                 fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "03_shift_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/03_shift_cost.png")


# ---------------------------------------------------------------------------
# Example 4: Fail-Fast Iteration
# ---------------------------------------------------------------------------
def example_4_fail_fast():
    """Walk through which operations invalidate a live iterator."""
    print("\n" + "=" * 60)
    print("Example 4: Fail-Fast Iteration")
    print("=" * 60)

    operations = [
        ("append", lambda a: a.append("d"), True),
        ("insert_at", lambda a: a.insert_at(1, "x"), True),
        ("remove_at", lambda a: a.remove_at(0), True),
        ("remove", lambda a: a.remove("b"), True),
        ("clear", lambda a: a.clear(), True),
        ("set", lambda a: a.set(1, "B"), False),
        ("ensure_capacity", lambda a: a.ensure_capacity(100), False),
        ("trim_to_size", lambda a: a.trim_to_size(), False),
    ]

    for name, mutate, expect_failure in operations:
        arr = DynamicArray.from_iterable(["a", "b", "c"])
        it = iter(arr)
        first = next(it)
        mutate(arr)
        try:
            rest = list(it)
            outcome = f"continued -> {[first] + rest}"
            failed = False
        except ConcurrentModificationError:
            outcome = "ConcurrentModificationError on next()"
            failed = True
        assert failed == expect_failure, f"Unexpected iterator behavior after {name}"
        print(f"  {name:<16} {outcome}")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Bundle the visualizations into report.pdf."""
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    titles = {
        "01_capacity_growth.png": "Example 1: Capacity Growth",
        "02_amortized_cost.png": "Example 2: Amortized Append Cost",
        "03_shift_cost.png": "Example 3: Shift Cost by Position",
    }

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Dynamic Array", fontsize=28, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Doubling growth, amortized cost, and fail-fast iteration",
                 fontsize=14, ha="center")
        fig.text(0.5, 0.4, f"INITIAL_CAPACITY = {INITIAL_CAPACITY}    Seed: {SEED}",
                 fontsize=11, ha="center", family="monospace")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Dynamic Array Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_capacity_growth()
    example_2_amortized_cost()
    example_3_shift_cost()
    example_4_fail_fast()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
