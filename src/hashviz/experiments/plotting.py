"""Shared plotting utilities for experiments."""

import matplotlib
# Use Agg backend (non-interactive, PDF-compatible)
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import platform
import subprocess
from pathlib import Path
from typing import Optional


def get_git_commit() -> Optional[str]:
    """Get current git commit hash by walking up to find .git directory.

    Returns:
        Git commit hash string, or None if not found
    """
    current = Path(__file__).resolve()
    for _ in range(8):
        if (current / ".git").exists():
            try:
                result = subprocess.run(
                    ["git", "rev-parse", "HEAD"],
                    capture_output=True,
                    text=True,
                    check=True,
                    cwd=current,
                )
                return result.stdout.strip()
            except (subprocess.CalledProcessError, FileNotFoundError):
                return None
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def get_environment_info() -> dict:
    """Python, NumPy and matplotlib versions."""
    import numpy as np

    return {
        "python_version": platform.python_version(),
        "numpy_version": np.__version__,
        "matplotlib_version": matplotlib.__version__,
    }


def save_pdf(fig, path: Path) -> None:
    """Save figure as PDF with tight layout."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)


def add_footer(fig, experiment_id: str, extra: Optional[dict] = None) -> None:
    """Add version footer to figure.

    Args:
        fig: Matplotlib figure
        experiment_id: Experiment identifier (e.g., "exp01")
        extra: Optional dictionary of additional info to include
    """
    env = get_environment_info()
    footer_parts = [
        experiment_id,
        f"Python {env['python_version']}",
        f"NumPy {env['numpy_version']}",
    ]

    git_commit = get_git_commit()
    if git_commit:
        footer_parts.append(f"Git: {git_commit[:8]}")

    if extra:
        for k, v in extra.items():
            footer_parts.append(f"{k}: {v}")

    fig.text(0.5, 0.01, " | ".join(footer_parts), ha="center", va="bottom",
             fontsize=8, alpha=0.7)


def plot_line_with_ci(
    ax, x, mean, ci_low, ci_high, label: str,
    linestyle: str = "-", color: Optional[str] = None
) -> None:
    """Plot line with confidence interval band."""
    ax.plot(x, mean, label=label, color=color, linestyle=linestyle, linewidth=2, marker="o")
    ax.fill_between(x, ci_low, ci_high, alpha=0.2, color=color)
