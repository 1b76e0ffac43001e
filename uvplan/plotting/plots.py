from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # headless-safe for servers/CI
import matplotlib.pyplot as plt  # noqa: E402

from uvplan.calculation.sweep import ThrowSweep  # noqa: E402
from uvplan.compliance.safety import SAFETY_THRESHOLDS, SafetyLevel  # noqa: E402


_TIER_COLORS = {
    SafetyLevel.CAUTION: "#F5A623",
    SafetyLevel.WARNING: "#F97316",
    SafetyLevel.DANGER: "#E74C3C",
}


def plot_irradiance_falloff(sweep: ThrowSweep, outpath: Path, log_scale: bool = True) -> Path:
    """
    Save irradiance vs throw distance with the safety thresholds drawn in,
    plus beam diameter on a secondary axis.
    """
    outpath = Path(outpath)
    outpath.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure()
    ax = fig.add_subplot(111)
    ax.plot(sweep.throw_m, sweep.irradiance_mWm2, color="#6B21A8", label="Irradiance")
    for level, threshold in SAFETY_THRESHOLDS.items():
        ax.axhline(threshold, linestyle="--", linewidth=0.8, color=_TIER_COLORS[level], label=level.value.upper())
    if log_scale:
        ax.set_yscale("log")
    ax.set_xlabel("Throw distance (m)")
    ax.set_ylabel("Irradiance (mW/m²)")
    ax.set_title(f"{sweep.fixture_model}: irradiance falloff")

    ax2 = ax.twinx()
    ax2.plot(sweep.throw_m, sweep.beam_diameter_h_m, color="#0EA5E9", linewidth=1.0, label="Beam Ø (H)")
    ax2.set_ylabel("Beam diameter (m)")

    lines, labels = ax.get_legend_handles_labels()
    lines2, labels2 = ax2.get_legend_handles_labels()
    ax.legend(lines + lines2, labels + labels2, loc="best", fontsize=8)
    fig.tight_layout()
    fig.savefig(outpath, dpi=200)
    plt.close(fig)
    return outpath


def default_plot_path(outdir: Path, fixture_model: str, stem: Optional[str] = None) -> Path:
    name = stem or fixture_model.replace("/", "_")
    return Path(outdir) / f"{name}_falloff.png"
