"""Analysis summary report generation for JetPerf.

Produces a plain-text report from a CycleAnalysis: flight condition,
station table, performance summary and any diagnostics.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from jetperf import __app_name__, __version__
from jetperf.cycle.engine import CycleAnalysis
from jetperf.utils.units import pressure_from_si, tsfc_from_si


# --- Plain-text report ---


def generate_text_report(
    analysis: CycleAnalysis, title: str = "", tsfc_unit: str = "mg/(N*s)"
) -> str:
    """Generate a plain-text performance report.

    Args:
        analysis: Result of one engine run.
        title: Optional project name shown under the heading.
        tsfc_unit: Display unit for TSFC.

    Returns:
        Multi-line text report string.
    """
    p = analysis.parameters
    perf = analysis.performance
    lines: list[str] = []
    _hr = "=" * 60

    lines.append(_hr)
    lines.append(f"  {analysis.engine_type.upper()} PERFORMANCE")
    if title:
        lines.append(f"  {title}")
    lines.append(_hr)
    lines.append("")

    lines.append("FLIGHT CONDITION")
    lines.append("-" * 40)
    _add_param(lines, "Mach", p.mach)
    _add_param(lines, "Ambient Temp", p.ambient_temperature, "K")
    _add_param(lines, "Ambient Pressure", pressure_from_si(p.ambient_pressure, "kPa"), "kPa")
    _add_param(lines, "Tt4 limit", p.turbine_inlet_temp, "K")
    _add_param(lines, "Tt7 limit", p.afterburner_exit_temp, "K")
    if analysis.engine_type == "turbofan":
        _add_param(lines, "Bypass Ratio", p.bypass_ratio)
    lines.append("")

    lines.append("STATIONS")
    lines.append("-" * 40)
    lines.append(f"  {'Stn':>4s}  {'Name':<18s} {'Tt [K]':>10s} {'Pt [kPa]':>11s}")
    for station, values in analysis.stations.items():
        lines.append(
            f"  {int(station):>4d}  {station.label:<18s} "
            f"{values.total_temperature:>10.2f} "
            f"{pressure_from_si(values.total_pressure, 'kPa'):>11.3f}"
        )
    lines.append("")

    lines.append("PERFORMANCE")
    lines.append("-" * 40)
    _add_param(lines, "V0", perf.flight_velocity, "m/s")
    _add_param(lines, "V9", perf.exit_velocity, "m/s")
    _add_param(lines, "f_comb", perf.combustor_fuel_air_ratio)
    _add_param(lines, "f_ab", perf.afterburner_fuel_air_ratio)
    _add_param(lines, "f_total", perf.overall_fuel_air_ratio)
    _add_param(lines, "Specific Thrust", perf.specific_thrust, "N/(kg/s)")
    _add_param(lines, "TSFC", tsfc_from_si(perf.tsfc, tsfc_unit), tsfc_unit)
    lines.append("")

    if perf.diagnostics:
        lines.append("DIAGNOSTICS")
        lines.append("-" * 40)
        for d in perf.diagnostics:
            lines.append(f"  ! {d.value.replace('_', ' ')}")
        lines.append("")

    lines.append(_hr)
    lines.append(f"  Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(f"  {__app_name__} v{__version__}")
    lines.append(_hr)

    return "\n".join(lines)


def _add_param(lines: list[str], label: str, value: Any, unit: str = "") -> None:
    """Add a labelled value line."""
    unit_str = f" {unit}" if unit else ""
    if isinstance(value, float):
        lines.append(f"  {label:<20s} {value:>12.4f}{unit_str}")
    else:
        lines.append(f"  {label:<20s} {value!s:>12}{unit_str}")
