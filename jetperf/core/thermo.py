"""Thermodynamic relations shared by the jet engine cycle models.

Provides the guarded power and division primitives, the isentropic
compressible-flow relations for an ideal gas, and the per-component
station transitions (compression, combustion energy balance, turbine
work balance, stream mixing, nozzle expansion).

All functions operate on stagnation (total) properties in SI units and
are pure closed-form arithmetic. Degenerate inputs never raise: a
non-positive power base degrades to zero, and a non-positive divisor
(efficiency, temperature, heat capacity, fuel-air denominator) is
replaced with machine epsilon. The fuel-air clamp is reported through
the returned ``clamped`` flag.
"""

from __future__ import annotations

import math

from jetperf.utils.constants import MACHINE_EPSILON


# --- Guarded primitives ---


def safe_power(base: float, exponent: float) -> float:
    """``base ** exponent`` for ``base > 0``, otherwise 0."""
    if base <= 0.0:
        return 0.0
    return base**exponent


def guarded_denominator(value: float) -> tuple[float, bool]:
    """Replace a non-positive denominator with machine epsilon.

    Returns:
        (denominator, clamped) where *clamped* is True if the
        substitution was made.
    """
    if value <= 0.0:
        return MACHINE_EPSILON, True
    return value, False


# --- Isentropic flow ---


def speed_of_sound(gamma: float, R: float, T: float) -> float:
    """Local speed of sound a = sqrt(γ·R·T) [m/s]."""
    return math.sqrt(max(gamma * R * T, 0.0))


def flight_velocity(mach: float, gamma: float, R: float, T: float) -> float:
    """Flight velocity V0 = M·a [m/s]."""
    return mach * speed_of_sound(gamma, R, T)


def stagnation_temperature(T: float, mach: float, gamma: float) -> float:
    """Tt = T·(1 + (γ-1)/2·M²)."""
    return T * (1.0 + 0.5 * (gamma - 1.0) * mach**2)


def stagnation_pressure(P: float, T: float, Tt: float, gamma: float) -> float:
    """Pt = P·(Tt/T)^(γ/(γ-1))."""
    T_static, _ = guarded_denominator(T)
    return P * safe_power(Tt / T_static, gamma / (gamma - 1.0))


# --- Component transitions ---


def compression_exit_temperature(
    T_in: float, pressure_ratio: float, gamma: float, efficiency: float
) -> float:
    """Exit total temperature of a compressor or fan.

    The isentropic temperature rise is inflated by 1/η:
        Tt_out,s = Tt_in · π^((γ-1)/γ)
        Tt_out   = Tt_in + (Tt_out,s - Tt_in) / η

    A non-positive η is replaced with machine epsilon.
    """
    T_ideal = T_in * safe_power(pressure_ratio, (gamma - 1.0) / gamma)
    eta, _ = guarded_denominator(efficiency)
    return T_in + (T_ideal - T_in) / eta


def fuel_air_ratio(
    cp_in: float,
    T_in: float,
    cp_out: float,
    T_out: float,
    efficiency: float,
    heating_value: float,
) -> tuple[float, bool]:
    """Fuel-air ratio from a steady-flow burner energy balance.

    Fuel energy release minus the enthalpy carried by the fuel itself
    equals the enthalpy rise of the stream:

        f = (cp_out·Tt_out - cp_in·Tt_in) / (η·Q - cp_out·Tt_out)

    Returns:
        (f, clamped). *clamped* is True when the requested exit
        temperature exceeds what the fuel can deliver and the
        denominator was replaced with machine epsilon.
    """
    denom, clamped = guarded_denominator(efficiency * heating_value - cp_out * T_out)
    return (cp_out * T_out - cp_in * T_in) / denom, clamped


def turbine_expansion(
    T_in: float,
    P_in: float,
    specific_work: float,
    mass_ratio: float,
    cp: float,
    gamma: float,
    efficiency: float,
) -> tuple[float, float]:
    """Turbine exit state from a shaft work balance.

    The work absorbed by the driven components (per unit reference
    air flow) is supplied by ``mass_ratio`` units of hot gas:

        Tt_out   = Tt_in - w / (m·cp)
        Tt_out,s = Tt_in - (Tt_in - Tt_out) / η
        Pt_out   = Pt_in · (Tt_out,s / Tt_in)^(γ/(γ-1))

    Non-positive divisors (m·cp, η, Tt_in) are replaced with machine
    epsilon.

    Returns:
        (Tt_out, Pt_out)
    """
    heat_capacity, _ = guarded_denominator(mass_ratio * cp)
    eta, _ = guarded_denominator(efficiency)
    T_ref, _ = guarded_denominator(T_in)
    T_out = T_in - specific_work / heat_capacity
    T_ideal = T_in - (T_in - T_out) / eta
    P_out = P_in * safe_power(T_ideal / T_ref, gamma / (gamma - 1.0))
    return T_out, P_out


def turbine_specific_work(T_in: float, T_out: float, mass_ratio: float, cp: float) -> float:
    """Work delivered by the turbine per unit reference air flow [J/kg]."""
    return mass_ratio * cp * (T_in - T_out)


def mixed_temperature(
    m_a: float, cp_a: float, T_a: float, m_b: float, cp_b: float, T_b: float
) -> float:
    """Adiabatic mixing of two streams by enthalpy balance.

    Tt_mix = (m_a·cp_a·T_a + m_b·cp_b·T_b) / (m_a·cp_a + m_b·cp_b)

    The result is a heat-capacity-weighted mean, so it always lies
    between T_a and T_b for non-negative flows.
    """
    heat_capacity = m_a * cp_a + m_b * cp_b
    if heat_capacity <= 0.0:
        return T_b
    return (m_a * cp_a * T_a + m_b * cp_b * T_b) / heat_capacity


def nozzle_expansion(
    T_t: float,
    P_t: float,
    ambient_pressure: float,
    cp: float,
    gamma: float,
    efficiency: float,
) -> tuple[float, float, float]:
    """Expand the nozzle flow to ambient pressure.

    The nozzle total pressure is never taken below ambient. The static
    exit temperature is interpolated by η toward the isentropic value
    and the exit velocity follows from the enthalpy drop.

    Returns:
        (Pt_9, T_9, V_9) — nozzle total pressure, static exit
        temperature, exit velocity.
    """
    P_t9 = max(P_t, ambient_pressure)
    T_ideal = T_t * safe_power(ambient_pressure / P_t9, (gamma - 1.0) / gamma)
    T_exit = T_t - efficiency * (T_t - T_ideal)
    V_exit = math.sqrt(max(2.0 * cp * (T_t - T_exit), 0.0))
    return P_t9, T_exit, V_exit
