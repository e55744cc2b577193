"""Physical and numerical constants used throughout JetPerf.

All values in SI units unless otherwise noted.
"""

import numpy as np

# Numerical guards
MACHINE_EPSILON = float(np.finfo(float).eps)  # substituted for non-positive denominators
SPECIFIC_THRUST_FLOOR = 1e-9  # N/(kg/s) — lower bound used in the TSFC division

# Air / combustion gas (typical values)
GAMMA_AIR = 1.4
GAMMA_GAS = 1.333
CP_AIR = 1005.0  # J/(kg·K)
CP_GAS = 1148.0  # J/(kg·K)
R_AIR = 287.0  # J/(kg·K)
Q_JET_A = 43.1e6  # J/kg — lower heating value of kerosene
