"""Physical constants and numerical floors used throughout JetCycle.

All values in SI units unless otherwise noted.
"""

import sys

# Air (calorically perfect)
GAMMA_AIR = 1.4
CP_AIR = 1005.0  # J/(kg·K)
R_AIR = 287.0  # J/(kg·K)

# Combustion products
GAMMA_GAS = 1.333
CP_GAS = 1148.0  # J/(kg·K)

# Jet-A lower heating value
Q_HV_JET_A = 43.1e6  # J/kg

# Numerical floors
DENOMINATOR_FLOOR = sys.float_info.epsilon  # replaces non-positive denominators
THRUST_FLOOR = 1.0e-9  # N·s/kg, minimum specific thrust in TSFC

# Conversion factors
PA_TO_KPA = 1.0e-3
TSFC_TO_MG = 1.0e6  # kg/(N·s) → mg/(N·s)
