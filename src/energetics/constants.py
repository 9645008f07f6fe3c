# Provider efficiencies, as the fraction of stored fuel energy delivered as
# usable output. Values above 1 are treated as 1.

# Thermal-to-usable conversion loss in a fission reactor.
REACTOR_EFFICIENCY = 0.33

# Mechanical losses in an internal combustion engine.
INTERNAL_COMBUSTION_EFFICIENCY = 0.25

# Ideal generator: no losses.
OMNI_EFFICIENCY = 1.0

# Clean conversion from renewable storage.
GREEN_EFFICIENCY = 0.9

# Perfect conversion, reported in BTU.
BRITISH_EFFICIENCY = 1.0

# Efficiency lost by an internal combustion engine for every ``decay`` runs.
DECAY_STEP = 0.01

# Relative tolerance used when comparing energy values.
DEFAULT_RELATIVE_TOLERANCE = 1e-6

# Absolute tolerance (in joules) for comparing values close to zero.
DEFAULT_ABSOLUTE_TOLERANCE = 1e-12

# Separator between component names in the name of a mixed fuel.
MIX_NAME_SEPARATOR = '+'
