"""Physical, numerical and window constants shared by the simulation."""

GRAVITY = 9.81
RESTITUTION_COEFFICIENT = 0.8
DYNAMIC_FRICTION_COEFFICIENT = 0.05

PI = 3.14159265358979323846
EPSILON = 1e-5

MASS_MIN = 250.0
MASS_MAX = 2000.0

ZOOM_MIN = 1.0
ZOOM_MAX = 2.0

CLUSTER_RADIUS = 50.0
CLUSTER_MARGIN = 20.0
PARTICLE_COUNT_MIN = 25
PARTICLE_COUNT_MAX = 500

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_TITLE = "Physics Simulation"