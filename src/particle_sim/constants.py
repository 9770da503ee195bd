# MIT License (see LICENSE)
"""
Numeric constants used by the particle system and the particle life model.

Distances are in simulation units (the reference scene is a 500×500 box),
times in seconds.
"""
from __future__ import annotations

# Squared pair distance below which two particles count as coincident.
# Their pair contributes no velocity change, which keeps the normal
# direction (delta / |delta|) away from 0/0.
DEGENERATE_SQR_DISTANCE: float = 1e-4

# Particle life distance bands. Inside D_0 particles repel, between D_0 and
# D_1 the attraction grows linearly, and it fades back to zero at D_MAX.
D_0: float = 30.0
D_1: float = 60.0
D_MAX: float = 120.0

# Reference particle life scene.
DEFAULT_KINDS: int = 6
DEFAULT_PER_KIND: int = 30
DEFAULT_EXTENT: float = 500.0
DEFAULT_DRAG: float = 0.01
DEFAULT_RANDOMNESS: float = 1.0
