from __future__ import annotations

import os

from hypothesis import HealthCheck, settings


settings.register_profile("default", max_examples=200)
settings.register_profile(
    "ci",
    max_examples=1000,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
